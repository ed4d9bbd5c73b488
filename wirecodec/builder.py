import logging

logger = logging.getLogger(__name__)


class Builder(object):

    def __init__(self, config_path, options):
        """
        Initializes a configuration.

        :param config_path: The configuration file to use. Must be a valid
                            Python file, which sets ``CONFIG`` to a
                            :class:`wirecodec.config.Config` object. It
                            may also set ``LOG_LEVEL`` to the level to
                            give to the ``wirecodec`` logger.
        :type config_path: :class:`str`
        :param options: A dictionary of key/value pairs with which the
                        global variable ``builder_args`` will be initialized
                        before the configuration is read.
        """
        self.config_path = config_path

        self.local_conf = {
            'builder_args': options
        }
        with open(self.config_path) as f:
            exec(compile(f.read(), self.config_path, 'exec'),
                 self.local_conf)

        self.config = self.local_conf.get("CONFIG")
        if self.config is None:
            raise ValueError("the configuration file does not set CONFIG: " +
                             self.config_path)

        log_level = self.local_conf.get("LOG_LEVEL", None)
        if log_level is not None:
            logging.getLogger(__package__).setLevel(log_level)

        logger.debug("%s (from %s)", self.config, self.config_path)

    def __getattr__(self, name):
        if name in self.local_conf:
            return self.local_conf[name]

        raise AttributeError("{!r} object has no attribute {!r}"
                             .format(self.__class__, name))

    def get_codec(self):
        """
        Creates a codec on the basis of the configuration file upon
        which this object was created.

        :returns: A codec.
        :rtype: :class:`wirecodec.codec.Codec`
        """
        return self.config.make_codec()
