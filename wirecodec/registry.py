import collections
import logging
import re
import types

from .commands import as_command, command_label
from .errors import ConfigurationError, UnsupportedCommandError

logger = logging.getLogger(__name__)

GET = "GET"
POST = "POST"
DELETE = "DELETE"

METHODS = (GET, POST, DELETE)

_PLACEHOLDER_RE = re.compile(r":(\w+)")


class CommandTemplate(collections.namedtuple(
        'CommandTemplate',
        ('method', 'path'))):

    @property
    def placeholders(self):
        return tuple(_PLACEHOLDER_RE.findall(self.path))

    def expand(self, values):
        """
        Substitutes the placeholders of the path.

        :param values: The values to use for the placeholders, keyed by
                       placeholder name (without the colon).
        :type values: :class:`dict`
        :returns: The path with all placeholders substituted.
        :rtype: :class:`str`
        :raises ValueError: When ``values`` lacks a value for one of the
                            placeholders.
        """
        def replace(match):
            name = match.group(1)
            value = values.get(name)
            if value is None:
                raise ValueError("no value for path parameter: " + name)
            return str(value)

        return _PLACEHOLDER_RE.sub(replace, self.path)

    def __str__(self):
        return self.method + " " + self.path


def get(path):
    return CommandTemplate(GET, path)


def post(path):
    return CommandTemplate(POST, path)


def delete(path):
    return CommandTemplate(DELETE, path)


class RegistryBuilder(object):
    """
    Accumulates command definitions and aliases. Once all commands have
    been recorded, :meth:`build` produces the read-only
    :class:`CommandRegistry` used by a codec.

    Aliases are validated as they are recorded, so a command must be
    defined before anything can alias it.
    """

    def __init__(self):
        self._templates = collections.OrderedDict()
        self._aliases = collections.OrderedDict()

    def _check_unused(self, command, label):
        if command in self._templates:
            raise ConfigurationError("command already defined: " + label)

        if command in self._aliases:
            raise ConfigurationError("command already aliased: " + label)

    def define_command(self, name, template):
        command = _require_command(name)
        label = command_label(name)
        self._check_unused(command, label)

        if template.method not in METHODS:
            raise ConfigurationError(
                "unknown HTTP method for {0}: {1}".format(label,
                                                          template.method))

        logger.debug("defining %s as %s", label, template)
        self._templates[command] = template
        return self

    def alias(self, name, target):
        command = _require_command(name)
        label = command_label(name)
        target_command = _require_command(target)
        self._check_unused(command, label)

        if target_command not in self._templates:
            raise ConfigurationError(
                "cannot alias {0} to {1}: the target is not defined"
                .format(label, command_label(target)))

        logger.debug("aliasing %s to %s", label, command_label(target))
        self._aliases[command] = target_command
        return self

    def build(self):
        return CommandRegistry(self._templates, self._aliases)


class CommandRegistry(object):

    def __init__(self, templates, aliases):
        self._templates = types.MappingProxyType(dict(templates))
        self._aliases = types.MappingProxyType(dict(aliases))

    @property
    def templates(self):
        return self._templates

    @property
    def aliases(self):
        return self._aliases

    def names(self):
        return frozenset(self._templates) | frozenset(self._aliases)

    def is_supported(self, name):
        command = as_command(name)
        return command is not None and \
            (command in self._templates or command in self._aliases)

    def resolve_transport(self, name):
        """
        :param name: The command to resolve.
        :returns: The template of the command, or of the command it is an
                  alias of.
        :rtype: :class:`CommandTemplate`
        :raises UnsupportedCommandError: When the command is neither
                                         defined nor aliased.
        """
        command = as_command(name)
        if command is None:
            raise UnsupportedCommandError(command_label(name))

        command = self._aliases.get(command, command)
        try:
            return self._templates[command]
        except KeyError:
            raise UnsupportedCommandError(command_label(name))


def _require_command(name):
    command = as_command(name)
    if command is None:
        raise ConfigurationError("unknown command: " + command_label(name))
    return command
