import collections
import logging

from .amender import ParameterAmender, W3C_RULES, JSON_WIRE_RULES
from .atoms import PackageAtomRepository
from .commands import command_label
from .dialects import w3c_commands, json_wire_commands
from .scripts import ScriptWrapper

logger = logging.getLogger(__name__)

HttpCommand = collections.namedtuple('HttpCommand',
                                     ('method', 'path', 'parameters'))


class Codec(object):

    def __init__(self, registry, amender):
        """
        :param registry: The command table of the dialect.
        :type registry: :class:`wirecodec.registry.CommandRegistry`
        :param amender: The object which rewrites command parameters
                        for the dialect.
        :type amender: :class:`wirecodec.amender.ParameterAmender`
        """
        self.registry = registry
        self.amender = amender

    def translate(self, name, parameters=None):
        """
        Translates a command.

        The transport is resolved by following aliases, but the
        parameters are amended according to ``name`` itself.

        :param name: The command.
        :param parameters: The parameters of the command.
        :type parameters: :class:`dict`
        :returns: The template of the request to make, and the
                  parameters to send.
        :rtype: :class:`tuple`
        :raises wirecodec.errors.UnsupportedCommandError: When the
            command is not part of the dialect.
        :raises wirecodec.errors.ScriptResourceUnavailableError: When
            an atom needed by the command cannot be loaded.
        """
        if parameters is None:
            parameters = {}

        template = self.registry.resolve_transport(name)
        amended = self.amender.amend(name, parameters)
        logger.debug("translated %s to %s", command_label(name), template)
        return template, amended

    def encode(self, name, parameters=None, session_id=None):
        """
        Like :meth:`translate` but also expands the path of the
        template. The placeholders are filled from the amended
        parameters, except for ``sessionId`` which is ``session_id``.

        :rtype: :class:`HttpCommand`
        :raises ValueError: When a value is missing for a placeholder.
        """
        template, amended = self.translate(name, parameters)
        values = dict(amended)
        if session_id is not None:
            values["sessionId"] = session_id
        return HttpCommand(template.method, template.expand(values), amended)


def w3c_codec(atoms=None):
    """
    :param atoms: The repository of atoms. Defaults to the atoms
                  shipped with this package.
    :type atoms: :class:`wirecodec.atoms.AtomRepository`
    :returns: A codec for the W3C dialect.
    """
    if atoms is None:
        atoms = PackageAtomRepository()

    return Codec(w3c_commands().build(),
                 ParameterAmender(ScriptWrapper(atoms), W3C_RULES))


def json_wire_codec(atoms=None):
    # No JSON wire rule uses atoms, so ``atoms`` may stay ``None``.
    return Codec(json_wire_commands().build(),
                 ParameterAmender(ScriptWrapper(atoms), JSON_WIRE_RULES))
