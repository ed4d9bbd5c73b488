import collections
import logging

from selenium.webdriver.remote.webelement import WebElement

from .errors import AtomNotFoundError, ScriptResourceUnavailableError

logger = logging.getLogger(__name__)

ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"

ATOM_SHIM = "return ({0}).apply(null, arguments);"


class ScriptCommand(collections.namedtuple(
        'ScriptCommand',
        ('script', 'args'))):

    def as_parameters(self):
        return {"script": self.script, "args": list(self.args)}


def element_reference(element_id):
    """
    :param element_id: The opaque id of an element.
    :returns: The W3C representation of a reference to the element.
    :rtype: :class:`dict`
    """
    return {ELEMENT_KEY: element_id}


def to_wire(value):
    """
    Converts a script argument to a value that can be sent over the
    wire. ``WebElement`` objects become element references. Lists,
    tuples and dictionaries are converted recursively. Everything else
    is returned as-is.
    """
    if isinstance(value, WebElement):
        return element_reference(value.id)

    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]

    if isinstance(value, dict):
        return {key: to_wire(item) for (key, item) in value.items()}

    return value


class ScriptWrapper(object):

    def __init__(self, atoms):
        """
        :param atoms: The repository from which to get the atoms.
        :type atoms: :class:`wirecodec.atoms.AtomRepository`
        """
        self.atoms = atoms

    def wrap(self, script, *args):
        """
        Builds the parameters of an "execute script" command.

        :param script: The body of the script. Double quotes are
                       escaped, and only double quotes.
        :type script: :class:`str`
        :param args: The arguments to pass to the script.
        :rtype: :class:`ScriptCommand`
        """
        script = script.replace('"', '\\"')
        return ScriptCommand(script, [to_wire(arg) for arg in args])

    def wrap_atom(self, atom_name, *args):
        """
        Like :meth:`wrap` but the script calls the atom named
        ``atom_name`` with the arguments.

        :raises ScriptResourceUnavailableError: When the atom cannot be
                                                obtained.
        """
        try:
            source = self.atoms.get_atom_source(atom_name)
        except (AtomNotFoundError, OSError) as ex:
            logger.warning("cannot load atom %s: %s", atom_name, ex)
            raise ScriptResourceUnavailableError(atom_name) from ex

        return self.wrap(ATOM_SHIM.format(source), *args)
