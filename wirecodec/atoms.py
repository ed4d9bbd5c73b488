"""
Sources of atoms. An atom is a named, pre-written JavaScript function
which the codec executes in the browser to implement an operation the
W3C dialect lacks. An atom's source is the text of a function literal.
"""
import logging
import os
import pkgutil

from .errors import AtomNotFoundError

logger = logging.getLogger(__name__)

GET_ATTRIBUTE = "getAttribute.js"
IS_DISPLAYED = "isDisplayed.js"


class AtomRepository(object):

    def get_atom_source(self, atom_name):
        """
        :param atom_name: The name of the atom.
        :type atom_name: :class:`str`
        :returns: The source of the atom.
        :rtype: :class:`str`
        :raises AtomNotFoundError: When there is no such atom.
        """
        raise NotImplementedError()


def _check_name(atom_name):
    if not atom_name or "/" in atom_name or os.sep in atom_name or \
       atom_name.startswith("."):
        raise AtomNotFoundError("invalid atom name: {0!r}".format(atom_name))


class PackageAtomRepository(AtomRepository):
    """
    Reads the atoms shipped with this package.
    """

    def __init__(self, package=__package__, directory="js"):
        self.package = package
        self.directory = directory

    def get_atom_source(self, atom_name):
        _check_name(atom_name)
        resource = self.directory + "/" + atom_name
        try:
            data = pkgutil.get_data(self.package, resource)
        except OSError:
            raise AtomNotFoundError("no such atom: " + atom_name)

        if data is None:
            raise AtomNotFoundError("no such atom: " + atom_name)

        try:
            source = data.decode("utf8")
        except UnicodeDecodeError as ex:
            raise AtomNotFoundError("cannot decode atom {0}: {1}"
                                    .format(atom_name, ex))

        logger.debug("loaded atom %s from package %s", atom_name,
                     self.package)
        return source


class PathAtomRepository(AtomRepository):
    """
    Reads atoms from a directory.
    """

    def __init__(self, path):
        self.path = path

    def get_atom_source(self, atom_name):
        _check_name(atom_name)
        path = os.path.join(self.path, atom_name)
        if not os.path.isfile(path):
            raise AtomNotFoundError("no such atom: " + path)

        try:
            with open(path, encoding="utf8") as f:
                source = f.read()
        except UnicodeDecodeError as ex:
            raise AtomNotFoundError("cannot decode atom {0}: {1}"
                                    .format(path, ex))

        logger.debug("loaded atom %s from %s", atom_name, path)
        return source


class MappingAtomRepository(AtomRepository):
    """
    Serves atoms from a mapping of names to sources. When a ``fallback``
    repository is given, names missing from the mapping are looked up
    there.
    """

    def __init__(self, sources, fallback=None):
        self.sources = dict(sources)
        self.fallback = fallback

    def get_atom_source(self, atom_name):
        try:
            return self.sources[atom_name]
        except KeyError:
            if self.fallback is None:
                raise AtomNotFoundError("no such atom: " + atom_name)

        return self.fallback.get_atom_source(atom_name)
