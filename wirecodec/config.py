from . import atoms as _atoms
from .codec import w3c_codec, json_wire_codec
from .dialects import W3C, JSON_WIRE

configs = {}

_DIALECT_ABBRS = {
    "OSS": JSON_WIRE,
    "JWP": JSON_WIRE,
    "JSON": JSON_WIRE,
}

_CODEC_FACTORIES = {
    W3C: w3c_codec,
    JSON_WIRE: json_wire_codec,
}


def _normalize_dialect(dialect):
    dialect = dialect.upper()
    # Resolve abbreviation if it exists...
    return _DIALECT_ABBRS.get(dialect, dialect)


def get_config(dialect):
    dialect = _normalize_dialect(dialect)
    if dialect not in configs:
        raise ValueError("no configuration for dialect: " + dialect)
    return configs[dialect]


def forget():
    # pylint: disable=global-statement
    global configs
    configs = {}


class Config(object):

    def __init__(self, dialect, atom_path=None, atoms=None):
        """
        Records the configuration of a codec. A configuration created
        for a dialect replaces any configuration previously created for
        the same dialect.

        :param dialect: The dialect the codec targets: ``W3C`` or
                        ``JSONWIRE`` (``OSS``, ``JWP`` and ``JSON`` are
                        accepted as abbreviations of the latter).
        :type dialect: :class:`str`
        :param atom_path: A directory from which to read atoms, instead
                          of using the atoms shipped with the package.
        :type atom_path: :class:`str`
        :param atoms: Atom sources keyed by atom name. These take
                      precedence over the atoms found otherwise.
        :type atoms: :class:`dict`
        :raises ValueError: When the dialect is unknown.
        """
        dialect = _normalize_dialect(dialect)
        if dialect not in _CODEC_FACTORIES:
            raise ValueError("unknown dialect: " + dialect)

        self.dialect = dialect
        self.atom_path = atom_path
        self.atoms = dict(atoms) if atoms is not None else {}

        configs[dialect] = self

    def make_atom_repository(self):
        repository = _atoms.PathAtomRepository(self.atom_path) \
            if self.atom_path is not None else \
            _atoms.PackageAtomRepository()

        if self.atoms:
            repository = _atoms.MappingAtomRepository(self.atoms, repository)

        return repository

    def make_codec(self):
        return _CODEC_FACTORIES[self.dialect](self.make_atom_repository())

    def __str__(self):
        return "Codec configured for " + \
            ", ".join((self.dialect,
                       self.atom_path if self.atom_path is not None
                       else "packaged atoms"))
