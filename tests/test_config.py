from unittest import TestCase

from wirecodec import Config, get_config, forget
from wirecodec.atoms import MappingAtomRepository, PathAtomRepository, \
    PackageAtomRepository
from wirecodec.commands import CommandName as C


class ConfigTestCase(TestCase):

    def setUp(self):
        forget()

    def test_Config_records(self):
        created = Config("W3C")
        obtained = get_config("w3c")
        self.assertEqual(created, obtained)

    def test_Config_replaces(self):
        Config("W3C")
        second = Config("W3C", atom_path="/tmp")
        self.assertIs(get_config("W3C"), second)

    def test_Config_accepts_dialect_abbreviations(self):
        for abbr in ("oss", "jwp", "json"):
            created = Config(abbr)
            self.assertEqual(created.dialect, "JSONWIRE")
            self.assertIs(get_config("JSONWIRE"), created)

    def test_Config_rejects_unknown_dialect(self):
        with self.assertRaisesRegex(ValueError, "^unknown dialect: BOGUS$"):
            Config("bogus")

    def test_atom_repository(self):
        self.assertIsInstance(Config("W3C").make_atom_repository(),
                              PackageAtomRepository)
        self.assertIsInstance(
            Config("W3C", atom_path="/tmp").make_atom_repository(),
            PathAtomRepository)

        repository = Config("W3C", atom_path="/tmp",
                            atoms={"a.js": "function () {}"}) \
            .make_atom_repository()
        self.assertIsInstance(repository, MappingAtomRepository)
        self.assertIsInstance(repository.fallback, PathAtomRepository)

    def test_make_codec(self):
        codec = Config("W3C", atoms={
            "isDisplayed.js": "function (e) { return true; }"
        }).make_codec()
        (_, params) = codec.translate(C.IS_ELEMENT_DISPLAYED, {"id": "e1"})
        self.assertEqual(
            params["script"],
            "return (function (e) { return true; }).apply(null, arguments);")

    def test_make_json_wire_codec(self):
        codec = Config("OSS").make_codec()
        self.assertEqual(
            codec.registry.resolve_transport(C.GET_PAGE_SOURCE).path,
            "/session/:sessionId/source")

    def test_str(self):
        self.assertEqual(str(Config("W3C")),
                         "Codec configured for W3C, packaged atoms")


class GetConfigTestCase(TestCase):

    def setUp(self):
        forget()

    def test_fails_when_not_configured(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no configuration for dialect: W3C$"):
            get_config("W3C")

    def test_forget(self):
        Config("W3C")
        forget()
        with self.assertRaises(ValueError):
            get_config("W3C")
