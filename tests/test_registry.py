from unittest import TestCase

from wirecodec.commands import CommandName as C
from wirecodec.errors import ConfigurationError, UnsupportedCommandError
from wirecodec.registry import RegistryBuilder, CommandTemplate, get, post


class RegistryBuilderTestCase(TestCase):

    def setUp(self):
        self.builder = RegistryBuilder()
        self.builder.define_command(C.EXECUTE_SCRIPT,
                                    post("/session/:sessionId/execute/sync"))

    def test_duplicate_definition(self):
        with self.assertRaisesRegex(ConfigurationError,
                                    "^command already defined: "
                                    "executeScript$"):
            self.builder.define_command(C.EXECUTE_SCRIPT, post("/x"))

    def test_define_aliased(self):
        self.builder.alias(C.SUBMIT_ELEMENT, C.EXECUTE_SCRIPT)
        with self.assertRaisesRegex(ConfigurationError,
                                    "^command already aliased: "
                                    "submitElement$"):
            self.builder.define_command(C.SUBMIT_ELEMENT, post("/x"))

    def test_alias_to_undefined(self):
        with self.assertRaisesRegex(ConfigurationError,
                                    "the target is not defined"):
            self.builder.alias(C.GET_ELEMENT_SIZE, C.GET_ELEMENT_RECT)

    def test_alias_to_alias(self):
        self.builder.alias(C.SUBMIT_ELEMENT, C.EXECUTE_SCRIPT)
        with self.assertRaises(ConfigurationError):
            self.builder.alias(C.IS_ELEMENT_DISPLAYED, C.SUBMIT_ELEMENT)

    def test_alias_defined(self):
        with self.assertRaises(ConfigurationError):
            self.builder.alias(C.EXECUTE_SCRIPT, C.EXECUTE_SCRIPT)

    def test_unknown_command(self):
        with self.assertRaisesRegex(ConfigurationError,
                                    "^unknown command: bogus$"):
            self.builder.define_command("bogus", get("/bogus"))

    def test_unknown_method(self):
        with self.assertRaises(ConfigurationError):
            self.builder.define_command(C.STATUS,
                                        CommandTemplate("PATCH", "/status"))

    def test_accepts_strings(self):
        self.builder.alias("submitElement", "executeScript")
        registry = self.builder.build()
        self.assertEqual(registry.resolve_transport(C.SUBMIT_ELEMENT),
                         post("/session/:sessionId/execute/sync"))


class CommandRegistryTestCase(TestCase):

    def setUp(self):
        self.registry = RegistryBuilder() \
            .define_command(C.EXECUTE_SCRIPT,
                            post("/session/:sessionId/execute/sync")) \
            .alias(C.SUBMIT_ELEMENT, C.EXECUTE_SCRIPT) \
            .build()

    def test_resolve_defined(self):
        self.assertEqual(self.registry.resolve_transport("executeScript"),
                         ("POST", "/session/:sessionId/execute/sync"))

    def test_resolve_alias(self):
        self.assertIs(self.registry.resolve_transport(C.SUBMIT_ELEMENT),
                      self.registry.resolve_transport(C.EXECUTE_SCRIPT))

    def test_resolve_unsupported(self):
        with self.assertRaisesRegex(UnsupportedCommandError,
                                    "command not supported: getTitle"):
            self.registry.resolve_transport(C.GET_TITLE)

    def test_resolve_unknown(self):
        with self.assertRaisesRegex(UnsupportedCommandError,
                                    "command not supported: bogus"):
            self.registry.resolve_transport("bogus")

    def test_is_supported(self):
        self.assertTrue(self.registry.is_supported("submitElement"))
        self.assertFalse(self.registry.is_supported(C.GET_TITLE))
        self.assertFalse(self.registry.is_supported("bogus"))

    def test_names(self):
        self.assertEqual(self.registry.names(),
                         {C.EXECUTE_SCRIPT, C.SUBMIT_ELEMENT})

    def test_frozen(self):
        with self.assertRaises(TypeError):
            self.registry.templates[C.GET_TITLE] = get("/title")

        with self.assertRaises(TypeError):
            self.registry.aliases[C.GET_TITLE] = C.EXECUTE_SCRIPT

    def test_builder_changes_do_not_leak(self):
        builder = RegistryBuilder().define_command(C.STATUS, get("/status"))
        registry = builder.build()
        builder.define_command(C.GET_TITLE, get("/title"))
        self.assertFalse(registry.is_supported(C.GET_TITLE))


class CommandTemplateTestCase(TestCase):

    def test_placeholders(self):
        template = get("/session/:sessionId/element/:id/css/:propertyName")
        self.assertEqual(template.placeholders,
                         ("sessionId", "id", "propertyName"))

    def test_expand(self):
        template = get("/session/:sessionId/element/:id/text")
        self.assertEqual(template.expand({"sessionId": "s1", "id": "e1"}),
                         "/session/s1/element/e1/text")

    def test_expand_missing(self):
        with self.assertRaisesRegex(ValueError,
                                    "^no value for path parameter: id$"):
            get("/session/:sessionId/element/:id/text").expand(
                {"sessionId": "s1"})

    def test_str(self):
        self.assertEqual(str(post("/session")), "POST /session")
