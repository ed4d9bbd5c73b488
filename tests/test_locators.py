from unittest import TestCase

from selenium.webdriver.common.by import By

from wirecodec.locators import escape_css_characters, escape_leading_digit, \
    css_escape, translate_locator


class CssEscapeTestCase(TestCase):

    def test_escapes_dot(self):
        self.assertEqual(css_escape("foo.bar"), "foo\\.bar")

    def test_escapes_leading_digit(self):
        self.assertEqual(css_escape("1abc"), "\\31 abc")

    def test_escapes_hash(self):
        self.assertEqual(css_escape("#id"), "\\#id")

    def test_escapes_every_special_character(self):
        special = "'\"\\#.:;,!?+<>=~*^$|%&@`{}-/[]()"
        self.assertEqual(escape_css_characters(special),
                         "".join("\\" + c for c in special))

    def test_leaves_plain_identifiers_alone(self):
        self.assertEqual(css_escape("foo_bar9"), "foo_bar9")

    def test_empty(self):
        self.assertEqual(css_escape(""), "")

    def test_leading_digits(self):
        for d in range(10):
            self.assertEqual(escape_leading_digit(str(d) + "x"),
                             "\\3" + str(d) + " x")

    def test_leading_non_ascii_decimal_digit(self):
        # ARABIC-INDIC DIGIT THREE
        self.assertEqual(escape_leading_digit("\u0663x"), "\\33 x")

    def test_leading_non_decimal_character(self):
        self.assertEqual(escape_leading_digit("\u00b2x"), "\u00b2x")

    def test_only_first_digit_is_escaped(self):
        self.assertEqual(escape_leading_digit("12"), "\\31 2")

    def test_digit_after_escaped_character(self):
        # The backslash comes first, so there is no leading digit.
        self.assertEqual(css_escape("-1"), "\\-1")


class TranslateLocatorTestCase(TestCase):

    def test_class_name(self):
        self.assertEqual(translate_locator(By.CLASS_NAME, "a.b"),
                         (By.CSS_SELECTOR, ".a\\.b"))

    def test_id(self):
        self.assertEqual(translate_locator(By.ID, "1st"),
                         (By.CSS_SELECTOR, "#\\31 st"))

    def test_name_is_not_escaped(self):
        self.assertEqual(translate_locator(By.NAME, "foo"),
                         (By.CSS_SELECTOR, "*[name='foo']"))
        self.assertEqual(translate_locator(By.NAME, "a.b"),
                         (By.CSS_SELECTOR, "*[name='a.b']"))

    def test_tag_name(self):
        self.assertEqual(translate_locator(By.TAG_NAME, "div"),
                         (By.CSS_SELECTOR, "div"))

    def test_passthrough(self):
        for using in (By.LINK_TEXT, By.PARTIAL_LINK_TEXT, By.XPATH,
                      By.CSS_SELECTOR, "bogus"):
            self.assertEqual(translate_locator(using, "#x"), (using, "#x"))
