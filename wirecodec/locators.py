"""
Translation of the legacy locator strategies into CSS selectors.

The W3C dialect does not know the ``class name``, ``id``, ``name`` and
``tag name`` strategies. Searches using them are turned into ``css
selector`` searches. ``link text``, ``partial link text`` and ``xpath``
exist in both dialects and are left alone.
"""
from selenium.webdriver.common.by import By

CSS_SPECIAL_CHARACTERS = frozenset("'\"\\#.:;,!?+<>=~*^$|%&@`{}-/[]()")


def escape_css_characters(value):
    """
    Puts a backslash in front of every character of ``value`` which has a
    special meaning in CSS selectors.
    """
    return "".join("\\" + c if c in CSS_SPECIAL_CHARACTERS else c
                   for c in value)


def escape_leading_digit(value):
    """
    A CSS identifier cannot start with a digit. A leading digit is
    replaced with its code point escape: ``1abc`` becomes ``\\31 abc``.
    """
    if value[:1].isdecimal():
        return "\\" + str(30 + int(value[0])) + " " + value[1:]
    return value


def css_escape(value):
    return escape_leading_digit(escape_css_characters(value))


def translate_locator(using, value):
    """
    :param using: The locator strategy.
    :type using: :class:`str`, one of the values of
                 :class:`selenium.webdriver.common.by.By`.
    :param value: The value to search for.
    :returns: The new strategy and value. Strategies which have no
              CSS equivalent (or which are unknown) are returned
              unchanged.
    :rtype: :class:`tuple`
    """
    if using == By.CLASS_NAME:
        return By.CSS_SELECTOR, "." + css_escape(value)

    if using == By.ID:
        return By.CSS_SELECTOR, "#" + css_escape(value)

    if using == By.NAME:
        # The value is not escaped.
        return By.CSS_SELECTOR, "*[name='" + value + "']"

    if using == By.TAG_NAME:
        return By.CSS_SELECTOR, css_escape(value)

    return using, value
