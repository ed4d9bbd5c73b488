"""
Rewriting of command parameters for a target dialect.

A rule is a function taking a :class:`~wirecodec.scripts.ScriptWrapper`
and the parameters of a command, and returning the new parameters. The
rules of a dialect are held in a table keyed by
:class:`~wirecodec.commands.CommandName`.
"""
import types

from selenium.webdriver.common.by import By

from . import atoms
from .commands import CommandName, as_command
from .locators import translate_locator
from .scripts import element_reference

PAGE_SOURCE_SCRIPT = (
    "var source = document.documentElement.outerHTML; \n"
    "if (!source) { source = new XMLSerializer().serializeToString(document); }\n"
    "return source;")

GET_WINDOW_POSITION_SCRIPT = "return {x: window.screenX, y: window.screenY}"

SET_WINDOW_POSITION_SCRIPT = \
    "window.screenX = arguments[0]; window.screenY = arguments[1]"

BOUNDING_RECT_SCRIPT = "return arguments[0].getBoundingClientRect()"

SUBMIT_SCRIPT = (
    "var form = arguments[0];\n"
    "while (form.nodeName != \"FORM\" && form.parentNode) {\n"
    "  form = form.parentNode;\n"
    "}\n"
    "if (form == null) { throw Error('Unable to find containing form element'); }\n"
    "var e = form.ownerDocument.createEvent('Event');\n"
    "e.initEvent('submit', true, true);\n"
    "if (form.dispatchEvent(e)) { form.submit() }\n")

CURRENT_WINDOW = "current"


def find_element(scripts, parameters):
    # Searches lacking a strategy or a value are passed through unchanged.
    ret = dict(parameters)
    using = parameters.get("using")
    if using in (By.CLASS_NAME, By.ID, By.NAME, By.TAG_NAME) and \
       parameters.get("value") is not None:
        ret["using"], ret["value"] = \
            translate_locator(using, parameters.get("value"))
    return ret


def get_element_attribute(scripts, parameters):
    return scripts.wrap_atom(atoms.GET_ATTRIBUTE,
                             element_reference(parameters.get("id")),
                             parameters.get("name")).as_parameters()


def get_element_location_in_view(scripts, parameters):
    return scripts.wrap(BOUNDING_RECT_SCRIPT,
                        element_reference(parameters.get("id"))) \
        .as_parameters()


def get_page_source(scripts, parameters):
    return scripts.wrap(PAGE_SOURCE_SCRIPT).as_parameters()


def get_window_position(scripts, parameters):
    return scripts.wrap(GET_WINDOW_POSITION_SCRIPT).as_parameters()


def set_window_position(scripts, parameters):
    return scripts.wrap(SET_WINDOW_POSITION_SCRIPT,
                        parameters.get("x"),
                        parameters.get("y")).as_parameters()


def is_element_displayed(scripts, parameters):
    return scripts.wrap_atom(atoms.IS_DISPLAYED,
                             element_reference(parameters.get("id"))) \
        .as_parameters()


def submit_element(scripts, parameters):
    return scripts.wrap(SUBMIT_SCRIPT,
                        element_reference(parameters.get("id"))) \
        .as_parameters()


def in_current_window(scripts, parameters):
    ret = dict(parameters)
    ret.setdefault("windowHandle", CURRENT_WINDOW)
    return ret


W3C_RULES = types.MappingProxyType({
    CommandName.FIND_ELEMENT: find_element,
    CommandName.FIND_ELEMENTS: find_element,
    CommandName.FIND_CHILD_ELEMENT: find_element,
    CommandName.FIND_CHILD_ELEMENTS: find_element,
    CommandName.GET_ELEMENT_ATTRIBUTE: get_element_attribute,
    CommandName.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW:
    get_element_location_in_view,
    CommandName.GET_PAGE_SOURCE: get_page_source,
    CommandName.GET_CURRENT_WINDOW_POSITION: get_window_position,
    CommandName.SET_CURRENT_WINDOW_POSITION: set_window_position,
    CommandName.IS_ELEMENT_DISPLAYED: is_element_displayed,
    CommandName.SUBMIT_ELEMENT: submit_element,
})

JSON_WIRE_RULES = types.MappingProxyType({
    CommandName.MAXIMIZE_CURRENT_WINDOW: in_current_window,
    CommandName.GET_CURRENT_WINDOW_SIZE: in_current_window,
    CommandName.SET_CURRENT_WINDOW_SIZE: in_current_window,
    CommandName.GET_CURRENT_WINDOW_POSITION: in_current_window,
    CommandName.SET_CURRENT_WINDOW_POSITION: in_current_window,
})


class ParameterAmender(object):

    def __init__(self, scripts, rules):
        """
        :param scripts: The object used to build script commands.
        :type scripts: :class:`wirecodec.scripts.ScriptWrapper`
        :param rules: The rewrite rules, keyed by command.
        :type rules: A mapping of :class:`CommandName` to functions.
        """
        for command in rules:
            if not isinstance(command, CommandName):
                raise TypeError("rules must be keyed by CommandName, not: " +
                                repr(command))

        self.scripts = scripts
        self.rules = types.MappingProxyType(dict(rules))

    def amend(self, name, parameters):
        """
        :param name: The command whose parameters are amended. This is
                     the name used by the caller, never the name of the
                     command it is an alias of.
        :param parameters: The parameters of the command. They are not
                           modified.
        :type parameters: :class:`dict`
        :returns: New parameters. If there is no rule for the command,
                  they are a copy of ``parameters``.
        :rtype: :class:`dict`
        """
        rule = self.rules.get(as_command(name))
        if rule is None:
            return dict(parameters)

        return rule(self.scripts, parameters)
