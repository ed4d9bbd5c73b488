import enum


class CommandName(enum.Enum):
    """
    The commands known to the codec. The values are the command names
    used by the legacy Selenium client API, so a plain string such as
    ``"findElement"`` designates the same command as
    ``CommandName.FIND_ELEMENT``.
    """

    STATUS = "status"
    NEW_SESSION = "newSession"
    QUIT = "quit"
    GET = "get"
    GET_CURRENT_URL = "getCurrentUrl"
    GO_BACK = "goBack"
    GO_FORWARD = "goForward"
    REFRESH = "refresh"
    GET_TITLE = "getTitle"
    GET_PAGE_SOURCE = "getPageSource"
    SET_TIMEOUTS = "setTimeouts"
    SCREENSHOT = "screenshot"

    EXECUTE_SCRIPT = "executeScript"
    EXECUTE_ASYNC_SCRIPT = "executeAsyncScript"

    CLOSE = "close"
    SWITCH_TO_WINDOW = "switchToWindow"
    SWITCH_TO_FRAME = "switchToFrame"
    SWITCH_TO_PARENT_FRAME = "switchToParentFrame"
    MAXIMIZE_CURRENT_WINDOW = "maximizeWindow"
    GET_CURRENT_WINDOW_POSITION = "getWindowPosition"
    SET_CURRENT_WINDOW_POSITION = "setWindowPosition"
    GET_CURRENT_WINDOW_SIZE = "getWindowSize"
    SET_CURRENT_WINDOW_SIZE = "setWindowSize"
    GET_CURRENT_WINDOW_HANDLE = "getCurrentWindowHandle"
    GET_WINDOW_HANDLES = "getWindowHandles"

    FIND_ELEMENT = "findElement"
    FIND_ELEMENTS = "findElements"
    FIND_CHILD_ELEMENT = "findChildElement"
    FIND_CHILD_ELEMENTS = "findChildElements"
    CLICK_ELEMENT = "clickElement"
    CLEAR_ELEMENT = "clearElement"
    SEND_KEYS_TO_ELEMENT = "sendKeysToElement"
    SUBMIT_ELEMENT = "submitElement"
    GET_ELEMENT_TEXT = "getElementText"
    GET_ELEMENT_TAG_NAME = "getElementTagName"
    GET_ELEMENT_ATTRIBUTE = "getElementAttribute"
    GET_ELEMENT_VALUE_OF_CSS_PROPERTY = "getElementValueOfCssProperty"
    GET_ELEMENT_LOCATION = "getElementLocation"
    GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW = \
        "getElementLocationOnceScrolledIntoView"
    GET_ELEMENT_SIZE = "getElementSize"
    GET_ELEMENT_RECT = "getElementRect"
    IS_ELEMENT_SELECTED = "isElementSelected"
    IS_ELEMENT_ENABLED = "isElementEnabled"
    IS_ELEMENT_DISPLAYED = "isElementDisplayed"

    GET_ALL_COOKIES = "getCookies"
    ADD_COOKIE = "addCookie"
    DELETE_ALL_COOKIES = "deleteAllCookies"
    DELETE_COOKIE = "deleteCookie"

    ACCEPT_ALERT = "acceptAlert"
    DISMISS_ALERT = "dismissAlert"
    GET_ALERT_TEXT = "getAlertText"
    SET_ALERT_VALUE = "setAlertValue"


def as_command(name):
    """
    :param name: A command, given either as a :class:`CommandName` or as
                 its string value.
    :returns: The corresponding :class:`CommandName`, or ``None`` if the
              name does not designate a known command.
    """
    if isinstance(name, CommandName):
        return name

    try:
        return CommandName(name)
    except ValueError:
        return None


def command_label(name):
    return name.value if isinstance(name, CommandName) else str(name)
