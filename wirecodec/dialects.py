"""
The command tables of the dialects the codec speaks.
"""
from .commands import CommandName as C
from .registry import RegistryBuilder, get, post, delete

W3C = "W3C"
JSON_WIRE = "JSONWIRE"


def common_commands():
    """
    :returns: A builder holding the commands which have the same
              transport in both dialects.
    :rtype: :class:`wirecodec.registry.RegistryBuilder`
    """
    return RegistryBuilder() \
        .define_command(C.STATUS, get("/status")) \
        .define_command(C.NEW_SESSION, post("/session")) \
        .define_command(C.QUIT, delete("/session/:sessionId")) \
        .define_command(C.GET, post("/session/:sessionId/url")) \
        .define_command(C.GET_CURRENT_URL, get("/session/:sessionId/url")) \
        .define_command(C.GO_BACK, post("/session/:sessionId/back")) \
        .define_command(C.GO_FORWARD, post("/session/:sessionId/forward")) \
        .define_command(C.REFRESH, post("/session/:sessionId/refresh")) \
        .define_command(C.GET_TITLE, get("/session/:sessionId/title")) \
        .define_command(C.SET_TIMEOUTS, post("/session/:sessionId/timeouts")) \
        .define_command(C.SCREENSHOT, get("/session/:sessionId/screenshot")) \
        .define_command(C.CLOSE, delete("/session/:sessionId/window")) \
        .define_command(C.SWITCH_TO_WINDOW,
                        post("/session/:sessionId/window")) \
        .define_command(C.SWITCH_TO_FRAME, post("/session/:sessionId/frame")) \
        .define_command(C.SWITCH_TO_PARENT_FRAME,
                        post("/session/:sessionId/frame/parent")) \
        .define_command(C.FIND_ELEMENT, post("/session/:sessionId/element")) \
        .define_command(C.FIND_ELEMENTS,
                        post("/session/:sessionId/elements")) \
        .define_command(C.FIND_CHILD_ELEMENT,
                        post("/session/:sessionId/element/:id/element")) \
        .define_command(C.FIND_CHILD_ELEMENTS,
                        post("/session/:sessionId/element/:id/elements")) \
        .define_command(C.CLICK_ELEMENT,
                        post("/session/:sessionId/element/:id/click")) \
        .define_command(C.CLEAR_ELEMENT,
                        post("/session/:sessionId/element/:id/clear")) \
        .define_command(C.SEND_KEYS_TO_ELEMENT,
                        post("/session/:sessionId/element/:id/value")) \
        .define_command(C.GET_ELEMENT_TEXT,
                        get("/session/:sessionId/element/:id/text")) \
        .define_command(C.GET_ELEMENT_TAG_NAME,
                        get("/session/:sessionId/element/:id/name")) \
        .define_command(C.IS_ELEMENT_SELECTED,
                        get("/session/:sessionId/element/:id/selected")) \
        .define_command(C.IS_ELEMENT_ENABLED,
                        get("/session/:sessionId/element/:id/enabled")) \
        .define_command(
            C.GET_ELEMENT_VALUE_OF_CSS_PROPERTY,
            get("/session/:sessionId/element/:id/css/:propertyName")) \
        .define_command(C.GET_ELEMENT_RECT,
                        get("/session/:sessionId/element/:id/rect")) \
        .define_command(C.GET_ALL_COOKIES, get("/session/:sessionId/cookie")) \
        .define_command(C.ADD_COOKIE, post("/session/:sessionId/cookie")) \
        .define_command(C.DELETE_ALL_COOKIES,
                        delete("/session/:sessionId/cookie")) \
        .define_command(C.DELETE_COOKIE,
                        delete("/session/:sessionId/cookie/:name"))


def w3c_commands():
    builder = common_commands()

    # The aliases to EXECUTE_SCRIPT need it to be defined first.
    builder.define_command(C.EXECUTE_SCRIPT,
                           post("/session/:sessionId/execute/sync"))
    builder.define_command(C.EXECUTE_ASYNC_SCRIPT,
                           post("/session/:sessionId/execute/async"))

    builder.alias(C.GET_ELEMENT_ATTRIBUTE, C.EXECUTE_SCRIPT)
    builder.alias(C.GET_ELEMENT_LOCATION, C.GET_ELEMENT_RECT)
    builder.alias(C.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW,
                  C.EXECUTE_SCRIPT)
    builder.alias(C.GET_ELEMENT_SIZE, C.GET_ELEMENT_RECT)
    builder.alias(C.IS_ELEMENT_DISPLAYED, C.EXECUTE_SCRIPT)
    builder.alias(C.SUBMIT_ELEMENT, C.EXECUTE_SCRIPT)
    builder.alias(C.GET_PAGE_SOURCE, C.EXECUTE_SCRIPT)

    builder.define_command(C.MAXIMIZE_CURRENT_WINDOW,
                           post("/session/:sessionId/window/maximize"))
    builder.alias(C.GET_CURRENT_WINDOW_POSITION, C.EXECUTE_SCRIPT)
    builder.alias(C.SET_CURRENT_WINDOW_POSITION, C.EXECUTE_SCRIPT)
    builder.define_command(C.GET_CURRENT_WINDOW_SIZE,
                           get("/session/:sessionId/window/size"))
    builder.define_command(C.SET_CURRENT_WINDOW_SIZE,
                           post("/session/:sessionId/window/size"))
    builder.define_command(C.GET_CURRENT_WINDOW_HANDLE,
                           get("/session/:sessionId/window"))
    builder.define_command(C.GET_WINDOW_HANDLES,
                           get("/session/:sessionId/window/handles"))

    builder.define_command(C.ACCEPT_ALERT,
                           post("/session/:sessionId/alert/accept"))
    builder.define_command(C.DISMISS_ALERT,
                           post("/session/:sessionId/alert/dismiss"))
    builder.define_command(C.GET_ALERT_TEXT,
                           get("/session/:sessionId/alert/text"))
    builder.define_command(C.SET_ALERT_VALUE,
                           post("/session/:sessionId/alert/text"))
    return builder


def json_wire_commands():
    builder = common_commands()

    builder.define_command(C.EXECUTE_SCRIPT,
                           post("/session/:sessionId/execute"))
    builder.define_command(C.EXECUTE_ASYNC_SCRIPT,
                           post("/session/:sessionId/execute_async"))
    builder.define_command(C.GET_PAGE_SOURCE,
                           get("/session/:sessionId/source"))

    builder.define_command(
        C.GET_ELEMENT_ATTRIBUTE,
        get("/session/:sessionId/element/:id/attribute/:name"))
    builder.define_command(C.GET_ELEMENT_LOCATION,
                           get("/session/:sessionId/element/:id/location"))
    builder.define_command(
        C.GET_ELEMENT_LOCATION_ONCE_SCROLLED_INTO_VIEW,
        get("/session/:sessionId/element/:id/location_in_view"))
    builder.define_command(C.GET_ELEMENT_SIZE,
                           get("/session/:sessionId/element/:id/size"))
    builder.define_command(C.IS_ELEMENT_DISPLAYED,
                           get("/session/:sessionId/element/:id/displayed"))
    builder.define_command(C.SUBMIT_ELEMENT,
                           post("/session/:sessionId/element/:id/submit"))

    builder.define_command(
        C.MAXIMIZE_CURRENT_WINDOW,
        post("/session/:sessionId/window/:windowHandle/maximize"))
    builder.define_command(
        C.GET_CURRENT_WINDOW_POSITION,
        get("/session/:sessionId/window/:windowHandle/position"))
    builder.define_command(
        C.SET_CURRENT_WINDOW_POSITION,
        post("/session/:sessionId/window/:windowHandle/position"))
    builder.define_command(
        C.GET_CURRENT_WINDOW_SIZE,
        get("/session/:sessionId/window/:windowHandle/size"))
    builder.define_command(
        C.SET_CURRENT_WINDOW_SIZE,
        post("/session/:sessionId/window/:windowHandle/size"))
    builder.define_command(C.GET_CURRENT_WINDOW_HANDLE,
                           get("/session/:sessionId/window_handle"))
    builder.define_command(C.GET_WINDOW_HANDLES,
                           get("/session/:sessionId/window_handles"))

    builder.define_command(C.ACCEPT_ALERT,
                           post("/session/:sessionId/accept_alert"))
    builder.define_command(C.DISMISS_ALERT,
                           post("/session/:sessionId/dismiss_alert"))
    builder.define_command(C.GET_ALERT_TEXT,
                           get("/session/:sessionId/alert_text"))
    builder.define_command(C.SET_ALERT_VALUE,
                           post("/session/:sessionId/alert_text"))
    return builder
