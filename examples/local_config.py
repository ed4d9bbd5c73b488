from wirecodec import Config

#
# This file gives you an overview of what a codec configuration is able
# to work with. Load it with ``wirecodec.Builder``.
#

# The codec translates to the W3C dialect. Use "JSONWIRE" (or "OSS")
# for endpoints that still speak the legacy dialect.
CONFIG = Config("W3C")

# Atoms can be read from a directory instead of from the package:
#
# CONFIG = Config("W3C", atom_path="/blah/atoms")
#
# Or individual atoms can be overridden:
#
# CONFIG = Config("W3C", atoms={
#     "isDisplayed.js": "function (el) { return el.offsetParent !== null; }"
# })

# Level of the "wirecodec" logger.
LOG_LEVEL = "INFO"

# Anything passed to the Builder as options is available here.
if builder_args.get("debug"):  # noqa: F821
    LOG_LEVEL = "DEBUG"
