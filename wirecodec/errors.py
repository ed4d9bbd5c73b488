from selenium.common.exceptions import WebDriverException

__all__ = ["ConfigurationError", "UnsupportedCommandError",
           "ScriptResourceUnavailableError", "AtomNotFoundError"]


class ConfigurationError(ValueError):
    """
    Raised while a command table is being built, when the table is
    inconsistent: a command defined twice, or an alias which does not
    point to a defined command.
    """


class UnsupportedCommandError(WebDriverException):
    """
    Raised when a command has neither a definition nor an alias in the
    codec's command table.
    """

    def __init__(self, name):
        super(UnsupportedCommandError, self).__init__(
            "command not supported: {0}".format(name))
        self.name = name


class ScriptResourceUnavailableError(WebDriverException):
    """
    Raised when the script body of an atom cannot be obtained. The
    original failure is available as ``__cause__``.
    """

    def __init__(self, atom_name):
        super(ScriptResourceUnavailableError, self).__init__(
            "script resource unavailable: {0}".format(atom_name))
        self.atom_name = atom_name


class AtomNotFoundError(LookupError):
    pass
