"""User-facing error reporting for command line front ends."""

from .exceptions import UnsupportedStrategyError

UNSUPPORTED_COMPILER_MESSAGE = """No built-in support for requested compiler.
To use this compiler, please specify necessary OPTIONS in compile command. E.g:

  compile --compiler solcjs -- <OPTIONS>...

OPTIONS can also be specified in the project's configuration file:

  [compiler]
    options = ["--option1", "--option2"]
"""


class CliError(Exception):
    """Base exception for errors shown to command line users."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        self.__cause__ = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        return str(self.cause)


class CompilationError(CliError):
    """Compilation failed; wraps the compiler strategy error."""

    def describe(self) -> str:
        if isinstance(self.cause, UnsupportedStrategyError):
            return UNSUPPORTED_COMPILER_MESSAGE
        return str(self.cause)


class ConfigurationSetError(CliError):
    """Writing a configuration value failed; wraps the serialization error."""

    def describe(self) -> str:
        return f"Couldn't set configuration: {self.cause}"


def format_error(error: BaseException) -> str:
    """
    Render any error as the text shown to the user.

    Args:
        error: Exception raised by a command

    Returns:
        The error's own description, or its class name when it has none
    """
    # KeyError's str() is the repr of its key
    if isinstance(error, KeyError) and len(error.args) == 1:
        message = str(error.args[0])
    else:
        message = str(error)

    if not message:
        return type(error).__name__
    return message
