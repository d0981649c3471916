"""Error reporting: formatted error reports, fatal errors and the last error code."""

from __future__ import annotations

import sys

ERROR_SUCCESS = 0x0
ERROR_INVALID_PARAMETER = 0x57

DEFAULT_ERROR_CODE = 0x85100000
"""Error code that is left out of error reports."""

EXCEPTION_LINE = -5
"""Line number that marks a report as a raised exception rather than an assertion."""

APP_NAME = "GenericBlizzardApp"
EXIT_FAILURE = 1

_SEPARATOR = "\n=========================================================\n"
_MAX_FORMATTED = 2046


class StormError(Exception):
    """An error carrying a 32-bit error code."""

    def __init__(self, message: str = "", errorcode: int = DEFAULT_ERROR_CODE) -> None:
        super().__init__(message)
        self.errorcode = errorcode & 0xFFFFFFFF


class StormFatalError(StormError):
    """An unrecoverable error; ``exitcode`` is the status the application ends with."""

    def __init__(
        self,
        message: str = "",
        errorcode: int = DEFAULT_ERROR_CODE,
        exitcode: int = EXIT_FAILURE,
    ) -> None:
        super().__init__(message, errorcode)
        self.exitcode = exitcode


_last_error = ERROR_SUCCESS


def format_error(errorcode: int, filename: str, linenumber: int, description: str) -> str:
    """Build the text of an error report."""
    code = errorcode & 0xFFFFFFFF
    code_line = "" if code == DEFAULT_ERROR_CODE else f" Error Code:  0x{code:08X}\n"
    parts = [_SEPARATOR]
    if linenumber == EXCEPTION_LINE:
        parts += [
            "Exception Raised!\n\n",
            f" App:         {APP_NAME}\n",
            code_line,
            f" Error:       {description}\n\n",
        ]
    else:
        parts += [
            "Assertion Failed!\n\n",
            f" App:         {APP_NAME}\n",
            f" File:        {filename}\n",
            f" Line:        {linenumber}\n",
            code_line,
            f" Assertion:   {description}\n",
        ]
    return "".join(parts)


def display_error(
    errorcode: int,
    filename: str,
    linenumber: int,
    description: str,
    recoverable: bool,
    exitcode: int,
) -> bool:
    """Print an error report.

    Returns True when the error is recoverable; otherwise raises
    :class:`StormFatalError` carrying ``exitcode``.
    """
    sys.stdout.write(format_error(errorcode, filename, linenumber, description))
    sys.stdout.flush()
    if recoverable:
        return True
    raise StormFatalError(description, errorcode, exitcode)


def display_error_fmt(
    errorcode: int,
    filename: str,
    linenumber: int,
    recoverable: bool,
    exitcode: int,
    format: str,
    *args,
) -> bool:
    """Like :func:`display_error`, with a printf-style description."""
    description = (format % args)[:_MAX_FORMATTED]
    return display_error(errorcode, filename, linenumber, description, recoverable, exitcode)


def display_app_fatal(format: str, *args) -> None:
    """Print a fatal message and raise :class:`StormFatalError`."""
    message = format % args if args else format
    print(message, flush=True)
    raise StormFatalError(message, exitcode=EXIT_FAILURE)


def set_last_error(errorcode: int) -> None:
    """Remember ``errorcode`` as the most recent error."""
    global _last_error
    _last_error = errorcode & 0xFFFFFFFF


def get_last_error() -> int:
    """The most recently set error code."""
    return _last_error