# topmark:header:start
#
#   project      : Worrywart
#   file         : exit_codes.py
#   file_relpath : src/worrywart/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Worrywart CLI.

Worrywart aligns with the BSD `sysexits` convention where practical. The
deliberate divergences are ``CONCERNS = 1`` and ``PANIC = 2``, which report the
outcome of the checked inputs. Click's own usage errors also exit with 2, so
tests must assert ``result.exception is None`` to tell a panic from a usage error.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Worrywart CLI.

    Attributes:
        SUCCESS: Every input was clean, or only produced worries.
        CONCERNS: At least one input produced sorries or hit the buffering limit.
        PANIC: At least one input made the parser panic.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading an input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    CONCERNS = 1
    PANIC = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
