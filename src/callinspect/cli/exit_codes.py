# topmark:header:start
#
#   project      : CallInspect
#   file         : exit_codes.py
#   file_relpath : src/callinspect/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CallInspect CLI.

CallInspect aligns with the BSD `sysexits` convention so that other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CallInspect CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error, including references that are
            not callable. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    CONFIG_ERROR = 78
