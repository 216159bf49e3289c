# topmark:header:start
#
#   project      : JsonDoc
#   file         : exit_codes.py
#   file_relpath : src/jsondoc/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the JsonDoc CLI.

JsonDoc follows the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the JsonDoc CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: A description could not be rendered (e.g. a schema override
            that is not JSON-encodable). Mirrors BSD ``EX_DATAERR (65)``.
        TARGET_NOT_FOUND: A ``module:Qualname`` target cannot be imported.
            Mirrors BSD ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: Internal failure, such as a broken memo invariant.
            Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    TARGET_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
