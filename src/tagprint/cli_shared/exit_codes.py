# topmark:header:start
#
#   project      : TagPrint
#   file         : exit_codes.py
#   file_relpath : src/tagprint/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TagPrint CLI.

Values follow the BSD `sysexits` convention so that scripts wrapping
``tagprint`` can tell a malformed tag payload apart from a bad invocation or
a broken configuration file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TagPrint CLI.

    Attributes:
        SUCCESS: The command completed.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        TAG_ERROR: Malformed tag payload. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Missing, unreadable or invalid configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    TAG_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
