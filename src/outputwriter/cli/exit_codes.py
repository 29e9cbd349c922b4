# topmark:header:start
#
#   project      : OutputWriter
#   file         : exit_codes.py
#   file_relpath : src/outputwriter/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the OutputWriter CLI.

Values follow the BSD `sysexits` convention where practical so that shell
scripts and other tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the OutputWriter CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input that cannot be parsed, normalized or represented in
            the requested format. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNSUPPORTED_FORMAT: Unknown output format. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: Reading input or writing output failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing, invalid or malformed configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FORMAT = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
