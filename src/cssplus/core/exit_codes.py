# topmark:header:start
#
#   project      : CSSPlus
#   file         : exit_codes.py
#   file_relpath : src/cssplus/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CSSPlus CLI.

CSSPlus aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
``LINT_FAILED = 2``, which signals that the build ran but the reporter rejected
lint findings. Tests must assert ``result.exception`` to disambiguate it from
Click's own usage errors (which also default to 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CSSPlus CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        LINT_FAILED: Lint warnings or errors were found and the reporter failed the build.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: Plugin or collaborator failure. Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    LINT_FAILED = 2

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
