"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Document written (or outline printed)
    - GENERAL_ERROR (1): Invalid options, configuration or input file
    - CONVERSION_ERROR (2): Parsing, .docx serialization or PDF rendering failed
    - ACCESS_DENIED (3): Object key does not belong to the given user
    - STORAGE_ERROR (4): Object missing or object store unreachable
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONVERSION_ERROR = 2
    ACCESS_DENIED = 3
    STORAGE_ERROR = 4
