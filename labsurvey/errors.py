"""
Error and warning types.

Only the data layer raises. Everything the engines want to tell the user
about (unmatched course names, empty surveys) travels as DatasetWarning
records inside the returned view models.
"""

from dataclasses import dataclass
from enum import Enum


class MalformedInputError(ValueError):
    """
    An input file could not be turned into typed records.

    Raised for unreadable files, text that is not valid UTF-8, invalid JSON,
    JSON with the wrong shape and rosters without any names. The dashboard
    catches it and keeps working with that input treated as absent.
    """

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class WarningKind(Enum):
    """
    UNRESOLVED_REFERENCE: a survey course did not match any curriculum entry
    EMPTY_DATASET: the survey has no rows, downstream actions are blocked
    """
    UNRESOLVED_REFERENCE = "unresolved_reference"
    EMPTY_DATASET = "empty_dataset"


@dataclass(frozen=True)
class DatasetWarning:
    kind: WarningKind
    message: str
    subject: str = ""   # the offending name, when there is one
