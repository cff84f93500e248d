"""
Teacher tracking data models.
"""

from dataclasses import dataclass, field
from enum import Enum


class StatusFilter(Enum):
    """Which teachers the tracking list shows."""
    ALL = "todos"
    SURVEYED = "encuestados"
    PENDING = "pendientes"


@dataclass
class TeacherStatus:
    """
    Survey status of one teacher.

    Roster members keep the roster spelling. Teachers found only in the
    survey use the first spelling seen there and are always surveyed.
    """
    name: str
    surveyed: bool
    courses: list = field(default_factory=list)  # distinct course names, first-seen order


@dataclass
class RosterSummary:
    """Progress counters for the tracking header."""
    total: int
    surveyed: int
    pending: int

    @property
    def completion_fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.surveyed / self.total

    @property
    def completion_percent(self) -> float:
        return self.completion_fraction * 100
