"""
Session state.

The dashboard keeps exactly one SessionState. Loading or clearing an input
builds a new state; every view is recomputed from it, so nothing derived
from an older input can leak into what is shown.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .curriculum import CurriculumTree


@dataclass(frozen=True)
class SessionState:
    """
    Attributes:
        rows: tuple of SurveyRow
        curriculum: Parsed study plan, or None when absent/malformed
        roster: tuple of canonical teacher names, or None when absent/malformed
        survey_loaded: True once a CSV was read, even if it had no rows
        errors: Messages for inputs that failed to load, shown inline
    """
    rows: tuple = ()
    curriculum: Optional[CurriculumTree] = None
    roster: Optional[tuple] = None
    survey_loaded: bool = False
    errors: tuple = ()

    @property
    def has_rows(self) -> bool:
        return len(self.rows) > 0

    @property
    def has_curriculum(self) -> bool:
        return self.curriculum is not None

    @property
    def has_roster(self) -> bool:
        return bool(self.roster)

    def with_rows(self, rows) -> "SessionState":
        return replace(self, rows=tuple(rows), survey_loaded=True)

    def with_curriculum(self, curriculum: Optional[CurriculumTree]) -> "SessionState":
        return replace(self, curriculum=curriculum)

    def with_roster(self, roster) -> "SessionState":
        return replace(self, roster=tuple(roster) if roster is not None else None)

    def with_error(self, message: str) -> "SessionState":
        return replace(self, errors=self.errors + (message,))

    def without_errors(self) -> "SessionState":
        return replace(self, errors=())
