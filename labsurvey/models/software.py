"""
Software usage data models.
"""

from dataclasses import dataclass, field
from enum import Enum


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.ASC if self is SortDirection.DESC else SortDirection.DESC


@dataclass
class SoftwareEntry:
    """
    Mention counts for one software item.

    Entries are keyed by the normalized software name; `name` keeps the
    casing of the first mention seen ("MATLAB" stays "MATLAB" even if a later
    row wrote "matlab").
    """
    name: str
    windows_count: int = 0
    linux_count: int = 0
    recommended_count: int = 0

    @property
    def total(self) -> int:
        return self.windows_count + self.linux_count + self.recommended_count

    def copy(self) -> "SoftwareEntry":
        return SoftwareEntry(
            name=self.name,
            windows_count=self.windows_count,
            linux_count=self.linux_count,
            recommended_count=self.recommended_count,
        )


@dataclass
class SoftwareSummary:
    """
    Everything the software summary view shows.

    by_period is ordered: curriculum periods in plan order, then the
    "Sin clasificar" bucket. Each maps course name -> list of SoftwareEntry.
    """
    global_entries: list          # list of SoftwareEntry, sorted
    by_period: dict               # {period_name: {course_name: [SoftwareEntry]}}
    surveys_per_course: dict      # {course_name: int}
    coverage: object = None       # CoverageReport, None without curriculum
    warnings: list = field(default_factory=list)  # list of DatasetWarning

    def periods(self) -> list:
        return list(self.by_period.keys())

    def courses_in(self, period_name: str) -> list:
        return sorted(self.by_period.get(period_name, {}).keys())

    def software_for(self, period_name: str, course_name: str) -> list:
        return self.by_period.get(period_name, {}).get(course_name, [])
