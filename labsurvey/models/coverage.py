"""
Coverage data models.

Fractions are exact here. Rounding to a whole percentage is done by the
presentation layer when it prints.
"""

from dataclasses import dataclass, field


@dataclass
class CoverageStat:
    """
    Survey coverage of one curriculum period.

    Example for a period with 5 concrete courses, 3 of them surveyed:
        total_courses: 5
        covered_courses: 3
        uncovered: ["Redes II", "Electiva Cloud"]
        coverage_fraction: 0.6
    """
    period_id: str
    period_name: str
    total_courses: int
    covered_courses: int
    uncovered: list = field(default_factory=list)
    distinct_software: int = 0

    @property
    def coverage_fraction(self) -> float:
        if self.total_courses == 0:
            return 0.0
        return self.covered_courses / self.total_courses

    @property
    def coverage_percent(self) -> float:
        return self.coverage_fraction * 100


@dataclass
class CoverageReport:
    """Per-period coverage plus the global totals."""
    per_period: list = field(default_factory=list)  # list of CoverageStat
    total_courses: int = 0
    total_covered: int = 0

    @property
    def coverage_fraction(self) -> float:
        if self.total_courses == 0:
            return 0.0
        return self.total_covered / self.total_courses

    @property
    def coverage_percent(self) -> float:
        return self.coverage_fraction * 100

    def for_period(self, period_name: str):
        """First period stat with that display name, or None."""
        for stat in self.per_period:
            if stat.period_name == period_name:
                return stat
        return None
