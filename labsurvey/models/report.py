"""
Report configuration models.

The report itself is a plain nested dict (see engines/report.py); these
dataclasses describe what goes into it and what data is available.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    """
    Which report sections to include.

    Summary and recommendations are on by default; the other sections are
    switched on by `defaults_for` depending on which inputs are loaded.
    """
    include_summary: bool = True
    include_software_by_period: bool = False
    include_teacher_detail: bool = False
    include_coverage: bool = False
    include_recommendations: bool = True

    @classmethod
    def defaults_for(cls, has_rows: bool, has_roster: bool, has_curriculum: bool) -> "ReportConfig":
        return cls(
            include_summary=True,
            include_software_by_period=has_curriculum,
            include_teacher_detail=has_rows,
            include_coverage=has_curriculum and has_roster,
            include_recommendations=True,
        )


@dataclass
class DataAvailability:
    """
    What the loaded inputs can feed into a report.

    coverage_percent is the global course coverage from CoverageAnalyzer.
    survey_to_roster_ratio is survey rows / roster size; a teacher answering
    for several courses counts several times, so it can exceed 1.0.
    """
    has_rows: bool
    has_roster: bool
    has_curriculum: bool
    total_rows: int
    total_teachers: int
    total_periods: int
    distinct_software: int
    coverage_percent: float
    survey_to_roster_ratio: float
