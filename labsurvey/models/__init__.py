"""
Data models for the survey dashboard.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the data layer, the engines and the UI.
"""

from .survey import SurveyRow, Platform, ALL_PLATFORMS
from .curriculum import (
    Course,
    DirectSlot,
    ElectiveSlot,
    CourseSlot,
    Period,
    CurriculumTree,
    IndexEntry,
    slot_for,
    expand_slot,
)
from .software import SoftwareEntry, SoftwareSummary, SortDirection
from .coverage import CoverageStat, CoverageReport
from .teacher import TeacherStatus, RosterSummary, StatusFilter
from .report import ReportConfig, DataAvailability
from .session import SessionState

__all__ = [
    # Survey
    "SurveyRow",
    "Platform",
    "ALL_PLATFORMS",
    # Curriculum
    "Course",
    "DirectSlot",
    "ElectiveSlot",
    "CourseSlot",
    "Period",
    "CurriculumTree",
    "IndexEntry",
    "slot_for",
    "expand_slot",
    # Software
    "SoftwareEntry",
    "SoftwareSummary",
    "SortDirection",
    # Coverage
    "CoverageStat",
    "CoverageReport",
    # Teachers
    "TeacherStatus",
    "RosterSummary",
    "StatusFilter",
    # Report
    "ReportConfig",
    "DataAvailability",
    # Session
    "SessionState",
]
