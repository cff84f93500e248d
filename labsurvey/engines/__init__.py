"""
Reconciliation and aggregation engines.

This package contains the pure business logic of the dashboard. Nothing in
here reads files or prints.
"""

from .curriculum_index import CurriculumIndex, build_index
from .software_ledger import SoftwareLedger
from .coverage import CoverageAnalyzer
from .roster import RosterReconciler
from .summary import SoftwareSummaryEngine
from .report import ReportAssembler
from .survey_filter import (
    SurveyFilterCriteria,
    FilterOptions,
    apply_filters,
    filter_options,
    order_semesters,
    unique_values,
    format_timestamp,
)

__all__ = [
    "CurriculumIndex",
    "build_index",
    "SoftwareLedger",
    "CoverageAnalyzer",
    "RosterReconciler",
    "SoftwareSummaryEngine",
    "ReportAssembler",
    "SurveyFilterCriteria",
    "FilterOptions",
    "apply_filters",
    "filter_options",
    "order_semesters",
    "unique_values",
    "format_timestamp",
]
