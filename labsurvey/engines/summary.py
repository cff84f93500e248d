"""
Software Summary Engine.

This module builds the software summary view: global software ranking,
software per period and course, and curriculum coverage.
"""

import logging
from typing import Optional

from ..config import UNCLASSIFIED_PERIOD, UNDEFINED_COURSE
from ..errors import DatasetWarning, WarningKind
from ..models import CurriculumTree, SoftwareSummary, SortDirection
from .coverage import CoverageAnalyzer
from .curriculum_index import CurriculumIndex
from .software_ledger import SoftwareLedger

logger = logging.getLogger(__name__)


class SoftwareSummaryEngine:
    """
    Folds survey rows into the three summary views.

    HIERARCHICAL VIEW:
    Each row's course is resolved against the plan. Resolved rows go under
    their plan period using the canonical course name; unresolved rows keep
    the name as typed (blank -> "Sin definir") under "Sin clasificar".
    A course answered by several teachers gets one merged ledger.

    GLOBAL VIEW:
    One ledger over all rows, sorted by total mentions.

    COVERAGE VIEW:
    Only when a curriculum is loaded (see CoverageAnalyzer).
    """

    def __init__(self, ledger: Optional[SoftwareLedger] = None):
        self.ledger = ledger or SoftwareLedger()
        self.coverage_analyzer = CoverageAnalyzer(self.ledger)

    def summarize(self, rows, curriculum: Optional[CurriculumTree] = None,
                  direction: SortDirection = SortDirection.DESC) -> SoftwareSummary:
        rows = list(rows)
        index = CurriculumIndex(curriculum)

        # Grouped by period_id (None for unclassified); plan names may repeat
        by_period_id = {}
        if curriculum is not None:
            for period in curriculum.periods:
                by_period_id.setdefault(period.period_id, {})

        surveys_per_course = {}
        warnings = []
        unresolved_seen = set()

        for row in rows:
            raw_course = row.course.strip() or UNDEFINED_COURSE
            entry = index.lookup(raw_course)

            if entry is not None:
                course_name = entry.canonical_name
                period_id = entry.period_id
            else:
                course_name = raw_course
                period_id = None
                if curriculum is not None and raw_course not in unresolved_seen:
                    unresolved_seen.add(raw_course)
                    logger.debug("No curriculum period found for course '%s'", raw_course)
                    warnings.append(DatasetWarning(
                        kind=WarningKind.UNRESOLVED_REFERENCE,
                        message=f"La asignatura '{raw_course}' no coincide con el plan de estudios",
                        subject=raw_course,
                    ))

            surveys_per_course[course_name] = surveys_per_course.get(course_name, 0) + 1

            courses = by_period_id.setdefault(period_id, {})
            row_ledger = self.ledger.accumulate([row])
            courses[course_name] = self.ledger.merge(courses.get(course_name, []), row_ledger)

        # Display map: plan order, empty periods dropped, "Sin clasificar" last.
        # Periods sharing a name are shown as one section.
        by_period = {}
        for period in (curriculum.periods if curriculum is not None else ()):
            courses = by_period_id.get(period.period_id)
            if courses:
                by_period.setdefault(period.name, {}).update(courses)
        if by_period_id.get(None):
            by_period.setdefault(UNCLASSIFIED_PERIOD, {}).update(by_period_id[None])
            by_period[UNCLASSIFIED_PERIOD] = by_period.pop(UNCLASSIFIED_PERIOD)

        global_entries = self.ledger.sort_by_total_mentions(self.ledger.accumulate(rows), direction)

        coverage = None
        if curriculum is not None:
            coverage = self.coverage_analyzer.analyze(curriculum, rows, by_period_id, index)

        return SoftwareSummary(
            global_entries=global_entries,
            by_period=by_period,
            surveys_per_course=surveys_per_course,
            coverage=coverage,
            warnings=warnings,
        )
