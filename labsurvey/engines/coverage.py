"""
Curriculum Coverage Engine.

This module measures how much of the study plan the survey reached.
"""

from typing import Optional

from ..models import CoverageReport, CoverageStat, CurriculumTree
from .curriculum_index import CurriculumIndex
from .software_ledger import SoftwareLedger


class CoverageAnalyzer:
    """
    Computes per-period and global survey coverage.

    COVERAGE EXPLAINED:
    ------------------
    Every period lists course slots. Elective slots are expanded into their
    option courses, so a period with 4 direct courses and one elective with
    3 options has 7 concrete courses.

    A concrete course is covered when at least one survey row's course field
    resolves (through CurriculumIndex) to exactly that course name. Rows that
    do not resolve never cover anything; they end up in the "Sin clasificar"
    bucket of the software summary instead.

    Fractions are exact (3/5 = 0.6). A period without courses reports 0.
    """

    def __init__(self, ledger: Optional[SoftwareLedger] = None):
        self.ledger = ledger or SoftwareLedger()

    def covered_names(self, index: CurriculumIndex, rows) -> set:
        """Canonical names of all plan courses mentioned by at least one row."""
        covered = set()
        for row in rows:
            canonical = index.resolve(row.course)
            if canonical is not None:
                covered.add(canonical)
        return covered

    def analyze(self, curriculum: Optional[CurriculumTree], rows,
                software_by_period: Optional[dict] = None,
                index: Optional[CurriculumIndex] = None) -> CoverageReport:
        """
        Coverage of a curriculum by a set of survey rows.

        Args:
            curriculum: Study plan, or None (empty report)
            rows: Iterable of SurveyRow
            software_by_period: Optional {period_id: {course: [SoftwareEntry]}}
                used for the distinct software count of each period
            index: Prebuilt index for `curriculum`, built here when omitted

        Returns:
            CoverageReport with one CoverageStat per period, in plan order
        """
        if curriculum is None:
            return CoverageReport()

        index = index or CurriculumIndex(curriculum)
        covered = self.covered_names(index, rows)
        software_by_period = software_by_period or {}

        report = CoverageReport()
        for period in curriculum.periods:
            names = period.course_names()
            covered_list = [name for name in names if name in covered]
            uncovered = [name for name in names if name not in covered]

            report.per_period.append(CoverageStat(
                period_id=period.period_id,
                period_name=period.name,
                total_courses=len(names),
                covered_courses=len(covered_list),
                uncovered=uncovered,
                distinct_software=self._distinct_software(software_by_period.get(period.period_id)),
            ))
            report.total_courses += len(names)
            report.total_covered += len(covered_list)

        return report

    def _distinct_software(self, courses: Optional[dict]) -> int:
        """Size of the set of software keys across all course ledgers of a period."""
        if not courses:
            return 0
        keys = set()
        for entries in courses.values():
            keys |= self.ledger.distinct_keys(entries)
        return len(keys)
