"""
Report Assembly Engine.

This module builds the report payload: a plain nested dict with every
number and list the report layout needs. Layout and pagination are not done
here; the payload can be exported as JSON or handed to any renderer.
"""

import math
from datetime import datetime
from typing import Optional

from ..config import (
    KB_PER_PAGE,
    NONE_FEMININE,
    NONE_MASCULINE,
    PERIOD_ORDER,
    PERIODS_PER_PAGE,
    TEACHER_ROWS_PER_PAGE,
    UNCLASSIFIED_PERIOD,
    UNRESOLVED_COURSE_MARK,
    UNSPECIFIED,
    UNSPECIFIED_PROGRAM,
)
from ..models import CurriculumTree, DataAvailability, ReportConfig
from ..normalize import is_no_data, normalize
from .coverage import CoverageAnalyzer
from .curriculum_index import CurriculumIndex
from .software_ledger import SoftwareLedger


class ReportAssembler:
    """
    Collects report sections from the engines.

    PAYLOAD SHAPE:
        {
            "metadata": {generated_date, generated_time, has_rows, ...},
            "summary": {total_rows, distinct_software, coverage_percent, program},
            "software_by_period": {period: {course: [software, ...]}},
            "teacher_detail": [{teacher, course, semester, software_windows, ...}],
            "coverage": {"periods": {period: {...}}, "teachers": {...}},
            "recommendations": {"general": [...], "devices": [...]},
        }

    Sections switched off in ReportConfig are left out entirely. Sections
    that need a curriculum are left out when there is none, whatever the
    config says. Percentages are exact floats; rounding is for display.
    """

    def __init__(self, ledger: Optional[SoftwareLedger] = None):
        self.ledger = ledger or SoftwareLedger()
        self.coverage_analyzer = CoverageAnalyzer(self.ledger)

    # ------------------------------------------------------------------
    # Availability and preview
    # ------------------------------------------------------------------

    def availability(self, rows, roster, curriculum: Optional[CurriculumTree]) -> DataAvailability:
        rows = list(rows)
        roster = list(roster or ())
        coverage = self.coverage_analyzer.analyze(curriculum, rows)
        return DataAvailability(
            has_rows=len(rows) > 0,
            has_roster=len(roster) > 0,
            has_curriculum=curriculum is not None,
            total_rows=len(rows),
            total_teachers=len(roster),
            total_periods=len(curriculum.periods) if curriculum else 0,
            distinct_software=len(self.ledger.accumulate(rows)),
            coverage_percent=coverage.coverage_percent,
            # Row count over roster size; repeat answers by one teacher add up.
            # TODO: switch to distinct teachers once the survey owners confirm
            # which figure the "cobertura de docentes" box should show.
            survey_to_roster_ratio=(len(rows) / len(roster)) if roster else 0.0,
        )

    @staticmethod
    def estimate_pages(config: ReportConfig, availability: DataAvailability) -> int:
        pages = 1  # cover
        if config.include_summary:
            pages += 1
        if config.include_software_by_period and availability.has_curriculum:
            pages += math.ceil(availability.total_periods / PERIODS_PER_PAGE)
        if config.include_teacher_detail and availability.has_rows:
            pages += math.ceil(availability.total_rows / TEACHER_ROWS_PER_PAGE)
        if config.include_coverage:
            pages += 1
        if config.include_recommendations:
            pages += 1
        return pages

    @staticmethod
    def count_active_sections(config: ReportConfig, availability: DataAvailability) -> int:
        return sum([
            config.include_summary,
            config.include_software_by_period and availability.has_curriculum,
            config.include_teacher_detail and availability.has_rows,
            config.include_coverage and availability.has_curriculum and availability.has_roster,
            config.include_recommendations and availability.has_rows,
        ])

    def estimate_size_kb(self, config: ReportConfig, availability: DataAvailability) -> int:
        return self.estimate_pages(config, availability) * KB_PER_PAGE

    # ------------------------------------------------------------------
    # Payload
    # ------------------------------------------------------------------

    def assemble(self, rows, roster=None, curriculum: Optional[CurriculumTree] = None,
                 config: Optional[ReportConfig] = None,
                 generated_at: Optional[datetime] = None) -> dict:
        """
        Build the report payload.

        Args:
            rows: Iterable of SurveyRow
            roster: Iterable of teacher names, or None
            curriculum: Study plan, or None
            config: Sections to include (defaults depend on the inputs)
            generated_at: Timestamp for the metadata block (default: now)
        """
        rows = list(rows)
        roster = list(roster or ())
        if config is None:
            config = ReportConfig.defaults_for(bool(rows), bool(roster), curriculum is not None)
        generated_at = generated_at or datetime.now()

        available = self.availability(rows, roster, curriculum)
        index = CurriculumIndex(curriculum)

        payload = {
            "metadata": {
                "generated_date": generated_at.strftime("%d/%m/%Y"),
                "generated_time": generated_at.strftime("%H:%M:%S"),
                "has_rows": available.has_rows,
                "has_roster": available.has_roster,
                "has_curriculum": available.has_curriculum,
                "total_rows": available.total_rows,
                "total_teachers": available.total_teachers,
                "total_periods": available.total_periods,
                "distinct_software": available.distinct_software,
                "coverage_percent": available.coverage_percent,
                "survey_to_roster_ratio": available.survey_to_roster_ratio,
            },
        }

        if config.include_summary:
            payload["summary"] = {
                "total_rows": available.total_rows,
                "distinct_software": available.distinct_software,
                "coverage_percent": available.coverage_percent,
                "program": curriculum.program if curriculum and curriculum.program else UNSPECIFIED_PROGRAM,
            }

        if config.include_software_by_period and curriculum is not None:
            payload["software_by_period"] = self.software_by_period(rows, index)

        if config.include_teacher_detail:
            payload["teacher_detail"] = self.teacher_detail(rows)

        if config.include_coverage and curriculum is not None:
            payload["coverage"] = self.coverage_section(rows, roster, curriculum, index)

        if config.include_recommendations:
            payload["recommendations"] = self.recommendations(rows)

        return payload

    def software_by_period(self, rows, index: CurriculumIndex) -> dict:
        """
        {period: {course: [distinct software names]}}

        Courses matching the plan use the canonical name. Others keep the
        typed name with a " (*)" mark and go under "Sin clasificar".
        Periods follow PERIOD_ORDER, then other plan periods, then the
        unclassified bucket.
        """
        grouped = {}
        for row in rows:
            raw_course = row.course.strip() or UNSPECIFIED
            entry = index.lookup(raw_course)
            if entry is not None:
                period_name, display = entry.period_name, entry.canonical_name
            else:
                period_name, display = UNCLASSIFIED_PERIOD, raw_course + UNRESOLVED_COURSE_MARK
            grouped.setdefault(period_name, {}).setdefault(display, []).append(row)

        plan_order = [p.name for p in index.curriculum.periods] if index.curriculum else []
        order = [name for name in PERIOD_ORDER if name in grouped]
        order += [name for name in plan_order if name in grouped and name not in order]
        order += [name for name in grouped if name not in order and name != UNCLASSIFIED_PERIOD]
        if UNCLASSIFIED_PERIOD in grouped:
            order.append(UNCLASSIFIED_PERIOD)

        return {
            period_name: {
                course: self.ledger.distinct_names(course_rows)
                for course, course_rows in grouped[period_name].items()
            }
            for period_name in order
        }

    @staticmethod
    def teacher_detail(rows) -> list:
        """One line per survey row, with no-data answers spelled out."""
        return [
            {
                "teacher": row.teacher or UNSPECIFIED,
                "course": row.course or UNSPECIFIED,
                "semester": row.semester or UNSPECIFIED,
                "software_windows": row.software_windows or NONE_MASCULINE,
                "software_linux": row.software_linux or NONE_MASCULINE,
                "software_recommended": row.software_recommended or NONE_MASCULINE,
                "extra_devices": row.extra_devices or NONE_MASCULINE,
                "recommendations": row.recommendations or NONE_FEMININE,
            }
            for row in rows
        ]

    def coverage_section(self, rows, roster, curriculum: CurriculumTree,
                         index: Optional[CurriculumIndex] = None) -> dict:
        coverage = self.coverage_analyzer.analyze(curriculum, rows, index=index)
        surveyed = {normalize(row.teacher) for row in rows if normalize(row.teacher)}
        roster = list(roster or ())
        return {
            "periods": {
                stat.period_name: {
                    "total_courses": stat.total_courses,
                    "covered_courses": stat.covered_courses,
                    "uncovered": list(stat.uncovered),
                    "coverage_percent": stat.coverage_percent,
                }
                for stat in coverage.per_period
            },
            "teachers": {
                "total_teachers": len(roster),
                "surveyed_teachers": len(surveyed),
                "coverage_percent": (len(surveyed) / len(roster) * 100) if roster else 0.0,
            },
        }

    @staticmethod
    def recommendations(rows) -> dict:
        return {
            "general": [
                {"teacher": row.teacher, "course": row.course, "recommendation": row.recommendations}
                for row in rows if not is_no_data(row.recommendations)
            ],
            "devices": [
                {"teacher": row.teacher, "course": row.course, "devices": row.extra_devices}
                for row in rows if not is_no_data(row.extra_devices)
            ],
        }
