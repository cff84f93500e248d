"""
Software summary tests.

Tests cover:
- Grouping by plan period with canonical names
- Unclassified bucket and unresolved-reference warnings
- Per-course merged ledgers and survey counts
- Global ranking
"""

import pytest

from labsurvey.config import UNCLASSIFIED_PERIOD, UNDEFINED_COURSE
from labsurvey.data import CurriculumParser
from labsurvey.engines import SoftwareSummaryEngine
from labsurvey.errors import WarningKind
from labsurvey.models import SortDirection

from tests.conftest import course, make_row


@pytest.fixture
def engine():
    return SoftwareSummaryEngine()


class TestWithCurriculum:
    def test_periods_in_plan_order_unclassified_last(self, engine, survey_rows, curriculum):
        summary = engine.summarize(survey_rows, curriculum)
        assert summary.periods() == [
            "PERIODO DE FORMACIÓN 1",
            "PERIODO DE FORMACIÓN 2",
            UNCLASSIFIED_PERIOD,
        ]

    def test_empty_plan_periods_are_dropped(self, engine, curriculum):
        summary = engine.summarize([make_row(course="Redes", windows="GNS3")], curriculum)
        assert summary.periods() == ["PERIODO DE FORMACIÓN 1"]

    def test_rows_fold_into_canonical_course(self, engine, survey_rows, curriculum):
        summary = engine.summarize(survey_rows, curriculum)
        period = "PERIODO DE FORMACIÓN 1"
        assert summary.courses_in(period) == ["Cálculo Diferencial", "Programación I"]
        assert summary.surveys_per_course["Cálculo Diferencial"] == 2

        entries = summary.software_for(period, "Cálculo Diferencial")
        assert [(e.name, e.total) for e in entries] == [("GeoGebra", 1), ("MATLAB", 2), ("Octave", 1)]

    def test_unresolved_course_warns_once(self, engine, curriculum):
        rows = [
            make_row(course="Taller de Robótica", windows="ROS"),
            make_row(course="Taller de Robótica", windows="Gazebo"),
        ]
        summary = engine.summarize(rows, curriculum)

        assert summary.software_for(UNCLASSIFIED_PERIOD, "Taller de Robótica")
        assert len(summary.warnings) == 1
        warning = summary.warnings[0]
        assert warning.kind is WarningKind.UNRESOLVED_REFERENCE
        assert warning.subject == "Taller de Robótica"

    def test_elective_slot_name_is_unclassified(self, engine, curriculum):
        summary = engine.summarize([make_row(course="Electiva I")], curriculum)
        assert summary.periods() == [UNCLASSIFIED_PERIOD]

    def test_periods_sharing_a_name_show_as_one_section(self, engine):
        data = {"periodos": {
            "1": {"nombre": "ELECTIVAS", "asignaturas": [course("A", "Redes")]},
            "2": {"nombre": "ELECTIVAS", "asignaturas": [course("B", "Robótica")]},
        }}
        rows = [make_row(course="Robótica", windows="ROS"), make_row(course="Redes", windows="GNS3")]
        summary = engine.summarize(rows, CurriculumParser().parse(data))
        assert summary.periods() == ["ELECTIVAS"]
        assert summary.courses_in("ELECTIVAS") == ["Redes", "Robótica"]

    def test_coverage_is_attached(self, engine, survey_rows, curriculum):
        summary = engine.summarize(survey_rows, curriculum)
        stat = summary.coverage.for_period("PERIODO DE FORMACIÓN 1")
        assert (stat.covered_courses, stat.total_courses) == (2, 5)
        assert stat.distinct_software == 7


class TestWithoutCurriculum:
    def test_everything_is_unclassified(self, engine, survey_rows):
        summary = engine.summarize(survey_rows)
        assert summary.periods() == [UNCLASSIFIED_PERIOD]
        assert "calculo diferencial" in summary.courses_in(UNCLASSIFIED_PERIOD)

    def test_no_warnings_or_coverage(self, engine, survey_rows):
        summary = engine.summarize(survey_rows)
        assert summary.warnings == []
        assert summary.coverage is None

    def test_blank_course(self, engine):
        summary = engine.summarize([make_row(course="  ", windows="Excel")])
        assert summary.courses_in(UNCLASSIFIED_PERIOD) == [UNDEFINED_COURSE]


class TestGlobalRanking:
    def test_descending_by_total(self, engine, survey_rows):
        summary = engine.summarize(survey_rows)
        top = [(e.name, e.total) for e in summary.global_entries[:2]]
        assert top == [("MATLAB", 2), ("Python", 2)]

    def test_ascending(self, engine, survey_rows):
        summary = engine.summarize(survey_rows, direction=SortDirection.ASC)
        assert [e.total for e in summary.global_entries][-2:] == [2, 2]

    def test_empty_rows(self, engine):
        summary = engine.summarize([])
        assert summary.global_entries == []
        assert summary.by_period == {}
