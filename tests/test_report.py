"""
Report assembly tests.

Tests cover:
- Default section selection
- Availability figures and preview estimates
- Payload sections, period ordering and unresolved-course marking
- Teacher detail placeholders and recommendation filtering
"""

from datetime import datetime

import pytest

from labsurvey.config import UNCLASSIFIED_PERIOD, UNSPECIFIED_PROGRAM
from labsurvey.data import CurriculumParser
from labsurvey.engines import CurriculumIndex, ReportAssembler
from labsurvey.models import ReportConfig

from tests.conftest import course, make_row


ROSTER = ("Ana López", "Luis Pérez")


@pytest.fixture
def assembler():
    return ReportAssembler()


# ---------------------------------------------------------------------------
# Configuration and availability
# ---------------------------------------------------------------------------

class TestConfig:
    def test_defaults_with_everything_loaded(self):
        config = ReportConfig.defaults_for(True, True, True)
        assert config == ReportConfig(True, True, True, True, True)

    def test_defaults_without_inputs(self):
        config = ReportConfig.defaults_for(False, False, False)
        assert config.include_summary
        assert config.include_recommendations
        assert not config.include_software_by_period
        assert not config.include_teacher_detail
        assert not config.include_coverage

    def test_coverage_needs_plan_and_roster(self):
        assert not ReportConfig.defaults_for(True, False, True).include_coverage
        assert not ReportConfig.defaults_for(True, True, False).include_coverage


class TestAvailability:
    def test_figures(self, assembler, survey_rows, curriculum):
        available = assembler.availability(survey_rows, ROSTER, curriculum)
        assert available.total_rows == 5
        assert available.total_teachers == 2
        assert available.total_periods == 2
        assert available.distinct_software == 11
        assert available.coverage_percent == pytest.approx(300 / 7)

    def test_ratio_counts_rows_not_teachers(self, assembler, survey_rows):
        available = assembler.availability(survey_rows, ROSTER, None)
        assert available.survey_to_roster_ratio == 2.5

    def test_ratio_without_roster(self, assembler, survey_rows):
        available = assembler.availability(survey_rows, None, None)
        assert available.survey_to_roster_ratio == 0.0
        assert not available.has_roster


class TestEstimates:
    def test_all_sections(self, assembler, survey_rows, curriculum):
        config = ReportConfig.defaults_for(True, True, True)
        available = assembler.availability(survey_rows, ROSTER, curriculum)
        # cover + summary + 1 period page + 1 teacher page + coverage + recommendations
        assert assembler.estimate_pages(config, available) == 6
        assert assembler.count_active_sections(config, available) == 5
        assert assembler.estimate_size_kb(config, available) == 300

    def test_long_teacher_detail(self, assembler):
        rows = [make_row("Ana", "Redes")] * 31
        config = ReportConfig(include_summary=False, include_teacher_detail=True,
                              include_recommendations=False)
        available = assembler.availability(rows, None, None)
        assert assembler.estimate_pages(config, available) == 1 + 3


# ---------------------------------------------------------------------------
# Payload
# ---------------------------------------------------------------------------

class TestAssemble:
    def test_metadata_timestamp(self, assembler, survey_rows):
        payload = assembler.assemble(survey_rows, generated_at=datetime(2024, 3, 5, 14, 7, 9))
        assert payload["metadata"]["generated_date"] == "05/03/2024"
        assert payload["metadata"]["generated_time"] == "14:07:09"

    def test_sections_follow_defaults(self, assembler, survey_rows, curriculum):
        payload = assembler.assemble(survey_rows, ROSTER, curriculum)
        assert set(payload) == {
            "metadata", "summary", "software_by_period", "teacher_detail", "coverage", "recommendations",
        }
        assert payload["summary"]["program"] == "Ingeniería de Sistemas"

    def test_plan_sections_need_a_plan(self, assembler, survey_rows):
        config = ReportConfig(True, True, True, True, True)
        payload = assembler.assemble(survey_rows, ROSTER, None, config)
        assert "software_by_period" not in payload
        assert "coverage" not in payload
        assert payload["summary"]["program"] == UNSPECIFIED_PROGRAM

    def test_disabled_sections_are_left_out(self, assembler, survey_rows):
        config = ReportConfig(include_summary=False, include_recommendations=False)
        assert set(assembler.assemble(survey_rows, config=config)) == {"metadata"}


class TestSoftwareByPeriod:
    def test_unresolved_courses_are_marked(self, assembler, survey_rows, curriculum):
        section = assembler.software_by_period(survey_rows, CurriculumIndex(curriculum))
        assert section[UNCLASSIFIED_PERIOD] == {"Taller de Robótica (*)": ["Arduino IDE", "ROS"]}
        assert section["PERIODO DE FORMACIÓN 1"]["Cálculo Diferencial"] == ["GeoGebra", "MATLAB", "Octave"]

    def test_period_order(self, assembler):
        data = {"periodos": {
            "0": {"nombre": "NIVELACIÓN", "asignaturas": [course("N", "Lectura Crítica")]},
            "8": {"nombre": "PERIODO DE FORMACIÓN 8", "asignaturas": [course("G", "Gerencia")]},
            "2": {"nombre": "PERIODO DE FORMACIÓN 2", "asignaturas": [course("B", "Bases de Datos")]},
        }}
        index = CurriculumIndex(CurriculumParser().parse(data))
        rows = [
            make_row(course="Taller", windows="ROS"),
            make_row(course="Lectura crítica", windows="Word"),
            make_row(course="Gerencia", windows="Project"),
            make_row(course="Bases de datos", windows="MySQL"),
        ]
        section = assembler.software_by_period(rows, index)
        assert list(section) == [
            "PERIODO DE FORMACIÓN 2",
            "PERIODO DE FORMACIÓN 8",
            "NIVELACIÓN",
            UNCLASSIFIED_PERIOD,
        ]


class TestTeacherDetail:
    def test_placeholders(self):
        detail = ReportAssembler.teacher_detail([make_row()])
        assert detail == [{
            "teacher": "Sin especificar",
            "course": "Sin especificar",
            "semester": "Sin especificar",
            "software_windows": "Ninguno",
            "software_linux": "Ninguno",
            "software_recommended": "Ninguno",
            "extra_devices": "Ninguno",
            "recommendations": "Ninguna",
        }]

    def test_one_line_per_row(self, survey_rows):
        detail = ReportAssembler.teacher_detail(survey_rows)
        assert [d["teacher"] for d in detail] == [r.teacher for r in survey_rows]


class TestCoverageSection:
    def test_teacher_counts_are_distinct(self, assembler, curriculum):
        rows = [make_row("Ana López", "Redes"), make_row("ANA LOPEZ", "Bases de Datos")]
        section = assembler.coverage_section(rows, ROSTER, curriculum)
        assert section["teachers"] == {
            "total_teachers": 2,
            "surveyed_teachers": 1,
            "coverage_percent": 50.0,
        }
        period = section["periods"]["PERIODO DE FORMACIÓN 2"]
        assert period["covered_courses"] == 1
        assert period["uncovered"] == ["Administración de Empresas"]


class TestRecommendations:
    def test_no_data_answers_are_skipped(self, survey_rows):
        section = ReportAssembler.recommendations(survey_rows)
        assert section["general"] == [{
            "teacher": "LUIS PEREZ",
            "course": "calculo diferencial",
            "recommendation": "Actualizar la RAM de los equipos",
        }]
        assert [d["teacher"] for d in section["devices"]] == ["Marta Ruiz", "Pedro Gómez"]
