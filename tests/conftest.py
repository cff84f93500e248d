"""Shared fixtures for the labsurvey test suite."""

import pytest

from labsurvey.config import SURVEY_HEADERS
from labsurvey.data import CurriculumParser
from labsurvey.models import SurveyRow


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_row(teacher="", course="", semester="", windows="", linux="", recommended="",
             devices="", recommendations="") -> SurveyRow:
    return SurveyRow(
        teacher=teacher,
        course=course,
        semester=semester,
        software_windows=windows,
        software_linux=linux,
        software_recommended=recommended,
        extra_devices=devices,
        recommendations=recommendations,
    )


def course(code, name, elective=False, options=None):
    data = {
        "codigo": code,
        "nombre": name,
        "creditos": 3,
        "htd": 2,
        "htc": 1,
        "hta": 6,
        "clasificacion": "Obligatoria" if not elective else "Electiva",
        "es_electiva": elective,
    }
    if options is not None:
        data["grupo_electiva"] = name
        data["opciones"] = options
    return data


def survey_csv(rows: list) -> str:
    """Render dicts keyed by SurveyRow attribute as a ';'-separated survey CSV."""
    headers = list(SURVEY_HEADERS.values())
    lines = [";".join(headers)]
    for row in rows:
        lines.append(";".join(row.get(attr, "") for attr in SURVEY_HEADERS))
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def plan_data():
    """
    Two periods. Period 1 has five concrete courses, one of them reached
    through an elective slot; period 2 has two courses.
    """
    return {
        "carrera": "Ingeniería de Sistemas",
        "plan_estudios": "PE-2023",
        "estructura": {
            "tecnologia": "Tecnología en Desarrollo de Software",
            "componente_propedeutico": "Componente Propedéutico",
            "ingenieria": "Ingeniería de Sistemas",
        },
        "periodos": {
            "1": {
                "nombre": "PERIODO DE FORMACIÓN 1",
                "total_creditos": 15,
                "asignaturas": [
                    course("MAT-101", "Cálculo Diferencial"),
                    course("ALG-101", "Álgebra Lineal"),
                    course("PRG-101", "Programación I"),
                    course("RED-101", "Redes"),
                    course("ELE-101", "Electiva I", elective=True, options=[
                        course("ELE-111", "Computación en la Nube"),
                    ]),
                ],
            },
            "2": {
                "nombre": "PERIODO DE FORMACIÓN 2",
                "total_creditos": 6,
                "asignaturas": [
                    course("BD-201", "Bases de Datos"),
                    course("ADM-201", "Administración de Empresas"),
                ],
            },
        },
    }


@pytest.fixture
def curriculum(plan_data):
    return CurriculumParser().parse(plan_data)


@pytest.fixture
def elective_plan_data():
    return {
        "carrera": "Ingeniería",
        "plan_estudios": "PE-1",
        "periodos": {
            "7": {
                "nombre": "PERIODO DE FORMACIÓN 7",
                "total_creditos": 9,
                "asignaturas": [
                    course("SEG-701", "Seguridad Informática"),
                    course("ELP-701", "Electiva Profesional", elective=True, options=[
                        course("ELP-711", "Inteligencia Artificial"),
                        course("ELP-712", "Internet de las Cosas"),
                    ]),
                ],
            },
        },
    }


@pytest.fixture
def survey_rows():
    return [
        make_row("Ana López", "Cálculo Diferencial", "SEMESTRE I", windows="GeoGebra, MATLAB",
                 linux="Octave", recommended="Ninguno"),
        make_row("LUIS PEREZ", "calculo diferencial", "SEMESTRE I", windows="matlab",
                 recommendations="Actualizar la RAM de los equipos"),
        make_row("Marta Ruiz", "Programación I", "SEMESTRE I", windows="Visual Studio Code, Python",
                 linux="Python, gcc", recommended="PyCharm", devices="Arduino"),
        make_row("Ana López", "Bases de Datos", "SEMESTRE II", windows="MySQL Workbench",
                 linux="PostgreSQL", recommended="Ninguna", devices="Ninguno"),
        make_row("Pedro Gómez", "Taller de Robótica", "OTRO", windows="Arduino IDE",
                 recommended="ROS", devices="Kits de robótica, sensores"),
    ]
