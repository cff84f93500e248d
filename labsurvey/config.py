"""
Configuration constants for the survey dashboard.

This module contains all configuration values and constants used throughout
the reconciliation and aggregation engines. Centralizing these makes it easy
to adjust behavior when the survey form or the curriculum format changes.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_REPORT_PATH = DATA_DIR / "reporte_encuestas.json"


# =============================================================================
# SURVEY CSV FORMAT
# =============================================================================
# The survey is exported from a Spanish-language form. Column headers are the
# literal question texts, so they must match character for character.

CSV_DELIMITER = ";"
CSV_ENCODING = "utf-8-sig"  # tolerates the BOM some spreadsheet tools write

HEADER_STARTED_AT = "Hora de inicio"
HEADER_FINISHED_AT = "Hora de finalización"
HEADER_TEACHER = "Nombre del docente"
HEADER_COURSE = "Asignatura(s) que imparte"
HEADER_SEMESTER = "Semestre"
HEADER_SOFTWARE_WINDOWS = "¿Qué software utiliza en windows para su asignatura?"
HEADER_SOFTWARE_LINUX = "¿Qué software utiliza en ubuntu para su asignatura?"
HEADER_SOFTWARE_RECOMMENDED = (
    "¿Qué software adicional recomendaría incorporar para la asignatura(s)?"
)
HEADER_EXTRA_DEVICES = (
    "¿Requiere algún dispositivos y/o elementos además de los computadores (IoT, redes...)"
)
HEADER_RECOMMENDATIONS = (
    "¿Tiene alguna recomendación o sugerencia adicional respecto a los equipos "
    "de cómputo con los que cuentan actualmente los laboratorios?"
)

# SurveyRow attribute -> CSV header
SURVEY_HEADERS = {
    "started_at": HEADER_STARTED_AT,
    "finished_at": HEADER_FINISHED_AT,
    "teacher": HEADER_TEACHER,
    "course": HEADER_COURSE,
    "semester": HEADER_SEMESTER,
    "software_windows": HEADER_SOFTWARE_WINDOWS,
    "software_linux": HEADER_SOFTWARE_LINUX,
    "software_recommended": HEADER_SOFTWARE_RECOMMENDED,
    "extra_devices": HEADER_EXTRA_DEVICES,
    "recommendations": HEADER_RECOMMENDATIONS,
}

# Roster files are plain text with comma-separated names
ROSTER_SEPARATOR = ","


# =============================================================================
# NO-DATA SENTINELS
# =============================================================================

# Teachers answer "Ninguno" (masculine) or "Ninguna" (feminine) when a
# question does not apply. Both mean "no data", compared case-insensitively.
NO_DATA_SENTINELS = {"ninguno", "ninguna"}

# Placeholders used when rendering a no-data field back to the user
NONE_MASCULINE = "Ninguno"
NONE_FEMININE = "Ninguna"


# =============================================================================
# FALLBACK LABELS
# =============================================================================

UNCLASSIFIED_PERIOD = "Sin clasificar"   # bucket for courses not in the plan
UNDEFINED_COURSE = "Sin definir"         # blank course in the software summary
UNSPECIFIED = "Sin especificar"          # blank fields in the report payload
UNSPECIFIED_PROGRAM = "No especificada"  # report summary without a plan
UNRESOLVED_COURSE_MARK = " (*)"          # suffix for unmatched courses in reports


# =============================================================================
# DISPLAY ORDERS
# =============================================================================

# Semester filter options follow the academic sequence, not alphabetical order.
# Values not listed here are appended after these in first-seen order.
SEMESTER_ORDER = [
    "SEMESTRE I",
    "SEMESTRE II",
    "SEMESTRE III",
    "SEMESTRE IV",
    "SEMESTRE V",
    "SEMESTRE VI",
    "COMPONENTE PROPEDEUTICO",
    "OTRO",
]

# Period sections in the report. The propaedeutic component sits between
# the technology cycle (1-6) and the engineering cycle (7-10).
PERIOD_ORDER = [
    "PERIODO DE FORMACIÓN 1",
    "PERIODO DE FORMACIÓN 2",
    "PERIODO DE FORMACIÓN 3",
    "PERIODO DE FORMACIÓN 4",
    "PERIODO DE FORMACIÓN 5",
    "PERIODO DE FORMACIÓN 6",
    "COMPONENTE PROPEDÉUTICO",
    "PERIODO DE FORMACIÓN 7",
    "PERIODO DE FORMACIÓN 8",
    "PERIODO DE FORMACIÓN 9",
    "PERIODO DE FORMACIÓN 10",
]


# =============================================================================
# REPORT PREVIEW ESTIMATES
# =============================================================================
# Rough numbers shown before a report is generated. They are estimates for
# the user, not layout rules.

PERIODS_PER_PAGE = 2
TEACHER_ROWS_PER_PAGE = 15
KB_PER_PAGE = 50
