"""
Input parsing.

This module converts loader output (CSV dicts, JSON objects, roster text)
into the typed records the engines work with. Validation happens here, once;
engines never see untyped data.
"""

import logging

from ..config import SURVEY_HEADERS, ROSTER_SEPARATOR
from ..errors import MalformedInputError
from ..models import SurveyRow, Course, Period, CurriculumTree, slot_for

logger = logging.getLogger(__name__)


class SurveyParser:
    """
    Maps survey CSV records onto SurveyRow.

    FIELD MAPPING:
    Each SurveyRow attribute reads one fixed Spanish header (see
    config.SURVEY_HEADERS). A missing header or cell becomes "". Extra
    columns (Id, e-mail, ...) are ignored.
    """

    def parse(self, records: list) -> list:
        """
        Convert CSV records to SurveyRow objects.

        Returns:
            List of SurveyRow, in file order. An empty list is a valid result
            (the dashboard reports it as an empty dataset).
        """
        if records:
            missing = [h for h in SURVEY_HEADERS.values() if h not in records[0]]
            if len(missing) == len(SURVEY_HEADERS):
                logger.warning("Survey CSV has none of the expected headers; all fields will be empty")
            elif missing:
                logger.warning("Survey CSV is missing %d expected headers: %s", len(missing), missing)

        return [self.parse_record(record) for record in records]

    def parse_record(self, record: dict) -> SurveyRow:
        values = {}
        for attribute, header in SURVEY_HEADERS.items():
            value = record.get(header)
            values[attribute] = value if isinstance(value, str) else ""
        return SurveyRow(**values)


class CurriculumParser:
    """
    Builds a CurriculumTree from the study plan JSON.

    EXPECTED SHAPE:
        {
            "carrera": "...",
            "plan_estudios": "...",
            "estructura": {...},
            "periodos": {
                "1": {"nombre": "...", "asignaturas": [Course, ...], "total_creditos": 18},
                ...
            }
        }

    Course objects may carry "opciones" (a list of Course objects) when
    "es_electiva" is true. Period order follows the JSON object order.
    """

    def parse(self, data: dict, source: str = "plan") -> CurriculumTree:
        periods_raw = data.get("periodos")
        if not isinstance(periods_raw, dict):
            raise MalformedInputError(source, "falta el objeto 'periodos' en el plan de estudios")

        periods = []
        for period_id, period_data in periods_raw.items():
            if not isinstance(period_data, dict):
                raise MalformedInputError(source, f"el período '{period_id}' no es un objeto")
            periods.append(self._parse_period(str(period_id), period_data, source))

        structure = data.get("estructura")
        tree = CurriculumTree(
            program=str(data.get("carrera") or ""),
            plan_id=str(data.get("plan_estudios") or ""),
            structure=dict(structure) if isinstance(structure, dict) else {},
            periods=tuple(periods),
        )
        logger.info("Loaded curriculum '%s' with %d periods", tree.program, len(tree.periods))
        return tree

    def _parse_period(self, period_id: str, data: dict, source: str) -> Period:
        courses_raw = data.get("asignaturas") or []
        if not isinstance(courses_raw, list):
            raise MalformedInputError(source, f"'asignaturas' del período '{period_id}' no es una lista")

        slots = []
        for entry in courses_raw:
            course = self._parse_course(entry, source)
            if course is not None:
                slots.append(slot_for(course))

        return Period(
            period_id=period_id,
            name=str(data.get("nombre") or period_id),
            slots=tuple(slots),
            total_credits=_as_number(data.get("total_creditos")),
        )

    def _parse_course(self, data, source: str):
        """Parse one course object; entries without a name are skipped."""
        if not isinstance(data, dict):
            logger.warning("Skipping non-object course entry in %s: %r", source, data)
            return None
        name = data.get("nombre")
        if not isinstance(name, str) or not name.strip():
            logger.warning("Skipping course without a name in %s: %r", source, data.get("codigo"))
            return None

        options_raw = data.get("opciones")
        if options_raw is None:
            options_raw = []
        elif not isinstance(options_raw, list):
            raise MalformedInputError(source, f"'opciones' de '{name}' no es una lista")

        options = []
        for option in options_raw:
            parsed = self._parse_course(option, source)
            if parsed is not None:
                options.append(parsed)

        group = data.get("grupo_electiva")
        return Course(
            code=str(data.get("codigo") or ""),
            name=name,
            credits=_as_number(data.get("creditos")),
            htd=_as_number(data.get("htd")),
            htc=_as_number(data.get("htc")),
            hta=_as_number(data.get("hta")),
            classification=str(data.get("clasificacion") or ""),
            is_elective=bool(data.get("es_electiva")),
            elective_group=str(group) if group else None,
            options=tuple(options),
        )


def parse_roster(text: str, source: str = "roster") -> tuple:
    """
    Split a roster file into canonical teacher names.

    Names are comma-separated; whitespace is trimmed and empty tokens are
    dropped. Casing is preserved. A roster with no names is malformed.
    """
    names = tuple(
        name.strip()
        for name in text.split(ROSTER_SEPARATOR)
        if name.strip()
    )
    if not names:
        raise MalformedInputError(source, "el archivo no contiene nombres de docentes válidos")
    logger.info("Loaded roster with %d teachers", len(names))
    return names


def _as_number(value) -> float:
    """Best-effort numeric conversion; unparseable values become 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0
