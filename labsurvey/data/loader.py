"""
File loading.

This module is the only place in the package that touches the filesystem.
It turns files into Python primitives (text, CSV records, JSON objects) and
hands them to the parsers; it never builds domain records itself.
"""

import csv
import io
import json
import logging
from pathlib import Path

from ..config import CSV_DELIMITER, CSV_ENCODING
from ..errors import MalformedInputError

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Reads the three dashboard inputs and writes report exports.

    FAILURE MODEL:
    Every read failure (missing file, undecodable bytes, invalid JSON,
    broken CSV quoting) surfaces as MalformedInputError so callers only have
    one exception to handle. The original exception is chained.

    Usage:
        loader = DataLoader()
        records = loader.load_survey_records("encuestas.csv")
        plan = loader.load_curriculum_json("plan.json")
        names_text = loader.load_text("docentes.txt")
    """

    def __init__(self, encoding: str = CSV_ENCODING):
        self.encoding = encoding

    def load_text(self, path) -> str:
        """Read a whole file as text."""
        path = Path(path)
        try:
            with open(path, "r", encoding=self.encoding) as f:
                return f.read()
        except UnicodeDecodeError as exc:
            raise MalformedInputError(path.name, "el archivo no es texto UTF-8 válido") from exc
        except OSError as exc:
            raise MalformedInputError(path.name, f"no se pudo leer el archivo ({exc.strerror})") from exc

    def load_survey_records(self, path) -> list:
        """
        Read the survey CSV into a list of dicts keyed by header.

        Blank lines are skipped. Header names are stripped of surrounding
        whitespace; values are left exactly as written.
        """
        text = self.load_text(path)
        return self.parse_survey_text(text, source=Path(path).name)

    def parse_survey_text(self, text: str, source: str = "csv") -> list:
        """Same as load_survey_records but for text already in memory."""
        if not text.strip():
            return []

        try:
            reader = csv.DictReader(io.StringIO(text), delimiter=CSV_DELIMITER)
            fieldnames = [name.strip() if name else name for name in (reader.fieldnames or [])]
            records = []
            for raw in reader:
                record = {}
                for key, header in zip(reader.fieldnames, fieldnames):
                    value = raw.get(key)
                    record[header] = value if value is not None else ""
                # Lines made only of delimiters count as empty lines
                if not any(v.strip() for v in record.values()):
                    continue
                records.append(record)
        except csv.Error as exc:
            raise MalformedInputError(source, f"CSV inválido ({exc})") from exc

        logger.info("Loaded %d survey records from %s", len(records), source)
        return records

    def load_curriculum_json(self, path) -> dict:
        """Read the study plan JSON. The top level must be an object."""
        path = Path(path)
        text = self.load_text(path)
        return self.parse_curriculum_text(text, source=path.name)

    def parse_curriculum_text(self, text: str, source: str = "json") -> dict:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedInputError(source, f"JSON inválido ({exc.msg}, línea {exc.lineno})") from exc
        if not isinstance(data, dict):
            raise MalformedInputError(source, "el plan de estudios debe ser un objeto JSON")
        return data

    def export_json(self, payload: dict, path) -> Path:
        """
        Write a report payload as pretty-printed UTF-8 JSON.

        Parent directories are created as needed. Returns the written path.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        logger.info("Report written to %s", path)
        return path
