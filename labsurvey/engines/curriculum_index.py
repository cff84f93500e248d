"""
Curriculum lookup index.

This module resolves free-text course names from the survey against the
study plan.
"""

import logging
from typing import Optional

from ..models import CurriculumTree, IndexEntry, expand_slot
from ..normalize import normalize

logger = logging.getLogger(__name__)


def build_index(curriculum: Optional[CurriculumTree]) -> dict:
    """
    Flatten a curriculum into {normalized course name: IndexEntry}.

    Periods are walked in plan order and slots in listing order. Direct
    slots contribute their own name; elective slots contribute only their
    option names (the slot name itself, e.g. "Electiva I", never resolves).

    COLLISIONS:
    When two concrete courses normalize to the same key, the first one
    indexed wins. This is the documented tie-break, not an error.
    """
    index = {}
    if curriculum is None:
        return index

    for period in curriculum.periods:
        for slot in period.slots:
            for name in expand_slot(slot):
                key = normalize(name)
                if not key:
                    continue
                if key in index:
                    logger.debug(
                        "Course name collision for '%s': keeping %s/%s",
                        name, index[key].period_name, index[key].canonical_name,
                    )
                    continue
                index[key] = IndexEntry(
                    canonical_name=name,
                    period_id=period.period_id,
                    period_name=period.name,
                )
    return index


class CurriculumIndex:
    """
    Exact (normalized) course name lookups against a study plan.

    MATCHING RULE:
    A survey name matches a plan course only when both normalize to the
    same string. There is no fuzzy or partial matching: "Redes" does not
    match "Redes de Computadores".

    Without a curriculum every lookup returns None and callers fall back to
    the raw survey name tagged as unclassified.

    Usage:
        index = CurriculumIndex(curriculum)
        index.resolve("calculo diferencial")   # -> "Cálculo Diferencial"
        index.period_of("calculo diferencial") # -> "PERIODO DE FORMACIÓN 1"
    """

    def __init__(self, curriculum: Optional[CurriculumTree] = None):
        self.curriculum = curriculum
        self._entries = build_index(curriculum)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, raw_name) -> bool:
        return self.lookup(raw_name) is not None

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def lookup(self, raw_name: Optional[str]) -> Optional[IndexEntry]:
        if not raw_name:
            return None
        return self._entries.get(normalize(raw_name))

    def resolve(self, raw_name: Optional[str]) -> Optional[str]:
        """Canonical plan name for a survey course name, or None."""
        entry = self.lookup(raw_name)
        return entry.canonical_name if entry else None

    def period_of(self, raw_name: Optional[str]) -> Optional[str]:
        """Display name of the period holding the course, or None."""
        entry = self.lookup(raw_name)
        return entry.period_name if entry else None

    def entries(self) -> dict:
        """A copy of the flat index."""
        return dict(self._entries)
