"""
Curriculum data models.

A curriculum is program metadata plus an ordered list of periods. Each
period holds course slots; a slot is either a concrete course or an
elective choice among several option courses.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Course:
    """
    A course as listed in the curriculum plan.

    Only `name` takes part in reconciliation. Credits and hour counts are
    carried for the presentation layer.

    Attributes:
        code: Course code (e.g., "ING-101")
        name: Official course name
        credits: Academic credits
        htd / htc / hta: Direct, cooperative and autonomous work hours
        classification: Plan classification label
        is_elective: True if this entry is an elective slot
        elective_group: Elective group label, if any
        options: Concrete courses that can fill an elective slot
    """
    code: str
    name: str
    credits: float = 0
    htd: float = 0
    htc: float = 0
    hta: float = 0
    classification: str = ""
    is_elective: bool = False
    elective_group: Optional[str] = None
    options: tuple = ()


@dataclass(frozen=True)
class DirectSlot:
    """A curriculum slot filled by exactly one course."""
    course: Course


@dataclass(frozen=True)
class ElectiveSlot:
    """A curriculum slot filled by any one of `options`."""
    course: Course
    options: tuple  # tuple of Course


CourseSlot = Union[DirectSlot, ElectiveSlot]


def slot_for(course: Course) -> CourseSlot:
    """
    Wrap a parsed course in the right slot type.

    An elective flagged without options cannot be expanded, so it behaves as
    a direct slot under its own name.
    """
    if course.is_elective and course.options:
        return ElectiveSlot(course=course, options=tuple(course.options))
    return DirectSlot(course=course)


def expand_slot(slot: CourseSlot) -> list:
    """
    Concrete course names that satisfy a slot.

    This is the only place elective expansion happens. The elective slot's
    own name is never returned for an ElectiveSlot.
    """
    if isinstance(slot, ElectiveSlot):
        return [option.name for option in slot.options]
    if isinstance(slot, DirectSlot):
        return [slot.course.name]
    raise TypeError(f"Unknown course slot: {slot!r}")


@dataclass(frozen=True)
class Period:
    """A curriculum period (semester or training stage)."""
    period_id: str
    name: str
    slots: tuple = ()          # tuple of CourseSlot, in plan order
    total_credits: float = 0

    def course_names(self) -> list:
        """All concrete course names in this period, electives expanded."""
        names = []
        for slot in self.slots:
            names.extend(expand_slot(slot))
        return names


@dataclass(frozen=True)
class CurriculumTree:
    """
    A whole study plan.

    `periods` keeps the order of the source JSON object; that order decides
    which entry wins when two courses normalize to the same name.
    """
    program: str
    plan_id: str
    structure: dict = field(default_factory=dict)
    periods: tuple = ()        # tuple of Period

    def period_by_name(self, name: str) -> Optional[Period]:
        for period in self.periods:
            if period.name == name:
                return period
        return None


@dataclass(frozen=True)
class IndexEntry:
    """Where a normalized course name lives in the curriculum."""
    canonical_name: str
    period_id: str
    period_name: str
