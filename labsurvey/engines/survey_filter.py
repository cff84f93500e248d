"""
Survey table filtering.

Cascading semester -> course -> teacher filters for the survey table.
Filtering here is exact: the dropdown values come from the rows themselves.
"""

from dataclasses import dataclass, replace

from ..config import SEMESTER_ORDER


@dataclass(frozen=True)
class SurveyFilterCriteria:
    """
    Current filter selection. An empty string means "any".

    Changing a broader filter clears the narrower ones, because the old
    selection may not exist under the new one.
    """
    semester: str = ""
    course: str = ""
    teacher: str = ""

    def with_semester(self, semester: str) -> "SurveyFilterCriteria":
        return SurveyFilterCriteria(semester=semester)

    def with_course(self, course: str) -> "SurveyFilterCriteria":
        return replace(self, course=course, teacher="")

    def with_teacher(self, teacher: str) -> "SurveyFilterCriteria":
        return replace(self, teacher=teacher)

    def cleared(self) -> "SurveyFilterCriteria":
        return SurveyFilterCriteria()

    @property
    def is_empty(self) -> bool:
        return not (self.semester or self.course or self.teacher)


@dataclass
class FilterOptions:
    """Values offered in each dropdown for the current selection."""
    semesters: list
    courses: list
    teachers: list


def unique_values(rows, field: str) -> list:
    """Distinct values of a SurveyRow attribute, first-seen order."""
    seen = {}
    for row in rows:
        seen.setdefault(getattr(row, field), None)
    return list(seen)


def order_semesters(semesters: list) -> list:
    """Known semester labels in academic order, unknown ones after them."""
    known = [s for s in SEMESTER_ORDER if s in semesters]
    others = [s for s in semesters if s not in SEMESTER_ORDER]
    return known + others


def apply_filters(rows, criteria: SurveyFilterCriteria) -> list:
    result = list(rows)
    if criteria.semester:
        result = [r for r in result if r.semester == criteria.semester]
    if criteria.course:
        result = [r for r in result if r.course == criteria.course]
    if criteria.teacher:
        result = [r for r in result if r.teacher == criteria.teacher]
    return result


def filter_options(rows, criteria: SurveyFilterCriteria) -> FilterOptions:
    """
    Dropdown contents for a selection.

    Semesters always list every value. Courses are limited by the selected
    semester; teachers by the selected semester and course.
    """
    rows = list(rows)
    by_semester = apply_filters(rows, SurveyFilterCriteria(semester=criteria.semester))
    by_course = apply_filters(by_semester, SurveyFilterCriteria(course=criteria.course))
    return FilterOptions(
        semesters=order_semesters(unique_values(rows, "semester")),
        courses=unique_values(by_semester, "course"),
        teachers=unique_values(by_course, "teacher"),
    )


def format_timestamp(text: str) -> str:
    """
    Shorten a form timestamp to "date time".

    The form writes "DD/MM/YYYY HH:MM[:SS ...]"; anything with fewer than two
    parts is returned unchanged.
    """
    if not text:
        return ""
    parts = text.split(" ")
    if len(parts) < 2:
        return text
    return f"{parts[0]} {parts[1]}"
