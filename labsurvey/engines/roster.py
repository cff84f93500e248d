"""
Teacher Roster Reconciliation Engine.

This module checks which teachers of the expected roster have answered the
survey.
"""

from ..models import RosterSummary, StatusFilter, TeacherStatus
from ..normalize import collation_key, normalize


class RosterReconciler:
    """
    Matches the roster against the teachers found in survey rows.

    MATCHING RULE:
    Names are compared after normalize(): "Ana López", "ANA LOPEZ" and
    "ana lopez" are the same teacher. There is no partial matching.

    OUTPUT:
    - One TeacherStatus per roster name, in roster spelling, surveyed or
      pending, with the distinct courses the teacher answered for
    - One extra TeacherStatus (surveyed) per survey teacher missing from the
      roster, using the first spelling found in the survey
    - Sorted alphabetically, ignoring accents and case

    A roster name listed twice is reported twice; the roster is taken as
    given.
    """

    def courses_by_teacher(self, rows) -> dict:
        """
        {normalized teacher: (first spelling, [distinct courses])}

        Rows without a teacher name are ignored. Blank courses are not
        listed but still mark the teacher as surveyed.
        """
        found = {}
        for row in rows:
            key = normalize(row.teacher)
            if not key:
                continue
            if key not in found:
                found[key] = (row.teacher.strip(), [])
            courses = found[key][1]
            course = row.course.strip()
            if course and course not in courses:
                courses.append(course)
        return found

    def reconcile(self, roster, rows) -> list:
        """
        Build the teacher tracking list.

        Args:
            roster: Iterable of canonical teacher names (may be empty or None)
            rows: Iterable of SurveyRow

        Returns:
            List of TeacherStatus sorted by name
        """
        found = self.courses_by_teacher(rows)
        statuses = []
        roster_keys = set()

        for name in roster or ():
            key = normalize(name)
            roster_keys.add(key)
            entry = found.get(key)
            statuses.append(TeacherStatus(
                name=name,
                surveyed=entry is not None,
                courses=list(entry[1]) if entry else [],
            ))

        for key, (spelling, courses) in found.items():
            if key not in roster_keys:
                statuses.append(TeacherStatus(name=spelling, surveyed=True, courses=list(courses)))

        statuses.sort(key=lambda status: collation_key(status.name))
        return statuses

    def filter(self, statuses: list, status: StatusFilter = StatusFilter.ALL,
               search_term: str = "") -> list:
        """
        Narrow the tracking list for display.

        `search_term` is normalized and matched as a substring of each
        normalized teacher name; a blank term matches everyone.
        """
        result = list(statuses)
        if status is StatusFilter.SURVEYED:
            result = [s for s in result if s.surveyed]
        elif status is StatusFilter.PENDING:
            result = [s for s in result if not s.surveyed]

        term = normalize(search_term)
        if term:
            result = [s for s in result if term in normalize(s.name)]
        return result

    @staticmethod
    def summarize(statuses: list) -> RosterSummary:
        surveyed = sum(1 for s in statuses if s.surveyed)
        return RosterSummary(total=len(statuses), surveyed=surveyed, pending=len(statuses) - surveyed)
