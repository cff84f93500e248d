"""
Survey data models.

Contains the SurveyRow record and the Platform enum that says which of its
software answers a count belongs to.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SurveyRow:
    """
    One teacher's answer for one course.

    Built once by the data layer from a CSV record. Every field is a plain
    string; missing CSV fields become "". Engines read rows, never change them.

    Attributes:
        started_at / finished_at: Form timestamps ("DD/MM/YYYY HH:MM")
        teacher: Teacher name as typed
        course: Course name as typed, not yet matched against the plan
        semester: Semester label as typed
        software_windows / software_linux / software_recommended:
            Comma-separated software names, or "Ninguno"/"Ninguna"
        extra_devices: Devices requested besides computers (IoT, networking...)
        recommendations: General suggestions about the lab computers
    """
    started_at: str = ""
    finished_at: str = ""
    teacher: str = ""
    course: str = ""
    semester: str = ""
    software_windows: str = ""
    software_linux: str = ""
    software_recommended: str = ""
    extra_devices: str = ""
    recommendations: str = ""


class Platform(Enum):
    """
    The three software questions of the survey.

    The value is the SurveyRow attribute holding that answer.
    """
    WINDOWS = "software_windows"
    LINUX = "software_linux"
    RECOMMENDED = "software_recommended"

    def read(self, row: SurveyRow) -> str:
        return getattr(row, self.value)


ALL_PLATFORMS = (Platform.WINDOWS, Platform.LINUX, Platform.RECOMMENDED)
