"""
Data loading and parsing module.

This package handles all file I/O and the conversion of raw inputs into
typed records.
"""

from .loader import DataLoader
from .parser import SurveyParser, CurriculumParser, parse_roster

__all__ = ["DataLoader", "SurveyParser", "CurriculumParser", "parse_roster"]
