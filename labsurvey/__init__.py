"""
Lab Software Survey Package
===========================

Reconciles teacher survey answers about lab software with the study plan
and the expected teacher roster, and folds them into summary views.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         DATA LAYER (I/O)                                │
│   DataLoader (CSV / JSON / TXT)  →  SurveyParser, CurriculumParser,     │
│                                     parse_roster  (typed records)       │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ SurveyRow, CurriculumTree, roster
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                 │
│        (Pure logic - returns data structures, NO I/O, NO printing)      │
│                                                                         │
│  normalize  ·  CurriculumIndex  ·  SoftwareLedger  ·  CoverageAnalyzer  │
│  RosterReconciler  ·  SoftwareSummaryEngine  ·  ReportAssembler         │
│  survey filters                                                         │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses / plain dicts
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                 │
│   TerminalDisplay (tables, summaries, tracking, report preview)         │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      SurveyDashboard                                    │
│       (Orchestrator - owns the session state, connects the layers)      │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

labsurvey/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m labsurvey
├── config.py            # CSV headers, sentinels, orderings, labels
├── errors.py            # MalformedInputError, DatasetWarning
├── normalize.py         # Name normalization helpers
├── dashboard.py         # SurveyDashboard orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
├── data/                # DataLoader and parsers
├── engines/             # Reconciliation and aggregation engines
└── ui/                  # TerminalDisplay

USAGE
-----

    from labsurvey import SurveyDashboard

    dashboard = SurveyDashboard()
    dashboard.load_survey("encuestas.csv")
    dashboard.load_curriculum("plan_estudios.json")
    dashboard.load_roster("docentes.txt")

    summary = dashboard.software_summary()
    statuses, progress = dashboard.teacher_tracking()
    dashboard.export_report("reporte.json")

Running from command line:

    python -m labsurvey encuestas.csv --plan plan_estudios.json --roster docentes.txt

"""

# Version
__version__ = "1.0.0"

# Main exports
from .dashboard import SurveyDashboard
from .cli import main

# Model exports (for programmatic use)
from .models import (
    SurveyRow,
    Platform,
    Course,
    DirectSlot,
    ElectiveSlot,
    Period,
    CurriculumTree,
    IndexEntry,
    SoftwareEntry,
    SoftwareSummary,
    SortDirection,
    CoverageStat,
    CoverageReport,
    TeacherStatus,
    RosterSummary,
    StatusFilter,
    ReportConfig,
    DataAvailability,
    SessionState,
)

# Engine exports (for advanced use)
from .engines import (
    CurriculumIndex,
    SoftwareLedger,
    CoverageAnalyzer,
    RosterReconciler,
    SoftwareSummaryEngine,
    ReportAssembler,
    SurveyFilterCriteria,
)

# Data exports
from .data import DataLoader, SurveyParser, CurriculumParser, parse_roster

# Normalization and errors
from .normalize import normalize, normalize_software_name, software_key
from .errors import MalformedInputError, DatasetWarning, WarningKind

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "SurveyDashboard",
    "main",
    # Models
    "SurveyRow",
    "Platform",
    "Course",
    "DirectSlot",
    "ElectiveSlot",
    "Period",
    "CurriculumTree",
    "IndexEntry",
    "SoftwareEntry",
    "SoftwareSummary",
    "SortDirection",
    "CoverageStat",
    "CoverageReport",
    "TeacherStatus",
    "RosterSummary",
    "StatusFilter",
    "ReportConfig",
    "DataAvailability",
    "SessionState",
    # Engines
    "CurriculumIndex",
    "SoftwareLedger",
    "CoverageAnalyzer",
    "RosterReconciler",
    "SoftwareSummaryEngine",
    "ReportAssembler",
    "SurveyFilterCriteria",
    # Data
    "DataLoader",
    "SurveyParser",
    "CurriculumParser",
    "parse_roster",
    # Normalization
    "normalize",
    "normalize_software_name",
    "software_key",
    # Errors
    "MalformedInputError",
    "DatasetWarning",
    "WarningKind",
    # UI
    "TerminalDisplay",
]
