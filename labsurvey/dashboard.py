"""
Survey Dashboard - Main Orchestrator.

This module contains the SurveyDashboard class that connects the data
layer, the engines and the presentation layer.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m labsurvey encuestas.csv --plan plan.json --roster docentes.txt
"""

import logging
from typing import Optional

from .data import DataLoader, SurveyParser, CurriculumParser, parse_roster
from .engines import (
    RosterReconciler,
    ReportAssembler,
    SoftwareLedger,
    SoftwareSummaryEngine,
    SurveyFilterCriteria,
    apply_filters,
    filter_options,
)
from .errors import DatasetWarning, MalformedInputError, WarningKind
from .models import ReportConfig, SessionState, SoftwareSummary, SortDirection, StatusFilter
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class SurveyDashboard:
    """
    Main interface for the survey dashboard.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads inputs through the data layer into a SessionState
    2. Calls the engines with that state to get view models (pure data)
    3. Passes view models to the presentation layer for display

    SESSION STATE:
    --------------
    `self.state` is replaced, never patched. Loading a file builds a new
    SessionState and every view is recomputed from it on the next call.
    A file that fails to load leaves that input absent and records the
    message in `state.errors`; the rest of the dashboard keeps working.

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with another class exposing
    the same print_* methods, or skip display entirely and use the view
    methods (`software_summary`, `teacher_tracking`, `report_payload`...).

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        dashboard = SurveyDashboard()
        dashboard.load_survey("encuestas.csv")
        dashboard.load_curriculum("plan.json")
        summary = dashboard.software_summary()
        dashboard.export_report("reporte.json")
    """

    def __init__(self, loader: Optional[DataLoader] = None, display=None):
        self.loader = loader or DataLoader()
        self.survey_parser = SurveyParser()
        self.curriculum_parser = CurriculumParser()

        ledger = SoftwareLedger()
        self.summary_engine = SoftwareSummaryEngine(ledger)
        self.roster_reconciler = RosterReconciler()
        self.report_assembler = ReportAssembler(ledger)

        self.display = display or TerminalDisplay()
        self.state = SessionState()

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def load_survey(self, path) -> SessionState:
        """Load the survey CSV, replacing any previous survey."""
        try:
            records = self.loader.load_survey_records(path)
            rows = self.survey_parser.parse(records)
        except MalformedInputError as exc:
            logger.warning("Survey not loaded: %s", exc)
            self.state = SessionState(
                curriculum=self.state.curriculum,
                roster=self.state.roster,
                errors=self.state.errors + (f"Error al procesar el archivo CSV: {exc}",),
            )
            return self.state

        self.state = self.state.with_rows(rows)
        if not rows:
            logger.warning("Survey file %s has no rows", path)
        return self.state

    def load_curriculum(self, path) -> SessionState:
        """Load the study plan JSON; on failure the plan is treated as absent."""
        try:
            data = self.loader.load_curriculum_json(path)
            curriculum = self.curriculum_parser.parse(data, source=str(path))
        except MalformedInputError as exc:
            logger.warning("Curriculum not loaded: %s", exc)
            self.state = self.state.with_curriculum(None).with_error(
                f"Error al procesar el plan de estudios: {exc}"
            )
            return self.state

        self.state = self.state.with_curriculum(curriculum)
        return self.state

    def load_roster(self, path) -> SessionState:
        """Load the teacher roster; on failure the roster is treated as absent."""
        try:
            roster = parse_roster(self.loader.load_text(path), source=str(path))
        except MalformedInputError as exc:
            logger.warning("Roster not loaded: %s", exc)
            self.state = self.state.with_roster(None).with_error(
                f"Error al procesar la lista de docentes: {exc}"
            )
            return self.state

        self.state = self.state.with_roster(roster)
        return self.state

    def dismiss_errors(self) -> SessionState:
        self.state = self.state.without_errors()
        return self.state

    # ------------------------------------------------------------------
    # Views (pure data)
    # ------------------------------------------------------------------

    def dataset_warnings(self) -> list:
        """EMPTY_DATASET when there are no rows to aggregate."""
        if self.state.has_rows:
            return []
        if self.state.survey_loaded:
            message = "El archivo CSV no contiene encuestas válidas"
        else:
            message = "No se ha cargado ningún archivo de encuestas"
        return [DatasetWarning(kind=WarningKind.EMPTY_DATASET, message=message)]

    @property
    def can_aggregate(self) -> bool:
        return self.state.has_rows

    def filtered_rows(self, criteria: SurveyFilterCriteria = SurveyFilterCriteria()) -> list:
        return apply_filters(self.state.rows, criteria)

    def filter_options(self, criteria: SurveyFilterCriteria = SurveyFilterCriteria()):
        return filter_options(self.state.rows, criteria)

    def software_summary(self, direction: SortDirection = SortDirection.DESC) -> SoftwareSummary:
        """
        Software summary for the current session.

        Blocked on an empty dataset: returns an empty summary carrying the
        EMPTY_DATASET warning instead of aggregating.
        """
        if not self.can_aggregate:
            return SoftwareSummary(
                global_entries=[],
                by_period={},
                surveys_per_course={},
                coverage=None,
                warnings=self.dataset_warnings(),
            )
        return self.summary_engine.summarize(self.state.rows, self.state.curriculum, direction)

    def teacher_tracking(self, status: StatusFilter = StatusFilter.ALL, search_term: str = "") -> tuple:
        """
        Returns:
            (filtered list of TeacherStatus, RosterSummary of the full list)
        """
        statuses = self.roster_reconciler.reconcile(self.state.roster, self.state.rows)
        summary = self.roster_reconciler.summarize(statuses)
        return self.roster_reconciler.filter(statuses, status, search_term), summary

    def report_config(self) -> ReportConfig:
        """Default report sections for the loaded inputs."""
        return ReportConfig.defaults_for(self.state.has_rows, self.state.has_roster, self.state.has_curriculum)

    def report_availability(self):
        return self.report_assembler.availability(self.state.rows, self.state.roster, self.state.curriculum)

    def report_payload(self, config: Optional[ReportConfig] = None) -> Optional[dict]:
        """The report payload, or None when the dataset is empty."""
        if not self.can_aggregate:
            return None
        return self.report_assembler.assemble(
            self.state.rows,
            self.state.roster,
            self.state.curriculum,
            config or self.report_config(),
        )

    def export_report(self, path, config: Optional[ReportConfig] = None):
        """Write the report payload as JSON. Returns the path, or None if blocked."""
        payload = self.report_payload(config)
        if payload is None:
            logger.warning("Report export skipped: no survey rows loaded")
            return None
        return self.loader.export_json(payload, path)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def show_status(self):
        self.display.print_session_status(self.state)
        self.display.print_errors(self.state.errors)
        self.display.print_warnings(self.dataset_warnings())

    def show_survey_table(self, criteria: SurveyFilterCriteria = SurveyFilterCriteria()):
        rows = self.filtered_rows(criteria)
        self.display.print_survey_table(rows, criteria, total=len(self.state.rows))

    def show_software_summary(self, direction: SortDirection = SortDirection.DESC):
        summary = self.software_summary(direction)
        self.display.print_warnings(summary.warnings)
        if not self.can_aggregate:
            return summary
        self.display.print_software_global(summary.global_entries, direction)
        self.display.print_software_by_period(summary)
        if summary.coverage is not None:
            self.display.print_coverage(summary.coverage)
        return summary

    def show_teacher_tracking(self, status: StatusFilter = StatusFilter.ALL, search_term: str = ""):
        statuses, summary = self.teacher_tracking(status, search_term)
        self.display.print_teacher_tracking(statuses, summary, status, search_term)
        return statuses

    def show_report_preview(self, config: Optional[ReportConfig] = None):
        config = config or self.report_config()
        availability = self.report_availability()
        self.display.print_report_preview(
            config,
            availability,
            pages=self.report_assembler.estimate_pages(config, availability),
            sections=self.report_assembler.count_active_sections(config, availability),
            size_kb=self.report_assembler.estimate_size_kb(config, availability),
        )
