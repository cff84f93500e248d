"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the labsurvey package.

Labels are in Spanish, like the survey form they describe.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

import math

from ..engines.survey_filter import format_timestamp
from ..errors import WarningKind
from ..models import (
    CoverageReport,
    DataAvailability,
    ReportConfig,
    RosterSummary,
    SessionState,
    SoftwareSummary,
    SortDirection,
    StatusFilter,
    SurveyRow,
)


class TerminalDisplay:
    """
    Pretty terminal output for the dashboard views.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR PDF EXPORT:
       Feed SurveyDashboard.report_payload() to a PDF renderer. The payload
       already holds every number and list the report shows.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    @staticmethod
    def round_percent(value: float) -> int:
        """Half-up rounding for displayed percentages (62.5 -> 63)."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def _truncate(text: str, width: int) -> str:
        return text if len(text) <= width else text[:width - 3] + "..."

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def progress_bar(cls, fraction: float, width: int = 10) -> str:
        filled = max(0, min(width, int(fraction * width)))
        if fraction >= 0.75:
            color = cls.GREEN
        elif fraction >= 0.5:
            color = cls.YELLOW
        else:
            color = cls.RED
        return f"{color}{'█' * filled}{'░' * (width - filled)}{cls.RESET}"

    # =========================================================================
    #  SESSION
    # =========================================================================

    @classmethod
    def print_session_status(cls, state: SessionState):
        cls.print_header("ESTADO DE LA SESIÓN")
        ok = f"{cls.GREEN}✓{cls.RESET}"
        no = f"{cls.DIM}–{cls.RESET}"
        print(f"  {ok if state.has_rows else no} Encuestas: {len(state.rows)}")
        if state.curriculum is not None:
            print(f"  {ok} Plan de estudios: {state.curriculum.program} "
                  f"{cls.DIM}({state.curriculum.plan_id}, {len(state.curriculum.periods)} períodos){cls.RESET}")
        else:
            print(f"  {no} Plan de estudios: no cargado")
        if state.has_roster:
            print(f"  {ok} Lista de docentes: {len(state.roster)} docentes")
        else:
            print(f"  {no} Lista de docentes: no cargada")

    @classmethod
    def print_errors(cls, errors):
        for message in errors:
            print(f"  {cls.BG_RED}{cls.WHITE} ERROR {cls.RESET} {cls.RED}{message}{cls.RESET}")

    @classmethod
    def print_warnings(cls, warnings):
        if not warnings:
            return
        unresolved = [w for w in warnings if w.kind is WarningKind.UNRESOLVED_REFERENCE]
        for warning in warnings:
            if warning.kind is WarningKind.EMPTY_DATASET:
                print(f"\n  {cls.YELLOW}⚠ {warning.message}{cls.RESET}")
        if unresolved:
            print(f"\n  {cls.YELLOW}⚠ {len(unresolved)} asignatura(s) sin coincidencia en el plan "
                  f"(agrupadas en 'Sin clasificar'):{cls.RESET}")
            for warning in unresolved[:10]:
                print(f"    {cls.DIM}• {warning.subject}{cls.RESET}")
            if len(unresolved) > 10:
                print(f"    {cls.DIM}... y {len(unresolved) - 10} más{cls.RESET}")

    # =========================================================================
    #  SURVEY TABLE
    # =========================================================================

    @classmethod
    def print_survey_table(cls, rows: list, criteria, total: int):
        cls.print_header("ENCUESTAS DOCENTES")
        active = [value for value in (criteria.semester, criteria.course, criteria.teacher) if value]
        if active:
            print(f"  {cls.DIM}Filtros: {' / '.join(active)}{cls.RESET}")
        print(f"  {cls.BOLD}Mostrando {len(rows)} de {total} registros{cls.RESET}\n")

        if not rows:
            print(f"  {cls.YELLOW}No hay registros que coincidan con los filtros.{cls.RESET}")
            return

        print(f"  {cls.BOLD}{'#':<4} {'DOCENTE':<26} {'ASIGNATURA':<28} {'SEMESTRE':<14}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 74}{cls.RESET}")
        for i, row in enumerate(rows, 1):
            print(f"  {i:<4} {cls._truncate(row.teacher, 26):<26} "
                  f"{cls._truncate(row.course, 28):<28} {cls._truncate(row.semester, 14):<14}")

    @classmethod
    def print_row_details(cls, row: SurveyRow):
        cls.print_subheader(f"{row.teacher} — {row.course}")
        fields = [
            ("Inicio", format_timestamp(row.started_at)),
            ("Fin", format_timestamp(row.finished_at)),
            ("Semestre", row.semester),
            ("Software Windows", row.software_windows),
            ("Software Ubuntu", row.software_linux),
            ("Software recomendado", row.software_recommended),
            ("Dispositivos adicionales", row.extra_devices),
            ("Recomendaciones", row.recommendations),
        ]
        for label, value in fields:
            print(f"    {cls.BOLD}{label}:{cls.RESET} {value or cls.DIM + '-' + cls.RESET}")

    # =========================================================================
    #  SOFTWARE SUMMARY
    # =========================================================================

    @classmethod
    def print_software_global(cls, entries: list, direction: SortDirection):
        cls.print_header("SOFTWARE GLOBAL")
        arrow = "↓" if direction is SortDirection.DESC else "↑"
        print(f"  {cls.DIM}{len(entries)} software únicos, ordenados por menciones {arrow}{cls.RESET}\n")
        print(f"  {cls.BOLD}{'SOFTWARE':<32} {'WINDOWS':>8} {'UBUNTU':>8} {'RECOM.':>8} {'TOTAL':>7}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 67}{cls.RESET}")
        for entry in entries:
            print(f"  {cls._truncate(entry.name, 32):<32} {entry.windows_count:>8} "
                  f"{entry.linux_count:>8} {entry.recommended_count:>8} {cls.BOLD}{entry.total:>7}{cls.RESET}")

    @classmethod
    def print_software_by_period(cls, summary: SoftwareSummary):
        cls.print_header("SOFTWARE POR PERÍODOS")
        for period_name in summary.periods():
            courses = summary.courses_in(period_name)
            stat = summary.coverage.for_period(period_name) if summary.coverage else None

            cls.print_subheader(period_name)
            line = f"    {len(courses)} asignatura{'s' if len(courses) != 1 else ''} con encuestas"
            if stat is not None:
                line += (f"  {cls.progress_bar(stat.coverage_fraction)} "
                         f"Cobertura: {stat.covered_courses}/{stat.total_courses}")
            print(line)

            for course in courses:
                entries = summary.software_for(period_name, course)
                names = ", ".join(entry.name for entry in entries) or f"{cls.DIM}sin software{cls.RESET}"
                print(f"    {cls.CYAN}• {course}{cls.RESET} {cls.DIM}({len(entries)}){cls.RESET}")
                print(f"      {names}")

    @classmethod
    def print_coverage(cls, coverage: CoverageReport):
        cls.print_header("COBERTURA DE ENCUESTAS")
        print(f"  {cls.BOLD}Global:{cls.RESET} {coverage.total_covered}/{coverage.total_courses} asignaturas "
              f"({cls.round_percent(coverage.coverage_percent)}%)\n")
        print(f"  {cls.BOLD}{'PERÍODO':<30} {'COBERTURA':<12} {'%':>5} {'SOFTWARE':>9}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for stat in coverage.per_period:
            print(f"  {cls._truncate(stat.period_name, 30):<30} "
                  f"{cls.progress_bar(stat.coverage_fraction)}  "
                  f"{cls.round_percent(stat.coverage_percent):>4}% {stat.distinct_software:>9}")
            if stat.uncovered:
                missing = ", ".join(stat.uncovered)
                print(f"  {cls.DIM}   └─ Sin encuesta: {missing}{cls.RESET}")

    # =========================================================================
    #  TEACHER TRACKING
    # =========================================================================

    @classmethod
    def print_teacher_tracking(cls, statuses: list, summary: RosterSummary,
                               status: StatusFilter = StatusFilter.ALL, search_term: str = ""):
        cls.print_header("SEGUIMIENTO DE DOCENTES")
        percent = cls.round_percent(summary.completion_percent)
        print(f"  {cls.progress_bar(summary.completion_fraction, 20)} {percent}% completado")
        print(f"  {cls.GREEN}Encuestados: {summary.surveyed}{cls.RESET}   "
              f"{cls.RED}Pendientes: {summary.pending}{cls.RESET}   Total: {summary.total}")
        if status is not StatusFilter.ALL or search_term.strip():
            print(f"  {cls.DIM}Filtro: {status.value}"
                  f"{' · búsqueda: ' + search_term if search_term.strip() else ''}{cls.RESET}")
        print()

        if not statuses:
            print(f"  {cls.YELLOW}No se encontraron docentes con los filtros actuales.{cls.RESET}")
            return

        for teacher in statuses:
            if teacher.surveyed:
                badge = f"{cls.GREEN}●{cls.RESET}"
                detail = ", ".join(teacher.courses)
                print(f"  {badge} {teacher.name}")
                if detail:
                    print(f"    {cls.DIM}{detail}{cls.RESET}")
            else:
                print(f"  {cls.RED}●{cls.RESET} {teacher.name} {cls.DIM}(pendiente){cls.RESET}")

    # =========================================================================
    #  REPORT PREVIEW
    # =========================================================================

    @classmethod
    def print_report_preview(cls, config: ReportConfig, availability: DataAvailability,
                             pages: int, sections: int, size_kb: int):
        cls.print_header("VISTA PREVIA DEL REPORTE")
        sections_list = [
            ("Resumen general", config.include_summary),
            ("Software por períodos", config.include_software_by_period),
            ("Detalle por docente", config.include_teacher_detail),
            ("Estadísticas de cobertura", config.include_coverage),
            ("Recomendaciones", config.include_recommendations),
        ]
        for label, enabled in sections_list:
            mark = f"{cls.GREEN}✓{cls.RESET}" if enabled else f"{cls.DIM}✗{cls.RESET}"
            print(f"  {mark} {label}")

        print()
        print(f"  {cls.BOLD}Encuestas:{cls.RESET} {availability.total_rows}   "
              f"{cls.BOLD}Software únicos:{cls.RESET} {availability.distinct_software}   "
              f"{cls.BOLD}Cobertura:{cls.RESET} {cls.round_percent(availability.coverage_percent)}%")
        if availability.has_roster:
            ratio = cls.round_percent(availability.survey_to_roster_ratio * 100)
            print(f"  {cls.BOLD}Cobertura de docentes:{cls.RESET} {ratio}% "
                  f"{cls.DIM}({availability.total_rows} encuestas / {availability.total_teachers} docentes){cls.RESET}")
        print(f"  {cls.DIM}{sections} secciones · ~{pages} páginas · ~{size_kb} KB{cls.RESET}")
