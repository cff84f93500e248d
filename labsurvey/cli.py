"""
Command-Line Interface for the Survey Dashboard.

This module parses the command line, loads the inputs and runs the
interactive menu.

MODES:
------
1. EXPORT: with --export, write the report payload as JSON and exit
2. INTERACTIVE: otherwise, browse tables, summaries and tracking views

NOTE: Don't run this file directly. Run from the project root:
    python3 -m labsurvey encuestas.csv --plan plan.json --roster docentes.txt
"""

import argparse
import logging

from .config import DEFAULT_REPORT_PATH
from .dashboard import SurveyDashboard
from .engines import SurveyFilterCriteria
from .models import SortDirection, StatusFilter
from .ui import TerminalDisplay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="labsurvey",
        description="Análisis de software y hardware para cursos a partir de encuestas docentes.",
    )
    parser.add_argument("survey", help="CSV de encuestas (separado por ';')")
    parser.add_argument("--plan", help="Plan de estudios en JSON")
    parser.add_argument("--roster", help="Lista de docentes (.txt, nombres separados por comas)")
    parser.add_argument("--export", metavar="PATH", help="Escribir el reporte JSON en PATH y salir")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Más detalle en el log")
    return parser


def _ask(prompt: str, default: str = "") -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return default


def _choose(options: list, label: str) -> str:
    """Pick one value from a numbered list; Enter (or anything invalid) means 'any'."""
    if not options:
        return ""
    print(f"\n  {TerminalDisplay.BOLD}{label}:{TerminalDisplay.RESET}")
    for i, option in enumerate(options, 1):
        print(f"    {i}. {option or TerminalDisplay.DIM + '(vacío)' + TerminalDisplay.RESET}")
    choice = _ask("  Número (Enter = todos): ")
    try:
        return options[int(choice) - 1] if choice else ""
    except (ValueError, IndexError):
        return ""


def _run_survey_table(dashboard: SurveyDashboard):
    """Cascading filters: semester, then course, then teacher."""
    criteria = SurveyFilterCriteria()
    criteria = criteria.with_semester(_choose(dashboard.filter_options(criteria).semesters, "Semestre"))
    criteria = criteria.with_course(_choose(dashboard.filter_options(criteria).courses, "Asignatura"))
    criteria = criteria.with_teacher(_choose(dashboard.filter_options(criteria).teachers, "Docente"))
    dashboard.show_survey_table(criteria)

    rows = dashboard.filtered_rows(criteria)
    choice = _ask("\n  Ver detalle de registro # (Enter para volver): ")
    if choice.isdigit() and 1 <= int(choice) <= len(rows):
        dashboard.display.print_row_details(rows[int(choice) - 1])


def _run_teacher_tracking(dashboard: SurveyDashboard):
    print("\n  1. Todos   2. Encuestados   3. Pendientes")
    status = {"2": StatusFilter.SURVEYED, "3": StatusFilter.PENDING}.get(_ask("  Filtro: "), StatusFilter.ALL)
    search = _ask("  Buscar docente (Enter para omitir): ")
    dashboard.show_teacher_tracking(status, search)


def _run_export(dashboard: SurveyDashboard, path):
    dashboard.show_report_preview()
    written = dashboard.export_report(path)
    if written is None:
        print(f"\n  {TerminalDisplay.YELLOW}No hay encuestas para generar el reporte.{TerminalDisplay.RESET}")
    else:
        print(f"\n  {TerminalDisplay.GREEN}✓ Reporte guardado en {written}{TerminalDisplay.RESET}")


def _interactive(dashboard: SurveyDashboard):
    direction = SortDirection.DESC
    while True:
        print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
        print("╔══════════════════════════════════════════════════════════════════╗")
        print("║   ANÁLISIS DE SOFTWARE Y HARDWARE PARA CURSOS                    ║")
        print("╠══════════════════════════════════════════════════════════════════╣")
        print("║  1. Tabla de encuestas (con filtros)                             ║")
        print("║  2. Resumen de software                                          ║")
        print("║  3. Invertir orden del resumen                                   ║")
        print("║  4. Seguimiento de docentes                                      ║")
        print("║  5. Exportar reporte (JSON)                                      ║")
        print("║  0. Salir                                                        ║")
        print("╚══════════════════════════════════════════════════════════════════╝")
        print(f"{TerminalDisplay.RESET}")

        choice = _ask(f"{TerminalDisplay.BOLD}Opción: {TerminalDisplay.RESET}", default="0")
        if choice == "0":
            return

        if not dashboard.can_aggregate and choice in ("1", "2", "3", "5"):
            dashboard.display.print_warnings(dashboard.dataset_warnings())
            continue

        if choice == "1":
            _run_survey_table(dashboard)
        elif choice == "2":
            dashboard.show_software_summary(direction)
        elif choice == "3":
            direction = direction.toggled()
            dashboard.show_software_summary(direction)
        elif choice == "4":
            _run_teacher_tracking(dashboard)
        elif choice == "5":
            path = _ask(f"  Archivo de salida [{DEFAULT_REPORT_PATH}]: ") or DEFAULT_REPORT_PATH
            _run_export(dashboard, path)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose > 0 else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    dashboard = SurveyDashboard()
    dashboard.load_survey(args.survey)
    if args.plan:
        dashboard.load_curriculum(args.plan)
    if args.roster:
        dashboard.load_roster(args.roster)

    dashboard.show_status()

    if args.export:
        _run_export(dashboard, args.export)
        return 0 if dashboard.can_aggregate else 1

    _interactive(dashboard)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
