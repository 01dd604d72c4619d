"""Login Sentry - Report output"""

from typing import Dict

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import DetectionResult, Reason, ScanReport, ScanSummary
from .patterns import MESSAGES


def format_result(result: DetectionResult) -> str:
    if result.reason is Reason.BANNED_ADDRESS:
        return MESSAGES['banned_address'].format(line=result.raw_line)
    if result.reason is Reason.FREQUENCY:
        return MESSAGES['frequency'].format(line=result.raw_line)
    return ''


def format_summary(summary: ScanSummary) -> str:
    return MESSAGES['summary'].format(
        lines=summary.lines_processed,
        attempts=summary.hacking_attempts_found,
    )


def build_report(report: ScanReport) -> Dict:
    summary = report.summary
    return {
        'summary': {
            'lines_processed': summary.lines_processed,
            'hacking_attempts_found': summary.hacking_attempts_found,
            'malformed_lines': summary.malformed_lines,
        },
        'detections': [
            {
                'line_number': r.line_number,
                'reason': r.reason.value,
                'line': r.raw_line,
            }
            for r in report.flagged
        ],
        'malformed': [
            {
                'line_number': r.line_number,
                'error': r.error,
            }
            for r in report.malformed
        ],
    }


def print_report(report: ScanReport, console: Console = None):
    console = console or Console()
    summary = report.summary

    # Detections, one per flagged line in input order
    for result in report.flagged:
        style = 'red' if result.reason is Reason.BANNED_ADDRESS else 'yellow'
        console.print(format_result(result), style=style, markup=False, highlight=False)

    if report.malformed:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("MALFORMED LINES", style="bold")
        table = Table(box=box.ROUNDED)
        table.add_column("Line", style="cyan")
        table.add_column("Error", style="yellow")
        for result in report.malformed[:20]:
            table.add_row(str(result.line_number), Text(result.error))
        console.print(table)

    console.print(Panel.fit(
        f"Lines Processed: [cyan]{summary.lines_processed:,}[/]\n"
        f"Hacking Attempts: [{'red' if summary.hacking_attempts_found > 0 else 'green'}]"
        f"{summary.hacking_attempts_found:,}[/]\n"
        f"Malformed Lines: [cyan]{summary.malformed_lines:,}[/]",
        title="Summary",
        border_style="cyan"
    ))
    console.print(format_summary(summary), markup=False, highlight=False)
