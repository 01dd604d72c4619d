from rich.console import Console

from login_sentry import DetectionEngine, build_report, print_report
from login_sentry.output import format_result, format_summary

from .conftest import auth_line


def sample_report():
    engine = DetectionEngine(frozenset({'66.77.88.99'}), frozenset())
    lines = [auth_line(f"00:00:0{i}") for i in range(4)]
    lines.append(auth_line("00:00:09", user='eve', address='66.77.88.99'))
    lines.append("short line")
    return engine.scan(lines), lines


def test_format_messages():
    report, lines = sample_report()
    assert format_result(report.results[3]) == f"Hacking due to frequency. Line: {lines[3]}"
    assert format_result(report.results[4]) == f"Hacking due to banned IP. Line: {lines[4]}"
    assert format_result(report.results[0]) == ''
    assert format_summary(report.summary) == "Processed 6 lines. Found 2 possible hacking attempts."


def test_build_report():
    report, lines = sample_report()
    data = build_report(report)

    assert data['summary'] == {
        'lines_processed': 6,
        'hacking_attempts_found': 2,
        'malformed_lines': 1,
    }
    assert data['detections'] == [
        {'line_number': 4, 'reason': 'frequency', 'line': lines[3]},
        {'line_number': 5, 'reason': 'banned_address', 'line': lines[4]},
    ]
    assert data['malformed'][0]['line_number'] == 6


def test_print_report():
    report, lines = sample_report()
    console = Console(record=True, width=200)
    print_report(report, console)
    text = console.export_text()

    assert "Hacking due to banned IP. Line: " + lines[4] in text
    assert "MALFORMED LINES" in text
    assert text.rstrip().endswith("Processed 6 lines. Found 2 possible hacking attempts.")
