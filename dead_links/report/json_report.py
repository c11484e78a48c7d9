# dead_links/report/json_report.py

"""
JSON report for dead_links.

Serializes a ScanReport to a file.
"""
from pathlib import Path

from dead_links.aggregator import ScanReport


def render_json(report: ScanReport, output_path: Path | str) -> Path:
    """
    Save *report* as JSON at *output_path*.

    :param report: ScanReport with the crawl results
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from dead_links.report.json_report import render_json
    report_path = render_json(report, 'reports/report.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    output.write_text(report.json(pretty=True), encoding="utf-8")

    return output
