"""
Output formatters for CLI commands.

Turns catalog entries and demo reports into JSON payloads or plain text.
"""

import json
from typing import Any, Dict, List

from patternguide.catalog import DemoCatalog, DemoReport


def format_demo_listing(catalog: DemoCatalog) -> List[Dict[str, Any]]:
    """Describe every registered demo."""
    return [
        {
            "key": demo.key,
            "title": demo.title,
            "category": demo.category,
            "summary": demo.summary,
        }
        for demo in catalog.demos()
    ]


def format_run_payload(reports: List[DemoReport]) -> Dict[str, Any]:
    """JSON payload for the run command."""
    failed = [report.key for report in reports if not report.success]
    return {
        "success": not failed,
        "total": len(reports),
        "failed": failed,
        "reports": [report.to_dict() for report in reports],
    }


def format_report_text(report: DemoReport) -> str:
    """Plain text rendering of a single report."""
    lines = [f"=== {report.title} ({report.key}) ==="]
    lines.extend(report.lines)
    if not report.success:
        lines.append(f"FAILED: {report.error}")
    return "\n".join(lines)


def format_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)
