"""
CSV and markdown export of history lists.
"""

import csv
from collections.abc import Sequence
from io import StringIO

from barcode_studio.models import GenerationHistoryItem, ScanHistoryItem

HistoryItem = ScanHistoryItem | GenerationHistoryItem


def _row(item: HistoryItem) -> list[str]:
    if isinstance(item, ScanHistoryItem):
        return [str(item.timestamp), item.formatted_date, item.type, item.data]
    return [str(item.timestamp), item.formatted_date, item.format_name, item.data]


def _header(items: Sequence[HistoryItem]) -> list[str]:
    if items and isinstance(items[0], GenerationHistoryItem):
        return ["timestamp", "date", "format", "data"]
    return ["timestamp", "date", "type", "data"]


def format_csv(items: Sequence[HistoryItem]) -> str:
    """Format history entries as CSV."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(_header(items))
    for item in items:
        writer.writerow(_row(item))
    return output.getvalue()


def format_markdown(items: Sequence[HistoryItem]) -> str:
    """Format history entries as a markdown table."""
    header = _header(items)
    lines = [
        "| " + " | ".join(header) + " |",
        "|" + "|".join("---" for _ in header) + "|",
    ]
    for item in items:
        cells = [cell.replace("|", "\\|") for cell in _row(item)]
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)
