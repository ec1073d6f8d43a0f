from __future__ import annotations

"""
Ledger report generator
-----------------------
This module writes a DOCX report for the current ledger: the sales history
table, the calculated metrics table and a chart of original vs. adjusted
amounts.

Design goals:
- Keep the REPL usable even if report dependencies are missing (lazy imports).
- Use the same formatting as the terminal tables (whole dollars, percents).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from datetime import datetime
import io
import os

from .formatting import display_month_year, format_currency, format_percent
from .models import Entry, Summary


@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    title: str = "Inflation-Adjusted Sales Report"
    subtitle: str = "Historical sales in base-month dollars"
    base_month: Optional[str] = None
    cpi_source: Optional[str] = None
    # How many entries to show in the sales history table
    max_rows: int = 200


def metric_rows(summary: Summary) -> List[Tuple[str, str]]:
    """(name, formatted value) rows of the calculated metrics table."""
    return [
        ("Total Sales Entries", str(summary.entry_count)),
        ("Average Adjusted Price", format_currency(summary.average_adjusted)),
        ("Total Original Amount", format_currency(summary.total_original)),
        ("Total Adjusted Amount", format_currency(summary.total_adjusted)),
    ]


def history_rows(entries: Sequence[Entry]) -> List[Tuple[str, ...]]:
    """Formatted rows of the sales history table."""
    return [
        (
            str(e.id),
            display_month_year(e.month),
            format_currency(e.original_amount),
            format_currency(e.adjusted_amount),
            format_currency(e.asking_price),
            format_percent(e.over_under_ratio),
        )
        for e in entries
    ]


HISTORY_HEADER = ("ID", "Month", "Original", "Adjusted", "Asking", "Over/Under")


def generate_docx_report(
    entries: Sequence[Entry],
    summary: Summary,
    out_path: str,
    *,
    config: Optional[ReportConfig] = None,
) -> str:
    """Generate a DOCX report for the given entries and return its path."""
    config = config or ReportConfig()

    # Lazy imports: only required when "report" is used.
    try:
        from docx import Document
        from docx.shared import Pt, Inches
        from docx.enum.text import WD_ALIGN_PARAGRAPH
    except ImportError as e:
        raise ImportError(
            "Missing dependency: python-docx.\n"
            "Install it with: python -m pip install python-docx"
        ) from e

    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        import numpy as np
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib (and numpy).\n"
            "Install with: python -m pip install matplotlib numpy"
        ) from e

    if not entries:
        raise ValueError("No entries to report on (ledger is empty).")

    # -----------------------------
    # 1) Chart: original vs adjusted, oldest month on the left
    # -----------------------------
    # kept in memory so nothing is left behind in the temp dir
    chart = io.BytesIO()

    ordered = list(reversed(entries))
    labels = [f"#{e.id} {display_month_year(e.month)}" for e in ordered]
    x = np.arange(len(ordered))
    width = 0.4
    plt.figure()
    plt.bar(x - width / 2, [e.original_amount for e in ordered], width, label="Original")
    plt.bar(x + width / 2, [e.adjusted_amount for e in ordered], width, label="Adjusted")
    plt.xticks(x, labels, rotation=45, ha="right")
    plt.ylabel("US$")
    plt.title("Original vs. inflation-adjusted amount")
    plt.legend()
    plt.tight_layout()
    plt.savefig(chart, format="png", dpi=150)
    plt.close()
    chart.seek(0)

    # -----------------------------
    # 2) Build DOCX report
    # -----------------------------
    doc = Document()
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    def _center_title(text: str, size: int, bold: bool = False, italic: bool = False) -> None:
        p = doc.add_paragraph()
        r = p.add_run(text)
        r.bold = bold
        r.italic = italic
        r.font.size = Pt(size)
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _kv(key: str, value: str) -> None:
        p = doc.add_paragraph()
        r = p.add_run(f"{key}: ")
        r.bold = True
        p.add_run(value)

    def _table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
        t = doc.add_table(rows=1, cols=len(header))
        for cell, text in zip(t.rows[0].cells, header):
            cell.text = text
        for row in rows:
            cells = t.add_row().cells
            for cell, text in zip(cells, row):
                cell.text = text

    _center_title(config.title, 22, bold=True)
    _center_title(config.subtitle, 12, italic=True)

    doc.add_paragraph("")
    if config.base_month:
        _kv("Base month", display_month_year(config.base_month))
    if config.cpi_source:
        _kv("CPI data", os.path.basename(config.cpi_source))
    _kv("Entries", str(len(entries)))

    doc.add_heading("Sales history", level=1)
    _table(HISTORY_HEADER, history_rows(list(entries)[:config.max_rows]))
    if len(entries) > config.max_rows:
        doc.add_paragraph(f"... ({len(entries)} total, showing {config.max_rows})")

    doc.add_paragraph("")
    doc.add_heading("Calculated metrics", level=1)
    _table(("Metric", "Value"), metric_rows(summary))

    doc.add_paragraph("")
    doc.add_heading("Original vs. adjusted", level=1)
    doc.add_picture(chart, width=Inches(6.5))

    doc.add_heading("Notes", level=1)
    doc.add_paragraph(
        "Adjusted amount = original amount x (base CPI / CPI of the sale month). "
        "Over/under = 1 - asking price / adjusted amount."
    )

    from . import __version__
    doc.add_paragraph(f"cpiledger version: {__version__}")
    doc.add_paragraph(f"Report generated at: {datetime.now().isoformat(timespec='seconds')}")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    return out_path
