"""Tests for the DOCX report."""

import tempfile

import pytest

from cpiledger.models import Summary
from cpiledger.report import ReportConfig, generate_docx_report, history_rows, metric_rows


def test_metric_rows():
    rows = metric_rows(Summary(entry_count=2, total_original=150.0,
                               total_adjusted=300.4, average_adjusted=150.2))
    assert rows[0] == ("Total Sales Entries", "2")
    assert rows[1] == ("Average Adjusted Price", "$150")


def test_history_rows(ledger):
    ledger.add_entry("2020-01", 100.0, 130.0)
    assert history_rows(ledger.entries) == [("1", "Jan 2020", "$100", "$124", "$130", "-5.14%")]


def test_empty_ledger_rejected(ledger, tmp_path):
    with pytest.raises(ValueError, match="empty"):
        generate_docx_report(ledger.entries, ledger.summarize(), str(tmp_path / "r.docx"))


def test_writes_docx(ledger, tmp_path):
    docx = pytest.importorskip("docx")
    ledger.add_entry("2020-01", 100.0, 130.0)
    ledger.add_entry("1913-01", 1.0)
    out = tmp_path / "reports" / "ledger.docx"
    cfg = ReportConfig(base_month="2025-09", cpi_source="/data/cpi.csv")
    assert generate_docx_report(ledger.entries, ledger.summarize(), str(out), config=cfg) == str(out)

    doc = docx.Document(str(out))
    text = "\n".join(p.text for p in doc.paragraphs)
    assert "Inflation-Adjusted Sales Report" in text
    assert "Base month: Sep 2025" in text
    assert "CPI data: cpi.csv" in text
    history, metrics = doc.tables
    assert [c.text for c in history.rows[1].cells][:2] == ["1", "Jan 2020"]
    assert [c.text for c in metrics.rows[1].cells] == ["Total Sales Entries", "2"]


def test_leaves_no_temp_files(ledger, tmp_path, monkeypatch):
    pytest.importorskip("docx")
    pytest.importorskip("matplotlib")
    scratch = tmp_path / "tmp"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    ledger.add_entry("2020-01", 100.0, 130.0)
    out = tmp_path / "ledger.docx"
    generate_docx_report(ledger.entries, ledger.summarize(), str(out))
    generate_docx_report(ledger.entries, ledger.summarize(), str(out))
    assert out.exists()
    assert list(scratch.iterdir()) == []
