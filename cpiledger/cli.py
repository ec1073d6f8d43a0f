"""
cpiledger Command Line Interface (CLI)
======================================

This file provides the interactive terminal program you run like:

    python -m cpiledger.cli
    python -m cpiledger.cli --cpi "path/to/CPI.csv" --base-month 2025-09

It demonstrates:
- Argument parsing (argparse) on top of environment settings
- A REPL loop (Read-Eval-Print Loop) for commands
- Mapping user commands to ledger methods (add, delete, clear, summary)

Nothing is saved between runs. `export` and `report` write snapshots of the
current entries; they are never read back.
"""

from __future__ import annotations
import argparse, logging, shlex
from typing import Callable, List, Optional, Sequence

from . import settings
from .adjust import adjust_or_unchanged
from .errors import LedgerError
from .formatting import display_month_year, format_currency, format_percent
from .inputs import parse_amount, parse_asking_price, parse_month
from .ledger import Ledger
from .loader import load_cpi_table
from .logger import setup_logger
from .months import default_month, months_for_year, years_in_range
from .report import HISTORY_HEADER, history_rows, metric_rows

logger = logging.getLogger(__name__)

HELP_TEXT = """
cpiledger commands
------------------

1) Entries
   add <YYYY-MM> <amount> [asking]  (example: add 2020-01 100 130)
   delete [-y] <id>                 (example: delete 3)
   clear [-y]                       (delete ALL entries, ids restart at 1)

2) View
   show                             sales history, newest month first
   summary                          calculated metrics
   years                            years with CPI data in range
   months <year>                    months of a year with CPI data (example: months 1913)
   cpi <YYYY-MM> [amount]           CPI lookup / quick adjustment, nothing recorded

3) Export (current entries)
   export csv "<out.csv>"
   export json "<out.json>"
   report "<out.docx>"

4) Exit
   quit
"""

Confirm = Callable[[str], bool]


def _ask(prompt: str) -> bool:
    try:
        return input(f"{prompt} [y/N] ").strip().lower() in ("y", "yes")
    except EOFError:
        return False


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cpiledger",
                                 description="Inflation-adjusted sales ledger (CPI-U).")
    ap.add_argument("--cpi", default=settings.CPI_PATH,
                    help="CPI export (CSV/XLSX). Defaults to the bundled CPI-U snapshot")
    ap.add_argument("--base-month", default=None, help=f"Base month (default {settings.BASE_MONTH})")
    ap.add_argument("--min-month", default=None, help=f"Earliest accepted month (default {settings.MIN_MONTH})")
    ap.add_argument("--max-month", default=None, help=f"Latest accepted month (default {settings.MAX_MONTH})")
    ap.add_argument("--log-level", default=settings.LOG_LEVEL, type=str.upper,
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help="Logging level (default INFO)")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the cpiledger CLI.

    1) Load configuration and the CPI table
    2) Build the ledger (fails fast if the base month has no CPI)
    3) Start an interactive REPL
    """
    args = build_parser().parse_args(argv)
    setup_logger(log_level=args.log_level)

    try:
        config = settings.LedgerConfig.from_env(args.base_month, args.min_month, args.max_month)
        table = load_cpi_table(args.cpi)
        ledger = Ledger(table=table, config=config)
    except (LedgerError, KeyError, OSError) as e:
        logger.error("Startup failed: %s", e)
        print(f"Error: {e}")
        return 2

    print(f"Loaded {len(table)} CPI months ({table.min_month}..{table.max_month}). "
          f"Base month {display_month_year(config.base_month)} = {ledger.base_cpi:g}.")
    print("Type 'help' for commands.")
    while True:
        try:
            line = input("cpi> ")
        except EOFError:
            break
        if not line.strip():
            continue
        if line.strip().lower() in ("quit", "exit"):
            break
        try:
            handle(ledger, line)
        except (LedgerError, ValueError, IndexError, OSError) as e:
            print(f"Error: {e}")
    return 0


def handle(ledger: Ledger, line: str, confirm: Confirm = _ask) -> None:
    """Handle one CLI command line.

    This parses the command and calls the appropriate ledger method.
    """
    parts = shlex.split(line)
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP_TEXT)
        return

    if cmd == "add":
        if len(parts) < 3:
            raise ValueError("Usage: add <YYYY-MM> <amount> [asking]")
        month = parse_month(parts[1])
        amount = parse_amount(parts[2])
        asking = parse_asking_price(parts[3] if len(parts) >= 4 else "")
        e = ledger.add_entry(month, amount, asking)
        print(f"Added #{e.id}: {display_month_year(e.month)} {format_currency(e.original_amount)} "
              f"-> {format_currency(e.adjusted_amount)} "
              f"(asking {format_currency(e.asking_price)}, over/under {format_percent(e.over_under_ratio)})")
        return

    if cmd == "delete":
        args = [p for p in parts[1:] if p != "-y"]
        if not args:
            raise ValueError("Usage: delete [-y] <id>")
        entry_id = int(args[0])
        entry = ledger.get_entry(entry_id)
        if entry is None:
            print(f"No entry with id {entry_id}.")
            return
        if "-y" not in parts and not confirm(
                f"Delete entry #{entry_id} ({display_month_year(entry.month)}, "
                f"{format_currency(entry.original_amount)})?"):
            print("Cancelled.")
            return
        print("Deleted." if ledger.delete_entry(entry_id) else f"No entry with id {entry_id}.")
        return

    if cmd == "clear":
        if "-y" not in parts and not confirm(
                "Are you sure you want to delete ALL entries in the sales history? "
                "This action cannot be undone."):
            print("Cancelled.")
            return
        ledger.clear_all()
        print("All entries deleted.")
        return

    if cmd == "show":
        entries = ledger.entries
        if not entries:
            print("No entries yet.")
            return
        _print_table(HISTORY_HEADER, history_rows(entries))
        return

    if cmd == "summary":
        _print_table(("Metric", "Value"), metric_rows(ledger.summarize()))
        return

    if cmd == "years":
        cfg = ledger.config
        years = years_in_range(cfg.min_month, cfg.max_month, available=ledger.table)
        if not years:
            print("No CPI months inside the accepted range.")
            return
        latest = default_month(cfg.max_month, available=ledger.table)
        print(f"{years[0]} .. {years[-1]} ({len(years)} years with CPI data); "
              f"default {display_month_year(latest)}")
        return

    if cmd == "months":
        if len(parts) < 2:
            raise ValueError("Usage: months <year>")
        months = months_for_year(int(parts[1]), ledger.config.min_month, ledger.config.max_month,
                                 available=ledger.table)
        if not months:
            print(f"No accepted months in {parts[1]}.")
            return
        print(", ".join(f"{value} {name}" for value, name in months))
        return

    if cmd == "cpi":
        if len(parts) < 2:
            raise ValueError("Usage: cpi <YYYY-MM> [amount]")
        month = parse_month(parts[1])
        value = ledger.table.get(month)
        print(f"CPI {display_month_year(month)}: {value:g}" if value is not None
              else f"CPI {display_month_year(month)}: not published")
        if len(parts) >= 3:
            amount = parse_amount(parts[2])
            adjusted = adjust_or_unchanged(month, amount, ledger.table, ledger.base_cpi)
            print(f"{format_currency(amount)} in {display_month_year(month)} = "
                  f"{format_currency(adjusted)} in {display_month_year(ledger.config.base_month)}")
        return

    if cmd == "export":
        if len(parts) < 3:
            print('Usage: export csv "out.csv"  OR  export json "out.json"')
            return
        fmt, out_path = parts[1].lower(), parts[2]
        if not len(ledger):
            print("Nothing to export: ledger is empty.")
            return
        if fmt == "csv":
            ledger.export_csv(out_path)
        elif fmt == "json":
            ledger.export_json(out_path)
        else:
            print("Unknown export format. Use: csv or json")
            return
        print(f"Exported {fmt.upper()} to {out_path}")
        return

    if cmd == "report":
        # report "<path.docx>"
        from .report import ReportConfig, generate_docx_report
        if len(parts) < 2:
            raise ValueError('Usage: report "<out.docx>"')
        cfg = ReportConfig(base_month=ledger.config.base_month, cpi_source=ledger.table.source)
        generate_docx_report(ledger.entries, ledger.summarize(), parts[1], config=cfg)
        print(f"Report written to {parts[1]}")
        return

    print("Unknown command. Type 'help'.")


def _print_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    widths: List[int] = [len(h) for h in header]
    for row in rows:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]
    # first column left-aligned, the rest are numbers
    fmt = lambda row: "  ".join(c.ljust(w) if i == 0 else c.rjust(w)
                                for i, (c, w) in enumerate(zip(row, widths)))
    print(fmt(header))
    print("  ".join("-" * w for w in widths))
    for row in rows:
        print(fmt(row))


if __name__ == "__main__":
    raise SystemExit(main())
