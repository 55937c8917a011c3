"""
Event workbook parser: CLI entry point.

Usage:
    python parser.py <excel_file> [--output <output.json>] [--sheet <sheet_name>]

Loads an event-budget workbook, recovers budget items, payments, menu
items, timeline tasks and rider documents from whichever of the known
template sheets are present, and writes the result as a single JSON file.

If --sheet is provided, only that worksheet is routed to an extractor.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

import dotenv

from dto.output import ParsedWorkbook
from orchestrator import Orchestrator
from reader import WorkbookSource, load_workbook_data

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Main pipeline
# -------------------------------------------------------------------


def parse_workbook(
    source: WorkbookSource,
    sheet_name_filter: Optional[str] = None,
) -> ParsedWorkbook:
    """
    Parse an .xlsx workbook (path, bytes or binary file object) into a
    ``ParsedWorkbook``.

    If *sheet_name_filter* is provided, only that worksheet is processed.
    """
    workbook = load_workbook_data(source)
    result = Orchestrator().parse(workbook, sheet_name_filter=sheet_name_filter)

    logger.info(
        "Parsed %d budget item(s), %d payment(s), %d menu item(s), "
        "%d task(s), %d rider document(s)",
        len(result.budget_items),
        len(result.payments),
        len(result.menu_items),
        len(result.tasks),
        len(result.rider_docs),
    )
    return result


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main() -> None:
    dotenv.load_dotenv()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Extract event budget, menu, timeline and rider data "
        "from an .xlsx workbook into JSON.",
    )
    parser.add_argument(
        "excel_file",
        help="Path to the .xlsx file to parse",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_parsed.json)",
    )
    parser.add_argument(
        "-s",
        "--sheet",
        default=None,
        help="Name of a single worksheet to process (default: all sheets)",
    )
    args = parser.parse_args()

    excel_path = args.excel_file
    if not os.path.isfile(excel_path):
        logger.error("File not found: %s", excel_path)
        sys.exit(1)

    if args.output:
        output_path = args.output
    else:
        output_path = f"{Path(excel_path).stem}_parsed.json"

    result = parse_workbook(excel_path, sheet_name_filter=args.sheet)

    json_str = result.model_dump_json(indent=2, exclude_none=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_str)

    logger.info("Output written to %s", output_path)


if __name__ == "__main__":
    main()
