"""
Speedrun leaderboard lookup — pipeline and CLI entry point.

Usage:
    speedrun <category> <subcategory> [--rows N] [--workbook <file.xlsx>] [--relative]

Resolves the category alias to a sheet, fetches that sheet's grid,
finds the subcategory header in it and sends the contestant rows below
the header to the message sink.

Without --workbook the live spreadsheet is read through the Google
Sheets API using the OAuth files named in the SPEEDRUN_* environment.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import dotenv

from categories import normalise_subcategory, resolve_sheet_name
from dto.cell_position import CellPosition
from dto.config import SheetsConfig
from dto.leaderboard import LeaderboardTable
from errors import CredentialsError, DataSourceError, InvalidRangeError
from lookup import extract_table, get_matcher, locate
from sinks import ConsoleSink, MessageSink
from sources import GoogleSheetsSource, GridSource, WorkbookSource
from utils.text import render_table_text

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 10

MSG_INVALID_CATEGORY = 'Invalid speedrun category "{category}".'
MSG_NO_CREDENTIALS = "The bot user has not set up valid Google API credentials yet."
MSG_NOT_FOUND = 'Could not find "{subcategory}" in "{sheet}".'
MSG_BAD_LAYOUT = '"{subcategory}" in "{sheet}" is not formatted as expected.'


# -------------------------------------------------------------------
# Pipeline
# -------------------------------------------------------------------


def row_bound_for(position: CellPosition, rows: int, mode: str) -> int:
    """
    Translate the requested row count into the extractor's absolute,
    inclusive row bound.

    ``absolute`` passes *rows* through unchanged, so fewer records come
    back the further down the sheet the subcategory sits.  ``relative``
    reads exactly *rows* records below the header.
    """
    if mode == "relative":
        return position.row + 1 + rows
    return rows


def lookup_speedrun(
    sink: MessageSink,
    source: GridSource,
    rows: int,
    category: str,
    subcategory: str,
    config: Optional[SheetsConfig] = None,
) -> Optional[LeaderboardTable]:
    """
    Look up the top *rows* entries of *subcategory* in *category* and send
    them to *sink*.

    Every expected failure is reported to the sink as a user-facing
    message and ``None`` is returned.
    """
    if rows < 0:
        raise ValueError(f"rows must be non-negative, got {rows}")
    config = config or SheetsConfig()

    sheet_name = resolve_sheet_name(category)
    label = normalise_subcategory(subcategory)
    logger.info("Looking up %r in sheet %r", label, sheet_name)

    try:
        grid = source.fetch_grid(sheet_name)
    except InvalidRangeError as exc:
        logger.warning("Sheet %r rejected: %s", sheet_name, exc)
        sink.send(MSG_INVALID_CATEGORY.format(category=category))
        return None
    except (CredentialsError, DataSourceError):
        logger.warning("Could not fetch sheet %r", sheet_name, exc_info=True)
        sink.send(MSG_NO_CREDENTIALS)
        return None

    position = locate(label, grid, matcher=get_matcher(config.match_mode))
    if position is None:
        logger.info("%r not found in sheet %r", label, sheet_name)
        sink.send(MSG_NOT_FOUND.format(subcategory=label, sheet=sheet_name))
        return None

    bound = row_bound_for(position, rows, config.row_bound_mode)
    table = extract_table(grid, position, bound)
    logger.info(
        "  -> %r at %s%d: %d column(s), %d row(s)",
        label,
        position.column_label,
        position.row + 1,
        len(table.headers),
        len(table.rows),
    )

    if table.is_empty:
        sink.send(MSG_BAD_LAYOUT.format(subcategory=label, sheet=sheet_name))
        return None

    sink.send(render_table_text(table.headers, table.rows))
    return table


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show the top entries of a speedrun leaderboard.",
    )
    parser.add_argument(
        "category",
        help="Category alias (overall, no-csb, cod, magicite) or sheet name",
    )
    parser.add_argument(
        "subcategory",
        help="Subcategory label to find in the sheet (e.g. '100m')",
    )
    parser.add_argument(
        "-n",
        "--rows",
        type=_non_negative_int,
        default=DEFAULT_ROWS,
        help=f"Row count (default: {DEFAULT_ROWS})",
    )
    parser.add_argument(
        "-w",
        "--workbook",
        default=None,
        help="Read a local .xlsx copy instead of the live spreadsheet",
    )
    parser.add_argument(
        "--relative",
        action="store_true",
        help="Treat --rows as a number of contestants rather than a sheet row index",
    )
    args = parser.parse_args(argv)

    dotenv.load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    config = SheetsConfig.from_env()
    if args.relative:
        config = config.model_copy(update={"row_bound_mode": "relative"})

    sink = ConsoleSink()
    if args.workbook:
        source: GridSource = WorkbookSource(args.workbook)
    else:
        try:
            source = GoogleSheetsSource.from_config(config)
        except CredentialsError:
            logger.error("Unable to load OAuth credentials", exc_info=True)
            sink.send(MSG_NO_CREDENTIALS)
            return 1

    table = lookup_speedrun(
        sink, source, args.rows, args.category, args.subcategory, config=config
    )
    return 0 if table is not None else 1


if __name__ == "__main__":
    sys.exit(main())
