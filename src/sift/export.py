# Copyright (c) Syntropy Systems
"""Write flattened response rows to a spreadsheet, CSV or JSON file."""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from pydantic import TypeAdapter

from sift.flatten import CellValue, collect_headers, flatten

if TYPE_CHECKING:
    from collections.abc import Sequence

    from openpyxl.worksheet.worksheet import Worksheet

    from sift.flatten import ExportRow
    from sift.models.response import ResponseRecord

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "responses.xlsx"
DEFAULT_SHEET_NAME = "Sheet1"
EXPORT_SUFFIXES = (".xlsx", ".csv", ".json")

_ROWS_ADAPTER = TypeAdapter(list[dict[str, CellValue]])


def _xlsx_value(value: CellValue) -> CellValue:
    """Strip characters that are not allowed in worksheet XML."""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


def _append_text_row(ws: Worksheet, values: list[CellValue]) -> None:
    ws.append([_xlsx_value(v) for v in values])
    for cell in ws[ws.max_row]:
        # Keep "=..." text as a string instead of a formula
        if isinstance(cell.value, str) and cell.value.startswith("="):
            cell.data_type = "s"


def _write_xlsx(
    path: Path,
    headers: list[str],
    rows: list[ExportRow],
    sheet_name: str,
) -> None:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    _append_text_row(ws, list(headers))
    for row in rows:
        cells = row.columns()
        _append_text_row(ws, [cells.get(name) for name in headers])
    wb.save(path)


def _write_csv(path: Path, headers: list[str], rows: list[ExportRow]) -> None:
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=headers, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row.columns())


def _write_json(path: Path, rows: list[ExportRow]) -> None:
    payload = [row.columns() for row in rows]
    _ = path.write_bytes(_ROWS_ADAPTER.dump_json(payload, indent=2))


def export_rows(
    records: Sequence[ResponseRecord] | None,
    path: Path | str | None = None,
    sheet_name: str = DEFAULT_SHEET_NAME,
) -> Path | None:
    """Flatten ``records`` and write them as a single table.

    The format follows the file suffix (.xlsx, .csv or .json). Returns the
    written path, or None when there is nothing to export; in that case no
    file is created and a warning is logged.
    """
    output = Path(path) if path else Path(DEFAULT_FILENAME)
    suffix = output.suffix.lower()
    if suffix not in EXPORT_SUFFIXES:
        msg = f"Output must be .xlsx, .csv or .json, got '{output.suffix}'"
        raise ValueError(msg)

    if not records:
        logger.warning("No responses to export; skipping %s", output)
        return None

    rows = flatten(records)
    headers = collect_headers(rows)

    if suffix == ".xlsx":
        _write_xlsx(output, headers, rows, sheet_name)
    elif suffix == ".csv":
        _write_csv(output, headers, rows)
    else:
        _write_json(output, rows)

    logger.debug("Exported %d row(s) to %s", len(rows), output)
    return output
