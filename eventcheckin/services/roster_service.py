# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""CSV roster parsing."""

import csv
import io
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class RosterEntry:
    """One attendee parsed from a roster."""

    name: str
    external_id: str | None = None


@dataclass
class ColumnMap:
    """Indexes of the roster columns that were recognised."""

    name: int = -1
    first_name: int = -1
    last_name: int = -1
    external_id: int = -1
    email: int = -1


def map_columns(headers: list[str]) -> ColumnMap:
    """Match header names to roster columns.

    Matching is case-insensitive and loose: "Full Name" counts as the name
    column, "First Name" as the first name, "Member ID" as the external id.
    """
    columns = ColumnMap()
    for index, header in enumerate(headers):
        header = header.lower()
        if header == "name" or (
            "name" in header
            and not any(part in header for part in ("first", "last", "given", "family"))
        ):
            columns.name = index
        elif "first" in header:
            columns.first_name = index
        elif any(part in header for part in ("last", "family", "surname")):
            columns.last_name = index
        elif "id" in header and "email" not in header:
            columns.external_id = index
        elif "email" in header:
            columns.email = index
    return columns


def _cell(row: list[str], index: int) -> str:
    return row[index] if index >= 0 else ""


def resolve_name(row: list[str], columns: ColumnMap) -> str:
    """Pick the attendee name from a row: full name, then first + last."""
    if _cell(row, columns.name):
        return row[columns.name]
    if columns.first_name >= 0 and columns.last_name >= 0:
        return f"{_cell(row, columns.first_name)} {_cell(row, columns.last_name)}".strip()
    return _cell(row, columns.first_name)


def split_row(line: str) -> list[str]:
    """Split one physical line into trimmed cells.

    Quotes are honoured within the line only; a field is never continued on
    the next line. A blank line is a single empty cell.
    """
    cells = next(csv.reader([line.rstrip("\r")], skipinitialspace=True), [""])
    return [cell.strip() for cell in cells]


def parse_roster(text: str) -> tuple[list[RosterEntry], list[str]]:
    """Parse a CSV roster into attendees and per-row error messages.

    Row numbers in errors are 1-based line numbers that count the header.
    Names are not de-duplicated: two people may share a name on a real
    roster.
    """
    errors: list[str] = []
    attendees: list[RosterEntry] = []

    text = text.strip()
    if not text:
        errors.append("CSV file is empty")
        return attendees, errors

    lines = text.split("\n")
    headers = split_row(lines[0])
    columns = map_columns(headers)
    logger.debug(f"Roster headers {headers} mapped to {columns}")

    for row_number, line in enumerate(lines[1:], start=2):
        row = split_row(line)
        if len(row) != len(headers):
            errors.append(
                f"Row {row_number}: Column count mismatch "
                f"(expected {len(headers)}, got {len(row)})"
            )
            continue

        name = resolve_name(row, columns)
        if not name:
            errors.append(f"Row {row_number}: No name found")
            continue

        attendees.append(
            RosterEntry(name=name, external_id=_cell(row, columns.external_id) or None)
        )

    logger.info(f"Parsed {len(attendees)} attendees with {len(errors)} errors")
    return attendees, errors
