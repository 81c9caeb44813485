# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for roster_service."""

import pytest

from eventcheckin.services.roster_service import RosterEntry, map_columns, parse_roster


def test_parse_name_and_id_columns():
    attendees, errors = parse_roster("Name,Member ID\nAda Lovelace,M-1\nGrace Hopper,\n")

    assert errors == []
    assert attendees == [
        RosterEntry(name="Ada Lovelace", external_id="M-1"),
        RosterEntry(name="Grace Hopper", external_id=None),
    ]


def test_parse_first_and_last_name_columns():
    attendees, errors = parse_roster("First Name,Last Name,Email\nAda,Lovelace,ada@example.com")

    assert errors == []
    assert attendees == [RosterEntry(name="Ada Lovelace")]


def test_first_name_only():
    attendees, _ = parse_roster("first\nAda")
    assert attendees == [RosterEntry(name="Ada")]


def test_quoted_fields_with_commas_and_escaped_quotes():
    text = 'name,id\n"Hopper, Grace","G-""1"""\n'
    attendees, errors = parse_roster(text)

    assert errors == []
    assert attendees == [RosterEntry(name="Hopper, Grace", external_id='G-"1"')]


def test_row_errors_are_reported_with_row_numbers():
    text = "name,id\nAda,1\nGrace\n,3\nAlan,4"
    attendees, errors = parse_roster(text)

    assert [a.name for a in attendees] == ["Ada", "Alan"]
    assert errors == [
        "Row 3: Column count mismatch (expected 2, got 1)",
        "Row 4: No name found",
    ]


def test_duplicate_names_are_kept():
    attendees, errors = parse_roster("name\nSam Lee\nSam Lee")
    assert errors == []
    assert [a.name for a in attendees] == ["Sam Lee", "Sam Lee"]


@pytest.mark.parametrize("text", ["", "   \n  "])
def test_empty_input(text):
    attendees, errors = parse_roster(text)
    assert attendees == []
    assert errors == ["CSV file is empty"]


def test_map_columns():
    columns = map_columns(["Full Name", "Email", "Member ID", "Family"])

    assert columns.name == 0
    assert columns.email == 1
    assert columns.external_id == 2
    assert columns.last_name == 3
    assert columns.first_name == -1


def test_blank_line_in_single_column_roster_has_no_name():
    attendees, errors = parse_roster("name\nAda\n\nGrace")

    assert [a.name for a in attendees] == ["Ada", "Grace"]
    assert errors == ["Row 3: No name found"]


def test_blank_line_counts_as_one_empty_cell():
    attendees, errors = parse_roster("name,id\nAda,1\n\nGrace,2")

    assert [a.name for a in attendees] == ["Ada", "Grace"]
    assert errors == ["Row 3: Column count mismatch (expected 2, got 1)"]


def test_quoted_field_does_not_continue_onto_next_line():
    text = 'name,id\n"Ada\nLovelace,1\nGrace\nAlan,4'
    attendees, errors = parse_roster(text)

    assert [a.name for a in attendees] == ["Lovelace", "Alan"]
    assert errors == [
        "Row 2: Column count mismatch (expected 2, got 1)",
        "Row 4: Column count mismatch (expected 2, got 1)",
    ]


def test_crlf_line_endings():
    attendees, errors = parse_roster("name,id\r\nAda,1\r\nGrace,2\r\n")

    assert errors == []
    assert attendees == [
        RosterEntry(name="Ada", external_id="1"),
        RosterEntry(name="Grace", external_id="2"),
    ]
