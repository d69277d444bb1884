from __future__ import annotations

import pytest

from interview_analytics.domain.errors import NoRecordsFound
from interview_analytics.domain.models import RawRecord
from interview_analytics.parsing.parser import parse_records

SAMPLE_RECORD_COUNT = 13


def test_parse_single_record_strips_labels_and_timezone():
    records = parse_records(
        "Candidate ID: C14954072\nDate: 2025-05-21\nTime:   16:00 - 17:00  IST\n"
    )

    assert records == [
        RawRecord(id="C14954072", date_text="2025-05-21", time_text="16:00 - 17:00", cancelled=False)
    ]


def test_parse_sample_schedule_keeps_input_order(sample_text: str):
    records = parse_records(sample_text)

    assert len(records) == SAMPLE_RECORD_COUNT
    assert records[0].id == "C14954072"
    assert records[-1].id == "C18461824"
    assert [r.id for r in records if r.cancelled] == ["C16377895"]


def test_cancel_marker_is_case_insensitive_substring():
    text = "\n".join(
        [
            "Candidate ID: A",
            "Date: 2025-01-01",
            "Time: 09:00 - 10:00",
            "** interview CANCELED by candidate **",
            "Candidate ID: B",
            "Date: 2025-01-02",
            "Time: 09:00 - 10:00",
        ]
    )

    records = parse_records(text)

    assert [(r.id, r.cancelled) for r in records] == [("A", True), ("B", False)]


def test_cancel_marker_may_appear_before_field_lines():
    records = parse_records("Candidate ID: A\nCancelled\nDate: 2025-01-01\nTime: 09:00 - 10:00")

    assert records[0].cancelled is True
    assert records[0].date_text == "2025-01-01"


def test_cancel_line_before_first_record_is_ignored():
    records = parse_records("Cancelled\nCandidate ID: A\nDate: 2025-01-01\nTime: 09:00")

    assert records[0].cancelled is False


def test_field_lines_before_first_record_are_ignored():
    records = parse_records("Date: 1999-01-01\nTime: 01:00\nCandidate ID: A\nDate: 2025-01-01")

    assert records == [RawRecord(id="A", date_text="2025-01-01", time_text="", cancelled=False)]


def test_unrecognised_lines_and_surrounding_blank_lines_are_ignored():
    text = "\n\n  Interview log export  \nCandidate ID: A\nRoom: 4B\nDate: 2025-01-01\n\nTime: 09:00 - 10:00\n\n"

    records = parse_records(text)

    assert records == [RawRecord(id="A", date_text="2025-01-01", time_text="09:00 - 10:00")]


def test_value_is_everything_after_the_first_colon():
    records = parse_records("Candidate ID: ORG:42\nDate: 2025-01-01\nTime: 09:30 - 10:30 IST IST")

    assert records[0].id == "ORG:42"
    assert records[0].time_text == "09:30 - 10:30"


def test_labels_are_case_sensitive():
    records = parse_records("Candidate ID: A\ndate: 2025-01-01\nTIME: 09:00")

    assert records[0].date_text == ""
    assert records[0].time_text == ""


def test_windows_line_endings_are_supported():
    records = parse_records("Candidate ID: A\r\nDate: 2025-01-01\r\nTime: 09:00 - 10:00 IST\r\n")

    assert records[0].date_text == "2025-01-01"
    assert records[0].time_text == "09:00 - 10:00"


def test_empty_candidate_id_still_opens_a_record():
    records = parse_records("Candidate ID:\nDate: 2025-01-01\nTime: 09:00")

    assert len(records) == 1
    assert records[0].id == ""


@pytest.mark.parametrize("text", ["", "   \n\t\n", "Date: 2025-01-01\nCancelled"])
def test_no_records_raises(text: str):
    with pytest.raises(NoRecordsFound, match="No valid interview data found"):
        parse_records(text)
