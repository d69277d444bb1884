from __future__ import annotations

import pytest

from interview_analytics.domain.errors import MissingRequiredField, NoRecordsFound
from interview_analytics.domain.models import RawRecord
from interview_analytics.parsing.parser import parse_records
from interview_analytics.parsing.validator import validate_records


def _record(**overrides) -> RawRecord:
    fields = {"id": "C1", "date_text": "2025-01-01", "time_text": "09:00 - 10:00"}
    fields.update(overrides)
    return RawRecord(**fields)


def test_valid_records_pass_through_unchanged():
    records = [_record(), _record(id="C2", cancelled=True)]

    assert validate_records(records) == records


def test_empty_sequence_raises_no_records_found():
    with pytest.raises(NoRecordsFound):
        validate_records([])


def test_missing_date_line_names_position_and_field():
    records = parse_records(
        "Candidate ID: A\nDate: 2025-01-01\nTime: 09:00\nCandidate ID: B\nTime: 10:00 - 11:00 IST"
    )

    with pytest.raises(MissingRequiredField) as excinfo:
        validate_records(records)

    assert excinfo.value.position == 2
    assert excinfo.value.fields == ("Date",)
    assert "record 2" in str(excinfo.value)


def test_cancelled_record_still_requires_all_fields():
    with pytest.raises(MissingRequiredField) as excinfo:
        validate_records([_record(time_text="", cancelled=True)])

    assert excinfo.value.fields == ("Time",)


def test_blank_id_is_missing():
    with pytest.raises(MissingRequiredField) as excinfo:
        validate_records([_record(id="  ", date_text="")])

    assert excinfo.value.fields == ("Candidate ID", "Date")


def test_first_offending_record_is_reported():
    records = [_record(), _record(date_text=""), _record(time_text="")]

    with pytest.raises(MissingRequiredField) as excinfo:
        validate_records(records)

    assert excinfo.value.position == 2
