from datetime import date, datetime, time, timezone

import pytest

from src.attendance_stats.attendance_stats.core.enums import PunchKind
from src.attendance_stats.attendance_stats.core.exceptions import ValidationError
from src.attendance_stats.attendance_stats.punches.model import PunchEvent
from src.attendance_stats.attendance_stats.timetables.model import ShiftSchedule


def test_punch_from_wire_record():
    event = PunchEvent.from_record({"id": 3, "timestamp": "2026-01-06T08:00:00Z", "type": "Arrival", "userId": 7})

    assert event == PunchEvent(
        event_id=3,
        timestamp=datetime(2026, 1, 6, 8, tzinfo=timezone.utc),
        kind=PunchKind.ARRIVAL,
        user_id=7,
    )
    assert event.work_date == date(2026, 1, 6)
    assert event.is_arrival


def test_punch_accepts_source_column_names():
    event = PunchEvent.from_record({"id": 4, "timestamp": "2026-01-06T16:00:00Z", "type": "Departure", "id_user": 7})

    assert event.kind == PunchKind.DEPARTURE
    assert event.user_id == 7


@pytest.mark.parametrize(
    "record",
    [
        {"id": 1, "timestamp": "2026-01-06T08:00:00Z", "type": "Lunch", "userId": 1},
        {"id": 1, "timestamp": "yesterday", "type": "Arrival", "userId": 1},
        {"id": 1, "type": "Arrival", "userId": 1},
        {"id": 1, "timestamp": "2026-01-06T08:00:00Z", "type": "Arrival"},
    ],
)
def test_malformed_punch_is_rejected(record):
    with pytest.raises(ValidationError):
        PunchEvent.from_record(record)


def test_schedule_from_wire_and_source_records():
    assert ShiftSchedule.from_record({"shiftStart": "08:00", "shiftEnd": "16:30"}) == ShiftSchedule(
        shift_start=time(8, 0), shift_end=time(16, 30)
    )
    assert ShiftSchedule.from_record({"id": 2, "Shift_start": "09:00", "Shift_end": "17:00"}).timetable_id == 2

    with pytest.raises(ValidationError):
        ShiftSchedule.from_record({"shiftStart": "8am", "shiftEnd": "16:00"})
