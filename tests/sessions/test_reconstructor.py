from __future__ import annotations

import itertools
from datetime import date, datetime, timezone

import pytest

from src.attendance_stats.attendance_stats.common.date_range import DateRange
from src.attendance_stats.attendance_stats.core.enums import AnomalyKind, PunchKind
from src.attendance_stats.attendance_stats.core.exceptions import ValidationError
from src.attendance_stats.attendance_stats.punches.model import PunchEvent
from src.attendance_stats.attendance_stats.sessions.reconstructor import SessionReconstructor
from src.attendance_stats.attendance_stats.sessions.strategies.earliest_strategy import KeepEarliestArrivalStrategy
from src.attendance_stats.attendance_stats.sessions.strategies.open_session_strategy import CloseAtMidnightStrategy

A = PunchKind.ARRIVAL
D = PunchKind.DEPARTURE


def ts(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 1, day, hour, minute, tzinfo=timezone.utc)


def punches(*items, user_id: int = 1) -> list[PunchEvent]:
    return [PunchEvent(event_id=i + 1, timestamp=t, kind=k, user_id=user_id) for i, (k, t) in enumerate(items)]


def test_single_pair_gives_one_eight_hour_session():
    events = punches((A, ts(6, 8)), (D, ts(6, 16)))

    result = SessionReconstructor().reconstruct(events)

    assert len(result.sessions) == 1
    session = result.sessions[0]
    assert session.work_date == date(2026, 1, 6)
    assert session.hours == 8
    assert result.anomalies == ()
    assert not result.has_open_session


def test_duplicate_arrival_keeps_latest_and_records_anomaly():
    events = punches((A, ts(6, 8)), (A, ts(6, 9)), (D, ts(6, 17)))

    result = SessionReconstructor().reconstruct(events)

    assert [s.arrival for s in result.sessions] == [ts(6, 9)]
    assert result.sessions[0].hours == 8
    assert [(a.kind, a.event_id) for a in result.anomalies] == [(AnomalyKind.DUPLICATE_ARRIVAL, 1)]


def test_duplicate_arrival_keep_earliest_policy():
    events = punches((A, ts(6, 8)), (A, ts(6, 9)), (D, ts(6, 17)))

    result = SessionReconstructor(duplicate_arrival=KeepEarliestArrivalStrategy()).reconstruct(events)

    assert result.sessions[0].arrival == ts(6, 8)
    assert result.sessions[0].hours == 9
    assert [(a.kind, a.event_id) for a in result.anomalies] == [(AnomalyKind.DUPLICATE_ARRIVAL, 2)]


def test_unmatched_departure_is_dropped():
    events = punches((D, ts(6, 7)), (A, ts(6, 8)), (D, ts(6, 12)))

    result = SessionReconstructor().reconstruct(events)

    assert len(result.sessions) == 1
    assert result.sessions[0].hours == 4
    assert [(a.kind, a.event_id) for a in result.anomalies] == [(AnomalyKind.UNMATCHED_DEPARTURE, 1)]


def test_trailing_arrival_is_open_session_and_not_counted():
    events = punches((A, ts(5, 8)), (D, ts(5, 16)), (A, ts(6, 8)))

    result = SessionReconstructor().reconstruct(events)

    assert result.total_hours == 8
    assert result.has_open_session
    assert result.open_arrival.event_id == 3
    assert [a.kind for a in result.anomalies] == [AnomalyKind.OPEN_SESSION]


def test_close_at_midnight_policy_counts_open_session_until_end_of_day():
    events = punches((A, ts(6, 20)))

    result = SessionReconstructor(open_session=CloseAtMidnightStrategy()).reconstruct(events)

    assert [s.hours for s in result.sessions] == [4]
    assert result.sessions[0].departure == datetime(2026, 1, 7, tzinfo=timezone.utc)
    assert [a.kind for a in result.anomalies] == [AnomalyKind.OPEN_SESSION]


def test_session_crossing_midnight_belongs_to_arrival_date():
    events = punches((A, ts(6, 22)), (D, ts(7, 6)))

    result = SessionReconstructor().reconstruct(events)

    assert result.sessions[0].work_date == date(2026, 1, 6)
    assert result.sessions[0].hours == 8


def test_out_of_order_input_is_sorted_before_pairing():
    ordered = punches((A, ts(5, 8)), (D, ts(5, 16)), (A, ts(6, 9)), (D, ts(6, 12)))
    shuffled = [ordered[3], ordered[0], ordered[2], ordered[1]]

    assert SessionReconstructor().reconstruct(shuffled) == SessionReconstructor().reconstruct(ordered)


@pytest.mark.parametrize("arrival_id, departure_id", [(1, 2), (2, 1)])
def test_same_timestamp_pair_is_a_zero_hour_session(arrival_id, departure_id):
    events = [
        PunchEvent(event_id=departure_id, timestamp=ts(6, 8), kind=D, user_id=1),
        PunchEvent(event_id=arrival_id, timestamp=ts(6, 8), kind=A, user_id=1),
    ]

    result = SessionReconstructor().reconstruct(events)

    assert len(result.sessions) == 1
    assert result.sessions[0].hours == 0
    assert result.anomalies == ()
    assert not result.has_open_session


def test_reconstruction_is_idempotent():
    events = punches((D, ts(5, 7)), (A, ts(5, 8)), (A, ts(5, 8, 30)), (D, ts(5, 17)), (A, ts(6, 8)))
    reconstructor = SessionReconstructor()

    first = reconstructor.reconstruct(events)
    second = reconstructor.reconstruct(tuple(events))

    assert first == second
    assert [s.to_dict() for s in first.sessions] == [s.to_dict() for s in second.sessions]


@pytest.mark.parametrize(
    "kinds",
    [seq for n in range(1, 6) for seq in itertools.product([A, D], repeat=n)],
)
def test_only_paired_events_contribute_hours(kinds):
    # One punch per hour; only Arrival immediately followed by Departure is a pair
    # under the latest-wins policy, so each pair is worth exactly one hour.
    events = punches(*[(k, ts(6, 6 + i)) for i, k in enumerate(kinds)])
    expected_pairs = sum(1 for a, b in zip(kinds, kinds[1:]) if a == A and b == D)

    result = SessionReconstructor().reconstruct(events)

    assert result.total_hours == expected_pairs
    assert len(result.sessions) + len(result.anomalies) <= len(kinds)


def test_date_range_drops_events_outside_range():
    events = punches((A, ts(4, 8)), (D, ts(4, 16)), (A, ts(5, 8)), (D, ts(5, 12)), (A, ts(9, 8)), (D, ts(9, 10)))

    result = SessionReconstructor().reconstruct(events, date_range=DateRange(date(2026, 1, 5), date(2026, 1, 8)))

    assert [s.work_date for s in result.sessions] == [date(2026, 1, 5)]
    assert result.anomalies == ()


def test_empty_stream_yields_nothing():
    result = SessionReconstructor().reconstruct([])

    assert result.sessions == ()
    assert result.anomalies == ()
    assert result.total_hours == 0


def test_mixed_users_are_rejected():
    events = punches((A, ts(6, 8))) + punches((D, ts(6, 16)), user_id=2)

    with pytest.raises(ValidationError):
        SessionReconstructor().reconstruct(events)
