import time

import pytest

from corekit.date import Date


def test_timestamp_round_trip():
    assert Date(0).time == 0
    assert Date(1_700_000_000_123).time == 1_700_000_000_123


def test_of_fields_round_trip():
    d = Date.of(2024, 1, 15)
    assert (d.year, d.month, d.day) == (2024, 1, 15)


def test_str_of_full_date_time():
    d = Date.of(2024, 1, 15, 10, 30, 45)
    assert str(d) == "2024-01-15 10:30:45"


def test_of_has_whole_second_resolution():
    d = Date.of(2024, 1, 15, 10, 30, 45)
    assert d.time % 1000 == 0


def test_now_is_close_to_clock():
    before = int(time.time() * 1000)
    now = Date()
    after = int(time.time() * 1000)
    assert before - 1 <= now.time <= after + 1


def test_clone_equal_and_hash():
    d = Date(123456)
    copy = d.clone()
    assert copy == d
    assert hash(copy) == hash(d)
    assert copy is not d


def test_after_before_and_ordering():
    early = Date(1000)
    late = Date(2000)
    assert late.after(early)
    assert early.before(late)
    assert not early.after(late)
    assert not early.before(early)
    assert sorted([late, early]) == [early, late]


def test_later_calendar_date_is_after():
    assert Date.of(2024, 3, 2).after(Date.of(2024, 3, 1))


@pytest.mark.parametrize(
    "args",
    [
        (2024, 0, 1),
        (2024, 13, 1),
        (2024, 1, 0),
        (2024, 1, 32),
        (2024, 1, 1, 24, 0, 0),
        (2024, 1, 1, 0, 60, 0),
        (2024, 1, 1, 0, 0, 60),
        (2024, 1, 1, -1, 0, 0),
    ],
)
def test_invalid_components_raise(args):
    with pytest.raises(ValueError):
        Date.of(*args)


def test_not_equal_to_other_types():
    assert (Date(5) == 5) is False