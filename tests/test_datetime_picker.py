from datetime import date, datetime

import pytest

from pressure_dashboard.client.datetime_picker import AM, PM, DateTimePicker, to_12h, to_24h


@pytest.mark.parametrize("hour,period,expected", [
    (12, AM, 0), (1, AM, 1), (11, AM, 11), (12, PM, 12), (1, PM, 13), (11, PM, 23),
])
def test_to_24h(hour, period, expected):
    assert to_24h(hour, period) == expected


@pytest.mark.parametrize("hour24,expected", [(0, (12, AM)), (9, (9, AM)), (12, (12, PM)), (15, (3, PM))])
def test_to_12h(hour24, expected):
    assert to_12h(hour24) == expected


def test_to_24h_rejects_out_of_range():
    with pytest.raises(ValueError):
        to_24h(13, AM)
    with pytest.raises(ValueError):
        to_24h(3, "XM")


def test_three_pm_from_three_am():
    picker = DateTimePicker(datetime(2026, 10, 20, 3, 0))
    assert picker.period == AM
    picker.period = PM
    assert picker.select_hour("3") == datetime(2026, 10, 20, 15, 0)


def test_toggle_period_keeps_hour():
    picker = DateTimePicker(datetime(2026, 10, 20, 3, 0))
    assert picker.select_period(PM) == datetime(2026, 10, 20, 15, 0)
    assert picker.select_period(AM) == datetime(2026, 10, 20, 3, 0)


def test_select_hour_zeroes_minutes():
    picker = DateTimePicker(datetime(2026, 10, 20, 10, 37, 12, 500))
    assert picker.select_hour(9) == datetime(2026, 10, 20, 9, 0)


def test_twelve_edge_cases():
    picker = DateTimePicker(datetime(2026, 10, 20, 8, 0))
    assert picker.select_hour(12) == datetime(2026, 10, 20, 0, 0)
    picker.select_period(PM)
    assert picker.value == datetime(2026, 10, 20, 12, 0)


def test_select_date_keeps_time():
    picker = DateTimePicker(datetime(2026, 10, 20, 15, 0))
    assert picker.select_date(date(2026, 11, 2)) == datetime(2026, 11, 2, 15, 0)
