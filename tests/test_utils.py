import math

import pytest

from pressure_dashboard.utils.blood_pressure import is_hypertensive_crisis, is_hypotensive_crisis
from pressure_dashboard.utils.mask_value import mask_value


@pytest.mark.parametrize("value,expected", [
    ("", ""),
    ("a", "a"),
    ("ab", "ab"),
    ("abc", "a*c"),
    ("DOC12345", "D******5"),
])
def test_mask_value(value, expected):
    assert mask_value(value) == expected


def test_hypertensive_thresholds():
    assert is_hypertensive_crisis(180, 80)
    assert is_hypertensive_crisis(120, 120)
    assert not is_hypertensive_crisis(179, 119)
    assert is_hypertensive_crisis(150, 95, sys_high=140, dia_high=90)


def test_hypotensive_thresholds():
    assert is_hypotensive_crisis(90, 70)
    assert is_hypotensive_crisis(110, 60)
    assert not is_hypotensive_crisis(91, 61)


@pytest.mark.parametrize("systolic,diastolic", [
    (None, 80), (120, None), ("120", 80), (math.nan, 80), (True, 80),
])
def test_invalid_readings_are_never_a_crisis(systolic, diastolic):
    assert not is_hypertensive_crisis(systolic, diastolic)
    assert not is_hypotensive_crisis(systolic, diastolic)
