# pressure_dashboard/utils/blood_pressure.py
import math

PSYS_HIGH = 180
PDYS_HIGH = 120
PSYS_LOW = 90
PDYS_LOW = 60


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def is_hypertensive_crisis(systolic, diastolic, sys_high=None, dia_high=None) -> bool:
    if not (_is_number(systolic) and _is_number(diastolic)):
        return False
    sys_high = sys_high or PSYS_HIGH
    dia_high = dia_high or PDYS_HIGH
    return systolic >= sys_high or diastolic >= dia_high


def is_hypotensive_crisis(systolic, diastolic, sys_low=None, dia_low=None) -> bool:
    if not (_is_number(systolic) and _is_number(diastolic)):
        return False
    sys_low = sys_low or PSYS_LOW
    dia_low = dia_low or PDYS_LOW
    return systolic <= sys_low or diastolic <= dia_low
