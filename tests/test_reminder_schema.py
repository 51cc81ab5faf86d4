from datetime import datetime, timedelta, timezone

import pytest

from pressure_dashboard.schemas import REPEAT_INTERVAL_OPTIONS, ReminderSchema, parse_interval

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def _payload(**overrides):
    data = {
        "title": "Take pill",
        "type": "MEDICAMENTO",
        "startDate": NOW + timedelta(hours=1),
        "repeatInterval": "4",
        "additionalNotes": "after meals",
    }
    data.update(overrides)
    return data


def test_valid_payload():
    values, errors = ReminderSchema(now=NOW).validate(_payload())
    assert errors == {}
    assert values.title == "Take pill"
    assert values.type == "MEDICAMENTO"
    assert values.repeat_hours == 4


def test_start_date_in_past_is_rejected():
    values, errors = ReminderSchema(now=NOW).validate(_payload(startDate=NOW - timedelta(minutes=1)))
    assert values is None
    assert errors == {"startDate": "La fecha debe ser igual o posterior a la actual"}


def test_start_date_equal_to_now_is_accepted():
    values, _ = ReminderSchema(now=NOW).validate(_payload(startDate=NOW))
    assert values is not None


def test_now_is_fixed_at_construction():
    schema = ReminderSchema(now=NOW)
    # Validated long after construction, still measured against NOW.
    values, _ = schema.validate(_payload(startDate=NOW + timedelta(seconds=1)))
    assert values is not None
    assert schema.now == NOW


@pytest.mark.parametrize("field,value", [
    ("title", ""),
    ("title", "   "),
    ("title", "x" * 71),
    ("type", ""),
    ("type", "OTRO"),
    ("additionalNotes", "n" * 256),
    ("repeatInterval", "cada rato"),
    ("repeatInterval", "-2"),
])
def test_field_errors_are_keyed(field, value):
    values, errors = ReminderSchema(now=NOW).validate(_payload(**{field: value}))
    assert values is None
    assert list(errors) == [field]


def test_additional_notes_required_but_may_be_empty():
    payload = _payload()
    payload.pop("additionalNotes")
    _, errors = ReminderSchema(now=NOW).validate(payload)
    assert "additionalNotes" in errors

    values, _ = ReminderSchema(now=NOW).validate(_payload(additionalNotes=""))
    assert values.additional_notes == ""


def test_naive_start_date_uses_schema_timezone():
    naive = (NOW + timedelta(hours=2)).replace(tzinfo=None)
    values, _ = ReminderSchema(now=NOW).validate(_payload(startDate=naive))
    assert values.start_date.tzinfo == timezone.utc


@pytest.mark.parametrize("text,expected", [
    ("4", 4), (" 12 ", 12), ("8 horas", 8), ("0", 0), ("", None), ("abc", None), (6, 6),
])
def test_parse_interval(text, expected):
    assert parse_interval(text) == expected


def test_every_option_is_valid():
    for option in REPEAT_INTERVAL_OPTIONS:
        values, _ = ReminderSchema(now=NOW).validate(_payload(repeatInterval=option["value"]))
        assert values.repeat_hours == int(option["value"])


def test_naive_now_with_offset_start_date():
    schema = ReminderSchema(now=datetime(2026, 10, 19, 9, 0))
    assert schema.now.tzinfo == timezone.utc

    values, errors = schema.validate(_payload(startDate="2026-10-19T11:00:00Z"))
    assert errors == {}
    assert values is not None

    values, errors = schema.validate(_payload(startDate="2026-10-19T08:00:00Z"))
    assert values is None
    assert errors == {"startDate": "La fecha debe ser igual o posterior a la actual"}


@pytest.mark.parametrize("text", [str(2**31), "1" + "0" * 30, 2**31])
def test_interval_above_column_range_is_rejected(text):
    assert parse_interval(text) is None
    values, errors = ReminderSchema(now=NOW).validate(_payload(repeatInterval=text))
    assert values is None
    assert errors == {"repeatInterval": "El intervalo debe ser un número entero de horas"}


def test_builtin_errors_are_in_spanish():
    payload = _payload(title="x" * 71, type="OTRO", startDate="mañana")
    payload.pop("additionalNotes")
    _, errors = ReminderSchema(now=NOW).validate(payload)
    assert errors == {
        "title": "Debe tener como máximo 70 caracteres",
        "type": "Selecciona una opción válida",
        "startDate": "La fecha no es válida",
        "additionalNotes": "Este campo es obligatorio",
    }
