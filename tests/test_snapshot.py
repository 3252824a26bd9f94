"""Tests for decoding a full polling cycle with ApplianceSnapshot."""
import datetime as dt
import json
from decimal import Decimal

from mielelink.diagnostics import get_events
from mielelink.domain import ApplianceSnapshot
from mielelink.domain.state import OpenClosed, QuantityState, StringState, UnDef, Unit
from mielelink.parsing.extended import POWER_CONSUMPTION_BYTE_POSITION, WATER_CONSUMPTION_BYTE_POSITION
from mielelink.selectors import DISHWASHER


def _make_prop(value, metadata=None) -> dict:
    """Helper: wrap value/metadata into the standard property structure."""
    entry = {"value": value}
    if metadata is not None:
        entry["metadata"] = metadata
    return entry


def _extended_hex(power_tenths: int, water_tenths: int) -> str:
    data = bytearray(20)
    data[POWER_CONSUMPTION_BYTE_POSITION] = power_tenths
    data[WATER_CONSUMPTION_BYTE_POSITION] = water_tenths
    return data.hex()


def _snapshot(raw: dict) -> ApplianceSnapshot:
    return ApplianceSnapshot(raw=raw, received_at=dt.datetime.now(dt.timezone.utc))


def test_value_accessors():
    snapshot = _snapshot({"state": _make_prop("Running"), "brandId": 1, "phase": _make_prop(None)})
    assert snapshot.value("state") == "Running"
    assert snapshot.value("brandId") == "1"
    assert snapshot.value("phase") is None
    assert snapshot.value("missing") is None


def test_metadata_from_dict_and_json():
    meta = {"MieleEnum": {"K1": "Eco"}}
    snapshot = _snapshot(
        {
            "programId": _make_prop("Eco", meta),
            "phase": _make_prop("Drying", json.dumps({"LocalizedValue": "Dry"})),
        }
    )
    assert snapshot.metadata("programId").enum_map == {"K1": "Eco"}
    assert snapshot.metadata("phase").localized_value == "Dry"
    assert snapshot.metadata("missing") is None


def test_invalid_metadata_is_ignored():
    snapshot = _snapshot({"programId": _make_prop("Eco", "{not json")})
    assert snapshot.metadata("programId") is None
    assert any(e["event"] == "metadata_invalid" for e in get_events())


def test_decode_channels_full_cycle():
    snapshot = _snapshot(
        {
            "productTypeId": _make_prop("G7100"),
            "state": _make_prop("5"),
            "programId": _make_prop("Eco", {"MieleEnum": {"K1": "Eco"}}),
            "startTime": _make_prop("0"),
            "duration": _make_prop("90"),
            "signalDoor": _make_prop("false"),
            "extendedDeviceState": _make_prop(_extended_hex(9, 118)),
        }
    )
    states = snapshot.decode_channels(DISHWASHER)

    assert states["productType"] == StringState("G7100")
    assert states["state"] == StringState("5")
    assert states["program"] == StringState("K1")
    assert str(states["start"]) == "1970-01-01T00:00:00"
    assert str(states["duration"]) == "1970-01-01T01:30:00"
    assert states["door"] is OpenClosed.CLOSED
    assert states["powerConsumption"] == QuantityState(Decimal("0.9"), Unit.KILOWATT_HOUR)
    assert states["waterConsumption"] == QuantityState(Decimal("11.8"), Unit.LITRE)
    assert "switch" not in states
    assert "phase" not in states


def test_door_undef_in_cycle():
    states = _snapshot({"signalDoor": _make_prop("unknown")}).decode_channels(DISHWASHER)
    assert states == {"door": UnDef.UNDEF}


def test_short_extended_state_yields_no_consumption():
    states = _snapshot({"extendedDeviceState": _make_prop("00ff")}).decode_channels(DISHWASHER)
    assert states == {}


def test_bad_extended_state_does_not_affect_other_channels():
    snapshot = _snapshot(
        {
            "state": _make_prop("Running"),
            "extendedDeviceState": _make_prop("not-hex"),
        }
    )
    states = snapshot.decode_channels(DISHWASHER)
    assert states["state"] == StringState("Running")
    assert states["powerConsumption"] is None
    assert states["waterConsumption"] is None
    failures = [e for e in get_events() if e["event"] == "decode_failed"]
    assert len(failures) == 1


def test_boolean_door_values():
    assert _snapshot({"signalDoor": _make_prop(True)}).decode_channels(DISHWASHER) == {"door": OpenClosed.OPEN}
    assert _snapshot({"signalDoor": _make_prop(False)}).decode_channels(DISHWASHER) == {"door": OpenClosed.CLOSED}


def test_boolean_value_uses_device_spelling():
    snapshot = _snapshot({"signalDoor": True, "state": _make_prop(5)})
    assert snapshot.value("signalDoor") == "true"
    assert snapshot.value("state") == "5"
