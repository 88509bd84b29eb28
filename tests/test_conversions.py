"""Tests for the conversion table."""

import pytest

from husky.core.conversions import (
    LENGTH_CONVERSIONS,
    TEMP_CONVERSIONS,
    ConversionRecord,
    ConversionTable,
    default_table,
)


class TestConversionRecord:
    def test_callable(self):
        record = ConversionRecord(lambda x: 2 * x, "double")
        assert record(21.0) == 42.0

    def test_frozen(self):
        record = ConversionRecord(lambda x: x, "identity")
        with pytest.raises(AttributeError):
            record.description = "changed"


class TestConversionTable:
    def test_categories(self):
        table = default_table()
        assert table.categories() == ["Temp", "Length"]
        assert "Temp" in table
        assert "Volume" not in table
        assert len(table) == 2

    def test_shared_instance(self):
        assert default_table() is default_table()

    def test_lookup(self):
        table = default_table()
        assert table.lookup("Temp", "FC").description == "Fahrenheit to Celsius"
        assert table.lookup("Temp", "mft") is None
        assert table.lookup("Volume", "FC") is None

    def test_read_only(self):
        table = default_table()
        with pytest.raises(TypeError):
            table.get("Temp")["XY"] = ConversionRecord(lambda x: x, "bogus")

    def test_input_is_copied(self):
        units = {"ab": ConversionRecord(lambda x: x, "a to b")}
        table = ConversionTable({"Test": units})
        units["ba"] = ConversionRecord(lambda x: x, "b to a")
        assert table.lookup("Test", "ba") is None

    def test_entries(self):
        entries = list(default_table().entries())
        assert len(entries) == len(TEMP_CONVERSIONS) + len(LENGTH_CONVERSIONS)
        assert ("Length", "mft", LENGTH_CONVERSIONS["mft"]) in entries


class TestTemperature:
    def test_keys(self):
        assert set(TEMP_CONVERSIONS) == {"FC", "CF", "CK", "KC", "FK", "KF"}

    @pytest.mark.parametrize(
        "key, value, expected",
        [
            ("FC", 32.0, 0.0),
            ("FC", 212.0, 100.0),
            ("CF", 100.0, 212.0),
            ("CF", -40.0, -40.0),
            ("CK", 0.0, 273.15),
            ("KC", 273.15, 0.0),
            ("FK", -459.67, 0.0),
            ("KF", 0.0, -459.67),
            ("FK", 32.0, 273.15),
        ],
    )
    def test_values(self, key, value, expected):
        assert TEMP_CONVERSIONS[key](value) == pytest.approx(expected, abs=1e-9)


class TestLength:
    def test_keys(self):
        assert set(LENGTH_CONVERSIONS) == {
            "mft", "ftm", "min", "inm", "mmi", "mim", "kmmi",
            "mikm", "myd", "ydm", "mnmi", "nmim", "kmnmi", "nmikm",
        }

    @pytest.mark.parametrize(
        "key, factor",
        [
            ("ftm", 0.3048),
            ("inm", 0.0254),
            ("mim", 1609.344),
            ("mikm", 1.609344),
            ("ydm", 0.9144),
            ("nmim", 1852.0),
            ("nmikm", 1.852),
        ],
    )
    def test_factors(self, key, factor):
        assert LENGTH_CONVERSIONS[key](1.0) == pytest.approx(factor)

    def test_meter_to_foot(self):
        assert LENGTH_CONVERSIONS["mft"](1.0) == pytest.approx(3.28084, rel=1e-6)

    def test_descriptions(self):
        assert LENGTH_CONVERSIONS["kmnmi"].description == "kilometer to nautical mile"
        assert LENGTH_CONVERSIONS["nmikm"].description == "nautical mile to kilometer"

    def test_nan_propagates(self):
        assert LENGTH_CONVERSIONS["mft"](float("nan")) != LENGTH_CONVERSIONS["mft"](float("nan"))
