"""Tests for schema enums."""

from metar_client.schemas import FlightCategory, MetarType, SkyCover


class TestSkyCover:
    def test_values(self):
        """Test SkyCover enum values match the wire codes."""
        assert SkyCover.SKC.value == "SKC"
        assert SkyCover.CLR.value == "CLR"
        assert SkyCover.CAVOK.value == "CAVOK"
        assert SkyCover.OVC.value == "OVC"

    def test_is_string_enum(self):
        """Test that SkyCover values are strings."""
        assert isinstance(SkyCover.FEW, str)
        assert SkyCover.FEW == "FEW"

    def test_from_string(self):
        """Test creating SkyCover from string value."""
        assert SkyCover("BKN") == SkyCover.BKN
        assert SkyCover("OVX") == SkyCover.OVX


class TestFlightCategory:
    def test_values(self):
        """Test the four flight categories."""
        assert [c.value for c in FlightCategory] == ["VFR", "MVFR", "IFR", "LIFR"]

    def test_description(self):
        """Test each category describes its thresholds."""
        assert "3,000 ft" in FlightCategory.VFR.description
        assert "below 500 ft" in FlightCategory.LIFR.description
        for category in FlightCategory:
            assert category.description


class TestMetarType:
    def test_from_string(self):
        """Test creating MetarType from string value."""
        assert MetarType("METAR") == MetarType.METAR
        assert MetarType("SPECI") == MetarType.SPECI
