# ABOUTME: Contract tests for Pydantic models used by the weather panels.
# ABOUTME: Validates location formatting, immutability and optional-field defaults.

from datetime import date

import pytest
from pydantic import ValidationError

from weatherpanel.models import CurrentConditions, HistoricalDay, Location, MarineConditions


class TestLocation:
    def test_display_name_with_region(self):
        """Location includes the region between name and country when known.

        Implementation: Constructs a Location with an admin1-style region.
        Passing implies: The three-part "name, region, country" format is used.
        """
        loc = Location(latitude=39.74, longitude=-104.98, name="Denver", country="United States", region="Colorado")
        assert loc.display_name() == "Denver, Colorado, United States"

    def test_display_name_without_region(self):
        """Location falls back to "name, country" when no region is known.

        Implementation: Constructs a Location without region.
        Passing implies: No empty segment or stray comma appears.
        """
        loc = Location(latitude=48.85, longitude=2.35, name="Paris", country="France")
        assert loc.region is None
        assert loc.display_name() == "Paris, France"

    def test_location_is_immutable(self):
        """Location cannot be changed after geocoding creates it.

        Implementation: Attempts to assign to a field of a frozen model.
        Passing implies: Search results are replaced, never edited in place.
        """
        loc = Location(latitude=48.85, longitude=2.35, name="Paris", country="France")
        with pytest.raises(ValidationError):
            loc.name = "Lyon"

    def test_coordinates_are_required(self):
        """Location refuses to exist without latitude and longitude.

        Implementation: Omits both coordinates.
        Passing implies: Every Location carries coordinates.
        """
        with pytest.raises(ValidationError):
            Location(name="Paris", country="France")


class TestCurrentConditions:
    def test_wind_and_pressure_are_optional(self):
        """CurrentConditions only requires temperature and humidity.

        Implementation: Constructs CurrentConditions without wind or pressure.
        Passing implies: The reduced "current" parameter set still parses.
        """
        data = CurrentConditions(temperature_c=18.4, humidity_pct=65, weather_code=3)
        assert data.wind_speed_kmh is None
        assert data.pressure_hpa is None


class TestHistoricalDay:
    def test_optional_fields_default_to_none(self):
        """HistoricalDay only requires a date.

        Implementation: Constructs HistoricalDay with only the date.
        Passing implies: Missing column values become None rather than failing.
        """
        day = HistoricalDay(date=date(2026, 10, 12))
        assert day.max_temp_c is None
        assert day.weather_code is None


class TestMarineConditions:
    def test_all_fields_optional(self):
        """MarineConditions tolerates any missing sea-state value.

        Implementation: Constructs MarineConditions with only wave height.
        Passing implies: Individually missing fields can render as N/A.
        """
        data = MarineConditions(wave_height_m=1.2)
        assert data.sea_temp_c is None
        assert data.wind_wave_height_m is None
