"""
Testes dos validadores de parâmetros da query string
"""
import pytest

from domain.exceptions import InvalidParameterException
from shared.utils.validators import (
    CapitalSlugValidator,
    CityQueryValidator,
    CoordinatesValidator,
    GenericValidator,
    StateCodeValidator,
    StationCodeValidator,
)


class TestGenericValidator:

    def test_validate_not_empty_trims(self):
        assert GenericValidator.validate_not_empty('  SP ', 'state') == 'SP'

    @pytest.mark.parametrize("value", [None, '', '   '])
    def test_validate_not_empty_rejects_blank(self, value):
        with pytest.raises(InvalidParameterException, match="state is required"):
            GenericValidator.validate_not_empty(value, 'state')

    def test_validate_range(self):
        with pytest.raises(InvalidParameterException):
            GenericValidator.validate_range(91.0, -90.0, 90.0, 'lat')


class TestStateCodeValidator:

    def test_normalizes_to_upper(self):
        assert StateCodeValidator.validate('sp') == 'SP'

    @pytest.mark.parametrize("value", [None, '', 'SPX', 'S1'])
    def test_invalid(self, value):
        with pytest.raises(InvalidParameterException):
            StateCodeValidator.validate(value)


class TestStationCodeValidator:

    def test_valid(self):
        assert StationCodeValidator.validate(' a701 ') == 'A701'

    @pytest.mark.parametrize("value", ['701', 'AA01', 'A7011', ''])
    def test_invalid(self, value):
        with pytest.raises(InvalidParameterException):
            StationCodeValidator.validate(value)


class TestCapitalSlugValidator:

    def test_valid(self):
        assert CapitalSlugValidator.validate('Rio-De-Janeiro') == 'rio-de-janeiro'

    def test_invalid(self):
        with pytest.raises(InvalidParameterException):
            CapitalSlugValidator.validate('sao_paulo')


class TestCoordinatesValidator:

    def test_valid(self):
        coords = CoordinatesValidator.validate('-23.55', '-46.63')
        assert (coords.latitude, coords.longitude) == (-23.55, -46.63)

    @pytest.mark.parametrize("lat, lng", [
        ('-23.55', None),
        (None, '-46.63'),
        ('abc', '-46.63'),
        ('-95', '-46.63'),
        ('-23.55', '200'),
    ])
    def test_invalid(self, lat, lng):
        with pytest.raises(InvalidParameterException):
            CoordinatesValidator.validate(lat, lng)


class TestCityQueryValidator:

    def test_city_with_state(self):
        assert CityQueryValidator.validate(' Campinas ', 'SP') == ('Campinas', 'SP')

    def test_blank_state_is_ignored(self):
        assert CityQueryValidator.validate('Campinas', '  ') == ('Campinas', None)

    def test_missing_city(self):
        with pytest.raises(InvalidParameterException, match="city is required"):
            CityQueryValidator.validate(None)

    def test_too_long(self):
        with pytest.raises(InvalidParameterException):
            CityQueryValidator.validate('x' * 101)
