"""
Tests for configuration resolution: datum, ellipsoid, placement and units.
"""

import logging

import numpy as np
import pytest

from common.constants import GeodeticConstants
from cartography.errors import InvalidParameterError
from cartography.parameters import parse_definition
from cartography.resolver import DatumKind, IDENTITY_SHIFT, resolve

WGS84_ES = 0.0066943799901413165
SEC_TO_RAD = GeodeticConstants.ARCSECOND_TO_RADIAN.value


def resolve_definition(definition):
    config, _ = resolve(parse_definition(definition))
    return config


class TestDatum:
    """Datum catalog defaults and shift classification."""

    def test_wgs84_datum(self):
        config = resolve_definition("+proj=longlat +datum=WGS84")
        assert config.datum_kind is DatumKind.WGS84
        assert config.a == 6378137.0
        assert config.es == pytest.approx(WGS84_ES, rel=1e-12)
        assert config.datum_params == IDENTITY_SHIFT
        assert config.datum_name == "WGS84"

    def test_grs80_datum_is_wgs84_alias(self):
        config = resolve_definition("+proj=longlat +datum=NAD83")
        assert config.datum_kind is DatumKind.WGS84

    def test_zero_towgs84_on_wgs84_ellipsoid(self):
        config = resolve_definition("+proj=longlat +ellps=WGS84 +towgs84=0,0,0")
        assert config.datum_kind is DatumKind.WGS84

    def test_zero_towgs84_on_other_ellipsoid(self):
        config = resolve_definition("+proj=longlat +ellps=clrk66 +towgs84=0,0,0")
        assert config.datum_kind is DatumKind.THREE_PARAM

    def test_three_parameter_datum(self):
        config = resolve_definition("+proj=longlat +datum=GGRS87")
        assert config.datum_kind is DatumKind.THREE_PARAM
        assert config.datum_params == (-199.87, 74.79, 246.62, 0.0, 0.0, 0.0, 1.0)
        # GRS80 from the datum entry
        assert config.es == pytest.approx(0.00669438002290, rel=1e-9)

    def test_seven_parameter_datum(self):
        config = resolve_definition("+proj=longlat +datum=potsdam")
        assert config.datum_kind is DatumKind.SEVEN_PARAM
        dx, dy, dz, rx, ry, rz, scale = config.datum_params
        assert (dx, dy, dz) == (598.1, 73.7, 418.2)
        assert rx == pytest.approx(0.202 * SEC_TO_RAD)
        assert ry == pytest.approx(0.045 * SEC_TO_RAD)
        assert rz == pytest.approx(-2.455 * SEC_TO_RAD)
        assert scale == pytest.approx(1.0000067)
        assert config.a == 6377397.155

    def test_short_towgs84_is_zero_padded(self):
        config = resolve_definition("+proj=longlat +ellps=intl +towgs84=1,2")
        assert config.datum_kind is DatumKind.THREE_PARAM
        assert config.datum_params[:3] == (1.0, 2.0, 0.0)
        assert config.datum_params[3:] == IDENTITY_SHIFT[3:]

    def test_too_many_towgs84_values(self):
        with pytest.raises(InvalidParameterError) as excinfo:
            resolve_definition("+proj=longlat +towgs84=1,2,3,4,5,6,7,8")
        assert excinfo.value.parameter == "towgs84"

    def test_non_numeric_towgs84(self):
        with pytest.raises(InvalidParameterError):
            resolve_definition("+proj=longlat +towgs84=a,b,c")

    def test_gridshift_datum(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = resolve_definition("+proj=longlat +datum=NAD27")
        assert config.datum_kind is DatumKind.GRIDSHIFT
        assert config.a == 6378206.4
        assert "not applied" in caplog.text

    def test_datum_catalog(self):
        config = resolve_definition("+proj=longlat +ellps=WGS84 +catalog=egm")
        assert config.datum_kind is DatumKind.GRIDSHIFT
        assert config.catalog_name == "egm"

    def test_no_datum(self):
        config = resolve_definition("+proj=longlat +ellps=clrk66")
        assert config.datum_kind is DatumKind.NONE
        assert config.datum_params == IDENTITY_SHIFT

    def test_unknown_datum_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = resolve_definition("+proj=longlat +datum=atlantis")
        assert config.datum_kind is DatumKind.NONE
        assert "atlantis" in caplog.text

    def test_explicit_ellipsoid_beats_datum(self):
        config = resolve_definition("+proj=longlat +datum=WGS84 +ellps=clrk66")
        assert config.a == 6378206.4
        assert config.datum_kind is DatumKind.THREE_PARAM


class TestEllipsoid:
    """Ellipsoid shape resolution."""

    def test_sphere_radius(self):
        config = resolve_definition("+proj=merc +R=6371000")
        assert config.a == 6371000.0
        assert config.es == 0.0
        assert config.is_spherical
        assert config.a_orig == 6371000.0

    def test_sphere_radius_beats_ellipsoid(self):
        config = resolve_definition("+proj=merc +R=6371000 +ellps=clrk66")
        assert config.a == 6371000.0
        assert config.es == 0.0

    @pytest.mark.parametrize("radius", ["0", "-1"])
    def test_non_positive_radius(self, radius):
        with pytest.raises(InvalidParameterError):
            resolve_definition(f"+proj=merc +R={radius}")

    def test_default_ellipsoid_is_wgs84(self):
        config = resolve_definition("+proj=merc")
        assert config.a == 6378137.0
        assert config.es == pytest.approx(WGS84_ES, rel=1e-12)

    def test_unknown_ellipsoid(self, caplog):
        with caplog.at_level(logging.WARNING):
            with pytest.raises(InvalidParameterError) as excinfo:
                resolve_definition("+proj=merc +ellps=nope")
        assert excinfo.value.parameter == "a"
        assert "nope" in caplog.text

    def test_semi_minor_axis(self):
        config = resolve_definition("+proj=merc +a=2 +b=1")
        assert config.es == pytest.approx(0.75)
        assert config.b == 1.0

    def test_derived_quantities(self):
        config = resolve_definition("+proj=merc +ellps=clrk66")
        assert config.e == pytest.approx(np.sqrt(config.es))
        assert config.ra == pytest.approx(1.0 / 6378206.4)
        assert config.one_es == pytest.approx(1.0 - config.es)
        assert config.r_one_es == pytest.approx(1.0 / (1.0 - config.es))
        assert config.b == pytest.approx(6356583.8)

    @pytest.mark.parametrize("definition,expected", [
        ("+a=1 +es=0.006 +e=0.5 +rf=300 +f=0.1 +b=0.5", 0.006),
        ("+a=1 +e=0.1 +rf=300 +f=0.1 +b=0.5", 0.01),
        ("+a=1 +rf=4 +f=0.1 +b=0.5", 0.4375),
        ("+a=1 +f=0.5 +b=0.1", 0.75),
        ("+a=1 +b=0.5", 0.75),
        ("+a=1", 0.0),
    ])
    def test_shape_priority(self, definition, expected):
        config = resolve_definition("+proj=merc " + definition)
        assert config.es == pytest.approx(expected)

    def test_explicit_shape_beats_catalog(self):
        config = resolve_definition("+proj=merc +ellps=WGS84 +rf=300")
        assert config.es == pytest.approx(1.0 / 300 * (2.0 - 1.0 / 300))

    @pytest.mark.parametrize("definition", [
        "+a=1 +es=1",
        "+a=1 +es=-0.1",
        "+a=1 +rf=0",
        "+a=0 +es=0.1",
        "+a=-5",
    ])
    def test_invalid_shape(self, definition):
        with pytest.raises(InvalidParameterError):
            resolve_definition("+proj=merc " + definition)

    def test_authalic_radius(self):
        config = resolve_definition("+proj=merc +ellps=WGS84 +R_A")
        assert config.es == 0.0
        assert config.a == pytest.approx(6371007.181, abs=1e-2)
        assert config.a_orig == 6378137.0
        assert config.es_orig == pytest.approx(WGS84_ES, rel=1e-12)

    def test_volumetric_radius(self):
        config = resolve_definition("+proj=merc +ellps=WGS84 +R_V")
        assert config.es == 0.0
        assert config.a == pytest.approx(6371000.790, abs=1e-2)

    def test_geometric_mean_radius(self):
        config = resolve_definition("+proj=merc +a=4 +b=1 +R_g")
        assert config.a == pytest.approx(2.0)
        assert config.es == 0.0

    def test_harmonic_mean_radius(self):
        config = resolve_definition("+proj=merc +a=3 +b=1 +R_h")
        assert config.a == pytest.approx(1.5)
        assert config.es == 0.0

    def test_returned_parameters_carry_catalog_defaults(self):
        params = parse_definition("+proj=merc +datum=WGS84")
        _, merged = resolve(params)
        assert merged["ellps"] == "WGS84"
        assert merged["rf"] == "298.257223563"
        assert "rf" not in params


class TestPlacement:
    """Central meridian, origin, scale factor and false origin."""

    def test_defaults(self):
        config = resolve_definition("+proj=merc")
        assert (config.lam0, config.phi0) == (0.0, 0.0)
        assert (config.x0, config.y0) == (0.0, 0.0)
        assert config.k0 == 1.0
        assert config.axis == "enu"
        assert not config.geoc
        assert not config.over
        assert config.lon_wrap_center is None

    def test_origin_and_offsets(self):
        config = resolve_definition(
            "+proj=merc +lon_0=-96 +lat_0=23 +x_0=500000 +y_0=-100"
        )
        assert config.lam0 == pytest.approx(np.radians(-96.0))
        assert config.phi0 == pytest.approx(np.radians(23.0))
        assert config.x0 == 500000.0
        assert config.y0 == -100.0

    def test_k_0_beats_k(self):
        assert resolve_definition("+proj=merc +k_0=0.9996 +k=2").k0 == 0.9996
        assert resolve_definition("+proj=merc +k=2").k0 == 2.0

    @pytest.mark.parametrize("definition", ["+k=0", "+k_0=-1"])
    def test_non_positive_scale(self, definition):
        with pytest.raises(InvalidParameterError):
            resolve_definition("+proj=merc " + definition)

    def test_axis_is_recorded(self):
        assert resolve_definition("+proj=merc +axis=wsu").axis == "wsu"

    @pytest.mark.parametrize("axis", ["en", "enup"])
    def test_axis_must_be_three_characters(self, axis):
        with pytest.raises(InvalidParameterError):
            resolve_definition(f"+proj=merc +axis={axis}")

    def test_flags(self):
        config = resolve_definition("+proj=merc +geoc +over +lon_wrap=180")
        assert config.geoc
        assert config.over
        assert config.lon_wrap_center == pytest.approx(np.pi)

    def test_false_flag(self):
        assert not resolve_definition("+proj=merc +over=false").over


class TestUnits:
    """Linear and vertical units."""

    def test_meters_by_default(self):
        config = resolve_definition("+proj=merc")
        assert config.to_meter == 1.0
        assert config.fr_meter == 1.0
        assert config.vto_meter == 1.0

    def test_named_unit(self):
        config = resolve_definition("+proj=merc +units=ft")
        assert config.to_meter == 0.3048
        assert config.fr_meter == pytest.approx(1.0 / 0.3048)

    def test_vertical_unit_follows_horizontal(self):
        config = resolve_definition("+proj=merc +units=us-ft")
        assert config.vto_meter == config.to_meter

    def test_independent_vertical_unit(self):
        config = resolve_definition("+proj=merc +units=ft +vunits=m")
        assert config.to_meter == 0.3048
        assert config.vto_meter == 1.0
        assert config.vfr_meter == 1.0

    def test_named_unit_beats_override(self):
        assert resolve_definition("+proj=merc +units=km +to_meter=2").to_meter == 1000.0

    def test_unknown_unit_falls_back_to_meters(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = resolve_definition("+proj=longlat +units=degrees")
        assert config.to_meter == 1.0
        assert "degrees" in caplog.text

    @pytest.mark.parametrize("expression,expected", [
        ("0.3048", 0.3048),
        ("1/3", 1.0 / 3.0),
        ("0.3048 m", 0.3048),
    ])
    def test_to_meter_override(self, expression, expected):
        config = resolve_definition(f"+proj=merc +to_meter={expression}")
        assert config.to_meter == pytest.approx(expected)
        assert config.fr_meter == pytest.approx(1.0 / expected)

    def test_vto_meter_override(self):
        assert resolve_definition("+proj=merc +vto_meter=2").vto_meter == 2.0

    @pytest.mark.parametrize("expression", [
        "1 second", "0", "-2", "1 kg", "1/0", "inf", "nan",
    ])
    def test_bad_to_meter(self, expression):
        with pytest.raises(InvalidParameterError) as excinfo:
            resolve_definition(f"+proj=merc +to_meter={expression}")
        assert excinfo.value.parameter == "to_meter"


class TestPrimeMeridian:

    def test_greenwich_by_default(self):
        assert resolve_definition("+proj=merc").from_greenwich == 0.0

    def test_named(self):
        config = resolve_definition("+proj=merc +pm=paris")
        expected = np.radians(2 + 20 / 60 + 14.025 / 3600)
        assert config.from_greenwich == pytest.approx(expected)

    def test_western(self):
        config = resolve_definition("+proj=merc +pm=ferro")
        assert config.from_greenwich == pytest.approx(np.radians(-(17 + 40 / 60)))

    def test_raw_angle(self):
        config = resolve_definition("+proj=merc +pm=-3.5")
        assert config.from_greenwich == pytest.approx(np.radians(-3.5))

    def test_unknown_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = resolve_definition("+proj=merc +pm=atlantis")
        assert config.from_greenwich == 0.0
        assert "atlantis" in caplog.text
