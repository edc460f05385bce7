"""
Configuration Resolver: from a Parameter Set to a resolved geodetic setup.

Resolution is two-phase. The caller's explicit parameters are never
modified; catalog entries (datum, then ellipsoid) only fill the slots the
caller left unset, producing a new `ParameterSet` that the selected kernel
also reads.

Resolution order
----------------
1. Datum (catalog defaults, shift kind and parameters)
2. Ellipsoid (sphere radius, catalog defaults, eccentricity, radius
   substitution)
3. Derived ellipsoid quantities
4. WGS84 alias detection
5. Flags, axis, placement, units, prime meridian

Kernel dispatch happens in `cartography.projection`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from common.constants import (
    GeodeticConstants,
    PPM,
    RA4,
    RA6,
    RV4,
    RV6,
    SIXTH,
)
from common.logging_config import get_logger
from common.units import length_factor
from cartography.catalogs import get_datum, get_ellipsoid, get_prime_meridian, get_unit
from cartography.errors import InvalidParameterError
from cartography.parameters import ParameterSet, parse_dms, split_key_value

logger = get_logger(__name__)


class DatumKind(Enum):
    """How the datum relates to WGS84. None of the shifts is applied."""
    NONE = "none"
    GRIDSHIFT = "gridshift"
    THREE_PARAM = "3param"
    SEVEN_PARAM = "7param"
    WGS84 = "wgs84"


IDENTITY_SHIFT: Tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0)
DEFAULT_ELLIPSOID = "WGS84"


@dataclass(frozen=True)
class ResolvedConfiguration:
    """Fully resolved projection configuration (the "pj record").

    Attributes
    ----------
    proj : str
        Projection code, e.g. ``"merc"``.
    a, es : float
        Semi-major axis (metres) and squared eccentricity. ``es == 0`` means
        spherical; kernels branch on it and never re-derive it.
    e, ra, one_es, r_one_es : float
        ``sqrt(es)``, ``1/a``, ``1 - es`` and ``1/(1 - es)``.
    a_orig, es_orig : float
        Axis and eccentricity before any radius substitution.
    datum_kind : DatumKind
        Shift classification (recorded only).
    datum_params : tuple of float
        Seven-element shift vector: translations (m), rotations (rad),
        scale multiplier.
    datum_name, catalog_name : str, optional
        Catalog names when given.
    lam0, phi0 : float
        Central meridian and origin latitude in radians.
    k0 : float
        Scale factor, always positive.
    x0, y0 : float
        False easting and northing in metres.
    to_meter, fr_meter : float
        Metres per linear unit and its reciprocal.
    vto_meter, vfr_meter : float
        Same for the vertical unit.
    axis : str
        Three-character axis order, default ``"enu"``.
    geoc : bool
        Input latitudes are geocentric.
    over : bool
        Disable longitude normalisation.
    lon_wrap_center : float, optional
        Longitude wrap centre in radians when ``lon_wrap`` is given.
    from_greenwich : float
        Prime meridian offset in radians.
    """
    proj: str
    a: float
    es: float
    e: float
    ra: float
    one_es: float
    r_one_es: float
    a_orig: float
    es_orig: float
    datum_kind: DatumKind = DatumKind.NONE
    datum_params: Tuple[float, ...] = IDENTITY_SHIFT
    datum_name: Optional[str] = None
    catalog_name: Optional[str] = None
    lam0: float = 0.0
    phi0: float = 0.0
    k0: float = 1.0
    x0: float = 0.0
    y0: float = 0.0
    to_meter: float = 1.0
    fr_meter: float = 1.0
    vto_meter: float = 1.0
    vfr_meter: float = 1.0
    axis: str = "enu"
    geoc: bool = False
    over: bool = False
    lon_wrap_center: Optional[float] = None
    from_greenwich: float = 0.0
    b: float = field(default=0.0, repr=False)

    @property
    def is_spherical(self) -> bool:
        return self.es == 0.0


def _catalog_defaults(*definitions: str) -> dict:
    return dict(split_key_value(d) for d in definitions)


def resolve_datum(params: ParameterSet):
    """Apply datum catalog defaults and classify the datum shift.

    Returns
    -------
    tuple
        ``(params, kind, shift_vector, datum_name, catalog_name)``
    """
    datum_name = params.get_string("datum")
    if datum_name is not None:
        datum = get_datum(datum_name)
        if datum is not None:
            params = params.with_defaults(
                _catalog_defaults(f"ellps={datum.ellipsoid}", datum.definition)
            )
        else:
            logger.warning(f"Unknown datum '{datum_name}' ignored")

    catalog_name = None
    shift = IDENTITY_SHIFT

    if "nadgrids" in params:
        kind = DatumKind.GRIDSHIFT
        logger.warning(
            f"Grid shift '{params['nadgrids']}' recorded but not applied"
        )
    elif "catalog" in params:
        kind = DatumKind.GRIDSHIFT
        catalog_name = params["catalog"]
        logger.warning(f"Datum catalog '{catalog_name}' recorded but not applied")
    elif "towgs84" in params:
        kind, shift = _parse_towgs84(params["towgs84"])
    else:
        kind = DatumKind.NONE

    return params, kind, shift, datum_name, catalog_name


def _parse_towgs84(text: str):
    parts = [p for p in text.split(",") if p.strip()]
    if len(parts) > 7:
        raise InvalidParameterError(
            f"towgs84 takes 3 or 7 values, got {len(parts)}", parameter="towgs84"
        )
    try:
        values = [float(p) for p in parts]
    except ValueError as e:
        raise InvalidParameterError(
            f"towgs84 is not a list of numbers: '{text}'", parameter="towgs84"
        ) from e

    if len(values) == 7:
        sec2rad = GeodeticConstants.ARCSECOND_TO_RADIAN.value
        shift = tuple(values[:3]) + tuple(v * sec2rad for v in values[3:6]) + (
            values[6] / PPM + 1.0,
        )
        return DatumKind.SEVEN_PARAM, shift

    translations = (values + [0.0, 0.0, 0.0])[:3]
    return DatumKind.THREE_PARAM, tuple(translations) + IDENTITY_SHIFT[3:]


def resolve_ellipsoid(params: ParameterSet):
    """Resolve the ellipsoid shape.

    Returns
    -------
    tuple
        ``(params, a, es, b, a_orig, es_orig)`` where ``a_orig``/``es_orig``
        are the values before radius substitution.
    """
    radius = params.get_float("R")
    if radius is not None:
        if radius <= 0:
            raise InvalidParameterError(
                f"Sphere radius must be positive, got {radius}", parameter="R"
            )
        return params, radius, 0.0, radius, radius, 0.0

    ellps_name = params.get_string("ellps")
    if ellps_name is None and "a" not in params:
        # PROJ's <general> default
        ellps_name = DEFAULT_ELLIPSOID
        logger.debug(f"No ellipsoid given; defaulting to {DEFAULT_ELLIPSOID}")
    if ellps_name is not None:
        ellps = get_ellipsoid(ellps_name)
        if ellps is not None:
            params = params.with_defaults(_catalog_defaults(ellps.major, ellps.shape))
        else:
            logger.warning(f"Unknown ellipsoid '{ellps_name}' ignored")

    a = params.get_float("a")
    if a is None or a <= 0:
        raise InvalidParameterError(
            "Major axis 'a' missing or not positive "
            "(give +R, +a or a known +ellps/+datum)",
            parameter="a",
        )

    b = None
    es = 0.0
    if "es" in params:
        es = params.get_float("es")
    elif "e" in params:
        e = params.get_float("e")
        es = e * e
    elif "rf" in params:
        rf = params.get_float("rf")
        if rf == 0:
            raise InvalidParameterError("Reciprocal flattening is zero", parameter="rf")
        f = 1.0 / rf
        es = f * (2.0 - f)
    elif "f" in params:
        f = params.get_float("f")
        es = f * (2.0 - f)
    elif "b" in params:
        b = params.get_float("b")
        es = 1.0 - (b * b) / (a * a)

    if es < 0 or es >= 1:
        raise InvalidParameterError(
            f"Squared eccentricity out of range [0, 1): {es}", parameter="es"
        )
    if b is None:
        b = a * np.sqrt(1.0 - es)

    a_orig, es_orig = a, es

    if params.get_bool("R_A"):
        a *= 1.0 - es * (SIXTH + es * (RA4 + es * RA6))
        es = 0.0
    elif params.get_bool("R_V"):
        a *= 1.0 - es * (SIXTH + es * (RV4 + es * RV6))
        es = 0.0
    elif params.get_bool("R_g"):
        a = np.sqrt(a * b)
        es = 0.0
    elif params.get_bool("R_h"):
        a = 2.0 * a * b / (a + b)
        es = 0.0

    return params, float(a), float(es), float(b), float(a_orig), float(es_orig)


def _is_wgs84(kind: DatumKind, shift: Tuple[float, ...], a: float, es: float) -> bool:
    wgs84_a = GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value
    wgs84_es = GeodeticConstants.WGS84_ECCENTRICITY_SQUARED
    return (
        kind is DatumKind.THREE_PARAM
        and shift[0] == 0 and shift[1] == 0 and shift[2] == 0
        and a == wgs84_a
        and abs(es - wgs84_es.value) < wgs84_es.uncertainty
    )


def _resolve_unit(params: ParameterSet, name_key: str, override_key: str):
    """Return metres per unit for a named unit or an explicit override."""
    name = params.get_string(name_key)
    if name is not None:
        unit = get_unit(name)
        if unit is not None:
            return unit.to_meter
        logger.warning(f"Unknown unit '{name}' for +{name_key}; using metres")
        return None

    override = params.get_string(override_key)
    if override is not None:
        try:
            return length_factor(override)
        except ValueError as e:
            raise InvalidParameterError(str(e), parameter=override_key) from e
    return None


def _resolve_prime_meridian(params: ParameterSet) -> float:
    name = params.get_string("pm")
    if name is None:
        return 0.0
    pm = get_prime_meridian(name)
    definition = pm.definition if pm is not None else name
    try:
        return float(np.radians(parse_dms(definition)))
    except ValueError:
        logger.warning(f"Unknown prime meridian '{name}' ignored")
        return 0.0


def resolve(params: ParameterSet) -> Tuple[ResolvedConfiguration, ParameterSet]:
    """Resolve a parameter set into a `ResolvedConfiguration`.

    Parameters
    ----------
    params : ParameterSet
        Explicit parameters from the definition string.

    Returns
    -------
    tuple
        The resolved configuration and the parameter set with catalog
        defaults filled in (kernel initialisers read it).

    Raises
    ------
    InvalidParameterError
        Malformed axis, non-positive scale factor, missing or invalid
        ellipsoid, malformed numeric values.
    """
    proj = params.get_string("proj") or ""

    params, datum_kind, datum_params, datum_name, catalog_name = resolve_datum(params)
    params, a, es, b, a_orig, es_orig = resolve_ellipsoid(params)

    if _is_wgs84(datum_kind, datum_params, a, es):
        datum_kind = DatumKind.WGS84

    axis = params.get_string("axis")
    if axis is not None and len(axis) != 3:
        raise InvalidParameterError(
            f"Axis must be three characters, got '{axis}'", parameter="axis"
        )

    if "k_0" in params:
        k0 = params.get_float("k_0")
    elif "k" in params:
        k0 = params.get_float("k")
    else:
        k0 = 1.0
    if k0 <= 0:
        raise InvalidParameterError(
            f"Scale factor must be positive, got {k0}", parameter="k_0"
        )

    to_meter = _resolve_unit(params, "units", "to_meter") or 1.0
    vto_meter = _resolve_unit(params, "vunits", "vto_meter") or to_meter

    config = ResolvedConfiguration(
        proj=proj,
        a=a,
        es=es,
        e=float(np.sqrt(es)),
        ra=1.0 / a,
        one_es=1.0 - es,
        r_one_es=1.0 / (1.0 - es),
        a_orig=a_orig,
        es_orig=es_orig,
        b=b,
        datum_kind=datum_kind,
        datum_params=datum_params,
        datum_name=datum_name,
        catalog_name=catalog_name,
        lam0=params.get_degree("lon_0") or 0.0,
        phi0=params.get_degree("lat_0") or 0.0,
        k0=k0,
        x0=params.get_float("x_0") or 0.0,
        y0=params.get_float("y_0") or 0.0,
        to_meter=to_meter,
        fr_meter=1.0 / to_meter,
        vto_meter=vto_meter,
        vfr_meter=1.0 / vto_meter,
        axis=axis if axis is not None else "enu",
        geoc=bool(params.get_bool("geoc")),
        over=bool(params.get_bool("over")),
        lon_wrap_center=params.get_degree("lon_wrap"),
        from_greenwich=_resolve_prime_meridian(params),
    )

    logger.debug(
        f"Resolved +proj={proj}: a={a:.3f} es={es:.12f} datum={datum_kind.value} "
        f"k0={k0} to_meter={to_meter}"
    )
    return config, params
