"""
Reference Catalogs: named ellipsoids, datums, linear units and prime meridians.

Static reference data, loaded once at import and never mutated. Lookups
are by case-sensitive name and return ``None`` on a miss; callers decide
whether a miss matters (the resolver skips unknown names).

References
----------
- PROJ 4 `pj_ellps.c`, `pj_datums.c`, `pj_units.c`
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Ellipsoid:
    """A named reference ellipsoid.

    Attributes
    ----------
    id : str
        Catalog key (``ellps=`` value).
    major : str
        Semi-major axis definition, ``"a=<metres>"``.
    shape : str
        Shape definition, one of ``b=``, ``rf=``, ``f=``, ``es=``, ``e=``.
    name : str
        Human-readable description.
    """
    id: str
    major: str
    shape: str
    name: str


@dataclass(frozen=True)
class Datum:
    """A named datum: an ellipsoid plus a shift definition.

    The shift definition (``towgs84=...`` or ``nadgrids=...``) is recorded
    on the resolved configuration but never applied.
    """
    id: str
    definition: str
    ellipsoid: str
    comments: str


@dataclass(frozen=True)
class LinearUnit:
    id: str
    to_meter: float
    name: str


@dataclass(frozen=True)
class PrimeMeridian:
    id: str
    definition: str  # DMS offset from Greenwich


def _index(*records) -> Mapping:
    return MappingProxyType({r.id: r for r in records})


ELLIPSOIDS: Mapping[str, Ellipsoid] = _index(
    Ellipsoid("MERIT", "a=6378137.0", "rf=298.257", "MERIT 1983"),
    Ellipsoid("SGS85", "a=6378136.0", "rf=298.257", "Soviet Geodetic System 85"),
    Ellipsoid("GRS80", "a=6378137.0", "rf=298.257222101", "GRS 1980(IUGG, 1980)"),
    Ellipsoid("IAU76", "a=6378140.0", "rf=298.257", "IAU 1976"),
    Ellipsoid("airy", "a=6377563.396", "b=6356256.910", "Airy 1830"),
    Ellipsoid("APL4.9", "a=6378137.0", "rf=298.25", "Appl. Physics. 1965"),
    Ellipsoid("NWL9D", "a=6378145.0", "rf=298.25", "Naval Weapons Lab., 1965"),
    Ellipsoid("mod_airy", "a=6377340.189", "b=6356034.446", "Modified Airy"),
    Ellipsoid("andrae", "a=6377104.43", "rf=300.0", "Andrae 1876 (Den., Iclnd.)"),
    Ellipsoid("aust_SA", "a=6378160.0", "rf=298.25", "Australian Natl & S. Amer. 1969"),
    Ellipsoid("GRS67", "a=6378160.0", "rf=298.2471674270", "GRS 67(IUGG 1967)"),
    Ellipsoid("bessel", "a=6377397.155", "rf=299.1528128", "Bessel 1841"),
    Ellipsoid("bess_nam", "a=6377483.865", "rf=299.1528128", "Bessel 1841 (Namibia)"),
    Ellipsoid("clrk66", "a=6378206.4", "b=6356583.8", "Clarke 1866"),
    Ellipsoid("clrk80", "a=6378249.145", "rf=293.4663", "Clarke 1880 mod."),
    Ellipsoid("clrk80ign", "a=6378249.2", "rf=293.4660212936269", "Clarke 1880 (IGN)."),
    Ellipsoid("CPM", "a=6375738.7", "rf=334.29", "Comm. des Poids et Mesures 1799"),
    Ellipsoid("delmbr", "a=6376428.", "rf=311.5", "Delambre 1810 (Belgium)"),
    Ellipsoid("engelis", "a=6378136.05", "rf=298.2566", "Engelis 1985"),
    Ellipsoid("evrst30", "a=6377276.345", "rf=300.8017", "Everest 1830"),
    Ellipsoid("evrst48", "a=6377304.063", "rf=300.8017", "Everest 1948"),
    Ellipsoid("evrst56", "a=6377301.243", "rf=300.8017", "Everest 1956"),
    Ellipsoid("evrst69", "a=6377295.664", "rf=300.8017", "Everest 1969"),
    Ellipsoid("evrstSS", "a=6377298.556", "rf=300.8017", "Everest (Sabah & Sarawak)"),
    Ellipsoid("fschr60", "a=6378166.", "rf=298.3", "Fischer (Mercury Datum) 1960"),
    Ellipsoid("fschr60m", "a=6378155.", "rf=298.3", "Modified Fischer 1960"),
    Ellipsoid("fschr68", "a=6378150.", "rf=298.3", "Fischer 1968"),
    Ellipsoid("helmert", "a=6378200.", "rf=298.3", "Helmert 1906"),
    Ellipsoid("hough", "a=6378270.0", "rf=297.", "Hough"),
    Ellipsoid("intl", "a=6378388.0", "rf=297.", "International 1909 (Hayford)"),
    Ellipsoid("krass", "a=6378245.0", "rf=298.3", "Krassovsky, 1942"),
    Ellipsoid("kaula", "a=6378163.", "rf=298.24", "Kaula 1961"),
    Ellipsoid("lerch", "a=6378139.", "rf=298.257", "Lerch 1979"),
    Ellipsoid("mprts", "a=6397300.", "rf=191.", "Maupertius 1738"),
    Ellipsoid("new_intl", "a=6378157.5", "b=6356772.2", "New International 1967"),
    Ellipsoid("plessis", "a=6376523.", "b=6355863.", "Plessis 1817 (France)"),
    Ellipsoid("SEasia", "a=6378155.0", "b=6356773.3205", "Southeast Asia"),
    Ellipsoid("walbeck", "a=6376896.0", "b=6355834.8467", "Walbeck"),
    Ellipsoid("WGS60", "a=6378165.0", "rf=298.3", "WGS 60"),
    Ellipsoid("WGS66", "a=6378145.0", "rf=298.25", "WGS 66"),
    Ellipsoid("WGS72", "a=6378135.0", "rf=298.26", "WGS 72"),
    Ellipsoid("WGS84", "a=6378137.0", "rf=298.257223563", "WGS 84"),
    Ellipsoid("sphere", "a=6370997.0", "b=6370997.0", "Normal Sphere (r=6370997)"),
)

DATUMS: Mapping[str, Datum] = _index(
    Datum("WGS84", "towgs84=0,0,0", "WGS84", ""),
    Datum("GGRS87", "towgs84=-199.87,74.79,246.62", "GRS80",
          "Greek_Geodetic_Reference_System_1987"),
    Datum("NAD83", "towgs84=0,0,0", "GRS80", "North_American_Datum_1983"),
    Datum("NAD27", "nadgrids=@conus,@alaska,@ntv2_0.gsb,@ntv1_can.dat", "clrk66",
          "North_American_Datum_1927"),
    Datum("potsdam", "towgs84=598.1,73.7,418.2,0.202,0.045,-2.455,6.7", "bessel",
          "Potsdam Rauenberg 1950 DHDN"),
    Datum("carthage", "towgs84=-263.0,6.0,431.0", "clrk80ign", "Carthage 1934 Tunisia"),
    Datum("hermannskogel", "towgs84=577.326,90.129,463.919,5.137,1.474,5.297,2.4232",
          "bessel", "Hermannskogel"),
    Datum("ire65", "towgs84=482.530,-130.596,564.557,-1.042,-0.214,-0.631,8.15",
          "mod_airy", "Ireland 1965"),
    Datum("nzgd49", "towgs84=59.47,-5.04,187.44,0.47,-0.1,1.024,-4.5993", "intl",
          "New Zealand Geodetic Datum 1949"),
    Datum("OSGB36", "towgs84=446.448,-125.157,542.060,0.1502,0.2470,0.8421,-20.4894",
          "airy", "Airy 1830"),
)

UNITS: Mapping[str, LinearUnit] = _index(
    LinearUnit("km", 1000.0, "Kilometer"),
    LinearUnit("m", 1.0, "Meter"),
    LinearUnit("dm", 0.1, "Decimeter"),
    LinearUnit("cm", 0.01, "Centimeter"),
    LinearUnit("mm", 0.001, "Millimeter"),
    LinearUnit("kmi", 1852.0, "International Nautical Mile"),
    LinearUnit("in", 0.0254, "International Inch"),
    LinearUnit("ft", 0.3048, "International Foot"),
    LinearUnit("yd", 0.9144, "International Yard"),
    LinearUnit("mi", 1609.344, "International Statute Mile"),
    LinearUnit("fath", 1.8288, "International Fathom"),
    LinearUnit("ch", 20.1168, "International Chain"),
    LinearUnit("link", 0.201168, "International Link"),
    LinearUnit("us-in", 0.0254000508, "U.S. Surveyor's Inch"),
    LinearUnit("us-ft", 0.304800609601219, "U.S. Surveyor's Foot"),
    LinearUnit("us-yd", 0.914401828803658, "U.S. Surveyor's Yard"),
    LinearUnit("us-ch", 20.11684023368047, "U.S. Surveyor's Chain"),
    LinearUnit("us-mi", 1609.347218694437, "U.S. Surveyor's Statute Mile"),
    LinearUnit("ind-yd", 0.91439523, "Indian Yard"),
    LinearUnit("ind-ft", 0.30479841, "Indian Foot"),
    LinearUnit("ind-ch", 20.11669506, "Indian Chain"),
)

PRIME_MERIDIANS: Mapping[str, PrimeMeridian] = _index(
    PrimeMeridian("greenwich", "0dE"),
    PrimeMeridian("lisbon", "9d07'54.862\"W"),
    PrimeMeridian("paris", "2d20'14.025\"E"),
    PrimeMeridian("bogota", "74d04'51.3\"W"),
    PrimeMeridian("madrid", "3d41'16.58\"W"),
    PrimeMeridian("rome", "12d27'8.4\"E"),
    PrimeMeridian("bern", "7d26'22.5\"E"),
    PrimeMeridian("jakarta", "106d48'27.79\"E"),
    PrimeMeridian("ferro", "17d40'W"),
    PrimeMeridian("brussels", "4d22'4.71\"E"),
    PrimeMeridian("stockholm", "18d3'29.8\"E"),
    PrimeMeridian("athens", "23d42'58.815\"E"),
    PrimeMeridian("oslo", "10d43'22.5\"E"),
)


def get_ellipsoid(name: str) -> Optional[Ellipsoid]:
    return ELLIPSOIDS.get(name)


def get_datum(name: str) -> Optional[Datum]:
    return DATUMS.get(name)


def get_unit(name: str) -> Optional[LinearUnit]:
    return UNITS.get(name)


def get_prime_meridian(name: str) -> Optional[PrimeMeridian]:
    return PRIME_MERIDIANS.get(name)
