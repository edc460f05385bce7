"""
Parameter Set: parsing and typed access to PROJ-style definitions.

A definition such as ``+proj=merc +ellps=WGS84 +lat_ts=33d30'N +over`` is a
flat list of ``key`` or ``key=value`` tokens. This module turns it into an
immutable name -> raw string mapping and provides typed accessors on top.

Accessors return ``None`` when the key is absent; absence is never an
error at this layer. A key that is present but cannot be read as the
requested type raises `InvalidParameterError`.
"""

from collections.abc import Mapping
from typing import Dict, Iterator, Optional

import numpy as np

from cartography.errors import InvalidParameterError


_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_NEGATIVE_HEMISPHERES = "SWsw"
_HEMISPHERES = "NSEWnsew"


def split_key_value(token: str):
    """Split ``key=value`` on the first ``=``; a bare key maps to ``""``."""
    key, _, value = token.partition("=")
    return key.strip(), value.strip()


def parse_dms(text: str) -> float:
    """Parse a degree/minute/second angle string.

    Parameters
    ----------
    text : str
        Angle such as ``"54.2"``, ``"-77"``, ``"9d07'54.862\\"W"`` or
        ``"17d40'W"``. A string without a ``d`` marker is already in
        degrees.

    Returns
    -------
    float
        The angle in decimal degrees.

    Raises
    ------
    ValueError
        If a component is not a number or unparsed text remains.

    Notes
    -----
    A trailing ``W`` or ``S`` negates the angle; ``E`` and ``N`` are
    accepted and ignored.
    """
    s = text.strip()
    sign = 1.0

    if s and s[-1] in _HEMISPHERES:
        if s[-1] in _NEGATIVE_HEMISPHERES:
            sign = -sign
        s = s[:-1].rstrip()

    if s[:1] in ("-", "+"):
        if s[0] == "-":
            sign = -sign
        s = s[1:]

    if not s:
        raise ValueError(f"Empty angle in '{text}'")

    degrees = 0.0
    if "d" in s or "D" in s:
        head, s = s.replace("D", "d").split("d", 1)
        degrees += float(head)
    elif "'" not in s and '"' not in s:
        return sign * float(s)

    if "'" in s:
        head, s = s.split("'", 1)
        degrees += float(head) / 60.0
    if '"' in s:
        head, s = s.split('"', 1)
        degrees += float(head) / 3600.0

    if s.strip():
        raise ValueError(f"Unparsed trailing text '{s}' in angle '{text}'")

    return sign * degrees


class ParameterSet(Mapping):
    """Immutable mapping of parameter name to raw string value.

    Examples
    --------
    >>> params = parse_definition("+proj=merc +lat_ts=0 +over")
    >>> params.get_string("proj")
    'merc'
    >>> params.get_bool("over")
    True
    >>> params.get_float("k") is None
    True
    """

    def __init__(self, values: Optional[Mapping] = None):
        self._values: Dict[str, str] = dict(values or {})

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        body = " ".join(
            f"+{k}={v}" if v else f"+{k}" for k, v in self._values.items()
        )
        return f"ParameterSet({body!r})"

    def with_defaults(self, defaults: Mapping) -> "ParameterSet":
        """Return a copy where ``defaults`` fill only the unset keys.

        Explicit parameters always win over catalog defaults.
        """
        merged = dict(defaults)
        merged.update(self._values)
        return ParameterSet(merged)

    def get_string(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def get_bool(self, name: str) -> Optional[bool]:
        """Read a flag; a bare ``+name`` counts as true."""
        value = self._values.get(name)
        if value is None:
            return None
        if value == "" or value in _TRUE_LITERALS:
            return True
        if value in _FALSE_LITERALS:
            return False
        raise InvalidParameterError(
            f"Parameter '{name}' is not a boolean: '{value}'", parameter=name
        )

    def get_float(self, name: str) -> Optional[float]:
        value = self._values.get(name)
        if value is None:
            return None
        try:
            return float(value)
        except ValueError as e:
            raise InvalidParameterError(
                f"Parameter '{name}' is not a number: '{value}'", parameter=name
            ) from e

    def get_degree(self, name: str) -> Optional[float]:
        """Read a DMS angle and return it in radians."""
        value = self._values.get(name)
        if value is None:
            return None
        try:
            return float(np.radians(parse_dms(value)))
        except ValueError as e:
            raise InvalidParameterError(
                f"Parameter '{name}' is not an angle: '{value}'", parameter=name
            ) from e


def parse_definition(definition: str) -> ParameterSet:
    """Parse a ``+key=value`` definition string into a `ParameterSet`.

    Tokens that are empty after trimming are skipped; on duplicate keys the
    last one wins.
    """
    values: Dict[str, str] = {}
    for part in definition.split("+"):
        token = part.strip()
        if not token:
            continue
        key, value = split_key_value(token)
        values[key] = value
    return ParameterSet(values)
