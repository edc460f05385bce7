"""
Pytest fixtures for the projection engine test suite.
"""

import numpy as np
import pytest

from cartography import new_projection


# Definitions in the style of EPSG:4326 and EPSG:3857
WGS84_LONGLAT = (
    "+title=WGS 84 (long/lat) +proj=longlat +ellps=WGS84 +datum=WGS84 +units=degrees"
)
PSEUDO_MERCATOR = (
    "+title=WGS 84 / Pseudo-Mercator +proj=merc +a=6378137 +b=6378137 "
    "+lat_ts=0.0 +lon_0=0.0 +x_0=0.0 +y_0=0 +k=1.0 +units=m +nadgrids=@null +no_defs"
)


@pytest.fixture
def wgs84_longlat():
    return new_projection(WGS84_LONGLAT)


@pytest.fixture
def pseudo_mercator():
    return new_projection(PSEUDO_MERCATOR)


@pytest.fixture
def sample_point():
    """(18.5 E, 54.2 N) in radians."""
    return np.radians(18.5), np.radians(54.2)


@pytest.fixture
def interior_grid():
    """Longitude/latitude grid (radians) that avoids the poles."""
    lons = np.radians(np.linspace(-179.0, 179.0, 37))
    lats = np.radians(np.linspace(-80.0, 80.0, 17))
    lon_grid, lat_grid = np.meshgrid(lons, lats)
    return lon_grid.ravel(), lat_grid.ravel()
