"""
Tests for the Equirectangular projection.
"""

import numpy as np
import pytest

from cartography import InvalidParameterError, ProjectionKind, new_projection


class TestEquirectangular:

    def test_plate_carree(self):
        proj = new_projection("+proj=eqc +ellps=WGS84")
        x, y = proj.forward(0.5, 0.25)
        assert x == pytest.approx(6378137.0 * 0.5)
        assert y == pytest.approx(6378137.0 * 0.25)
        assert proj.kind is ProjectionKind.EQUIRECTANGULAR

    def test_true_scale_latitude(self):
        proj = new_projection("+proj=eqc +R=1 +lat_ts=60")
        assert proj.kernel.rc == pytest.approx(0.5)
        x, y = proj.forward(1.0, 0.5)
        assert x == pytest.approx(0.5)
        assert y == pytest.approx(0.5)

    def test_first_parallel_fallback(self):
        proj = new_projection("+proj=eqc +R=1 +lat_1=60")
        assert proj.kernel.rc == pytest.approx(0.5)

    def test_first_parallel_beats_true_scale_latitude(self):
        proj = new_projection("+proj=eqc +R=1 +lat_ts=60 +lat_1=0")
        assert proj.kernel.rc == 1.0

    def test_origin_latitude_is_ignored(self):
        proj = new_projection("+proj=eqc +R=1 +lat_0=10")
        _, y = proj.forward(0.0, np.radians(10.0))
        assert y == pytest.approx(np.radians(10.0))
        _, lat = proj.inverse(0.0, 0.0)
        assert lat == 0.0

    def test_inverse_divides_by_scale(self):
        proj = new_projection("+proj=eqc +R=1 +lat_ts=60")
        lon, lat = proj.inverse(0.5, 0.5)
        assert lon == pytest.approx(1.0)
        assert lat == pytest.approx(0.5)

    def test_poles_are_valid(self):
        proj = new_projection("+proj=eqc +R=1")
        lon, lat = proj.inverse(*proj.forward(0.2, np.pi / 2))
        assert lat == pytest.approx(np.pi / 2)
        assert lon == pytest.approx(0.2)

    @pytest.mark.parametrize("key", ["lat_1", "lat_ts"])
    @pytest.mark.parametrize("value", ["90", "-90", "120"])
    def test_polar_true_scale_rejected(self, key, value):
        with pytest.raises(InvalidParameterError) as excinfo:
            new_projection(f"+proj=eqc +R=1 +{key}={value}")
        assert excinfo.value.parameter == key

    @pytest.mark.parametrize("definition", [
        "+proj=eqc +ellps=WGS84",
        "+proj=eqc +R=6371000 +lat_ts=30 +lat_0=10 +lon_0=20 +x_0=100 +y_0=-50",
        "+proj=eqc +R=1 +lat_1=-40 +lat_ts=10",
        "+proj=eqc +ellps=WGS84 +lat_1=45 +units=km",
    ])
    def test_round_trip(self, definition, interior_grid):
        proj = new_projection(definition)
        for lon, lat in zip(*interior_grid):
            lon1, lat1 = proj.inverse(*proj.forward(lon, lat))
            assert lon1 == pytest.approx(lon, abs=1e-9)
            assert lat1 == pytest.approx(lat, abs=1e-9)
