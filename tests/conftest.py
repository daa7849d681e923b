"""Shared fixtures: a handful of square "states" around the western US."""
import json

import numpy as np
import pytest

from flow_map.planner import ArrowFlowPlanner, variant_from_params
from flow_map.regions import RegionMetric


def square(name, lon0, lat0, lon1, lat1):
    ring = [[lon0, lat0], [lon1, lat0], [lon1, lat1], [lon0, lat1], [lon0, lat0]]
    return {
        "type": "Feature",
        "properties": {"name": name},
        "geometry": {"type": "Polygon", "coordinates": [ring]},
    }


class IdentityProjection:
    """Stand-in projection that leaves coordinates untouched."""

    def project(self, coords):
        return np.asarray(coords, dtype=float).reshape(-1, 2)


@pytest.fixture
def identity_projection():
    return IdentityProjection()


@pytest.fixture
def geojson():
    return {
        "type": "FeatureCollection",
        "features": [
            square("California", -122, 35, -118, 39),
            square("Nevada", -118, 37, -115, 41),
            square("Oregon", -124, 42, -117, 46),
            square("Texas", -104, 28, -96, 34),
            square("Atlantis", -90, 30, -88, 32),
        ],
    }


@pytest.fixture
def metrics():
    return {
        "Nevada": {"going_to_california": 15000, "coming_from_california": 40000},
        "Oregon": {"going_to_california": 30000, "coming_from_california": 20000},
        "Texas": {"going_to_california": "5000", "coming_from_california": 8000},
    }


@pytest.fixture
def regions():
    # max value across regions is 40000, so the stroke scale is 1 + v / 10000
    return [
        RegionMetric("California", (0.0, 0.0), 0.0, 0.0, has_metrics=False),
        RegionMetric("Nevada", (100.0, 0.0), 15000.0, 40000.0, has_metrics=True),
        RegionMetric("Oregon", (0.0, -100.0), 30000.0, 20000.0, has_metrics=True),
        RegionMetric("Texas", (300.0, 400.0), 5000.0, 8000.0, has_metrics=True),
        RegionMetric("Atlantis", (50.0, 50.0), 0.0, 0.0, has_metrics=False),
    ]


@pytest.fixture
def net_flow_planner():
    return ArrowFlowPlanner(variant_from_params("net_flow"))


@pytest.fixture
def single_planner():
    return ArrowFlowPlanner(variant_from_params("single"))


@pytest.fixture
def data_files(tmp_path, geojson, metrics):
    geo_path = tmp_path / "states.geojson"
    geo_path.write_text(json.dumps(geojson), encoding="utf-8")
    metrics_path = tmp_path / "migration.json"
    metrics_path.write_text(json.dumps(metrics), encoding="utf-8")
    pop_path = tmp_path / "population.csv"
    pop_path.write_text(
        "year,population,change\n"
        "2012,37944551,0.82\n"
        "2010,37319550,0.97\n"
        "2011,37636311,0.85\n",
        encoding="utf-8",
    )
    return geo_path, metrics_path, pop_path
