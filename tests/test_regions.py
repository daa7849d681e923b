"""
Tests for joining GeoJSON features with the migration mapping.
"""
import pytest

from flow_map.regions import join_regions, metrics_frame


def _origin(feature):
    return (0.0, 0.0)


class TestMetricsFrame:
    def test_coerces_strings_and_junk(self) -> None:
        df = metrics_frame({"A": {"x": "12", "y": "n/a"}, "B": {"x": -5}}, ["x", "y"])
        assert df.loc["A", "x"] == 12.0
        assert df.loc["A", "y"] == 0.0
        # negative counts are clipped
        assert df.loc["B", "x"] == 0.0
        assert df.loc["B", "y"] == 0.0

    def test_empty_mapping(self) -> None:
        df = metrics_frame({}, ["x"])
        assert list(df.columns) == ["x"]
        assert df.empty


class TestJoinRegions:
    def test_keeps_feature_order(self, geojson, metrics) -> None:
        regions = join_regions(geojson["features"], metrics, _origin)
        assert [r.name for r in regions] == ["California", "Nevada", "Oregon", "Texas", "Atlantis"]

    def test_values_joined_by_name(self, geojson, metrics) -> None:
        regions = {r.name: r for r in join_regions(geojson["features"], metrics, _origin)}
        assert regions["Nevada"].outbound_value == 15000
        assert regions["Nevada"].inbound_value == 40000
        assert regions["Texas"].outbound_value == 5000
        assert regions["Texas"].has_metrics

    def test_missing_join_key_defaults_to_zero(self, geojson, metrics) -> None:
        regions = {r.name: r for r in join_regions(geojson["features"], metrics, _origin)}
        atlantis = regions["Atlantis"]
        assert atlantis.outbound_value == 0
        assert atlantis.inbound_value == 0
        assert not atlantis.has_metrics

    def test_single_metric_mapping(self, geojson) -> None:
        metrics = {"Nevada": {"going_to_california": 7}}
        regions = {r.name: r for r in join_regions(geojson["features"], metrics, _origin, inbound_field=None)}
        assert regions["Nevada"].outbound_value == 7
        assert regions["Nevada"].inbound_value == 0

    def test_missing_inbound_field_defaults_to_zero(self, geojson) -> None:
        metrics = {"Nevada": {"going_to_california": 7}}
        regions = {r.name: r for r in join_regions(geojson["features"], metrics, _origin)}
        assert regions["Nevada"].inbound_value == 0
        assert regions["Nevada"].has_metrics

    def test_positions_come_from_callback(self, geojson, metrics) -> None:
        regions = join_regions(geojson["features"], metrics, lambda f: (len(f["properties"]["name"]), 1.0))
        assert regions[0].position == (len("California"), 1.0)

    def test_duplicate_names_rejected(self, geojson, metrics) -> None:
        features = geojson["features"] + [geojson["features"][1]]
        with pytest.raises(ValueError):
            join_regions(features, metrics, _origin)

    def test_feature_without_name_skipped(self, geojson, metrics) -> None:
        features = [{"type": "Feature", "properties": {}, "geometry": None}] + geojson["features"]
        regions = join_regions(features, metrics, _origin)
        assert len(regions) == len(geojson["features"])
