"""
End-to-end tests for the page build and the command line.
"""
import pandas as pd

import build_site
from flow_map.main import build_site as build


class TestBuildSite:
    def test_full_build(self, data_files, tmp_path) -> None:
        geo_path, metrics_path, pop_path = data_files
        out = tmp_path / "docs"
        ok = build("net_flow", geo_path, metrics_path, pop_path, out)
        assert ok
        page = (out / "index.html").read_text(encoding="utf-8")
        assert 'class="arrow inbound"' in page
        assert 'class="arrow net_sender"' in page
        assert (out / "styles.css").exists()
        assert (out / "plots" / "population_trend.png").exists()
        arrows = pd.read_csv(out / "flow_arrows.csv")
        assert list(arrows["region"]) == ["Nevada", "Oregon"]

    def test_single_variant(self, data_files, tmp_path) -> None:
        geo_path, metrics_path, pop_path = data_files
        out = tmp_path / "docs"
        assert build("single", geo_path, metrics_path, pop_path, out)
        arrows = pd.read_csv(out / "flow_arrows.csv")
        assert set(arrows["region"]) == {"Nevada", "Oregon"}
        assert set(arrows["direction"]) == {"outbound"}

    def test_missing_data_skips_map_but_keeps_chart(self, data_files, tmp_path) -> None:
        geo_path, _, pop_path = data_files
        out = tmp_path / "docs"
        ok = build("net_flow", geo_path, tmp_path / "missing.json", pop_path, out)
        assert not ok
        page = (out / "index.html").read_text(encoding="utf-8")
        assert "migration map was not built" in page
        assert 'class="arrow' not in page
        assert (out / "plots" / "population_trend.png").exists()
        assert not (out / "flow_arrows.csv").exists()


class TestCli:
    def test_exit_status(self, data_files, tmp_path) -> None:
        geo_path, metrics_path, pop_path = data_files
        args = ["--geojson", str(geo_path), "--metrics", str(metrics_path),
                "--population", str(pop_path), "--out-dir", str(tmp_path / "docs")]
        assert build_site.main(args) == 0
        assert build_site.main(args[:2] + ["--metrics", str(tmp_path / "nope.json")] + args[4:]) == 1

    def test_variant_choice(self) -> None:
        assert build_site.parse_args(["--variant", "single"]).variant == "single"
