"""Thin wrapper to build the static page using the flow_map package."""
import argparse
import sys

import params
from flow_map.config import GEOJSON_PATH, GEOJSON_URL, METRICS_PATH, OUT_DIR, POPULATION_CSV
from flow_map.main import build_site


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build the population chart and migration flow map")
    parser.add_argument("--variant", choices=sorted(params.VARIANTS), default=params.DEFAULT_VARIANT,
                        help="Arrow rule preset from params.VARIANTS")
    parser.add_argument("--geojson", default=None,
                        help=f"GeoJSON path or http(s) URL (default {GEOJSON_PATH}, else {GEOJSON_URL})")
    parser.add_argument("--metrics", default=str(METRICS_PATH), help="Migration JSON path or http(s) URL")
    parser.add_argument("--population", default=str(POPULATION_CSV), help="Population CSV path")
    parser.add_argument("--hub", default=None, help=f"Hub region name (default {params.HUB_REGION})")
    parser.add_argument("--out-dir", default=str(OUT_DIR))
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    ok = build_site(
        variant_name=args.variant,
        geojson_source=args.geojson,
        metrics_source=args.metrics,
        population_csv=args.population,
        out_dir=args.out_dir,
        hub=args.hub,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
