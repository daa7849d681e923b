from pathlib import Path
from typing import Dict, List, Optional, Tuple

import params
import plot_population
from .config import METRICS_PATH, OUT_DIR, POPULATION_CSV, POPULATION_PNG, PLOTS_DST
from .io_utils import DataLoadFailure, ensure_dirs, load_sources, write_text
from .pages import export_arrow_table, make_index, render_map_svg
from .planner import ArrowFlowPlanner, FlowArrow, PlannerVariant, variant_from_params
from .projection import AlbersProjection, centroid
from .regions import RegionMetric, join_regions
from .templates import BASE_CSS


def plan_map(geojson: Dict, metrics: Dict[str, Dict], variant: PlannerVariant,
             projection: Optional[AlbersProjection] = None) -> Tuple[List[RegionMetric], List[FlowArrow]]:
    """Join, project and plan: regions in GeoJSON order plus the arrows to draw."""
    projection = projection or AlbersProjection()
    regions = join_regions(
        geojson["features"],
        metrics,
        position_of=lambda f: centroid(f, projection),
    )
    missing = sum(1 for r in regions if not r.has_metrics)
    if missing:
        print(f"Warning: {missing} region(s) have no migration entry; treating their values as 0")
    arrows = ArrowFlowPlanner(variant).plan(regions)
    return regions, arrows


def build_map(geojson_source, metrics_source, variant: PlannerVariant, out_dir: Path) -> str:
    """Load both inputs and return the map SVG. Raises DataLoadFailure before drawing anything."""
    geojson, metrics = load_sources(geojson_source, metrics_source)
    projection = AlbersProjection()
    regions, arrows = plan_map(geojson, metrics, variant, projection)
    export_arrow_table(arrows, out_dir)
    counts = ", ".join(f"{rule.name}={sum(1 for a in arrows if a.rule == rule.name)}" for rule in variant.rules)
    print(f"Planned {len(arrows)} arrows for variant {variant.name} ({counts})")
    return render_map_svg(geojson["features"], regions, arrows, variant, projection)


def build_site(variant_name: str = params.DEFAULT_VARIANT, geojson_source=None,
               metrics_source=METRICS_PATH, population_csv=POPULATION_CSV,
               out_dir: Path = OUT_DIR, hub: Optional[str] = None) -> bool:
    """Build the page. Returns False when the map could not be built."""
    out_dir = Path(out_dir)
    variant = variant_from_params(variant_name, hub=hub)
    ensure_dirs(out_dir)
    write_text(out_dir / "styles.css", BASE_CSS)

    # The chart only needs the local CSV, so it is built even if the map data is unavailable
    try:
        plot_population.main(population_csv, out_dir / PLOTS_DST.name / POPULATION_PNG, hub=variant.hub)
    except (OSError, ValueError) as e:
        print(f"Warning: couldn't build population plot: {e}")

    map_svg = None
    try:
        map_svg = build_map(geojson_source, metrics_source, variant, out_dir)
    except DataLoadFailure as e:
        print(f"Warning: couldn't build migration map: {e}")

    make_index(out_dir, variant, map_svg)
    print(f"Done. Built {out_dir / 'index.html'}" + ("" if map_svg else " without the migration map"))
    return map_svg is not None
