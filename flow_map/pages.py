import html
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

import params
import utils
from .config import ARROWS_CSV, POPULATION_PNG, PLOTS_DST
from .header import make_header, make_footer_note
from .io_utils import write_text
from .planner import ArrowRule, Direction, FlowArrow, PlannerVariant
from .projection import AlbersProjection, path_data
from .regions import RegionMetric
from .templates import INDEX_HTML, MAP_JS, MAP_UNAVAILABLE_HTML, MARKER_SVG
from .tooltips import RegionColors, region_tooltip_html


def color_value(name: str) -> str:
    return params.COLORS.get(name, name)


def marker_id(rule: ArrowRule) -> str:
    return f"arrowhead-{rule.color.lstrip('#')}"


def render_markers(rules: Sequence[ArrowRule]) -> str:
    """One <marker> per distinct arrow colour, inside a single <defs>."""
    seen: Dict[str, str] = {}
    for rule in rules:
        mid = marker_id(rule)
        if mid not in seen:
            seen[mid] = MARKER_SVG.replace("%ID%", mid).replace("%FILL%", color_value(rule.color))
    return "<defs>" + "".join(seen.values()) + "</defs>"


def render_regions(features: List[Dict], regions: Sequence[RegionMetric], projection: AlbersProjection,
                   hub: str = params.HUB_REGION) -> str:
    colors = RegionColors(regions, hub)
    by_name = {r.name: r for r in regions}
    out = []
    for feature in features:
        name = (feature.get("properties") or {}).get("name")
        region = by_name.get(name)
        if region is None:
            continue
        d = path_data(feature, projection)
        if not d:
            continue
        fill = colors.fill(region)
        tip = html.escape(region_tooltip_html(region, hub), quote=True)
        out.append(
            f'<path class="region" d="{d}" fill="{fill}" data-fill="{fill}" '
            f'stroke="{params.COLORS["border"]}" stroke-width="{params.REGION_BORDER_WIDTH}" '
            f'data-name="{html.escape(name, quote=True)}" data-tooltip="{tip}"/>'
        )
    return "\n".join(out)


def render_arrow(arrow: FlowArrow, rule: ArrowRule, curved: bool = True) -> str:
    stroke = color_value(rule.color)
    common = (
        f'class="arrow {rule.name}" stroke="{stroke}" stroke-width="{utils.num_str(round(arrow.weight, 3))}" '
        f'fill="none" marker-end="url(#{marker_id(rule)})"'
    )
    if curved:
        return f'<path {common} d="{arrow.path}"/>'
    (x1, y1), (x2, y2) = arrow.source, arrow.target
    return (f'<line {common} x1="{utils.num_str(x1)}" y1="{utils.num_str(y1)}" '
            f'x2="{utils.num_str(x2)}" y2="{utils.num_str(y2)}"/>')


def render_arrows(arrows: Sequence[FlowArrow], variant: PlannerVariant) -> str:
    rules = {r.name: r for r in variant.rules}
    return "\n".join(render_arrow(a, rules[a.rule], variant.curved) for a in arrows)


def render_map_svg(features: List[Dict], regions: Sequence[RegionMetric], arrows: Sequence[FlowArrow],
                   variant: PlannerVariant, projection: AlbersProjection) -> str:
    (x0, y0), (x1, y1) = projection.extent
    box = " ".join(utils.num_str(round(v, 1)) for v in (x0, y0, x1 - x0, y1 - y0))
    width, height = utils.num_str(round(x1 - x0)), utils.num_str(round(y1 - y0))
    return (
        f'<svg id="map" viewBox="{box}" width="{width}" height="{height}" '
        f'aria-label="Migration map">\n'
        f'{render_markers(variant.rules)}\n'
        f'<g class="regions">\n{render_regions(features, regions, projection, variant.hub)}\n</g>\n'
        f'<g class="arrows">\n{render_arrows(arrows, variant)}\n</g>\n'
        f'</svg>'
    )


def describe_rule(rule: ArrowRule, hub: str) -> str:
    threshold = utils.count_str(rule.threshold)
    if rule.measure == "outbound":
        what = f"more than {threshold} movers to {hub}"
    elif rule.side == "above":
        what = f"net senders to {hub} by more than {threshold}"
    else:
        what = f"net receivers from {hub} by more than {threshold}"
    towards = f"to {hub}" if rule.direction is Direction.OUTBOUND else f"from {hub}"
    return f"Arrows {towards}: {what}"


def arrow_key_html(variant: PlannerVariant) -> str:
    items = "".join(
        f'<span><span class="swatch" style="background:{color_value(r.color)}"></span>'
        f'{html.escape(describe_rule(r, variant.hub))}</span>'
        for r in variant.rules
    )
    return f'<div class="arrow-key legend">{items}</div>'


def arrows_frame(arrows: Sequence[FlowArrow]) -> pd.DataFrame:
    cols = ["region", "rule", "direction", "value", "weight", "radius",
            "source_x", "source_y", "target_x", "target_y", "path"]
    rows = [
        {
            "region": a.region,
            "rule": a.rule,
            "direction": a.direction.value,
            "value": a.value,
            "weight": round(a.weight, 4),
            "radius": round(a.radius, 4),
            "source_x": a.source[0],
            "source_y": a.source[1],
            "target_x": a.target[0],
            "target_y": a.target[1],
            "path": a.path,
        }
        for a in arrows
    ]
    return pd.DataFrame(rows, columns=cols)


def export_arrow_table(arrows: Sequence[FlowArrow], out_dir: Path) -> Path:
    path = out_dir / ARROWS_CSV
    path.parent.mkdir(parents=True, exist_ok=True)
    arrows_frame(arrows).to_csv(path, index=False)
    print(f"Wrote {len(arrows)} arrows to {path}")
    return path


def make_index(out_dir: Path, variant: PlannerVariant, map_svg: Optional[str]):
    """Write index.html. map_svg=None means the map pass failed; the chart still shows."""
    title = f"{variant.hub} population and migration"
    page = INDEX_HTML.replace("%HEADER%", make_header(title))
    page = page.replace("%TITLE%", title)
    page = page.replace("%HUB%", variant.hub)
    page = page.replace("%POPULATION_SRC%", f"{PLOTS_DST.name}/{POPULATION_PNG}")
    if map_svg is None:
        page = page.replace("%MAP%", MAP_UNAVAILABLE_HTML).replace("%ARROW_KEY%", "")
    else:
        page = page.replace("%MAP%", map_svg).replace("%ARROW_KEY%", arrow_key_html(variant))
    page = page.replace("%FOOTER%", make_footer_note("Built as static HTML."))
    js = (MAP_JS.replace("%OFFSET_X%", str(params.TOOLTIP_OFFSET[0]))
                .replace("%OFFSET_Y%", str(params.TOOLTIP_OFFSET[1]))
                .replace("%HOVER_FILL%", params.COLORS["hover"]))
    page = page.replace("%MAP_JS%", js)
    write_text(out_dir / "index.html", page)
