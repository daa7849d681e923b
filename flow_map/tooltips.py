"""Hover behaviour for map regions.

Each handler takes the current pointer position (and the hovered region where
needed) and returns the tooltip state to display. Nothing here touches the
region data. The page script in templates.MAP_JS does the same thing in the
browser with the same offsets.
"""
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from matplotlib.colors import LinearSegmentedColormap, to_hex

import params
import utils
from .regions import RegionMetric


@dataclass(frozen=True)
class TooltipState:
    left: float = 0.0
    top: float = 0.0
    visible: bool = False
    html: str = ""


HIDDEN = TooltipState()


def _place(page_x: float, page_y: float, offset: Tuple[int, int] = params.TOOLTIP_OFFSET) -> Tuple[float, float]:
    return page_x + offset[0], page_y + offset[1]


def on_hover(page_x: float, page_y: float, region: RegionMetric, hub: str = params.HUB_REGION) -> TooltipState:
    left, top = _place(page_x, page_y)
    return TooltipState(left=left, top=top, visible=True, html=region_tooltip_html(region, hub))


def on_move(state: TooltipState, page_x: float, page_y: float) -> TooltipState:
    left, top = _place(page_x, page_y)
    return replace(state, left=left, top=top)


def on_out(state: TooltipState) -> TooltipState:
    return replace(state, visible=False)


def region_tooltip_html(region: RegionMetric, hub: str = params.HUB_REGION) -> str:
    if region.has_metrics:
        going = utils.count_str(region.outbound_value)
        coming = utils.count_str(region.inbound_value)
    else:
        going = coming = "n/a"
    return (
        f"State: {region.name}<br>"
        f"Going to {hub}: {going}<br>"
        f"Coming from {hub}: {coming}"
    )


class RegionColors:
    """Fill colours for regions: hub colour, or low->high by outbound value."""

    def __init__(self, regions: Sequence[RegionMetric], hub: str = params.HUB_REGION):
        self.hub = hub
        self.vmax = max((max(r.outbound_value, r.inbound_value) for r in regions), default=0.0)
        self.cmap = LinearSegmentedColormap.from_list(
            "region_fill", [params.COLORS["region_low"], params.COLORS["region_high"]])

    def fill(self, region: RegionMetric) -> str:
        if region.name == self.hub:
            return params.COLORS["hub"]
        t = region.outbound_value / self.vmax if self.vmax > 0 else 0.0
        return to_hex(self.cmap(min(max(t, 0.0), 1.0)))
