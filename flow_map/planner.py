"""Arrow selection and geometry for the migration map.

Given every region's migration numbers and plotted position, decide which
regions get an arrow to or from the hub, how each arrow bows and how thick it
is drawn. Everything here is a pure function of its inputs.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import params
import utils
from .regions import RegionMetric

Point = Tuple[float, float]


class Direction(Enum):
    """Arrow direction as seen from the region."""
    OUTBOUND = "outbound"  # region -> hub
    INBOUND = "inbound"    # hub -> region


@dataclass(frozen=True)
class CurveOffset:
    # added to the displacement before the radius is computed
    dy_bias: float = 0.0
    # added to the target's y coordinate
    end_dy: float = 0.0


NO_OFFSET = CurveOffset()


@dataclass(frozen=True)
class ArrowRule:
    name: str
    measure: str = "outbound"      # "outbound" or "net"
    side: str = "above"            # "above": measure > threshold, "below": measure < -threshold
    threshold: float = 0.0
    direction: Direction = Direction.OUTBOUND
    weight_field: str = "outbound"  # "outbound" or "inbound"
    exponent: float = 1.0
    offset: CurveOffset = NO_OFFSET
    color: str = "red"

    def __post_init__(self):
        if self.measure not in ("outbound", "net"):
            raise ValueError(f"Unknown measure for rule {self.name!r}: {self.measure!r}")
        if self.side not in ("above", "below"):
            raise ValueError(f"Unknown side for rule {self.name!r}: {self.side!r}")
        if self.weight_field not in ("outbound", "inbound"):
            raise ValueError(f"Unknown weight field for rule {self.name!r}: {self.weight_field!r}")

    def measure_of(self, region: RegionMetric) -> float:
        if self.measure == "net":
            return region.outbound_value - region.inbound_value
        return region.outbound_value

    def matches(self, region: RegionMetric) -> bool:
        m = self.measure_of(region)
        if self.side == "above":
            return m > self.threshold
        return m < -self.threshold

    def weight_value(self, region: RegionMetric) -> float:
        return region.inbound_value if self.weight_field == "inbound" else region.outbound_value


@dataclass(frozen=True)
class PlannerVariant:
    name: str
    rules: Tuple[ArrowRule, ...]
    hub: str = params.HUB_REGION
    curve_scale: float = params.CURVE_SCALE
    stroke_range: Tuple[float, float] = params.STROKE_RANGE
    curved: bool = True


@dataclass(frozen=True)
class FlowArrow:
    region: str
    source: Point
    target: Point
    radius: float
    weight: float
    value: float
    direction: Direction
    rule: str
    path: str


class LinearScale:
    """Map [d0, d1] linearly onto [r0, r1].

    A zero-width domain has no slope, so every input maps to r0.
    """

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    @property
    def degenerate(self) -> bool:
        return self.domain[1] == self.domain[0]

    def __call__(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.degenerate:
            return r0
        t = (float(x) - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)


def curve_radius(source: Point, target: Point, scale: float = params.CURVE_SCALE,
                 offset: CurveOffset = NO_OFFSET) -> float:
    dx = target[0] - source[0]
    dy = target[1] - source[1] + offset.dy_bias
    return math.sqrt(dx * dx + dy * dy) * scale


def generate_curve_path(source: Point, target: Point, scale: float = params.CURVE_SCALE,
                        offset: CurveOffset = NO_OFFSET) -> str:
    """Return an SVG path for a single circular arc from source to target.

    The radius grows with the distance between the endpoints, so nearby and
    far-away regions bow by the same relative amount.
    """
    r = utils.num_str(curve_radius(source, target, scale, offset))
    sx, sy = utils.num_str(source[0]), utils.num_str(source[1])
    tx, ty = utils.num_str(target[0]), utils.num_str(target[1] + offset.end_dy)
    return f"M{sx},{sy}A{r},{r} 0 0,1 {tx},{ty}"


def generate_line_path(source: Point, target: Point) -> str:
    return (f"M{utils.num_str(source[0])},{utils.num_str(source[1])}"
            f"L{utils.num_str(target[0])},{utils.num_str(target[1])}")


def max_migration(regions: Sequence[RegionMetric]) -> float:
    if not regions:
        return 0.0
    return max(max(r.outbound_value, r.inbound_value) for r in regions)


class ArrowFlowPlanner:
    """Select regions per rule and turn them into FlowArrows."""

    def __init__(self, variant: PlannerVariant):
        self.variant = variant

    def hub_position(self, regions: Sequence[RegionMetric]) -> Point:
        for r in regions:
            if r.name == self.variant.hub:
                return r.position
        raise ValueError(f"Hub region {self.variant.hub!r} not found among {len(regions)} regions")

    def select(self, regions: Sequence[RegionMetric], rule: ArrowRule) -> List[RegionMetric]:
        # regions without metrics never get an arrow, even with a negative threshold
        return [
            r for r in regions
            if r.name != self.variant.hub and r.has_metrics and rule.matches(r)
        ]

    def stroke_scale(self, regions: Sequence[RegionMetric]) -> LinearScale:
        return LinearScale((0.0, max_migration(regions)), self.variant.stroke_range)

    def weight(self, scale: LinearScale, value: float, exponent: float) -> float:
        return scale(value) ** exponent

    def make_arrow(self, region: RegionMetric, hub: Point, rule: ArrowRule, scale: LinearScale) -> FlowArrow:
        if rule.direction is Direction.INBOUND:
            source, target = hub, region.position
        else:
            source, target = region.position, hub
        if self.variant.curved:
            radius = curve_radius(source, target, self.variant.curve_scale, rule.offset)
            path = generate_curve_path(source, target, self.variant.curve_scale, rule.offset)
        else:
            radius = 0.0
            path = generate_line_path(source, target)
        value = rule.weight_value(region)
        return FlowArrow(
            region=region.name,
            source=source,
            target=target,
            radius=radius,
            weight=self.weight(scale, value, rule.exponent),
            value=value,
            direction=rule.direction,
            rule=rule.name,
            path=path,
        )

    def plan(self, regions: Sequence[RegionMetric]) -> List[FlowArrow]:
        """Arrows for every rule in order; within a rule, in region order."""
        hub = self.hub_position(regions)
        scale = self.stroke_scale(regions)
        arrows: List[FlowArrow] = []
        for rule in self.variant.rules:
            for region in self.select(regions, rule):
                arrows.append(self.make_arrow(region, hub, rule, scale))
        return arrows

    def plan_by_rule(self, regions: Sequence[RegionMetric]) -> Dict[str, List[FlowArrow]]:
        out: Dict[str, List[FlowArrow]] = {rule.name: [] for rule in self.variant.rules}
        for a in self.plan(regions):
            out[a.rule].append(a)
        return out


def rule_from_params(cfg: Dict) -> ArrowRule:
    offset = cfg.get("offset")
    return ArrowRule(
        name=cfg["name"],
        measure=cfg.get("measure", "outbound"),
        side=cfg.get("side", "above"),
        threshold=float(cfg.get("threshold", 0.0)),
        direction=Direction(cfg.get("direction", "outbound")),
        weight_field=cfg.get("weight_field", "outbound"),
        exponent=float(cfg.get("exponent", 1.0)),
        offset=CurveOffset(*offset) if offset else NO_OFFSET,
        color=cfg.get("color", "red"),
    )


def variant_from_params(name: str, hub: Optional[str] = None) -> PlannerVariant:
    """Build a PlannerVariant from the presets in params.VARIANTS."""
    if name not in params.VARIANTS:
        raise ValueError(f"Unknown variant {name!r}; expected one of {sorted(params.VARIANTS)}")
    cfg = params.VARIANTS[name]
    return PlannerVariant(
        name=name,
        rules=tuple(rule_from_params(r) for r in cfg["rules"]),
        hub=hub or params.HUB_REGION,
        curve_scale=float(cfg.get("curve_scale", params.CURVE_SCALE)),
        stroke_range=tuple(cfg.get("stroke_range", params.STROKE_RANGE)),
        curved=bool(cfg.get("curved", True)),
    )
