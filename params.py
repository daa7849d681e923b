from typing import List, Dict, Optional, Tuple


# Hub region: every arrow starts or ends at its centroid
HUB_REGION = "California"

# Metric field names in the name-keyed migration JSON
OUTBOUND_FIELD = "going_to_california"
INBOUND_FIELD = "coming_from_california"

# Arc radius = CURVE_SCALE * endpoint distance. Larger values give flatter arcs.
CURVE_SCALE = 1.5

# Stroke widths are mapped linearly from [0, max migration] onto this range
# before the per-rule exponent is applied.
STROKE_RANGE: Tuple[float, float] = (1.0, 5.0)

COLORS = {
    'hub': '#f2a724',
    'region_low': '#3d3d3d',
    'region_high': '#3d3d3d',
    'hover': '#ff9ee7',
    'border': 'white',
    'red': '#bd2300',
    'green': '#45d985',
    'line': 'steelblue',
}

REGION_BORDER_WIDTH = 2.5

# Arrow rules per variant. Order matters: arrows are drawn rule by rule.
#   measure:   "outbound" compares the outbound value, "net" compares outbound - inbound
#   side:      "above" keeps measure > threshold, "below" keeps measure < -threshold
#   direction: "outbound" draws region -> hub, "inbound" draws hub -> region
#   offset:    (dy_bias, end_dy) added to the arc, or None for a plain arc
VARIANTS: Dict[str, Dict] = {
    "single": {
        "curved": True,
        "rules": [
            {
                "name": "outbound",
                "measure": "outbound",
                "side": "above",
                "threshold": 10000,
                "direction": "outbound",
                "weight_field": "outbound",
                "exponent": 1.0,
                "offset": None,
                "color": "red",
            },
        ],
    },
    "net_flow": {
        "curved": True,
        "rules": [
            {
                "name": "inbound",
                "measure": "net",
                "side": "below",
                "threshold": 10000,
                "direction": "inbound",
                "weight_field": "outbound",
                "exponent": 1.5,
                "offset": None,
                "color": "red",
            },
            {
                "name": "net_sender",
                "measure": "net",
                "side": "above",
                "threshold": 4500,
                "direction": "outbound",
                "weight_field": "inbound",
                "exponent": 2.0,
                # Shifts the returning arc below the outgoing one so the pair doesn't overlap
                "offset": (100.0, 15.0),
                "color": "green",
            },
        ],
    },
}

DEFAULT_VARIANT = "net_flow"

# Chart area: 800x400 minus margins
MARGIN = {"top": 20, "right": 30, "bottom": 30, "left": 40}
CHART_WIDTH = 800 - MARGIN["left"] - MARGIN["right"]
CHART_HEIGHT = 400 - MARGIN["top"] - MARGIN["bottom"]

# Albers USA: lower-48 conic plus Alaska and Hawaii insets.
# Inset "scale" is a factor of the base scale; "offset" and "clip" are in
# units of the base scale, relative to the base translate.
PROJECTION = {
    "parallels": (29.5, 45.5),
    "rotate": 96.0,
    "center": (-0.6, 38.7),
    "scale": 1000.0,
    "translate": (CHART_WIDTH / 1.75, CHART_HEIGHT / 1.45),
    "clip": ((-0.455, -0.238), (0.455, 0.238)),
}
PROJECTION_INSETS = {
    "alaska": {
        "parallels": (55.0, 65.0),
        "rotate": 154.0,
        "center": (-2.0, 58.5),
        "scale": 0.35,
        "offset": (-0.307, 0.201),
        "clip": ((-0.425, 0.120), (-0.214, 0.234)),
    },
    "hawaii": {
        "parallels": (8.0, 18.0),
        "rotate": 157.0,
        "center": (-3.0, 19.9),
        "scale": 1.0,
        "offset": (-0.205, 0.212),
        "clip": ((-0.214, 0.166), (-0.115, 0.234)),
    },
}

# Tooltip is placed this far from the pointer (page pixels)
TOOLTIP_OFFSET: Tuple[int, int] = (20, -20)

# Population chart: y-axis starts this far above the smallest value
POPULATION_Y_PAD = 100000

# Optional: restrict the population chart to a year range (None means use all years)
POPULATION_YEARS: Optional[List[int]] = None
