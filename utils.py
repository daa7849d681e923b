import math


def num_str(x) -> str:
    """
    Format a number the way a browser prints it in an SVG attribute (ex. 150, 12.5, -3).
    Integral floats lose their trailing ".0".
    """
    x = float(x)
    if math.isfinite(x) and x.is_integer():
        return str(int(x))
    return repr(x)


def parse_float(x, default=0.0) -> float:
    """Coerce x to a finite float, falling back to default for None, junk and NaN."""
    try:
        v = float(x)
    except (ValueError, TypeError):
        return default
    if math.isnan(v):
        return default
    return v


def count_str(x) -> str:
    """Thousands-separated integer for tooltips and tables (ex. 15,034)."""
    return f"{int(round(parse_float(x))):,}"
