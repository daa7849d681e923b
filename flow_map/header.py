from typing import Optional
from .config import LAST_UPDATED, FOOTER_TEXT


def make_header(title: str) -> str:
    """Return the header HTML snippet shown above the page content.

    - title: short heading text displayed in the header legend
    """
    return (
        f'<div class="card site-header" style="display:flex;justify-content:space-between;align-items:center;padding:8px">'
        f'<div class="small-links">'
        f'<a class="btn" href="./index.html">Map</a>'
        f'<a class="btn" href="./flow_arrows.csv">Arrows (CSV)</a>'
        f'</div>'
        f'<div class="legend">{title}</div>'
        f'</div>'
    )


def make_footer_note(extra: Optional[str] = None) -> str:
    """Return a footer text line with standard site note and timestamp.

    extra: optional extra note to append before the timestamp
    """
    extra_note = (extra + " ") if extra else ""
    return f"{FOOTER_TEXT} {extra_note}Last updated: {LAST_UPDATED}"
