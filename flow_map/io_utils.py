import json
from pathlib import Path
from typing import Dict, Tuple

import requests

from .config import GEOJSON_PATH, GEOJSON_URL, OUT_DIR, PLOTS_DST, FETCH_TIMEOUT


class DataLoadFailure(RuntimeError):
    """A data source could not be fetched or parsed."""

    def __init__(self, source, reason):
        super().__init__(f"Could not load {source}: {reason}")
        self.source = str(source)
        self.reason = reason


def ensure_dirs(out_dir: Path = OUT_DIR):
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / PLOTS_DST.name).mkdir(parents=True, exist_ok=True)


def write_text(path: Path, text: str):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def is_url(source) -> bool:
    return str(source).startswith(("http://", "https://"))


def fetch_json(source):
    """Read JSON from a local path or an http(s) URL.

    Any fetch or parse error is raised as DataLoadFailure.
    """
    if is_url(source):
        try:
            response = requests.get(str(source), timeout=FETCH_TIMEOUT)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise DataLoadFailure(source, e) from e
        except ValueError as e:
            raise DataLoadFailure(source, f"invalid JSON ({e})") from e

    path = Path(source)
    if not path.exists():
        raise DataLoadFailure(source, "file not found")
    try:
        with path.open("r", encoding="utf-8-sig") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise DataLoadFailure(source, e) from e


def geojson_source(source=None):
    """Explicit source if given, else the local GeoJSON file, else the public copy."""
    if source:
        return source
    if GEOJSON_PATH.exists():
        return GEOJSON_PATH
    print(f"{GEOJSON_PATH} not found; fetching region shapes from {GEOJSON_URL}")
    return GEOJSON_URL


def load_geojson(source) -> Dict:
    data = fetch_json(source)
    if not isinstance(data, dict) or not isinstance(data.get("features"), list):
        raise DataLoadFailure(source, "not a GeoJSON FeatureCollection")
    return data


def load_metrics(source) -> Dict[str, Dict]:
    data = fetch_json(source)
    if not isinstance(data, dict):
        raise DataLoadFailure(source, "expected an object keyed by region name")
    return data


def load_sources(geojson_src, metrics_source) -> Tuple[Dict, Dict[str, Dict]]:
    """Load both map inputs; either one failing fails the pair."""
    geojson = load_geojson(geojson_source(geojson_src))
    metrics = load_metrics(metrics_source)
    print(f"Loaded {len(geojson['features'])} features and {len(metrics)} metric rows")
    return geojson, metrics
