from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

import params


@dataclass(frozen=True)
class RegionMetric:
    name: str
    position: Tuple[float, float]
    outbound_value: float = 0.0
    inbound_value: float = 0.0
    # False when the region had no entry in the metrics file
    has_metrics: bool = False


def metrics_frame(metrics: Dict[str, Dict], fields: List[str]) -> pd.DataFrame:
    """Name-keyed metrics mapping -> numeric DataFrame indexed by region name.

    Missing columns are added, non-numeric and negative values become 0.
    """
    df = pd.DataFrame.from_dict(metrics or {}, orient="index")
    for c in fields:
        if c not in df.columns:
            df[c] = 0
        df[c] = pd.to_numeric(df[c], errors="coerce").fillna(0).clip(lower=0).astype(float)
    return df[fields]


def join_regions(features: List[Dict], metrics: Dict[str, Dict],
                 position_of: Callable[[Dict], Tuple[float, float]],
                 outbound_field: str = params.OUTBOUND_FIELD,
                 inbound_field: Optional[str] = params.INBOUND_FIELD) -> List[RegionMetric]:
    """Attach migration numbers and a plotted position to every GeoJSON feature.

    Regions keep the feature order of the GeoJSON file. A feature whose
    properties.name has no metrics entry gets zeros and has_metrics=False.
    """
    fields = [outbound_field] + ([inbound_field] if inbound_field else [])
    df = metrics_frame(metrics, fields)

    regions: List[RegionMetric] = []
    seen = set()
    for feature in features:
        name = (feature.get("properties") or {}).get("name")
        if name is None:
            print("Warning: skipping feature without properties.name")
            continue
        if name in seen:
            raise ValueError(f"Duplicate region name in GeoJSON: {name!r}")
        seen.add(name)

        if name in df.index:
            row = df.loc[name]
            outbound = float(row[outbound_field])
            inbound = float(row[inbound_field]) if inbound_field else 0.0
            has_metrics = True
        else:
            outbound = inbound = 0.0
            has_metrics = False

        regions.append(RegionMetric(
            name=name,
            position=position_of(feature),
            outbound_value=outbound,
            inbound_value=inbound,
            has_metrics=has_metrics,
        ))
    return regions
