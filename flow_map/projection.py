"""Albers USA projection and planar helpers for GeoJSON geometry.

Only what the map needs: project lon/lat rings to screen space, turn them into
SVG path data, and find the area-weighted centroid of a region. Alaska and
Hawaii are drawn as insets in the lower-left corner of the lower-48 frame.
"""
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

import params
import utils

Box = Tuple[Tuple[float, float], Tuple[float, float]]


class ConicEqualArea:
    def __init__(self, parallels, rotate, center, scale, translate, clip: Optional[Box] = None):
        phi0, phi1 = np.radians(parallels)
        sy0 = np.sin(phi0)
        self.n = (sy0 + np.sin(phi1)) / 2
        self.c = 1 + sy0 * (2 * self.n - sy0)
        self.r0 = np.sqrt(self.c) / self.n
        self.rotate = float(rotate)
        self.k = float(scale)
        self.tx, self.ty = (float(t) for t in translate)
        self.clip = clip
        # center is given in the rotated frame
        self.cx, self.cy = self._raw(np.radians([center[0]]), np.radians([center[1]]))
        self.cx, self.cy = float(self.cx[0]), float(self.cy[0])

    def _raw(self, lam: np.ndarray, phi: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        r = np.sqrt(np.maximum(self.c - 2 * self.n * np.sin(phi), 0.0)) / self.n
        return r * np.sin(lam * self.n), self.r0 - r * np.cos(lam * self.n)

    def project(self, coords) -> np.ndarray:
        """(N, 2) lon/lat degrees -> (N, 2) screen x/y (y grows downward)."""
        pts = np.asarray(coords, dtype=float).reshape(-1, 2)
        # wrap the rotated longitude back into [-180, 180)
        lon = (pts[:, 0] + self.rotate + 180.0) % 360.0 - 180.0
        x, y = self._raw(np.radians(lon), np.radians(pts[:, 1]))
        return np.column_stack((self.tx + self.k * (x - self.cx), self.ty - self.k * (y - self.cy)))

    def clip_distance(self, x: float, y: float) -> float:
        """0 inside the clip box, otherwise the distance to it."""
        if self.clip is None:
            return 0.0
        (x0, y0), (x1, y1) = self.clip
        dx = max(x0 - x, 0.0, x - x1)
        dy = max(y0 - y, 0.0, y - y1)
        return float(np.hypot(dx, dy))


class AlbersProjection:
    """Lower-48 Albers conic with Alaska and Hawaii insets.

    A point goes through the first sub-projection whose clip box contains it
    (lower 48, then Alaska, then Hawaii). Points that no box contains, like
    Puerto Rico, use whichever sub-projection puts them nearest its box.
    """

    def __init__(self, scale=params.PROJECTION["scale"], translate=params.PROJECTION["translate"]):
        self.k = float(scale)
        self.tx, self.ty = (float(t) for t in translate)
        self.parts = [self._part(params.PROJECTION, 1.0, (0.0, 0.0))]
        for cfg in params.PROJECTION_INSETS.values():
            self.parts.append(self._part(cfg, cfg["scale"], cfg["offset"]))

    def _part(self, cfg: Dict, factor: float, offset: Tuple[float, float]) -> ConicEqualArea:
        k = self.k
        (x0, y0), (x1, y1) = cfg["clip"]
        return ConicEqualArea(
            cfg["parallels"], cfg["rotate"], cfg["center"],
            scale=k * factor,
            translate=(self.tx + offset[0] * k, self.ty + offset[1] * k),
            clip=((self.tx + x0 * k, self.ty + y0 * k), (self.tx + x1 * k, self.ty + y1 * k)),
        )

    @property
    def extent(self) -> Box:
        """Screen box holding the lower 48 and both insets."""
        return self.parts[0].clip

    def part_for(self, lon: float, lat: float) -> ConicEqualArea:
        best, best_d = None, None
        for part in self.parts:
            x, y = part.project([[lon, lat]])[0]
            d = part.clip_distance(x, y)
            if d == 0:
                return part
            if best is None or d < best_d:
                best, best_d = part, d
        return best

    def project(self, coords) -> np.ndarray:
        """(N, 2) lon/lat degrees -> (N, 2) screen x/y.

        The whole array goes through the sub-projection picked for its first
        point, so a ring is never split between insets.
        """
        pts = np.asarray(coords, dtype=float).reshape(-1, 2)
        if not len(pts):
            return pts
        return self.part_for(pts[0, 0], pts[0, 1]).project(pts)

    def __call__(self, lon: float, lat: float) -> Tuple[float, float]:
        x, y = self.project([[lon, lat]])[0]
        return float(x), float(y)


def polygons(geometry: Optional[Dict]) -> Iterator[List]:
    """Yield each polygon (list of rings) of a Polygon or MultiPolygon."""
    if not geometry:
        return
    gtype = geometry.get("type")
    coords = geometry.get("coordinates") or []
    if gtype == "Polygon":
        yield coords
    elif gtype == "MultiPolygon":
        for poly in coords:
            yield poly
    elif gtype == "GeometryCollection":
        for g in geometry.get("geometries") or []:
            yield from polygons(g)


def ring_area_centroid(ring: np.ndarray) -> Tuple[float, float, float]:
    """Signed shoelace area and centroid of a closed or open ring."""
    x, y = ring[:, 0], ring[:, 1]
    x1, y1 = np.roll(x, -1), np.roll(y, -1)
    cross = x * y1 - x1 * y
    area = cross.sum() / 2
    if area == 0:
        return 0.0, float(x.mean()), float(y.mean())
    cx = ((x + x1) * cross).sum() / (6 * area)
    cy = ((y + y1) * cross).sum() / (6 * area)
    return float(area), float(cx), float(cy)


def centroid(feature: Dict, projection: AlbersProjection) -> Tuple[float, float]:
    """Area-weighted planar centroid of the projected feature.

    Holes subtract from their polygon. Falls back to the mean of all projected
    vertices when the geometry has no area.
    """
    total = 0.0
    sx = sy = 0.0
    vertices = []
    for poly in polygons(feature.get("geometry")):
        for i, ring in enumerate(poly):
            if len(ring) < 3:
                continue
            pts = projection.project(ring)
            vertices.append(pts)
            area, cx, cy = ring_area_centroid(pts)
            weight = abs(area) if i == 0 else -abs(area)
            total += weight
            sx += cx * weight
            sy += cy * weight
    if total != 0:
        return sx / total, sy / total
    if vertices:
        allpts = np.vstack(vertices)
        return float(allpts[:, 0].mean()), float(allpts[:, 1].mean())
    raise ValueError(f"Feature {feature.get('properties', {}).get('name')!r} has no polygon geometry")


def path_data(feature: Dict, projection: AlbersProjection, precision: int = 1) -> str:
    """SVG path 'd' for every ring of the feature, each ring closed with Z."""
    parts = []
    for poly in polygons(feature.get("geometry")):
        for ring in poly:
            if len(ring) < 3:
                continue
            pts = np.round(projection.project(ring), precision)
            cmds = [f"{utils.num_str(x)},{utils.num_str(y)}" for x, y in pts]
            parts.append("M" + "L".join(cmds) + "Z")
    return "".join(parts)
