"""
Anchor label recentring.

Labels radiate outward from the centroid of the anchors so they never sit on
top of the polygon. Works in screen space (pixels) rather than NDC so that a
non-square canvas does not stretch the offsets.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

from chaosgame import config
from chaosgame.model.geometry_primitives import Point, Vector

if TYPE_CHECKING:
    import numpy.typing as npt

MARKER_LABEL_ID = "marker"


def anchor_label_id(index: int) -> str:
    return f"anchor-{index}"


@dataclass(frozen=True)
class LabelPlacement:
    """Where a label's centre goes, in canvas pixels."""
    id: str
    text: str
    x: float
    y: float


def ndc_to_screen(xy: npt.NDArray[np.float64], width: float, height: float) -> npt.NDArray[np.float64]:
    """Map (k, 2) NDC coordinates to pixels (origin top-left, y down)."""
    xy = np.atleast_2d(np.asarray(xy, dtype=float))
    sx = width * (xy[:, 0] + 1.0) / 2.0
    sy = -height * (xy[:, 1] - 1.0) / 2.0
    return np.column_stack([sx, sy])


def anchor_label_positions(
    anchors: Sequence[Point],
    n: int,
    width: float,
    height: float,
    push: float = config.LABEL_PUSH_PX,
    provisional_push: float = config.PROVISIONAL_LABEL_PUSH_PX,
) -> list[LabelPlacement]:
    """
    Compute label positions for the first `n` anchors.

    With all `n` anchors present, each label is pushed `push` pixels away from
    the anchors' centroid. While the polygon is incomplete the canvas centre
    is used instead, with the smaller `provisional_push`.
    """
    counted = list(anchors[:n])
    if not counted:
        return []

    ndc = np.array([[p.x, p.y] for p in counted], dtype=float)
    screen = ndc_to_screen(ndc, width, height)

    if len(counted) >= n:
        center = ndc_to_screen(ndc.mean(axis=0), width, height)[0]
        distance = push
    else:
        center = np.array([width / 2.0, height / 2.0])
        distance = provisional_push

    placements = []
    for i, (point, (sx, sy)) in enumerate(zip(counted, screen)):
        # Coincident with the centre: the push is zero and the label sits on the point
        offset = Vector(float(sx - center[0]), float(sy - center[1])).normalize() * distance
        placements.append(
            LabelPlacement(anchor_label_id(i), point.label, float(sx) + offset.x, float(sy) + offset.y)
        )
    return placements


def marker_label_position(
    point: Point,
    text: str,
    width: float,
    height: float,
    offset: float = config.MARKER_LABEL_OFFSET_PX,
) -> LabelPlacement:
    """The 'Start' / 'Current' label floats a fixed distance above its point."""
    sx, sy = ndc_to_screen(np.array([point.x, point.y]), width, height)[0]
    return LabelPlacement(MARKER_LABEL_ID, text, float(sx), float(sy - offset))
