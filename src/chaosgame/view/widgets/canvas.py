"""
Fractal Canvas
==============
pyqtgraph view locked to normalized device coordinates ([-1, 1] on both axes).

Why is this file needed?
------------------------
1. Rendering: PointLayer implements the render sink. Every point is a disc in the hue
   colour; bordered points are drawn larger with a black outline.
2. Input: Translates Qt mouse/resize events into NDC pointer signals for the
   controller.
3. Labels: Hosts the LabelLayer that implements the label sink.
"""
from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtWidgets import QWidget

from chaosgame import config

if TYPE_CHECKING:
    from chaosgame.model.geometry_primitives import Color, Point

VIEW_RANGE = (-1.0, 1.0)


class LabelLayer:
    """
    Text labels keyed by id, positioned in canvas pixels.
    Creation order is kept so the most recent label can be removed.
    """
    def __init__(self, plot_item: pg.PlotItem) -> None:
        self.plot_item = plot_item
        self._labels: dict[str, pg.TextItem] = {}

    def _pixels_to_view(self, x: float, y: float) -> tuple[float, float]:
        vb = self.plot_item.getViewBox()
        width = max(float(vb.width()), 1.0)
        height = max(float(vb.height()), 1.0)
        return 2.0 * x / width - 1.0, 1.0 - 2.0 * y / height

    def place_label(self, label_id: str, text: str, x: float, y: float) -> None:
        item = self._labels.get(label_id)
        if item is None:
            item = pg.TextItem(text, color="k", anchor=(0.5, 0.5))
            self.plot_item.addItem(item, ignoreBounds=True)
            self._labels[label_id] = item
        elif item.toPlainText() != text:
            item.setText(text)
        item.setPos(*self._pixels_to_view(x, y))

    def remove_last_label(self) -> None:
        if not self._labels:
            return
        label_id = next(reversed(self._labels))
        self.plot_item.removeItem(self._labels.pop(label_id))

    def clear_labels(self) -> None:
        for item in self._labels.values():
            self.plot_item.removeItem(item)
        self._labels.clear()

    def __len__(self) -> int:
        return len(self._labels)


class PointLayer:
    """Scatter of all game points; implements the render sink."""
    def __init__(self, plot_item: pg.PlotItem) -> None:
        self.scatter = pg.ScatterPlotItem(pxMode=True)
        plot_item.addItem(self.scatter)
        self._border_pen = pg.mkPen("k", width=1.5)
        self._no_pen = pg.mkPen(None)

    def render(self, points: Sequence[Point], color: Color) -> None:
        if not points:
            self.scatter.clear()
            return
        xs = np.fromiter((p.x for p in points), dtype=float, count=len(points))
        ys = np.fromiter((p.y for p in points), dtype=float, count=len(points))
        bordered = np.fromiter((p.bordered for p in points), dtype=bool, count=len(points))

        sizes = np.where(bordered, config.POINT_SIZE + config.BORDER_EXTRA, config.POINT_SIZE)
        pens = [self._border_pen if b else self._no_pen for b in bordered]

        self.scatter.setData(x=xs, y=ys, size=sizes, pen=pens, brush=pg.mkBrush(*color.as_tuple()))


class FractalCanvas(pg.PlotWidget):
    pointer_moved = Signal(float, float)
    pointer_left = Signal()
    pointer_clicked = Signal(float, float)
    resized = Signal(float, float)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent=parent, background="w")
        self.setMouseTracking(True)

        item = self.getPlotItem()
        item.hideAxis("left")
        item.hideAxis("bottom")
        item.hideButtons()
        item.setMenuEnabled(False)
        item.setMouseEnabled(x=False, y=False)
        item.setContentsMargins(0, 0, 0, 0)

        self.view_box = item.getViewBox()
        self.view_box.disableAutoRange()
        self.view_box.setRange(xRange=VIEW_RANGE, yRange=VIEW_RANGE, padding=0)
        self.view_box.sigResized.connect(self._on_view_resized)

        self.points = PointLayer(item)
        self.labels = LabelLayer(item)

        self.scene().sigMouseMoved.connect(self._on_mouse_moved)
        self.scene().sigMouseClicked.connect(self._on_mouse_clicked)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def canvas_size(self) -> tuple[float, float]:
        return float(self.view_box.width()), float(self.view_box.height())

    def _to_view(self, scene_pos: QPointF) -> Optional[tuple[float, float]]:
        if not self.view_box.sceneBoundingRect().contains(scene_pos):
            return None
        view_pos = self.view_box.mapSceneToView(scene_pos)
        return float(view_pos.x()), float(view_pos.y())

    def _on_mouse_moved(self, scene_pos: QPointF) -> None:
        pos = self._to_view(scene_pos)
        if pos is None:
            self.pointer_left.emit()
        else:
            self.pointer_moved.emit(*pos)

    def _on_mouse_clicked(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = self._to_view(event.scenePos())
        if pos is not None:
            self.pointer_clicked.emit(*pos)

    def leaveEvent(self, event) -> None:
        super().leaveEvent(event)
        self.pointer_left.emit()

    def _on_view_resized(self) -> None:
        self.view_box.setRange(xRange=VIEW_RANGE, yRange=VIEW_RANGE, padding=0)
        self.resized.emit(*self.canvas_size())
