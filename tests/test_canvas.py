"""Tests for the pyqtgraph canvas, the control panel and the main window (pytest-qt, offscreen)."""

import numpy as np
import pytest
from PySide6.QtCore import Qt

from chaosgame import config
from chaosgame.application import VISIBLE_APP_NAME
from chaosgame.controller.game import GameController
from chaosgame.model.geometry_primitives import Color, Point
from chaosgame.model.normalizer import ndc_to_screen
from chaosgame.model.state import ActionState, GameConfig
from chaosgame.view.main_window import MainWindow
from chaosgame.view.panels.control_panel import ControlPanel
from chaosgame.view.widgets.canvas import FractalCanvas

from conftest import ManualScheduler, RecordingStatus, ScriptedRng, TRIANGLE


@pytest.fixture
def canvas(qtbot):
    widget = FractalCanvas()
    qtbot.addWidget(widget)
    widget.resize(400, 400)
    with qtbot.waitExposed(widget):
        widget.show()
    qtbot.waitUntil(lambda: min(widget.canvas_size()) > 1.0, timeout=2000)
    return widget


def _label_ids(canvas):
    return list(canvas.labels._labels)


def _label_texts(canvas):
    return [item.toPlainText() for item in canvas.labels._labels.values()]


# ----------------------------------------------------------------------
# Label layer
# ----------------------------------------------------------------------

@pytest.mark.parametrize("ndc", [(0.0, 0.0), (-1.0, 1.0), (1.0, -1.0), (0.25, -0.5)])
def test_label_pixels_map_back_to_view(canvas, ndc):
    width, height = canvas.canvas_size()
    sx, sy = ndc_to_screen(np.array(ndc), width, height)[0]

    canvas.labels.place_label("anchor-0", "A", sx, sy)

    pos = canvas.labels._labels["anchor-0"].pos()
    assert pos.x() == pytest.approx(ndc[0], abs=1e-6)
    assert pos.y() == pytest.approx(ndc[1], abs=1e-6)


def test_place_label_updates_existing_item(canvas):
    canvas.labels.place_label("marker", "Start", 10.0, 10.0)
    canvas.labels.place_label("marker", "Current", 20.0, 20.0)
    assert _label_ids(canvas) == ["marker"]
    assert _label_texts(canvas) == ["Current"]


def test_remove_last_label_drops_most_recent(canvas):
    for i, text in enumerate("ABC"):
        canvas.labels.place_label(f"anchor-{i}", text, 10.0 * i, 10.0)
    # Moving an older label must not change which one is the most recent
    canvas.labels.place_label("anchor-0", "A", 50.0, 50.0)

    canvas.labels.remove_last_label()
    assert _label_ids(canvas) == ["anchor-0", "anchor-1"]

    canvas.labels.clear_labels()
    assert len(canvas.labels) == 0
    canvas.labels.remove_last_label()
    assert len(canvas.labels) == 0


def test_removed_labels_leave_the_plot(canvas):
    plot_item = canvas.getPlotItem()
    before = len(plot_item.items)
    canvas.labels.place_label("anchor-0", "A", 0.0, 0.0)
    canvas.labels.place_label("anchor-1", "B", 0.0, 0.0)
    assert len(plot_item.items) == before + 2

    canvas.labels.remove_last_label()
    assert len(plot_item.items) == before + 1
    canvas.labels.clear_labels()
    assert len(plot_item.items) == before


def test_undo_redo_label_order_through_controller(canvas):
    controller = GameController(
        n=3,
        config=GameConfig(speed_ms=10, total_points=5),
        renderer=canvas.points,
        labels=canvas.labels,
        status=RecordingStatus(),
        scheduler=ManualScheduler(),
        rng=ScriptedRng([0, 1, 2]),
        canvas_size=canvas.canvas_size(),
    )
    for x, y in TRIANGLE:
        controller.on_pointer_click(x, y)
    controller.on_pointer_click(0.0, 0.0)
    assert _label_ids(canvas) == ["anchor-0", "anchor-1", "anchor-2", "marker"]
    assert _label_texts(canvas) == ["A", "B", "C", "Start"]

    controller.request_undo()
    assert _label_ids(canvas) == ["anchor-0", "anchor-1", "anchor-2"]

    controller.request_redo()
    assert _label_ids(canvas) == ["anchor-0", "anchor-1", "anchor-2", "marker"]


# ----------------------------------------------------------------------
# Point layer
# ----------------------------------------------------------------------

def test_bordered_points_are_larger_with_outline(canvas):
    canvas.points.render([Point(0.0, 0.0, bordered=True), Point(0.5, 0.5)], Color.from_hue(0))

    data = canvas.points.scatter.data
    assert list(data["size"]) == [config.POINT_SIZE + config.BORDER_EXTRA, config.POINT_SIZE]
    assert data["pen"][0].widthF() == pytest.approx(1.5)
    assert data["pen"][1].style() == Qt.PenStyle.NoPen
    assert list(data["x"]) == [0.0, 0.5]


def test_render_uses_hue_colour(canvas):
    canvas.points.render([Point(0.0, 0.0)], Color.from_hue(120))
    brush = canvas.points.scatter.opts["brush"]
    assert brush.color().getRgb()[:3] == (0, 255, 0)


def test_render_empty_clears_scatter(canvas):
    canvas.points.render([Point(0.0, 0.0)], Color.from_hue(0))
    canvas.points.render([], Color.from_hue(0))
    assert len(canvas.points.scatter.data) == 0


# ----------------------------------------------------------------------
# Control panel and window
# ----------------------------------------------------------------------

def test_control_panel_reflects_status(qtbot):
    panel = ControlPanel(GameConfig())
    qtbot.addWidget(panel)

    panel.update_actions(ActionState(run=True, undo=True))
    panel.show_point_count(4)
    panel.show_message("Press the 'Run' button to start the game!")

    assert panel.btn_run.isEnabled() and panel.btn_undo.isEnabled()
    assert not panel.btn_redo.isEnabled() and not panel.btn_play.isEnabled()
    assert panel.lbl_points.text() == "Points: 4"
    assert panel.lbl_message.text().startswith("Press the 'Run'")


def test_speed_slider_emits_interval(qtbot):
    panel = ControlPanel(GameConfig())
    qtbot.addWidget(panel)
    with qtbot.waitSignal(panel.speed_changed) as blocker:
        panel.slider_speed.setValue(config.SPEED_SLIDER_MAX - 250)
    assert blocker.args == [250]


def test_window_title_shows_vertex_count(qtbot):
    window = MainWindow(n=5)
    qtbot.addWidget(window)
    assert window.windowTitle() == f"{VISIBLE_APP_NAME} - [N = 5]"

    window.on_new_game(4)
    assert window.windowTitle() == f"{VISIBLE_APP_NAME} - [N = 4]"
