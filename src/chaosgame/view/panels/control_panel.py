"""
Control Panel
=============
Left-side panel with the game controls and the status line.

Why is this file needed?
------------------------
1. Input: Buttons, sliders and the vertex spin box emit plain Qt signals; the
   MainWindow routes them to the GameController.
2. Status: It implements the status sink (control enablement, the phase
   message, the point count and the play/pause icon).
3. Sync: `load_from_config` pulls the sliders back to the GameConfig after a
   reset without echoing change signals.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFormLayout, QGroupBox, QHBoxLayout, QLabel, QPushButton, QSlider, QSpinBox, QStyle, QVBoxLayout, QWidget
)

from chaosgame import config
from chaosgame.model.state import ActionState, GameConfig, speed_from_slider

logger = logging.getLogger(__name__)


class ControlPanel(QWidget):
    """Left-side panel with the game controls. Implements the status sink."""
    run_requested = Signal()
    undo_requested = Signal()
    redo_requested = Signal()
    reset_requested = Signal()
    play_toggled = Signal()
    new_game_requested = Signal(int)
    speed_changed = Signal(int)  # interval in ms
    hue_changed = Signal(float)  # degrees

    def __init__(self, game_config: GameConfig, n: int = config.DEFAULT_VERTICES, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.game_config = game_config

        layout = QVBoxLayout(self)

        # --- Status ---
        grp_status = QGroupBox("Game")
        l_status = QVBoxLayout(grp_status)

        self.lbl_message = QLabel()
        self.lbl_message.setWordWrap(True)
        self.lbl_message.setStyleSheet("QLabel { padding: 5px; background-color: rgba(0,0,0,10); border-radius: 3px; }")
        l_status.addWidget(self.lbl_message)

        self.lbl_points = QLabel("Points: 0")
        self.lbl_points.setAlignment(Qt.AlignCenter)
        l_status.addWidget(self.lbl_points)

        layout.addWidget(grp_status)

        # --- History & Run ---
        grp_actions = QGroupBox("Controls")
        l_actions = QVBoxLayout(grp_actions)

        hbox_history = QHBoxLayout()
        self.btn_undo = QPushButton("Undo")
        self.btn_undo.clicked.connect(self.undo_requested)
        hbox_history.addWidget(self.btn_undo)

        self.btn_redo = QPushButton("Redo")
        self.btn_redo.clicked.connect(self.redo_requested)
        hbox_history.addWidget(self.btn_redo)
        l_actions.addLayout(hbox_history)

        self.btn_run = QPushButton("Run")
        self.btn_run.setMinimumHeight(40)
        self.btn_run.clicked.connect(self.run_requested)
        l_actions.addWidget(self.btn_run)

        hbox_play = QHBoxLayout()
        self.btn_play = QPushButton()
        self.btn_play.clicked.connect(self.play_toggled)
        hbox_play.addWidget(self.btn_play)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.clicked.connect(self.reset_requested)
        hbox_play.addWidget(self.btn_reset)
        l_actions.addLayout(hbox_play)

        layout.addWidget(grp_actions)

        # --- Playback settings ---
        grp_settings = QGroupBox("Settings")
        form_settings = QFormLayout(grp_settings)

        self.slider_speed = QSlider(Qt.Horizontal)
        self.slider_speed.setRange(0, config.SPEED_SLIDER_MAX)
        self.slider_speed.valueChanged.connect(self.on_speed_slider_changed)
        form_settings.addRow("Speed:", self.slider_speed)

        self.slider_hue = QSlider(Qt.Horizontal)
        self.slider_hue.setRange(0, config.HUE_MAX - 1)
        self.slider_hue.valueChanged.connect(self.on_hue_slider_changed)
        form_settings.addRow("Colour:", self.slider_hue)

        hbox_new = QHBoxLayout()
        self.spin_vertices = QSpinBox()
        self.spin_vertices.setRange(config.MIN_VERTICES, config.MAX_VERTICES)
        self.spin_vertices.setValue(n)
        self.spin_vertices.setToolTip("Number of anchor points")
        hbox_new.addWidget(self.spin_vertices)

        self.btn_new = QPushButton("New")
        self.btn_new.clicked.connect(self.on_new_clicked)
        hbox_new.addWidget(self.btn_new)
        form_settings.addRow("Vertices:", hbox_new)

        layout.addWidget(grp_settings)
        layout.addStretch()

        self.load_from_config()

    def load_from_config(self) -> None:
        """Syncs the sliders from the GameConfig (after a reset)."""
        self.slider_speed.blockSignals(True)
        self.slider_hue.blockSignals(True)

        self.slider_speed.setValue(config.SPEED_SLIDER_MAX - self.game_config.speed_ms)
        self.slider_hue.setValue(int(self.game_config.hue))

        self.slider_speed.blockSignals(False)
        self.slider_hue.blockSignals(False)

        self.show_playing(self.game_config.playing)

    def on_speed_slider_changed(self, value: int) -> None:
        self.speed_changed.emit(speed_from_slider(value, self.slider_speed.maximum()))

    def on_hue_slider_changed(self, value: int) -> None:
        self.hue_changed.emit(float(value))

    def on_new_clicked(self) -> None:
        n = self.spin_vertices.value()
        logger.info(f"New game requested with {n} vertices.")
        self.new_game_requested.emit(n)

    # ------------------------------------------------------------------
    # Status sink
    # ------------------------------------------------------------------

    def update_actions(self, actions: ActionState) -> None:
        self.btn_run.setEnabled(actions.run)
        self.btn_undo.setEnabled(actions.undo)
        self.btn_redo.setEnabled(actions.redo)
        self.btn_play.setEnabled(actions.play_pause)

    def show_message(self, message: str) -> None:
        self.lbl_message.setText(message)

    def show_point_count(self, count: int) -> None:
        self.lbl_points.setText(f"Points: {count}")

    def show_playing(self, playing: bool) -> None:
        icon = QStyle.SP_MediaPause if playing else QStyle.SP_MediaPlay
        self.btn_play.setIcon(self.style().standardIcon(icon))
        self.btn_play.setToolTip("Pause" if playing else "Play")
