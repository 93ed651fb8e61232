"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the Control Panel and the
Fractal Canvas.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the panel, the canvas and the menu actions to the
   GameController, and hands the controller its render/label/status sinks.
"""
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QSplitter

from chaosgame import config
from chaosgame.application import VISIBLE_APP_NAME
from chaosgame.controller.game import GameController
from chaosgame.controller.scheduler import QtTickScheduler
from chaosgame.model.state import GameConfig
from chaosgame.view.panels.control_panel import ControlPanel
from chaosgame.view.widgets.canvas import FractalCanvas


class MainWindow(QMainWindow):
    def __init__(self, n: int = config.DEFAULT_VERTICES) -> None:
        super().__init__()
        self.game_config = GameConfig()

        self.resize(1200, 800)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.panel = ControlPanel(self.game_config, n)
        splitter.addWidget(self.panel)

        # --- RIGHT SIDE: Canvas ---
        self.canvas = FractalCanvas()
        splitter.addWidget(self.canvas)

        splitter.setSizes([280, 920])
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        self.scheduler = QtTickScheduler(self)
        self.controller = GameController(
            n=n,
            config=self.game_config,
            renderer=self.canvas.points,
            labels=self.canvas.labels,
            status=self.panel,
            scheduler=self.scheduler,
            canvas_size=self.canvas.canvas_size(),
        )
        self.update_window_title()

        # --- SIGNAL CONNECTIONS ---
        # 1. Canvas input -> Controller
        self.canvas.pointer_moved.connect(self.controller.on_pointer_move)
        self.canvas.pointer_left.connect(self.controller.on_pointer_leave)
        self.canvas.pointer_clicked.connect(self.controller.on_pointer_click)
        self.canvas.resized.connect(self.controller.on_resize)

        # 2. Panel -> Controller
        self.panel.run_requested.connect(self.controller.request_run)
        self.panel.undo_requested.connect(self.controller.request_undo)
        self.panel.redo_requested.connect(self.controller.request_redo)
        self.panel.play_toggled.connect(self.controller.toggle_play)
        self.panel.speed_changed.connect(self.controller.set_speed)
        self.panel.hue_changed.connect(self.controller.set_hue)
        self.panel.reset_requested.connect(self.on_reset)
        self.panel.new_game_requested.connect(self.on_new_game)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Labels need the real canvas size once the layout has settled
        QTimer.singleShot(0, lambda: self.controller.on_resize(*self.canvas.canvas_size()))

    def _create_actions(self) -> None:
        self.act_new = QAction("New Game", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.panel.on_new_clicked)

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.on_reset)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_undo = QAction("Undo", self)
        self.act_undo.setShortcut("Ctrl+Z")
        self.act_undo.triggered.connect(self.controller.request_undo)

        self.act_redo = QAction("Redo", self)
        self.act_redo.setShortcut("Ctrl+Y")
        self.act_redo.triggered.connect(self.controller.request_redo)

        self.act_run = QAction("Run", self)
        self.act_run.setShortcut("Ctrl+Return")
        self.act_run.triggered.connect(self.controller.request_run)

        self.act_play = QAction("Play / Pause", self)
        self.act_play.setShortcut("Space")
        self.act_play.triggered.connect(self.controller.toggle_play)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        game_menu = menu_bar.addMenu("&Game")
        game_menu.addAction(self.act_new)
        game_menu.addAction(self.act_reset)
        game_menu.addSeparator()
        game_menu.addAction(self.act_exit)

        edit_menu = menu_bar.addMenu("&Edit")
        edit_menu.addAction(self.act_undo)
        edit_menu.addAction(self.act_redo)

        play_menu = menu_bar.addMenu("&Playback")
        play_menu.addAction(self.act_run)
        play_menu.addAction(self.act_play)

    # --- HELPER METHODS ---
    def update_window_title(self) -> None:
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [N = {self.controller.session.n}]")

    def on_reset(self) -> None:
        self.controller.request_reset()
        self.panel.load_from_config()

    def on_new_game(self, n: int) -> None:
        self.controller.request_new_game(n)
        self.panel.load_from_config()
        self.update_window_title()

    def closeEvent(self, event) -> None:
        self.controller.playback.stop()
        super().closeEvent(event)
