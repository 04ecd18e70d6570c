"""MainWindow — the board next to a running move log."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QListWidget, QMainWindow, QWidget

from playbook.core.enums import Color
from playbook.game.controller import GameController
from playbook.settings import AppSettings
from playbook.ui.board_scene import BoardScene
from playbook.ui.board_view import BoardView
from playbook.ui.theme import BoardTheme


class MainWindow(QMainWindow):
    """Wires board clicks into the controller and shows its log lines."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self.setWindowTitle("Chess Board")

        self._board_view = BoardView(self._settings.tile_size)
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(self._settings.board_theme))
        scene.set_show_coordinates(self._settings.show_coordinates)

        self._log_list = QListWidget()
        self._log_list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._log_list.setFont(QFont("Monospace", 11))
        self._log_list.setMaximumWidth(260)

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.addWidget(self._board_view, stretch=1)
        layout.addWidget(self._log_list)
        self.setCentralWidget(central)

        self._controller = GameController(scene)
        self._controller.events.on_log.append(self._append_log)
        self._controller.events.on_game_over.append(self._on_game_over)
        self._board_view.square_clicked.connect(self._on_square_clicked)

        self.new_game()

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_view.board_scene

    @property
    def log_lines(self) -> list[str]:
        return [self._log_list.item(i).text() for i in range(self._log_list.count())]

    def new_game(self) -> None:
        self._log_list.clear()
        self._controller.new_game()
        self.board_scene.set_pieces(self._controller.pieces)
        self.board_scene.refresh()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, file: int, rank: int) -> None:
        self._controller.handle_click(file, rank)
        self.board_scene.refresh()

    def _append_log(self, line: str) -> None:
        self._log_list.addItem(line)
        self._log_list.scrollToBottom()

    def _on_game_over(self, winner: Color) -> None:
        self.setWindowTitle(f"Chess Board: {winner.label} wins")
