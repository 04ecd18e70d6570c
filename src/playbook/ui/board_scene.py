"""BoardScene — QGraphicsScene that draws the chessboard, pieces and highlights."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from playbook.core.board import PieceSet
from playbook.core.types import BOARD_SIZE, Square, all_squares, file_letter
from playbook.game.highlights import BoardHighlights
from playbook.game.interfaces import IBoardView
from playbook.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, pieces and the four highlights.

    Signals:
        square_clicked(int, int): 1-based file and rank of a pressed square.
    """

    square_clicked = pyqtSignal(int, int)

    def __init__(self, tile_size: int = 80, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._tile = tile_size
        self._theme = BoardTheme.green()
        self._pieces: PieceSet | None = None
        self._highlights = BoardHighlights()
        self._show_coordinates = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def highlights(self) -> BoardHighlights:
        return self._highlights

    @property
    def tile_size(self) -> int:
        return self._tile

    def set_pieces(self, pieces: PieceSet) -> None:
        """Show *pieces* (full redraw of piece items)."""
        self._pieces = pieces
        self._sync_pieces()

    def refresh(self) -> None:
        """Resync piece items and highlights with the current model."""
        self._sync_pieces()
        self._draw_highlights()

    def piece_items(self) -> dict[Square, QGraphicsSimpleTextItem]:
        return dict(self._piece_items)

    def highlight_count(self) -> int:
        return len(self._highlight_items)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def square_at(self, pos: QPointF) -> Square | None:
        """Scene position → board square (rank 8 at the top)."""
        col = int(pos.x() // self._tile)
        row = int(pos.y() // self._tile)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Square(col + 1, BOARD_SIZE - row)

    # ── IBoardView ───────────────────────────────────────────────────────

    def clear_highlights(self) -> None:
        self._highlights.clear_highlights()
        self._draw_highlights()

    def set_selected_square(self, file: int, rank: int) -> None:
        self._highlights.set_selected_square(file, rank)
        self._draw_highlights()

    def set_move_square(self, file: int, rank: int) -> None:
        self._highlights.set_move_square(file, rank)
        self._draw_highlights()

    def set_check_highlight(self, file: int, rank: int) -> None:
        self._highlights.set_check_highlight(file, rank)
        self._draw_highlights()

    def set_checkmate_highlight(self, file: int, rank: int) -> None:
        self._highlights.set_checkmate_highlight(file, rank)
        self._draw_highlights()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        sq = self.square_at(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq.file, sq.rank)
        super().mousePressEvent(event)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._tile
        font = QFont("Sans Serif", max(9, t // 8))

        for sq in all_squares():
            vf, vr = self._visual_coords(sq.file, sq.rank)
            is_light = (sq.file + sq.rank) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light

            # Rank numbers (left edge)
            if sq.file == 1:
                self._add_coord(str(sq.rank), font, text_color, vf * t + 2, vr * t + 1)

            # File letters (bottom edge)
            if sq.rank == 1:
                self._add_coord(
                    file_letter(sq.file), font, text_color, vf * t + t - 12, vr * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, label: str, font: QFont, color: QColor, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _draw_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        h = self._highlights
        for sq, color in (
            (h.selected, self._theme.highlight_selected),
            (h.move, self._theme.highlight_move),
            (h.check, self._theme.highlight_check),
            (h.checkmate, self._theme.highlight_checkmate),
        ):
            if sq is not None:
                self._highlight_items.append(self._make_highlight(sq, color))

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current piece set."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._pieces is None:
            return

        t = self._tile
        font = QFont("Sans Serif")
        font.setPixelSize(int(t * 0.75))
        for piece in self._pieces:
            sq = piece.square
            if not sq.on_board:
                continue
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(QColor(20, 20, 20)))
            bounds = item.boundingRect()
            vf, vr = self._visual_coords(sq.file, sq.rank)
            item.setPos(
                vf * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Coordinate helpers ───────────────────────────────────────────────

    @staticmethod
    def _visual_coords(file: int, rank: int) -> tuple[int, int]:
        """Board file/rank → visual column/row."""
        return file - 1, BOARD_SIZE - rank

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._tile
        vf, vr = self._visual_coords(sq.file, sq.rank)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect


IBoardView.register(BoardScene)
