"""PySide6 front end that draws the list as a node chain and drives a cursor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QColor,
    QFont,
    QLinearGradient,
    QPaintEvent,
    QPainter,
    QPainterPath,
    QPen,
)
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from .workbench import ListWorkbench, WorkbenchSnapshot


@dataclass(frozen=True)
class ChainSkin:
    """Palette that describes how the node chain should be rendered."""

    name: str
    background_gradient: tuple[str, str]
    node_fill_color: str
    node_border_color: str
    node_text_color: str
    fresh_node_color: str
    arrow_color: str
    cursor_color: str
    index_text_color: str
    status_ok_color: str
    status_error_color: str
    ui_accent_color: str
    ui_accent_text_color: str


NODE_WIDTH = 96.0
NODE_HEIGHT = 48.0
NODE_GAP = 44.0
CHAIN_MARGIN = 32.0

CHAIN_SKIN_PRESETS = [
    ChainSkin(
        name="Slate",
        background_gradient=("#0f172a", "#1f2937"),
        node_fill_color="#e2e8f0",
        node_border_color="#38bdf8",
        node_text_color="#0f172a",
        fresh_node_color="#facc15",
        arrow_color="#94a3b8",
        cursor_color="#f472b6",
        index_text_color="#cbd5f5",
        status_ok_color="#4ade80",
        status_error_color="#f87171",
        ui_accent_color="#38bdf8",
        ui_accent_text_color="#0f172a",
    ),
    ChainSkin(
        name="Paper",
        background_gradient=("#fafaf9", "#e7e5e4"),
        node_fill_color="#ffffff",
        node_border_color="#44403c",
        node_text_color="#1c1917",
        fresh_node_color="#fde68a",
        arrow_color="#57534e",
        cursor_color="#dc2626",
        index_text_color="#78716c",
        status_ok_color="#15803d",
        status_error_color="#b91c1c",
        ui_accent_color="#44403c",
        ui_accent_text_color="#fafaf9",
    ),
]

CHAIN_SKINS = {skin.name: skin for skin in CHAIN_SKIN_PRESETS}
DEFAULT_CHAIN_SKIN = CHAIN_SKIN_PRESETS[0]


class ChainWidget(QWidget):
    """Widget that renders the list nodes, their links and the cursor gap."""

    def __init__(
        self,
        snapshot: WorkbenchSnapshot,
        skin: Optional[ChainSkin] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._snapshot = snapshot
        self._skin = skin or DEFAULT_CHAIN_SKIN
        self.setMinimumSize(480, 180)
        self.setAutoFillBackground(False)

    def set_snapshot(self, snapshot: WorkbenchSnapshot) -> None:
        self._snapshot = snapshot
        self._resize_to_chain()
        self.update()

    def set_skin(self, skin: ChainSkin) -> None:
        """Update the rendering palette for the chain."""
        if self._skin == skin:
            return
        self._skin = skin
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

        self._draw_background(painter)

        top = (self.height() - NODE_HEIGHT) / 2.0
        for index, element in enumerate(self._snapshot.elements):
            self._draw_node(painter, self._node_rect(index, top), index, element)
            if index + 1 < len(self._snapshot.elements):
                self._draw_arrow(painter, index, top)
        self._draw_cursor(painter, top)

    def _resize_to_chain(self) -> None:
        count = max(len(self._snapshot.elements), 1)
        width = CHAIN_MARGIN * 2 + count * NODE_WIDTH + (count - 1) * NODE_GAP
        self.setMinimumWidth(int(max(480.0, width)))

    @staticmethod
    def _node_rect(index: int, top: float) -> QRectF:
        left = CHAIN_MARGIN + index * (NODE_WIDTH + NODE_GAP)
        return QRectF(left, top, NODE_WIDTH, NODE_HEIGHT)

    def _draw_background(self, painter: QPainter) -> None:
        painter.save()
        gradient = QLinearGradient(0, 0, 0, self.height())
        top, bottom = self._skin.background_gradient
        gradient.setColorAt(0.0, QColor(top))
        gradient.setColorAt(1.0, QColor(bottom))
        painter.fillRect(self.rect(), gradient)
        painter.restore()

    def _draw_node(self, painter: QPainter, rect: QRectF, index: int, element: str) -> None:
        painter.save()
        cursor = self._snapshot.cursor
        fresh = cursor is not None and cursor.fresh_index == index
        fill = self._skin.fresh_node_color if fresh else self._skin.node_fill_color
        border_pen = QPen(QColor(self._skin.node_border_color))
        border_pen.setWidthF(2.0)
        painter.setPen(border_pen)
        painter.setBrush(QColor(fill))
        painter.drawRoundedRect(rect, 10.0, 10.0)

        font = painter.font()
        font.setFamily("Segoe UI")
        font.setPointSizeF(11.0)
        font.setWeight(QFont.Weight.DemiBold)
        painter.setFont(font)
        painter.setPen(QPen(QColor(self._skin.node_text_color)))
        text = painter.fontMetrics().elidedText(element, Qt.TextElideMode.ElideRight, int(rect.width() - 12))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, text)

        painter.setPen(QPen(QColor(self._skin.index_text_color)))
        font.setPointSizeF(8.0)
        font.setWeight(QFont.Weight.Normal)
        painter.setFont(font)
        index_rect = QRectF(rect.left(), rect.bottom() + 4.0, rect.width(), 16.0)
        painter.drawText(index_rect, Qt.AlignmentFlag.AlignCenter, str(index))
        painter.restore()

    def _draw_arrow(self, painter: QPainter, index: int, top: float) -> None:
        painter.save()
        y = top + NODE_HEIGHT / 2.0
        start_x = CHAIN_MARGIN + index * (NODE_WIDTH + NODE_GAP) + NODE_WIDTH + 4.0
        end_x = start_x + NODE_GAP - 8.0
        pen = QPen(QColor(self._skin.arrow_color))
        pen.setWidthF(2.0)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.drawLine(QPointF(start_x, y), QPointF(end_x - 6.0, y))

        head = QPainterPath()
        head.moveTo(end_x, y)
        head.lineTo(end_x - 8.0, y - 5.0)
        head.lineTo(end_x - 8.0, y + 5.0)
        head.closeSubpath()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(self._skin.arrow_color))
        painter.drawPath(head)
        painter.restore()

    def _draw_cursor(self, painter: QPainter, top: float) -> None:
        cursor = self._snapshot.cursor
        if cursor is None:
            return
        painter.save()
        # The cursor sits in the gap before the node at next_index.
        x = CHAIN_MARGIN + cursor.next_index * (NODE_WIDTH + NODE_GAP) - NODE_GAP / 2.0
        if cursor.next_index == 0:
            x = CHAIN_MARGIN / 2.0
        pen = QPen(QColor(self._skin.cursor_color))
        pen.setWidthF(3.0)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.drawLine(QPointF(x, top - 18.0), QPointF(x, top + NODE_HEIGHT + 18.0))

        marker = QPainterPath()
        marker.moveTo(x, top - 18.0)
        marker.lineTo(x - 7.0, top - 30.0)
        marker.lineTo(x + 7.0, top - 30.0)
        marker.closeSubpath()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(self._skin.cursor_color))
        painter.drawPath(marker)
        painter.restore()


class ListWorkbenchWindow(QMainWindow):
    """Main application window."""

    def __init__(
        self,
        workbench: Optional[ListWorkbench] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Singly Linked List Workbench")
        self._workbench = workbench or ListWorkbench(["apple", "banana", "carrot"])
        self._active_skin = DEFAULT_CHAIN_SKIN
        snapshot = self._workbench.snapshot()
        self._chain_widget = ChainWidget(snapshot, skin=self._active_skin)
        self._chain_widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(14)

        self._skin_label = QLabel("Skin")
        self._skin_selector = QComboBox()
        for skin in CHAIN_SKIN_PRESETS:
            self._skin_selector.addItem(skin.name)
        self._skin_selector.setCurrentText(self._active_skin.name)
        self._skin_selector.currentTextChanged.connect(self._on_skin_selected)
        self._summary_label = QLabel()

        header_layout = QHBoxLayout()
        header_layout.setSpacing(8)
        header_layout.addWidget(self._summary_label)
        header_layout.addStretch(1)
        header_layout.addWidget(self._skin_label)
        header_layout.addWidget(self._skin_selector)
        layout.addLayout(header_layout)

        layout.addWidget(self._chain_widget, stretch=1)

        self._element_input = QLineEdit()
        self._element_input.setPlaceholderText("element")
        self._position_input = QLineEdit()
        self._position_input.setPlaceholderText("position")
        self._position_input.setMaximumWidth(120)
        input_layout = QHBoxLayout()
        input_layout.setSpacing(8)
        input_layout.addWidget(self._element_input, stretch=1)
        input_layout.addWidget(self._position_input)
        layout.addLayout(input_layout)

        wb = self._workbench
        list_actions: list[tuple[str, Callable[[], WorkbenchSnapshot]]] = [
            ("Add front", lambda: wb.add_front(self._element())),
            ("Add back", lambda: wb.add_back(self._element())),
            ("Insert at", lambda: wb.insert_at(self._position(), self._element())),
            ("Get", lambda: wb.get(self._position())),
            ("Remove value", lambda: wb.remove_value(self._element())),
            ("Remove front", wb.remove_front),
            ("Remove at", lambda: wb.remove_at(self._position())),
            ("Contains", lambda: wb.contains(self._element())),
            ("Count unique", wb.count_unique),
        ]
        cursor_actions: list[tuple[str, Callable[[], WorkbenchSnapshot]]] = [
            ("New cursor", lambda: wb.reset_cursor(self._position() or 0)),
            ("next()", wb.cursor_next),
            ("previous()", wb.cursor_previous),
            ("insert()", lambda: wb.cursor_insert(self._element())),
            ("set()", lambda: wb.cursor_set(self._element())),
            ("remove()", wb.cursor_remove),
        ]
        self._list_buttons = self._build_buttons(list_actions)
        self._cursor_buttons = self._build_buttons(cursor_actions)

        buttons_layout = QGridLayout()
        buttons_layout.setSpacing(8)
        for column, button in enumerate(self._list_buttons):
            buttons_layout.addWidget(button, column // 5, column % 5)
        cursor_row = (len(self._list_buttons) + 4) // 5
        for column, button in enumerate(self._cursor_buttons):
            buttons_layout.addWidget(button, cursor_row, column)
        layout.addLayout(buttons_layout)

        self._status_label = QLabel()
        self._status_label.setWordWrap(True)
        layout.addWidget(self._status_label)

        self._history_view = QListWidget()
        self._history_view.setMaximumHeight(140)
        layout.addWidget(self._history_view)

        self.setCentralWidget(central)
        self.resize(900, 640)

        self._apply_skin_to_ui()
        self._render(snapshot)

    def _build_buttons(self, actions: list[tuple[str, Callable[[], WorkbenchSnapshot]]]) -> list[QPushButton]:
        buttons = []
        for label, action in actions:
            button = QPushButton(label)
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            button.setMinimumWidth(110)
            button.clicked.connect(lambda _checked=False, action=action: self._handle(action))
            buttons.append(button)
        return buttons

    def _element(self) -> str:
        return self._element_input.text()

    def _position(self) -> str:
        return self._position_input.text()

    def _handle(self, action: Callable[[], WorkbenchSnapshot]) -> None:
        try:
            snapshot = action()
        except ValueError as exc:
            self._show_status(False, str(exc))
            return
        self._render(snapshot)

    def _on_skin_selected(self, skin_name: str) -> None:
        skin = CHAIN_SKINS.get(skin_name)
        if skin is None or skin == self._active_skin:
            return
        self._active_skin = skin
        self._chain_widget.set_skin(skin)
        self._apply_skin_to_ui()
        self._render(self._workbench.snapshot())

    def _render(self, snapshot: WorkbenchSnapshot) -> None:
        self._chain_widget.set_snapshot(snapshot)
        cursor = snapshot.cursor
        cursor_text = "no cursor" if cursor is None else f"cursor at {cursor.next_index}"
        self._summary_label.setText(
            f"size {snapshot.size} | unique {snapshot.unique_count} | {cursor_text}"
        )
        self._history_view.clear()
        self._history_view.addItems(list(snapshot.history))
        self._history_view.scrollToBottom()
        for button in self._cursor_buttons[1:]:
            button.setEnabled(cursor is not None)
        self._show_status(snapshot.ok, snapshot.message)

    def _show_status(self, ok: bool, message: str) -> None:
        skin = self._active_skin
        color = skin.status_ok_color if ok else skin.status_error_color
        self._status_label.setStyleSheet(f"color: {color}; font-weight: 600;")
        self._status_label.setText(message)

    def _apply_skin_to_ui(self) -> None:
        skin = self._active_skin
        button_style = (
            f"QPushButton {{background-color: {skin.ui_accent_color}; color: {skin.ui_accent_text_color}; "
            f"padding: 8px 12px; border-radius: 10px; font-weight: 600;}}\n"
            "QPushButton:disabled {background-color: rgba(100, 116, 139, 120); color: rgba(226, 232, 240, 160);}"
        )
        for button in self._list_buttons + self._cursor_buttons:
            button.setStyleSheet(button_style)
        self._skin_label.setStyleSheet("font-weight: 600;")
        self._summary_label.setStyleSheet("font-weight: 600;")
