"""
CheckmarkCell — a clickable form row that toggles a check mark.
"""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton, QWidget

from pinpoint.gui.fonts import to_qfont
from pinpoint.report.form_layout import CheckmarkRowViewModel

CHECK_MARK = "✓"


class CheckmarkCell(QFrame):
    """Row with a title, a trailing check mark and an optional detail button.

    Clicking anywhere on the row flips the check state. The detail button
    is only created when the view model asks for a disclosure.

    Signals:
        toggled: Emitted with the new check state after a click.
        detail_requested: Emitted when the detail button is clicked.
    """

    toggled = pyqtSignal(bool)
    detail_requested = pyqtSignal()

    def __init__(self, view_model: CheckmarkRowViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._checked = view_model.checked
        self._detail_btn: QToolButton | None = None
        self._setup_ui()
        self._update_check_mark()

    def _setup_ui(self) -> None:
        self.setObjectName("CheckmarkCell")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setStyleSheet("""
            QFrame#CheckmarkCell {
                background-color: #1a1a2e;
                border: 1px solid #2c2c44;
                border-radius: 4px;
            }
            QFrame#CheckmarkCell:hover {
                border-color: #00ffff;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 8, 8)

        self._title_label = QLabel(self._view_model.title)
        self._title_label.setFont(to_qfont(self._view_model.font))
        layout.addWidget(self._title_label)
        layout.addStretch()

        self._check_label = QLabel(CHECK_MARK)
        self._check_label.setStyleSheet("color: #00ffff; font-weight: bold;")
        layout.addWidget(self._check_label)

        if self._view_model.show_disclosure:
            self._detail_btn = QToolButton()
            self._detail_btn.setText("ⓘ")
            self._detail_btn.setToolTip("View logs")
            self._detail_btn.setAutoRaise(True)
            self._detail_btn.clicked.connect(self.detail_requested.emit)
            layout.addWidget(self._detail_btn)

    def _update_check_mark(self) -> None:
        # Keep the label's width reserved so the title does not jump
        self._check_label.setText(CHECK_MARK if self._checked else " ")

    # ── Public API ────────────────────────────────────────────────────────────

    @property
    def view_model(self) -> CheckmarkRowViewModel:
        return self._view_model

    @property
    def is_checked(self) -> bool:
        return self._checked

    @property
    def has_detail_button(self) -> bool:
        return self._detail_btn is not None

    def set_checked(self, checked: bool) -> None:
        """Set the check state without emitting toggled."""
        self._checked = checked
        self._update_check_mark()

    def toggle(self) -> None:
        self.set_checked(not self._checked)
        self.toggled.emit(self._checked)

    # ── Qt event overrides ────────────────────────────────────────────────────

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.toggle()
        super().mouseReleaseEvent(event)

    # ── Test helper API ───────────────────────────────────────────────────────

    def _title_text(self) -> str:
        return self._title_label.text()

    def _check_mark_visible(self) -> bool:
        return self._check_label.text() == CHECK_MARK

    def _trigger_detail(self) -> None:
        if self._detail_btn is not None:
            self._detail_btn.click()
