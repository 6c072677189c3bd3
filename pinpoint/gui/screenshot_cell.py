"""
ScreenshotCell — thumbnail of the screenshot with an optional hint below it.
"""

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from pinpoint.gui.fonts import to_qfont
from pinpoint.gui.screenshot import as_pixmap
from pinpoint.report.form_layout import ScreenshotRowViewModel

THUMBNAIL_MAX_SIZE = QSize(320, 240)


class ScreenshotCell(QWidget):
    """Clicking the thumbnail calls the view model's tap callback."""

    def __init__(self, view_model: ScreenshotRowViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._hint_label: QLabel | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 4, 0, 4)
        layout.setSpacing(6)

        pixmap = as_pixmap(self._view_model.screenshot)
        self._screenshot_btn = QPushButton()
        self._screenshot_btn.setFlat(True)
        self._screenshot_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        if pixmap.isNull():
            self._screenshot_btn.setText("(no screenshot)")
        else:
            thumbnail = pixmap.scaled(
                THUMBNAIL_MAX_SIZE,
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            self._screenshot_btn.setIcon(QIcon(thumbnail))
            self._screenshot_btn.setIconSize(thumbnail.size())
        self._screenshot_btn.clicked.connect(self._on_clicked)
        layout.addWidget(self._screenshot_btn, alignment=Qt.AlignmentFlag.AlignHCenter)

        if self._view_model.hint_text is not None:
            self._hint_label = QLabel(self._view_model.hint_text)
            self._hint_label.setFont(to_qfont(self._view_model.hint_font))
            self._hint_label.setStyleSheet("color: #888888;")
            self._hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._hint_label.setWordWrap(True)
            layout.addWidget(self._hint_label)

    def _on_clicked(self) -> None:
        self._view_model.on_tap()

    @property
    def view_model(self) -> ScreenshotRowViewModel:
        return self._view_model

    # ── Test helper API ───────────────────────────────────────────────────────

    def _trigger_tap(self) -> None:
        self._screenshot_btn.click()

    def _hint_text(self) -> str | None:
        return self._hint_label.text() if self._hint_label is not None else None
