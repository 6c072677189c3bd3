"""
Screenshot capture and full-size preview.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication, QImage, QPixmap
from PyQt6.QtWidgets import QDialog, QLabel, QScrollArea, QVBoxLayout, QWidget

from pinpoint.logging import get_logger

logger = get_logger(__name__)


def capture_screenshot(widget: QWidget | None = None) -> QPixmap:
    """Grab a widget, or the whole primary screen when no widget is given.

    Returns a null QPixmap if there is no screen to grab.
    """
    if widget is not None:
        return widget.grab()

    screen = QGuiApplication.primaryScreen()
    if screen is None:
        logger.warning("No primary screen available for screenshot")
        return QPixmap()
    return screen.grabWindow(0)


def as_pixmap(image) -> QPixmap:
    """Accept a QPixmap, QImage or file path and return a QPixmap."""
    if isinstance(image, QPixmap):
        return image
    if isinstance(image, QImage):
        return QPixmap.fromImage(image)
    if isinstance(image, str):
        pixmap = QPixmap(image)
        if pixmap.isNull():
            logger.warning(f"Could not load screenshot from {image}")
        return pixmap
    return QPixmap()


class ScreenshotPreviewDialog(QDialog):
    """Shows a screenshot at full size in a scrollable window."""

    def __init__(self, screenshot, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Screenshot")
        self.resize(900, 650)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._image_label = QLabel()
        self._image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._image_label.setPixmap(as_pixmap(screenshot))

        scroll = QScrollArea()
        scroll.setWidget(self._image_label)
        scroll.setWidgetResizable(True)
        layout.addWidget(scroll)
