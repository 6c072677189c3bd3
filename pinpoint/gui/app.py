"""
Application entry point and setup.
"""

import sys
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from pinpoint.core.settings import load_feedback_preferences
from pinpoint.gui.feedback_dialog import FeedbackDialog
from pinpoint.gui.log_viewer_dialog import DialogLogViewer
from pinpoint.gui.screenshot import ScreenshotPreviewDialog, as_pixmap, capture_screenshot
from pinpoint.logging import get_logger
from pinpoint.report.feedback import Feedback
from pinpoint.report.interface_customization import InterfaceCustomization
from pinpoint.report.log_support import FileLogCollector, LogSupport

logger = get_logger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication."""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Pinpoint")
    app.setOrganizationName("Pinpoint")
    return app


def build_log_support(log_file: Optional[str], with_logs: bool, with_log_viewer: bool) -> LogSupport:
    if not with_logs:
        return LogSupport()
    customization = InterfaceCustomization.default()
    return LogSupport(
        log_collector=FileLogCollector(log_file),
        log_viewer=DialogLogViewer(customization.interface_text.log_viewer_title) if with_log_viewer else None,
    )


def _print_feedback(feedback: Feedback) -> None:
    print(f"Screenshot attached: {feedback.screenshot is not None}")
    if feedback.logs is None:
        print("Logs attached: no")
    else:
        print(f"Logs attached: {len(feedback.logs)} line(s)")


def run_app(
    screenshot_path: Optional[str] = None,
    log_file: Optional[str] = None,
    with_logs: bool = True,
    with_log_viewer: bool = True,
) -> int:
    """Present the feedback form once and return the dialog result code."""
    app = create_app()

    screenshot = as_pixmap(screenshot_path) if screenshot_path else capture_screenshot()

    dialog = FeedbackDialog(
        screenshot=screenshot,
        log_support=build_log_support(log_file, with_logs, with_log_viewer),
        preferences=load_feedback_preferences(),
    )

    previews: list[ScreenshotPreviewDialog] = []

    def show_preview(image) -> None:
        preview = ScreenshotPreviewDialog(image, parent=dialog)
        previews.append(preview)
        preview.show()

    dialog.screenshot_tapped.connect(show_preview)
    dialog.feedback_submitted.connect(_print_feedback)
    dialog.show()

    app.exec()
    return 0 if dialog.result() == FeedbackDialog.DialogCode.Accepted.value else 1
