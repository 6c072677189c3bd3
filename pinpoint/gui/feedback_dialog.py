"""
FeedbackDialog — presents the feedback form and assembles a Feedback on send.
"""

import dataclasses
from typing import Any, Callable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QDialog, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from pinpoint.core.settings import FeedbackPreferences, save_feedback_preferences
from pinpoint.gui.feedback_form import FeedbackFormView
from pinpoint.logging import get_logger
from pinpoint.report.feedback import Feedback
from pinpoint.report.form_layout import FeedbackConfiguration, FeedbackFormLayout
from pinpoint.report.interface_customization import InterfaceCustomization
from pinpoint.report.log_support import LogSupport

logger = get_logger(__name__)


class FeedbackDialog(QDialog):
    """Feedback dialog.

    Owns the configuration snapshot of the current presentation. Every
    toggle produces a new snapshot and a freshly built FeedbackFormLayout;
    layouts themselves are never mutated. The dialog registers itself as
    the layout delegate to hear about screenshot taps.

    Signals:
        screenshot_tapped: (screenshot) the user clicked the screenshot
        feedback_submitted: (Feedback) the user pressed Send
    """

    screenshot_tapped = pyqtSignal(object)
    feedback_submitted = pyqtSignal(object)

    def __init__(
        self,
        screenshot: Any,
        log_support: LogSupport | None = None,
        customization: InterfaceCustomization | None = None,
        preferences: FeedbackPreferences | None = None,
        preferences_saver: Callable[[FeedbackPreferences], None] | None = save_feedback_preferences,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        preferences = preferences if preferences is not None else FeedbackPreferences()
        self._config = FeedbackConfiguration(
            interface_customization=customization if customization is not None else InterfaceCustomization.default(),
            screenshot=screenshot,
            log_support=log_support if log_support is not None else LogSupport(),
            user_enabled_log_collection=preferences.user_enabled_log_collection,
            include_screenshot=preferences.include_screenshot,
        )
        self._preferences_saver = preferences_saver
        self._form_layout: FeedbackFormLayout | None = None

        self._setup_ui()
        self._rebuild_layout()

    # ── UI setup ──────────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        text = self._config.interface_customization.interface_text
        self.setWindowTitle(text.title)
        self.resize(420, 560)
        self.setWindowFlag(Qt.WindowType.Window)

        layout = QVBoxLayout(self)

        self._form_view = FeedbackFormView()
        self._form_view.collect_logs_toggled.connect(self._on_collect_logs_toggled)
        self._form_view.include_screenshot_toggled.connect(self._on_include_screenshot_toggled)
        self._form_view.log_details_requested.connect(self._on_log_details_requested)
        layout.addWidget(self._form_view)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self._cancel_btn = QPushButton(text.cancel_button_title)
        self._cancel_btn.clicked.connect(self.reject)
        self._send_btn = QPushButton(text.send_button_title)
        self._send_btn.setDefault(True)
        self._send_btn.clicked.connect(self._trigger_send)
        buttons.addWidget(self._cancel_btn)
        buttons.addWidget(self._send_btn)
        layout.addLayout(buttons)

    def _rebuild_layout(self) -> None:
        self._form_layout = FeedbackFormLayout.build(self._config, delegate=self)
        self._form_view.set_form_layout(self._form_layout)

    # ── Public API ────────────────────────────────────────────────────────────

    @property
    def configuration(self) -> FeedbackConfiguration:
        return self._config

    @property
    def form_layout(self) -> FeedbackFormLayout | None:
        return self._form_layout

    @property
    def form_view(self) -> FeedbackFormView:
        return self._form_view

    def collect_feedback(self) -> Feedback:
        """Assemble what would be sent with the current choices."""
        config = self._config
        logs = None
        collector = config.log_support.log_collector
        if collector is not None and config.user_enabled_log_collection:
            logs = collector.retrieve_logs()

        return Feedback(
            screenshot=config.screenshot if config.include_screenshot else None,
            logs=logs,
            user_enabled_log_collection=config.user_enabled_log_collection,
            include_screenshot=config.include_screenshot,
        )

    # ── FeedbackFormLayout delegate ───────────────────────────────────────────

    def on_screenshot_tapped(self, layout: FeedbackFormLayout, screenshot: Any) -> None:
        if layout is not self._form_layout:
            logger.debug("Ignoring screenshot tap from a stale layout")
            return
        self.screenshot_tapped.emit(screenshot)

    # ── UI callbacks ─────────────────────────────────────────────────────────

    def _on_collect_logs_toggled(self, checked: bool) -> None:
        self._config = dataclasses.replace(self._config, user_enabled_log_collection=checked)
        self._rebuild_layout()

    def _on_include_screenshot_toggled(self, checked: bool) -> None:
        self._config = dataclasses.replace(self._config, include_screenshot=checked)
        self._rebuild_layout()

    def _on_log_details_requested(self) -> None:
        log_support = self._config.log_support
        if log_support.log_collector is None or log_support.log_viewer is None:
            return
        log_support.log_viewer.view_logs(log_support.log_collector, parent=self)

    def _trigger_send(self) -> None:
        feedback = self.collect_feedback()
        if self._preferences_saver is not None:
            self._preferences_saver(FeedbackPreferences(
                user_enabled_log_collection=self._config.user_enabled_log_collection,
                include_screenshot=self._config.include_screenshot,
            ))
        logger.info(
            f"Feedback submitted: screenshot={feedback.screenshot is not None}, "
            f"log_lines={len(feedback.logs) if feedback.logs else 0}"
        )
        self.feedback_submitted.emit(feedback)
        self.accept()

    # ── Test helper API ───────────────────────────────────────────────────────

    def _trigger_cancel(self) -> None:
        self._cancel_btn.click()
