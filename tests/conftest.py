"""Shared test fixtures for the Pinpoint test suite.

Provides a centralized QApplication, an isolated settings directory and
configuration factories for the feedback form.
"""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from pinpoint.core import settings
from pinpoint.report.form_layout import FeedbackConfiguration
from pinpoint.report.interface_customization import (
    Appearance,
    FontSpec,
    InterfaceCustomization,
    InterfaceText,
)
from pinpoint.report.log_support import LogSupport
from stubs import StubLogCollector, StubLogViewer


@pytest.fixture(scope="session")
def qapp():
    """Session-scoped QApplication — shared by all tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Point the settings file into tmp_path so tests never touch ~/.config."""
    settings_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "SETTINGS_DIR", settings_dir)
    monkeypatch.setattr(settings, "SETTINGS_PATH", settings_dir / "settings.json")
    yield settings_dir


@pytest.fixture
def customization():
    """Customization with distinctive strings and fonts."""
    return InterfaceCustomization(
        interface_text=InterfaceText(
            log_collection_permission_title="Attach Logs",
            feedback_edit_hint="Click to enlarge",
        ),
        appearance=Appearance(
            log_collection_permission_font=FontSpec(family="Helvetica", point_size=14.0, bold=True),
            feedback_edit_hint_font=FontSpec(point_size=10.0),
        ),
    )


@pytest.fixture
def config_factory(customization):
    """Factory fixture — build FeedbackConfiguration from the four flags."""
    def _make(
        has_log_collector=True,
        has_log_viewer=True,
        user_enabled_log_collection=True,
        include_screenshot=True,
        screenshot=None,
    ):
        log_support = LogSupport(
            log_collector=StubLogCollector() if has_log_collector else None,
            log_viewer=StubLogViewer() if has_log_viewer else None,
        )
        return FeedbackConfiguration(
            interface_customization=customization,
            screenshot=screenshot if screenshot is not None else object(),
            log_support=log_support,
            user_enabled_log_collection=user_enabled_log_collection,
            include_screenshot=include_screenshot,
        )
    return _make
