from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPixmap

from pinpoint.gui.checkmark_cell import CheckmarkCell
from pinpoint.gui.screenshot_cell import ScreenshotCell
from pinpoint.report.form_layout import CheckmarkRowViewModel, ScreenshotRowViewModel
from pinpoint.report.interface_customization import FontSpec


def _pixmap(width=640, height=480):
    pixmap = QPixmap(width, height)
    pixmap.fill(QColor("#336699"))
    return pixmap


def make_checkmark_cell(qtbot, checked=True, show_disclosure=False):
    cell = CheckmarkCell(CheckmarkRowViewModel(
        title="Collect Logs",
        font=FontSpec(point_size=15.0, bold=True),
        checked=checked,
        show_disclosure=show_disclosure,
    ))
    qtbot.addWidget(cell)
    return cell


# ── CheckmarkCell ─────────────────────────────────────────────────────────────

def test_checkmark_cell_shows_title_and_font(qtbot):
    cell = make_checkmark_cell(qtbot)
    assert cell._title_text() == "Collect Logs"
    assert cell._title_label.font().bold()
    assert cell._title_label.font().pointSizeF() == 15.0


def test_checkmark_cell_reflects_initial_state(qtbot):
    assert make_checkmark_cell(qtbot, checked=True)._check_mark_visible()
    assert not make_checkmark_cell(qtbot, checked=False)._check_mark_visible()


def test_click_toggles_and_emits(qtbot):
    cell = make_checkmark_cell(qtbot, checked=True)
    with qtbot.waitSignal(cell.toggled, timeout=1000) as blocker:
        qtbot.mouseClick(cell, Qt.MouseButton.LeftButton)
    assert blocker.args == [False]
    assert cell.is_checked is False
    assert not cell._check_mark_visible()


def test_set_checked_does_not_emit(qtbot):
    cell = make_checkmark_cell(qtbot, checked=False)
    emitted = []
    cell.toggled.connect(emitted.append)
    cell.set_checked(True)
    assert cell.is_checked
    assert emitted == []


def test_detail_button_only_with_disclosure(qtbot):
    assert not make_checkmark_cell(qtbot, show_disclosure=False).has_detail_button
    cell = make_checkmark_cell(qtbot, show_disclosure=True)
    assert cell.has_detail_button
    with qtbot.waitSignal(cell.detail_requested, timeout=1000):
        cell._trigger_detail()


# ── ScreenshotCell ────────────────────────────────────────────────────────────

def test_screenshot_cell_tap_calls_view_model(qtbot):
    taps = []
    cell = ScreenshotCell(ScreenshotRowViewModel(
        screenshot=_pixmap(),
        hint_text="Click to enlarge",
        hint_font=FontSpec(point_size=10.0),
        on_tap=lambda: taps.append(True),
    ))
    qtbot.addWidget(cell)

    cell._trigger_tap()

    assert taps == [True]
    assert cell._hint_text() == "Click to enlarge"


def test_screenshot_cell_thumbnail_is_bounded(qtbot):
    cell = ScreenshotCell(ScreenshotRowViewModel(
        screenshot=_pixmap(1920, 1080),
        hint_text=None,
        hint_font=FontSpec(),
        on_tap=lambda: None,
    ))
    qtbot.addWidget(cell)
    size = cell._screenshot_btn.iconSize()
    assert size.width() <= 320
    assert size.height() <= 240
    assert cell._hint_text() is None


def test_screenshot_cell_without_image_shows_placeholder(qtbot):
    cell = ScreenshotCell(ScreenshotRowViewModel(
        screenshot=object(),
        hint_text="hint",
        hint_font=FontSpec(),
        on_tap=lambda: None,
    ))
    qtbot.addWidget(cell)
    assert cell._screenshot_btn.text() == "(no screenshot)"
