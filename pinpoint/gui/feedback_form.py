"""
FeedbackFormView — scrollable host that renders a FeedbackFormLayout.
"""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QScrollArea, QVBoxLayout, QWidget

from pinpoint.gui.checkmark_cell import CheckmarkCell
from pinpoint.gui.screenshot_cell import ScreenshotCell
from pinpoint.logging import get_logger
from pinpoint.report.form_layout import (
    CollectLogsRow,
    FeedbackFormLayout,
    IncludeScreenshotRow,
    ScreenshotRow,
)

logger = get_logger(__name__)


class FeedbackFormView(QScrollArea):
    """Asks the layout for its sections and rows and builds one cell per row.

    The view never mutates the layout. When the form changes, the owner
    builds a new layout and passes it to set_form_layout().

    Signals:
        collect_logs_toggled: (checked: bool)
        include_screenshot_toggled: (checked: bool)
        log_details_requested: detail button of the collect-logs row clicked
    """

    collect_logs_toggled = pyqtSignal(bool)
    include_screenshot_toggled = pyqtSignal(bool)
    log_details_requested = pyqtSignal()

    SECTION_SPACING = 16

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._form_layout: FeedbackFormLayout | None = None
        self._section_widgets: list[QWidget] = []
        self._cells: list[QWidget] = []

        self.setWidgetResizable(True)
        self._content = QWidget()
        self._content_layout = QVBoxLayout(self._content)
        self._content_layout.setContentsMargins(12, 12, 12, 12)
        self._content_layout.setSpacing(self.SECTION_SPACING)
        self._content_layout.addStretch()
        self.setWidget(self._content)

    @property
    def form_layout(self) -> FeedbackFormLayout | None:
        return self._form_layout

    @property
    def cells(self) -> tuple[QWidget, ...]:
        """Cells in layout order, one per row."""
        return tuple(self._cells)

    def set_form_layout(self, form_layout: FeedbackFormLayout) -> None:
        self._clear()
        self._form_layout = form_layout

        for section_index in range(form_layout.section_count()):
            section_widget = QWidget()
            section_box = QVBoxLayout(section_widget)
            section_box.setContentsMargins(0, 0, 0, 0)
            section_box.setSpacing(2)

            for row_index in range(form_layout.row_count(section_index)):
                cell = self._cell_for_row(form_layout, section_index, row_index)
                section_box.addWidget(cell)
                self._cells.append(cell)

            # Insert before the trailing stretch
            self._content_layout.insertWidget(self._content_layout.count() - 1, section_widget)
            self._section_widgets.append(section_widget)

        logger.debug(f"Rendered {len(self._cells)} cell(s) in {len(self._section_widgets)} section(s)")

    def _cell_for_row(self, form_layout: FeedbackFormLayout, section_index: int, row_index: int) -> QWidget:
        row = form_layout.row_at(section_index, row_index)

        if isinstance(row, ScreenshotRow):
            return ScreenshotCell(form_layout.screenshot_view_model(row))

        if isinstance(row, CollectLogsRow):
            cell = CheckmarkCell(form_layout.checkmark_view_model(row))
            cell.toggled.connect(self.collect_logs_toggled.emit)
            cell.detail_requested.connect(self.log_details_requested.emit)
            return cell

        if isinstance(row, IncludeScreenshotRow):
            cell = CheckmarkCell(form_layout.checkmark_view_model(row))
            cell.toggled.connect(self.include_screenshot_toggled.emit)
            return cell

        raise AssertionError(f"Found unknown row type {type(row).__name__}.")

    def _clear(self) -> None:
        for widget in self._section_widgets:
            self._content_layout.removeWidget(widget)
            widget.hide()
            widget.deleteLater()
        self._section_widgets.clear()
        self._cells.clear()
