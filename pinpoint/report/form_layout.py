"""
FeedbackFormLayout — derives the sections and rows of the feedback form
from a configuration snapshot and builds row view models on demand.

No PyQt6 import at module level (keeps this importable without a display).
The screenshot is an opaque handle here; the GUI passes a QPixmap.
"""

import weakref
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Union

from pinpoint.logging import get_logger
from pinpoint.report.interface_customization import FontSpec, InterfaceCustomization
from pinpoint.report.log_support import LogSupport

logger = get_logger(__name__)

INCLUDE_SCREENSHOT_TITLE = "Include Screenshot"


# ── Configuration snapshot ────────────────────────────────────────────────────

@dataclass(frozen=True)
class FeedbackConfiguration:
    """Read-only inputs a layout is derived from."""

    interface_customization: InterfaceCustomization
    screenshot: Any
    log_support: LogSupport = field(default_factory=LogSupport)
    user_enabled_log_collection: bool = True
    include_screenshot: bool = True


# ── Rows and sections ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ScreenshotRow:
    screenshot: Any
    hint_text: str | None
    hint_font: FontSpec


@dataclass(frozen=True)
class CollectLogsRow:
    enabled: bool
    title: str
    font: FontSpec
    can_view: bool


@dataclass(frozen=True)
class IncludeScreenshotRow:
    enabled: bool
    title: str
    font: FontSpec


Row = Union[ScreenshotRow, CollectLogsRow, IncludeScreenshotRow]


@dataclass(frozen=True)
class Section:
    rows: tuple[Row, ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)


# ── View models ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CheckmarkRowViewModel:
    title: str
    font: FontSpec
    checked: bool
    show_disclosure: bool = False


@dataclass(frozen=True)
class ScreenshotRowViewModel:
    screenshot: Any
    hint_text: str | None
    hint_font: FontSpec
    on_tap: Callable[[], None] = field(compare=False, repr=False)


RowViewModel = Union[CheckmarkRowViewModel, ScreenshotRowViewModel]


class FeedbackFormLayoutDelegate(Protocol):
    """Observer informed when the screenshot row is tapped."""

    def on_screenshot_tapped(self, layout: "FeedbackFormLayout", screenshot: Any) -> None:
        ...


# ── Layout ────────────────────────────────────────────────────────────────────

class FeedbackFormLayout:
    """Immutable sections of one feedback form presentation.

    Lifecycle:
        layout = FeedbackFormLayout.build(config, delegate=dialog)
        for s in range(layout.section_count()):
            for r in range(layout.row_count(s)):
                vm = layout.view_model_at(s, r)
        # ... user clicks the screenshot: vm.on_tap() -> dialog.on_screenshot_tapped(layout, image)

    The delegate is held weakly. Once it has been garbage collected, taps
    are dropped without error.
    """

    def __init__(self, sections: tuple[Section, ...], delegate: FeedbackFormLayoutDelegate | None = None) -> None:
        self._sections: tuple[Section, ...] = tuple(sections)
        self._delegate_ref: weakref.ReferenceType | None = None
        self.delegate = delegate

    @classmethod
    def build(
        cls,
        config: FeedbackConfiguration,
        delegate: FeedbackFormLayoutDelegate | None = None,
    ) -> "FeedbackFormLayout":
        """Derive the layout from a configuration snapshot.

        Section order is always [collect logs?, include screenshot, screenshot?].
        """
        sections = cls.sections_from_configuration(config)
        logger.debug(
            f"Built feedback layout with {len(sections)} section(s): "
            f"{[type(s.rows[0]).__name__ for s in sections]}"
        )
        return cls(sections, delegate=delegate)

    @staticmethod
    def sections_from_configuration(config: FeedbackConfiguration) -> tuple[Section, ...]:
        text = config.interface_customization.interface_text
        appearance = config.interface_customization.appearance
        sections: list[Section] = []

        if config.log_support.has_log_collector:
            sections.append(Section(rows=(
                CollectLogsRow(
                    enabled=config.user_enabled_log_collection,
                    title=text.log_collection_permission_title,
                    font=appearance.log_collection_permission_font,
                    can_view=config.log_support.has_log_viewer,
                ),
            )))

        sections.append(Section(rows=(
            IncludeScreenshotRow(
                enabled=config.include_screenshot,
                title=INCLUDE_SCREENSHOT_TITLE,
                font=appearance.log_collection_permission_font,
            ),
        )))

        if config.include_screenshot:
            sections.append(Section(rows=(
                ScreenshotRow(
                    screenshot=config.screenshot,
                    hint_text=text.feedback_edit_hint,
                    hint_font=appearance.feedback_edit_hint_font,
                ),
            )))

        return tuple(sections)

    # ── Delegate ──────────────────────────────────────────────────────────────

    @property
    def delegate(self) -> FeedbackFormLayoutDelegate | None:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    @delegate.setter
    def delegate(self, delegate: FeedbackFormLayoutDelegate | None) -> None:
        self._delegate_ref = weakref.ref(delegate) if delegate is not None else None

    # ── Queries ───────────────────────────────────────────────────────────────

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    def section_count(self) -> int:
        return len(self._sections)

    def row_count(self, section_index: int) -> int:
        return self._section(section_index).row_count

    def total_row_count(self) -> int:
        return sum(section.row_count for section in self._sections)

    def row_at(self, section_index: int, row_index: int) -> Row:
        rows = self._section(section_index).rows
        if not 0 <= row_index < len(rows):
            raise IndexError(
                f"Row index {row_index} out of range for section {section_index} "
                f"({len(rows)} row(s))"
            )
        return rows[row_index]

    def _section(self, section_index: int) -> Section:
        if not 0 <= section_index < len(self._sections):
            raise IndexError(
                f"Section index {section_index} out of range ({len(self._sections)} section(s))"
            )
        return self._sections[section_index]

    # ── View models ───────────────────────────────────────────────────────────

    def view_model_at(self, section_index: int, row_index: int) -> RowViewModel:
        """Build the view model the host should render at the given position."""
        row = self.row_at(section_index, row_index)
        if isinstance(row, ScreenshotRow):
            return self.screenshot_view_model(row)
        if isinstance(row, (CollectLogsRow, IncludeScreenshotRow)):
            return self.checkmark_view_model(row)
        raise AssertionError(f"Found unknown row type {type(row).__name__}.")

    def checkmark_view_model(self, row: Row) -> CheckmarkRowViewModel:
        if isinstance(row, CollectLogsRow):
            return CheckmarkRowViewModel(
                title=row.title,
                font=row.font,
                checked=row.enabled,
                show_disclosure=row.can_view,
            )
        if isinstance(row, IncludeScreenshotRow):
            return CheckmarkRowViewModel(
                title=row.title,
                font=row.font,
                checked=row.enabled,
            )
        raise AssertionError("Found unexpected row type when creating checkmark cell.")

    def screenshot_view_model(self, row: Row) -> ScreenshotRowViewModel:
        if not isinstance(row, ScreenshotRow):
            raise AssertionError("Found unexpected row type when creating screenshot cell.")

        layout_ref = weakref.ref(self)
        screenshot = row.screenshot

        def on_tap() -> None:
            layout = layout_ref()
            if layout is None:
                logger.debug("Screenshot tap dropped: layout released")
                return
            layout._notify_screenshot_tapped(screenshot)

        return ScreenshotRowViewModel(
            screenshot=screenshot,
            hint_text=row.hint_text,
            hint_font=row.hint_font,
            on_tap=on_tap,
        )

    def _notify_screenshot_tapped(self, screenshot: Any) -> None:
        delegate = self.delegate
        if delegate is None:
            logger.debug("Screenshot tap dropped: no delegate")
            return
        delegate.on_screenshot_tapped(self, screenshot)
