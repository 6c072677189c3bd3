"""Text and font customization for the feedback form.

Fonts are described with FontSpec rather than QFont so the form layout
stays importable without a display; gui.fonts converts them.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FontSpec:
    family: str | None = None
    point_size: float = 13.0
    bold: bool = False


@dataclass(frozen=True)
class InterfaceText:
    """User-visible strings of the feedback form."""

    title: str = "Send Feedback"
    send_button_title: str = "Send"
    cancel_button_title: str = "Cancel"
    log_collection_permission_title: str = "Collect Logs"
    feedback_edit_hint: str | None = "Click the screenshot to view it full size."
    log_viewer_title: str = "Logs"


@dataclass(frozen=True)
class Appearance:
    log_collection_permission_font: FontSpec = field(default_factory=FontSpec)
    feedback_edit_hint_font: FontSpec = field(
        default_factory=lambda: FontSpec(point_size=11.0)
    )


@dataclass(frozen=True)
class InterfaceCustomization:
    """Bundle of text and appearance used to build a feedback form."""

    interface_text: InterfaceText = field(default_factory=InterfaceText)
    appearance: Appearance = field(default_factory=Appearance)

    @classmethod
    def default(cls) -> "InterfaceCustomization":
        return cls()
