from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Feedback:
    """What the user chose to send from the feedback form."""

    screenshot: Any | None = None
    logs: tuple[str, ...] | None = None
    user_enabled_log_collection: bool = False
    include_screenshot: bool = False

    @property
    def has_logs(self) -> bool:
        return bool(self.logs)
