"""
LogViewerDialog — read-only view of the lines a LogCollector would attach.
"""

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QDialog, QLabel, QPlainTextEdit, QPushButton, QHBoxLayout, QVBoxLayout, QWidget

from pinpoint.report.log_support import LogCollector, LogViewer


class LogViewerDialog(QDialog):
    def __init__(self, lines: tuple[str, ...], title: str = "Logs", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.resize(700, 500)

        layout = QVBoxLayout(self)

        if lines:
            layout.addWidget(QLabel(f"{len(lines)} line(s) will be attached to your feedback."))
        else:
            layout.addWidget(QLabel("No log data available."))

        self._text = QPlainTextEdit()
        self._text.setReadOnly(True)
        self._text.setFont(QFont("JetBrains Mono", 10))
        self._text.setPlainText("\n".join(lines))
        layout.addWidget(self._text)

        buttons = QHBoxLayout()
        buttons.addStretch()
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        buttons.addWidget(close_btn)
        layout.addLayout(buttons)

    def _get_text(self) -> str:
        return self._text.toPlainText()


class DialogLogViewer(LogViewer):
    """LogViewer that opens a LogViewerDialog, window-modal and non-blocking."""

    def __init__(self, title: str = "Logs") -> None:
        self._title = title
        self._dialog: LogViewerDialog | None = None

    @property
    def dialog(self) -> LogViewerDialog | None:
        """The most recently opened dialog, if any."""
        return self._dialog

    def view_logs(self, collector: LogCollector, parent=None) -> None:
        if self._dialog is not None:
            self._dialog.close()
            self._dialog.deleteLater()
        self._dialog = LogViewerDialog(collector.retrieve_logs(), title=self._title, parent=parent)
        self._dialog.open()
