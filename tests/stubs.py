"""In-memory log collaborators shared by the report and gui tests."""

from pinpoint.report.log_support import LogCollector, LogViewer


class StubLogCollector(LogCollector):
    def __init__(self, lines=("INFO started", "ERROR failed")):
        self.lines = tuple(lines)
        self.calls = 0

    def retrieve_logs(self):
        self.calls += 1
        return self.lines


class StubLogViewer(LogViewer):
    def __init__(self):
        self.viewed = []

    def view_logs(self, collector, parent=None):
        self.viewed.append((collector, parent))
