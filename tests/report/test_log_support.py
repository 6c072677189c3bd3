from pathlib import Path

import pytest

from pinpoint.report.log_support import (
    FileLogCollector,
    LogCollector,
    LogSupport,
    LogViewer,
    PathSanitizer,
)


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def temp_log(tmp_path) -> Path:
    """Creates a temp log file populated with synthetic log lines."""
    log = tmp_path / "pinpoint_debug.log"
    lines = [
        "2026-01-01 00:00:01 - pinpoint - INFO - Application started\n",
        "2026-01-01 00:00:02 - pinpoint - DEBUG - Built feedback layout\n",
        f"2026-01-01 00:00:03 - pinpoint - WARNING - Missing {Path.home()}/shot.png\n",
        "2026-01-01 00:00:04 - pinpoint - ERROR - Something failed\n",
        "2026-01-01 00:00:05 - pinpoint - INFO - Done\n",
    ]
    log.write_text("".join(lines))
    return log


class _Viewer(LogViewer):
    def view_logs(self, collector, parent=None):
        pass


# ── LogSupport ────────────────────────────────────────────────────────────────

def test_empty_log_support_has_nothing():
    support = LogSupport()
    assert support.has_log_collector is False
    assert support.has_log_viewer is False


def test_log_support_reports_available_parts(temp_log):
    support = LogSupport(log_collector=FileLogCollector(str(temp_log)), log_viewer=_Viewer())
    assert support.has_log_collector is True
    assert support.has_log_viewer is True


def test_log_collector_is_abstract():
    with pytest.raises(TypeError):
        LogCollector()


# ── FileLogCollector ──────────────────────────────────────────────────────────

def test_collector_returns_all_lines_without_newlines(temp_log):
    lines = FileLogCollector(str(temp_log)).retrieve_logs()
    assert len(lines) == 5
    assert lines[0].endswith("Application started")
    assert not any(line.endswith("\n") for line in lines)


def test_collector_keeps_only_the_tail(temp_log):
    lines = FileLogCollector(str(temp_log), max_lines=2).retrieve_logs()
    assert len(lines) == 2
    assert lines[-1].endswith("Done")


def test_collector_sanitizes_home_directory(temp_log):
    lines = FileLogCollector(str(temp_log)).retrieve_logs()
    warning = next(line for line in lines if "WARNING" in line)
    assert str(Path.home()) not in warning
    assert PathSanitizer.PLACEHOLDER in warning


def test_collector_missing_file_returns_empty():
    assert FileLogCollector("/nonexistent/path/pinpoint_debug.log").retrieve_logs() == ()


def test_collector_empty_file_returns_empty(tmp_path):
    empty = tmp_path / "empty.log"
    empty.write_text("")
    assert FileLogCollector(str(empty)).retrieve_logs() == ()


def test_collector_rejects_non_positive_line_count(temp_log):
    with pytest.raises(ValueError):
        FileLogCollector(str(temp_log), max_lines=0)


def test_sanitizer_leaves_other_paths_alone():
    assert PathSanitizer.sanitize("/opt/app/file.py") == "/opt/app/file.py"
