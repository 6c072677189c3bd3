from stubs import StubLogCollector
from pinpoint.gui.log_viewer_dialog import DialogLogViewer, LogViewerDialog


def test_dialog_shows_lines(qtbot):
    dialog = LogViewerDialog(("first", "second"), title="Logs")
    qtbot.addWidget(dialog)
    assert dialog._get_text() == "first\nsecond"
    assert dialog.windowTitle() == "Logs"


def test_dialog_handles_no_lines(qtbot):
    dialog = LogViewerDialog(())
    qtbot.addWidget(dialog)
    assert dialog._get_text() == ""


def test_viewer_opens_dialog_with_collected_lines(qtbot):
    viewer = DialogLogViewer(title="App Logs")
    collector = StubLogCollector(lines=("a", "b", "c"))
    viewer.view_logs(collector)
    dialog = viewer.dialog
    qtbot.addWidget(dialog)

    assert collector.calls == 1
    assert dialog.isVisible()
    assert dialog.windowTitle() == "App Logs"
    assert dialog._get_text() == "a\nb\nc"
    dialog.close()
