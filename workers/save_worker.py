from pathlib import Path

from PySide6 import QtCore
from services.csv_service import write_text


class WorkerSignals(QtCore.QObject):
    """
    Signals emitted by SaveWorker once the roster file is written.

    Attributes:
        finished (str, int): Emitted with the file path and member count when successful.
        error (str): Emitted with the DataFileError text if the write fails.
    """
    finished = QtCore.Signal(str, int)
    error = QtCore.Signal(str)


class SaveWorker(QtCore.QRunnable):
    """
    Background worker that writes an already-encoded roster to disk.
    The text is built on the UI thread, so the worker never touches the registry.
    """
    def __init__(self, path: Path, text: str, count: int):
        super().__init__()
        self.path = Path(path)
        self.text = text
        self.count = count
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            write_text(self.path, self.text)
            self.signals.finished.emit(str(self.path), self.count)
        except Exception as e:
            self.signals.error.emit(str(e))
