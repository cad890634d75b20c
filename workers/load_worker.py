from pathlib import Path

from PySide6 import QtCore
from services.csv_service import load_members


class WorkerSignals(QtCore.QObject):
    """
    Defines signals for the LoadWorker.

    Attributes:
        finished (object): Emitted with the LoadResult.
        error (str): Emitted if the file cannot be read.
    """
    finished = QtCore.Signal(object)
    error = QtCore.Signal(str)


class LoadWorker(QtCore.QRunnable):
    """
    Background worker that decodes a data file into a fresh LoadResult.
    The UI thread applies the result to the registry.
    """
    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            self.signals.finished.emit(load_members(self.path))
        except Exception as e:
            self.signals.error.emit(str(e))
