import copy
from pathlib import Path
from typing import List

from PySide6 import QtCore
from models.member import Member
from services.pdf_service import create_roster_pdf


class WorkerSignals(QtCore.QObject):
    """
    Signals emitted by RosterPdfWorker.

    Attributes:
        finished (str): Emitted with the PDF path when the export is done.
        error (str): Emitted with an error message if the task fails.
    """
    finished = QtCore.Signal(str)
    error = QtCore.Signal(str)


class RosterPdfWorker(QtCore.QRunnable):
    """
    Background worker to render the roster PDF.
    Works on a copy of the members so the table can keep changing meanwhile.
    """
    def __init__(self, path: Path, members: List[Member]):
        super().__init__()
        self.path = Path(path)
        self.members = copy.deepcopy(members)
        self.signals = WorkerSignals()

    @QtCore.Slot()
    def run(self) -> None:
        try:
            create_roster_pdf(self.path, self.members)
            self.signals.finished.emit(str(self.path))
        except Exception as e:
            self.signals.error.emit(str(e))
