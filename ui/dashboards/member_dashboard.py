from pathlib import Path
from typing import Optional

from loguru import logger
from PySide6 import QtWidgets, QtCore

import config
from core.errors import DataFileError, GymError
from models.member import Member
from services.csv_service import LoadResult, encode_lines, save_members
from services.member_service import MemberRegistry
from services.report_service import TABLE_COLUMNS, format_summary, roster_summary, table_row

# Workers
from workers.load_worker import LoadWorker
from workers.save_worker import SaveWorker
from workers.report_worker import RosterPdfWorker

# Dialogs
from ui.dialogs.add_member_dialog import AddMemberDialog
from ui.dialogs.performance_dialog import PerformanceDialog
from ui.dialogs.status_dialog import StatusDialog

SORT_OPTIONS = ["Sort by ID", "Sort by Name", "Sort by Join Date"]


class MemberDashboard(QtWidgets.QMainWindow):
    """
    The main window of the desktop form.
    Shows every member in a table with filter and sort controls, and a row of
    buttons mirroring the console operations.
    """
    exit_signal = QtCore.Signal()

    def __init__(self, registry: MemberRegistry, data_file: Optional[Path] = None):
        super().__init__()
        self.setWindowTitle(f"💪 {config.APP_NAME}")
        self.resize(1100, 700)

        self.registry = registry
        self.data_file = Path(data_file) if data_file else config.DATA_FILE
        # Set when the default file exists but could not be read at start-up
        self.default_unreadable = False

        # ThreadPool for file I/O (Load, Save As, PDF)
        self.pool = QtCore.QThreadPool()
        self.pool.setMaxThreadCount(1)

        self.init_ui()
        self.apply_style()
        self.refresh_table()

    def init_ui(self) -> None:
        cw = QtWidgets.QWidget()
        self.setCentralWidget(cw)
        layout = QtWidgets.QVBoxLayout(cw)

        # --- FIND / SORT BAR ---
        search_box = QtWidgets.QGroupBox("Find / Sort Members")
        top = QtWidgets.QHBoxLayout(search_box)

        self.filter_inp = QtWidgets.QLineEdit()
        self.filter_inp.setPlaceholderText("Filter by ID or Name")
        self.filter_inp.returnPressed.connect(self.refresh_table)
        self.filter_inp.textChanged.connect(lambda _: self.refresh_table())

        b_src = QtWidgets.QPushButton("🔍 Search")
        b_src.setStyleSheet("background:#0044cc;font-weight:bold")
        b_src.clicked.connect(self.refresh_table)

        self.sort_box = QtWidgets.QComboBox()
        self.sort_box.addItems(SORT_OPTIONS)
        self.sort_box.activated.connect(self.on_sort)

        top.addWidget(QtWidgets.QLabel("Filter:"))
        top.addWidget(self.filter_inp, 1)
        top.addWidget(b_src)
        top.addWidget(QtWidgets.QLabel("  |  Sort by:"))
        top.addWidget(self.sort_box)
        layout.addWidget(search_box)

        # --- TABLE ---
        self.table = QtWidgets.QTableWidget()
        self.table.setColumnCount(len(TABLE_COLUMNS))
        self.table.setHorizontalHeaderLabels(TABLE_COLUMNS)
        self.table.horizontalHeader().setSectionResizeMode(QtWidgets.QHeaderView.Stretch)
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.table.setStyleSheet(
            "QHeaderView::section { background-color: #333; color: white; padding: 5px; } "
            "QTableWidget { gridline-color: #444; }"
        )
        layout.addWidget(self.table, 1)

        self.status_lbl = QtWidgets.QLabel("")
        self.status_lbl.setStyleSheet("color:#aaa")
        layout.addWidget(self.status_lbl)

        # --- ACTION BUTTONS ---
        actions = QtWidgets.QHBoxLayout()
        buttons = [
            ("➕ Add Member", self.on_add),
            ("🗑️ Delete Selected", self.on_delete),
            ("🔄 Update Status", self.on_update_status),
            ("📈 Add Performance", self.on_add_performance),
            ("📂 Load File", self.on_load),
            ("💾 Save to File", self.on_save_as),
            ("📄 Export PDF", self.on_export_pdf),
            ("📊 Summary", self.on_summary),
            ("🚪 Exit and Save", self.on_exit),
        ]
        for text, slot in buttons:
            b = QtWidgets.QPushButton(text)
            b.setMinimumHeight(40)
            b.setCursor(QtCore.Qt.PointingHandCursor)
            b.clicked.connect(slot)
            actions.addWidget(b)
        layout.addLayout(actions)

    # --- TABLE ---

    def refresh_table(self) -> None:
        """Clears and repopulates the table from the registry, applying the filter."""
        members = self.registry.search(self.filter_inp.text())
        self.table.setRowCount(0)

        for i, m in enumerate(members):
            self.table.insertRow(i)
            for col, value in enumerate(table_row(m)):
                self.table.setItem(i, col, QtWidgets.QTableWidgetItem(value))

        self.status_lbl.setText(f"Showing {len(members)} of {len(self.registry)} members | {self.data_file}")

    def selected_member(self) -> Optional[Member]:
        row = self.table.currentRow()
        if row < 0 or self.table.item(row, 0) is None:
            QtWidgets.QMessageBox.warning(
                self, "No Member Selected", "Please select a member from the table first."
            )
            return None
        return self.registry.find_by_id(self.table.item(row, 0).text())

    def on_sort(self, index: int) -> None:
        sorters = [self.registry.sort_by_id, self.registry.sort_by_name, self.registry.sort_by_join_date]
        sorters[index]()
        self.refresh_table()

    # --- MEMBER ACTIONS ---

    def on_add(self) -> None:
        dlg = AddMemberDialog(self.registry, self)
        if dlg.exec() == QtWidgets.QDialog.Accepted and dlg.member:
            logger.info(f"Added {dlg.member.kind.value} member {dlg.member.id}")
            self.refresh_table()
            QtWidgets.QMessageBox.information(self, "Success", "Member added successfully!")

    def on_delete(self) -> None:
        m = self.selected_member()
        if not m:
            return

        if QtWidgets.QMessageBox.question(
            self, "Confirm Deletion", f"Are you sure you want to delete {m.name}?",
            QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No
        ) == QtWidgets.QMessageBox.Yes:
            if self.registry.delete(m.id):
                logger.info(f"Deleted member {m.id}")
                self.refresh_table()
                QtWidgets.QMessageBox.information(self, "Success", "Member deleted successfully.")
            else:
                QtWidgets.QMessageBox.critical(self, "Error", f"Member {m.id} not found.")

    def on_update_status(self) -> None:
        m = self.selected_member()
        if not m:
            return

        dlg = StatusDialog(m, self)
        if dlg.exec() == QtWidgets.QDialog.Accepted and dlg.selected_status:
            try:
                self.registry.update_status(m.id, dlg.selected_status)
            except GymError as e:
                QtWidgets.QMessageBox.critical(self, "Error", str(e))
                return
            self.refresh_table()
            QtWidgets.QMessageBox.information(self, "Success", "Status updated.")

    def on_add_performance(self) -> None:
        m = self.selected_member()
        if not m:
            return

        dlg = PerformanceDialog(m, self)
        if dlg.exec() == QtWidgets.QDialog.Accepted and dlg.record:
            try:
                self.registry.add_performance(m.id, dlg.record)
            except GymError as e:
                QtWidgets.QMessageBox.critical(self, "Error", str(e))
                return
            # Fee column may change (premium discount)
            self.refresh_table()
            QtWidgets.QMessageBox.information(self, "Success", "Performance record added.")

    def on_summary(self) -> None:
        d = QtWidgets.QDialog(self)
        d.setWindowTitle("Roster Summary")
        d.resize(420, 360)
        d.setStyleSheet("background:#111;color:white")
        l = QtWidgets.QVBoxLayout(d)
        t = QtWidgets.QPlainTextEdit()
        t.setReadOnly(True)
        t.setPlainText(format_summary(roster_summary(self.registry)))
        l.addWidget(t)
        d.exec()

    # --- FILE ACTIONS ---

    def on_load(self) -> None:
        f, _ = QtWidgets.QFileDialog.getOpenFileName(
            self, "Load Member Data", str(self.data_file.parent), "CSV (*.csv);;All Files (*)"
        )
        if not f:
            return

        w = LoadWorker(Path(f))
        w.signals.finished.connect(self._loaded)
        w.signals.error.connect(self._load_failed)
        self.pool.start(w)

    def _loaded(self, result: LoadResult) -> None:
        self.registry.replace_all(result.members)
        self.refresh_table()

        msg = f"Loaded {result.loaded} members from {result.path}."
        if result.errors:
            details = "\n".join(str(e) for e in result.errors[:10])
            more = f"\n... and {len(result.errors) - 10} more" if len(result.errors) > 10 else ""
            QtWidgets.QMessageBox.warning(
                self, "Load Completed With Errors",
                f"{msg}\n\nSkipped {len(result.errors)} malformed row(s):\n{details}{more}"
            )
        else:
            QtWidgets.QMessageBox.information(self, "Load Successful", msg)

    def _load_failed(self, message: str) -> None:
        # Same as the console: a failed load leaves an empty registry
        self.registry.clear()
        self.refresh_table()
        QtWidgets.QMessageBox.critical(self, "Load Error", message)

    def on_save_as(self) -> None:
        s, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Save Member Data As",
            str(self.data_file.parent / config.DEFAULT_EXPORT_NAME), "CSV (*.csv)"
        )
        if not s:
            return

        members = self.registry.list_members()
        w = SaveWorker(Path(s), encode_lines(members), len(members))
        w.signals.finished.connect(
            lambda path, count: QtWidgets.QMessageBox.information(
                self, "Save Successful", f"Saved {count} members to {path}"
            )
        )
        w.signals.error.connect(lambda err: QtWidgets.QMessageBox.critical(self, "Save Error", err))
        self.pool.start(w)

    def on_export_pdf(self) -> None:
        s, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Export Roster", str(self.data_file.parent / config.DEFAULT_REPORT_NAME), "PDF (*.pdf)"
        )
        if not s:
            return

        w = RosterPdfWorker(Path(s), self.registry.list_members())
        w.signals.finished.connect(
            lambda path: QtWidgets.QMessageBox.information(self, "Done", f"Exported to {path}")
        )
        w.signals.error.connect(lambda err: QtWidgets.QMessageBox.critical(self, "Export Error", err))
        self.pool.start(w)

    def on_exit(self) -> None:
        """Saves to the default file inline, then closes."""
        self.pool.waitForDone()
        # Deliver signals a finished worker queued for this thread
        QtCore.QCoreApplication.processEvents()

        if self.default_unreadable and QtWidgets.QMessageBox.question(
            self, "Keep Data File?",
            f"{self.data_file} could not be read at start-up.\n\nOverwrite it with the current roster?",
            QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No
        ) != QtWidgets.QMessageBox.Yes:
            logger.warning(f"Exiting without overwriting unreadable {self.data_file}")
            self.exit_signal.emit()
            self.close()
            return

        try:
            count = save_members(self.data_file, self.registry.list_members())
        except DataFileError as e:
            if QtWidgets.QMessageBox.question(
                self, "Save Error", f"{e}\n\nExit without saving?",
                QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No
            ) != QtWidgets.QMessageBox.Yes:
                return
        else:
            QtWidgets.QMessageBox.information(
                self, "Saved", f"Your changes have been saved ({count} members) to {self.data_file}."
            )
        self.exit_signal.emit()
        self.close()

    def apply_style(self) -> None:
        self.setStyleSheet("""
            QMainWindow{background:#0c0c0c;color:white}
            QGroupBox{color:white;border:1px solid #444;margin-top:10px;padding-top:15px;font-weight:bold}
            QLabel{color:white}
            QLineEdit,QComboBox{padding:8px;background:#222;color:white;border:1px solid #444}
            QTableWidget{background:#111;color:white}
            QPushButton{background:#333;color:white;padding:8px}
            QPushButton:hover{background:#fc0;color:black}
        """)
