import datetime
from typing import Optional

from PySide6 import QtWidgets
import config
from core.errors import InvalidInputError
from core.utils import month_name
from models.member import Member, PerformanceRecord


class PerformanceDialog(QtWidgets.QDialog):
    """
    Dialog for logging one month's goal outcome for a member.
    Month and year default to the current month.
    """
    def __init__(self, member: Member, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle(f"Add Performance for {member.name}")
        self.setFixedSize(400, 300)

        self.member = member
        self.record: Optional[PerformanceRecord] = None

        self.init_ui()
        self.apply_style()

    def init_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setSpacing(15)

        # --- Header Info ---
        info_box = QtWidgets.QGroupBox("History")
        ib_layout = QtWidgets.QVBoxLayout(info_box)
        latest = self.member.latest_performance
        text = f"Latest: {latest}" if latest else "No performance records yet"
        lbl_curr = QtWidgets.QLabel(f"{text} ({len(self.member.performance_history)} total)")
        lbl_curr.setStyleSheet("color: #aaa; font-weight: bold;")
        ib_layout.addWidget(lbl_curr)
        layout.addWidget(info_box)

        # --- Record Form ---
        form_box = QtWidgets.QGroupBox("Record")
        form = QtWidgets.QFormLayout(form_box)
        today = datetime.date.today()

        self.inp_month = QtWidgets.QComboBox()
        self.inp_month.addItems([f"{m} - {month_name(m)}" for m in range(1, 13)])
        self.inp_month.setCurrentIndex(today.month - 1)

        self.inp_year = QtWidgets.QSpinBox()
        self.inp_year.setRange(config.MIN_YEAR, config.MAX_YEAR)
        self.inp_year.setValue(today.year)

        self.inp_achieved = QtWidgets.QCheckBox("Goal achieved")
        self.inp_achieved.setChecked(True)

        form.addRow("Month:", self.inp_month)
        form.addRow("Year:", self.inp_year)
        form.addRow("", self.inp_achieved)
        layout.addWidget(form_box)

        # --- Buttons ---
        btn_layout = QtWidgets.QHBoxLayout()
        btn_save = QtWidgets.QPushButton("✅ Add Record")
        btn_save.setFixedHeight(40)
        btn_save.setStyleSheet("background: #006600; font-weight: bold;")
        btn_save.clicked.connect(self.save_and_close)

        btn_cancel = QtWidgets.QPushButton("Cancel")
        btn_cancel.setFixedHeight(40)
        btn_cancel.clicked.connect(self.reject)

        btn_layout.addWidget(btn_save)
        btn_layout.addWidget(btn_cancel)
        layout.addLayout(btn_layout)

    def save_and_close(self) -> None:
        try:
            self.record = PerformanceRecord(
                month=self.inp_month.currentIndex() + 1,
                year=self.inp_year.value(),
                goal_achieved=self.inp_achieved.isChecked(),
            )
        except InvalidInputError as e:
            QtWidgets.QMessageBox.critical(self, "Input Error", str(e))
            return
        self.accept()

    def apply_style(self) -> None:
        self.setStyleSheet("""
            QDialog { background: #1a1a1a; color: white; font-family: 'Segoe UI'; }
            QGroupBox { border: 1px solid #444; margin-top: 10px; padding-top: 15px; font-weight: bold; }
            QGroupBox::title { subcontrol-origin: margin; left: 10px; padding: 0 5px; }
            QLabel, QCheckBox { color: white; }
            QComboBox, QSpinBox { background: #222; color: white; border: 1px solid #555; padding: 5px; }
            QPushButton { background: #333; color: white; border: 1px solid #555; border-radius: 4px; }
            QPushButton:hover { background: #444; }
        """)
