import datetime
from typing import Optional

from PySide6 import QtWidgets
from core.errors import GymError
from models.member import Member, MemberKind
from services.member_service import MemberRegistry


class AddMemberDialog(QtWidgets.QDialog):
    """
    Dialog for registering a new member.
    The trainer fee field is only enabled for Premium members.
    """
    def __init__(self, registry: MemberRegistry, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("➕ Add New Member")
        self.setModal(True)
        self.setFixedSize(420, 320)

        self.registry = registry
        self.member: Optional[Member] = None

        self.init_ui()
        self.apply_style()

    def init_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setSpacing(15)

        form_box = QtWidgets.QGroupBox("Member Details")
        form = QtWidgets.QFormLayout(form_box)

        self.inp_id = QtWidgets.QLineEdit()
        self.inp_id.setPlaceholderText("e.g. M011")
        self.inp_name = QtWidgets.QLineEdit()

        self.inp_kind = QtWidgets.QComboBox()
        self.inp_kind.addItems([k.value for k in MemberKind])
        self.inp_kind.currentTextChanged.connect(self.toggle_fee_input)

        self.inp_fee = QtWidgets.QDoubleSpinBox()
        self.inp_fee.setRange(0, 10000)
        self.inp_fee.setDecimals(2)
        self.inp_fee.setPrefix("$ ")
        self.inp_fee.setEnabled(False)

        form.addRow("Member ID*", self.inp_id)
        form.addRow("Full Name*", self.inp_name)
        form.addRow("Member Type", self.inp_kind)
        form.addRow("Personal Trainer Fee", self.inp_fee)
        layout.addWidget(form_box)

        btn_layout = QtWidgets.QHBoxLayout()
        btn_save = QtWidgets.QPushButton("✅ Add Member")
        btn_save.setFixedHeight(40)
        btn_save.setStyleSheet("background: #006600; font-weight: bold;")
        btn_save.clicked.connect(self.save_and_close)

        btn_cancel = QtWidgets.QPushButton("Cancel")
        btn_cancel.setFixedHeight(40)
        btn_cancel.clicked.connect(self.reject)

        btn_layout.addWidget(btn_save)
        btn_layout.addWidget(btn_cancel)
        layout.addLayout(btn_layout)

    def toggle_fee_input(self, text: str) -> None:
        """Shows the trainer fee only when 'Premium' is selected."""
        self.inp_fee.setEnabled(text == MemberKind.PREMIUM.value)

    def save_and_close(self) -> None:
        mid = self.inp_id.text().strip()
        name = self.inp_name.text().strip()

        if not mid or not name:
            QtWidgets.QMessageBox.warning(self, "Missing Data", "ID and Name cannot be empty.")
            return

        kind = MemberKind.parse(self.inp_kind.currentText())
        try:
            member = Member(
                id=mid,
                name=name,
                join_date=datetime.date.today(),
                kind=kind,
                trainer_fee=self.inp_fee.value() if kind is MemberKind.PREMIUM else 0.0,
            )
            self.registry.add(member)
        except GymError as e:
            QtWidgets.QMessageBox.critical(self, "Input Error", str(e))
            return

        self.member = member
        self.accept()

    def apply_style(self) -> None:
        self.setStyleSheet("""
            QDialog { background: #1a1a1a; color: white; font-family: 'Segoe UI'; }
            QGroupBox { border: 1px solid #444; margin-top: 10px; padding-top: 15px; font-weight: bold; }
            QGroupBox::title { subcontrol-origin: margin; left: 10px; padding: 0 5px; }
            QLabel { color: white; }
            QLineEdit, QComboBox, QDoubleSpinBox { background: #222; color: white; border: 1px solid #555; padding: 5px; }
            QDoubleSpinBox:disabled { color: #666; }
            QPushButton { background: #333; color: white; border: 1px solid #555; border-radius: 4px; }
            QPushButton:hover { background: #444; }
        """)
