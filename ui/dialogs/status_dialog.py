from typing import Optional

from PySide6 import QtWidgets
from models.member import Member, MembershipStatus


class StatusDialog(QtWidgets.QDialog):
    """Lets the user freeze or re-activate the selected member."""

    def __init__(self, member: Member, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle(f"Update Status for {member.name}")
        self.setModal(True)
        self.setFixedSize(360, 180)

        self.member = member
        self.selected_status: Optional[MembershipStatus] = None

        layout = QtWidgets.QVBoxLayout(self)

        lbl_curr = QtWidgets.QLabel(f"Current Status: {member.status.value}")
        lbl_curr.setStyleSheet("color: #aaa; font-weight: bold;")
        layout.addWidget(lbl_curr)

        self.inp_status = QtWidgets.QComboBox()
        self.inp_status.addItems([s.value for s in MembershipStatus])
        self.inp_status.setCurrentText(member.status.value)
        layout.addWidget(self.inp_status)

        btn_layout = QtWidgets.QHBoxLayout()
        btn_ok = QtWidgets.QPushButton("✅ Confirm Update")
        btn_ok.setFixedHeight(36)
        btn_ok.setStyleSheet("background: #006600; font-weight: bold;")
        btn_ok.clicked.connect(self.save_and_close)

        btn_cancel = QtWidgets.QPushButton("Cancel")
        btn_cancel.setFixedHeight(36)
        btn_cancel.clicked.connect(self.reject)

        btn_layout.addWidget(btn_ok)
        btn_layout.addWidget(btn_cancel)
        layout.addLayout(btn_layout)

        self.setStyleSheet("""
            QDialog { background: #1a1a1a; color: white; font-family: 'Segoe UI'; }
            QLabel { color: white; }
            QComboBox { background: #222; color: white; border: 1px solid #555; padding: 5px; }
            QPushButton { background: #333; color: white; border: 1px solid #555; border-radius: 4px; }
        """)

    def save_and_close(self) -> None:
        self.selected_status = MembershipStatus.parse(self.inp_status.currentText())
        self.accept()
