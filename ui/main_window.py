import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger
from PySide6 import QtWidgets

import config
from core.errors import DataFileError
from services.csv_service import load_into
from services.file_manager import load_saved_paths, remember_data_folder, resolve_data_folder
from services.member_service import MemberRegistry
from ui.dashboards.member_dashboard import MemberDashboard


class MemberApp(QtWidgets.QApplication):
    """
    The Application class for the desktop form.
    1. Sets up the data folder (first-time setup asks for one).
    2. Loads the default data file into the shared registry.
    3. Shows the member dashboard.
    """
    def __init__(self, args: List[str], registry: Optional[MemberRegistry] = None,
                 data_dir: Optional[Path] = None):
        super().__init__(args)
        self.registry = registry if registry is not None else MemberRegistry()
        self.data_dir = data_dir
        self.main_window: Optional[MemberDashboard] = None

    def start(self) -> None:
        """Initializes the environment and shows the first screen."""
        # 1. Setup File System
        if self.data_dir:
            resolve_data_folder(self.data_dir)
        elif not load_saved_paths():
            self.first_time_setup()

        # 2. Load default records
        loaded = self.load_default_file()

        # 3. Show Dashboard
        self.main_window = MemberDashboard(self.registry, config.DATA_FILE)
        self.main_window.default_unreadable = not loaded
        self.main_window.exit_signal.connect(self.quit)
        self.main_window.show()

    def first_time_setup(self) -> None:
        """Asks the user where member data should be stored and remembers the choice."""
        msg = QtWidgets.QMessageBox()
        msg.setWindowTitle(f"{config.APP_NAME} - First Time Setup")
        msg.setText("Welcome.\nPlease select a folder where member records will be stored.")
        msg.setIcon(QtWidgets.QMessageBox.Information)
        msg.exec()

        selected_dir = QtWidgets.QFileDialog.getExistingDirectory(
            None, "Select Data Storage Folder", str(Path.home())
        )

        if not selected_dir:
            QtWidgets.QMessageBox.critical(None, "Error", "Data storage path is required to continue.")
            sys.exit(0)

        remember_data_folder(Path(selected_dir))

    def load_default_file(self) -> bool:
        """Returns False only when the data file exists but could not be read."""
        if not config.DATA_FILE.exists():
            logger.info(f"No data file at {config.DATA_FILE} yet, starting with an empty roster")
            return True

        try:
            result = load_into(self.registry, config.DATA_FILE)
        except DataFileError as e:
            QtWidgets.QMessageBox.critical(None, "Load Error", str(e))
            return False

        if result.errors:
            QtWidgets.QMessageBox.warning(
                None, "Some Rows Skipped",
                f"Loaded {result.loaded} members. {len(result.errors)} malformed row(s) were skipped:\n"
                + "\n".join(str(e) for e in result.errors[:10])
            )
        return True
