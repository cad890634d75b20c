from pathlib import Path

# Global Config
APP_NAME = "Member Management System"

# Data locations (re-pointed by services.file_manager.init_paths)
DATA_FOLDER = Path.cwd()
DATA_FILE = DATA_FOLDER / "gym_records.csv"
LOG_FOLDER = DATA_FOLDER / "logs"

# Remembers the data folder chosen on first GUI run
CONFIG_FILE = Path.home() / ".gym_records_config"

DEFAULT_EXPORT_NAME = "members_backup.csv"
DEFAULT_REPORT_NAME = "member_roster.pdf"

# Fees
REGULAR_BASE_FEE = 50.0
PREMIUM_BASE_FEE = 80.0
FROZEN_FEE = 10.0
PREMIUM_GOAL_DISCOUNT = 0.10  # 10% off when last month's goal was achieved

# Performance records
MIN_YEAR = 1900
MAX_YEAR = 2100
