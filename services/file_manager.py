from pathlib import Path
from typing import Optional, Union

from loguru import logger

import config

DATA_FILE_NAME = "gym_records.csv"


def ensure_folder(p: Path) -> None:
    """Creates the folder if it does not exist."""
    p.mkdir(parents=True, exist_ok=True)


def init_paths(base_path: Union[str, Path]) -> None:
    """
    Initialize all global paths based on the selected base path.
    Sets up the data folder, the default data file, and the log folder.
    """
    base_path = Path(base_path).expanduser()
    ensure_folder(base_path)

    config.DATA_FOLDER = base_path
    config.DATA_FILE = base_path / DATA_FILE_NAME
    config.LOG_FOLDER = base_path / "logs"


def load_saved_paths() -> bool:
    """
    Restores the data folder stored in the config file.

    Returns:
        bool: True if a usable folder was found and applied.
    """
    config_file = config.CONFIG_FILE
    if not config_file.exists():
        return False

    try:
        content = config_file.read_text(encoding="utf-8").strip()
    except OSError as e:
        logger.warning(f"Ignoring unreadable config file {config_file}: {e}")
        return False

    if not content:
        return False

    data_path = Path(content)
    if not data_path.is_dir():
        logger.warning(f"Saved data folder {data_path} no longer exists")
        return False

    init_paths(data_path)
    return True


def remember_data_folder(data_path: Union[str, Path]) -> None:
    """Saves the selection for next time and applies it."""
    data_path = Path(data_path)
    init_paths(data_path)
    try:
        config.CONFIG_FILE.write_text(str(data_path), encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not save config file {config.CONFIG_FILE}: {e}")


def resolve_data_folder(explicit: Optional[Union[str, Path]] = None) -> Path:
    """
    Picks the data folder: an explicit path wins, then the saved one,
    then the current working directory.
    """
    if explicit:
        init_paths(explicit)
    elif not load_saved_paths():
        init_paths(Path.cwd())
    return config.DATA_FOLDER
