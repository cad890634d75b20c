"""
Tests for data folder configuration
"""

import config
from services.file_manager import (
    init_paths,
    load_saved_paths,
    remember_data_folder,
    resolve_data_folder,
)


class TestPaths:

    def test_init_paths_points_everything_at_folder(self, tmp_path):
        base = tmp_path / "gym"
        init_paths(base)
        assert base.is_dir()
        assert config.DATA_FOLDER == base
        assert config.DATA_FILE == base / "gym_records.csv"
        assert config.LOG_FOLDER == base / "logs"

    def test_no_saved_config(self):
        assert load_saved_paths() is False

    def test_remember_then_restore(self, tmp_path):
        base = tmp_path / "store"
        remember_data_folder(base)
        assert config.CONFIG_FILE.read_text(encoding="utf-8") == str(base)

        config.DATA_FILE = tmp_path / "elsewhere.csv"
        assert load_saved_paths() is True
        assert config.DATA_FILE == base / "gym_records.csv"

    def test_stale_saved_folder_is_ignored(self, tmp_path):
        config.CONFIG_FILE.write_text(str(tmp_path / "gone"), encoding="utf-8")
        assert load_saved_paths() is False

    def test_resolve_prefers_explicit_folder(self, tmp_path):
        remember_data_folder(tmp_path / "saved")
        assert resolve_data_folder(tmp_path / "explicit") == tmp_path / "explicit"

    def test_resolve_falls_back_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_data_folder().resolve() == tmp_path.resolve()
