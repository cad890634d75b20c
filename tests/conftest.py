"""
Pytest configuration and shared fixtures for the member records tests
"""

import datetime
import sys
from pathlib import Path

import pytest
from loguru import logger

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import config  # noqa: E402
from models.member import Member, MemberKind, MembershipStatus, PerformanceRecord  # noqa: E402
from services.member_service import MemberRegistry  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Points every configured path at a temp folder so tests never touch the real home."""
    monkeypatch.setattr(config, "CONFIG_FILE", tmp_path / ".gym_records_config")
    monkeypatch.setattr(config, "DATA_FOLDER", tmp_path)
    monkeypatch.setattr(config, "DATA_FILE", tmp_path / "gym_records.csv")
    monkeypatch.setattr(config, "LOG_FOLDER", tmp_path / "logs")
    return tmp_path


@pytest.fixture
def regular_member():
    return Member(id="M001", name="Alice Walker", join_date=datetime.date(2024, 1, 10))


@pytest.fixture
def premium_member():
    return Member(
        id="P001",
        name="Bob Stone",
        join_date=datetime.date(2023, 6, 1),
        kind=MemberKind.PREMIUM,
        trainer_fee=20.0,
    )


@pytest.fixture
def frozen_member():
    return Member(
        id="M002",
        name="carol king",
        join_date=datetime.date(2022, 3, 15),
        status=MembershipStatus.FROZEN,
        performance_history=[PerformanceRecord(2, 2024, True)],
    )


@pytest.fixture
def registry(regular_member, premium_member, frozen_member):
    return MemberRegistry([regular_member, premium_member, frozen_member])


@pytest.fixture
def data_file(tmp_path):
    """Writes the given lines to a data file and returns its path."""
    def _write(*lines, name="gym_records.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def log_messages():
    """Collects loguru messages emitted during a test"""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
