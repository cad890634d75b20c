"""
Tests for monthly fee computation
"""

import pytest

import config
from models.member import MembershipStatus, PerformanceRecord
from services.fee_service import monthly_fee


class TestRegularFee:

    def test_flat_base_fee(self, regular_member):
        assert monthly_fee(regular_member) == 50.0

    def test_history_does_not_change_regular_fee(self, regular_member):
        regular_member.add_performance(PerformanceRecord(5, 2024, True))
        assert monthly_fee(regular_member) == 50.0

    def test_frozen_fee_regardless_of_history(self, frozen_member):
        assert frozen_member.latest_performance.goal_achieved
        assert monthly_fee(frozen_member) == 10.0


class TestPremiumFee:

    def test_base_plus_trainer_fee(self, premium_member):
        assert monthly_fee(premium_member) == 100.0

    def test_discount_when_latest_goal_achieved(self, premium_member):
        premium_member.add_performance(PerformanceRecord(3, 2024, True))
        assert monthly_fee(premium_member) == pytest.approx(90.0)

    def test_only_latest_record_counts(self, premium_member):
        premium_member.add_performance(PerformanceRecord(3, 2024, True))
        premium_member.add_performance(PerformanceRecord(4, 2024, False))
        assert monthly_fee(premium_member) == 100.0

    def test_frozen_premium_pays_flat_fee(self, premium_member):
        premium_member.add_performance(PerformanceRecord(3, 2024, True))
        premium_member.status = MembershipStatus.FROZEN
        assert monthly_fee(premium_member) == 10.0

    def test_uses_configured_rates(self, premium_member, monkeypatch):
        monkeypatch.setattr(config, "PREMIUM_BASE_FEE", 100.0)
        monkeypatch.setattr(config, "PREMIUM_GOAL_DISCOUNT", 0.5)
        premium_member.add_performance(PerformanceRecord(1, 2024, True))
        assert monthly_fee(premium_member) == pytest.approx(60.0)
