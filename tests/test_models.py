"""
Unit tests for the member data model
"""

import dataclasses
import datetime

import pytest

from core.errors import InvalidInputError
from models.member import Member, MemberKind, MembershipStatus, PerformanceRecord


class TestPerformanceRecord:
    """Month/year bounds and immutability"""

    def test_valid_record(self):
        p = PerformanceRecord(12, 2024, True)
        assert (p.month, p.year, p.goal_achieved) == (12, 2024, True)

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, month):
        with pytest.raises(InvalidInputError):
            PerformanceRecord(month, 2024, False)

    @pytest.mark.parametrize("year", [1899, 2101])
    def test_year_out_of_range(self, year):
        with pytest.raises(InvalidInputError):
            PerformanceRecord(1, year, False)

    def test_record_is_immutable(self):
        p = PerformanceRecord(1, 2024, False)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.goal_achieved = True


class TestMember:
    """Member validation and mutations"""

    def test_defaults(self, regular_member):
        assert regular_member.kind is MemberKind.REGULAR
        assert regular_member.status is MembershipStatus.ACTIVE
        assert regular_member.performance_history == []
        assert regular_member.latest_performance is None

    def test_id_and_name_are_stripped(self):
        m = Member(id="  m9 ", name=" Dana ", join_date=datetime.date(2024, 1, 1))
        assert m.id == "m9"
        assert m.name == "Dana"
        assert m.key == "m9"

    @pytest.mark.parametrize("member_id,name", [("", "Name"), ("   ", "Name"), ("M1", ""), ("M1", "  ")])
    def test_empty_id_or_name_rejected(self, member_id, name):
        with pytest.raises(InvalidInputError):
            Member(id=member_id, name=name, join_date=datetime.date(2024, 1, 1))

    def test_kind_and_status_accept_strings(self):
        m = Member(id="X", name="Y", join_date=datetime.date(2024, 1, 1), kind="premium", status="frozen")
        assert m.kind is MemberKind.PREMIUM
        assert m.status is MembershipStatus.FROZEN

    def test_unknown_kind_rejected(self):
        with pytest.raises(InvalidInputError):
            Member(id="X", name="Y", join_date=datetime.date(2024, 1, 1), kind="Gold")

    def test_negative_trainer_fee_rejected(self):
        with pytest.raises(InvalidInputError):
            Member(id="X", name="Y", join_date=datetime.date(2024, 1, 1), kind="Premium", trainer_fee=-1)

    @pytest.mark.parametrize("fee", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_trainer_fee_rejected(self, fee):
        with pytest.raises(InvalidInputError):
            Member(id="X", name="Y", join_date=datetime.date(2024, 1, 1), kind="Premium", trainer_fee=fee)

    def test_history_is_append_only_and_allows_repeats(self, regular_member):
        regular_member.add_performance(PerformanceRecord(1, 2024, True))
        regular_member.add_performance(PerformanceRecord(1, 2024, False))
        assert len(regular_member.performance_history) == 2
        assert regular_member.latest_performance == PerformanceRecord(1, 2024, False)

    def test_rename(self, regular_member):
        regular_member.rename("  Alice Smith ")
        assert regular_member.name == "Alice Smith"
        with pytest.raises(InvalidInputError):
            regular_member.rename("")
        assert regular_member.name == "Alice Smith"

    def test_key_is_case_insensitive(self):
        m = Member(id="AbC", name="Y", join_date=datetime.date(2024, 1, 1))
        assert m.key == "abc"


class TestEnums:
    """Case-insensitive parsing of kinds and statuses"""

    def test_member_kind_parse(self):
        assert MemberKind.parse("REGULAR") is MemberKind.REGULAR
        assert MemberKind.parse(" Premium ") is MemberKind.PREMIUM
        assert MemberKind.parse(MemberKind.PREMIUM) is MemberKind.PREMIUM

    def test_status_parse(self):
        assert MembershipStatus.parse("active") is MembershipStatus.ACTIVE
        with pytest.raises(InvalidInputError):
            MembershipStatus.parse("PAUSED")
