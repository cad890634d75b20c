"""
Tests for roster text reports and the PDF export
"""

import datetime

from models.member import Member, PerformanceRecord
from services.pdf_service import create_roster_pdf
from services.report_service import (
    TABLE_COLUMNS,
    format_summary,
    member_lines,
    roster_summary,
    table_row,
)


class TestTableRow:

    def test_regular_row(self, regular_member):
        row = table_row(regular_member)
        assert len(row) == len(TABLE_COLUMNS)
        assert row == ["M001", "Alice Walker", "Regular", "2024-01-10", "ACTIVE", "50.00", "-"]

    def test_premium_row_shows_trainer_fee(self, premium_member):
        row = table_row(premium_member)
        assert row[5] == "100.00"
        assert row[6] == "PT Fee: $20.00"


class TestMemberLines:

    def test_card_without_history(self, regular_member):
        text = member_lines(regular_member)
        assert text.startswith("[Regular Member] Member ID: M001")
        assert "Monthly Fee: $50.00" in text
        assert "Performance: None" in text

    def test_card_with_history(self, premium_member):
        premium_member.add_performance(PerformanceRecord(3, 2024, True))
        text = member_lines(premium_member)
        assert "Trainer Fee: $20.00" in text
        assert "Monthly Fee: $90.00" in text
        assert "1 record(s), latest March 2024 (goal achieved)" in text


class TestRosterSummary:

    def test_counts_and_revenue(self, registry):
        summary = roster_summary(registry)
        assert summary.total == 3
        assert summary.by_kind == {"Regular": 2, "Premium": 1}
        assert summary.by_status == {"ACTIVE": 2, "FROZEN": 1}
        # 50 (regular) + 100 (premium) + 10 (frozen)
        assert summary.monthly_revenue == 160.0

    def test_empty_roster(self):
        summary = roster_summary([])
        assert summary.total == 0
        assert summary.monthly_revenue == 0.0
        assert summary.by_kind == {"Regular": 0, "Premium": 0}

    def test_format_summary(self, registry):
        text = format_summary(roster_summary(registry))
        assert "Members on file: 3" in text
        assert "Expected monthly revenue: $160.00" in text


class TestRosterPdf:

    def test_writes_pdf(self, tmp_path, registry):
        path = tmp_path / "reports" / "roster.pdf"
        assert create_roster_pdf(path, registry.list_members()) == 3
        assert path.read_bytes().startswith(b"%PDF")

    def test_many_members_span_pages(self, tmp_path):
        members = [
            Member(id=f"M{i:03d}", name=f"Member {i}", join_date=datetime.date(2024, 1, 1))
            for i in range(80)
        ]
        path = tmp_path / "big.pdf"
        assert create_roster_pdf(path, members) == 80
        assert path.stat().st_size > 0
