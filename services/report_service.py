from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from core.utils import month_name
from models.member import Member, MemberKind, MembershipStatus
from services.fee_service import monthly_fee

TABLE_COLUMNS = ["ID", "Name", "Type", "Join Date", "Status", "Monthly Fee ($)", "Details"]


@dataclass
class RosterSummary:
    total: int = 0
    by_kind: Dict[str, int] = field(default_factory=dict)
    by_status: Dict[str, int] = field(default_factory=dict)
    monthly_revenue: float = 0.0


def table_row(member: Member) -> List[str]:
    """One row of the roster table, matching TABLE_COLUMNS."""
    details = f"PT Fee: ${member.trainer_fee:.2f}" if member.is_premium else "-"
    return [
        member.id,
        member.name,
        member.kind.value,
        member.join_date.isoformat(),
        member.status.value,
        f"{monthly_fee(member):.2f}",
        details,
    ]


def member_lines(member: Member) -> str:
    """
    Multi-line text card for a member, used by the console listing.
    """
    lines = [
        f"[{member.kind.value} Member] Member ID: {member.id}",
        f"  Name: {member.name}",
        f"  Joined: {member.join_date.isoformat()}",
        f"  Status: {member.status.value}",
        f"  Monthly Fee: ${monthly_fee(member):.2f}",
    ]
    if member.is_premium:
        lines.append(f"  Trainer Fee: ${member.trainer_fee:.2f}")

    if not member.performance_history:
        lines.append("  Performance: None")
    else:
        latest = member.latest_performance
        lines.append(
            f"  Performance: {len(member.performance_history)} record(s), latest "
            f"{month_name(latest.month)} {latest.year} "
            f"({'goal achieved' if latest.goal_achieved else 'goal missed'})"
        )
    return "\n".join(lines)


def roster_summary(members: Iterable[Member]) -> RosterSummary:
    summary = RosterSummary(
        by_kind={k.value: 0 for k in MemberKind},
        by_status={s.value: 0 for s in MembershipStatus},
    )
    for m in members:
        summary.total += 1
        summary.by_kind[m.kind.value] += 1
        summary.by_status[m.status.value] += 1
        summary.monthly_revenue += monthly_fee(m)
    summary.monthly_revenue = round(summary.monthly_revenue, 2)
    return summary


def format_summary(summary: RosterSummary) -> str:
    """Renders a roster summary as plain text for the console and the summary dialog."""
    lines = [f"Members on file: {summary.total}", "-" * 32]

    for kind, count in summary.by_kind.items():
        lines.append(f"  {kind:<10} {count}")
    for status, count in summary.by_status.items():
        lines.append(f"  {status:<10} {count}")

    lines.append("-" * 32)
    lines.append(f"Expected monthly revenue: ${summary.monthly_revenue:.2f}")
    return "\n".join(lines)
