import config
from models.member import Member, MemberKind, MembershipStatus


def monthly_fee(member: Member) -> float:
    """
    Calculates the monthly fee for a member.

    - Frozen members (any kind) pay the flat frozen fee.
    - Regular members pay the flat base fee.
    - Premium members pay the premium base plus their trainer fee, with a
      discount when their most recent performance record shows the goal
      was achieved.

    Returns:
        float: The fee rounded to 2 decimal places.
    """
    if member.status is MembershipStatus.FROZEN:
        return config.FROZEN_FEE

    if member.kind is MemberKind.REGULAR:
        return config.REGULAR_BASE_FEE

    total = config.PREMIUM_BASE_FEE + member.trainer_fee
    latest = member.latest_performance
    if latest is not None and latest.goal_achieved:
        total *= 1 - config.PREMIUM_GOAL_DISCOUNT
    return round(total, 2)
