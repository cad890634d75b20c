import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

import config
from core.errors import InvalidInputError
from core.utils import check_fee


class MemberKind(Enum):
    REGULAR = "Regular"
    PREMIUM = "Premium"

    @classmethod
    def parse(cls, value: Union[str, "MemberKind"]) -> "MemberKind":
        """Case-insensitive lookup by label ('Regular') or name ('REGULAR')."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for kind in cls:
            if text == kind.value.lower():
                return kind
        raise InvalidInputError(f"Invalid member type '{value}'. Use 'Regular' or 'Premium'.")


class MembershipStatus(Enum):
    ACTIVE = "ACTIVE"
    FROZEN = "FROZEN"

    @classmethod
    def parse(cls, value: Union[str, "MembershipStatus"]) -> "MembershipStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidInputError(f"Invalid status '{value}'. Use 'ACTIVE' or 'FROZEN'.")


@dataclass(frozen=True)
class PerformanceRecord:
    """
    One month's outcome for a member.
    """
    month: int
    year: int
    goal_achieved: bool

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise InvalidInputError(f"Month must be between 1 and 12, got {self.month}.")
        if not config.MIN_YEAR <= self.year <= config.MAX_YEAR:
            raise InvalidInputError(
                f"Year must be between {config.MIN_YEAR} and {config.MAX_YEAR}, got {self.year}."
            )

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year} - {'Achieved' if self.goal_achieved else 'Not achieved'}"


@dataclass
class Member:
    """
    Represents a single gym member.
    The kind tag decides how the monthly fee is computed; trainer_fee only
    applies to Premium members.
    """
    id: str
    name: str
    join_date: datetime.date
    kind: MemberKind = MemberKind.REGULAR
    trainer_fee: float = 0.0
    status: MembershipStatus = MembershipStatus.ACTIVE
    performance_history: List[PerformanceRecord] = field(default_factory=list)

    def __post_init__(self):
        self.id = (self.id or "").strip()
        self.name = (self.name or "").strip()
        if not self.id:
            raise InvalidInputError("Member ID cannot be empty.")
        if not self.name:
            raise InvalidInputError("Full name cannot be empty.")

        self.kind = MemberKind.parse(self.kind)
        self.status = MembershipStatus.parse(self.status)
        self.trainer_fee = check_fee(self.trainer_fee or 0.0)

    @property
    def key(self) -> str:
        """Index key: IDs compare case-insensitively."""
        return self.id.casefold()

    @property
    def is_premium(self) -> bool:
        return self.kind is MemberKind.PREMIUM

    @property
    def latest_performance(self) -> Optional[PerformanceRecord]:
        return self.performance_history[-1] if self.performance_history else None

    def add_performance(self, record: PerformanceRecord) -> None:
        # History is append-only; duplicate month/year entries are allowed
        self.performance_history.append(record)

    def rename(self, new_name: str) -> None:
        new_name = (new_name or "").strip()
        if not new_name:
            raise InvalidInputError("Full name cannot be empty.")
        self.name = new_name
