from typing import Dict, Iterable, Iterator, List, Optional, Union

from core.errors import DuplicateMemberError, InvalidInputError, MemberNotFoundError
from core.utils import check_fee
from models.member import Member, MemberKind, MembershipStatus, PerformanceRecord


class MemberRegistry:
    """
    In-memory collection of all members.

    Keeps an insertion-ordered list for display and sorting, and a dict index
    keyed by the case-folded member ID for O(1) lookups. Every mutation
    updates both.
    """

    def __init__(self, members: Optional[Iterable[Member]] = None):
        self._members: List[Member] = []
        self._index: Dict[str, Member] = {}
        if members:
            for m in members:
                self.add(m)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(list(self._members))

    def __contains__(self, member_id: str) -> bool:
        return self.find_by_id(member_id) is not None

    # --- CORE MANAGEMENT ---

    def add(self, member: Member) -> None:
        """
        Adds a member to the end of the registry.

        Raises:
            DuplicateMemberError: If a member with the same ID (any casing) exists.
        """
        if member.key in self._index:
            raise DuplicateMemberError(member.id)
        self._members.append(member)
        self._index[member.key] = member

    def find_by_id(self, member_id: str) -> Optional[Member]:
        """Case-insensitive lookup. Returns None if the ID is unknown."""
        if not member_id:
            return None
        return self._index.get(member_id.strip().casefold())

    def get(self, member_id: str) -> Member:
        """Like find_by_id, but raises MemberNotFoundError instead of returning None."""
        member = self.find_by_id(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    def delete(self, member_id: str) -> bool:
        """
        Removes a member from both the ordered list and the index.
        Returns True if a member was removed.
        """
        member = self.find_by_id(member_id)
        if member is None:
            return False
        del self._index[member.key]
        self._members.remove(member)
        return True

    def list_members(self) -> List[Member]:
        return list(self._members)

    def clear(self) -> None:
        self._members.clear()
        self._index.clear()

    def replace_all(self, members: Iterable[Member]) -> None:
        """Swaps the whole roster, e.g. after a file load."""
        self.clear()
        for m in members:
            self.add(m)

    # --- SEARCH & FILTER ---

    def find_by_name(self, name: str) -> List[Member]:
        ql = name.strip().lower()
        return [m for m in self._members if ql in m.name.lower()]

    def search(self, query: str) -> List[Member]:
        """Matches the query against ID or name (case-insensitive substring)."""
        ql = query.strip().lower()
        if not ql:
            return self.list_members()
        return [m for m in self._members if ql in m.id.lower() or ql in m.name.lower()]

    def filter_by_kind(self, kind: Union[str, MemberKind]) -> List[Member]:
        """Returns members of the given kind; an unknown kind yields an empty list."""
        try:
            kind = MemberKind.parse(kind)
        except InvalidInputError:
            return []
        return [m for m in self._members if m.kind is kind]

    def filter_by_status(self, status: Union[str, MembershipStatus]) -> List[Member]:
        try:
            status = MembershipStatus.parse(status)
        except InvalidInputError:
            return []
        return [m for m in self._members if m.status is status]

    def filter_by_performance(self, month: int, year: int, achieved: bool) -> List[Member]:
        return [
            m for m in self._members
            if any(
                p.month == month and p.year == year and p.goal_achieved == achieved
                for p in m.performance_history
            )
        ]

    # --- SORTING (in place, stable) ---

    def sort_by_id(self) -> None:
        self._members.sort(key=lambda m: m.id)

    def sort_by_name(self) -> None:
        self._members.sort(key=lambda m: (m.name.casefold(), m.id))

    def sort_by_join_date(self) -> None:
        self._members.sort(key=lambda m: (m.join_date, m.id))

    # --- UPDATES ---

    def update_status(self, member_id: str, new_status: Union[str, MembershipStatus]) -> Member:
        member = self.get(member_id)
        member.status = MembershipStatus.parse(new_status)
        return member

    def add_performance(self, member_id: str, record: PerformanceRecord) -> Member:
        member = self.get(member_id)
        member.add_performance(record)
        return member

    def update_details(self, member_id: str, name: Optional[str] = None,
                       trainer_fee: Optional[float] = None) -> Member:
        """
        Updates a member's name and/or personal trainer fee.
        None leaves a field unchanged.

        Raises:
            MemberNotFoundError: Unknown ID.
            InvalidInputError: Empty name, negative or non-finite fee, or a trainer fee for a Regular member.
        """
        member = self.get(member_id)

        if trainer_fee is not None:
            if not member.is_premium:
                raise InvalidInputError("Only Premium members have a trainer fee.")
            trainer_fee = check_fee(trainer_fee)

        if name is not None:
            member.rename(name)
        if trainer_fee is not None:
            member.trainer_fee = trainer_fee
        return member
