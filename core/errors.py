class GymError(Exception):
    """Base class for all member-management errors."""
    pass


class InvalidInputError(GymError, ValueError):
    """Raised for empty required fields, bad types, or out-of-range values."""
    pass


class DuplicateMemberError(GymError):
    """Raised when adding a member whose ID already exists."""

    def __init__(self, member_id: str):
        super().__init__(f"A member with ID '{member_id}' already exists.")
        self.member_id = member_id


class MemberNotFoundError(GymError):
    """Raised when a member ID does not exist."""

    def __init__(self, member_id: str):
        super().__init__(f"Member with ID '{member_id}' not found.")
        self.member_id = member_id


class DataFileError(GymError):
    """Raised when the data file cannot be read or written."""
    pass


class RecordFormatError(GymError):
    """Raised when a single row of the data file is malformed."""
    pass
