import csv
import io
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from loguru import logger

from core.errors import DataFileError, DuplicateMemberError, InvalidInputError, RecordFormatError
from core.utils import parse_iso_date
from models.member import Member, MemberKind, MembershipStatus, PerformanceRecord
from services.member_service import MemberRegistry

RECORD_SEPARATOR = "|"
FIELD_SEPARATOR = ";"

# Accepted field counts per kind. The smallest count is the old format
# without status or performance history.
REGULAR_FIELD_COUNTS = (4, 5, 6)
PREMIUM_FIELD_COUNTS = (5, 6, 7)

# Bytes that failed to decode, as left by the surrogateescape handler
UNDECODABLE = re.compile("[\udc80-\udcff]")


@dataclass
class RowError:
    line_number: int
    text: str
    reason: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.reason} ({self.text!r})"


@dataclass
class LoadResult:
    """Outcome of reading a data file: the good members plus one error per skipped row."""
    path: Path
    members: List[Member] = field(default_factory=list)
    errors: List[RowError] = field(default_factory=list)

    @property
    def loaded(self) -> int:
        return len(self.members)


# --- ENCODING ---

def encode_performance(history: Sequence[PerformanceRecord]) -> str:
    return RECORD_SEPARATOR.join(
        f"{p.month}{FIELD_SEPARATOR}{p.year}{FIELD_SEPARATOR}{str(p.goal_achieved).lower()}"
        for p in history
    )


def encode_member(member: Member) -> List[str]:
    """
    Builds the row fields for one member:
    id, name, kind, join date, status, [trainer fee], [performance history].
    """
    row = [
        member.id,
        member.name,
        member.kind.value,
        member.join_date.isoformat(),
        member.status.value,
    ]
    if member.is_premium:
        row.append(str(member.trainer_fee))
    if member.performance_history:
        row.append(encode_performance(member.performance_history))
    return row


def encode_lines(members: Iterable[Member]) -> str:
    """
    Renders members as file text. Fields containing commas or quotes are
    quoted; everything else is written exactly as the old format did.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for m in members:
        writer.writerow(encode_member(m))
    return buf.getvalue()


# --- DECODING ---

def decode_performance(text: str) -> List[PerformanceRecord]:
    records = []
    for chunk in text.split(RECORD_SEPARATOR):
        if not chunk.strip():
            continue
        parts = [p.strip() for p in chunk.split(FIELD_SEPARATOR)]
        if len(parts) != 3:
            raise RecordFormatError(f"Performance record '{chunk}' must be month;year;achieved.")
        achieved = parts[2].lower()
        if achieved not in ("true", "false"):
            raise RecordFormatError(f"Goal flag '{parts[2]}' must be true or false.")
        try:
            records.append(PerformanceRecord(int(parts[0]), int(parts[1]), achieved == "true"))
        except (ValueError, InvalidInputError) as e:
            raise RecordFormatError(f"Bad performance record '{chunk}': {e}")
    return records


def decode_row(fields: Sequence[str]) -> Member:
    """
    Rebuilds a member from one row's fields.
    Old rows (no status, no history) are told apart by field count.

    Raises:
        RecordFormatError: If the row cannot be understood.
    """
    parts = [f.strip() for f in fields]
    if len(parts) < 4:
        raise RecordFormatError(f"Expected at least 4 fields, found {len(parts)}.")

    try:
        kind = MemberKind.parse(parts[2])
        join_date = parse_iso_date(parts[3])
    except InvalidInputError as e:
        raise RecordFormatError(str(e))

    allowed = PREMIUM_FIELD_COUNTS if kind is MemberKind.PREMIUM else REGULAR_FIELD_COUNTS
    if len(parts) not in allowed:
        raise RecordFormatError(
            f"{kind.value} rows have {' / '.join(map(str, allowed))} fields, found {len(parts)}."
        )

    status = MembershipStatus.ACTIVE
    trainer_fee = 0.0
    history_text = ""

    try:
        if kind is MemberKind.REGULAR:
            if len(parts) > 4:
                status = MembershipStatus.parse(parts[4])
            if len(parts) > 5:
                history_text = parts[5]
        elif len(parts) == 5:
            # Old premium format: fee sits where status lives today
            trainer_fee = float(parts[4])
        else:
            status = MembershipStatus.parse(parts[4])
            trainer_fee = float(parts[5])
            if len(parts) > 6:
                history_text = parts[6]

        member = Member(
            id=parts[0],
            name=parts[1],
            join_date=join_date,
            kind=kind,
            trainer_fee=trainer_fee,
            status=status,
        )
    except (ValueError, InvalidInputError) as e:
        raise RecordFormatError(str(e))

    for record in decode_performance(history_text):
        member.add_performance(record)
    return member


def read_rows(text: str) -> Iterator[Tuple[int, str, Union[List[str], csv.Error]]]:
    """
    Yields (first line number, raw text, fields) for every row in the text.
    A row the csv reader rejects is yielded with its csv.Error in place of the fields.
    Quoted fields may span lines; only \\n, \\r and \\r\\n end a line.
    """
    consumed: List[str] = []

    def lines():
        for line in io.StringIO(text, newline=""):
            consumed.append(line)
            yield line

    reader = csv.reader(lines())
    line_number = 1
    while True:
        try:
            fields = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            fields = e
        raw = "".join(consumed).rstrip("\r\n")
        consumed.clear()
        yield line_number, raw, fields
        line_number = reader.line_num + 1


def load_members(path: Union[str, Path]) -> LoadResult:
    """
    Reads every row of a data file.
    Malformed rows, rows that are not valid UTF-8 and repeated IDs are
    reported and skipped; the rest load.

    Raises:
        DataFileError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        raise DataFileError(f"File not found or cannot be read: {path} ({e})")

    # Undecodable bytes become lone surrogates so only their own row fails
    text = data.decode("utf-8", errors="surrogateescape")
    result = LoadResult(path=path)
    seen = MemberRegistry()

    for line_number, raw, fields in read_rows(text):
        try:
            if isinstance(fields, csv.Error):
                raise fields
            if not any(f.strip() for f in fields):
                continue
            if UNDECODABLE.search(raw):
                raise RecordFormatError("Row is not valid UTF-8 text.")
            member = decode_row(fields)
            seen.add(member)
        except (csv.Error, RecordFormatError, DuplicateMemberError) as e:
            err = RowError(line_number, raw, str(e))
            logger.warning(f"Skipping row in {path.name}: {err}")
            result.errors.append(err)
            continue
        result.members.append(member)

    logger.info(f"Loaded {result.loaded} members from {path} ({len(result.errors)} rows skipped)")
    return result


def load_into(registry: MemberRegistry, path: Union[str, Path]) -> LoadResult:
    """
    Replaces the registry's contents with the file's members.
    The registry is cleared first, so it stays empty if the file cannot be read.
    """
    registry.clear()
    result = load_members(path)
    registry.replace_all(result.members)
    return result


def write_text(path: Union[str, Path], text: str) -> None:
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write {path}: {e}")
        raise DataFileError(f"Could not write to file: {path} ({e})")


def save_members(path: Union[str, Path], members: Iterable[Member]) -> int:
    """
    Writes all members to the given path.

    Returns:
        int: Number of members written.

    Raises:
        DataFileError: If the destination cannot be written.
    """
    members = list(members)
    write_text(path, encode_lines(members))
    logger.info(f"Saved {len(members)} members to {path}")
    return len(members)
