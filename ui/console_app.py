import datetime
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

import config
from core.errors import DataFileError, GymError, InvalidInputError
from core.utils import parse_bool, parse_fee, parse_int
from models.member import Member, MemberKind, MembershipStatus, PerformanceRecord
from services.csv_service import load_into, save_members
from services.member_service import MemberRegistry
from services.report_service import format_summary, member_lines, roster_summary

SEPARATOR = "-------------------"

MAIN_MENU = [
    "Load records from a file",
    "View all members",
    "Add a new member",
    "Update a member's status (Freeze/Activate)",
    "Add a performance record",
    "Update member details (name / trainer fee)",
    "Delete a member",
    "Search / Filter members...",
    "Sort members...",
    "Show roster summary",
    "Save records to a new file",
    "Exit and save",
]
EXIT_CHOICE = len(MAIN_MENU)


class ConsoleApp:
    """
    Text-based interface. Each menu option prompts for its inputs in turn,
    re-prompting on bad values, then calls the registry or the codec.
    """
    def __init__(self, registry: MemberRegistry,
                 input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print,
                 data_file: Optional[Path] = None):
        self.registry = registry
        self.input = input_func
        self.output = output
        self.data_file = Path(data_file) if data_file else config.DATA_FILE
        # Set when the default file exists but could not be read; exit then leaves it alone
        self.default_unreadable = False

    # --- PROMPTS ---

    def error(self, message: str) -> None:
        self.output(f"Error: {message}")
        logger.info(f"User-facing error: {message}")

    def ask_text(self, prompt: str, required: bool = True) -> str:
        while True:
            value = self.input(prompt).strip()
            if value or not required:
                return value
            self.error("This field cannot be empty.")

    def ask_int(self, prompt: str, low: Optional[int] = None, high: Optional[int] = None) -> int:
        while True:
            try:
                return parse_int(self.input(prompt), low, high)
            except InvalidInputError as e:
                self.error(str(e))

    def ask_bool(self, prompt: str) -> bool:
        while True:
            try:
                return parse_bool(self.input(prompt))
            except InvalidInputError as e:
                self.error(str(e))

    def ask_fee(self, prompt: str) -> float:
        while True:
            try:
                return parse_fee(self.input(prompt))
            except InvalidInputError as e:
                self.error(str(e))

    def ask_kind(self) -> MemberKind:
        while True:
            try:
                return MemberKind.parse(self.input("Enter Member Type (Regular/Premium): "))
            except InvalidInputError as e:
                self.error(str(e))

    def ask_status(self) -> MembershipStatus:
        while True:
            try:
                return MembershipStatus.parse(self.input("Enter new status (ACTIVE/FROZEN): "))
            except InvalidInputError as e:
                self.error(str(e))

    def ask_menu(self, title: str, options: List[str]) -> int:
        self.output(f"\n===== {title} =====")
        for i, text in enumerate(options, start=1):
            self.output(f"{i}. {text}")
        self.output("=" * (len(title) + 12))
        return self.ask_int("Please choose an option: ", 1, len(options))

    def lookup(self, prompt: str) -> Optional[Member]:
        member_id = self.ask_text(prompt)
        member = self.registry.find_by_id(member_id)
        if member is None:
            self.error(f"Member with ID '{member_id}' not found.")
        return member

    # --- MAIN LOOP ---

    def run(self) -> None:
        self.output(f"Welcome to the {config.APP_NAME} (Text Mode).")
        if not self.load_file(self.data_file) and self.data_file.exists():
            self.default_unreadable = True

        handlers = {
            1: self.handle_load_file,
            2: self.handle_view_all,
            3: self.handle_add_member,
            4: self.handle_update_status,
            5: self.handle_add_performance,
            6: self.handle_update_details,
            7: self.handle_delete_member,
            8: self.handle_search_menu,
            9: self.handle_sort_menu,
            10: self.handle_summary,
            11: self.handle_save_to_file,
        }

        while True:
            try:
                choice = self.ask_menu(f"{config.APP_NAME} (Text Mode)", MAIN_MENU)
            except EOFError:
                self.output("\nInput closed. Exiting without saving.")
                return

            if choice == EXIT_CHOICE:
                if self.default_unreadable:
                    self.error(
                        f"{self.data_file} could not be read at start-up, so it was not overwritten. "
                        "Use option 11 to save elsewhere."
                    )
                else:
                    self.save_file(self.data_file)
                self.output("Exiting Text Mode...")
                return

            try:
                handlers[choice]()
            except EOFError:
                self.output("\nInput closed. Exiting without saving.")
                return
            except GymError as e:
                self.error(str(e))

    # --- FILE HANDLING ---

    def load_file(self, path: Path) -> bool:
        try:
            result = load_into(self.registry, path)
        except DataFileError as e:
            self.error(str(e))
            return False

        for row_error in result.errors:
            self.error(f"Skipped malformed row. {row_error}")
        self.output(f"{result.loaded} records loaded from {path}.")
        if Path(path) == self.data_file:
            self.default_unreadable = False
        return True

    def save_file(self, path: Path) -> None:
        try:
            count = save_members(path, self.registry.list_members())
            self.output(f"Successfully saved {count} members to {path}.")
        except DataFileError as e:
            self.error(str(e))

    def handle_load_file(self) -> None:
        filename = self.ask_text(f"Enter filename to load (e.g., {self.data_file.name}): ")
        self.load_file(Path(filename))

    def handle_save_to_file(self) -> None:
        filename = self.ask_text(f"Enter filename to save to (e.g., {config.DEFAULT_EXPORT_NAME}): ")
        self.save_file(Path(filename))

    # --- MEMBER OPERATIONS ---

    def show_members(self, members: List[Member], header: str) -> None:
        self.output(f"\n--- {header} ---")
        if not members:
            self.output("No members found.")
            return
        for m in members:
            self.output(member_lines(m))
            self.output(SEPARATOR)

    def handle_view_all(self) -> None:
        members = self.registry.list_members()
        if not members:
            self.output("There are no members in the system.")
            return
        self.show_members(members, f"All Members ({len(members)})")

    def handle_add_member(self) -> None:
        kind = self.ask_kind()
        member_id = self.ask_text("Enter Member ID (e.g., M011): ")
        if self.registry.find_by_id(member_id) is not None:
            self.error("A member with this ID already exists.")
            return

        name = self.ask_text("Enter Full Name: ")
        trainer_fee = 0.0
        if kind is MemberKind.PREMIUM:
            trainer_fee = self.ask_fee("Enter Personal Trainer Fee: ")

        member = Member(
            id=member_id,
            name=name,
            join_date=datetime.date.today(),
            kind=kind,
            trainer_fee=trainer_fee,
        )
        self.registry.add(member)
        logger.info(f"Added {kind.value} member {member.id}")
        self.output(f"{kind.value} member added successfully!")

    def handle_update_status(self) -> None:
        member = self.lookup("Enter the Member ID to update status: ")
        if member is None:
            return
        self.output(f"Current status for {member.name} is: {member.status.value}")
        status = self.ask_status()
        self.registry.update_status(member.id, status)
        logger.info(f"Status of {member.id} set to {status.value}")
        self.output("Status updated successfully!")

    def handle_add_performance(self) -> None:
        member = self.lookup("Enter Member ID for performance record: ")
        if member is None:
            return
        month = self.ask_int("Enter performance month (1-12): ", 1, 12)
        year = self.ask_int("Enter performance year: ", config.MIN_YEAR, config.MAX_YEAR)
        achieved = self.ask_bool("Was the monthly goal achieved? (true/false): ")

        self.registry.add_performance(member.id, PerformanceRecord(month, year, achieved))
        self.output(f"Performance record added for {member.name}")

    def handle_update_details(self) -> None:
        member = self.lookup("Enter the ID of the member to update: ")
        if member is None:
            return

        new_name = self.ask_text(
            f"Enter new Full Name (or press Enter to keep '{member.name}'): ", required=False
        )
        new_fee = None
        if member.is_premium:
            while True:
                text = self.ask_text(
                    f"Enter new Personal Trainer Fee (or press Enter to keep '{member.trainer_fee}'): ",
                    required=False,
                )
                if not text:
                    break
                try:
                    new_fee = parse_fee(text)
                    break
                except InvalidInputError as e:
                    self.error(str(e))

        self.registry.update_details(member.id, name=new_name or None, trainer_fee=new_fee)
        self.output(f"Update complete for member {member.id}.")

    def handle_delete_member(self) -> None:
        member_id = self.ask_text("Enter Member ID to delete: ")
        if self.registry.delete(member_id):
            logger.info(f"Deleted member {member_id}")
            self.output("Member deleted successfully.")
        else:
            self.error(f"Member with ID '{member_id}' not found.")

    def handle_summary(self) -> None:
        self.output(format_summary(roster_summary(self.registry)))

    # --- SUB-MENUS ---

    def handle_search_menu(self) -> None:
        options = [
            "Search by Name",
            "Filter by Member Type",
            "Filter by Performance",
            "Filter by Status",
            "Return to Main Menu",
        ]
        while True:
            choice = self.ask_menu("Search & Filter Menu", options)
            if choice == 1:
                name = self.ask_text("Enter name to search for: ")
                self.show_members(self.registry.find_by_name(name), f"Search Results for '{name}'")
            elif choice == 2:
                kind = self.ask_kind()
                self.show_members(self.registry.filter_by_kind(kind), f"Filter Results for Type: {kind.value}")
            elif choice == 3:
                month = self.ask_int("Enter month (1-12): ", 1, 12)
                year = self.ask_int("Enter year: ", config.MIN_YEAR, config.MAX_YEAR)
                achieved = self.ask_bool("Filter by goal achieved? (true/false): ")
                label = "Achieved Goal" if achieved else "Did Not Achieve Goal"
                self.show_members(
                    self.registry.filter_by_performance(month, year, achieved),
                    f"Filter Results for Performance: {label} in {month}/{year}",
                )
            elif choice == 4:
                status = self.ask_status()
                self.show_members(self.registry.filter_by_status(status), f"Members with status {status.value}")
            else:
                return

    def handle_sort_menu(self) -> None:
        sorters = {
            1: ("ID", self.registry.sort_by_id),
            2: ("Name", self.registry.sort_by_name),
            3: ("Join Date", self.registry.sort_by_join_date),
        }
        choice = self.ask_menu(
            "Sort Members Menu",
            ["Sort by Member ID", "Sort by Name", "Sort by Join Date", "Back to Main Menu"],
        )
        if choice not in sorters:
            return
        label, sort = sorters[choice]
        sort()
        self.output(f"Members sorted by {label}.")
        self.handle_view_all()
