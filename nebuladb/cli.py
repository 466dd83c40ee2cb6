"""Interactive command-line front end: account login followed by a table menu."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, TextIO

from nebuladb.auth import DEFAULT_USERS_JSON, load_users, save_users, sha256
from nebuladb.table import RecordNotFound, Table, TableError

_LOGIN_MENU = "\nNebulaDB CLI\n1. Register\n2. Login\n3. Exit\n> "
_MAIN_MENU = (
    "\nNebulaDB Menu\n"
    "1. Add Record\n"
    "2. View Records\n"
    "3. Update Record by Name\n"
    "4. Delete Record by Name\n"
    "5. Search Record by Name\n"
    "6. Save Table to File\n"
    "7. Load Table from File\n"
    "8. Sort Records by Age\n"
    "9. Filter Records by City and Age\n"
    "10. Logout\n> "
)
_REGISTER_PROMPTS = ("New username: ", "New password: ")
_LOGIN_PROMPTS = ("Username: ", "Password: ")


class _Session:
    """One run of the interactive program over a pair of text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO, users_path: Path) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.users_path = users_path
        self.users = load_users(users_path)
        self.table = Table("Users", ["Name", "Email", "Age"])
        self.current_user = ""

    def _say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.removesuffix("\n").removesuffix("\r")

    def _ask_int(self, prompt: str) -> int | None:
        text = self._ask(prompt)
        try:
            return int(text.strip())
        except ValueError:
            return None

    def _ask_credentials(self, prompts: tuple[str, str]) -> tuple[str, str]:
        username = self._ask(prompts[0])
        phrase = self._ask(prompts[1])
        return username, phrase

    def run(self) -> None:
        self._authenticate()
        if self.current_user:
            self._menu()

    # Login stage

    def _authenticate(self) -> None:
        while True:
            choice = self._ask_int(_LOGIN_MENU)
            if choice == 1:
                self._register()
            elif choice == 2:
                if self._login():
                    return
            elif choice == 3:
                return
            else:
                self._say("Invalid input.")

    def _register(self) -> None:
        username, phrase = self._ask_credentials(_REGISTER_PROMPTS)
        self.users[username] = sha256(phrase)
        save_users(self.users, self.users_path)
        self._say("User registered.")

    def _login(self) -> bool:
        username, phrase = self._ask_credentials(_LOGIN_PROMPTS)
        if self.users.get(username) == sha256(phrase):
            self._say("Login successful!")
            self.current_user = username
            return True
        self._say("Invalid credentials.")
        return False

    # Table stage

    def _menu(self) -> None:
        actions: dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._view,
            3: self._update,
            4: self._delete,
            5: self._search,
            6: self._save,
            7: self._load,
            8: self._sort,
            9: self._filter,
        }
        while True:
            choice = self._ask_int(_MAIN_MENU)
            if choice == 10:
                self._say("Logged out.")
                return
            action = actions.get(choice) if choice is not None else None
            if action is None:
                self._say("Invalid input.")
            else:
                action()

    def _ask_fields(self, labels: tuple[str, ...]) -> list[str]:
        return [self._ask(f"{label}: ") for label in labels]

    def _add(self) -> None:
        fields = self._ask_fields(("Name", "Email", "Age"))
        try:
            self.table.insert_record(fields)
        except TableError as exc:
            self._say(f"Error: {exc}")

    def _view(self) -> None:
        self.stdout.write(self.table.render())

    def _update(self) -> None:
        name = self._ask("Enter name of record to update: ")
        fields = self._ask_fields(("New Name", "New Email", "New Age"))
        try:
            self.table.update_record_by_name(name, fields)
        except RecordNotFound as exc:
            self._say(str(exc))
        except TableError as exc:
            self._say(f"Error: {exc}")
        else:
            self._say(f'Record with name "{name}" updated successfully.')

    def _delete(self) -> None:
        name = self._ask("Enter name of record to delete: ")
        try:
            self.table.delete_record_by_name(name)
        except RecordNotFound as exc:
            self._say(str(exc))
        else:
            self._say(f'Record with name "{name}" deleted successfully.')

    def _search(self) -> None:
        name = self._ask("Enter name to search: ")
        try:
            record = self.table.search_record(name)
        except RecordNotFound as exc:
            self._say(str(exc))
        else:
            self._say(f"Record found: {record.format()}")

    def _save(self) -> None:
        filename = self._ask("Enter filename to save to: ")
        try:
            self.table.save_to_file(filename)
        except TableError as exc:
            self._say(f"Error: {exc}")
        else:
            self._say(f"Table saved to {filename} successfully!")

    def _load(self) -> None:
        filename = self._ask("Enter filename to load from: ")
        try:
            self.table.load_from_file(filename)
        except TableError as exc:
            self._say(f"Error: {exc}")
        else:
            self._say(f"Table loaded from {filename} successfully!")

    def _sort(self) -> None:
        ascending = self._ask_int("Sort by Age:\n1. Ascending\n2. Descending\n> ") == 1
        try:
            self.table.sort_by_age(ascending)
        except TableError as exc:
            self._say(str(exc))
        else:
            order = "(Ascending)" if ascending else "(Descending)"
            self._say(f"Records sorted by Age {order} successfully!")
        self._view()

    def _filter(self) -> None:
        city = self._ask("Enter city name: ")
        min_age = self._ask_int("Enter minimum age: ")
        if min_age is None:
            self._say("Invalid input.")
            return
        self._say(f"Users from city: {city} and age greater than {min_age}")
        try:
            matches = self.table.filter_by_city_and_age(city, min_age)
        except TableError as exc:
            self._say(f"Error: {exc}")
            return
        for record in matches:
            self._say(record.format())
        if not matches:
            self._say("No records found matching the filter.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive program on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="nebuladb", description="Log in and manage a table of user records."
    )
    parser.add_argument(
        "--users",
        default=DEFAULT_USERS_JSON,
        help="JSON file holding registered accounts (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    session = _Session(sys.stdin, sys.stdout, Path(args.users))
    try:
        session.run()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())