"""In-memory tables of string records, with plain comma-separated persistence."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

# Field positions used by the name, sort and filter operations.
_NAME_FIELD = 0
_SORT_AGE_FIELD = 2
_FILTER_AGE_FIELD = 1
_FILTER_CITY_FIELD = 2


class TableError(Exception):
    """Raised when a table operation cannot be carried out."""


class RecordNotFound(TableError):
    """Raised when no record carries the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Record with name "{name}" not found.')
        self.name = name


def _leading_int(text: str) -> int:
    """Parse the integer at the start of *text*, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


@dataclass(frozen=True)
class Record:
    """One row of a table."""

    fields: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def name(self) -> str:
        """The value of the first field, which identifies the record."""
        return self.fields[_NAME_FIELD] if self.fields else ""

    def format(self) -> str:
        """Render the fields as one display line."""
        return "".join(f"{field} | " for field in self.fields)

    def _field(self, index: int) -> str | None:
        return self.fields[index] if index < len(self.fields) else None


def _split_line(line: str) -> list[str]:
    # A line without any separator yields no fields at all.
    return line.split(",") if "," in line else []


class Table:
    """A named table with fixed columns and an ordered list of records."""

    def __init__(self, name: str, columns: Iterable[str]) -> None:
        self.name = name
        self.columns: list[str] = list(columns)
        self.records: list[Record] = []

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def _checked(self, fields: Iterable[str]) -> tuple[str, ...]:
        fields = tuple(fields)
        if len(fields) != len(self.columns):
            raise TableError("Field count doesn't match column count!")
        return fields

    def _index_of(self, name: str) -> int:
        for index, record in enumerate(self.records):
            if record.name == name:
                return index
        raise RecordNotFound(name)

    def insert_record(self, fields: Iterable[str]) -> Record:
        """Append a record; its width must match the columns."""
        record = Record(self._checked(fields))
        self.records.append(record)
        return record

    def select_all(self) -> list[Record]:
        """Return every record in table order."""
        return list(self.records)

    def render(self) -> str:
        """Return the table as text: title, header, rule and one line per record."""
        lines = [
            f"Table: {self.name}",
            "".join(f"{column} | " for column in self.columns),
            "-" * 50,
        ]
        lines.extend(record.format() for record in self.records)
        return "\n".join(lines) + "\n"

    def delete_record_by_name(self, name: str) -> Record:
        """Remove and return the first record with this name."""
        return self.records.pop(self._index_of(name))

    def update_record_by_name(self, name: str, new_fields: Iterable[str]) -> Record:
        """Replace the first record with this name by a new one."""
        fields = self._checked(new_fields)
        index = self._index_of(name)
        self.records[index] = Record(fields)
        return self.records[index]

    def search_record(self, name: str) -> Record:
        """Return the first record with this name."""
        return self.records[self._index_of(name)]

    def save_to_file(self, filename: str) -> None:
        """Write the columns and then every record, one comma-separated line each."""
        try:
            with open(filename, "w", encoding="utf-8") as handle:
                handle.write(",".join(self.columns) + "\n")
                for record in self.records:
                    handle.write(",".join(record.fields) + "\n")
        except OSError as exc:
            raise TableError(f"Could not open file: {filename}") from exc

    def load_from_file(self, filename: str) -> None:
        """Replace columns and records with the contents of a saved file."""
        try:
            handle = open(filename, encoding="utf-8")
        except OSError as exc:
            raise TableError(f"Could not open file: {filename}") from exc
        with handle:
            self.records.clear()
            first_line = True
            for line in handle:
                fields = _split_line(line.removesuffix("\n"))
                if first_line:
                    self.columns = fields
                    first_line = False
                    continue
                if fields:
                    self.records.append(Record(fields))

    def sort_by_age(self, ascending: bool = True) -> None:
        """Sort records by age; records whose age does not parse go last."""
        if not self.records:
            raise TableError("No records to sort.")
        unparsable = float("inf") if ascending else float("-inf")

        def key(record: Record) -> float:
            try:
                return _leading_int(record._field(_SORT_AGE_FIELD) or "")
            except ValueError:
                return unparsable

        self.records.sort(key=key, reverse=not ascending)

    def filter_by_city_and_age(self, city: str, min_age: int) -> list[Record]:
        """Return the records in *city* whose age is greater than *min_age*."""
        matches = []
        for record in self.records:
            raw_age = record._field(_FILTER_AGE_FIELD)
            try:
                age = _leading_int(raw_age or "")
            except ValueError as exc:
                raise TableError(
                    f"Invalid age {raw_age!r} in record {record.name!r}"
                ) from exc
            if record._field(_FILTER_CITY_FIELD) == city and age > min_age:
                matches.append(record)
        return matches