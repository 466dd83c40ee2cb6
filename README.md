# nebuladb

nebuladb is a small table store that you drive from an interactive menu.
It holds one table of records in memory, with the columns Name, Email and
Age. You can save the table to a comma-separated file and load it back.
Before you reach the table menu you register an account and log in.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## The command line

```
nebuladb [--users PATH]
```

`--users` names the JSON file that holds the registered accounts. The
default is `data/users.json`, relative to the current directory. Any
missing parent directories are created the first time an account is
saved.

The first menu offers:

1. Register: asks for a username and a password and stores the password's
   SHA-256 hex digest. Registering a name that already exists replaces its
   password. The command line does not apply the password rules that
   `validate_password` checks.
2. Login: on success you go on to the table menu. Otherwise it prints
   "Invalid credentials." and shows the menu again.
3. Exit

After a successful login the table menu offers:

1. Add Record
2. View Records
3. Update Record by Name
4. Delete Record by Name
5. Search Record by Name
6. Save Table to File
7. Load Table from File
8. Sort Records by Age (ascending or descending), then show the table
9. Filter Records by City and Age
10. Logout, which ends the program

The program also ends when its input runs out.

Records are matched by their first field, the name. If several records
share a name, only the first one counts. A saved table is plain text. The
first line holds the column names. Each following line holds one record,
with its fields joined by commas.

## Using it as a library

```python
from nebuladb.table import Table

table = Table("Users", ["Name", "Email", "Age"])
table.insert_record(["Ada", "ada@example.com", "36"])
table.insert_record(["Bob", "bob@example.com", "29"])

table.sort_by_age(True)
print(table.render())

table.save_to_file("users.csv")
```

### `nebuladb.table`

- `Table(name, columns)` keeps its records in order. You can iterate over
  a table, and `len()` gives the number of records.
- `insert_record(fields)` and `update_record_by_name(name, new_fields)`
  return the new `Record`. They raise `TableError` when the number of
  fields differs from the number of columns.
- `search_record(name)` returns the matching record.
  `delete_record_by_name(name)` removes the matching record and returns
  it. Both raise `RecordNotFound` (a subclass of `TableError`) when no
  record has that name, and so does `update_record_by_name`.
- `select_all()` returns a list of all the records. `render()` returns
  the table as text: a title line, the column header, a rule of dashes,
  and one line per record. `Record.format()` renders a single record.
- `save_to_file(filename)` and `load_from_file(filename)` raise
  `TableError` when the file cannot be opened. Loading replaces both the
  columns and the records. A line with no comma in it yields no fields,
  so such a line is skipped when it appears after the header.
- `sort_by_age(ascending=True)` sorts by the integer at the start of the
  third field. Records whose age does not parse go to the end of the
  order. It raises `TableError` on an empty table.
- `filter_by_city_and_age(city, min_age)` returns the records whose third
  field equals `city` and whose second field, read as an integer, is
  greater than `min_age`. It raises `TableError` if any record's second
  field does not start with an integer. On a table with the columns Name,
  Email, Age, the second field is the email address, so this filter
  raises unless those fields hold numbers.

Fields are joined with plain commas and nothing is quoted or escaped. A
field that itself contains a comma therefore does not survive a save and
load.

### `nebuladb.auth`

- `sha256(text)` returns the lower-case hex SHA-256 digest of the UTF-8
  encoding of `text`.
- `validate_password(password)` raises `ValueError` unless the password
  meets all of these rules:
  - It is at least six bytes long in UTF-8.
  - It contains an ASCII uppercase letter.
  - It contains an ASCII lowercase letter.
  - It contains a digit.
  - It contains an ASCII punctuation character.
- `User(username, password)` checks that the username is not empty, then
  applies the password rules and stores only the digest.
  `verify_password(password)` compares digests.
- `AuthSystem(path="users.txt")` loads `username,digest` lines from
  `path`, if the file exists.
  - `register_user(username, password)` returns `False` for a name that
    is taken. Otherwise it adds the user and rewrites the file.
  - `login_user(username, password)` returns whether the name exists and
    the password matches.
- `load_users(path)` reads the JSON account file that the command line
  uses and returns a dict of username to digest. If the file is absent it
  returns an empty dict.
- `save_users(users, path)` writes that dict as indented JSON with sorted
  keys.

## What it does not do

nebuladb is not a database server. It keeps a single table in memory,
and nothing is stored unless you save the table to a file. It has no
query language, no indexes and no concurrent access. The command line
uses only the JSON account file. `AuthSystem` and its `users.txt` file
are available only to library code.