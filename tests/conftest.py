"""
Pytest configuration: import path setup and shared dictionary fixtures.

Ensures the project root is on sys.path so that `import folkets` works
regardless of how pytest is invoked, and provides raw records and a small
SQLite database laid out like the bundled Folkets database.
"""

import os
import sqlite3
import sys
from typing import Dict, List

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)

COLUMNS = [
    "word",
    "comment",
    "types",
    "translations",
    "inflections",
    "examples",
    "definition",
    "explanation",
    "phonetic",
    "synonyms",
    "saldos",
    "comparisons",
    "antonyms",
    "use",
    "variant",
    "idioms",
    "derivations",
    "compounds",
]


def blank_record(**values: str) -> Dict[str, str]:
    """A record with every column empty except the given ones."""
    record = {column: "" for column in COLUMNS}
    record.update(values)
    return record


BARN = blank_record(
    word="barn",
    types="nn",
    translations="child*kid",
    inflections="barnet*barn*barnen",
    examples="ett barn föds#a child is born",
    phonetic="bɑːrn",
    synonyms="unge",
    saldos="w1#i1#a1",
)

GA = blank_record(
    word="gå",
    types="vb",
    translations="go#to walk*walk",
    inflections="gick*gått*gå",
    idioms="gå och lägga sig#go to bed",
)

CHILD = blank_record(
    word="child",
    types="nn",
    translations="barn",
    inflections="children",
)


@pytest.fixture
def barn_record() -> Dict[str, str]:
    return dict(BARN)


@pytest.fixture
def make_record():
    return blank_record


def build_database(path: str, rows_by_table: Dict[str, List[Dict[str, str]]]) -> str:
    """Create a Folkets style SQLite database at path."""
    conn = sqlite3.connect(path)
    cursor = conn.cursor()
    for table, rows in rows_by_table.items():
        cursor.execute(f"CREATE TABLE {table} ({', '.join(f'{c} TEXT' for c in COLUMNS)})")
        for row in rows:
            cursor.execute(
                f"INSERT INTO {table} ({', '.join(COLUMNS)}) VALUES ({', '.join('?' for _ in COLUMNS)})",
                tuple(row.get(column, "") for column in COLUMNS),
            )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def database_path(tmp_path) -> str:
    """A database with a few Swedish and English headwords."""
    return build_database(
        str(tmp_path / "folkets.db"),
        {
            "folkets_sv_en": [BARN, GA, blank_record(word="barnvagn", types="nn", translations="pram")],
            "folkets_en_sv": [CHILD],
        },
    )


@pytest.fixture
def make_database(tmp_path):
    """Factory for databases with custom rows: make_database({"folkets_sv_en": [...]})."""

    def _make(rows_by_table: Dict[str, List[Dict[str, str]]], name: str = "custom.db") -> str:
        return build_database(str(tmp_path / name), rows_by_table)

    return _make
