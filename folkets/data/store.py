"""
Read-only access to the bundled Folkets SQLite database.

Each language has its own table (see Language.table_name) whose columns are
the raw fields consumed by folkets.core.parsing.parse. This module only looks
records up; it never writes to the database.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from folkets.core.constants import DEFAULT_SEARCH_LIMIT, ERROR_DATABASE_MISSING
from folkets.core.errors import StoreError
from folkets.core.lexical import Language
from folkets.core.models import Entry
from folkets.core.parsing import parse

logger = logging.getLogger(__name__)

RawRow = Dict[str, Optional[str]]


class LexiconStore:
    """Keyed lookups of raw dictionary records.

    A connection is opened per call and closed before returning, so one
    instance can be shared between threads.

    Usage:
        store = LexiconStore("folkets.db")
        rows = store.lookup("barn", Language.SWEDISH)
        entries = store.find_entries("barn", "sv")
    """

    def __init__(self, database_path: Union[str, Path]) -> None:
        """Initialize the store.

        Args:
            database_path: Path to the Folkets SQLite database
        """
        self.database_path = Path(database_path)

    def _connect(self) -> sqlite3.Connection:
        if not self.database_path.is_file():
            raise StoreError(f"{ERROR_DATABASE_MISSING}: {self.database_path}")
        uri = f"{self.database_path.resolve().as_uri()}?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot open {self.database_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        return conn

    def _query(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        with closing(self._connect()) as conn:
            try:
                return conn.execute(sql, params).fetchall()
            except sqlite3.Error as exc:
                raise StoreError(f"Query failed on {self.database_path}: {exc}") from exc

    def lookup(self, word: str, language: Language) -> List[RawRow]:
        """Get the raw records for a headword.

        Args:
            word: Exact headword, e.g. "barn"
            language: Dataset to search

        Returns:
            Raw records in database order (empty if the word is unknown)
        """
        logger.debug("Looking up %r in %s", word, language.table_name)
        rows = self._query(
            f"SELECT * FROM {language.table_name} WHERE word = ? ORDER BY rowid",
            (word,),
        )
        return [dict(row) for row in rows]

    def search(self, prefix: str, language: Language, limit: int = DEFAULT_SEARCH_LIMIT) -> List[str]:
        """Get headwords starting with a prefix, sorted, at most limit of them.

        Matching is exact and case sensitive for every character, so "Barn"
        does not find "barn" and "Å" does not find "å". Glob metacharacters
        in the prefix are matched literally.
        """
        escaped = "".join(f"[{char}]" if char in "[*?" else char for char in prefix)
        logger.debug("Searching %s for prefix %r", language.table_name, prefix)
        rows = self._query(
            f"""
            SELECT DISTINCT word FROM {language.table_name}
            WHERE word GLOB ?
            ORDER BY word
            LIMIT ?
            """,
            (f"{escaped}*", limit),
        )
        return [row["word"] for row in rows]

    def count(self, language: Language) -> int:
        rows = self._query(f"SELECT COUNT(*) AS total FROM {language.table_name}")
        return rows[0]["total"]

    def iter_records(self, language: Language) -> Iterator[RawRow]:
        """Yield every raw record of a dataset in database order."""
        with closing(self._connect()) as conn:
            try:
                cursor = conn.execute(f"SELECT * FROM {language.table_name} ORDER BY rowid")
                for row in cursor:
                    yield dict(row)
            except sqlite3.Error as exc:
                raise StoreError(f"Query failed on {self.database_path}: {exc}") from exc

    def find_entries(self, word: str, language_code: Optional[str]) -> List[Entry]:
        """Look up and parse every entry for a headword.

        Args:
            word: Exact headword
            language_code: Two letter code; unknown codes select English

        Returns:
            Parsed entries in database order

        Raises:
            StoreError: If the database cannot be read
            ParseError: If a record cannot be decoded
        """
        language = Language.from_language_code(language_code)
        return [parse(row) for row in self.lookup(word, language)]
