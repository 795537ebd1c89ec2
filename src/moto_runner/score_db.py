"""
score_db.py: Persistence layer for the high score.
"""

import sqlite3

from .constants import DB_FILE, HIGH_SCORE_KEY


def parse_score(raw) -> int:
    """Parses a stored score. Missing, malformed or negative values count as 0."""
    if raw is None:
        return 0
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return 0
    return max(value, 0)


class HighScoreStore:
    """Reads and writes one named integer in a small SQLite key/value table."""

    def __init__(self, db_file: str = DB_FILE, key: str = HIGH_SCORE_KEY):
        self.key = key
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                name TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def load_high_score(self) -> int:
        try:
            self.cur.execute("SELECT value FROM Settings WHERE name=?", (self.key,))
            row = self.cur.fetchone()
        except sqlite3.Error as e:
            print(f"Could not read high score: {e}")
            return 0
        return parse_score(row[0] if row else None)

    def save_high_score(self, value: int) -> bool:
        try:
            self.cur.execute(
                "INSERT OR REPLACE INTO Settings (name, value) VALUES (?, ?)",
                (self.key, str(int(value))))
            self.conn.commit()
        except sqlite3.Error as e:
            print(f"Could not save high score: {e}")
            return False
        return True

    def close(self):
        self.conn.close()
