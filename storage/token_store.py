#########################################
# User Directory Console
#
# Description: This file persists the session's bearer token in a
# local SQLite database. Only one token is ever stored.
#########################################

import logging, sqlite3
from contextlib import contextmanager

TOKEN_KEY = "token"


class TokenStore:
    def __init__(self, database_name: str):
        self.database_name = database_name

    @contextmanager
    def db_conn(self):
        conn = sqlite3.connect(self.database_name)
        cursor = conn.cursor()
        try:
            yield conn, cursor
        finally:
            cursor.close()
            conn.close()

    def init(self) -> None:
        try:
            with self.db_conn() as (conn, cursor):
                # One row per key, the token lives under TOKEN_KEY
                cursor.execute('''
                    CREATE TABLE IF NOT EXISTS session (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                ''')
                conn.commit()
        except sqlite3.Error as e:
            logging.error(f"Token store initialization error: {e}")
            raise

    def get_token(self) -> str | None:
        try:
            with self.db_conn() as (conn, cursor):
                cursor.execute("SELECT value FROM session WHERE key = ?", (TOKEN_KEY,))
                result = cursor.fetchone()
                return result[0] if result else None
        except sqlite3.Error as e:
            logging.error(f"Token store error in get_token: {e}")
            raise

    def set_token(self, token: str) -> None:
        try:
            with self.db_conn() as (conn, cursor):
                cursor.execute(
                    "INSERT OR REPLACE INTO session (key, value) VALUES (?, ?)",
                    (TOKEN_KEY, token)
                )
                conn.commit()
                logging.info("Session token stored")
        except sqlite3.Error as e:
            logging.error(f"Token store error in set_token: {e}")
            raise

    def clear_token(self) -> None:
        try:
            with self.db_conn() as (conn, cursor):
                cursor.execute("DELETE FROM session WHERE key = ?", (TOKEN_KEY,))
                conn.commit()
                logging.info("Session token cleared")
        except sqlite3.Error as e:
            logging.error(f"Token store error in clear_token: {e}")
            raise
