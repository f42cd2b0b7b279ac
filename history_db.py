"""Anonymized query log (sqlite). Only a hash of the user's input is stored."""

import hashlib
import sqlite3
from contextlib import closing
from typing import Optional

import pandas as pd

import config


def _connect(db_path: Optional[str] = None):
    return closing(sqlite3.connect(db_path or config.DB_PATH))


def init_db(db_path: Optional[str] = None):
    # idempotent create
    with _connect(db_path) as conn:
        conn.execute("""
        CREATE TABLE IF NOT EXISTS queries (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            query_hash TEXT,
            timestamp_utc TEXT,
            operation TEXT,
            lang TEXT,
            outcome TEXT,
            notes TEXT
        );
        """)
        conn.commit()


def hash_query(text: str) -> str:
    return hashlib.sha256(text.strip().lower().encode("utf-8")).hexdigest()


def log_query(query_text: str, operation: str, lang: str, outcome: str, notes: str = "",
              db_path: Optional[str] = None):
    init_db(db_path)
    with _connect(db_path) as conn:
        conn.execute(
            "INSERT INTO queries (query_hash, timestamp_utc, operation, lang, outcome, notes) "
            "VALUES (?, datetime('now'), ?, ?, ?, ?)",
            (hash_query(query_text), operation, lang, outcome, notes),
        )
        conn.commit()


def recent_queries(limit: int = 10, db_path: Optional[str] = None) -> pd.DataFrame:
    init_db(db_path)
    with _connect(db_path) as conn:
        return pd.read_sql_query(
            "SELECT timestamp_utc, operation, lang, outcome FROM queries ORDER BY id DESC LIMIT ?",
            conn,
            params=(limit,),
        )
