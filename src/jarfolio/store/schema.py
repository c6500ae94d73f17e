# ABOUTME: SQL DDL statements for the Jarfolio snapshot database.
# ABOUTME: A single key/value table; each row holds one JSON snapshot document.

SCHEMA = """
-- One row per storage key; value holds the JSON snapshot document
CREATE TABLE snapshots (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);
"""
