from punchpro.database.bootstrap import SCHEMA_PATH, iter_schema_statements


def test_schema_file_splits_into_table_statements():
    statements = list(iter_schema_statements(SCHEMA_PATH.read_text(encoding="utf-8")))

    assert len(statements) == 5
    assert all(s.upper().startswith("CREATE TABLE") for s in statements)
    assert not any(s.endswith(";") for s in statements)


def test_database_selection_and_comments_are_skipped():
    sql = """
-- demo
CREATE DATABASE IF NOT EXISTS other_db;
USE other_db;
CREATE TABLE t (
    status ENUM('a', 'b') NOT NULL
);
INSERT INTO t (status) VALUES ('a');
"""
    statements = list(iter_schema_statements(sql))

    assert statements == [
        "CREATE TABLE t (\n    status ENUM('a', 'b') NOT NULL\n)",
        "INSERT INTO t (status) VALUES ('a')",
    ]
