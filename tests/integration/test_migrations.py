import sqlite3

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator

TABLES = {
    "users",
    "reset_requests",
    "business_categories",
    "business_types",
    "businesses",
    "services",
    "testimonials",
    "business_enquiries",
    "enquiries",
    "events",
    "event_registrations",
    "blogs",
    "receipts",
    "contact_enquiries",
}


@pytest.fixture
def temp_db_path(tmp_path):
    return str(tmp_path / "nested" / "chamber.db")


def table_names(db_path: str) -> set[str]:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
    finally:
        conn.close()
    return {row[0] for row in rows}


def test_applies_all_migrations_in_order(temp_db_path):
    applied = SQLiteMigrator(temp_db_path).run_migrations()

    assert applied == ["0001_initial.sql", "0002_contacts_and_event_slugs.sql"]
    assert TABLES <= table_names(temp_db_path)
    assert "_migrations" in table_names(temp_db_path)


def test_is_idempotent(temp_db_path):
    migrator = SQLiteMigrator(temp_db_path)
    migrator.run_migrations()
    assert migrator.run_migrations() == []

    conn = sqlite3.connect(temp_db_path)
    count = conn.execute("SELECT count(*) FROM _migrations").fetchone()[0]
    conn.close()
    assert count == 2


def test_down_section_is_ignored(tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "0001_things.sql").write_text(
        "CREATE TABLE things (id TEXT PRIMARY KEY);\n-- Down\nDROP TABLE things;\n"
    )
    db_path = str(tmp_path / "test.db")

    SQLiteMigrator(db_path, migrations).run_migrations()

    assert "things" in table_names(db_path)


def test_broken_migration_raises(tmp_path):
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "0001_broken.sql").write_text("CREATE TABLE (;")

    with pytest.raises(RuntimeError, match="0001_broken.sql"):
        SQLiteMigrator(str(tmp_path / "test.db"), migrations).run_migrations()


def test_event_slugs_are_unique(temp_db_path):
    SQLiteMigrator(temp_db_path).run_migrations()
    conn = sqlite3.connect(temp_db_path)
    insert = (
        "INSERT INTO events (id, title, slug, description, date, created_at) "
        "VALUES (?, 'Expo', 'expo', 'd', '2030-01-01', '2024-01-01')"
    )
    try:
        conn.execute(insert, ("a",))
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(insert, ("b",))
    finally:
        conn.close()
