from pathlib import Path

import pytest

from src.adapters.dev_email import DevEmailAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.core.ports.email import EmailAddress
from src.core.services.mailer import EmailTemplates, Mailer

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def db_path(tmp_path):
    """Temporary SQLite database with every migration applied."""
    path = str(tmp_path / "chamber.db")
    SQLiteMigrator(path, ROOT / "migrations").run_migrations()
    return path


@pytest.fixture
def dev_email():
    return DevEmailAdapter()


@pytest.fixture
def mailer(dev_email):
    """Mailer that renders real templates into the dev adapter."""
    return Mailer(
        port=dev_email,
        templates=EmailTemplates(site_name="Test Chamber", base_url="http://testserver"),
        sender=EmailAddress("no-reply@example.com", "Test Chamber"),
    )
