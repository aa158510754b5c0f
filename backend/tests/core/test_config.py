"""Settings: environment coercion and defaults."""

from app.config import Settings
from app.core.domain_types import TitleCasePolicy


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_non_postgres_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_title_case_policy_defaults_to_every_word(monkeypatch):
    monkeypatch.delenv("TITLE_CASE_POLICY", raising=False)
    assert Settings().title_case_policy == TitleCasePolicy.EVERY_WORD


def test_title_case_policy_read_from_env(monkeypatch):
    monkeypatch.setenv("TITLE_CASE_POLICY", "conventional")
    assert Settings().title_case_policy == TitleCasePolicy.CONVENTIONAL
