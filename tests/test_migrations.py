"""
Tests for the Alembic schema revision.
"""

import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, event, inspect


VERSIONS_DIR = Path(__file__).resolve().parents[1] / "blog_api" / "shared" / "migrations" / "versions"


def _load_revision():
    path = next(VERSIONS_DIR.glob("*_001_initial_schema.py"))
    module_spec = importlib.util.spec_from_file_location("initial_schema", path)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


@pytest.fixture
def sync_engine():
    engine = create_engine("sqlite://")

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    yield engine
    engine.dispose()


def _run(engine, step: str) -> None:
    revision = _load_revision()
    with engine.begin() as conn:
        context = MigrationContext.configure(conn)
        with Operations.context(context):
            getattr(revision, step)()


class TestInitialSchema:
    """Tests for revision 001."""

    def test_upgrade_creates_tables(self, sync_engine):
        """Test every table is created."""
        _run(sync_engine, "upgrade")

        tables = set(inspect(sync_engine).get_table_names())

        assert {"authors", "profiles", "categories", "posts", "post_categories"} <= tables

    def test_upgrade_creates_unique_constraints(self, sync_engine):
        """Test email, profile owner and category name are unique."""
        _run(sync_engine, "upgrade")
        inspector = inspect(sync_engine)

        email_index = next(
            index for index in inspector.get_indexes("authors") if index["name"] == "ix_authors_email"
        )
        profile_unique = [c["column_names"] for c in inspector.get_unique_constraints("profiles")]
        category_unique = [c["column_names"] for c in inspector.get_unique_constraints("categories")]

        assert email_index["unique"]
        assert ["author_id"] in profile_unique
        assert ["name"] in category_unique

    def test_foreign_key_actions(self, sync_engine):
        """Test profiles cascade with the author and posts do not."""
        _run(sync_engine, "upgrade")
        inspector = inspect(sync_engine)

        profile_fk = inspector.get_foreign_keys("profiles")[0]
        post_fk = inspector.get_foreign_keys("posts")[0]

        assert profile_fk["options"].get("ondelete") == "CASCADE"
        assert post_fk["options"].get("ondelete") is None

    def test_downgrade_drops_tables(self, sync_engine):
        """Test downgrade leaves no application tables."""
        _run(sync_engine, "upgrade")
        _run(sync_engine, "downgrade")

        assert inspect(sync_engine).get_table_names() == []
