"""Alembic revision checks (no database required)."""

from pathlib import Path

from alembic.config import Config
from alembic.script import ScriptDirectory

from app.stores.postgres import Base

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"


def _script_directory() -> ScriptDirectory:
    config = Config()
    config.set_main_option("script_location", str(ALEMBIC_DIR))
    return ScriptDirectory.from_config(config)


def test_single_head():
    assert _script_directory().get_heads() == ["e7f9a1b3c5d2"]


def test_revisions_chain_from_base():
    revisions = list(_script_directory().walk_revisions())
    assert [r.revision for r in revisions] == ["e7f9a1b3c5d2", "c4d2b8e6f013", "a1c3e5f7b901"]
    assert revisions[-1].down_revision is None


def test_migrations_create_every_model_table():
    source = "\n".join(p.read_text() for p in (ALEMBIC_DIR / "versions").glob("*.py"))
    for table_name in Base.metadata.tables:
        assert f'op.create_table(\n        "{table_name}"' in source
