import sqlite3

import pytest

from laptop_api import cli
from laptop_api.core.config import Settings


@pytest.fixture
def use_settings(monkeypatch):
    def _use(settings: Settings) -> None:
        monkeypatch.setattr(cli, "get_settings", lambda: settings)

    return _use


def test_init_db_creates_table(tmp_path, use_settings, capsys):
    db_path = tmp_path / "cli.db"
    use_settings(Settings(DATABASE_URL=f"sqlite+aiosqlite:///{db_path}", _env_file=None))

    assert cli.main(["init-db"]) == 0
    assert "laptops table is ready" in capsys.readouterr().out

    with sqlite3.connect(db_path) as conn:
        columns = [row[1] for row in conn.execute("PRAGMA table_info(laptops)")]
    assert columns == ["id", "name", "description", "price", "processor", "ram", "storage", "display", "os", "graphics"]


def test_init_db_failure_exit_code(tmp_path, use_settings):
    use_settings(Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'nope' / 'cli.db'}", _env_file=None))
    assert cli.main(["init-db"]) == 1


def test_unknown_command():
    with pytest.raises(SystemExit):
        cli.main(["drop-db"])
