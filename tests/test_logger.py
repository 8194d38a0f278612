"""Tests for the markdown game log."""

from asteroid_dodge.logger import GameLogger


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def test_log_starts_with_table_header(tmp_path):
    path = tmp_path / "log.md"
    GameLogger(str(path))
    text = read(path)
    assert text.startswith("# Asteroid Dodge Game Log")
    assert "| Timestamp | Event | Details |" in text


def test_events_are_appended_as_rows(tmp_path):
    path = tmp_path / "log.md"
    logger = GameLogger(str(path))
    logger.log_hit((200.4, 63.6))
    logger.log_game_over(12)
    logger.log_restart()
    logger.log_resize(640, 960)
    rows = [line for line in read(path).splitlines() if line.startswith("| ") and "Timestamp" not in line]
    assert len(rows) == 4
    assert "Player struck at (200, 64)" in rows[0]
    assert "Final score 12" in rows[1]
    assert "New game started" in rows[2]
    assert "640x960" in rows[3]


def test_unwritable_log_does_not_raise(tmp_path, capsys):
    logger = GameLogger(str(tmp_path / "missing_dir" / "log.md"))
    logger.log_restart()
    out = capsys.readouterr().out
    assert "Failed to initialize log file" in out
    assert "Failed to log restart" in out
