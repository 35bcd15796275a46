import logging

import pytest

from sree.logsetup import MAX_LOG_FILES, MAX_LOG_SIZE, init, rotate_logs_if_needed


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    sree_level = logging.getLogger("sree").level
    yield
    for handler in root.handlers:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.getLogger("sree").setLevel(sree_level)


def _big(path):
    with open(path, "wb") as fh:
        fh.truncate(MAX_LOG_SIZE)


def test_rotate_missing_file_creates_nothing(tmp_path):
    rotate_logs_if_needed(tmp_path / "sree.log")
    assert list(tmp_path.iterdir()) == []


def test_small_file_is_left_alone(tmp_path):
    log = tmp_path / "sree.log"
    log.write_text("short")
    rotate_logs_if_needed(log)
    assert log.read_text() == "short"
    assert not (tmp_path / "sree.log.1").exists()


def test_large_file_is_rotated(tmp_path):
    log = tmp_path / "sree.log"
    _big(log)
    (tmp_path / "sree.log.1").write_text("older")
    rotate_logs_if_needed(log)
    assert not log.exists()
    assert (tmp_path / "sree.log.1").stat().st_size == MAX_LOG_SIZE
    assert (tmp_path / "sree.log.2").read_text() == "older"


def test_oldest_log_is_dropped(tmp_path):
    log = tmp_path / "sree.log"
    _big(log)
    (tmp_path / f"sree.log.{MAX_LOG_FILES}").write_text("oldest")
    (tmp_path / f"sree.log.{MAX_LOG_FILES - 1}").write_text("next")
    rotate_logs_if_needed(log)
    assert not log.exists()
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["sree.log.1", f"sree.log.{MAX_LOG_FILES}"]
    assert (tmp_path / "sree.log.1").stat().st_size == MAX_LOG_SIZE
    assert (tmp_path / f"sree.log.{MAX_LOG_FILES}").read_text() == "next"


def test_init_writes_log_file(tmp_path, clean_root, monkeypatch):
    monkeypatch.delenv("SREE_LOG", raising=False)
    log_dir = tmp_path / "nested" / "logs"
    path = init(log_dir)
    assert path == log_dir / "sree.log"
    assert "Logging initialized" in path.read_text()
    assert logging.getLogger("sree").level == logging.DEBUG


def test_init_rejects_unknown_level(tmp_path, clean_root, monkeypatch):
    monkeypatch.setenv("SREE_LOG", "loudest")
    with pytest.raises(ValueError):
        init(tmp_path)