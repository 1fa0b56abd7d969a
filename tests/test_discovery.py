from pathlib import Path

from log_parser.parsing.discovery import FileDiscoverer


def _touch(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def test_missing_root_warns_and_returns_nothing(tmp_path, logger):
    files = FileDiscoverer(logger).discover(tmp_path / "nope", "*")
    assert files == []
    logger.warning.assert_called_once()
    assert "does not exist" in logger.warning.call_args.args[0]


def test_glob_matches_files_sorted(tmp_path, logger):
    for name in ("c.log", "a.log", "b.log", "notes.txt"):
        _touch(tmp_path / name)
    files = FileDiscoverer(logger).discover(tmp_path, "*.log")
    assert [f.name for f in files] == ["a.log", "b.log", "c.log"]
    logger.warning.assert_not_called()


def test_directories_are_skipped_with_warning(tmp_path, logger):
    _touch(tmp_path / "app.log")
    (tmp_path / "archive.log").mkdir()
    files = FileDiscoverer(logger).discover(tmp_path, "*.log")
    assert files == [tmp_path / "app.log"]
    assert "is a directory" in logger.warning.call_args.args[0]


def test_single_trailing_separator_is_stripped(tmp_path, logger):
    _touch(tmp_path / "app.log")
    files = FileDiscoverer(logger).discover(f"{tmp_path}/", "*.log")
    assert files == [tmp_path / "app.log"]


def test_recursive_pattern(tmp_path, logger):
    _touch(tmp_path / "top.log")
    _touch(tmp_path / "svc" / "a" / "deep.log")
    files = FileDiscoverer(logger).discover(tmp_path, "**/*.log")
    assert sorted(f.name for f in files) == ["deep.log", "top.log"]


def test_unsorted_discovery_returns_same_set(tmp_path, logger):
    for name in ("z.log", "m.log", "a.log"):
        _touch(tmp_path / name)
    files = FileDiscoverer(logger, sort=False).discover(tmp_path, "*.log")
    assert sorted(f.name for f in files) == ["a.log", "m.log", "z.log"]


def test_no_match(tmp_path, logger):
    _touch(tmp_path / "app.txt")
    assert FileDiscoverer(logger).discover(tmp_path, "*.log") == []


def test_root_glob_characters_are_literal(tmp_path, logger):
    root = tmp_path / "logs[2020]"
    _touch(root / "app.log")
    _touch(tmp_path / "logs2" / "other.log")
    files = FileDiscoverer(logger).discover(root, "*.log")
    assert files == [root / "app.log"]
