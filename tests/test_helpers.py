import json

import pytest

from log_parser.helpers import dump_to_file, verbosity_to_level
from log_parser.models import Event, LogLevel


def test_dump_events_to_file(tmp_path, logger):
    target = tmp_path / "out" / "events.json"
    events = [Event(timestamp=1, message="up", level=LogLevel.INFO)]
    assert dump_to_file(logger, str(target), events)
    assert json.loads(target.read_text()) == [{"timestamp": 1, "message": "up", "level": "Info"}]


def test_dump_rejects_unserializable_content(tmp_path, logger):
    with pytest.raises(TypeError):
        dump_to_file(logger, str(tmp_path / "x.json"), [object()])


@pytest.mark.parametrize("count, level", [(0, "INFO"), (1, "VERBOSE"), (2, "DEBUG"), (3, "SPAM"), (9, "SPAM")])
def test_verbosity_to_level(count, level):
    assert verbosity_to_level(count) == level
