import json
import logging

import pytest

from cloudinfo.logs import LogConfig, new_logger, set_standard_logger, to_map, with_fields


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_logger_writes_fields(capsys):
    logger = with_fields(new_logger(LogConfig(format="json", level="info")), {"service": "compute"})
    logger.info("hello")
    line = capsys.readouterr().out.strip()
    payload = json.loads(line)
    assert payload["msg"] == "hello"
    assert payload["level"] == "info"
    assert payload["service"] == "compute"


def test_logfmt_logger_writes_key_values(capsys):
    logger = with_fields(new_logger(LogConfig(format="logfmt", level="debug")), {"region": "eu-west-1"})
    logger.debug("two words")
    line = capsys.readouterr().out.strip()
    assert "level=debug" in line
    assert 'msg="two words"' in line
    assert "region=eu-west-1" in line


def test_level_filters_lower_messages(capsys):
    logger = new_logger(LogConfig(format="json", level="error"))
    logger.info("hidden")
    logger.error("shown")
    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["msg"] for line in lines] == ["shown"]


def test_unknown_level_keeps_info(capsys):
    logger = new_logger(LogConfig(format="json", level="nonsense"))
    assert logger.level == logging.INFO


def test_with_fields_merges_nested_context(capsys):
    base = new_logger(LogConfig(format="json"))
    logger = with_fields(with_fields(base, {"provider": "amazon"}), {"service": "eks"})
    logger.info("msg")
    payload = json.loads(capsys.readouterr().out.strip())
    assert payload["provider"] == "amazon"
    assert payload["service"] == "eks"


def test_with_fields_empty_returns_same_logger():
    base = new_logger(LogConfig())
    assert with_fields(base, {}) is base


def test_to_map_empty():
    assert to_map([]) == {}


def test_to_map_odd_length_pads_with_none():
    assert to_map(["a", 1, "b"]) == {"a": 1, "b": None}


def test_to_map_converts_keys_and_errors():
    assert to_map([1, "x", "err", ValueError("boom")]) == {"1": "x", "err": "boom"}


def test_set_standard_logger_forwards_at_info(restore_root):
    target = logging.Logger("target")
    collected = _ListHandler()
    target.addHandler(collected)

    set_standard_logger(target)
    logging.getLogger("some.module").warning("hello")

    assert [r.getMessage() for r in collected.records] == ["hello"]
    assert collected.records[0].levelno == logging.INFO