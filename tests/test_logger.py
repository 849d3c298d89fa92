import io
import json

import pytest

from tilepath.logger import NoopLogger, StdLogger


def test_plain_lines():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.info("graph_loaded", capacity=5, node_count=2)
    log.info("bare")
    assert buf.getvalue() == "info graph_loaded capacity=5 node_count=2\ninfo bare\n"


def test_level_filtering():
    buf = io.StringIO()
    log = StdLogger(level="warning", stream=buf)
    log.debug("hidden")
    log.info("hidden")
    log.warning("shown")
    log.error("shown_too", kind="ParseError")
    assert buf.getvalue().splitlines() == ["warning shown", "error shown_too kind=ParseError"]


def test_json_lines():
    buf = io.StringIO()
    log = StdLogger(level="debug", json_fmt=True, stream=buf)
    log.debug("edge", u=1, v=2, w=10)
    assert json.loads(buf.getvalue()) == {"level": "debug", "event": "edge", "u": 1, "v": 2, "w": 10}


def test_unknown_level():
    with pytest.raises(ValueError):
        StdLogger(level="trace")


def test_noop_logger_accepts_events():
    log = NoopLogger()
    log.debug("x", a=1)
    log.info("x")
    log.warning("x")
    log.error("x")
