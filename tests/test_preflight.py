"""Tests for the optional preflight request and the console reporter."""

import io

from rfcprobe.cases import Batch, TestCase
from rfcprobe.config import ProbeConfig
from rfcprobe.preflight import preflight
from rfcprobe.report import Colors, Reporter
from rfcprobe.runner import LogRecord


def test_preflight_reachable(http_server):
    config = ProbeConfig(target="127.0.0.1", port=http_server.server_address[1], timeout_ms=2000)

    ok, message = preflight(config)

    assert ok
    assert "answered 200" in message


def test_preflight_unreachable(closed_port):
    config = ProbeConfig(target="127.0.0.1", port=closed_port, timeout_ms=500)

    ok, message = preflight(config)

    assert not ok
    assert "unreachable" in message


def test_reporter_prints_one_line_per_case():
    out = io.StringIO()
    reporter = Reporter(stream=out, color=False)
    case = TestCase("obs_fold", "blocked", b"GET / HTTP/1.1\r\n\r\n")
    record = LogRecord.from_response("h", case, "HTTP/1.1 400 Bad Request\r\n\r\n")

    reporter.batch(Batch("Header fields", (case,)))
    reporter.case(case)
    reporter.result(record, failed=False)

    lines = out.getvalue().splitlines()
    assert "--- Header fields (1 cases) ---" in lines
    assert "[TEST] obs_fold -> HTTP/1.1 400 Bad Request  [expected: blocked]" in lines
    assert Colors.ENDC not in out.getvalue()


def test_reporter_summary_counts_errors():
    out = io.StringIO()
    reporter = Reporter(stream=out, color=False)
    case = TestCase("a", "allowed", b"x")
    records = [
        LogRecord.from_response("h", case, "ERROR: [Errno 111] Connection refused"),
        LogRecord.from_response("h", case, "HTTP/1.1 200 OK\r\n"),
    ]

    reporter.summary(records)

    assert "Records written: 2, transport errors: 1" in out.getvalue()


def test_disabled_reporter_is_silent():
    out = io.StringIO()
    reporter = Reporter(stream=out, enabled=False)

    reporter.banner(ProbeConfig())
    reporter.summary([])

    assert out.getvalue() == ""
