"""
Runs probe batches against one target and records one row per case
"""

from dataclasses import astuple, dataclass
from datetime import datetime, timezone

from .report import Reporter
from .transactor import RawTransactor, is_error

CR_GLYPH = "\u240d"  # ␍
LF_GLYPH = "\u240a"  # ␊

# ASCII only: \x85 and \xa0 are response octets, not whitespace.
ASCII_WHITESPACE = " \t\r\n\x0b\x0c"


def first_line(response):
    """First line of the response with surrounding whitespace stripped"""
    return response.split("\n", 1)[0].strip(ASCII_WHITESPACE)


def escape_response(response):
    """Make the response fit in a single CSV cell"""
    return response.replace("\r", CR_GLYPH).replace("\n", LF_GLYPH)


@dataclass(frozen=True)
class LogRecord:
    timestamp: str
    target_host: str
    test_name: str
    expected_outcome: str
    first_line: str
    full_response_escaped: str

    @classmethod
    def from_response(cls, target_host, case, response, now=None):
        now = now or datetime.now(timezone.utc)
        return cls(
            timestamp=now.isoformat(timespec="milliseconds"),
            target_host=target_host,
            test_name=case.name,
            expected_outcome=case.expected_outcome,
            first_line=first_line(response),
            full_response_escaped=escape_response(response),
        )

    def as_row(self):
        return list(astuple(self))


class SuiteRunner:
    """Sequentially sends every case of every batch, one connection each"""

    def __init__(self, transactor=None, reporter=None):
        self.transactor = transactor or RawTransactor()
        self.reporter = reporter or Reporter(enabled=False)

    def run_case(self, config, case):
        response = self.transactor.transact(
            config.target, config.port, case.raw_payload, config.timeout_ms
        )
        return LogRecord.from_response(config.target, case, response)

    def run(self, config, batches, sink):
        """Run all batches in order and return the records appended to sink"""
        records = []
        for batch in batches:
            self.reporter.batch(batch)
            for case in batch:
                self.reporter.case(case)
                record = self.run_case(config, case)
                sink.append(record)
                records.append(record)
                self.reporter.result(record, is_error(record.first_line))
        self.reporter.summary(records)
        return records
