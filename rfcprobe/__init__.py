"""
rfc7230-probe: send raw, often malformed HTTP/1.1 to an intermediary
and record what comes back.
"""

from .cases import Batch, TestCase, default_batches
from .config import ProbeConfig
from .runner import LogRecord, SuiteRunner, escape_response, first_line
from .sink import CsvRecordSink
from .transactor import ERROR_MARKER, RawTransactor, transact

__version__ = "0.1.0"

__all__ = [
    "Batch",
    "TestCase",
    "default_batches",
    "ProbeConfig",
    "LogRecord",
    "SuiteRunner",
    "escape_response",
    "first_line",
    "CsvRecordSink",
    "ERROR_MARKER",
    "RawTransactor",
    "transact",
]
