"""
Append-only CSV log of probe results
"""

import csv
import os

FIELDNAMES = [
    "timestamp",
    "target_host",
    "test_name",
    "expected_outcome",
    "first_line",
    "full_response_escaped",
]


class CsvRecordSink:
    """Appends one row per LogRecord; the file is never truncated.

    Use as a context manager: entering creates the parent directory if
    needed and opens the file for appending, leaving closes it.
    """

    def __init__(self, path):
        self.path = path
        self._file = None
        self._writer = None
        self.written = 0

    def open(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        is_new = not os.path.exists(self.path) or os.path.getsize(self.path) == 0
        self._file = open(self.path, "a", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        if is_new:
            self._writer.writerow(FIELDNAMES)
            self._file.flush()
        return self

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def append(self, record):
        """Write a record and flush it so a crash never loses earlier rows"""
        if self._writer is None:
            raise RuntimeError(f"sink {self.path} is not open")
        self._writer.writerow(record.as_row())
        self._file.flush()
        self.written += 1

