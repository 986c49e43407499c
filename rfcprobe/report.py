"""
Console progress output
"""

import sys

from .transactor import is_error


class Colors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


class Reporter:
    """Prints one line per case as the suite runs. Purely advisory."""

    def __init__(self, stream=None, color=True, enabled=True):
        self.stream = stream or sys.stdout
        self.color = color
        self.enabled = enabled

    def _paint(self, text, *codes):
        if not self.color:
            return text
        return f"{''.join(codes)}{text}{Colors.ENDC}"

    def _print(self, text=""):
        if self.enabled:
            print(text, file=self.stream)

    def banner(self, config):
        self._print(self._paint("=" * 70, Colors.HEADER, Colors.BOLD))
        self._print(self._paint("RFC 7230 Compliance Probe", Colors.HEADER, Colors.BOLD))
        self._print(self._paint("=" * 70, Colors.HEADER, Colors.BOLD))
        self._print(f"Target: {config.target}:{config.port}  timeout: {config.timeout_ms}ms")
        self._print(f"Log:    {config.log_path}")

    def batch(self, batch):
        self._print()
        self._print(self._paint(f"--- {batch.title} ({len(batch)} cases) ---", Colors.BOLD))

    def case(self, case):
        if self.enabled:
            print(self._paint(f"[TEST] {case.name}", Colors.OKBLUE), end=" ", file=self.stream)
            self.stream.flush()

    def result(self, record, failed):
        line = record.first_line or "(empty response)"
        if failed:
            self._print(self._paint(line, Colors.FAIL))
        else:
            self._print(f"-> {line}  [expected: {record.expected_outcome}]")

    def summary(self, records):
        errors = sum(1 for record in records if is_error(record.first_line))
        self._print()
        self._print(self._paint("=" * 70, Colors.HEADER, Colors.BOLD))
        self._print(f"Records written: {len(records)}, transport errors: {errors}")
        self._print(self._paint("=" * 70, Colors.HEADER, Colors.BOLD))

    def preflight(self, ok, message):
        if ok:
            self._print(self._paint(f"✓ Preflight: {message}", Colors.OKGREEN))
        else:
            self._print(self._paint(f"⚠ Preflight: {message}", Colors.WARNING))
