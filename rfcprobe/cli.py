#!/usr/bin/env python3
"""
Command line entry point: run the probe catalog against one target
"""

import argparse
import sys

from .cases import default_batches, select_batches
from .config import (
    DEFAULT_LOG_PATH,
    DEFAULT_TIMEOUT_MS,
    SERVER_HOST,
    SERVER_PORT,
    ProbeConfig,
)
from .preflight import preflight
from .report import Reporter
from .runner import SuiteRunner
from .sink import CsvRecordSink


def build_parser():
    p = argparse.ArgumentParser(
        prog="rfc7230-probe",
        description="Send raw, malformed HTTP/1.1 requests and log the raw replies.",
    )
    p.add_argument("--host", default=SERVER_HOST, help="target host (default: %(default)s)")
    p.add_argument("--port", default=SERVER_PORT, type=int, help="target port (default: %(default)s)")
    p.add_argument("--timeout-ms", default=DEFAULT_TIMEOUT_MS, type=int,
                   help="connect and per-read timeout in milliseconds (default: %(default)s)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="CSV file to append to (default: %(default)s)")
    p.add_argument("--batch", action="append", default=[], metavar="TITLE",
                   help="only run the named batch; may be repeated")
    p.add_argument("--list", action="store_true", help="list the catalog and exit")
    p.add_argument("--preflight", action="store_true",
                   help="make one well-formed request first and report whether the target answers")
    p.add_argument("--no-color", action="store_true", help="disable ANSI colours")
    return p


def list_catalog(batches, out=None):
    out = out or sys.stdout
    for batch in batches:
        print(f"{batch.title}:", file=out)
        for case in batch:
            print(f"  {case.name:<36} {case.expected_outcome} ({len(case.raw_payload)} bytes)", file=out)


def main(argv=None, runner_class=SuiteRunner):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ProbeConfig(
            target=args.host,
            port=args.port,
            timeout_ms=args.timeout_ms,
            log_path=args.log,
        )
    except ValueError as e:
        parser.error(str(e))

    batches = select_batches(default_batches(config.target), args.batch)
    if args.list:
        list_catalog(batches)
        return 0
    if not batches:
        parser.error(f"no batch matches {', '.join(args.batch)}")

    reporter = Reporter(color=not args.no_color)
    reporter.banner(config)

    if args.preflight:
        reporter.preflight(*preflight(config))

    runner = runner_class(reporter=reporter)
    with CsvRecordSink(config.log_path) as sink:
        runner.run(config, batches, sink)
    return 0


if __name__ == "__main__":
    sys.exit(main())
