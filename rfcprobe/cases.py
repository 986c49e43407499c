"""
Catalog of RFC 7230 probe cases

Each case is a literal byte sequence written onto the wire as-is. Many of
them are malformed on purpose. The expected outcome is a note for whoever
reads the log; nothing compares it against the response.
"""

from dataclasses import dataclass
from typing import Tuple

BLOCKED = "blocked"
ALLOWED = "allowed"
BLOCKED_OR_NORMALIZED = "blocked or normalized"
VENDOR_POLICY = "not blocked per vendor policy"

OVERSIZE_PADDING = 9000


@dataclass(frozen=True)
class TestCase:
    __test__ = False  # not a pytest class

    name: str
    expected_outcome: str
    raw_payload: bytes


@dataclass(frozen=True)
class Batch:
    title: str
    cases: Tuple[TestCase, ...]

    def __len__(self):
        return len(self.cases)

    def __iter__(self):
        return iter(self.cases)


def _case(name, expected_outcome, payload):
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    return TestCase(name, expected_outcome, payload)


def baseline_batch(host):
    """Well-formed control requests"""
    return Batch("Baseline", (
        _case("valid_get", ALLOWED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("valid_head", ALLOWED,
              f"HEAD / HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("valid_post_content_length", ALLOWED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nContent-Length: 5\r\n"
              "Connection: close\r\n\r\nhello"),
        _case("valid_http10_no_host", ALLOWED,
              "GET / HTTP/1.0\r\n\r\n"),
    ))


def start_line_batch(host):
    """Request-line violations (RFC 7230 section 3.1.1)"""
    return Batch("Request line", (
        _case("lowercase_method", BLOCKED,
              f"get / HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("unknown_method", BLOCKED,
              f"FOO / HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("missing_version", BLOCKED,
              f"GET /\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("invalid_version", BLOCKED,
              f"GET / HTTP/9.9\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("lowercase_version", BLOCKED,
              f"GET / http/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("tab_separator", BLOCKED,
              f"GET\t/\tHTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("double_space_separator", BLOCKED,
              f"GET  /  HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("space_in_uri", BLOCKED,
              f"GET /a b HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("leading_empty_lines", ALLOWED,
              f"\r\n\r\nGET / HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("bare_lf_line_endings", VENDOR_POLICY,
              f"GET / HTTP/1.1\nHost: {host}\nConnection: close\n\n"),
        _case("bare_cr_in_request_line", BLOCKED,
              f"GET /\r HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("nul_in_uri", BLOCKED,
              f"GET /\x00 HTTP/1.1\r\nHost: {host}\r\nConnection: close\r\n\r\n"),
        _case("non_ascii_in_uri", BLOCKED,
              b"GET /\xc3\xa9\xff HTTP/1.1\r\nHost: " + host.encode("utf-8")
              + b"\r\nConnection: close\r\n\r\n"),
        _case("oversized_request_line", BLOCKED,
              f"GET /{'A' * OVERSIZE_PADDING} HTTP/1.1\r\nHost: {host}\r\n"
              "Connection: close\r\n\r\n"),
    ))


def header_field_batch(host):
    """Header-field syntax violations (RFC 7230 section 3.2)"""
    return Batch("Header fields", (
        _case("missing_host", BLOCKED,
              "GET / HTTP/1.1\r\nConnection: close\r\n\r\n"),
        _case("duplicate_host", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nHost: evil.example\r\n"
              "Connection: close\r\n\r\n"),
        _case("whitespace_before_colon", BLOCKED,
              f"GET / HTTP/1.1\r\nHost : {host}\r\nConnection: close\r\n\r\n"),
        _case("whitespace_before_first_header", BLOCKED,
              f"GET / HTTP/1.1\r\n Host: {host}\r\nConnection: close\r\n\r\n"),
        _case("obs_fold", BLOCKED_OR_NORMALIZED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX-Folded: first\r\n second\r\n"
              "Connection: close\r\n\r\n"),
        _case("obs_fold_tab", BLOCKED_OR_NORMALIZED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX-Folded: first\r\n\tsecond\r\n"
              "Connection: close\r\n\r\n"),
        _case("missing_colon", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX-Broken value\r\n"
              "Connection: close\r\n\r\n"),
        _case("empty_header_name", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\n: value\r\nConnection: close\r\n\r\n"),
        _case("invalid_char_in_name", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX(Bad): 1\r\nConnection: close\r\n\r\n"),
        _case("tab_in_header_name", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX\tBad: 1\r\nConnection: close\r\n\r\n"),
        _case("bare_cr_in_header_value", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX-Test: a\rb\r\nConnection: close\r\n\r\n"),
        _case("nul_in_header_value", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX-Test: a\x00b\r\nConnection: close\r\n\r\n"),
        _case("non_ascii_header_value", VENDOR_POLICY,
              b"GET / HTTP/1.1\r\nHost: " + host.encode("utf-8")
              + b"\r\nX-Test: \xe2\x98\x83\x80\r\nConnection: close\r\n\r\n"),
        _case("oversized_header_value", BLOCKED,
              f"GET / HTTP/1.1\r\nHost: {host}\r\nX-Large: {'A' * OVERSIZE_PADDING}\r\n"
              "Connection: close\r\n\r\n"),
    ))


def framing_batch(host):
    """Message-body framing and smuggling probes (RFC 7230 section 3.3)"""
    return Batch("Message framing", (
        _case("duplicate_content_length", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nContent-Length: 6\r\n"
              "Content-Length: 5\r\nConnection: close\r\n\r\n12345SMUGGLED"),
        _case("negative_content_length", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nContent-Length: -1\r\n"
              "Connection: close\r\n\r\n"),
        _case("non_numeric_content_length", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nContent-Length: 5a\r\n"
              "Connection: close\r\n\r\nhello"),
        _case("cl_te", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nContent-Length: 13\r\n"
              "Transfer-Encoding: chunked\r\nConnection: close\r\n\r\n"
              "0\r\n\r\nSMUGGLED"),
        _case("te_cl", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: chunked\r\n"
              "Content-Length: 4\r\nConnection: close\r\n\r\n"
              "5c\r\nSMUGGLED_REQUEST\r\n0\r\n\r\n"),
        _case("te_duplicate", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: chunked\r\n"
              "Transfer-Encoding: identity\r\nConnection: close\r\n\r\n0\r\n\r\n"),
        _case("te_not_final_chunked", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: chunked, identity\r\n"
              "Connection: close\r\n\r\n0\r\n\r\n"),
        _case("te_obfuscated_case", BLOCKED_OR_NORMALIZED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: cHuNkEd\r\n"
              "Connection: close\r\n\r\n0\r\n\r\n"),
        _case("te_space_before_colon", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding : chunked\r\n"
              "Connection: close\r\n\r\n0\r\n\r\n"),
        _case("te_obs_fold", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding:\r\n chunked\r\n"
              "Connection: close\r\n\r\n0\r\n\r\n"),
        _case("te_in_http10", VENDOR_POLICY,
              f"POST / HTTP/1.0\r\nHost: {host}\r\nTransfer-Encoding: chunked\r\n"
              "\r\n0\r\n\r\n"),
        _case("invalid_chunk_size", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: chunked\r\n"
              "Connection: close\r\n\r\nzz\r\nhello\r\n0\r\n\r\n"),
        _case("chunk_size_overflow", BLOCKED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: chunked\r\n"
              "Connection: close\r\n\r\nFFFFFFFFFFFFFFFFF1\r\nhello\r\n0\r\n\r\n"),
        _case("valid_chunked", ALLOWED,
              f"POST / HTTP/1.1\r\nHost: {host}\r\nTransfer-Encoding: chunked\r\n"
              "Connection: close\r\n\r\n5\r\nhello\r\n0\r\n\r\n"),
    ))


def default_batches(host):
    """Every probe batch, in the order they are run and reported"""
    return (
        baseline_batch(host),
        start_line_batch(host),
        header_field_batch(host),
        framing_batch(host),
    )


def select_batches(batches, titles):
    """Keep only the batches whose title matches one of titles (case-insensitive)"""
    if not titles:
        return tuple(batches)
    wanted = {title.lower() for title in titles}
    return tuple(batch for batch in batches if batch.title.lower() in wanted)
