"""
Raw TCP request/response engine

Writes an arbitrary byte sequence onto a fresh connection and collects
whatever the peer sends back until it closes the connection or goes
quiet for longer than the timeout. Nothing here knows about HTTP.
"""

import enum
import selectors
import socket
from typing import NamedTuple

ERROR_MARKER = "ERROR: "
RECV_SIZE = 4096

# Responses are decoded one byte per character so the text is the exact
# octet sequence the peer sent.
RESPONSE_ENCODING = "latin-1"


class ReadOutcome(enum.Enum):
    DATA = "data"
    EOF = "eof"
    DEADLINE = "deadline"


class ReadResult(NamedTuple):
    outcome: ReadOutcome
    data: bytes = b""


def read_chunk(sock, timeout, size=RECV_SIZE):
    """Wait up to timeout seconds for the socket and report what happened"""
    with selectors.DefaultSelector() as selector:
        selector.register(sock, selectors.EVENT_READ)
        if not selector.select(timeout):
            return ReadResult(ReadOutcome.DEADLINE)

    chunk = sock.recv(size)
    if not chunk:
        return ReadResult(ReadOutcome.EOF)
    return ReadResult(ReadOutcome.DATA, chunk)


def is_error(response):
    """True when the text is an error string rather than peer output"""
    return response.startswith(ERROR_MARKER)


def encode_payload(raw_payload):
    if isinstance(raw_payload, str):
        return raw_payload.encode("utf-8")
    return bytes(raw_payload)


class RawTransactor:
    """One connect / write / read / close cycle per call, never raises"""

    def __init__(self, recv_size=RECV_SIZE):
        self.recv_size = recv_size

    def connect(self, host, port, timeout):
        # The timeout stays on the socket so a peer that never reads
        # cannot stall sendall forever.
        return socket.create_connection((host, port), timeout=timeout)

    def read_until_idle(self, sock, timeout):
        """Accumulate response bytes until EOF or a read stalls past timeout.

        A reset after the peer has already answered ends the read like EOF;
        the reply is what we came for. A fault before any byte arrived is
        raised to the caller.
        """
        response = bytearray()
        while True:
            try:
                result = read_chunk(sock, timeout, self.recv_size)
            except OSError:
                if response:
                    return bytes(response)
                raise
            if result.outcome is not ReadOutcome.DATA:
                return bytes(response)
            response += result.data

    def transact(self, host, port, raw_payload, timeout_ms):
        """Send raw_payload verbatim and return the raw response as text"""
        timeout = timeout_ms / 1000.0
        try:
            sock = self.connect(host, port, timeout)
        except socket.timeout:
            return f"{ERROR_MARKER}connect timeout after {timeout_ms}ms to {host}:{port}"
        except Exception as e:
            return f"{ERROR_MARKER}{type(e).__name__}: {e}"

        try:
            try:
                sock.sendall(encode_payload(raw_payload))
            except socket.timeout:
                return f"{ERROR_MARKER}write timeout after {timeout_ms}ms to {host}:{port}"
            response = self.read_until_idle(sock, timeout)
        except Exception as e:
            return f"{ERROR_MARKER}{type(e).__name__}: {e}"
        finally:
            sock.close()

        return response.decode(RESPONSE_ENCODING)


def transact(host, port, raw_payload, timeout_ms):
    """Module-level shortcut for a single transaction"""
    return RawTransactor().transact(host, port, raw_payload, timeout_ms)
