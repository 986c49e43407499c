"""
Run configuration for a probe suite
"""

from dataclasses import dataclass

# Test configuration
SERVER_HOST = "localhost"
SERVER_PORT = 8080
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_LOG_PATH = "logs/rfc7230_probe.csv"


@dataclass(frozen=True)
class ProbeConfig:
    """Target and timeout budget shared by every case of one run"""

    target: str = SERVER_HOST
    port: int = SERVER_PORT
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    log_path: str = DEFAULT_LOG_PATH

    def __post_init__(self):
        if not self.target:
            raise ValueError("target host must not be empty")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout_ms}ms")

    @property
    def timeout(self):
        """Timeout budget in seconds, as the socket module wants it"""
        return self.timeout_ms / 1000.0
