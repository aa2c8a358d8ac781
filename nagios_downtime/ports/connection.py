"""Connection port definition (DTO)."""

from dataclasses import dataclass

__all__ = ["ConnectionConfig"]


@dataclass
class ConnectionConfig:
    """Where and how to reach the Nagios web interface.

    Attributes:
        protocol: URL scheme, "http" or "https".
        server: Host name of the Nagios web server.
        port: TCP port; 0 means "derive from protocol".
        username: HTTP basic auth user.
        password: HTTP basic auth password.
        timeout_sec: Total timeout applied to each HTTP request.
        verify_tls: Whether to verify the server certificate.
    """

    protocol: str
    server: str
    username: str
    password: str
    port: int = 0
    timeout_sec: float = 30.0
    verify_tls: bool = True

    def __repr__(self) -> str:
        return (
            f"ConnectionConfig(protocol={self.protocol!r}, server={self.server!r}, "
            f"port={self.port}, username={self.username!r}, password='***')"
        )
