"""Registry clients: one WHOIS round trip per (identifier, family, server)."""

import socket
import subprocess

from . import console
from .errors import QueryFailure
from .models import DEFAULT_TIMEOUT, AddressFamily

WHOIS_PORT = 43


def build_query(identifier, family):
    if family is AddressFamily.IPV4:
        return f"-i origin {identifier}"
    return f"-T route6 -i origin {identifier}"


class SocketWhoisClient:
    """Speaks RFC 3912 directly: send the query line, read until the server closes."""

    def __init__(self, port=WHOIS_PORT, timeout=DEFAULT_TIMEOUT):
        self.port = port
        self.timeout = timeout

    def query(self, identifier, family, server):
        q = build_query(identifier, family)
        console.debug(f"whois -h {server} -- '{q}'")
        chunks = []
        try:
            with socket.create_connection((server, self.port), timeout=self.timeout) as sock:
                sock.sendall(f"{q}\r\n".encode("ascii"))
                while True:
                    data = sock.recv(4096)
                    if not data:
                        break
                    chunks.append(data)
        except OSError as e:
            raise QueryFailure(identifier, family, server, str(e)) from e
        return b"".join(chunks).decode("latin-1", errors="replace")


class WhoisCommandClient:
    """Shells out to the system whois binary; a non-zero exit status is a failure."""

    def __init__(self, binary="whois", timeout=DEFAULT_TIMEOUT):
        self.binary = binary
        self.timeout = timeout

    def query(self, identifier, family, server):
        cmd = [self.binary, "-h", server, "--", build_query(identifier, family)]
        console.debug(" ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise QueryFailure(identifier, family, server, str(e)) from e
        if result.returncode != 0:
            reason = result.stderr.strip() or f"exit status {result.returncode}"
            raise QueryFailure(identifier, family, server, reason)
        return result.stdout


def client_for(config):
    if config.transport == "whois":
        return WhoisCommandClient(timeout=config.timeout)
    return SocketWhoisClient(timeout=config.timeout)
