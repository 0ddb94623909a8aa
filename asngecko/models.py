from dataclasses import dataclass
from enum import Enum

from .errors import ConfigurationError, FormatError
from .formats import FORMATS
from .identifiers import CANONICAL_ASN

DEFAULT_SERVER = "whois.radb.net"
DEFAULT_TIMEOUT = 30.0
TRANSPORTS = ("socket", "whois")


class AddressFamily(Enum):
    IPV4 = 4
    IPV6 = 6

    @property
    def label(self):
        return f"ipv{self.value}"

    @property
    def title(self):
        return f"IPv{self.value}"


@dataclass(frozen=True)
class PrefixRecord:
    cidr: str
    family: AddressFamily

    def __str__(self):
        return self.cidr


@dataclass(frozen=True)
class QueryConfig:
    """Everything one run needs, built once by the CLI and passed down explicitly."""

    asns: tuple
    families: tuple = (AddressFamily.IPV4, AddressFamily.IPV6)
    server4: str = DEFAULT_SERVER
    server6: str = DEFAULT_SERVER
    throttle: float = 0.0
    output_format: str = "cidr"
    uniq: bool = False
    output: str = None
    output4: str = None
    output6: str = None
    console: bool = False
    quiet: bool = False
    strict: bool = False
    debug: bool = False
    transport: str = "socket"
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        # Checked up front so a bad value never reaches the network.
        if self.output_format not in FORMATS:
            raise FormatError(self.output_format, FORMATS)
        if self.throttle < 0:
            raise ConfigurationError(f"throttle must be >= 0, got {self.throttle}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be > 0, got {self.timeout}")
        if self.transport not in TRANSPORTS:
            raise ConfigurationError(f"unknown transport '{self.transport}'")
        if not self.families:
            raise ConfigurationError("no address family selected")
        for asn in self.asns:
            if not CANONICAL_ASN.match(asn):
                raise ConfigurationError(f"identifier '{asn}' is not in ASnnn form")
        # Query order is always IPv4 then IPv6, whatever order the flags came in.
        ordered = tuple(f for f in AddressFamily if f in self.families)
        object.__setattr__(self, "families", ordered)

    def server_for(self, family):
        return self.server4 if family is AddressFamily.IPV4 else self.server6

    def explicit_output_for(self, family):
        return self.output4 if family is AddressFamily.IPV4 else self.output6
