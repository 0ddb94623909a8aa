import pytest

from asngecko import cli, console
from asngecko.errors import QueryFailure
from asngecko.models import AddressFamily

RADB_AS1234_V4 = """\
route:          203.0.113.0/24
descr:          Example route
origin:         AS1234
mnt-by:         MAINT-AS1234
source:         RADB

route:          198.51.100.0/23
descr:          Example aggregate
origin:         AS1234
remarks:        also announced as 203.0.113.0/24 elsewhere
source:         RADB

route:          198.51.100.0/23
origin:         AS1234
source:         ARIN
"""

RADB_AS1234_V6 = """\
route6:         2001:db8::/32
origin:         AS1234
source:         RADB

route6:         2001:db8:1000::/36
descr:          route6: not-a-field-label
origin:         AS1234
source:         RADB
"""


class FakeRegistryClient:
    """Canned whois answers keyed by (identifier, family); exceptions are raised."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def query(self, identifier, family, server):
        self.calls.append((identifier, family, server))
        answer = self.responses.get((identifier, family), "")
        if isinstance(answer, Exception):
            raise answer
        return answer


def failure(identifier, family, server="whois.radb.net"):
    return QueryFailure(identifier, family, server, "connection refused")


@pytest.fixture(autouse=True)
def reset_console():
    console.configure()
    yield
    console.configure()


@pytest.fixture(autouse=True)
def no_server_file(monkeypatch, tmp_path):
    monkeypatch.setattr(cli, "SERVER_FILE", str(tmp_path / "no-such-server-file"))


@pytest.fixture
def registry():
    return FakeRegistryClient({
        ("AS1234", AddressFamily.IPV4): RADB_AS1234_V4,
        ("AS1234", AddressFamily.IPV6): RADB_AS1234_V6,
    })


@pytest.fixture
def use_registry(monkeypatch, registry):
    monkeypatch.setattr(cli, "client_for", lambda config: registry)
    return registry
