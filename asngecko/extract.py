import re

from .models import AddressFamily, PrefixRecord

IPV4_CIDR = re.compile(r"[0-9]+(?:\.[0-9]+){3}/[0-9]+")
ROUTE6_LINE = re.compile(r"^route6:\s*(\S+)")


class Extractor:
    """Turns raw registry text into PrefixRecords for one address family.

    Best-effort text matching only: tokens are not checked for being
    well-formed networks.
    """

    family = None

    def extract(self, text):
        return [PrefixRecord(cidr, self.family) for cidr in self.matches(text)]

    def matches(self, text):
        raise NotImplementedError


class IPv4Extractor(Extractor):
    family = AddressFamily.IPV4

    def matches(self, text):
        return IPV4_CIDR.findall(text)


class IPv6Extractor(Extractor):
    family = AddressFamily.IPV6

    def matches(self, text):
        found = []
        for line in text.splitlines():
            m = ROUTE6_LINE.match(line)
            if m:
                found.append(m.group(1))
        return found


_EXTRACTORS = {
    AddressFamily.IPV4: IPv4Extractor(),
    AddressFamily.IPV6: IPv6Extractor(),
}


def extractor_for(family):
    return _EXTRACTORS[family]


def extract(text, family):
    return extractor_for(family).extract(text)
