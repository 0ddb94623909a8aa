import time

from .models import AddressFamily


class ResultSet:
    """Per-family prefix records, kept in identifier-then-extraction order."""

    def __init__(self, families=tuple(AddressFamily)):
        self._records = {family: [] for family in families}

    def extend(self, family, records):
        self._records.setdefault(family, []).extend(records)

    def records(self, family):
        return list(self._records.get(family, []))

    def count(self, family):
        return len(self._records.get(family, []))

    def families(self):
        return list(self._records)

    def deduplicate(self):
        # Each family is reduced on its own; order becomes lexicographic by CIDR string.
        for family, records in self._records.items():
            unique = {r.cidr: r for r in records}
            records[:] = [unique[cidr] for cidr in sorted(unique)]

    def __len__(self):
        return sum(len(v) for v in self._records.values())


class ThrottleGate:
    """Paces dispatches: wait() sleeps `delay` seconds, except on the very first call."""

    def __init__(self, delay=0.0, sleep=time.sleep):
        self.delay = delay
        self._sleep = sleep
        self._opened = False

    def wait(self):
        if not self._opened:
            self._opened = True
            return
        if self.delay > 0:
            self._sleep(self.delay)
