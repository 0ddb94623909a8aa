from asngecko.collect import ResultSet, ThrottleGate
from asngecko.models import AddressFamily, PrefixRecord

V4 = AddressFamily.IPV4
V6 = AddressFamily.IPV6


def recs(family, *cidrs):
    return [PrefixRecord(c, family) for c in cidrs]


def test_extend_preserves_order_and_duplicates():
    results = ResultSet()
    results.extend(V4, recs(V4, "203.0.113.0/24", "198.51.100.0/23"))
    results.extend(V4, recs(V4, "203.0.113.0/24"))
    assert [r.cidr for r in results.records(V4)] == ["203.0.113.0/24", "198.51.100.0/23", "203.0.113.0/24"]
    assert results.records(V6) == []
    assert len(results) == 3


def test_deduplicate_sorts_each_family_on_its_own():
    results = ResultSet()
    results.extend(V4, recs(V4, "203.0.113.0/24", "198.51.100.0/23", "203.0.113.0/24", "198.51.100.0/23"))
    results.extend(V6, recs(V6, "2001:db8:1000::/36", "2001:db8::/32", "2001:db8:1000::/36"))
    before = [r.cidr for r in results.records(V4)]
    results.deduplicate()
    after = [r.cidr for r in results.records(V4)]
    assert after == sorted(set(before)) == ["198.51.100.0/23", "203.0.113.0/24"]
    assert [r.cidr for r in results.records(V6)] == ["2001:db8:1000::/36", "2001:db8::/32"]


def test_restricted_families():
    results = ResultSet((V6,))
    assert results.families() == [V6]
    assert results.count(V4) == 0


def test_throttle_gate_sleeps_between_calls_only():
    slept = []
    gate = ThrottleGate(1.5, sleep=slept.append)
    for _ in range(3):
        gate.wait()
    assert slept == [1.5, 1.5]


def test_throttle_gate_zero_never_sleeps():
    slept = []
    gate = ThrottleGate(0, sleep=slept.append)
    gate.wait()
    gate.wait()
    assert slept == []
