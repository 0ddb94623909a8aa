import re

from .errors import UsageError

CANONICAL_ASN = re.compile(r"^AS[0-9]+$")
ASN_TOKEN = re.compile(r"(?:AS)?[0-9]+", re.IGNORECASE)
_LEADING_AS = re.compile(r"^as", re.IGNORECASE)
_SPLIT = re.compile(r"[\s,]+")


def normalize(token):
    """Return the canonical ``AS<digits>`` form of an ASN token."""
    token = token.strip()
    if CANONICAL_ASN.match(token):
        return token
    digits = _LEADING_AS.sub("", token)
    if not digits.isdigit():
        raise UsageError(f"not an ASN: '{token}'")
    return f"AS{digits}"


def split_asn_list(text):
    return [normalize(tok) for tok in _SPLIT.split(text.strip()) if tok]


def scan_asn_text(text):
    return [normalize(m.group(0)) for m in ASN_TOKEN.finditer(text)]


def read_asn_file(path):
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            text = f.read()
    except OSError as e:
        raise UsageError(f"cannot read ASN list file {path}: {e.strerror or e}") from e
    return scan_asn_text(text)


def collect_identifiers(inline=None, list_file=None):
    """Inline ASNs first, then the ones found in the list file. Repeats are kept."""
    asns = []
    for chunk in inline or []:
        asns.extend(split_asn_list(chunk))
    if list_file:
        asns.extend(read_asn_file(list_file))
    if not asns:
        raise UsageError("no ASNs given; use -a/--asn or -l/--list")
    return asns
