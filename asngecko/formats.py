import json

from .errors import FormatError

FORMATS = ("cidr", "csv", "json")


def _cidr(records):
    return "\n".join(r.cidr for r in records)


def _csv(records):
    return "\n".join(f"{r.cidr},{r.family.value}" for r in records)


def _json(records):
    return json.dumps([r.cidr for r in records])


_FORMATTERS = {
    "cidr": _cidr,
    "csv": _csv,
    "json": _json,
}


def format_records(records, output_format):
    """Serialize one family's records. The result carries no trailing newline."""
    try:
        formatter = _FORMATTERS[output_format]
    except KeyError:
        raise FormatError(output_format, FORMATS) from None
    return formatter(records)
