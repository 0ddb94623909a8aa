"""asngecko - look up the prefixes an ASN originates in the IRR."""

__version__ = "1.0.0"
