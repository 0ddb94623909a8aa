"""Exceptions raised by asngecko. Each carries the process exit code it maps to."""


class AsngeckoError(Exception):
    exit_code = 1


class UsageError(AsngeckoError):
    """Bad flags, an empty ASN set or an unreadable list file."""


class ConfigurationError(UsageError):
    pass


class FormatError(ConfigurationError):
    def __init__(self, output_format, choices):
        self.output_format = output_format
        super().__init__(
            f"unknown output format '{output_format}' (choose from {', '.join(choices)})"
        )


class QueryFailure(AsngeckoError):
    """A registry query that errored out or exited with a non-zero status."""

    exit_code = 2

    def __init__(self, identifier, family, server, reason):
        self.identifier = identifier
        self.family = family
        self.server = server
        self.reason = reason
        super().__init__(f"{family.name} query for {identifier} against {server} failed: {reason}")
