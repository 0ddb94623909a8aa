import argparse
import os
import sys

from . import __version__, console
from .errors import AsngeckoError
from .formats import FORMATS
from .identifiers import collect_identifiers
from .models import DEFAULT_SERVER, DEFAULT_TIMEOUT, TRANSPORTS, AddressFamily, QueryConfig
from .pipeline import run
from .registry import client_for

SERVER_FILE = os.path.expanduser("~/.asngecko-server")


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits 2 on bad usage; asngecko reserves 2 for strict-mode query failures."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def default_server(path=None):
    try:
        with open(path or SERVER_FILE, "r") as f:
            server = f.readline().strip()
            if server:
                return server
    except OSError:
        pass
    return DEFAULT_SERVER


def parse_arguments(argv=None):
    parser = ArgumentParser(
        prog="asngecko",
        description="Resolve ASNs to the IPv4/IPv6 prefixes they originate, using IRR whois servers",
    )
    src = parser.add_argument_group("input")
    src.add_argument("-a", "--asn", action="append", metavar="LIST",
                     help="ASNs, comma or space separated (AS123 or 123); may be repeated")
    src.add_argument("-l", "--list", metavar="FILE", help="File to scan for ASNs (anything matching AS123 or 123)")

    fam = parser.add_argument_group("address family")
    fam.add_argument("-4", dest="ipv4", action="store_true", help="IPv4 prefixes only")
    fam.add_argument("-6", dest="ipv6", action="store_true", help="IPv6 prefixes only")
    fam.add_argument("-b", "--both", action="store_true", help="IPv4 and IPv6 prefixes (default)")

    srv = parser.add_argument_group("registry")
    srv.add_argument("-s", "--server", metavar="HOST",
                     help=f"Whois server for both families (default: {DEFAULT_SERVER} or ~/.asngecko-server)")
    srv.add_argument("--server4", metavar="HOST", help="Whois server for IPv4 queries")
    srv.add_argument("--server6", metavar="HOST", help="Whois server for IPv6 queries")
    srv.add_argument("-t", "--throttle", type=float, default=0.0, metavar="SEC",
                     help="Seconds to wait between ASNs (default: 0)")
    srv.add_argument("--transport", default="socket", metavar="{" + ",".join(TRANSPORTS) + "}",
                     help="Talk whois directly over TCP/43 or run the system whois binary (default: socket)")
    srv.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, metavar="SEC",
                     help=f"Per-query timeout in seconds (default: {DEFAULT_TIMEOUT:g})")
    srv.add_argument("--strict", action="store_true", help="Abort on the first failed query instead of skipping it")

    out = parser.add_argument_group("output")
    out.add_argument("-o", "--output", metavar="FILE",
                     help="Write to FILE (FILE.ipv4 / FILE.ipv6 when both families are active)")
    out.add_argument("--output4", metavar="FILE", help="Write IPv4 prefixes to FILE")
    out.add_argument("--output6", metavar="FILE", help="Write IPv6 prefixes to FILE")
    out.add_argument("-c", "--console", action="store_true", help="Print to the console (overrides -o)")
    out.add_argument("-f", "--format", default="cidr", metavar="{" + ",".join(FORMATS) + "}",
                     help="Output format (default: cidr)")
    out.add_argument("-u", "--uniq", action="store_true", help="Remove duplicate prefixes and sort")
    out.add_argument("-q", "--quiet", action="store_true", help="No progress or warning messages")
    out.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def select_families(args):
    # A lone --output4/--output6 narrows the run to that family, whatever -4/-6/-b say.
    if args.output4 and not args.output6:
        return (AddressFamily.IPV4,)
    if args.output6 and not args.output4:
        return (AddressFamily.IPV6,)
    if args.both or args.ipv4 == args.ipv6:
        return (AddressFamily.IPV4, AddressFamily.IPV6)
    return (AddressFamily.IPV4,) if args.ipv4 else (AddressFamily.IPV6,)


def build_config(args):
    server = args.server or default_server()
    return QueryConfig(
        asns=tuple(collect_identifiers(args.asn, args.list)),
        families=select_families(args),
        server4=args.server4 or server,
        server6=args.server6 or server,
        throttle=args.throttle,
        output_format=args.format,
        uniq=args.uniq,
        output=args.output,
        output4=args.output4,
        output6=args.output6,
        console=args.console,
        quiet=args.quiet,
        strict=args.strict,
        debug=args.debug,
        transport=args.transport,
        timeout=args.timeout,
    )


def main(argv=None):
    args = parse_arguments(argv)
    try:
        config = build_config(args)
        failed_writes = run(config, client_for(config))
    except AsngeckoError as e:
        console.error(str(e))
        return e.exit_code
    return 1 if failed_writes else 0
