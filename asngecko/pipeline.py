"""Query every identifier for every active family, then format and route the results."""

from . import console
from .collect import ResultSet, ThrottleGate
from .errors import QueryFailure
from .extract import extractor_for
from .formats import format_records
from .output import CONSOLE, plan_outputs, write_output


def resolve(config, client, gate=None):
    """Fill a ResultSet from the registry. Lenient unless config.strict."""
    gate = gate or ThrottleGate(config.throttle)
    results = ResultSet(config.families)
    failures = []

    for asn in config.asns:
        gate.wait()
        for family in config.families:
            server = config.server_for(family)
            try:
                raw = client.query(asn, family, server)
            except QueryFailure as e:
                if config.strict:
                    raise
                failures.append(e)
                console.warn(f"{e} - treating as no prefixes")
                continue
            records = extractor_for(family).extract(raw)
            console.debug(f"{asn} yielded {len(records)} {family.title} prefix(es) from {server}")
            results.extend(family, records)

    if config.uniq:
        results.deduplicate()
    if failures:
        console.debug(f"{len(failures)} failed queries were skipped")
    return results


def emit(config, results, plan=None):
    """Format each family and send it to its planned destination.

    Returns the number of families whose output could not be written.
    """
    plan = plan or plan_outputs(config)
    on_console = [f for f, dest in plan.items() if dest == CONSOLE]
    header = len(on_console) > 1
    errors = 0
    for family, destination in plan.items():
        text = format_records(results.records(family), config.output_format)
        try:
            write_output(family, text, destination, header=header)
        except OSError as e:
            console.error(f"cannot write {family.title} output to {destination}: {e.strerror or e}")
            errors += 1
    return errors


def run(config, client):
    console.configure(quiet=config.quiet, debug=config.debug)
    plan = plan_outputs(config)
    console.debug(f"querying {len(config.asns)} ASN(s) for {', '.join(f.title for f in config.families)}")
    for family, destination in plan.items():
        console.debug(f"{family.title} output -> {'console' if destination == CONSOLE else destination}")
    results = resolve(config, client)
    console.info(
        f"Resolved {len(config.asns)} ASN(s): "
        + ", ".join(f"{results.count(f)} {f.title}" for f in config.families)
        + " prefix(es)"
    )
    return emit(config, results, plan)
