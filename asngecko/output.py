"""Where each family's text goes, and writing it there."""

from . import console

CONSOLE = "-"


def destination_for(family, config):
    explicit = config.explicit_output_for(family)
    if explicit:
        return explicit
    if config.console:
        return CONSOLE
    if config.output:
        if len(config.families) == 1:
            return config.output
        return f"{config.output}.{family.label}"
    return CONSOLE


def plan_outputs(config):
    """Decide every family's destination once, before anything is formatted."""
    return {family: destination_for(family, config) for family in config.families}


def write_output(family, text, destination, header=False):
    # Empty families produce no lines at all; headers and progress go to stderr.
    if destination == CONSOLE:
        if header:
            console.info(f"{family.title} prefixes:")
        if text:
            print(text)
        return
    with open(destination, "w") as f:
        if text:
            f.write(text + "\n")
    console.info(f"{family.title} prefixes written to: {destination}")
