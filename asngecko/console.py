import sys

# === Diagnostics ===
# Prefixed one-liners on stderr; stdout is reserved for prefix data.

_state = {"quiet": False, "debug": False}


def configure(quiet=False, debug=False):
    _state["quiet"] = quiet
    _state["debug"] = debug


def info(msg):
    if not _state["quiet"]:
        print(f"[+] {msg}", file=sys.stderr)


def warn(msg):
    if not _state["quiet"]:
        print(f"[!] {msg}", file=sys.stderr)


def debug(msg):
    if _state["debug"]:
        print(f"+DEBUG: {msg}", file=sys.stderr)


def error(msg):
    print(f"ERROR: {msg}", file=sys.stderr)
