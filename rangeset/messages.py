from typing import Iterable

from termcolor import colored

from rangeset.range import Range

###############################################################################
# Output prefixes
###############################################################################

CHECKMARK    = '[' + colored("✓", "green") + ']'
CROSSMARK    = '[' + colored("✗", "red") + ']'
QUESTIONMARK = '[' + colored("?", "yellow") + ']'
INFOMARK     = '[' + colored("i", "blue") + ']'

def _message(prefix: str, raw_prefix: str, *args):
    msg = '\n'.join(str(arg) for arg in args)
    first = True
    for line in msg.split('\n'):
        if first: print(f"{prefix} {line}")
        else:     print(f"{' ' * len(raw_prefix)} {line}")
        first = False

# Use CROSSMARK for errors
def error(*msg): _message(CROSSMARK, '[✗]', *msg)

# Use QUESTIONMARK for warnings
def warning(*msg): _message(QUESTIONMARK, '[?]', *msg)

# Use INFOMARK for information
def info(*msg): _message(INFOMARK, '[i]', *msg)

# Use CHECKMARK for success
def success(*msg): _message(CHECKMARK, '[✓]', *msg)

###############################################################################
# Range sets
###############################################################################

def show_ranges(title: str, ranges: Iterable[Range]) -> None:
    lines = [str(rng) for rng in ranges]
    if not lines:
        lines = [colored("(empty)", "dark_grey")]
    info(title, *lines)

def show_membership(value, member: bool) -> None:
    if member:
        success(f"{value} is in the set")
    else:
        warning(f"{value} is not in the set")
