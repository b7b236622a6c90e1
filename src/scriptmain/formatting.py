## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import Option


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_item(it) -> str:
    if isinstance(it, list):
        return '[' + ' '.join(format_item(i) for i in it) + ']'
    if isinstance(it, str): return '"' + it.replace('"', '\\"') + '"'
    if isinstance(it, bool): return str(it).lower()
    return str(it)

def format_option(option: Option) -> str:
    return f"\033[97m{option.name}\033[0m = {format_item(option.value)}"
