## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Commandline options for debugging and development.  The option argument is text such that these
# can be activated as e.g. `--debug='http(_)'` or `--spy=lists:append/3`.
#
#   --debug=Topic     enable printing debug messages for Topic
#   --spy=PI          place a spy point on the callable named by PI
#   --gspy=PI         as --spy, entering the debugger configured via sys.breakpointhook
#   --interactive     start an interactive console after main() completes
#

import sys
from typing import Callable, Iterable, NamedTuple

from .types import Option, DirectiveState
from .errors import ScriptError, DirectiveValueError
from .topics import DebugTopics, parse_topic
from .indicators import parse_indicator
from .breakpoints import SpyPoints


class DebugContext(NamedTuple):
    state: DirectiveState
    topics: DebugTopics
    spy_points: SpyPoints


def _text_value(option: Option) -> str:
    if isinstance(option.value, bool):
        raise DirectiveValueError(option.name, option.value)
    return str(option.value)


def _interactive(option: Option, ctx: DebugContext) -> bool:
    # Only `--interactive` or `--interactive=true` is a directive, other values belong to the application.
    if option.value is not True and option.value != 'true': return False
    ctx.state.set_interactive()
    return True

def _debug(option: Option, ctx: DebugContext) -> bool:
    ctx.topics.enable(parse_topic(_text_value(option)))
    return True

def _spy(option: Option, ctx: DebugContext) -> bool:
    ctx.spy_points.spy(parse_indicator(_text_value(option)))
    return True

def _gspy(option: Option, ctx: DebugContext) -> bool:
    ctx.spy_points.spy(parse_indicator(_text_value(option)), graphical=True)
    return True


DIRECTIVES: dict[str, Callable[[Option, DebugContext], bool]] = {
    'interactive': _interactive,
    'debug': _debug,
    'spy': _spy,
    'gspy': _gspy,
}


def parse_debug_options(options: Iterable[Option], ctx: DebugContext) -> list[Option]:
    """Activate the debug directives among `options` and return all the others, in order.

    Raises IndicatorParseError, TopicParseError or DirectiveValueError for malformed directives.
    """
    survivors: list[Option] = []
    for option in options:
        handler = DIRECTIVES.get(option.name)
        if handler is None or not handler(option, ctx):
            survivors.append(option)
    return survivors


def cli_parse_debug_options(options: Iterable[Option], ctx: DebugContext) -> list[Option]:
    """As parse_debug_options(), but a malformed directive is reported and the process exits with 1."""
    try:
        return parse_debug_options(options, ctx)
    except ScriptError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.exit(1)
