## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# scriptmain — Entry point for scripts that take commandline options and debug directives.
#

import os
import sys
import pdb
import code
import signal
from typing import Callable

from .types import DirectiveState
from .topics import DebugTopics


def _interrupt(signum, frame) -> None:
    sys.exit(1)

def _debug_interrupt(signum, frame) -> None:
    pdb.Pdb().set_trace(frame)


def set_signals() -> None:
    """Make Control-C terminate the script with status 1."""
    signal.signal(signal.SIGINT, _interrupt)


def enable_topics_from_env(topics: DebugTopics, environ=os.environ) -> None:
    # Topics may contain commas, e.g. `http(a,b)`, so the separator is `;`.
    for text in environ.get('SCRIPTMAIN_DEBUG', '').split(';'):
        if text.strip(): topics.enable(text.strip())


def enable_development_system(namespace: dict | None = None, banner: str | None = None) -> None:
    """Turn the process back into a development environment and run an interactive console.

    Control-C now enters the debugger on the interrupted frame instead of terminating.  Returns when
    the console reaches end of input (Control-D); `exit()` ends the process as usual.
    """
    signal.signal(signal.SIGINT, _debug_interrupt)
    if sys.platform != "win32": import readline

    if banner is None:
        banner = '\033[97m\033[48;5;30m INTERACTIVE. \033[0m main() completed; type Ctrl+D to exit.'
    console = code.InteractiveConsole(locals=namespace if namespace is not None else {})
    console.interact(banner=banner, exitmsg='')


def main(entry: Callable[[list[str]], object], argv: list[str] | None = None,
         state: DirectiveState | None = None, *, topics: DebugTopics | None = None,
         namespace: dict | None = None) -> None:
    """Call `entry` with the commandline arguments, then enter the console if `--interactive` was given.

    Without `state`, the process-wide directives shared with `scriptmain.api` are used, together with
    its topics.  Exceptions raised by `entry` propagate with their traceback.
    """
    if state is None:
        from . import api
        state = api._RUNTIME.state
        if topics is None: topics = api._RUNTIME.topics

    set_signals()
    if topics is not None:
        enable_topics_from_env(topics)

    entry(list(sys.argv[1:] if argv is None else argv))

    if state.interactive:
        enable_development_system(namespace if namespace is not None else getattr(entry, '__globals__', None))
