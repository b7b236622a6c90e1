## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from dataclasses import dataclass, field


OptionValue = bool | int | float | str


@dataclass(frozen=True)
class Option:
    """Structured option `name=value` from a long commandline argument, or built by hand."""
    name: str
    value: OptionValue
    # Provenance only, parsed and hand-built options with the same name/value are equal.
    token: str | None = field(default=None, compare=False)
    index: int | None = field(default=None, compare=False)

    def __str__(self):
        return f"{self.name}({self.value!r})"


@dataclass(frozen=True)
class PredicateIndicator:
    name: str
    arity: int | None = None
    module: str | None = None
    dcg: bool = False

    @property
    def effective_arity(self) -> int | None:
        # Grammar rules take two hidden difference-list arguments.
        if self.arity is None: return None
        return self.arity + 2 if self.dcg else self.arity

    def __str__(self):
        prefix = f"{self.module}:" if self.module else ""
        arity = '' if self.arity is None else self.arity
        return f"{prefix}{self.name}{'//' if self.dcg else '/'}{arity}"


class _Wildcard:
    __slots__ = ()
    _singleton = None

    def __new__(cls):
        if cls._singleton is None:
            cls._singleton = super().__new__(cls)
        return cls._singleton

    def __repr__(self):
        return '_'

# Anonymous variable in a topic, unifies with any argument.
ANY = _Wildcard()


# A topic name is written bare when it lexes as an atom.  Nested names starting with a digit would
# read back as numbers, so only the outermost one may do without quotes.
_PLAIN_ATOM_RE = re.compile(r'[a-z0-9][A-Za-z0-9_.\-]*')
_PLAIN_NESTED_ATOM_RE = re.compile(r'[a-z][A-Za-z0-9_.\-]*')

@dataclass(frozen=True)
class Topic:
    name: str
    args: tuple = ()

    @property
    def arity(self) -> int:
        return len(self.args)

    def __str__(self):
        return self._format(_PLAIN_ATOM_RE)

    def _format(self, plain: re.Pattern) -> str:
        name = self.name if plain.fullmatch(self.name) else "'" + self.name.replace("'", "\\'") + "'"
        if not self.args: return name
        return name + '(' + ','.join(_format_topic_arg(a) for a in self.args) + ')'


def _format_topic_arg(arg) -> str:
    if isinstance(arg, Topic): return arg._format(_PLAIN_NESTED_ATOM_RE)
    if isinstance(arg, str): return '"' + arg.replace('"', '\\"') + '"'
    return str(arg) if not isinstance(arg, _Wildcard) else '_'


def topics_unify(a, b) -> bool:
    """Structural match where `ANY` on either side matches anything."""
    if a is ANY or b is ANY: return True
    if isinstance(a, Topic) and isinstance(b, Topic):
        return a.name == b.name and a.arity == b.arity and all(topics_unify(x, y) for x, y in zip(a.args, b.args))
    if isinstance(a, Topic) or isinstance(b, Topic): return False
    return type(a) is type(b) and a == b


class DirectiveState:
    """Process-wide directive flags, shared by reference between the option parser and the entry point."""

    def __init__(self):
        self._interactive = False

    @property
    def interactive(self) -> bool:
        return self._interactive

    def set_interactive(self) -> None:
        # Write-once, never cleared.
        self._interactive = True

    def __repr__(self):
        return f"DirectiveState(interactive={self._interactive})"
