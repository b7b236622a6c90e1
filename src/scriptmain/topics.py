## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Debug topics are terms such as `http` or `http(request, _)` naming a channel of debug messages.
# Enabling a topic that contains variables enables every topic it unifies with.
#

import re
import sys
import logging

import lark

from .types import Topic, ANY, topics_unify
from .errors import TopicParseError


GRAMMAR = r"""?start: topic
topic: atom (LPAREN arg (COMMA arg)* RPAREN)?
?arg: topic | number | string | variable
atom: ATOM | QUOTED
number: FLOAT | INTEGER
string: STRING
variable: VAR

ATOM: /[a-z0-9][A-Za-z0-9_.\-]*/
QUOTED: /'(?:[^'\\]|\\.)*'/
VAR: /[A-Z_][A-Za-z0-9_]*/
STRING: /"(?:[^"\\]|\\.)*"/
FLOAT.4: /-?\d+\.\d+(?:[eE][+-]?\d+)?/
INTEGER.3: /-?\d+/
LPAREN: "("
RPAREN: ")"
COMMA: ","

%import common.WS
%ignore WS
"""


def _unescape(quoted: str) -> str:
    return re.sub(r'\\(.)', r'\1', quoted[1:-1])


class _TopicTransformer(lark.Transformer):
    def topic(self, children):
        name, *rest = children
        return Topic(name, tuple(c for c in rest if not isinstance(c, lark.Token)))

    def atom(self, children):
        (tok,) = children
        return _unescape(tok.value) if tok.type == 'QUOTED' else tok.value

    def number(self, children):
        (tok,) = children
        return float(tok.value) if tok.type == 'FLOAT' else int(tok.value)

    def string(self, children):
        return _unescape(children[0].value)

    def variable(self, children):
        return ANY


_PARSER = lark.Lark(GRAMMAR, parser="lalr", lexer="contextual", transformer=_TopicTransformer())


def parse_topic(text: str) -> Topic:
    """Parse the textual form of a debug topic, e.g. `http(_)`, into a Topic."""
    try:
        return _PARSER.parse(text)
    except lark.exceptions.UnexpectedInput as exc:
        raise TopicParseError(text, column=getattr(exc, 'column', None)) from None


def as_topic(topic: Topic | str) -> Topic:
    return topic if isinstance(topic, Topic) else parse_topic(topic)


class DebugTopics:
    """Registry of known topics and of the patterns enabled for printing messages."""

    def __init__(self):
        self.known: list[Topic] = []
        self.enabled: list[Topic] = []
        self._traced_loggers: set[str] = set()

    def register(self, topic: Topic | str) -> Topic:
        topic = as_topic(topic)
        if topic not in self.known:
            self.known.append(topic)
        return topic

    def enable(self, topic: Topic | str) -> Topic:
        topic = as_topic(topic)
        traced = self._trace_logger(topic)
        if not traced and not any(topics_unify(topic, k) for k in self.known):
            print(f"\033[30;43m WARNING. \033[0m {topic}: no matching debug topic (yet)", file=sys.stderr)
        if topic not in self.enabled:
            self.enabled.append(topic)
        return topic

    def disable(self, topic: Topic | str) -> None:
        topic = as_topic(topic)
        self.enabled = [t for t in self.enabled if t != topic]

    def is_enabled(self, topic: Topic | str) -> bool:
        topic = as_topic(topic)
        return any(topics_unify(pattern, topic) for pattern in self.enabled)

    def debug(self, topic: Topic | str, fmt: str, *args) -> None:
        topic = self.register(topic)
        if not self.is_enabled(topic): return
        message = fmt % args if args else fmt
        print(f"\033[36m% {message}\033[0m", file=sys.stderr)

    def _trace_logger(self, topic: Topic) -> bool:
        # Atomic topics double as names of `logging` loggers that already exist.
        if topic.args or topic.name not in logging.root.manager.loggerDict: return False
        if topic.name not in self._traced_loggers:
            logger = logging.getLogger(topic.name)
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter('%% %(name)s: %(message)s'))
            logger.addHandler(handler)
            logger.setLevel(logging.DEBUG)
            self._traced_loggers.add(topic.name)
        return True
