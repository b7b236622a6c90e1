## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Callable, Iterable

from .types import Option, PredicateIndicator, Topic, DirectiveState
from .options import argv_options, normalize
from .topics import DebugTopics, parse_topic
from .indicators import parse_indicator
from .breakpoints import SpyPoints
from .directives import DebugContext, parse_debug_options, cli_parse_debug_options
from . import runner


class Runtime:
    """Minimal facade over option handling and the debugging facilities of one process."""

    def __init__(self, state: DirectiveState | None = None, topics: DebugTopics | None = None,
                 spy_points: SpyPoints | None = None):
        self.state = state or DirectiveState()
        self.topics = topics or DebugTopics()
        self.spy_points = spy_points or SpyPoints()

    def _context(self, state: DirectiveState | None) -> DebugContext:
        return DebugContext(state or self.state, self.topics, self.spy_points)

    # Options ─────────────────────────────────────────────────────────────────────────────────
    def argv_options(self, argv: Iterable[str]) -> tuple[list[str], list[Option]]:
        return argv_options(argv)

    def normalize(self, tokens: Iterable[str]) -> tuple[list[Option], list[str]]:
        return normalize(tokens)

    def parse_debug_options(self, options: Iterable[Option], state: DirectiveState | None = None) -> list[Option]:
        return parse_debug_options(options, self._context(state))

    def cli_parse_debug_options(self, options: Iterable[Option], state: DirectiveState | None = None) -> list[Option]:
        return cli_parse_debug_options(options, self._context(state))

    @property
    def interactive(self) -> bool:
        return self.state.interactive

    # Debug topics ────────────────────────────────────────────────────────────────────────────
    def debug(self, topic: Topic | str, fmt: str, *args) -> None:
        self.topics.debug(topic, fmt, *args)

    def debugging(self, topic: Topic | str) -> bool:
        return self.topics.is_enabled(topic)

    def enable_topic(self, topic: Topic | str) -> Topic:
        return self.topics.enable(topic)

    def disable_topic(self, topic: Topic | str) -> None:
        self.topics.disable(topic)

    # Spy points ──────────────────────────────────────────────────────────────────────────────
    def spy(self, indicator: PredicateIndicator | str, graphical: bool = False) -> bool:
        if isinstance(indicator, str): indicator = parse_indicator(indicator)
        return self.spy_points.spy(indicator, graphical=graphical)

    def nospy(self, indicator: PredicateIndicator | str) -> bool:
        if isinstance(indicator, str): indicator = parse_indicator(indicator)
        return self.spy_points.nospy(indicator)

    # Parsing helpers ─────────────────────────────────────────────────────────────────────────
    def parse_indicator(self, text: str) -> PredicateIndicator:
        return parse_indicator(text)

    def parse_topic(self, text: str) -> Topic:
        return parse_topic(text)

    # Entry point ─────────────────────────────────────────────────────────────────────────────
    def main(self, entry: Callable[[list[str]], object], argv: list[str] | None = None,
             namespace: dict | None = None) -> None:
        runner.main(entry, argv, state=self.state, topics=self.topics, namespace=namespace)

    def enable_development_system(self, namespace: dict | None = None) -> None:
        runner.enable_development_system(namespace)
