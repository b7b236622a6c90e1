## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
import pdb
import inspect
import importlib
import functools
from typing import Any, Callable

from .types import PredicateIndicator
from .errors import SpyTargetError


def enter_pdb(frame, indicator: PredicateIndicator) -> None:
    pdb.Pdb().set_trace(frame)

def enter_breakpointhook(frame, indicator: PredicateIndicator) -> None:
    # Honours PYTHONBREAKPOINT, so a visual debugger can be configured there.
    sys.breakpointhook()


class _SpyPoint:
    def __init__(self, owner: Any, attr: str, original: Any, function: Callable):
        self.owner, self.attr = owner, attr
        self.original, self.function = original, function
        # Inherited callables are shadowed on `owner` and must be removed again, not copied there.
        self.owned = attr in vars(owner)
        self.indicators: dict[PredicateIndicator, bool] = {}
        self.wrapper = None

    def restore(self) -> None:
        if self.owned:
            setattr(self.owner, self.attr, self.original)
        else:
            delattr(self.owner, self.attr)

    def matching(self, argc: int):
        for indicator, graphical in self.indicators.items():
            if indicator.effective_arity in (None, argc):
                yield indicator, graphical


class SpyPoints:
    """Breakpoints placed on Python callables named by predicate indicators.

    A spy point replaces the attribute that holds the callable with a wrapper, which enters the
    debugger whenever the callable is invoked with as many positional arguments as the indicator's
    arity, then continues into the original callable.
    """

    def __init__(self, debugger: Callable | None = None, graphical_debugger: Callable | None = None,
                 default_module: str = '__main__'):
        self.debugger = debugger or enter_pdb
        self.graphical_debugger = graphical_debugger or enter_breakpointhook
        self.default_module = default_module
        self._points: dict[tuple[int, str], _SpyPoint] = {}

    def _resolve(self, indicator: PredicateIndicator) -> tuple[Any, str]:
        module_name = indicator.module or self.default_module
        try:
            owner = importlib.import_module(module_name)
        except ImportError as exc:
            raise SpyTargetError(f"Module `{module_name}` could not be imported.", text=str(indicator)) from exc

        *path, attr = indicator.name.split('.')
        try:
            for part in path:
                owner = getattr(owner, part)
            target = getattr(owner, attr)
        except AttributeError:
            raise SpyTargetError(f"No attribute `{indicator.name}` in module `{module_name}`.", text=str(indicator)) from None
        if not callable(target):
            raise SpyTargetError(f"Attribute `{indicator.name}` in module `{module_name}` is not callable.", text=str(indicator))
        return owner, attr

    def _install(self, owner: Any, attr: str) -> _SpyPoint:
        original = inspect.getattr_static(owner, attr)
        is_descriptor = isinstance(original, (staticmethod, classmethod))
        function = original.__func__ if is_descriptor else getattr(owner, attr)
        point = _SpyPoint(owner, attr, original, function)

        @functools.wraps(function)
        def wrapper(*args, **kwargs):
            if (match := next(point.matching(len(args)), None)) is not None:
                indicator, graphical = match
                print(f"\033[97m% Call: {indicator} with {len(args)} argument(s)\033[0m", file=sys.stderr)
                enter = self.graphical_debugger if graphical else self.debugger
                enter(sys._getframe(), indicator)
            return function(*args, **kwargs)

        wrapper.__spy_point__ = point
        point.wrapper = wrapper
        setattr(owner, attr, type(original)(wrapper) if is_descriptor else wrapper)
        return point

    def spy(self, indicator: PredicateIndicator, graphical: bool = False) -> bool:
        """Place a spy point on the callable named by `indicator`; returns False when none is found."""
        try:
            owner, attr = self._resolve(indicator)
        except SpyTargetError as exc:
            print(f"\033[30;43m WARNING. \033[0m {indicator}: no matching callable. {exc}", file=sys.stderr)
            return False

        key = (id(owner), attr)
        if (point := self._points.get(key)) is None:
            point = self._points[key] = self._install(owner, attr)
        point.indicators[indicator] = graphical
        print(f"\033[97m% Spy point on {indicator}\033[0m", file=sys.stderr)
        return True

    def nospy(self, indicator: PredicateIndicator) -> bool:
        for key, point in list(self._points.items()):
            if point.indicators.pop(indicator, None) is None: continue
            if not point.indicators:
                point.restore()
                del self._points[key]
            return True
        return False

    def nospyall(self) -> None:
        for point in self._points.values():
            point.restore()
        self._points.clear()

    def spy_points(self) -> list[PredicateIndicator]:
        return [indicator for point in self._points.values() for indicator in point.indicators]
