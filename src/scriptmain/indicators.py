## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import replace

from .types import PredicateIndicator
from .errors import IndicatorParseError


def _arity(text: str, source: str) -> int | None:
    if text == '': return None
    if not text.isascii() or not text.isdigit():
        raise IndicatorParseError(source)
    return int(text)


def parse_indicator(text: str, _source: str | None = None) -> PredicateIndicator:
    """Parse `[Module:]Name/Arity` or `[Module:]Name//Arity` into a PredicateIndicator.

    Separators are tried in the order `:`, `//`, `/` and each splits at its first occurrence.
    An empty arity leaves it unbound, to match on the name only.  Text without any separator
    raises IndicatorParseError mentioning the original input.
    """
    source = text if _source is None else _source

    if ':' in text:
        module, _, rest = text.partition(':')
        if not module: raise IndicatorParseError(source)
        inner = parse_indicator(rest, source)
        # Innermost qualification is where the name is resolved.
        return inner if inner.module else replace(inner, module=module)

    for sep, dcg in (('//', True), ('/', False)):
        if sep in text:
            name, _, arity = text.partition(sep)
            if not name: raise IndicatorParseError(source)
            return PredicateIndicator(name, _arity(arity, source), dcg=dcg)

    raise IndicatorParseError(source)
