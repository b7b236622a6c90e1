## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Generic transformation of long commandline arguments to options, for quick scripts.  Each
# `--name=value` becomes Option(name, value), each `--name` becomes Option(name, True) and each
# `--no-name` becomes Option(name, False).  Short flags, help and validation are not handled here.
#

import re
from typing import Iterable

import lark

from .types import Option, OptionValue


NUMBER_GRAMMAR = r"""?start: integer | real
integer: SIGN? (HEX_INT | OCT_INT | BIN_INT | DEC_INT)
real: SIGN? FLOAT

SIGN: /[+-]/
HEX_INT.3: /0[xX][0-9a-fA-F]+(?:_[0-9a-fA-F]+)*/
OCT_INT.3: /0[oO][0-7]+(?:_[0-7]+)*/
BIN_INT.3: /0[bB][01]+(?:_[01]+)*/
FLOAT.2: /\d+(?:_\d+)*(?:\.\d+(?:_\d+)*(?:[eE][+-]?\d+)?|[eE][+-]?\d+)/
DEC_INT.1: /\d+(?:_\d+)*/
"""


class _NumberTransformer(lark.Transformer):
    def integer(self, children):
        *sign, digits = children
        value = int(digits.value, 10 if digits.type == 'DEC_INT' else 0)
        return -value if sign and sign[0] == '-' else value

    def real(self, children):
        *sign, digits = children
        value = float(digits.value)
        return -value if sign and sign[0] == '-' else value


_NUMBER_PARSER = lark.Lark(NUMBER_GRAMMAR, parser="lalr", lexer="contextual", transformer=_NumberTransformer())


def parse_number(text: str) -> int | float | None:
    """Parse `text` as an integer or float literal, or return None if it isn't one."""
    try:
        return _NUMBER_PARSER.parse(text)
    except lark.exceptions.UnexpectedInput:
        return None


def canonical_name(name: str) -> str:
    return re.sub(r'[-_]+', '_', name)


def convert_option(name: str, text: str) -> OptionValue:
    # Secrets that look like numbers must stay as typed.
    if name == 'password': return text
    if (number := parse_number(text)) is not None: return number
    return text


def _long_option(token: str, index: int) -> Option:
    item = token[2:]
    if '=' in item:
        raw_name, text = item.split('=', 1)
        name = canonical_name(raw_name)
        return Option(name, convert_option(name, text), token=token, index=index)
    if item.startswith('no-'):
        return Option(canonical_name(item[3:]), False, token=token, index=index)
    return Option(canonical_name(item), True, token=token, index=index)


def argv_options(argv: Iterable[str]) -> tuple[list[str], list[Option]]:
    """Split `argv` into the remaining plain arguments and the options from `--` arguments.

    Both outputs keep the relative order of the input; nothing is dropped or duplicated.
    """
    rest: list[str] = []
    options: list[Option] = []
    for index, token in enumerate(argv):
        if token.startswith('--'):
            options.append(_long_option(token, index))
        else:
            rest.append(token)
    return rest, options


def normalize(tokens: Iterable[str]) -> tuple[list[Option], list[str]]:
    rest, options = argv_options(tokens)
    return options, rest
