## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from scriptmain.types import Option, PredicateIndicator, Topic, ANY, DirectiveState


def test_directive_state_is_write_once():
    state = DirectiveState()
    assert state.interactive is False
    state.set_interactive()
    state.set_interactive()
    assert state.interactive is True
    with pytest.raises(AttributeError):
        state.interactive = False


def test_option_is_immutable_and_hashable():
    opt = Option('a', 1, token='--a=1', index=0)
    with pytest.raises(AttributeError):
        opt.value = 2
    assert {opt, Option('a', 1)} == {Option('a', 1)}
    assert str(opt) == "a(1)"


def test_wildcard_is_a_singleton():
    assert type(ANY)() is ANY
    assert repr(Topic('t', (ANY,))) == "Topic(name='t', args=(_,))"


def test_effective_arity():
    assert PredicateIndicator('f', 1).effective_arity == 1
    assert PredicateIndicator('f', 1, dcg=True).effective_arity == 3
    assert PredicateIndicator('f', dcg=True).effective_arity is None
