## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
import types

import scriptmain.api as S
from scriptmain.runtime import Runtime


def test_argv_options_through_facade():
    rest, options = S.argv_options(['--n=3', 'file'])
    assert rest == ['file']
    assert options == [S.Option('n', 3)]


def test_normalize_through_facade():
    options, rest = S.normalize(['--n=3', 'file'])
    assert options == [S.Option('n', 3)] and rest == ['file']


def test_parsing_helpers():
    assert S.parse_indicator('lists:append/3') == S.PredicateIndicator('append', 3, module='lists')
    assert S.parse_topic('http(_)') == S.Topic('http', (S.ANY,))


def test_separate_runtime_has_its_own_state():
    rt = Runtime()
    survivors = rt.parse_debug_options([S.Option('interactive', True), S.Option('keep', 'me')])
    assert survivors == [S.Option('keep', 'me')]
    assert rt.interactive
    assert Runtime().interactive is False


def test_state_can_be_passed_by_reference():
    rt = Runtime()
    state = S.DirectiveState()
    rt.parse_debug_options([S.Option('interactive', True)], state=state)
    assert state.interactive and not rt.interactive


def test_debug_messages_follow_enabled_topics(capsys):
    rt = Runtime()
    rt.enable_topic('calc')
    rt.debug('calc', "sum is %s", 5)
    assert rt.debugging('calc')
    rt.disable_topic('calc')
    rt.debug('calc', "hidden")
    err = capsys.readouterr().err
    assert "% sum is 5" in err and "hidden" not in err


def test_spy_accepts_text_indicators(monkeypatch):
    mod = types.ModuleType('api_demo')
    mod.f = lambda x: x + 1
    monkeypatch.setitem(sys.modules, 'api_demo', mod)

    hits = []
    rt = Runtime()
    rt.spy_points.debugger = lambda frame, pi: hits.append(pi)
    assert rt.spy('api_demo:f/1')
    assert mod.f(1) == 2
    assert rt.nospy('api_demo:f/1')
    assert mod.f(1) == 2
    assert [str(pi) for pi in hits] == ['api_demo:f/1']


def test_errors_are_exported():
    assert issubclass(S.IndicatorParseError, S.ScriptError)
    assert issubclass(S.IndicatorParseError, ValueError)
