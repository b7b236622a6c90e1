## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import logging

import pytest

from scriptmain.types import Topic, ANY, topics_unify
from scriptmain.topics import DebugTopics, parse_topic
from scriptmain.errors import TopicParseError


def test_parse_atomic_and_compound_topics():
    assert parse_topic('http') == Topic('http')
    assert parse_topic('http(_)') == Topic('http', (ANY,))
    assert parse_topic('db(query, X)') == Topic('db', (Topic('query'), ANY))


def test_parse_topic_arguments():
    topic = parse_topic('a(b(1), "x y", 2.5, -3)')
    assert topic == Topic('a', (Topic('b', (1,)), 'x y', 2.5, -3))
    assert parse_topic("'Hello World'") == Topic('Hello World')
    assert parse_topic('42') == Topic('42')


@pytest.mark.parametrize('text', ['', 'Http', 'http(', 'http()', 'a(b', 'a b', '"str"'])
def test_invalid_topics(text):
    with pytest.raises(TopicParseError):
        parse_topic(text)


def test_topic_renders_back_to_text():
    for text in ('http', 'http(_)', 'a(b(1),"x",2.5)'):
        assert str(parse_topic(text)) == text


def test_digit_initial_topic_names_render_back_to_text():
    assert str(Topic('42')) == '42'
    assert str(Topic('n', (Topic('42'),))) == "n('42')"
    for topic in (Topic('42'), Topic('2fa', (1,)), Topic('n', (Topic('42'),))):
        assert parse_topic(str(topic)) == topic


def test_wildcards_unify_with_anything():
    assert topics_unify(parse_topic('http(_)'), parse_topic('http(get)'))
    assert topics_unify(parse_topic('http(get)'), parse_topic('http(_)'))
    assert not topics_unify(parse_topic('http(_)'), parse_topic('http'))
    assert not topics_unify(parse_topic('http(_)'), parse_topic('http(a, b)'))
    assert not topics_unify(parse_topic('n(1)'), parse_topic('n(1.0)'))


def test_enabled_pattern_prints_matching_messages(capsys):
    topics = DebugTopics()
    topics.register('http(get)')
    topics.enable('http(_)')
    topics.debug('http(get)', "fetched %d bytes", 12)
    topics.debug('db', "not shown")
    err = capsys.readouterr().err
    assert "% fetched 12 bytes" in err
    assert "not shown" not in err
    assert "no matching debug topic" not in err


def test_enabling_unknown_topic_warns(capsys):
    topics = DebugTopics()
    topics.enable('nowhere')
    assert "nowhere: no matching debug topic (yet)" in capsys.readouterr().err
    assert topics.is_enabled('nowhere')


def test_enable_is_idempotent_and_disable_removes():
    topics = DebugTopics()
    topics.enable('x')
    topics.enable('x')
    assert topics.enabled == [Topic('x')]
    topics.disable('x')
    assert not topics.is_enabled('x')


def test_existing_logger_names_are_traced(capsys):
    logger = logging.getLogger('scriptmain_tests.net')
    try:
        topics = DebugTopics()
        topics.enable('scriptmain_tests.net')
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        topics.enable('scriptmain_tests.net')
        assert len(logger.handlers) == 1
        assert "no matching debug topic" not in capsys.readouterr().err
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
