"""
    Tests for the tree data structures
    ----------------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


import pytest

from cssast.structures import (
    Declaration, MediaRule, PageRule, StyleRule, Stylesheet)


def test_kinds():
    assert Stylesheet([], []).kind == 'stylesheet'
    assert StyleRule('a', []).kind == 'rule'
    assert MediaRule('print', []).kind == 'media'
    assert PageRule([]).kind == 'page'


def test_arguments():
    with pytest.raises(TypeError):
        StyleRule('a')
    with pytest.raises(TypeError):
        PageRule([], [])


def test_equality():
    rule = StyleRule('a', [Declaration('color', 'red')])
    assert rule == StyleRule('a', [Declaration('color', 'red')])
    assert rule != StyleRule('a', [Declaration('color', 'blue')])
    assert rule != MediaRule('a', [])
    assert PageRule([rule]) == PageRule([rule])
    assert Declaration('a', 'b') != ('a', 'b')


def test_immutable():
    rule = MediaRule('print', [])
    with pytest.raises(AttributeError):
        rule.query = 'screen'
    with pytest.raises(AttributeError):
        rule.foo = 'bar'
    assert rule.query == 'print'
