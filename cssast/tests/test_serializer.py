"""
    Tests for the serialization to JSON-compatible data
    ---------------------------------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


import json

import pytest

from cssast.parser import CSSParser
from cssast.serializer import serialize, serialize_rule
from cssast.structures import Declaration, Stylesheet


def test_serialize():
    stylesheet = CSSParser().parse_stylesheet(
        'a { color: red; color: blue }\n'
        '@media print { b { margin: 0 } }\n'
        '@page { @top-center { content: counter(page) } }')
    assert serialize(stylesheet) == {
        'type': 'stylesheet',
        'rules': [
            {'rule': {'selector': 'a', 'declarations': [
                {'property': 'color', 'value': 'red'},
                {'property': 'color', 'value': 'blue'}]}},
            {'media': {'query': 'print', 'rules': [
                {'rule': {'selector': 'b', 'declarations': [
                    {'property': 'margin', 'value': '0'}]}}]}},
            {'page': {'rules': [
                {'rule': {'selector': '@top-center', 'declarations': [
                    {'property': 'content', 'value': 'counter(page)'}]}}]}},
        ],
    }


def test_serialize_empty():
    assert serialize(Stylesheet([], [])) == {'type': 'stylesheet', 'rules': []}


def test_key_order():
    stylesheet = CSSParser().parse_stylesheet('@media print { a { b: c } }')
    assert json.dumps(serialize(stylesheet)) == (
        '{"type": "stylesheet", "rules": [{"media": {"query": "print", '
        '"rules": [{"rule": {"selector": "a", "declarations": '
        '[{"property": "b", "value": "c"}]}}]}}]}')


@pytest.mark.parametrize('value', [
    Declaration('a', 'b'),
    Stylesheet([], []),
    {'rule': {}},
    None,
])
def test_serialize_unknown_rule(value):
    with pytest.raises(TypeError):
        serialize_rule(value)
