"""
    Tests for the text utilities
    ----------------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


import pytest

from cssast.parsing import (
    column_number, line_and_column, line_number, normalize_whitespace,
    strip_whitespace)


@pytest.mark.parametrize(('text', 'expected'), [
    ('', ''),
    ('a', 'a'),
    ('h1\na,\nh2\na', 'h1 a, h2 a'),
    ('a \t\r\n  b', 'a b'),
    (' a ', ' a '),
    # Only CSS white space
    ('a\fb', 'a\fb'),
])
def test_normalize_whitespace(text, expected):
    assert normalize_whitespace(text) == expected


def test_strip_whitespace():
    assert strip_whitespace(' \t\r\n a b \n') == 'a b'
    assert strip_whitespace('\fa\f') == '\fa\f'


@pytest.mark.parametrize(('text', 'position', 'expected'), [
    ('hello world', 0, (1, 1)),
    ('hello world', 6, (1, 7)),
    ('line 1\nline 2\nline 3', 7, (2, 1)),
    ('line 1\nline 2', 9, (2, 3)),
    ('line 1\nline 2\nline 3', 14, (3, 1)),
    ('a\n', 2, (2, 1)),
])
def test_line_and_column(text, position, expected):
    assert line_and_column(text, position) == expected
    assert (line_number(text, position),
            column_number(text, position)) == expected
