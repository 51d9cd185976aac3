"""
    cssast.parsing
    --------------

    Utilities for scanning raw stylesheet text.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import re


WHITESPACE = ' \t\n\r'

_WHITESPACE_RUN = re.compile('[ \t\n\r]+')


def strip_whitespace(text):
    """Remove white space at the beginning and end of a string.

    Only space, tab, line feed and carriage return count as white space,
    as for the rest of the parser. White space in-between is preserved.

    """
    return text.strip(WHITESPACE)


def normalize_whitespace(text):
    """Collapse every run of white space into a single space.

    Used for selectors, so that a selector list split over several source
    lines becomes one canonical line::

        >>> normalize_whitespace('h1\\na,\\n  h2\\ta')
        'h1 a, h2 a'

    """
    return _WHITESPACE_RUN.sub(' ', text)


def line_number(text, position):
    """Return the 1-based line of the character at ``position``."""
    return text.count('\n', 0, position) + 1


def column_number(text, position):
    """Return the 1-based column of the character at ``position``.

    Columns count characters since the last line feed, or since
    the start of ``text``.

    """
    return position - text.rfind('\n', 0, position)


def line_and_column(text, position):
    return line_number(text, position), column_number(text, position)
