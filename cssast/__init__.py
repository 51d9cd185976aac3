"""
    cssast
    ------

    Parse CSS stylesheets into a syntax tree that can be serialized to JSON.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import logging

from .version import VERSION
from .comments import (
    Comment, count_comments, detect_lines_with_comments, get_all_comments,
    remove_comments)
from .parser import CSSParser, ParseError, UnclosedString, UnexpectedToken
from .serializer import serialize
from .structures import (
    Declaration, MediaRule, PageRule, StyleRule, Stylesheet)

__version__ = VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())


def make_parser(*base_classes, **kwargs):
    """Make a parser object with the chosen features.

    :param base_classes:
        Positional arguments are base classes the new parser
        class will extend, eg. to override some ``parse_*`` methods.
    :param kwargs:
        Other arguments, like ``strict``, are passed to the parser’s
        constructor.
    :returns:
        An instance of :class:`CSSParser` or of a new subclass of it.

    """
    bases = [CSSParser]
    bases.extend(base_classes)

    if len(bases) == 1:
        parser_class = bases[0]
    else:
        # Reverse: we want the "most specific" parser to be
        # the first base class.
        parser_class = type('CustomCSSParser', tuple(reversed(bases)), {})
    return parser_class(**kwargs)


def parse_stylesheet(css, strict=False, strip_comments=True):
    """Remove comments from ``css`` and parse it.

    :param css:
        A CSS stylesheet as an unicode string.
    :param strict:
        Report ignored rules and declarations in :attr:`Stylesheet.errors`.
    :param strip_comments:
        Set to ``False`` if ``css`` is already free of comments.
    :returns:
        A :class:`Stylesheet`.
    :raises:
        :class:`UnexpectedToken` or :class:`UnclosedString`

    """
    if strip_comments:
        css = remove_comments(css)
    return CSSParser(strict=strict).parse_stylesheet(css)
