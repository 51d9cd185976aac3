"""
    cssast.comments
    ---------------

    Find and remove ``/* ... */`` comments in raw stylesheet text:
    http://www.w3.org/TR/CSS22/syndata.html#comments

    Delimiters are found with a plain substring search: ``/*`` and ``*/``
    inside quoted strings are *not* special, and comments do not nest
    (the first ``*/`` after a ``/*`` closes it).

    A ``/*`` without a matching ``*/`` is not a comment: it is not counted
    nor reported, and :func:`remove_comments` drops everything from it
    to the end of the text.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

from .parsing import line_and_column, line_number
from .structures import _Structure


class Comment(_Structure):
    """A comment found in the source text.

    .. attribute:: start

        Offset of the opening ``/``.

    .. attribute:: end

        Offset of the closing ``/`` (inclusive).

    .. attribute:: line

        1-based line of the opening ``/``.

    .. attribute:: column

        1-based column of the opening ``/``.

    .. attribute:: content

        The full comment text, delimiters included.

    """
    __slots__ = ('start', 'end', 'line', 'column', 'content')

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {0.line}:{0.column} {0.content!r}>' \
            .format(self)


def iter_comment_spans(css):
    """Yield a ``(start, end)`` tuple for each closed comment in ``css``.

    ``start`` is the offset of ``/*`` and ``end`` the offset of ``*/``.
    Stops at the first ``/*`` that is never closed.

    """
    position = 0
    while True:
        start = css.find('/*', position)
        if start == -1:
            return
        end = css.find('*/', start + 2)
        if end == -1:
            return
        yield start, end
        position = end + 2


def count_comments(css):
    """Return the number of closed comments in ``css``."""
    return sum(1 for _span in iter_comment_spans(css))


def remove_comments(css):
    """Return ``css`` without its comments.

    Text outside of comments is kept in order. An unterminated comment
    truncates the result at its ``/*``.

    """
    chunks = []
    position = 0
    while True:
        start = css.find('/*', position)
        if start == -1:
            chunks.append(css[position:])
            break
        chunks.append(css[position:start])
        end = css.find('*/', start + 2)
        if end == -1:
            break
        position = end + 2
    return ''.join(chunks)


def detect_lines_with_comments(css):
    """Return the sorted list of 1-based line numbers touched by a comment.

    A comment spanning lines 2 to 4 contributes 2, 3 and 4. Each line
    appears once.

    """
    lines = []
    for start, end in iter_comment_spans(css):
        first_line = line_number(css, start)
        last_line = line_number(css, end + 2)
        for line in range(first_line, last_line + 1):
            if not lines or lines[-1] != line:
                lines.append(line)
    return lines


def get_all_comments(css):
    """Return a list of :class:`Comment`, one per closed comment, in
    source order. Offsets, lines and columns refer to ``css`` as given.

    """
    comments = []
    for start, end in iter_comment_spans(css):
        line, column = line_and_column(css, start)
        comments.append(Comment(start, end + 1, line, column,
                                css[start:end + 2]))
    return comments
