"""
    cssast.structures
    -----------------

    Data structures for parsed stylesheets.

    Rules come in three kinds, told apart by their :attr:`kind` attribute:
    ``'rule'`` (:class:`StyleRule`), ``'media'`` (:class:`MediaRule`)
    and ``'page'`` (:class:`PageRule`). Code walking the tree should
    dispatch on :attr:`kind` and handle all three.

    :copyright: (c) 2010 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


class _Structure(object):
    __slots__ = ()

    def __init__(self, *args):
        slots = self.__slots__
        if len(args) != len(slots):
            raise TypeError('Got %i arguments, expected %i'
                            % (len(args), len(slots)))
        for name, value in zip(slots, args):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(
            '{0} objects are immutable'.format(type(self).__name__))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name)
                   for name in self.__slots__)

    __hash__ = None

    def __repr__(self):  # pragma: no cover
        return '<{0} {1}>'.format(type(self).__name__, ' '.join(
            '{0}={1!r}'.format(name, getattr(self, name))
            for name in self.__slots__))


class Stylesheet(_Structure):
    """
    A parsed CSS stylesheet, the root of the tree.

    .. attribute:: kind

        Always ``'stylesheet'``.

    .. attribute:: rules

        A list, in source order, of :class:`StyleRule`, :class:`MediaRule`
        and :class:`PageRule`. Duplicates are kept.

    .. attribute:: errors

        A list of :class:`~cssast.parser.ParseError` describing rules and
        declarations that were dropped. Only filled by a strict parser;
        these errors are never raised.

    """
    __slots__ = ('rules', 'errors')
    kind = 'stylesheet'

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {1} rules {2} errors>'.format(
            self, len(self.rules), len(self.errors))

    def pretty(self):  # pragma: no cover
        """Return an indented string representation for debugging"""
        lines = [rule.pretty() for rule in self.rules] + [
                 e.message for e in self.errors]
        return '\n'.join(lines)


class Declaration(_Structure):
    """A property declaration.

    .. attribute:: property

        The property name as written, with surrounding white space removed.
        Never empty.

    .. attribute:: value

        The value as an opaque string, with surrounding white space removed.
        May be empty.

    """
    __slots__ = ('property', 'value')

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {0.property}: {0.value}>'.format(self)

    def pretty(self):  # pragma: no cover
        """Return an indented string representation for debugging"""
        return '{0.property}: {0.value};'.format(self)


class StyleRule(_Structure):
    """A selector and its declaration block.

    .. attribute:: selector

        The selector (or selector list) as a single string with white space
        runs collapsed to one space. Never empty. Inside ``@page``, this
        is the margin box name, eg. ``'@top-center'``.

    .. attribute:: declarations

        The list of :class:`Declaration`, in source order.

    """
    __slots__ = ('selector', 'declarations')
    kind = 'rule'

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {0.selector}>'.format(self)

    def pretty(self):  # pragma: no cover
        """Return an indented string representation for debugging"""
        lines = [self.selector + ' {']
        for declaration in self.declarations:
            lines.append('    ' + declaration.pretty())
        lines.append('}')
        return '\n'.join(lines)


class MediaRule(_Structure):
    """A parsed @media rule.

    .. attribute:: query

        The media query text between ``@media`` and ``{``, stripped
        but otherwise as written.

    .. attribute:: rules

        The list of nested :class:`StyleRule`, in source order.

    """
    __slots__ = ('query', 'rules')
    kind = 'media'

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {0.query}>'.format(self)

    def pretty(self):  # pragma: no cover
        """Return an indented string representation for debugging"""
        return _pretty_block('@media ' + self.query, self.rules)


class PageRule(_Structure):
    """A parsed @page rule.

    .. attribute:: rules

        The margin rules inside the block (``@top-center { ... }`` and
        the like) as :class:`StyleRule`, in source order.

    """
    __slots__ = ('rules',)
    kind = 'page'

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {1} rules>'.format(
            self, len(self.rules))

    def pretty(self):  # pragma: no cover
        """Return an indented string representation for debugging"""
        return _pretty_block('@page', self.rules)


def _pretty_block(head, rules):  # pragma: no cover
    lines = [head + ' {']
    for rule in rules:
        for line in rule.pretty().splitlines():
            lines.append('    ' + line)
    lines.append('}')
    return '\n'.join(lines)
