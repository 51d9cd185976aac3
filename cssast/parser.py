"""
    cssast.parser
    -------------

    Recursive-descent parser for a practical subset of CSS 2.2:
    rulesets, ``@media`` blocks and ``@page`` blocks with margin rules.
    http://www.w3.org/TR/CSS22/syndata.html

    There is no tokenizer. A single cursor walks the text once; quoted
    strings and parentheses are tracked while looking for the end of
    property names and values, so that ``;`` or ``}`` inside
    ``"..."`` or ``var(...)`` do not end a declaration.

    Comments must have been removed beforehand, see :mod:`cssast.comments`.

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""

import logging

from .parsing import (
    WHITESPACE, line_and_column, normalize_whitespace, strip_whitespace)
from .structures import (
    Declaration, MediaRule, PageRule, StyleRule, Stylesheet)


LOGGER = logging.getLogger(__name__)

QUOTES = '"\''


#  stylesheet  : [ S | media | page | ruleset ]*;
#  media       : '@media' S* query '{' S* ruleset* '}';
#  page        : '@page' S* '{' S* ruleset* '}';
#  ruleset     : selector '{' S* declaration* '}';
#  declaration : property ':' S* value [ ';' ]?;
#  selector    : [ any character but '{' ]*;
#  property    : [ string | parens | any character but ':' or '}' ]*;
#  value       : [ string | parens | any character but ';' or '}' ]*;


class ParseError(ValueError):
    """Details about a CSS syntax error.

    Instances of the subclasses :class:`UnexpectedToken` and
    :class:`UnclosedString` are raised and abort the parse. Plain
    :class:`ParseError` instances are never raised: a strict parser
    collects them in :attr:`Stylesheet.errors` for rules and declarations
    that were ignored.

    .. attribute:: line

        Source line where the error occured.

    .. attribute:: column

        Column in the source line where the error occured.

    .. attribute:: reason

        What happend (a string).

    """
    def __init__(self, line, column, reason):
        self.line = line
        self.column = column
        self.reason = reason
        self.msg = self.message = (
            'Parse error at {0.line}:{0.column}, {0.reason}'.format(self))
        super(ParseError, self).__init__(self.message)

    def __repr__(self):  # pragma: no cover
        return ('<{0.__class__.__name__}: {0.message}>'.format(self))


class UnexpectedToken(ParseError):
    """A required ``{``, ``}``, ``:`` or at-keyword was not found."""


class UnclosedString(ParseError):
    """A quoted string was still open at the end of the input."""


class CSSParser(object):
    """Parser for stylesheets without comments.

    Selectors, media queries and declaration values are not parsed:
    they are kept as strings.

    Invalid rules and declarations (empty selector, empty property name,
    missing ``:``) are ignored and parsing goes on. Only a missing
    ``{``/``}``/``:`` or an unclosed string raise a :class:`ParseError`.

    :param strict:
        If true, ignored rules and declarations are reported in
        :attr:`Stylesheet.errors`. The parsed rules are the same either way.

    The cursor is kept on the instance: an instance parses one stylesheet
    at a time. Subclasses may override any of the ``parse_*`` methods.

    """
    strict = False

    def __init__(self, strict=False):
        self.strict = strict
        self._reset('')

    # User API:

    def parse_stylesheet(self, css):
        """Parse a stylesheet from an Unicode string.

        :param css:
            A CSS stylesheet as an unicode string, without comments.
        :return:
            A :class:`~cssast.structures.Stylesheet`.
        :raises:
            :class:`UnexpectedToken` or :class:`UnclosedString`

        """
        self._reset(css)
        rules = []
        errors = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            if self.peek('@media'):
                rules.append(self.parse_media_rule(errors))
            elif self.peek('@page'):
                rules.append(self.parse_page_rule(errors))
            else:
                rule = self.parse_rule(errors)
                if rule is not None:
                    rules.append(rule)
        return Stylesheet(rules, errors)

    def parse_style_attr(self, css):
        """Parse a "style" attribute (eg. of an HTML element).

        :param css:
            The attribute value, as an unicode string: a list of
            declarations without braces.
        :return:
            A tuple of the list of valid :class:`Declaration` and
            a list of :class:`ParseError`.
        :raises:
            :class:`UnexpectedToken` or :class:`UnclosedString`

        """
        self._reset(css)
        errors = []
        declarations = self.parse_declarations(errors)
        if not self.at_end():
            self.report(errors, self.position, 'unmatched }')
        return declarations, errors

    # API for subclasses:

    def parse_media_rule(self, errors):
        """Parse ``@media <query> { <rules> }`` at the cursor.

        Nested at-rules are not recognized: they are read as rulesets.

        :param errors:
            A list where to append ignored constructs, in strict mode.
        :return:
            A :class:`MediaRule`

        """
        self.expect('@media')
        self.skip_whitespace()
        start = self.position
        self.scan_until_block()
        query = strip_whitespace(self.css[start:self.position])
        self.expect('{')
        rules = self.parse_rule_list(errors)
        self.expect('}')
        return MediaRule(query, rules)

    def parse_page_rule(self, errors):
        """Parse ``@page { <margin rules> }`` at the cursor.

        Margin rules such as ``@top-center { ... }`` look like rulesets
        and are parsed as such, the margin box name being the selector.

        :return:
            A :class:`PageRule`

        """
        self.expect('@page')
        self.skip_whitespace()
        self.expect('{')
        rules = self.parse_rule_list(errors)
        self.expect('}')
        return PageRule(rules)

    def parse_rule_list(self, errors):
        """Parse rulesets until a ``}`` or the end of the input,
        which is not consumed.

        """
        rules = []
        while True:
            self.skip_whitespace()
            if self.at_end() or self.peek('}'):
                return rules
            rule = self.parse_rule(errors)
            if rule is not None:
                rules.append(rule)

    def parse_rule(self, errors):
        """Parse a ruleset: a selector followed by declaration block.

        :param errors:
            A list where to append ignored constructs, in strict mode.
        :return:
            A :class:`StyleRule`, or ``None`` if the rule is ignored: its
            selector is empty, or there is no ``{`` until the end
            of the input.

        """
        self.skip_whitespace()
        start = self.position
        self.scan_until_block()
        if self.at_end():
            if strip_whitespace(self.css[start:]):
                self.report(errors, start,
                            'no declaration block found for ruleset')
            return None

        selector = strip_whitespace(self.css[start:self.position])
        self.expect('{')
        declarations = self.parse_declarations(errors)
        self.expect('}')
        if not selector:
            self.report(errors, start, 'empty selector')
            return None
        return StyleRule(normalize_whitespace(selector), declarations)

    def parse_declarations(self, errors):
        """Parse declarations until a ``}`` or the end of the input,
        which is not consumed.

        :return:
            The list of valid :class:`Declaration`, in source order.

        """
        declarations = []
        while True:
            self.skip_whitespace()
            if self.at_end() or self.peek('}'):
                return declarations
            if self.peek(';'):
                # Empty declaration
                self.position += 1
                continue
            declaration = self.parse_declaration(errors)
            if declaration is not None:
                declarations.append(declaration)

    def parse_declaration(self, errors):
        """Parse a single declaration and its ``;``, if any.

        :param errors:
            A list where to append ignored constructs, in strict mode.
        :return:
            A :class:`Declaration`, or ``None`` for an empty block, a missing
            ``:`` or an empty property name.

        """
        self.skip_whitespace()
        if self.at_end() or self.peek('}'):
            return None

        start = self.position
        self.scan_until(':}')
        if not self.peek(':'):
            self.report(errors, start, "expected ':' after property name")
            return None
        property_name = strip_whitespace(self.css[start:self.position])
        self.expect(':')
        self.skip_whitespace()

        value_start = self.position
        self.scan_until(';}')
        value = strip_whitespace(self.css[value_start:self.position])
        if self.peek(';'):
            self.position += 1

        if not property_name:
            self.report(errors, start, 'expected a property name')
            return None
        return Declaration(property_name, value)

    # Scanning:

    def scan_until(self, delimiters):
        """Move the cursor to the next character in ``delimiters`` that is
        outside of quoted strings and parentheses, or to the end of
        the input.

        :raises:
            :class:`UnclosedString`

        """
        css = self.css
        length = len(css)
        depth = 0
        while self.position < length:
            char = css[self.position]
            if char in QUOTES:
                self.skip_string(char)
                continue
            if char == '(':
                depth += 1
            elif char == ')':
                if depth:
                    depth -= 1
            elif depth == 0 and char in delimiters:
                return
            self.position += 1

    def skip_string(self, quote):
        """Move the cursor just after the string starting at the cursor.

        A backslash escapes the next character, including the quote.

        :raises:
            :class:`UnclosedString` at the end of the input.

        """
        css = self.css
        length = len(css)
        start = self.position
        self.position += 1
        while self.position < length:
            char = css[self.position]
            if char == '\\':
                self.position += 2
            elif char == quote:
                self.position += 1
                return
            else:
                self.position += 1
        self.position = length
        raise self.error(UnclosedString, start, 'unclosed string')

    def scan_until_block(self):
        """Move the cursor to the next unescaped ``{``, or to the end
        of the input.

        """
        css = self.css
        length = len(css)
        while self.position < length:
            char = css[self.position]
            if char == '{':
                return
            self.position += 2 if char == '\\' else 1
        self.position = length

    def skip_whitespace(self):
        css = self.css
        length = len(css)
        while self.position < length and css[self.position] in WHITESPACE:
            self.position += 1

    def at_end(self):
        return self.position >= len(self.css)

    def peek(self, literal):
        """Tell whether ``literal`` is at the cursor, without consuming it."""
        return self.css.startswith(literal, self.position)

    def expect(self, literal):
        """Consume ``literal`` at the cursor.

        :raises:
            :class:`UnexpectedToken` if something else is there.

        """
        if not self.peek(literal):
            if self.at_end():
                found = 'end of input'
            else:
                found = repr(self.css[self.position])
            raise self.error(UnexpectedToken, self.position,
                             'expected {0!r}, got {1}'.format(literal, found))
        self.position += len(literal)

    # Errors:

    def error(self, error_class, position, reason):
        line, column = line_and_column(self.css, position)
        return error_class(line, column, reason)

    def report(self, errors, position, reason):
        """Record an ignored rule or declaration."""
        error = self.error(ParseError, position, reason)
        if self.strict:
            LOGGER.warning('Ignored: %s', error.message)
            errors.append(error)
        else:
            LOGGER.debug('Ignored: %s', error.message)

    def _reset(self, css):
        self.css = css
        self.position = 0
