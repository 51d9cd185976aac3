"""
    cssast.serializer
    -----------------

    Turn a parsed stylesheet into JSON-compatible data (dicts, lists and
    strings) that any JSON writer can dump::

        {"type": "stylesheet", "rules": [
            {"rule": {"selector": "a", "declarations": [
                {"property": "color", "value": "red"}]}},
            {"media": {"query": "print", "rules": [...]}},
            {"page": {"rules": [...]}}]}

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


def serialize(stylesheet):
    """Return a :class:`~cssast.structures.Stylesheet` as a dict."""
    return {
        'type': stylesheet.kind,
        'rules': serialize_rules(stylesheet.rules),
    }


def serialize_rules(rules):
    return [serialize_rule(rule) for rule in rules]


def serialize_rule(rule):
    """Return a rule as a dict with a single key, the kind of the rule.

    :raises:
        :class:`TypeError` for anything but a
        :class:`~cssast.structures.StyleRule`,
        :class:`~cssast.structures.MediaRule` or
        :class:`~cssast.structures.PageRule`.

    """
    kind = getattr(rule, 'kind', None)
    if kind == 'rule':
        content = {
            'selector': rule.selector,
            'declarations': [serialize_declaration(declaration)
                             for declaration in rule.declarations],
        }
    elif kind == 'media':
        content = {'query': rule.query, 'rules': serialize_rules(rule.rules)}
    elif kind == 'page':
        content = {'rules': serialize_rules(rule.rules)}
    else:
        raise TypeError('Can not serialize {0!r}, expected a rule'
                        .format(rule))
    return {kind: content}


def serialize_declaration(declaration):
    return {'property': declaration.property, 'value': declaration.value}
