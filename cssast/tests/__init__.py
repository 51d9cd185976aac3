"""
    Test suite for cssast
    ---------------------

    :copyright: (c) 2012 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


def assert_errors(errors, expected_errors):
    """Test not complete error messages but only substrings."""
    assert len(errors) == len(expected_errors)
    for error, expected in zip(errors, expected_errors):
        assert expected in str(error)


def jsonify(rules):
    """Turn rules into nested tuples and lists that are easy to compare."""
    for rule in rules:
        if rule.kind == 'rule':
            yield rule.selector, [
                (declaration.property, declaration.value)
                for declaration in rule.declarations]
        elif rule.kind == 'media':
            yield '@media', rule.query, list(jsonify(rule.rules))
        else:
            yield '@page', list(jsonify(rule.rules))
