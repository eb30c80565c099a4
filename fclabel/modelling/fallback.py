"""Fallbacks for HTS questions which parseHtsQuestion cannot handle.

Some valid HTS patterns are not about a single field (e.g. '*^k-o+*'), or use
'?' inside a phone. RegexQuestion answers these by matching the formatted
label string against the patterns directly. The whole label must match, not
just a prefix of it, so 'sil^*-4' does not match a label ending in '-41'.
NoOpQuestion answers "no" to every label.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import logging
import re

from fclabel.speech.labels import formatLabel
from fclabel.modelling.questions import InvalidPattern
from fclabel.modelling.question_parse import parseHtsQuestion

def wildcardToRegex(pattern):
    """Translates an HTS wildcard pattern to a regular expression string."""
    parts = []
    for c in pattern:
        if c == '*':
            parts.append('.*')
        elif c == '?':
            parts.append('.')
        else:
            parts.append(re.escape(c))
    return ''.join(parts)

class RegexQuestion(object):
    __slots__ = ('patterns', 'name', '_regex')

    def __init__(self, patterns, name = None):
        if not patterns:
            raise InvalidPattern(patterns, 'no patterns given')
        self.patterns = tuple(patterns)
        self.name = name
        self._regex = re.compile(
            r'(?:' + '|'.join([ wildcardToRegex(pattern)
                                for pattern in patterns ]) + r')\Z'
        )

    def __repr__(self):
        return 'RegexQuestion(%r, name=%r)' % (list(self.patterns), self.name)

    def shortRepr(self):
        if self.name is not None:
            return self.name
        return 'like {' + ','.join(self.patterns) + '}'

    def __call__(self, label):
        return int(self.matches(label))

    def matches(self, label):
        return self._regex.match(formatLabel(label)) is not None

    def codomain(self):
        return range(2)

class NoOpQuestion(object):
    __slots__ = ('patterns', 'name')

    def __init__(self, patterns, name = None):
        self.patterns = tuple(patterns)
        self.name = name

    def __repr__(self):
        return 'NoOpQuestion(%r, name=%r)' % (list(self.patterns), self.name)

    def shortRepr(self):
        if self.name is not None:
            return self.name
        return 'never'

    def __call__(self, label):
        return 0

    def matches(self, label):
        return False

    def codomain(self):
        return range(2)

fallbackClasses = {
    'regex': RegexQuestion,
    'noop': NoOpQuestion,
}

def parseQuestionWithFallback(patterns, name = None, fallback = 'regex'):
    """Parses HTS patterns, falling back if they cannot be parsed.

    fallback is 'regex', 'noop' or None (in which case InvalidPattern is
    raised as usual).
    """
    if fallback is not None and fallback not in fallbackClasses:
        raise ValueError('unknown fallback %r' % fallback)
    try:
        return parseHtsQuestion(patterns, name = name)
    except InvalidPattern as e:
        if fallback is None:
            raise
        logging.debug('using %s fallback for question %s (%s)' %
                      (fallback, name, e))
        return fallbackClasses[fallback](patterns, name = name)
