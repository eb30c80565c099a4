"""Representation for decision tree questions about full-context labels.

A full question consists of a label valuer together with a question. The label
valuer is a callable that maps a label to a value (e.g. extracts the left-hand
phone from a full-context label). A question is a callable that maps this
value to an answer in its codomain range(2), where 0 means "no" and 1 means
"yes". LabelQuestion bundles a label valuer and a question together.

The undefined value None is handled before a question looks at the value: a
question answers "yes" for None only if it was built with matchesUndefined
set, which the parsers do only when the undefined token is given explicitly
as one of the alternatives.

Questions are never modified after construction, so a single question may be
shared between threads.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import fclabel.speech.labels as lab

class QuestionError(Exception):
    # set by file readers to 'path:lineNum'
    location = None

class InvalidPattern(QuestionError):
    def __init__(self, pattern, reason):
        QuestionError.__init__(self, 'invalid pattern %r: %s' % (pattern, reason))
        self.pattern = pattern
        self.reason = reason

class SlotLabelValuer(object):
    __slots__ = ('labelKey', 'index')

    def __init__(self, labelKey):
        self.labelKey = labelKey
        self.index = lab.indexForKey[labelKey]

    def __repr__(self):
        return 'SlotLabelValuer(%r)' % self.labelKey

    def __eq__(self, other):
        return (isinstance(other, SlotLabelValuer) and
                self.labelKey == other.labelKey)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.labelKey)

    def shortRepr(self):
        return '%s' % self.labelKey

    def __call__(self, label):
        return label[self.index]

class Question(object):
    __slots__ = ('matchesUndefined',)

    def _state(self):
        raise NotImplementedError

    def __eq__(self, other):
        return (self.__class__ is other.__class__ and
                self.matchesUndefined == other.matchesUndefined and
                self._state() == other._state())

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.__class__.__name__, self.matchesUndefined,
                     self._state()))

    def test(self, value):
        raise NotImplementedError

    def __call__(self, value):
        if value is None:
            return int(self.matchesUndefined)
        return int(self.test(value))

    def codomain(self):
        return range(2)

    def _orUndefinedRepr(self, desc):
        if self.matchesUndefined:
            return desc + ' or xx'
        return desc

class SubsetQuestion(Question):
    """Tests membership of a fixed set of values."""
    __slots__ = ('subset', 'name')

    def __init__(self, subset, name = None, matchesUndefined = False):
        self.subset = frozenset(subset)
        self.name = name
        self.matchesUndefined = matchesUndefined

    def __repr__(self):
        return ('SubsetQuestion(%r, %r, matchesUndefined=%r)' %
                (sorted(self.subset), self.name, self.matchesUndefined))

    def _state(self):
        return self.subset

    def shortRepr(self):
        if self.name is not None:
            return 'is ' + self.name
        values = ','.join([ str(value) for value in sorted(self.subset) ])
        return self._orUndefinedRepr('in {' + values + '}')

    def test(self, value):
        return value in self.subset

class WildcardQuestion(Question):
    """Tests a string against a disjunction of wildcard patterns.

    Each pattern is either a literal, which must equal the value, or contains
    a single '*', in which case the value must start with the text before the
    '*' and end with the text after it. The prefix and suffix may not share
    characters, so 'ab*ab' matches 'abab' but not 'aba'.
    """
    __slots__ = ('patterns', 'literals', 'affixes')

    def __init__(self, patterns, matchesUndefined = False):
        literals = set()
        affixes = []
        for pattern in patterns:
            numStars = pattern.count('*')
            if numStars == 0:
                literals.add(pattern)
            elif numStars == 1:
                prefix, suffix = pattern.split('*')
                affixes.append((prefix, suffix, len(prefix) + len(suffix)))
            else:
                raise ValueError('pattern %r has more than one wildcard' %
                                 pattern)
        self.patterns = tuple(patterns)
        self.literals = frozenset(literals)
        self.affixes = tuple(affixes)
        self.matchesUndefined = matchesUndefined

    def __repr__(self):
        return ('WildcardQuestion(%r, matchesUndefined=%r)' %
                (list(self.patterns), self.matchesUndefined))

    def _state(self):
        return (self.literals, frozenset(self.affixes))

    def shortRepr(self):
        return self._orUndefinedRepr('like {' + ','.join(self.patterns) + '}')

    def test(self, value):
        if value in self.literals:
            return True
        for prefix, suffix, minLength in self.affixes:
            if (len(value) >= minLength and value.startswith(prefix) and
                    value.endswith(suffix)):
                return True
        return False

class RangeQuestion(Question):
    """Tests lower <= value <= upper, where a bound of None is unbounded."""
    __slots__ = ('lower', 'upper')

    def __init__(self, lower, upper, matchesUndefined = False):
        if lower is not None and upper is not None and lower > upper:
            raise ValueError('empty range [%s, %s]' % (lower, upper))
        self.lower = lower
        self.upper = upper
        self.matchesUndefined = matchesUndefined

    def __repr__(self):
        return ('RangeQuestion(%r, %r, matchesUndefined=%r)' %
                (self.lower, self.upper, self.matchesUndefined))

    def _state(self):
        return (self.lower, self.upper)

    def shortRepr(self):
        if self.lower is None and self.upper is None:
            desc = 'defined'
        elif self.lower is None:
            desc = '<= %s' % self.upper
        elif self.upper is None:
            desc = '>= %s' % self.lower
        else:
            desc = 'in [%s, %s]' % (self.lower, self.upper)
        return self._orUndefinedRepr(desc)

    def test(self, value):
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True

class LabelQuestion(object):
    """A full question: a label valuer, a question and an optional name.

    Iterating gives (labelValuer, question), so a LabelQuestion can be used
    wherever a full question pair is expected.
    """
    __slots__ = ('labelValuer', 'question', 'name')

    def __init__(self, labelValuer, question, name = None):
        self.labelValuer = labelValuer
        self.question = question
        self.name = name

    def __repr__(self):
        return ('LabelQuestion(%r, %r, name=%r)' %
                (self.labelValuer, self.question, self.name))

    def __eq__(self, other):
        return (isinstance(other, LabelQuestion) and
                self.labelValuer == other.labelValuer and
                self.question == other.question and
                self.name == other.name)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.labelValuer, self.question, self.name))

    def __iter__(self):
        return iter((self.labelValuer, self.question))

    @property
    def labelKey(self):
        return self.labelValuer.labelKey

    def shortRepr(self):
        if self.name is not None:
            return self.name
        return self.labelValuer.shortRepr() + ' ' + self.question.shortRepr()

    def __call__(self, label):
        return self.question(self.labelValuer(label))

    def matches(self, label):
        return self.question(self.labelValuer(label)) == 1

    def codomain(self):
        return self.question.codomain()

def getSubsetQuestions(labelKey, namedSubsets):
    """Returns one subset question on labelKey per (name, subset) pair."""
    labelValuer = SlotLabelValuer(labelKey)
    return [ LabelQuestion(labelValuer, SubsetQuestion(subset, subsetName),
                           name = '%s==%s' % (labelKey, subsetName))
             for subsetName, subset in namedSubsets ]
