"""Parsers turning question patterns into LabelQuestions.

Two pattern grammars are supported, both producing the same questions.

parseQuestion takes a pattern about one named field, e.g. ('a*,i', 'phone')
or ('3-7', 'A2'). Alternatives are separated by ','. Depending on the kind of
field an alternative is:
    phone       a literal phone or a pattern with one '*' ('k*', '*y', 'a*b')
    signed      a literal ('-3'), a digit wildcard ('?', '1?', '-?', '-??')
                or an inclusive range with optional bounds ('-5--3', '-3-')
    unsigned    as for signed, without signs ('3-7', '3-', '-7', '-')
    category    a literal code ('2', '02')
    boolean     '0' or '1'
and the undefined token 'xx' may be given as an extra alternative for any
field which can be undefined. Digit wildcards follow the HTS convention: '?'
is 1 to 9 for unsigned fields and 0 to 9 for signed ones, 'd?' is 10d to
10d + 9, '-?' is -9 to -1 and '-??' is -99 to -10. Numeric alternatives which
are not all literals are merged into a single range, so they must be
contiguous.

parseHtsQuestion takes the patterns of an HTS question, e.g.
['*/A:-??+*', '*/A:-?+*'], works out which field they are about and parses
the part of each pattern inside that field as above, except that the range
forms are not accepted: in a whole-label pattern '3-7' is literal text.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import re

import fclabel.speech.labels as lab
from fclabel.speech.fields import UNDEFINED_TOKEN
import fclabel.modelling.questions as ques
from fclabel.modelling.questions import InvalidPattern
from fclabel.modelling.positions import estimatePosition

ALTERNATION = ','

phoneAlternativeRe = re.compile(r'[^\s\^\-+=/?]*\Z')
unsignedLiteralRe = re.compile(r'[0-9]+\Z')
signedLiteralRe = re.compile(r'-?[0-9]+\Z')
digitWildcardRe = re.compile(r'([0-9]+)\?\Z')
unsignedRangeRe = re.compile(r'([0-9]+)?-([0-9]+)?\Z')
signedRangeRe = re.compile(r'(-?[0-9]+)?-(-?[0-9]+)?\Z')

def resolveField(fieldSelector):
    """Returns the label key for a label key or an HTS position code."""
    if fieldSelector in lab.indexForKey:
        return fieldSelector
    elif fieldSelector in lab.keyForPosition:
        return lab.keyForPosition[fieldSelector]
    else:
        raise InvalidPattern(fieldSelector, 'unknown label field')

def parseInterval(token, signed, pattern, allowRanges = True):
    """Parses a numeric alternative into an inclusive interval.

    Returns (lower, upper, isLiteral), where a bound of None is unbounded.
    If allowRanges is False only literals and digit wildcards are accepted.
    """
    literalRe = signedLiteralRe if signed else unsignedLiteralRe
    if literalRe.match(token):
        value = int(token)
        return value, value, True

    if signed and token == '-??':
        return -99, -10, False
    if signed and token == '-?':
        return -9, -1, False
    if token == '?':
        return (0 if signed else 1), 9, False
    match = digitWildcardRe.match(token)
    if match:
        tens = int(match.group(1))
        return tens * 10, tens * 10 + 9, False

    rangeRe = signedRangeRe if signed else unsignedRangeRe
    match = rangeRe.match(token)
    if match and allowRanges:
        lowerString, upperString = match.groups()
        lower = None if lowerString is None else int(lowerString)
        upper = None if upperString is None else int(upperString)
        if lower is not None and upper is not None and lower > upper:
            raise InvalidPattern(pattern, 'range %r is inverted' % token)
        return lower, upper, False

    raise InvalidPattern(pattern, '%r is not a valid %s value' %
                         (token, 'signed' if signed else 'unsigned'))

def mergeIntervals(intervals, pattern):
    """Merges inclusive intervals into one, which must have no gaps."""
    def lowerKey(interval):
        lower = interval[0]
        return (0,) if lower is None else (1, lower)
    intervals = sorted(intervals, key = lowerKey)

    lower, upper = intervals[0]
    for currLower, currUpper in intervals[1:]:
        if upper is not None and currLower is not None and currLower > upper + 1:
            raise InvalidPattern(pattern, 'alternatives do not form a'
                                 ' contiguous range')
        if upper is not None:
            upper = None if currUpper is None else max(upper, currUpper)
    return lower, upper

def buildNumericQuestion(tokens, signed, matchesUndefined, pattern,
                         allowRanges = True):
    intervals = []
    allLiteral = True
    for token in tokens:
        lower, upper, isLiteral = parseInterval(token, signed, pattern,
                                                allowRanges = allowRanges)
        intervals.append((lower, upper))
        allLiteral = allLiteral and isLiteral
    if allLiteral:
        return ques.SubsetQuestion([ lower for lower, upper in intervals ],
                                   matchesUndefined = matchesUndefined)
    lower, upper = mergeIntervals(intervals, pattern)
    return ques.RangeQuestion(lower, upper, matchesUndefined = matchesUndefined)

def buildQuestion(labelKey, alternatives, pattern, allowRanges = True):
    """Builds the question for a list of alternatives about one field.

    allowRanges is False for the range parts of HTS patterns, where a token
    such as 3-7 is literal label text rather than a range.
    """
    codec = lab.codecForKey[labelKey]
    matchesUndefined = UNDEFINED_TOKEN in alternatives
    tokens = [ token for token in alternatives if token != UNDEFINED_TOKEN ]

    if matchesUndefined and not codec.orNone:
        raise InvalidPattern(pattern, 'field %s is never undefined' % labelKey)
    if not tokens:
        return ques.SubsetQuestion([], matchesUndefined = True)

    kind = codec.kind
    if kind == 'undefined':
        raise InvalidPattern(pattern, 'field %s is always undefined' % labelKey)
    elif kind == 'phone':
        for token in tokens:
            if token.count('*') > 1 or not phoneAlternativeRe.match(token):
                raise InvalidPattern(pattern, '%r is not a valid phone'
                                     ' pattern' % token)
        return ques.WildcardQuestion(tokens,
                                     matchesUndefined = matchesUndefined)
    elif kind == 'boolean':
        values = []
        for token in tokens:
            if token not in ('0', '1'):
                raise InvalidPattern(pattern, '%r is not a valid boolean' %
                                     token)
            values.append(token == '1')
        return ques.SubsetQuestion(values, matchesUndefined = matchesUndefined)
    elif kind == 'category':
        for token in tokens:
            if not unsignedLiteralRe.match(token):
                raise InvalidPattern(pattern, '%r is not a valid category' %
                                     token)
        return ques.SubsetQuestion([ int(token) for token in tokens ],
                                   matchesUndefined = matchesUndefined)
    elif kind in ('signed', 'unsigned'):
        return buildNumericQuestion(tokens, kind == 'signed',
                                    matchesUndefined, pattern,
                                    allowRanges = allowRanges)
    else:
        raise RuntimeError('unknown field kind %r' % kind)

def parseQuestion(patternText, fieldSelector, name = None):
    """Parses a pattern about a single field into a LabelQuestion."""
    labelKey = resolveField(fieldSelector)
    if not patternText:
        raise InvalidPattern(patternText, 'pattern is empty')
    alternatives = patternText.split(ALTERNATION)
    if '' in alternatives:
        raise InvalidPattern(patternText, 'empty alternative')
    question = buildQuestion(labelKey, alternatives, patternText)
    return ques.LabelQuestion(ques.SlotLabelValuer(labelKey), question,
                              name = name)

def parseHtsQuestion(patterns, name = None):
    """Parses the patterns of an HTS question into a LabelQuestion.

    All the patterns must be about the same field.
    """
    if not patterns:
        raise InvalidPattern(patterns, 'no patterns given')
    labelKey = None
    rangeTokens = []
    for pattern in patterns:
        patternKey, rangeToken = estimatePosition(pattern)
        if labelKey is None:
            labelKey = patternKey
        elif patternKey != labelKey:
            raise InvalidPattern(
                pattern,
                'about field %s but earlier patterns are about %s' %
                (lab.positionForKey[patternKey], lab.positionForKey[labelKey])
            )
        rangeTokens.append(rangeToken)
    question = buildQuestion(labelKey, rangeTokens, ALTERNATION.join(patterns),
                             allowRanges = False)
    return ques.LabelQuestion(ques.SlotLabelValuer(labelKey), question,
                              name = name)

def parseHedQuestion(patternsText, name = None):
    """Parses the brace form of an HTS question, e.g. '{*-a+*,*-i+*}'."""
    patternsText = patternsText.strip()
    if not (patternsText.startswith('{') and patternsText.endswith('}')):
        raise InvalidPattern(patternsText, 'expected {pattern,...}')
    patterns = [ pattern.strip()
                 for pattern in patternsText[1:-1].split(ALTERNATION) ]
    if '' in patterns:
        raise InvalidPattern(patternsText, 'empty pattern')
    return parseHtsQuestion(patterns, name = name)
