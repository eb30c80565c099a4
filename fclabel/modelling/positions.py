"""Estimates which label field an HTS question pattern is about.

An HTS pattern such as '*/A:-??+*' matches a whole label string, but in
practice each pattern tests a single field: the text between two separators.
The pattern is split into a prefix, a range and a suffix, and the field is the
unique one whose surrounding separators agree with the prefix and suffix.
The separators come from labelFormat, so this stays in step with the label
parser.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import fclabel.speech.labels as lab
from fclabel.modelling.questions import InvalidPattern

# the prefix ends at the first of these, the suffix starts at the last of these
leftDelimiters = frozenset('!#%&+-=@^_|:')
rightDelimiters = frozenset('!#%&+-=@^_|/')

def getPositionHints():
    """Returns (labelKey, separator before, separator after) per field."""
    hints = []
    prevSep = ''
    for labelKey, position, codec, sep in lab.labelFormat:
        hints.append((labelKey, prevSep, sep))
        prevSep = sep
    return hints

positionHints = getPositionHints()

def splitPattern(pattern):
    """Splits an HTS pattern into its parts.

    Returns (prefix, rangeToken, suffix, leadingStar, trailingStar). At most
    one '*' is removed from each end.
    """
    leadingStar = pattern.startswith('*')
    if leadingStar:
        pattern = pattern[1:]
    trailingStar = pattern.endswith('*')
    if trailingStar:
        pattern = pattern[:-1]

    prefixEnd = 0
    for index, c in enumerate(pattern):
        if c in leftDelimiters:
            prefixEnd = index + 1
            break
    suffixStart = len(pattern)
    for index in range(len(pattern) - 1, -1, -1):
        if pattern[index] in rightDelimiters:
            suffixStart = index
            break

    # only one delimiter, seen from both sides
    if prefixEnd > suffixStart:
        if prefixEnd == len(pattern):
            prefixEnd = 0
        else:
            suffixStart = len(pattern)

    return (pattern[:prefixEnd], pattern[prefixEnd:suffixStart],
            pattern[suffixStart:], leadingStar, trailingStar)

def estimatePosition(pattern):
    """Returns (labelKey, rangeToken) for an HTS pattern.

    A pattern without a leading '*' can only be about the first field, and
    one without a trailing '*' only about the last.
    """
    prefix, rangeToken, suffix, leadingStar, trailingStar = splitPattern(pattern)

    candidates = []
    for labelKey, prevSep, sep in positionHints:
        if not leadingStar and prevSep != '':
            continue
        if not trailingStar and sep != '':
            continue
        if prevSep.endswith(prefix) and sep.startswith(suffix):
            candidates.append(labelKey)

    if not candidates:
        raise InvalidPattern(pattern, 'does not match any label field')
    if len(candidates) > 1:
        raise InvalidPattern(
            pattern,
            'could be about any of %s' % ', '.join([
                lab.positionForKey[labelKey] for labelKey in candidates
            ])
        )
    if not rangeToken:
        raise InvalidPattern(pattern, 'range is empty')

    return candidates[0], rangeToken
