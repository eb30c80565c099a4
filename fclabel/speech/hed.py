"""Reading of HTS question (.hed) files.

Each non-blank line of a question file has the form

    QS "name" {pattern1,pattern2,...}

where each pattern is an HTS wildcard pattern matching whole labels.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import logging
import re

from fclabel.modelling.questions import QuestionError, InvalidPattern
from fclabel.modelling.fallback import parseQuestionWithFallback

hedLineRe = re.compile(r'\s*QS\s+(?:"([^"]*)"|(\S+))\s+\{([^{}]*)\}\s*\Z')

def parseHedLine(hedLine):
    """Returns (name, patterns) for a QS line."""
    match = hedLineRe.match(hedLine)
    if not match:
        raise InvalidPattern(hedLine.strip(), 'not a QS line')
    quotedName, bareName, patternsString = match.groups()
    name = quotedName if quotedName is not None else bareName
    patterns = [ pattern.strip() for pattern in patternsString.split(',') ]
    if '' in patterns:
        raise InvalidPattern(patternsString, 'empty pattern')
    return name, patterns

def readHedFile(hedFile, fallback = None):
    """Reads all questions from a question file.

    fallback is passed on to parseQuestionWithFallback, so by default any
    question which cannot be parsed as a single-field question is an error.
    Continuous (CQS) questions are skipped.
    """
    questions = []
    with open(hedFile, 'r') as f:
        for lineNum, hedLine in enumerate(f, 1):
            if not hedLine.strip():
                continue
            if hedLine.lstrip().startswith('CQS'):
                logging.warning('%s:%s: skipping continuous question' %
                                (hedFile, lineNum))
                continue
            try:
                name, patterns = parseHedLine(hedLine)
                questions.append(
                    parseQuestionWithFallback(patterns, name = name,
                                              fallback = fallback)
                )
            except QuestionError as e:
                e.location = '%s:%s' % (hedFile, lineNum)
                raise
    return questions
