#!/usr/bin/python -u

"""Command-line tool which answers label questions for a label file.

For each label in the label file, prints the label followed by a tab and the
names of the questions from the question file which the label matches.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import argparse
import logging
import sys

from fclabel.speech.fields import LabelError
from fclabel.speech.labels import formatLabel, readLabFile
from fclabel.speech.hed import readHedFile
from fclabel.modelling.questions import QuestionError

logLevelForVerbosity = [logging.ERROR, logging.WARNING, logging.INFO]

def main(rawArgs):
    parser = argparse.ArgumentParser(
        description = 'Answers full-context label questions for a label file.',
        formatter_class = argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        'labFile', metavar = 'LAB',
        help = 'label file (one label per line, optionally preceded by'
               ' start and end times)'
    )
    parser.add_argument(
        '--hed', dest = 'hedFile', required = True, metavar = 'HED',
        help = 'question file'
    )
    parser.add_argument(
        '--fallback', dest = 'fallback', choices = ['regex', 'noop', 'none'],
        default = 'none',
        help = 'what to do with questions which are not about a single field'
    )
    parser.add_argument(
        '--verbosity', dest = 'verbosity', type = int, default = 1,
        metavar = 'VERB',
        help = 'verbosity level'
    )
    args = parser.parse_args(rawArgs[1:])

    if args.verbosity < len(logLevelForVerbosity):
        logLevel = logLevelForVerbosity[max(args.verbosity, 0)]
    else:
        logLevel = logging.DEBUG
    logging.basicConfig(level = logLevel, format = '%(levelname)s: %(message)s')

    fallback = None if args.fallback == 'none' else args.fallback
    try:
        questions = readHedFile(args.hedFile, fallback = fallback)
        labs = readLabFile(args.labFile)
    except (LabelError, QuestionError) as e:
        logging.error('%s: %s' % (e.location, e))
        return 1
    except OSError as e:
        logging.error(str(e))
        return 1
    logging.info('read %s questions and %s labels' %
                 (len(questions), len(labs)))

    for start, end, label in labs:
        names = [ question.shortRepr() for question in questions
                  if question.matches(label) ]
        print(formatLabel(label) + '\t' + ' '.join(names))

    return 0

if __name__ == '__main__':
    retCode = main(sys.argv)
    sys.exit(retCode)
