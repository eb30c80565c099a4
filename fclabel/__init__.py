"""HTS-style full-context labels and decision tree questions about them."""

# This file is part of fclabel.
# See `License` for details of license and warranty.

from fclabel.speech.fields import LabelError, MalformedField
from fclabel.speech.labels import Label, SchemaMismatch
from fclabel.speech.labels import parseLabel, formatLabel, createLabel
from fclabel.modelling.questions import QuestionError, InvalidPattern
from fclabel.modelling.questions import LabelQuestion
from fclabel.modelling.question_parse import parseQuestion, parseHtsQuestion
from fclabel.modelling.question_parse import parseHedQuestion
