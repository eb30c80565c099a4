"""Evaluation of many questions on many labels, as used in clustering.

Questions here are anything with a codomain and a call giving the answer for a
label, such as LabelQuestion or the fallback questions.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import numpy as np

def getAnswerMatrix(questions, labels):
    """Returns a bool array with one row per question, one column per label."""
    answers = np.zeros((len(questions), len(labels)), dtype = bool)
    for questionIndex, question in enumerate(questions):
        for labelIndex, label in enumerate(labels):
            answers[questionIndex, labelIndex] = question(label)
    return answers

def partitionLabels(labels, question):
    """Returns one list of labels for each answer in the codomain."""
    labelsForAnswer = [ [] for _ in question.codomain() ]
    for label in labels:
        labelsForAnswer[question(label)].append(label)
    return labelsForAnswer

def removeTrivialQuestions(labels, questions):
    """Removes questions which give the same answer for every label."""
    if not labels:
        return []
    answers = getAnswerMatrix(questions, labels)
    return [ question
             for question, answerRow in zip(questions, answers)
             if answerRow.any() and not answerRow.all() ]

def getAnswerCounts(questions, labels):
    """Returns the number of labels answered "yes" for each question."""
    return getAnswerMatrix(questions, labels).sum(axis = 1)
