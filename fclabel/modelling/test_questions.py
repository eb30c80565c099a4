"""Unit tests for label questions."""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import unittest

from fclabel.speech import labels as lab
from fclabel.modelling import questions as ques
from fclabel.modelling.questions import InvalidPattern, QuestionError

class TestQuestions(unittest.TestCase):
    def test_WildcardQuestion(self):
        question = ques.WildcardQuestion(['a*b'])
        assert question('ab') == 1
        assert question('axyzb') == 1
        assert question('a') == 0
        assert question('b') == 0
        assert question('ba') == 0

    def test_WildcardQuestion_affixes_do_not_overlap(self):
        question = ques.WildcardQuestion(['ab*ab'])
        assert question('abab') == 1
        assert question('abxab') == 1
        assert question('aba') == 0
        assert question('ab') == 0

    def test_WildcardQuestion_literals_and_stars(self):
        question = ques.WildcardQuestion(['sil', 'k*', '*y'])
        assert question('sil') == 1
        assert question('sila') == 0
        assert question('k') == 1
        assert question('ky') == 1
        assert question('ry') == 1
        assert question('r') == 0
        assert ques.WildcardQuestion(['*'])('anything') == 1
        self.assertRaises(ValueError, ques.WildcardQuestion, ['a*b*c'])

    def test_undefined_never_matches_implicitly(self):
        assert ques.WildcardQuestion(['*'])(None) == 0
        assert ques.RangeQuestion(None, None)(None) == 0
        assert ques.SubsetQuestion([0, 1])(None) == 0
        assert ques.SubsetQuestion([False])(None) == 0
        assert ques.RangeQuestion(0, 5, matchesUndefined = True)(None) == 1
        assert ques.SubsetQuestion([], matchesUndefined = True)(None) == 1
        assert ques.SubsetQuestion([], matchesUndefined = True)(0) == 0

    def test_RangeQuestion(self):
        question = ques.RangeQuestion(3, 7)
        assert [ question(value) for value in range(10) ] == [0, 0, 0, 1, 1, 1, 1, 1, 0, 0]
        question = ques.RangeQuestion(3, None)
        assert question(2) == 0
        assert question(3) == 1
        assert question(1000) == 1
        question = ques.RangeQuestion(None, -1)
        assert question(-50) == 1
        assert question(0) == 0
        self.assertRaises(ValueError, ques.RangeQuestion, 5, 3)

    def test_equality(self):
        assert ques.SubsetQuestion([1, 2]) == ques.SubsetQuestion([2, 1, 1])
        assert ques.SubsetQuestion([1, 2]) != ques.SubsetQuestion([1, 2], matchesUndefined = True)
        assert ques.RangeQuestion(1, 2) != ques.SubsetQuestion([1, 2])
        assert ques.WildcardQuestion(['a*', 'b']) == ques.WildcardQuestion(['b', 'a*'])
        assert hash(ques.RangeQuestion(1, 2)) == hash(ques.RangeQuestion(1, 2))

    def test_shortRepr(self):
        assert ques.RangeQuestion(3, 7).shortRepr() == 'in [3, 7]'
        assert ques.RangeQuestion(3, None).shortRepr() == '>= 3'
        assert ques.RangeQuestion(None, 7, matchesUndefined = True).shortRepr() == '<= 7 or xx'
        assert ques.SubsetQuestion([2, 1]).shortRepr() == 'in {1,2}'
        assert ques.SubsetQuestion([2], 'two').shortRepr() == 'is two'

    def test_LabelQuestion(self):
        labelValuer = ques.SlotLabelValuer('mora_pos_fw')
        fullQuestion = ques.LabelQuestion(labelValuer, ques.RangeQuestion(3, 7), name = 'mid')
        assert fullQuestion.labelKey == 'mora_pos_fw'
        assert fullQuestion.shortRepr() == 'mid'
        labelValuerAgain, question = fullQuestion
        assert labelValuerAgain == labelValuer
        assert question == ques.RangeQuestion(3, 7)
        assert list(fullQuestion.codomain()) == [0, 1]

        assert fullQuestion.matches(lab.createLabel(mora_pos_fw = 5))
        assert fullQuestion(lab.createLabel(mora_pos_fw = 5)) == 1
        assert not fullQuestion.matches(lab.createLabel(mora_pos_fw = 8))
        assert not fullQuestion.matches(lab.createLabel())

    def test_getSubsetQuestions(self):
        fullQuestions = ques.getSubsetQuestions('phone', [('vowel', ['a', 'i', 'u', 'e', 'o']), ('nasal', ['m', 'n', 'N'])])
        assert [ fullQuestion.shortRepr() for fullQuestion in fullQuestions ] == ['phone==vowel', 'phone==nasal']
        vowelQuestion, nasalQuestion = fullQuestions
        label = lab.createLabel(phone = 'N')
        assert not vowelQuestion.matches(label)
        assert nasalQuestion.matches(label)

    def test_InvalidPattern(self):
        e = InvalidPattern('5-3', 'range is inverted')
        assert isinstance(e, QuestionError)
        assert e.pattern == '5-3'
        assert e.reason == 'range is inverted'
        assert e.location is None

def suite():
    return unittest.TestLoader().loadTestsFromTestCase(TestQuestions)

if __name__ == '__main__':
    unittest.main()
