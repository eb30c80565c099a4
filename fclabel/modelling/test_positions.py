"""Unit tests for estimating the label field an HTS pattern is about."""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import unittest

from fclabel.speech import labels as lab
from fclabel.modelling import positions
from fclabel.modelling.questions import InvalidPattern

def estimatePositionCode(pattern):
    labelKey, rangeToken = positions.estimatePosition(pattern)
    return lab.positionForKey[labelKey], rangeToken

class TestPositions(unittest.TestCase):
    def test_splitPattern(self):
        assert positions.splitPattern('*/A:-??+*') == ('/A:', '-??', '+', True, True)
        assert positions.splitPattern('a^*') == ('', 'a', '^', False, True)
        assert positions.splitPattern('*-41') == ('-', '41', '', True, False)
        assert positions.splitPattern('*_xx_*') == ('_', 'xx', '_', True, True)

    def test_phones(self):
        assert estimatePositionCode('a^*') == ('P1', 'a')
        assert estimatePositionCode('*^a-*') == ('P2', 'a')
        assert estimatePositionCode('*-a+*') == ('P3', 'a')
        assert estimatePositionCode('*+a=*') == ('P4', 'a')
        assert estimatePositionCode('*=a/A:*') == ('P5', 'a')
        assert estimatePositionCode('*=a/*') == ('P5', 'a')
        assert estimatePositionCode('*=sil*') == ('P5', 'sil')

    def test_numeric_fields(self):
        assert estimatePositionCode('*/A:-??+*') == ('A1', '-??')
        assert estimatePositionCode('*+1+*') == ('A2', '1')
        assert estimatePositionCode('*+7/B:*') == ('A3', '7')
        assert estimatePositionCode('*/B:17-*') == ('B1', '17')
        assert estimatePositionCode('*_xx/C:*') == ('B3', 'xx')
        assert estimatePositionCode('*!1_*') == ('E3', '1')
        assert estimatePositionCode('*#0_*') == ('F3', '0')
        assert estimatePositionCode('*%1_*') == ('G3', '1')
        assert estimatePositionCode('*_xx_*') == ('G4', 'xx')
        assert estimatePositionCode('*_1/H:*') == ('G5', '1')
        assert estimatePositionCode('*/H:xx_*') == ('H1', 'xx')
        assert estimatePositionCode('*&1-*') == ('I5', '1')
        assert estimatePositionCode('*/J:5_*') == ('J1', '5')
        assert estimatePositionCode('*/K:2+*') == ('K1', '2')
        assert estimatePositionCode('*+8-*') == ('K2', '8')
        assert estimatePositionCode('*-41') == ('K3', '41')

    def test_ambiguous(self):
        # ':' then '+' is A1, D1 or K1
        for pattern in ['*:1+*', '*_1*', '*+1*']:
            self.assertRaises(InvalidPattern, positions.estimatePosition, pattern)

    def test_no_field(self):
        for pattern in ['*^k-o+*', '*/Z:1+*', '*-1-*', 'a-*', '*=a']:
            self.assertRaises(InvalidPattern, positions.estimatePosition, pattern)

    def test_empty_range(self):
        self.assertRaises(InvalidPattern, positions.estimatePosition, '*/A:+*')

    def test_positionHints(self):
        assert positions.positionHints[0] == ('ll_phone', '', '^')
        assert positions.positionHints[-1] == ('utt_num_moras', '-', '')
        assert len(positions.positionHints) == lab.numFields

def suite():
    return unittest.TestLoader().loadTestsFromTestCase(TestPositions)

if __name__ == '__main__':
    unittest.main()
