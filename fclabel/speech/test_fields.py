"""Unit tests for label field codecs."""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import unittest

from fclabel.speech import fields
from fclabel.speech.fields import MalformedField

class TestFields(unittest.TestCase):
    def test_undefined_is_not_zero(self):
        codec = fields.UnsignedCodec()
        assert codec.decode('xx') is None
        assert codec.decode('0') == 0
        assert codec.encode(None) == 'xx'
        assert codec.encode(0) == '0'

    def test_unsigned(self):
        codec = fields.UnsignedCodec()
        assert codec.decode('41') == 41
        for token in ['-1', '01', '', '1a', ' 1']:
            self.assertRaises(MalformedField, codec.decode, token)
        self.assertRaises(MalformedField, codec.encode, -1)
        self.assertRaises(MalformedField, codec.encode, True)
        self.assertRaises(MalformedField, codec.encode, 1.0)

    def test_unsigned_never_undefined(self):
        codec = fields.UnsignedCodec(orNone = False)
        self.assertRaises(MalformedField, codec.decode, 'xx')
        self.assertRaises(MalformedField, codec.encode, None)
        assert codec.encode(3) == '3'

    def test_signed(self):
        codec = fields.SignedCodec()
        assert codec.decode('-3') == -3
        assert codec.decode('12') == 12
        assert codec.encode(-12) == '-12'
        for token in ['-0', '+1', '03', '--1']:
            self.assertRaises(MalformedField, codec.decode, token)

    def test_category_padding(self):
        codec = fields.CategoryCodec(2)
        assert codec.decode('02') == 2
        assert codec.decode('00') == 0
        assert codec.decode('123') == 123
        assert codec.encode(2) == '02'
        assert codec.encode(17) == '17'
        self.assertRaises(MalformedField, codec.decode, '2')
        self.assertRaises(MalformedField, codec.decode, '012')

        codec = fields.CategoryCodec(1)
        assert codec.decode('5') == 5
        assert codec.encode(5) == '5'
        self.assertRaises(MalformedField, codec.decode, '05')

    def test_boolean(self):
        codec = fields.BooleanCodec()
        assert codec.decode('1') is True
        assert codec.decode('0') is False
        assert codec.decode('xx') is None
        assert codec.encode(True) == '1'
        self.assertRaises(MalformedField, codec.decode, '2')
        self.assertRaises(MalformedField, codec.encode, 1)

    def test_undefined(self):
        codec = fields.UndefinedCodec()
        assert codec.decode('xx') is None
        assert codec.encode(None) == 'xx'
        self.assertRaises(MalformedField, codec.decode, '0')
        self.assertRaises(MalformedField, codec.encode, 0)

    def test_phone(self):
        codec = fields.PhoneCodec()
        assert codec.decode('sil') == 'sil'
        assert codec.decode('xx') is None
        assert codec.encode('N') == 'N'
        for token in ['', 'a-b', 'a+b', 'a^', '=', 'a/b', 'a b']:
            self.assertRaises(MalformedField, codec.decode, token)
        self.assertRaises(MalformedField, codec.encode, 'xx')
        self.assertRaises(MalformedField, codec.encode, 3)

    def test_MalformedField_details(self):
        try:
            fields.SignedCodec().decode('03', 'accent_rel_pos')
        except MalformedField as e:
            assert e.labelKey == 'accent_rel_pos'
            assert e.token == '03'
            assert 'accent_rel_pos' in str(e)
        else:
            self.fail('MalformedField not raised')

def suite():
    return unittest.TestLoader().loadTestsFromTestCase(TestFields)

if __name__ == '__main__':
    unittest.main()
