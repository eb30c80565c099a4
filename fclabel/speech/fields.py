"""Codecs for the individual slots of a full-context label.

Each codec maps a raw token (the text between two separators of a label) to a
python value and back. The undefined value is represented by None and written
as UNDEFINED_TOKEN. Only canonical spellings are accepted, so that encoding a
decoded token always gives back the original token.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import re

UNDEFINED_TOKEN = 'xx'

phonePat = r'[^\s\^\-+=/]+'
unsignedPat = r'0|[1-9][0-9]*'
signedPat = r'0|-?[1-9][0-9]*'
boolPat = r'[01]'

class LabelError(Exception):
    # set by file readers to 'path:lineNum'
    location = None

class MalformedField(LabelError):
    def __init__(self, labelKey, token, reason = None):
        msg = 'invalid token %r for field %s' % (token, labelKey)
        if reason is not None:
            msg += ' (%s)' % reason
        LabelError.__init__(self, msg)
        self.labelKey = labelKey
        self.token = token

class Codec(object):
    """Base class for slot codecs.

    Subclasses set kind and pat and implement decodeDefined and
    encodeDefined. orNone says whether the slot may hold the undefined value.
    """
    kind = None
    pat = None
    orNone = True

    def __init__(self):
        self._re = re.compile(r'(?:' + self.pat + r')\Z')

    def __repr__(self):
        return '%s()' % self.__class__.__name__

    def decode(self, token, labelKey = None):
        if token == UNDEFINED_TOKEN and self.orNone:
            return None
        if not self._re.match(token):
            raise MalformedField(labelKey, token, 'expected %s' % self.kind)
        return self.decodeDefined(token)

    def encode(self, value, labelKey = None):
        if value is None:
            if not self.orNone:
                raise MalformedField(labelKey, value, 'field may not be undefined')
            return UNDEFINED_TOKEN
        token = self.encodeDefined(value, labelKey)
        if not self._re.match(token):
            raise MalformedField(labelKey, value, 'cannot encode as %s' % self.kind)
        return token

class PhoneCodec(Codec):
    kind = 'phone'
    pat = phonePat

    def decodeDefined(self, token):
        return token

    def encodeDefined(self, value, labelKey):
        if not isinstance(value, str) or value == UNDEFINED_TOKEN:
            raise MalformedField(labelKey, value, 'phone must be a string')
        return value

class IntCodec(Codec):
    def decodeDefined(self, token):
        return int(token)

    def encodeDefined(self, value, labelKey):
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedField(labelKey, value, 'expected an integer')
        return str(value)

class SignedCodec(IntCodec):
    kind = 'signed'
    pat = signedPat

class UnsignedCodec(IntCodec):
    kind = 'unsigned'
    pat = unsignedPat

    def __init__(self, orNone = True):
        self.orNone = orNone
        IntCodec.__init__(self)

    def __repr__(self):
        return 'UnsignedCodec(orNone=%r)' % self.orNone

class CategoryCodec(IntCodec):
    """Numeric category code, zero-padded to a minimum width."""
    kind = 'category'

    def __init__(self, width):
        self.width = width
        if width <= 1:
            self.pat = unsignedPat
        else:
            self.pat = r'[0-9]{%d}|[1-9][0-9]{%d,}' % (width, width)
        IntCodec.__init__(self)

    def __repr__(self):
        return 'CategoryCodec(%r)' % self.width

    def encodeDefined(self, value, labelKey):
        IntCodec.encodeDefined(self, value, labelKey)
        return '%0*d' % (self.width, value)

class BooleanCodec(Codec):
    kind = 'boolean'
    pat = boolPat

    def decodeDefined(self, token):
        return token == '1'

    def encodeDefined(self, value, labelKey):
        if not isinstance(value, bool):
            raise MalformedField(labelKey, value, 'expected a bool')
        return '1' if value else '0'

class UndefinedCodec(Codec):
    """A slot which is always undefined."""
    kind = 'undefined'
    pat = re.escape(UNDEFINED_TOKEN)

    def decode(self, token, labelKey = None):
        if token != UNDEFINED_TOKEN:
            raise MalformedField(labelKey, token, 'field is always undefined')
        return None

    def encode(self, value, labelKey = None):
        if value is not None:
            raise MalformedField(labelKey, value, 'field is always undefined')
        return UNDEFINED_TOKEN
