"""Representation and I/O for HTS-style full-context labels.

The label format is given by labelFormat, a table with one row per field
holding the field's name, its HTS position code (P1 to K3), its codec and the
separator written after it. The parser, the formatter and the question
position estimator all work from this one table.
"""

# This file is part of fclabel.
# See `License` for details of license and warranty.

import collections

from fclabel.speech.fields import LabelError, MalformedField
from fclabel.speech.fields import PhoneCodec, SignedCodec, UnsignedCodec
from fclabel.speech.fields import CategoryCodec, BooleanCodec, UndefinedCodec

phoneCodec = PhoneCodec()
signedCodec = SignedCodec()
unsignedCodec = UnsignedCodec()
countCodec = UnsignedCodec(orNone = False)
posCodec = CategoryCodec(2)
conjCodec = CategoryCodec(1)
boolCodec = BooleanCodec()
undefinedCodec = UndefinedCodec()

labelFormat = [
    ('ll_phone', 'P1', phoneCodec, '^'),
    ('l_phone', 'P2', phoneCodec, '-'),
    ('phone', 'P3', phoneCodec, '+'),
    ('r_phone', 'P4', phoneCodec, '='),
    ('rr_phone', 'P5', phoneCodec, '/A:'),
    ('accent_rel_pos', 'A1', signedCodec, '+'),
    ('mora_pos_fw', 'A2', unsignedCodec, '+'),
    ('mora_pos_bw', 'A3', unsignedCodec, '/B:'),
    ('l_word_pos', 'B1', posCodec, '-'),
    ('l_word_ctype', 'B2', conjCodec, '_'),
    ('l_word_cform', 'B3', conjCodec, '/C:'),
    ('c_word_pos', 'C1', posCodec, '_'),
    ('c_word_ctype', 'C2', conjCodec, '+'),
    ('c_word_cform', 'C3', conjCodec, '/D:'),
    ('r_word_pos', 'D1', posCodec, '+'),
    ('r_word_ctype', 'D2', conjCodec, '_'),
    ('r_word_cform', 'D3', conjCodec, '/E:'),
    ('l_ap_num_moras', 'E1', unsignedCodec, '_'),
    ('l_ap_accent_type', 'E2', unsignedCodec, '!'),
    ('l_ap_interrogative', 'E3', boolCodec, '_'),
    ('l_ap_undefined', 'E4', undefinedCodec, '-'),
    ('l_ap_no_pause', 'E5', boolCodec, '/F:'),
    ('c_ap_num_moras', 'F1', unsignedCodec, '_'),
    ('c_ap_accent_type', 'F2', unsignedCodec, '#'),
    ('c_ap_interrogative', 'F3', boolCodec, '_'),
    ('c_ap_undefined', 'F4', undefinedCodec, '@'),
    ('c_ap_pos_in_bg_fw', 'F5', unsignedCodec, '_'),
    ('c_ap_pos_in_bg_bw', 'F6', unsignedCodec, '|'),
    ('c_ap_mora_pos_in_bg_fw', 'F7', unsignedCodec, '_'),
    ('c_ap_mora_pos_in_bg_bw', 'F8', unsignedCodec, '/G:'),
    ('r_ap_num_moras', 'G1', unsignedCodec, '_'),
    ('r_ap_accent_type', 'G2', unsignedCodec, '%'),
    ('r_ap_interrogative', 'G3', boolCodec, '_'),
    ('r_ap_undefined', 'G4', undefinedCodec, '_'),
    ('r_ap_no_pause', 'G5', boolCodec, '/H:'),
    ('l_bg_num_aps', 'H1', unsignedCodec, '_'),
    ('l_bg_num_moras', 'H2', unsignedCodec, '/I:'),
    ('c_bg_num_aps', 'I1', unsignedCodec, '-'),
    ('c_bg_num_moras', 'I2', unsignedCodec, '@'),
    ('c_bg_pos_fw', 'I3', unsignedCodec, '+'),
    ('c_bg_pos_bw', 'I4', unsignedCodec, '&'),
    ('c_bg_ap_pos_fw', 'I5', unsignedCodec, '-'),
    ('c_bg_ap_pos_bw', 'I6', unsignedCodec, '|'),
    ('c_bg_mora_pos_fw', 'I7', unsignedCodec, '+'),
    ('c_bg_mora_pos_bw', 'I8', unsignedCodec, '/J:'),
    ('r_bg_num_aps', 'J1', unsignedCodec, '_'),
    ('r_bg_num_moras', 'J2', unsignedCodec, '/K:'),
    ('utt_num_bgs', 'K1', countCodec, '+'),
    ('utt_num_aps', 'K2', countCodec, '-'),
    ('utt_num_moras', 'K3', countCodec, ''),
]

labelKeys = [ labelKey for labelKey, position, codec, sep in labelFormat ]
numFields = len(labelFormat)
indexForKey = dict([ (labelKey, index)
                     for index, labelKey in enumerate(labelKeys) ])
keyForPosition = dict([ (position, labelKey)
                        for labelKey, position, codec, sep in labelFormat ])
positionForKey = dict([ (labelKey, position)
                        for labelKey, position, codec, sep in labelFormat ])
codecForKey = dict([ (labelKey, codec)
                     for labelKey, position, codec, sep in labelFormat ])

# punctuation that can only appear in a label as part of a separator
separatorChars = frozenset([ c for labelKey, position, codec, sep in labelFormat
                             for c in sep if not c.isalnum() ])

class SchemaMismatch(LabelError):
    pass

class Label(collections.namedtuple('Label', labelKeys)):
    """A parsed full-context label.

    One member per field of labelFormat, in order. Undefined fields are None.
    """
    __slots__ = ()

    @classmethod
    def parse(cls, labelString):
        return parseLabel(labelString)

    def format(self):
        return formatLabel(self)

    def __str__(self):
        return formatLabel(self)

def createLabel(**values):
    """Creates a label from keyword values, checking each value.

    Fields not given are undefined, except for the utterance counts (K1 to
    K3), which may not be undefined and default to 0.
    """
    for labelKey in values:
        if labelKey not in indexForKey:
            raise SchemaMismatch('unknown label field %r' % labelKey)
    fieldValues = []
    for labelKey, position, codec, sep in labelFormat:
        default = None if codec.orNone else 0
        value = values.get(labelKey, default)
        codec.encode(value, labelKey)
        fieldValues.append(value)
    return Label._make(fieldValues)

def splitLabel(labelString):
    """Splits a label string into one token per field.

    Each token runs up to the first occurrence of the separator which follows
    it in labelFormat. A non-phone token containing separator punctuation
    means the label has an extra field.
    """
    def checkToken(token, codec):
        if codec.kind == 'phone':
            return
        # a leading minus sign is a sign, not a separator
        body = token[1:] if token.startswith('-') else token
        if any([ c in separatorChars for c in body ]):
            raise SchemaMismatch('label %r has more than %s fields (%r is not'
                                 ' one field)' % (labelString, numFields, token))

    tokens = []
    start = 0
    for labelKey, position, codec, sep in labelFormat[:-1]:
        end = labelString.find(sep, start)
        if end == -1:
            raise SchemaMismatch(
                'label %r has only %s of %s fields (separator %r after %s'
                ' not found)' %
                (labelString, len(tokens) + 1, numFields, sep, labelKey)
            )
        token = labelString[start:end]
        checkToken(token, codec)
        tokens.append(token)
        start = end + len(sep)
    lastToken = labelString[start:]
    checkToken(lastToken, labelFormat[-1][2])
    tokens.append(lastToken)
    return tokens

def parseLabel(labelString):
    tokens = splitLabel(labelString)
    return Label._make([
        codec.decode(token, labelKey)
        for (labelKey, position, codec, sep), token in zip(labelFormat, tokens)
    ])

def formatLabel(label):
    if len(label) != numFields:
        raise SchemaMismatch('label has %s fields (expected %s)' %
                             (len(label), numFields))
    return ''.join([
        codec.encode(value, labelKey) + sep
        for (labelKey, position, codec, sep), value in zip(labelFormat, label)
    ])

def parseLabLine(labLine):
    """Parses one line of an HTK-style label file.

    The line is either a bare label or start time, end time and label
    separated by whitespace. Returns (start, end, label), where start and end
    are None if not present.
    """
    parts = labLine.split()
    if len(parts) == 1:
        return None, None, parseLabel(parts[0])
    elif len(parts) == 3:
        startString, endString, labelString = parts
        try:
            start = int(startString)
            end = int(endString)
        except ValueError:
            raise MalformedField('time', startString + ' ' + endString,
                                 'times should be integers')
        return start, end, parseLabel(labelString)
    else:
        raise SchemaMismatch('label line %r should have 1 or 3 columns'
                             ' (found %s)' % (labLine.strip(), len(parts)))

def readLabFile(labFile):
    labs = []
    with open(labFile, 'r') as f:
        for lineNum, labLine in enumerate(f, 1):
            if not labLine.strip():
                continue
            try:
                labs.append(parseLabLine(labLine))
            except LabelError as e:
                e.location = '%s:%s' % (labFile, lineNum)
                raise
    return labs
