# Conversion between UTF-8 bytes and lists of Unicode code points

from modmsgcheck.errors import DecodeError, EncodeError
from modmsgcheck import constants


def is_scalar_value(c):
    """
    True if c can be encoded: in range and not a surrogate
    """
    return 0 <= c <= constants.MAX_CODEPOINT \
        and not constants.SURROGATE_FIRST <= c <= constants.SURROGATE_LAST


def decode(utf8_bytes):
    """
    Decodes UTF-8 into a list of code points

    :param utf8_bytes: UTF-8 encoded text
    :type utf8_bytes: bytes
    :return: code points
    :rtype: list of int
    :raises DecodeError: on malformed, overlong, surrogate or out-of-range sequences
    """
    try:
        text = bytes(utf8_bytes).decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError("Error: invalid UTF-8 at byte %d: %s" % (e.start, e.reason)) from e
    return [ord(c) for c in text]


def encode(codepoints):
    """
    Encodes a list of code points as UTF-8

    :param codepoints: code points
    :type codepoints: iterable of int
    :return: UTF-8 encoded text
    :rtype: bytes
    :raises EncodeError: if a value is not a Unicode scalar value
    """
    chars = []
    for c in codepoints:
        if not is_scalar_value(c):
            raise EncodeError("Error: U+%04X is not a Unicode scalar value" % c)
        chars.append(chr(c))
    return ''.join(chars).encode('utf-8')
