# Common byte functions


def leading_ones(a_byte):
    """
    Number of consecutive set bits, starting from bit 7
    """
    n = 0
    mask = 0x80
    while mask and a_byte & mask:
        n += 1
        mask >>= 1
    return n


def utf8_sequence_length(lead_byte):
    """
    Length of the UTF-8 sequence started by lead_byte, judged from its high bits only.

    0xxxxxxx and stray continuation bytes (10xxxxxx) count as one byte.
    """
    n = leading_ones(lead_byte)
    return n if n >= 2 else 1


def grapheme_count(utf8_bytes):
    """
    Counts the characters in a UTF-8 byte string, for lining up columns.

    Only lead bytes are looked at, so this is really "number of encoded characters";
    combining marks are counted as characters of their own.  A sequence truncated
    at the end of the buffer still counts as one character.

    :param utf8_bytes: UTF-8 encoded text
    :type utf8_bytes: bytes
    :return: number of characters
    :rtype: int
    """
    i = 0
    n = 0
    end = len(utf8_bytes)
    while i < end:
        i = min(i + utf8_sequence_length(utf8_bytes[i]), end)
        n += 1
    return n
