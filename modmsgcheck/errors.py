'''
Exceptions for modmsgcheck
'''


class ModMsgCheckException(Exception):
    """
    Generic base class for modmsgcheck exceptions
    """
    pass


class UnparseableFileError(ModMsgCheckException, IOError):
    """
    The module parser rejected the file (unknown format, truncated, I/O error)
    """
    pass


class DecodeError(ModMsgCheckException, ValueError):
    """
    Malformed UTF-8
    """
    pass


class EncodeError(ModMsgCheckException, ValueError):
    """
    Value is not a Unicode scalar
    """
    pass


class InternalConsistencyError(ModMsgCheckException):
    """
    Original and converted messages no longer line up (a conversion bug, not bad input)
    """
    pass


class ModMsgCheckValueError(ModMsgCheckException, ValueError):
    """
    Value error
    """
    pass
