'''
Minimal binding to libopenmpt, used to pull the song message out of a module file.

All parsing is done by libopenmpt (https://lib.openmpt.org), which understands the
MOD, S3M, XM, IT, MPTM and many other tracker formats.  Only the handful of C API
calls needed to load a module and read its metadata are bound here.
'''

import ctypes
import ctypes.util

from modmsgcheck.errors import UnparseableFileError
from modmsgcheck import constants

LIBRARY_NAME = 'openmpt'

OPENMPT_LOG_FUNC = ctypes.CFUNCTYPE(None, ctypes.c_char_p, ctypes.c_void_p)


@OPENMPT_LOG_FUNC
def _silent_log(message, user):
    pass


_lib = None


def load_library():
    """
    Loads the libopenmpt shared library (once) and declares the functions used

    :raises UnparseableFileError: if libopenmpt is not installed
    """
    global _lib
    if _lib is not None:
        return _lib

    path = ctypes.util.find_library(LIBRARY_NAME)
    if path is None:
        raise UnparseableFileError("libopenmpt not found")
    try:
        lib = ctypes.CDLL(path)
    except OSError as e:
        raise UnparseableFileError("can't load %s: %s" % (path, e)) from e

    lib.openmpt_module_create_from_memory2.restype = ctypes.c_void_p
    lib.openmpt_module_create_from_memory2.argtypes = [
        ctypes.c_void_p, ctypes.c_size_t,       # file data, size
        OPENMPT_LOG_FUNC, ctypes.c_void_p,      # log function, log user data
        ctypes.c_void_p, ctypes.c_void_p,       # error function, error user data
        ctypes.POINTER(ctypes.c_int),           # error code out
        ctypes.POINTER(ctypes.c_void_p),        # error message out
        ctypes.c_void_p]                        # initial ctls
    lib.openmpt_module_destroy.restype = None
    lib.openmpt_module_destroy.argtypes = [ctypes.c_void_p]
    # Strings are returned as void pointers so they can be handed back to openmpt_free_string()
    lib.openmpt_module_get_metadata.restype = ctypes.c_void_p
    lib.openmpt_module_get_metadata.argtypes = [ctypes.c_void_p, ctypes.c_char_p]
    lib.openmpt_error_string.restype = ctypes.c_void_p
    lib.openmpt_error_string.argtypes = [ctypes.c_int]
    lib.openmpt_free_string.restype = None
    lib.openmpt_free_string.argtypes = [ctypes.c_void_p]

    _lib = lib
    return _lib


def take_string(lib, ptr):
    """
    Copies a string returned by libopenmpt and frees the original
    """
    if not ptr:
        return b''
    try:
        return ctypes.string_at(ptr)
    finally:
        lib.openmpt_free_string(ptr)


class OpenMPTModule:
    """
    A module file loaded by libopenmpt

    :param file_handle: file opened in binary mode
    :raises UnparseableFileError: if libopenmpt can't load the file
    """
    def __init__(self, file_handle):
        self._lib = load_library()
        self._mod = None

        try:
            data = file_handle.read()
        except OSError as e:
            raise UnparseableFileError(str(e)) from e

        error = ctypes.c_int(0)
        error_message = ctypes.c_void_p(None)
        buf = ctypes.create_string_buffer(data)
        mod = self._lib.openmpt_module_create_from_memory2(
            buf, len(data), _silent_log, None, None, None,
            ctypes.byref(error), ctypes.byref(error_message), None)
        reason = take_string(self._lib, error_message.value)

        if not mod:
            if not reason:
                reason = take_string(self._lib, self._lib.openmpt_error_string(error.value))
            raise UnparseableFileError(reason.decode('utf-8', 'replace') or "unknown error")
        self._mod = mod

    def get_metadata(self, key):
        """
        Gets a metadata field, such as 'title', 'artist' or 'message_raw'

        :param key: metadata key
        :type key: str
        :return: UTF-8 text of the field (empty if the module doesn't have it)
        :rtype: bytes
        """
        if self._mod is None:
            raise UnparseableFileError("module is closed")
        return take_string(self._lib, self._lib.openmpt_module_get_metadata(self._mod, key.encode('ascii')))

    def get_message(self):
        return self.get_metadata(constants.MESSAGE_METADATA_KEY)

    def close(self):
        if self._mod is not None:
            self._lib.openmpt_module_destroy(self._mod)
            self._mod = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        if getattr(self, '_mod', None) is not None:
            self.close()
