import sys

from modmsgcheck import base, constants
from modmsgcheck.errors import UnparseableFileError, DecodeError, EncodeError
from modmsgcheck.message_diff import MessageDiff
from modmsgcheck.openmpt import OpenMPTModule


def check_file(filename, differ=None, open_module=OpenMPTModule, out=None, err=None):
    """
    Checks the message of one module file and prints a report if it reads differently as CP437.

    Problems with the file itself (unreadable, not a module, garbled message) are
    printed to err and returned as a FAILED result, so the caller can go on with
    the next file.  InternalConsistencyError is not caught.

    :param filename: module file
    :type filename: str
    :param differ: report generator (default: MessageDiff with default options)
    :type differ: MessageDiff
    :param open_module: callable taking a binary file handle and returning an object with get_metadata()
    :param out: report stream (default: stdout)
    :param err: error stream (default: stderr)
    :return: what happened to the file
    :rtype: base.CheckResult
    """
    if differ is None:
        differ = MessageDiff()
    if err is None:
        err = sys.stderr

    try:
        with open(filename, 'rb') as f:
            mod = open_module(f)
            try:
                message = mod.get_metadata(constants.MESSAGE_METADATA_KEY)
            finally:
                close = getattr(mod, 'close', None)
                if close is not None:
                    close()
        if len(message) == 0:
            return base.CheckResult(filename, base.NO_MESSAGE, None)
        if differ.compare_and_report(filename, message, out=out):
            return base.CheckResult(filename, base.REPORTED, None)
        return base.CheckResult(filename, base.IDENTICAL, None)
    except (UnparseableFileError, DecodeError, EncodeError, OSError) as e:
        print("can't open %s: %s" % (filename, e), file=err)
        return base.CheckResult(filename, base.FAILED, e)


def check_files(filenames, differ=None, open_module=OpenMPTModule, out=None, err=None):
    """
    Runs check_file() on each file in turn

    :return: one result per file
    :rtype: list of base.CheckResult
    """
    if differ is None:
        differ = MessageDiff()
    return [check_file(fn, differ, open_module, out, err) for fn in filenames]
