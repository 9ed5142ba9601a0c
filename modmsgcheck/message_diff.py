import os
import sys

from modmsgcheck import base, codepoints, constants, cp437
from modmsgcheck.byte_util import grapheme_count
from modmsgcheck.errors import InternalConsistencyError, ModMsgCheckValueError

'''
Compares a module message with its CP437 reading and prints the two side by side.

Many trackers of the DOS era wrote messages in code page 437, while module
players and catalogs tend to take the same bytes at face value.  Each row of the
report shows a line as stored, padded to 80 characters, then " | " and the line
read as CP437.
'''


def split_lines(message):
    """
    Splits a message on line feeds.  A final line feed does not start a new (empty) line.

    :param message: message text
    :type message: bytes
    :return: lines without their line feeds
    :rtype: list of bytes
    """
    if len(message) == 0:
        return []
    lines = message.split(constants.LINE_DELIMITER)
    if lines[-1] == b'':
        lines.pop()
    return lines


def convert_message(message):
    """
    Reads every code point of a message as a CP437 byte value and re-encodes the result

    :param message: UTF-8 message text
    :type message: bytes
    :return: UTF-8 text of the CP437 reading
    :rtype: bytes
    """
    return codepoints.encode(cp437.remap_scalars(codepoints.decode(message)))


def pad_to_width(line):
    """
    Right-pads a line with spaces so that it fills the left column
    """
    return line + b' ' * max(0, constants.DISPLAY_WIDTH - grapheme_count(line))



def write_report(report, out):
    """
    Writes UTF-8 report bytes to a stream.

    Text streams with an underlying binary buffer (stdout, open files) get the bytes
    as-is, whatever their own encoding; other text streams get the decoded text.
    """
    buffer = getattr(out, 'buffer', None)
    if buffer is None:
        out.write(report.decode('utf-8', 'surrogateescape'))
        return
    out.flush()
    buffer.write(report)
    buffer.flush()


class MessageDiff(base.ModMsgCheckBase):
    """
    Reports the differences between a module message and its CP437 reading
    """
    def __init__(self, **kwargs):
        base.ModMsgCheckBase.__init__(self)
        self.set_options(diff_only=True)    # only show the lines that differ
        self.set_options(**kwargs)

    def set_options(self, **kwargs):
        """
        Sets options for the report, with validation when required

        :param kwargs: keyword arguments for options
        :type kwargs: keyword arguments
        """
        for op, val in kwargs.items():
            op = op.lower()
            if op != 'diff_only':
                raise ModMsgCheckValueError(f'Error: Unexpected option "{op}"')
            self._options[op] = bool(val)

    @property
    def diff_only(self):
        return self.get_option('diff_only')

    def line_pairs(self, message, converted):
        """
        Pairs up the lines of the original and converted messages

        :raises InternalConsistencyError: if the two messages have different line counts
        """
        message_lines = split_lines(message)
        converted_lines = split_lines(converted)
        if len(message_lines) != len(converted_lines):
            raise InternalConsistencyError("internal error: size mismatch")
        return list(zip(message_lines, converted_lines))

    def report_rows(self, message, converted):
        """
        Returns the rows of the report body, UTF-8 encoded and without line feeds
        """
        rows = []
        for original_line, converted_line in self.line_pairs(message, converted):
            if self.diff_only and original_line == converted_line:
                continue
            rows.append(pad_to_width(original_line)
                        + constants.COLUMN_SEPARATOR.encode('ascii') + converted_line)
        return rows

    def report(self, filename, message, converted):
        """
        The complete report for one file, as UTF-8 bytes
        """
        lines = [b'Difference in ' + os.fsencode(filename) + b':', b'']
        lines += self.report_rows(message, converted)
        lines.append(b'')
        return b''.join(line + constants.LINE_DELIMITER for line in lines)

    def compare_and_report(self, filename, message, out=None):
        """
        Prints the differences between a message and its CP437 reading.

        Nothing is printed if the message is empty or reads the same both ways.  The
        report is built in full before anything is written, and is written as UTF-8
        regardless of the encoding of out.

        :param filename: name shown in the report header
        :type filename: str
        :param message: message text, UTF-8
        :type message: bytes
        :param out: output stream (default: stdout)
        :type out: text file
        :return: True if a report was printed
        :rtype: bool
        """
        if out is None:
            out = sys.stdout

        if len(message) == 0:
            return False

        converted = convert_message(message)
        if message == converted:
            return False

        write_report(self.report(filename, message, converted), out)
        return True
