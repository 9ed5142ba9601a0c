import collections


# Outcome of checking one file
CheckResult = collections.namedtuple('CheckResult', ['filename', 'status', 'error'])

NO_MESSAGE = 'no message'
IDENTICAL = 'identical'
REPORTED = 'reported'
FAILED = 'failed'


class ModMsgCheckBase:
    def __init__(self):
        self._options = {}

    def get_option(self, arg, default=None):
        """
        Get an option

        :param arg: option name
        :type arg: str
        :param default: default value
        :type default: type of option
        :return: value of option
        :rtype: option type
        """
        return self._options.get(arg, default)
