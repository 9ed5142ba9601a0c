# Report module messages that read differently when taken as code page 437 text

import argparse

from modmsgcheck import constants
from modmsgcheck.message_diff import MessageDiff
from modmsgcheck.scan import check_files


def main():
    parser = argparse.ArgumentParser(
        description="Compare the song message of tracker modules with its code page 437 reading.")
    parser.add_argument('module_files', nargs='*', help='module files to check')
    parser.add_argument('-a', '--all', action="store_true",
                        help='show every line of a differing message, not just the lines that differ')
    parser.add_argument('--version', action='version', version=constants.MODMSGCHECK_VERSION)

    args = parser.parse_args()

    differ = MessageDiff(diff_only=not args.all)
    check_files(args.module_files, differ)


if __name__ == '__main__':
    main()
