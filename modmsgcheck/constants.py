# Constants for modmsgcheck
#

import os
from pathlib import Path


# Version information.  Update BUILD_VERSION with every significant bugfix;
# update MINOR_VERSION with every feature addition
MAJOR_VERSION = 0
MINOR_VERSION = 1
BUILD_VERSION = 0

MODMSGCHECK_VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{BUILD_VERSION}"

# libopenmpt metadata key holding the song message as stored in the file
MESSAGE_METADATA_KEY = 'message_raw'

# Report layout
DISPLAY_WIDTH = 80
COLUMN_SEPARATOR = ' | '
LINE_DELIMITER = b'\n'

# Unicode scalar value limits
MAX_CODEPOINT = 0x10FFFF
SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF


def project_to_absolute_path(file_path):
    """Returns project root folder"""
    return os.path.normpath(os.path.join(Path(__file__).parent.parent.absolute(), file_path))
