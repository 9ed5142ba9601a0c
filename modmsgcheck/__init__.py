
from .message_diff import MessageDiff, convert_message
from .cp437 import cp437_to_unicode, CP437_TO_UNICODE
from .openmpt import OpenMPTModule
from .scan import check_file, check_files
