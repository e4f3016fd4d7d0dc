# actionsync Utilities Module
# Token cleanup and script encoding helpers

from actionsync.utils.encoding import decode_script, encode_script
from actionsync.utils.token import sanitize_token

__all__ = [
    "sanitize_token",
    "encode_script",
    "decode_script",
]
