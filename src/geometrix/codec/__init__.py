"""
JSON encode/decode for geometric values.
"""

from .json_codec import (
    SUPPORTED_TYPES,
    type_tag,
    encode,
    decode,
    encode_tagged,
    decode_tagged,
    decode_tagged_list,
    dumps,
    loads,
    save_file,
    load_file,
)

__all__ = [
    'SUPPORTED_TYPES',
    'type_tag',
    'encode',
    'decode',
    'encode_tagged',
    'decode_tagged',
    'decode_tagged_list',
    'dumps',
    'loads',
    'save_file',
    'load_file',
]
