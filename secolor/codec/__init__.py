from .hex_codec import (
    HEX_MARKER,
    HEX_LENGTH,
    FALLBACK_BYTE,
    extract_channel,
    assemble_hex,
    is_valid_hex,
    parse_hex_byte,
    make_color,
    color_from_hex,
    byte_to_hex,
    color_to_hex,
)

__all__ = [
    'HEX_MARKER',
    'HEX_LENGTH',
    'FALLBACK_BYTE',
    'extract_channel',
    'assemble_hex',
    'is_valid_hex',
    'parse_hex_byte',
    'make_color',
    'color_from_hex',
    'byte_to_hex',
    'color_to_hex',
]
