"""Fragmentation unit (FU) header construction shared by H.264 and H.265.

See RFC 6184, section 5.8 (H.264) and RFC 7798, section 4.4.3 (H.265).
"""

_START_BIT = 0b10000000
_END_BIT = 0b01000000


def nal_fu_header(is_first_fragment: bool, is_last_fragment: bool, unit_type: int) -> int:
    """Build the one-octet FU header.

    H.264 layout is ``|S|E|R|Type|`` and H.265 layout is ``|S|E|FuType|``.
    """
    fu_header = 0
    if is_first_fragment:
        fu_header |= _START_BIT
    if is_last_fragment:
        fu_header |= _END_BIT
    return (fu_header + unit_type) & 0xFF