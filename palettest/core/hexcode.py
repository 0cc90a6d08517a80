"""Hex colour codes: '#rrggbb' parsing and formatting."""

import re

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


def hex_to_rgb(code: str) -> tuple[int, int, int]:
    """Parse '#rrggbb', 'rrggbb' or '#rgb' (any case) into an (r, g, b) tuple."""
    match = _HEX_RE.match(code.strip()) if isinstance(code, str) else None
    if match is None:
        raise ValueError(f'Not a hex colour code: {code!r}')
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'
