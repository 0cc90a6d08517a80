"""Report builder: text and JSON output for tones."""

import json
from collections.abc import Iterable
from typing import Any

from palettest.core.types import Tone


def format_text(tones: Iterable[Tone]) -> str:
    """Format tones as human-readable text."""
    lines = []
    for tone in tones:
        r, g, b, a = tone.color.rgba
        h, s_l, lightness = tone.hsl
        _, s_v, value = tone.hsv
        lines.append(f'── {tone}')
        lines.append(f'  rgba: {r}, {g}, {b}, {a}')
        lines.append(f'  hsl:  {h:.1f}°, {s_l:.1%}, {lightness:.1%}')
        lines.append(f'  hsv:  {h:.1f}°, {s_v:.1%}, {value:.1%}')
        lines.append('')
    return '\n'.join(lines)


def format_json(tones: Iterable[Tone]) -> str:
    """Format tones as JSON."""
    items = [tone.to_dict() for tone in tones]
    obj: dict[str, Any] = {'tones': items, 'count': len(items)}
    return json.dumps(obj, indent=2)
