"""palettest: named colours (Tones) queryable as RGB, HSL and HSV.

    >>> from palettest import Color, Tone
    >>> str(Tone(Color(255, 0, 0), name='red'))
    'red (#ff0000)'
"""

from palettest.core.types import Color, Tone

__version__ = '0.1.0'

__all__ = ['Color', 'Tone']
