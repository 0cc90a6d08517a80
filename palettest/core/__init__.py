"""palettest.core: Foundation layer.

Contains the Color and Tone types, colour-model maths, hex helpers,
image file utilities, env loading and the report builder.
Only stdlib and PIL are allowed here.
"""
