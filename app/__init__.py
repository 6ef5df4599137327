"""
Glyph Counter service package.
"""
