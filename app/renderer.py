"""
SVG rendering of counter values.
"""

from typing import Dict, List

from app.themes import Theme

IMG_WIDTH = 45
IMG_HEIGHT = 100
PAD_LENGTH = 7

SVG_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<svg xmlns="http://www.w3.org/2000/svg" '
    'xmlns:xlink="http://www.w3.org/1999/xlink" version="1.1" '
    'width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
    'style="image-rendering: pixelated;">'
    "<title>Counter</title>"
    "<defs>{defs}</defs>"
    "<g>{uses}</g>"
    "</svg>"
)


def render_svg(theme: Theme, count: int) -> str:
    """
    Render ``count`` with the glyphs of ``theme``.

    The value is zero-padded to PAD_LENGTH digits. Digits the theme has no
    glyph for are left blank. Each glyph image is defined once and placed
    with ``<use>`` at its digit position. The canvas is always
    PAD_LENGTH glyphs wide, so values longer than that overflow it.
    """
    text = str(count).zfill(PAD_LENGTH)

    used: Dict[str, None] = {}  # glyph ids in order of first use
    uses: List[str] = []
    for i, ch in enumerate(text):
        glyph_id = theme.digits.get(ch)
        if glyph_id is None:
            continue
        used[glyph_id] = None
        x = i * IMG_WIDTH
        uses.append(
            f'<use href="#{glyph_id}" x="{x}" y="0" '
            f'width="{IMG_WIDTH}" height="{IMG_HEIGHT}"/>'
        )

    defs = [
        f'<image id="{glyph_id}" width="{IMG_WIDTH}" height="{IMG_HEIGHT}" '
        f'href="{theme.images[glyph_id]}"/>'
        for glyph_id in used
    ]

    return SVG_TEMPLATE.format(
        width=PAD_LENGTH * IMG_WIDTH,
        height=IMG_HEIGHT,
        defs="".join(defs),
        uses="".join(uses),
    )
