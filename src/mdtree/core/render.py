"""Flat HTML rendering, independent of the document tree path"""

from mdtree.core.parse import make_parser


def markdown_to_html(markdown: str, preset: str = 'gfm-like', breaks: bool = True) -> str:
    """Render markdown to a GFM-flavoured HTML string; soft breaks become <br /> when breaks is on.

    Raises RendererUnavailable if the markdown-it backend cannot be configured.
    """
    return make_parser(preset, breaks).render(markdown)
