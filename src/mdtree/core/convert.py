"""Markdown to editor document tree entry points"""

from typing import Any

from mdtree.core.lexer import Lexer
from mdtree.core.models import Node, NodeType
from mdtree.core.transform.blocks import map_tokens


def markdown_to_tiptap(markdown: str, preset: str = 'gfm-like', breaks: bool = True) -> Node:
    """Convert a markdown string into a ``doc`` node.

    Every call builds its own lexer, so concurrent calls share no state.
    """
    lexer = Lexer(preset, breaks)
    return Node(type=NodeType.doc, content=map_tokens(lexer.lex(markdown), lexer))


def markdown_to_tiptap_dict(markdown: str, preset: str = 'gfm-like', breaks: bool = True) -> dict[str, Any]:
    """Convert a markdown string into the editor's JSON dict: {"type": "doc", "content": [...]}."""
    return markdown_to_tiptap(markdown, preset, breaks).to_dict()
