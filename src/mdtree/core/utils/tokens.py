"""Shared markdown-it syntax tree utilities"""

from markdown_it.tree import SyntaxTreeNode


def heading_level(node: SyntaxTreeNode) -> int | None:
    """Return the heading level (1-6) for a heading node, else None."""
    if node.type == 'heading' and node.tag and node.tag[0] == 'h' and node.tag[1:].isdigit():
        return int(node.tag[1:])
    return None


def inline_children(node: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Return the inline children of a block node wrapping a single inline node."""
    for child in node.children:
        if child.type == 'inline':
            return child.children
    return []
