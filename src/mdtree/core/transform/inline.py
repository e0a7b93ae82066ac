"""Inline token expansion into text/image/hardBreak leaves with accumulated marks"""

from loguru import logger

from mdtree.core.models import Mark, MarkType, Node, NodeType, text_node


def _wrap(tokens, mark: Mark) -> list[Node]:
    """Compose nested tokens, then append mark to every resulting text leaf."""
    return [node.with_mark(mark) for node in compose_inline(tokens)]


def compose_inline(tokens) -> list[Node]:
    """Expand inline tokens into a flat list of leaf nodes.

    Marks are appended as recursion unwinds, so the innermost mark comes
    first: ``**_x_**`` yields one text leaf marked ``[italic, bold]``.
    Duplicate marks from repeated nesting are kept. Inline raw HTML
    (``html_inline``) has no editor counterpart and is dropped, so
    ``see <img src="a.png"> here`` yields only the two text leaves.
    """
    content: list[Node] = []
    for token in tokens or []:
        kind = getattr(token, 'type', None)
        if kind == 'text':
            content.append(text_node(token.text))
        elif kind == 'br':
            content.append(Node(type=NodeType.hard_break))
        elif kind == 'image':
            content.append(Node(
                type=NodeType.image,
                attrs={"src": token.href, "alt": token.alt, "title": token.title},
            ))
        elif kind == 'codespan':
            content.append(text_node(token.text, [Mark(type=MarkType.code)]))
        elif kind == 'strong':
            content.extend(_wrap(token.tokens, Mark(type=MarkType.bold)))
        elif kind == 'em':
            content.extend(_wrap(token.tokens, Mark(type=MarkType.italic)))
        elif kind == 'del':
            content.extend(_wrap(token.tokens, Mark(type=MarkType.strike)))
        elif kind == 'link':
            link = Mark(type=MarkType.link, attrs={"href": token.href, "title": token.title})
            content.extend(_wrap(token.tokens, link))
        else:
            logger.debug("Dropping inline token '{}'", kind)
    return content
