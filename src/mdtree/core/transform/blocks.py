"""Block token dispatch into document nodes"""

from typing import Union

from loguru import logger

from mdtree.core.models import Node, NodeType, text_node
from mdtree.core.transform.html import sniff_html
from mdtree.core.transform.inline import compose_inline
from mdtree.core.transform.lists import build_list
from mdtree.core.transform.tables import build_table


def _heading(token, lexer) -> Node:
    return Node(type=NodeType.heading, attrs={"level": token.depth}, content=compose_inline(token.tokens))


def _paragraph(token, lexer) -> Node:
    return Node(type=NodeType.paragraph, content=compose_inline(token.tokens))


def _blockquote(token, lexer) -> Node:
    return Node(type=NodeType.blockquote, content=map_tokens(token.tokens, lexer))


def _list(token, lexer) -> Node:
    return build_list(token, lexer, map_tokens)


def _code(token, lexer) -> Node:
    return Node(
        type=NodeType.code_block,
        attrs={"language": token.lang or None},
        content=[text_node(token.text)],
    )


def _hr(token, lexer) -> Node:
    return Node(type=NodeType.horizontal_rule)


def _table(token, lexer) -> Node:
    return build_table(token)


def _html(token, lexer) -> Node:
    return sniff_html(token.text)


def _text(token, lexer) -> list[Node]:
    """Bare text at block level expands to its inline leaves as siblings."""
    if token.tokens:
        return compose_inline(token.tokens)
    return [text_node(token.text)]


BLOCK_HANDLERS = {
    'heading':    _heading,
    'paragraph':  _paragraph,
    'blockquote': _blockquote,
    'list':       _list,
    'code':       _code,
    'hr':         _hr,
    'table':      _table,
    'html':       _html,
    'text':       _text,
}


def map_token(token, lexer) -> Union[Node, list[Node], None]:
    """Map one block token to a node, a list of sibling nodes, or None when dropped.

    Unknown or malformed tokens are dropped rather than raised.
    """
    kind = getattr(token, 'type', None)
    if kind == 'space':
        return None
    handler = BLOCK_HANDLERS.get(kind)
    if handler is None:
        logger.debug("Dropping block token '{}'", kind)
        return None
    try:
        return handler(token, lexer)
    except (AttributeError, TypeError, ValueError) as e:
        logger.debug("Dropping malformed '{}' token: {}", kind, e)
        return None


def map_tokens(tokens, lexer) -> list[Node]:
    """Map a block token sequence, flattening multi-node results and skipping drops."""
    content: list[Node] = []
    for token in tokens or []:
        node = map_token(token, lexer)
        if node is None:
            continue
        if isinstance(node, list):
            content.extend(node)
        else:
            content.append(node)
    return content
