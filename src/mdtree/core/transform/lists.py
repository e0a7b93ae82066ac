"""List kind selection and tight-item paragraph repair"""

from typing import Callable

from loguru import logger

from mdtree.core.models import Node, NodeType, paragraph_node, text_node


BLOCK_SHAPED = {NodeType.paragraph, NodeType.code_block, NodeType.blockquote}

MapBlocks = Callable[[list, object], list[Node]]


def _item_content(item, lexer, map_blocks: MapBlocks) -> list[Node]:
    """Map an item's block tokens, then repair content a tight list left unwrapped."""
    content = map_blocks(item.tokens, lexer)

    if content and all(node.type not in BLOCK_SHAPED for node in content):
        return [paragraph_node(content)]

    if not content and item.text:
        literal = [paragraph_node([text_node(item.text)])]
        if item.text in lexer.relexing:
            logger.debug("List item text is already being re-lexed; keeping it literal")
            return literal
        logger.debug("List item produced no nodes; re-lexing its raw text")
        lexer.relexing.add(item.text)
        try:
            content = map_blocks(lexer.lex(item.text), lexer)
        finally:
            lexer.relexing.discard(item.text)
        if all(node.type != NodeType.paragraph for node in content):
            content = literal

    return content


def build_list_item(item, lexer, map_blocks: MapBlocks, task: bool = False) -> Node:
    content = _item_content(item, lexer, map_blocks)
    if task:
        return Node(type=NodeType.task_item, attrs={"checked": bool(item.checked)}, content=content)
    return Node(type=NodeType.list_item, content=content)


def build_list(token, lexer, map_blocks: MapBlocks) -> Node:
    """Build a bulletList, orderedList, or taskList node from a list token.

    A single task item turns the whole list into a taskList. ``start`` is
    only set on ordered lists whose first ordinal is not 1.
    """
    is_task = any(getattr(item, 'task', False) for item in token.items)
    if is_task:
        kind = NodeType.task_list
    elif token.ordered:
        kind = NodeType.ordered_list
    else:
        kind = NodeType.bullet_list

    attrs = None
    if not is_task and token.ordered and isinstance(token.start, int) and token.start != 1:
        attrs = {"start": token.start}
    return Node(
        type=kind,
        attrs=attrs,
        content=[build_list_item(item, lexer, map_blocks, task=is_task) for item in token.items],
    )
