"""Table token to table/tableRow/tableHeader/tableCell nodes"""

from mdtree.core.models import Node, NodeType
from mdtree.core.transform.inline import compose_inline


def _row(cells, cell_type: NodeType) -> Node:
    return Node(
        type=NodeType.table_row,
        content=[Node(type=cell_type, content=compose_inline(cell.tokens)) for cell in cells],
    )


def build_table(token) -> Node:
    """Header row of tableHeader cells, then one tableRow of tableCell per body row.

    Row and column counts are passed through as tokenized; uneven rows are not padded.
    """
    rows = [_row(token.header, NodeType.table_header)]
    rows.extend(_row(cells, NodeType.table_cell) for cells in token.rows)
    return Node(type=NodeType.table, content=rows)
