"""Best-effort image extraction from raw HTML blocks"""

import re

from loguru import logger

from mdtree.core.models import Node, NodeType, paragraph_node, text_node


# src must precede alt; only the first <img> is taken
IMG_RE = re.compile(r'<img[^>]+src="([^"]+)"[^>]*alt="([^"]*)"[^>]*>', re.IGNORECASE)


def sniff_html(text: str) -> Node:
    """Return an image node for the first <img src alt> in text, else the raw HTML as literal text.

    The fallback is not escaped or sanitized.
    """
    m = IMG_RE.search(text)
    if m:
        return Node(type=NodeType.image, attrs={"src": m.group(1), "alt": m.group(2)})
    logger.debug("No <img> found in raw HTML; keeping it as literal text")
    return paragraph_node([text_node(text)])
