# parsers/section.py

import logging
from typing import Any

from gdocs_parser.schema.models import ListContent, SectionSchema, TreeContent

from .cursor import ParagraphCursor
from .list_section import parse_list_section
from .text_block import parse_text_block_section
from .tree import collect_node_styles, parse_tree_section

logger = logging.getLogger(__name__)


def parse_section_content(cursor: ParagraphCursor, section: SectionSchema) -> Any:
    """Parse the body of a matched section according to its content schema.

    - no content: text block
    - ``ListContent``: list
    - ``TreeContent``: tree, or [] when it declares no node
    - anything else: text block
    """
    content = section.content

    if content is None:
        return parse_text_block_section(cursor)

    if isinstance(content, TreeContent):
        if content.node is None:
            logger.debug("Tree section %r has no node schema", section.title.name)
            return []
        return parse_tree_section(cursor, section, collect_node_styles(content.node))

    if isinstance(content, ListContent):
        return parse_list_section(cursor, section)

    logger.debug(
        "Unknown content kind %r for section %r, parsing as text block",
        getattr(content, "kind", None),
        section.title.name,
    )
    return parse_text_block_section(cursor)
