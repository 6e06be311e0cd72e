# parsers/tree.py

"""Recursive parsing of nested heading trees.

Each nesting level of a ``TreeContent`` schema is parsed by one call of
``parse_tree_level``, which collects sibling nodes of the form
``{"title": ..., "content": [...]}``. At every paragraph the level decides
between five actions (see ``determine_tree_action``). A heading that
belongs to an enclosing level finishes the current level without being
consumed, so it is re-offered to each enclosing call until one of them
recognizes it as its own title.
"""

import logging
from enum import Enum
from typing import Any

from gdocs_parser.schema.models import NodeSchema, SectionSchema, TreeContent
from gdocs_parser.schema.styles import NamedStyle

from .cursor import ParagraphCursor
from .matcher import has_named_style
from .models import Paragraph, ParsedNode
from .text import parse_structured_text

logger = logging.getLogger(__name__)


class TreeAction(str, Enum):
    """What the current tree level does with the paragraph at the cursor."""

    EXIT_SECTION = "exit_section"
    CREATE_NODE = "create_node"
    START_CHILD_NODE = "start_child_node"
    FINISH_CURRENT_NODE = "finish_current_node"
    APPEND_DETAIL = "append_detail"


def collect_node_styles(node: NodeSchema) -> frozenset[NamedStyle]:
    """All title styles used at any depth of a tree schema."""
    styles: set[NamedStyle] = set()
    current: NodeSchema | None = node
    while current is not None:
        styles.add(current.title.named_style_type)
        current = current.child
    return frozenset(styles)


def create_node_from_title(text: str, node_schema: NodeSchema) -> ParsedNode:
    """Build an empty node whose title is parsed by the title's line rules.

    Without rules, or when structured parsing falls back to a bare string,
    the title is the heading text as-is.
    """
    title_schema = node_schema.title
    title: Any = text
    if title_schema.is_structured:
        parsed = parse_structured_text(text, title_schema)
        if not isinstance(parsed, str):
            title = parsed
    return {"title": title, "content": []}


def determine_tree_action(
    paragraph: Paragraph,
    cursor: ParagraphCursor,
    node_schema: NodeSchema,
    ancestors: tuple[NodeSchema, ...],
) -> TreeAction:
    """Decide the action for ``paragraph`` at this level.

    Priority: section boundary, own title, child title, ancestor title,
    any other heading, plain text.
    """
    child = node_schema.child

    is_own_title = has_named_style(paragraph, node_schema.title.named_style_type)
    is_child_title = child is not None and has_named_style(
        paragraph, child.title.named_style_type
    )
    is_ancestor_title = any(
        has_named_style(paragraph, ancestor.title.named_style_type)
        for ancestor in ancestors
    )
    is_heading = cursor.at_heading()

    if cursor.at_section_boundary():
        return TreeAction.EXIT_SECTION
    if is_own_title:
        return TreeAction.CREATE_NODE
    if is_child_title:
        return TreeAction.START_CHILD_NODE
    if is_heading and is_ancestor_title:
        return TreeAction.FINISH_CURRENT_NODE
    if is_heading:
        return TreeAction.EXIT_SECTION
    return TreeAction.APPEND_DETAIL


def _is_foreign_heading(
    cursor: ParagraphCursor, paragraph: Paragraph, node_styles: frozenset[NamedStyle]
) -> bool:
    return cursor.at_heading() and paragraph.style not in node_styles


def parse_tree_section(
    cursor: ParagraphCursor,
    section: SectionSchema,
    node_styles: frozenset[NamedStyle],
) -> list[ParsedNode]:
    """Parse a tree section starting at the first root-level heading.

    Text before that heading is orphaned and dropped. Reaching a section
    boundary, or a heading whose style is not used anywhere in the tree,
    ends the section with no nodes.
    """
    content = section.content
    if not isinstance(content, TreeContent) or content.node is None:
        return []
    root = content.node

    while not cursor.at_end():
        paragraph = cursor.current()
        if paragraph is None:
            cursor.advance()
            continue

        if cursor.at_section_boundary():
            break
        if _is_foreign_heading(cursor, paragraph, node_styles):
            break

        if has_named_style(paragraph, root.title.named_style_type):
            return parse_tree_level(cursor, root, (), node_styles)

        logger.debug("Dropping orphan text before first tree node: %r", paragraph.text)
        cursor.advance()

    return []


def parse_tree_level(
    cursor: ParagraphCursor,
    node_schema: NodeSchema,
    ancestors: tuple[NodeSchema, ...],
    node_styles: frozenset[NamedStyle],
) -> list[ParsedNode]:
    """Collect sibling nodes at one nesting level.

    ``ancestors`` holds the schemas of the enclosing levels, nearest first.
    Returns when the paragraph at the cursor belongs to a new section, an
    enclosing level, or lies outside the tree.
    """
    result: list[ParsedNode] = []
    current: ParsedNode | None = None
    child_schema = node_schema.child
    expects_children = isinstance(node_schema.content, TreeContent)

    while not cursor.at_end():
        paragraph = cursor.current()
        if paragraph is None:
            cursor.advance()
            continue

        if cursor.at_section_boundary():
            return result
        if _is_foreign_heading(cursor, paragraph, node_styles):
            return result

        action = determine_tree_action(paragraph, cursor, node_schema, ancestors)

        if action is TreeAction.EXIT_SECTION:
            return result

        if action is TreeAction.CREATE_NODE:
            current = create_node_from_title(paragraph.text, node_schema)
            result.append(current)
            cursor.advance()

        elif action is TreeAction.START_CHILD_NODE:
            if current is None or child_schema is None:
                cursor.advance()
                continue
            children = parse_tree_level(
                cursor, child_schema, (node_schema, *ancestors), node_styles
            )
            current["content"].extend(children)

        elif action is TreeAction.FINISH_CURRENT_NODE:
            if current is not None:
                return result
            cursor.advance()

        else:
            # Levels that hold child nodes take no loose text.
            if not expects_children and current is not None:
                current["content"].append(paragraph.text.strip())
            cursor.advance()

    return result
