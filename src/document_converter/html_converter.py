"""HTML to block-model conversion.

This module walks a tolerant BeautifulSoup parse of editor HTML and emits
an ordered sequence of paragraphs, headings and list items made of styled
text runs. The result is what DocxWriter serializes into a .docx file.

The walk is driven by explicit stacks rather than recursion, so arbitrarily
deep markup converts without hitting the interpreter's recursion limit.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup, CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from .errors import DocumentParseError
from .models import Block, Heading, ListContext, ListItem, ListKind, Paragraph, TextRun, TextRunStyle

logger = logging.getLogger(__name__)

# Word's built-in hyperlink colour
DEFAULT_LINK_COLOR = "0563C1"

LIST_TAGS = {"ul": ListKind.BULLET, "ol": ListKind.ORDERED}
HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
BOLD_TAGS = {"strong", "b"}
ITALIC_TAGS = {"em", "i"}
UNDERLINE_TAGS = {"u"}

# Tags that may appear directly under the root and still belong to a
# paragraph of loose inline content.
INLINE_TAGS = BOLD_TAGS | ITALIC_TAGS | UNDERLINE_TAGS | {
    "a", "br", "span", "code", "mark", "small", "sub", "sup", "s",
}

# Tags whose content is never document text
SKIPPED_TAGS = {"head", "title", "script", "style", "meta", "link", "template", "noscript"}

_NON_TEXT_STRINGS = (Comment, Doctype, CData, ProcessingInstruction, Declaration)


class _Frame:
    """A sequence of sibling nodes waiting to be converted at block level.

    Attributes:
        nodes: Iterator over the remaining siblings
        context: Enclosing list, or None outside lists
        list_frame: Frame that opened the enclosing list (shared with
            transparent wrappers inside it)
        item_emitted: On a list frame, whether the list has emitted an item
        loose_inline: Inline siblings collected for the next loose paragraph
    """

    def __init__(self, nodes: Iterable, context: Optional[ListContext], list_frame: Optional["_Frame"] = None):
        self.nodes = iter(nodes)
        self.context = context
        self.list_frame = list_frame
        self.item_emitted = False
        self.loose_inline: List = []


class HtmlConverter:
    """Converts a restricted HTML subset into a sequence of blocks.

    Supported structure: h1-h6, p, ul/ol/li (nested), div containers,
    and inline strong/b, em/i, u, a and br. Anything else is treated as a
    transparent wrapper around its children. Conversion never raises for
    malformed markup; only a failure of the parser itself is reported.

    Traversal state (the enclosing list) lives in per-call frames, so one
    converter can be shared across threads.

    Example:
        >>> converter = HtmlConverter()
        >>> blocks = converter.convert("<h1>Jane Doe</h1><p>Engineer</p>")
        >>> [b.text for b in blocks]
        ['Jane Doe', 'Engineer']
    """

    def __init__(self, link_color: str = DEFAULT_LINK_COLOR, parser: str = "lxml"):
        """Initialize HtmlConverter.

        Args:
            link_color: RGB hex colour applied to hyperlink runs
            parser: BeautifulSoup tree builder name
        """
        self.link_color = link_color
        self.parser = parser

    def convert(self, html: str) -> List[Block]:
        """Convert an HTML string into an ordered list of blocks.

        Args:
            html: HTML markup, well-formed or not

        Returns:
            Blocks in document order; empty list if nothing renders

        Raises:
            DocumentParseError: If the HTML parser fails
        """
        if not html or not html.strip():
            return []

        try:
            soup = BeautifulSoup(html, self.parser)
        except Exception as e:
            logger.error(f"HTML parser failed, no blocks emitted: {e}")
            raise DocumentParseError(str(e)) from e

        root = soup.body or soup
        blocks = self._convert_blocks(root.children)
        logger.debug(f"Converted HTML ({len(html)} chars) into {len(blocks)} block(s)")
        return blocks

    # ===== Block level =====

    def _convert_blocks(self, nodes: Iterable) -> List[Block]:
        """Walk block-level nodes depth-first, in document order."""
        blocks: List[Block] = []
        stack = [_Frame(nodes, None)]

        while stack:
            frame = stack[-1]
            node = next(frame.nodes, None)
            if node is None:
                self._flush_loose(frame, blocks)
                stack.pop()
                continue

            if frame.context is None and self._is_inline(node):
                frame.loose_inline.append(node)
                continue
            self._flush_loose(frame, blocks)

            if not isinstance(node, Tag) or node.name in SKIPPED_TAGS:
                # Text directly inside a list, or non-text markup
                continue

            name = node.name
            if name in LIST_TAGS:
                kind = LIST_TAGS[name]
                if frame.context is None:
                    list_context = ListContext(kind=kind)
                else:
                    list_context = frame.context.nested(kind)
                list_frame = _Frame(node.children, list_context)
                list_frame.list_frame = list_frame
                stack.append(list_frame)

            elif name == "li":
                if frame.context is None:
                    logger.debug("Dropping <li> outside of a list")
                    continue
                item, nested_lists = self._list_item(node, frame)
                if item is not None:
                    blocks.append(item)
                if nested_lists:
                    stack.append(_Frame(nested_lists, frame.context))

            elif name in HEADING_TAGS:
                heading = Heading(runs=self._inline_runs(node.children), level=self._heading_level(name))
                if heading.has_text():
                    blocks.append(heading)

            elif name == "p":
                paragraph = Paragraph(runs=self._inline_runs(node.children))
                if paragraph.has_text():
                    blocks.append(paragraph)

            else:
                # div and unrecognized block tags are transparent
                stack.append(_Frame(node.children, frame.context, frame.list_frame))

        return blocks

    def _list_item(self, node: Tag, frame: _Frame) -> Tuple[Optional[ListItem], List[Tag]]:
        """Build the item for an li and collect the lists nested in it.

        Nested lists are found through transparent wrappers; their items
        follow this one in the output.
        """
        nested_lists: List[Tag] = []
        runs = self._inline_runs(node.children, nested_lists=nested_lists)

        item = ListItem(runs=runs, kind=frame.context.kind, nesting_level=frame.context.nesting_level)
        if not item.has_text():
            return None, nested_lists

        list_frame = frame.list_frame
        if list_frame is not None:
            item.list_start = not list_frame.item_emitted
            list_frame.item_emitted = True
        return item, nested_lists

    def _flush_loose(self, frame: _Frame, blocks: List[Block]) -> None:
        if not frame.loose_inline:
            return
        paragraph = Paragraph(runs=self._inline_runs(frame.loose_inline))
        frame.loose_inline = []
        if paragraph.has_text():
            blocks.append(paragraph)

    @staticmethod
    def _heading_level(name: str) -> int:
        return max(0, min(5, int(name[1:]) - 1))

    @staticmethod
    def _is_inline(node) -> bool:
        if isinstance(node, NavigableString):
            return not isinstance(node, _NON_TEXT_STRINGS)
        return isinstance(node, Tag) and node.name in INLINE_TAGS

    # ===== Inline level =====

    def _inline_runs(
        self,
        nodes: Iterable,
        nested_lists: Optional[List[Tag]] = None,
    ) -> List[TextRun]:
        """Convert inline nodes into runs, starting from an empty style.

        Args:
            nodes: Inline nodes in document order
            nested_lists: When given, ul/ol tags are collected here instead
                of being converted as inline content
        """
        runs: List[TextRun] = []
        stack = [(node, TextRunStyle()) for node in reversed(list(nodes))]

        while stack:
            node, style = stack.pop()

            if isinstance(node, NavigableString):
                if not isinstance(node, _NON_TEXT_STRINGS):
                    run = self._text_run(str(node), style)
                    if run:
                        runs.append(run)
                continue

            if not isinstance(node, Tag):
                continue

            name = node.name
            if name in SKIPPED_TAGS:
                continue
            if nested_lists is not None and name in LIST_TAGS:
                nested_lists.append(node)
                continue
            if name == "br":
                runs.append(TextRun.line_break())
                continue
            if name == "a":
                run = self._anchor_run(node, style)
                if run:
                    runs.append(run)
                continue

            if name in BOLD_TAGS:
                style = style.extend(bold=True)
            elif name in ITALIC_TAGS:
                style = style.extend(italic=True)
            elif name in UNDERLINE_TAGS:
                style = style.extend(underline=True)
            stack.extend((child, style) for child in reversed(list(node.children)))

        return runs

    def _anchor_run(self, node: Tag, style: TextRunStyle) -> Optional[TextRun]:
        """Convert an anchor into a single link-styled run.

        Inline styles nested inside the anchor are flattened; the display
        text falls back to the href when the anchor has no text. Anchors
        without href are styled the same but link nowhere.
        """
        href = (node.get("href") or "").strip() or None
        raw_text = node.get_text()
        display = " ".join(raw_text.split()) or href
        if not display:
            return None

        link_style = style.extend(underline=True, color=self.link_color, href=href)
        return TextRun(
            text=display,
            style=link_style,
            space_before=raw_text[:1].isspace(),
            space_after=raw_text[-1:].isspace(),
        )

    @staticmethod
    def _text_run(raw: str, style: TextRunStyle) -> Optional[TextRun]:
        text = " ".join(raw.split())
        if not text:
            return None
        return TextRun(
            text=text,
            style=style,
            space_before=raw[:1].isspace(),
            space_after=raw[-1:].isspace(),
        )
