"""Data models for the document converter.

This module defines the block model produced by HtmlConverter and consumed
by DocxWriter: styled text runs grouped into paragraphs, headings and
list items. The model is built fresh for every conversion and never shared.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional


class ListKind(Enum):
    """Marker kind of a list."""

    BULLET = "bullet"
    ORDERED = "ordered"


@dataclass(frozen=True)
class TextRunStyle:
    """Formatting accumulated while descending through inline tags.

    Styles are immutable: a nested tag derives a new style with extend()
    and never alters the style of its parent.

    Attributes:
        bold: Text is bold (strong/b)
        italic: Text is italic (em/i)
        underline: Text has a single underline (u/a)
        color: RGB hex colour without '#', or None for the default colour
        href: Hyperlink target for anchor runs
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None
    href: Optional[str] = None

    def extend(self, **changes) -> "TextRunStyle":
        """Return a copy of this style with the given fields overridden."""
        return replace(self, **changes)


@dataclass(frozen=True)
class TextRun:
    """A contiguous span of text sharing one style.

    Text is whitespace-collapsed and trimmed. A hard line break is a run
    with empty text and is_break=True. space_before/space_after record
    whether the source had whitespace around the trimmed text, so words
    split across inline tags can be joined again.

    Attributes:
        text: Trimmed run text (empty only for breaks)
        style: Formatting for this run
        is_break: Run is a hard line break marker
        space_before: Source text had leading whitespace
        space_after: Source text had trailing whitespace
    """

    text: str
    style: TextRunStyle = field(default_factory=TextRunStyle)
    is_break: bool = False
    space_before: bool = False
    space_after: bool = False

    @classmethod
    def line_break(cls) -> "TextRun":
        """Create a hard line break marker."""
        return cls(text="", is_break=True)

    def needs_space_after(self, previous: Optional["TextRun"]) -> bool:
        """Check whether a space separates this run from the run before it.

        Breaks never take a space on either side.
        """
        return (
            previous is not None
            and not previous.is_break
            and not self.is_break
            and (previous.space_after or self.space_before)
        )


def join_runs(runs: List[TextRun]) -> str:
    """Join run texts, restoring the whitespace recorded between runs.

    Breaks become newlines.
    """
    parts: List[str] = []
    previous: Optional[TextRun] = None
    for run in runs:
        if run.is_break:
            parts.append("\n")
        else:
            if run.needs_space_after(previous):
                parts.append(" ")
            parts.append(run.text)
        previous = run
    return "".join(parts)


@dataclass
class Block:
    """Base class for a structural unit of output content.

    Attributes:
        runs: Ordered text runs making up the block
    """

    runs: List[TextRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Plain text of the block, runs joined with their recorded spacing."""
        return join_runs(self.runs)

    def has_text(self) -> bool:
        """Check whether the block holds at least one non-break run."""
        return any(not run.is_break for run in self.runs)


@dataclass
class Paragraph(Block):
    """A body paragraph."""


@dataclass
class Heading(Block):
    """A heading; level 0 corresponds to h1 and level 5 to h6."""

    level: int = 0


@dataclass
class ListItem(Block):
    """A list item, flattened into the block sequence with its nesting level.

    Attributes:
        kind: Bullet or ordered marker
        nesting_level: 0 for top-level lists, +1 for each enclosing list
        list_start: First item emitted for its ul/ol; ordered numbering
            restarts here
    """

    kind: ListKind = ListKind.BULLET
    nesting_level: int = 0
    list_start: bool = False


@dataclass(frozen=True)
class ListContext:
    """Traversal state for the list currently being converted.

    Attributes:
        kind: Marker kind set by the enclosing ul/ol tag
        nesting_level: Depth of the enclosing list (0 = outermost)
    """

    kind: ListKind
    nesting_level: int = 0

    def nested(self, kind: ListKind) -> "ListContext":
        """Context for a list nested inside this one."""
        return ListContext(kind=kind, nesting_level=self.nesting_level + 1)


def number_list_items(blocks: List[Block]) -> List[Optional[int]]:
    """Compute the ordinal shown for each ordered list item.

    Counters are kept per nesting level. A list start, a bullet item at the
    same level or any non-list block ends the ordered list; an item at a
    shallower level ends the lists nested below it.

    Returns:
        One entry per block: the 1-based ordinal for ordered items, None
        for everything else
    """
    ordinals: List[Optional[int]] = []
    counters: Dict[int, int] = {}

    for block in blocks:
        if not isinstance(block, ListItem):
            counters.clear()
            ordinals.append(None)
            continue

        level = block.nesting_level
        for deeper in [lvl for lvl in counters if lvl > level]:
            del counters[deeper]

        if block.kind is ListKind.BULLET:
            counters.pop(level, None)
            ordinals.append(None)
            continue

        if block.list_start:
            counters.pop(level, None)
        counters[level] = counters.get(level, 0) + 1
        ordinals.append(counters[level])

    return ordinals
