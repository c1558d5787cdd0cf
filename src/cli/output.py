"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
status messages, a spinner for slow operations and a tree view of the
converted block outline. Supports verbosity levels and --no-color.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.spinner import Spinner
from rich.tree import Tree

from src.document_converter.models import Block, Heading, ListItem, ListKind, TextRun, number_list_items


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Wrote resume.docx")
        >>> with handler.spinner("Rendering PDF..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Args:
            message: Message to display with spinner
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10):
            yield

    def print_outline(self, blocks: List[Block]) -> None:
        """Display the converted block sequence as a tree.

        Headings are shown by level, list items are indented by nesting
        level and numbered with their real ordinals, and styled runs are
        marked inline (bold, italic, underline, links).

        Args:
            blocks: Blocks returned by HtmlConverter.convert
        """
        if not blocks:
            self.console.print("[yellow]No content blocks[/yellow]")
            return

        tree = Tree(f"[bold]Document[/bold] ({len(blocks)} block(s))")
        for block, ordinal in zip(blocks, number_list_items(blocks)):
            tree.add(self._block_label(block, ordinal))
        self.console.print(tree)

    def _block_label(self, block: Block, ordinal: Optional[int] = None) -> str:
        content = self._runs_markup(block.runs)
        if isinstance(block, Heading):
            return f"[bold cyan]H{block.level + 1}[/bold cyan] {content}"
        if isinstance(block, ListItem):
            marker = "•" if block.kind is ListKind.BULLET else f"{ordinal}."
            indent = "  " * block.nesting_level
            return f"{indent}[magenta]{marker}[/magenta] {content}"
        return f"[dim]¶[/dim] {content}"

    @staticmethod
    def _runs_markup(runs: List[TextRun]) -> str:
        parts = []
        previous = None
        for run in runs:
            if run.is_break:
                parts.append("[dim]↵[/dim]")
                previous = run
                continue
            if run.needs_space_after(previous):
                parts.append(" ")
            text = escape(run.text)
            style = run.style
            tags = []
            if style.bold:
                tags.append("bold")
            if style.italic:
                tags.append("italic")
            if style.underline:
                tags.append("underline")
            if style.href:
                tags.append("blue")
            if tags:
                markup = " ".join(tags)
                text = f"[{markup}]{text}[/]"
            if style.href and style.href != run.text:
                text += f" [dim]<{escape(style.href)}>[/dim]"
            parts.append(text)
            previous = run
        return "".join(parts)
