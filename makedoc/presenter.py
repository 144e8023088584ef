"""Column-aligned, optionally colorized rendering of DocElements."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from typing import TextIO

    from makedoc.documents import DocElement

TARGET_COLUMN_WIDTH = 30

TARGET_STYLE = "green"
DEFAULT_TARGET_STYLE = "blue"
DESCRIPTION_STYLE = "cyan"


def _to_ansi(text: Text) -> str:
    """Render styled text to a string with ANSI escape codes."""
    console = Console(
        file=io.StringIO(),
        width=max(80, len(text.plain)),
        force_terminal=True,
        color_system="standard",
        highlight=False,
        markup=False,
        emoji=False,
    )
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()


def render(
    element: DocElement,
    *,
    verbose: bool = False,
    colorize: bool = False,
    column_width: int = TARGET_COLUMN_WIDTH,
) -> str:
    """Format a single DocElement for help output.

    The target is left-justified to column_width and followed by the short
    description. In verbose mode a non-empty long description follows on the
    next lines, then a blank line.

    Args:
        element: The element to format.
        verbose: Whether to include the long description.
        colorize: Whether to emit ANSI colors. The default goal is shown in a
            different color from the other targets.
        column_width: Width of the target column.

    Returns:
        The formatted text, ending with a line feed.
    """
    target_style = DEFAULT_TARGET_STYLE if element.is_default else TARGET_STYLE
    text = Text.assemble(
        (element.target.ljust(column_width), target_style),
        (element.short_description, DESCRIPTION_STYLE),
        "\n",
    )
    if verbose and element.long_description:
        text.append(f"{element.long_description}\n\n")

    if not colorize:
        return text.plain
    return _to_ansi(text)


def pretty(
    output: TextIO,
    element: DocElement,
    *,
    verbose: bool = False,
    colorize: bool = False,
    column_width: int = TARGET_COLUMN_WIDTH,
) -> None:
    """Write the formatted element to an output stream.

    Raises:
        OSError: If writing to the stream fails.
    """
    output.write(render(element, verbose=verbose, colorize=colorize, column_width=column_width))
