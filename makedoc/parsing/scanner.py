"""Line scanner that pairs Makefile documentation comments with targets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import cachetools
from pyparsing import Literal, Opt, ParserElement, Regex, rest_of_line

from .nodes import CommentLine, LineNode, OtherLine, TargetComment, TargetLine

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

# Constants
COMMENT_MARKER = "##"
TARGET_NAME_PATTERN = r"[A-Za-z0-9._-]+"
# ":" or "::", but not the ":=" and "::=" assignment operators
TARGET_SEPARATOR_PATTERN = r"::?(?![:=])"


def create_line_parsers() -> dict[str, ParserElement]:
    """Create the parsing elements for each kind of Makefile line.

    None of the elements skip leading whitespace: both the comment marker and
    the target name have to start at column 0.

    Returns:
        Dictionary containing the comment, target and other line parsers
    """

    def make_comment_line(tokens: list[str]) -> CommentLine:
        """Wrap the text after the marker (possibly empty) in a CommentLine."""
        return CommentLine(tokens[0] if tokens else "")

    def make_target_line(tokens: list[str]) -> TargetLine:
        """Wrap the declared target name in a TargetLine."""
        return TargetLine(tokens[0])

    def make_other_line(tokens: list[str]) -> OtherLine:
        """Wrap any unrecognized line in an OtherLine."""
        return OtherLine(tokens[0] if tokens else "")

    # "##", at most one space, then the comment text
    comment_line = Literal(COMMENT_MARKER).suppress() + Opt(Literal(" ")).suppress() + rest_of_line.copy()
    comment_line.leave_whitespace()
    comment_line.set_parse_action(make_comment_line)

    # "name:" with anything after the colon ignored
    target_line = Regex(TARGET_NAME_PATTERN) + Regex(TARGET_SEPARATOR_PATTERN).suppress() + rest_of_line.copy().suppress()
    target_line.leave_whitespace()
    target_line.set_parse_action(make_target_line)

    other_line = rest_of_line.copy()
    other_line.set_parse_action(make_other_line)

    return {
        "comment_line": comment_line,
        "target_line": target_line,
        "other_line": other_line,
    }


@cachetools.cached(cache={})
def get_line_expr() -> ParserElement:
    """Create and return the parser expression that classifies a single line.

    Alternatives are tried in order: documentation comment, target
    declaration, then anything else. The last alternative matches every
    string, so parsing a line never fails.
    """
    line_parsers = create_line_parsers()
    line_expr = line_parsers["comment_line"] | line_parsers["target_line"] | line_parsers["other_line"]
    line_expr.leave_whitespace()
    # Tabs mark recipe lines and must reach the grammar unexpanded
    line_expr.parse_with_tabs()
    return line_expr


def classify_line(line: str) -> LineNode:
    """Classify one line of Makefile text.

    Args:
        line: A single line, without its trailing line feed.

    Returns:
        A CommentLine, TargetLine or OtherLine.
    """
    return get_line_expr().parse_string(line)[0]


def parse_makefile(source: str | TextIO) -> list[TargetComment]:
    """Scan Makefile text and pair documentation comments with their targets.

    Contiguous '##' lines are collected into a pending block. A target
    declaration directly after the block consumes it and produces a
    TargetComment; any other line discards it. A block still pending at the
    end of the input is dropped.

    Args:
        source: The Makefile text, or an open text stream to read it from.

    Returns:
        The TargetComment nodes in file order.

    Raises:
        OSError: If the stream cannot be read.
    """
    text = source if isinstance(source, str) else source.read()

    nodes: list[TargetComment] = []
    pending: list[str] = []
    for lineno, line in enumerate(text.split("\n"), 1):
        classified = classify_line(line)
        if isinstance(classified, CommentLine):
            pending.append(classified.text)
            continue
        if isinstance(classified, TargetLine) and pending:
            nodes.append(TargetComment(classified.target, "\n".join(pending)))
        elif pending:
            logger.debug(f"Discarding comment block not followed by a target at line {lineno}")
        pending = []

    if pending:
        logger.debug("Discarding comment block at end of input")
    return nodes
