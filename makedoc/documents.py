"""Assemble per-target documentation from one or more Makefiles."""

from __future__ import annotations

import logging
import pathlib
import re
from typing import TYPE_CHECKING

from makedoc.parsing import TargetComment, parse_makefile

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import TextIO

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK_RE = re.compile(r"\n{2}")
DEFAULT_GOAL_RE = re.compile(r"\.DEFAULT_GOAL\s*[?=:]{1,2}\s*(?P<target>.*)")


class DocElement:
    """A single target and its documentation."""

    def __init__(
        self: DocElement,
        target: str,
        short_description: str = "",
        long_description: str = "",
        *,
        is_default: bool = False,
    ) -> None:
        """Initialize a DocElement.

        Args:
            target: The target name.
            short_description: The first paragraph of the target's comment block.
            long_description: The remaining paragraphs, if any.
            is_default: Whether the target is the Makefile's default goal.
        """
        self.target = target
        self.short_description = short_description
        self.long_description = long_description
        self.is_default = is_default

    def __repr__(self: DocElement) -> str:
        """Return a string representation of the element."""
        return (
            f"{self.__class__.__name__}({self.target!r}, {self.short_description!r}, "
            f"{self.long_description!r}, is_default={self.is_default})"
        )

    def __eq__(self: DocElement, other: object) -> bool:
        """Check equality with another DocElement field by field."""
        if not isinstance(other, self.__class__):
            return False
        return (
            self.target == other.target
            and self.short_description == other.short_description
            and self.long_description == other.long_description
            and self.is_default == other.is_default
        )

    def __hash__(self: DocElement) -> int:
        """Return a hash based on all fields."""
        return hash((self.target, self.short_description, self.long_description, self.is_default))


DocElements = dict[str, DocElement]


def _read_source(source: str | TextIO) -> str:
    """Return the text of a string or an open text stream."""
    if isinstance(source, str):
        return source
    return source.read()


def split_description(value: str) -> tuple[str, str]:
    """Split a joined comment block into its short and long descriptions.

    The split happens at the first blank line. Without one, the whole value is
    the short description and the long description is empty.
    """
    descriptions = PARAGRAPH_BREAK_RE.split(value, maxsplit=1)
    if len(descriptions) == 1:
        descriptions.append("")
    return descriptions[0], descriptions[1]


def to_doc_element(node: TargetComment, default_goal_name: str = "") -> DocElement:
    """Build a DocElement from a scanned TargetComment."""
    short_description, long_description = split_description(node.value)
    return DocElement(
        node.target,
        short_description,
        long_description,
        is_default=bool(default_goal_name) and node.target == default_goal_name,
    )


def parse(source: str | TextIO) -> list[DocElement]:
    """Parse Makefile text into DocElements, in file order.

    Default goal information is not applied; every element has
    is_default set to False.
    """
    return [to_doc_element(node) for node in parse_makefile(_read_source(source))]


def default_goal(source: str | TextIO) -> str:
    """Find the target named by the first .DEFAULT_GOAL assignment.

    Args:
        source: The Makefile text, or an open text stream to read it from.

    Returns:
        The rest of the matching line after the operator, or an empty string
        when the Makefile has no such assignment.
    """
    found = DEFAULT_GOAL_RE.search(_read_source(source))
    if found is None:
        return ""
    return found.group("target")


def load(files: Iterable[str | pathlib.Path]) -> DocElements:
    """Load the documentation of the provided Makefiles.

    Files are processed in order. A target documented in more than one place
    keeps the entry from the last file (and the last declaration within it),
    including its is_default flag.

    Args:
        files: Paths of the Makefiles to read.

    Returns:
        Mapping of target name to DocElement.

    Raises:
        OSError: If a file cannot be opened or read.
        UnicodeDecodeError: If a file is not valid UTF-8.
    """
    all_docs: DocElements = {}
    for filename in files:
        path = pathlib.Path(filename)
        logger.debug(f"Loading documentation from {path}")
        with path.open(encoding="utf-8") as mkfilefh:
            text = mkfilefh.read()

        goal = default_goal(text)
        if goal:
            logger.debug(f"Default goal of {path} is {goal!r}")

        nodes = parse_makefile(text)
        for node in nodes:
            all_docs[node.target] = to_doc_element(node, goal)
        logger.debug(f"Found {len(nodes)} documented targets in {path}")

    return all_docs
