"""Node classes produced while scanning Makefile text."""

from __future__ import annotations

from abc import ABC


# Line classification
class LineNode(ABC):
    """Base class for the classification of a single Makefile line.

    Not part of the public parse result.
    """

    value: str

    def __repr__(self: LineNode) -> str:
        """Return a string representation of the line node."""
        return f"{self.__class__.__name__}({self.value!r})"

    def __eq__(self: LineNode, other: object) -> bool:
        """Check equality with another LineNode based on value."""
        if not isinstance(other, self.__class__):
            return False
        return self.value == other.value

    def __hash__(self: LineNode) -> int:
        """Return a hash based on the class name and value."""
        return hash((self.__class__.__name__, self.value))


class CommentLine(LineNode):
    """A documentation-comment line such as '## Build the project'.

    The value is the line text with the marker and at most one following
    space removed. It may be empty, which marks a paragraph break.
    """

    def __init__(self: CommentLine, text: str) -> None:
        """Initialize a CommentLine with the stripped comment text."""
        self.value = text

    @property
    def text(self: CommentLine) -> str:
        """Return the stripped comment text."""
        return self.value


class TargetLine(LineNode):
    """A target-declaration line such as 'build: deps'."""

    def __init__(self: TargetLine, target: str) -> None:
        """Initialize a TargetLine with the declared target name."""
        self.value = target

    @property
    def target(self: TargetLine) -> str:
        """Return the declared target name."""
        return self.value


class OtherLine(LineNode):
    """Any line that is neither a documentation comment nor a target declaration."""

    def __init__(self: OtherLine, text: str) -> None:
        """Initialize an OtherLine with the raw line text."""
        self.value = text


# Parse result
class ParsedNode(ABC):
    """Base class for nodes emitted by the scanner."""


class TargetComment(ParsedNode):
    """A target name paired with the comment block that immediately precedes it.

    The value keeps the comment lines joined by line feeds, so paragraphs are
    still separated by blank lines.
    """

    def __init__(self: TargetComment, target: str, value: str) -> None:
        """Initialize a TargetComment.

        Args:
            target: The documented target name.
            value: The joined comment text.
        """
        self.target = target
        self.value = value

    def __repr__(self: TargetComment) -> str:
        """Return a string representation of the target comment."""
        return f"{self.__class__.__name__}({self.target!r}, {self.value!r})"

    def __eq__(self: TargetComment, other: object) -> bool:
        """Check equality with another TargetComment based on target and value."""
        if not isinstance(other, self.__class__):
            return False
        return self.target == other.target and self.value == other.value

    def __hash__(self: TargetComment) -> int:
        """Return a hash based on the class name, target and value."""
        return hash((self.__class__.__name__, self.target, self.value))
