"""Scanning of Makefile text into documented target nodes."""

from makedoc.parsing.nodes import (
    CommentLine,
    LineNode,
    OtherLine,
    ParsedNode,
    TargetComment,
    TargetLine,
)
from makedoc.parsing.scanner import classify_line, parse_makefile

node_types = [CommentLine, LineNode, OtherLine, ParsedNode, TargetComment, TargetLine]
functions = [classify_line, parse_makefile]
__all__ = [x.__name__ for x in node_types + functions]
