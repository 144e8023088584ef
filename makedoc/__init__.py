"""Extract the documentation of Makefile targets from '##' comments."""

from makedoc.documents import DocElement, DocElements, default_goal, load, parse, split_description
from makedoc.presenter import pretty, render

__all__ = ["DocElement", "DocElements", "default_goal", "load", "parse", "pretty", "render", "split_description"]
