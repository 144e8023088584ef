"""Tests for assembling target documentation."""

import io
import unittest

import pytest

from makedoc import documents
from makedoc.documents import DocElement


def test_parse() -> None:
    """Test that comment blocks become short and long descriptions."""
    content = """
## Okay
okay:
	$(info yo)

bob:
	$(info hi bob)

## Something does this
##
## And then it does that
##
## And then this
something:
	$(info hi there)
			"""
    assert documents.parse(content) == [
        DocElement("okay", "Okay"),
        DocElement("something", "Something does this", "And then it does that\n\nAnd then this"),
    ]


def test_parse_stream() -> None:
    """Test that parse reads from an open text stream."""
    assert documents.parse(io.StringIO("## Build\nbuild:\n")) == [DocElement("build", "Build")]


@pytest.mark.parametrize(
    argnames=("value", "expected"),
    argvalues=[
        ("Short only", ("Short only", "")),
        ("", ("", "")),
        ("Short\nstill short", ("Short\nstill short", "")),
        ("Short\n\nLong", ("Short", "Long")),
        ("Short\n\nLong\n\nLonger", ("Short", "Long\n\nLonger")),
        ("Short\n\n\nLong", ("Short", "\nLong")),
        ("\n\nLong", ("", "Long")),
    ],
)
def test_split_description(value: str, expected: tuple[str, str]) -> None:
    """Test splitting on the first blank line."""
    assert documents.split_description(value) == expected


@pytest.mark.parametrize(
    "value",
    ["Short", "Short\n\nLong", "A\n\nB\n\nC", "\n\nLong"],
)
def test_split_description_rejoin_is_stable(value: str) -> None:
    """Test that re-joining and re-splitting gives the same parts."""
    short, long = documents.split_description(value)
    if long:
        assert documents.split_description(f"{short}\n\n{long}") == (short, long)
    else:
        assert documents.split_description(short) == (short, long)


class TestLoad(unittest.TestCase):
    """Test cases for loading Makefiles from disk."""

    @pytest.fixture(autouse=True)
    def _inject_fixtures(self, data_dir, write_makefile) -> None:
        """Make pytest fixtures available to the test methods."""
        self.data_dir = data_dir
        self.write_makefile = write_makefile

    def test_load_all(self) -> None:
        """Test loading a Makefile with undocumented targets and no default goal."""
        got = documents.load([self.data_dir / "more.mk"])
        assert got == {
            "test": DocElement(
                "test",
                "Test your project",
                "This target makes it possible to test your project",
            ),
        }

    def test_load_accepts_string_paths(self) -> None:
        """Test that plain string paths are accepted."""
        got = documents.load([str(self.data_dir / "more.mk")])
        assert list(got) == ["test"]

    def test_load_marks_default_goal(self) -> None:
        """Test that the default goal of a file is flagged."""
        got = documents.load([self.data_dir / "base.mk"])
        assert got["help"] == DocElement("help", "Show this help", is_default=True)
        assert got["build"] == DocElement("build", "Build the binaries", "Output is written to bin/")
        assert got["test"].is_default is False

    def test_later_file_wins(self) -> None:
        """Test that a later file replaces a target, including its default flag."""
        got = documents.load([self.data_dir / "base.mk", self.data_dir / "more.mk"])
        assert sorted(got) == ["build", "help", "test"]
        assert got["test"] == DocElement(
            "test",
            "Test your project",
            "This target makes it possible to test your project",
        )

        override = self.write_makefile("## Overridden help\nhelp:\n")
        got = documents.load([self.data_dir / "base.mk", override])
        assert got["help"] == DocElement("help", "Overridden help", is_default=False)

    def test_later_declaration_in_same_file_wins(self) -> None:
        """Test that the last documented declaration of a target is kept."""
        path = self.write_makefile("## One\ndup:\n\n## Two\n##\n## Details\ndup:\n")
        assert documents.load([path]) == {"dup": DocElement("dup", "Two", "Details")}

    def test_loading_twice_is_idempotent(self) -> None:
        """Test that loading the same file twice equals loading it once."""
        path = self.data_dir / "base.mk"
        assert documents.load([path, path]) == documents.load([path])

    def test_each_load_owns_its_mapping(self) -> None:
        """Test that separate loads do not share state."""
        first = documents.load([self.data_dir / "more.mk"])
        second = documents.load([self.data_dir / "base.mk"])
        assert list(first) == ["test"]
        assert "help" in second
        assert first["test"] != second["test"]

    def test_empty_file(self) -> None:
        """Test that an empty file loads without error."""
        assert documents.load([self.write_makefile("")]) == {}

    def test_no_files(self) -> None:
        """Test that loading nothing yields an empty mapping."""
        assert documents.load([]) == {}

    def test_missing_file_aborts(self) -> None:
        """Test that a missing file aborts the whole load."""
        with pytest.raises(FileNotFoundError):
            documents.load([self.data_dir / "more.mk", self.data_dir / "missing.mk"])

    def test_directory_aborts(self) -> None:
        """Test that a directory path is surfaced as an OSError."""
        with pytest.raises(OSError):
            documents.load([self.data_dir])


def test_doc_element_repr() -> None:
    """Test the DocElement string representation."""
    element = DocElement("build", "Build", "More", is_default=True)
    assert repr(element) == "DocElement('build', 'Build', 'More', is_default=True)"
    assert element != DocElement("build", "Build", "More")
