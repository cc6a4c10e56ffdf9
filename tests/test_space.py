import unittest
from pathlib import Path

import pytest

from scrapgen.space import Space, SpaceParseError

PAGE = """\
header
 type h1
 content Hello
footer Bye
"""


def test_parse_nested_and_string_entries() -> None:
    space = Space.parse(PAGE)

    assert list(space.keys()) == ["header", "footer"]
    assert isinstance(space["header"], Space)
    assert space.get("header type") == "h1"
    assert space["footer"] == "Bye"


def test_get_returns_default_for_missing_paths() -> None:
    space = Space.parse(PAGE)

    assert space.get("header missing") is None
    assert space.get("footer deeper") is None
    assert space.get(("header", "content")) == "Hello"
    assert space.get("nope", "fallback") == "fallback"


def test_serialization_round_trips() -> None:
    space = Space.parse(PAGE)

    assert space.to_string() == PAGE
    assert Space.parse(space.to_string()) == space


def test_multiline_and_empty_values_round_trip() -> None:
    space = Space()
    space.set("body", "line one\n  indented\n\nlast\n")
    space.set("empty", "")
    space.set("nested", {"inner": "value with  two spaces "})

    restored = Space.parse(space.to_string())

    assert restored == space
    assert restored["body"] == "line one\n  indented\n\nlast\n"
    assert restored["empty"] == ""
    assert restored.get("nested inner") == "value with  two spaces "


def test_windows_newlines_are_normalized() -> None:
    space = Space.parse("a 1\r\nb\r\n c 2\r\n")
    assert space.to_dict() == {"a": "1", "b": {"c": "2"}}


def test_bad_indentation_reports_line() -> None:
    with pytest.raises(SpaceParseError) as excinfo:
        Space.parse("a\n b\n   c d\n")
    assert excinfo.value.lineno == 3


def test_indented_first_line_is_rejected() -> None:
    with pytest.raises(SpaceParseError):
        Space.parse(" a 1\n")


def test_load_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "page.space"
    path.write_text(PAGE, encoding="utf-8")

    assert Space.load(path) == Space.parse(PAGE)


class SpaceMutationTest(unittest.TestCase):
    def test_patch_is_last_write_wins_and_keeps_positions(self) -> None:
        space = Space.parse("a 1\nb 2\n")
        space.patch({"b": "3", "c": "4"})

        self.assertEqual(list(space.items()), [("a", "1"), ("b", "3"), ("c", "4")])

    def test_each_visits_in_declaration_order(self) -> None:
        seen = []
        Space.parse("z 1\na 2\nm 3\n").each(lambda key, value: seen.append((key, value)))

        self.assertEqual(seen, [("z", "1"), ("a", "2"), ("m", "3")])

    def test_equality_is_order_sensitive(self) -> None:
        self.assertNotEqual(Space.parse("a 1\nb 2\n"), Space.parse("b 2\na 1\n"))
        self.assertEqual(Space.parse("a 1\nb 2\n"), {"b": "2", "a": "1"})

    def test_from_mapping_converts_plain_data(self) -> None:
        space = Space.from_mapping({"list": ["x", "y"], "n": 3, "flag": True, "none": None})

        self.assertEqual(
            space.to_dict(),
            {"list": {"0": "x", "1": "y"}, "n": "3", "flag": "true", "none": ""},
        )

    def test_clone_is_deep(self) -> None:
        original = Space.parse(PAGE)
        copy = original.clone()
        copy["header"].set("type", "h2")

        self.assertEqual(original.get("header type"), "h1")

    def test_invalid_keys_are_rejected(self) -> None:
        space = Space()
        with self.assertRaises(ValueError):
            space.set("two words", "x")
        with self.assertRaises(ValueError):
            space.set("", "x")

    def test_delete_removes_key(self) -> None:
        space = Space.parse("a 1\nb 2\n")
        space.delete("a")
        space.delete("missing")

        self.assertEqual(list(space), ["b"])


if __name__ == "__main__":
    unittest.main()
