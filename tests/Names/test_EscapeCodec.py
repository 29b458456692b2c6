from NamePy.Names.EscapeCodec import *
from typeguard import TypeCheckError
import pytest

def test_escape_plain_component():
    assert escape_component("oss", ".") == "oss"
    assert escape_component("", ".") == ""

def test_escape_delimiter():
    assert escape_component("a.b", ".") == r"a\.b"
    assert escape_component("a/b", "/") == r"a\/b"
    # only the given delimiter is special
    assert escape_component("a.b", "/") == "a.b"

def test_escape_escape_character_first():
    assert escape_component("c\\d", ".") == r"c\\d"
    # the backslash is doubled before the dot gets its own backslash
    assert escape_component(r"a\.b", ".") == r"a\\\.b"

def test_parse_simple():
    assert parse_components("oss.cs.fau.de", ".") == ["oss", "cs", "fau", "de"]
    assert parse_components("oss#cs", "#") == ["oss", "cs"]

def test_parse_empty_string_has_no_components():
    assert parse_components("", ".") == []

def test_parse_empty_components():
    assert parse_components("...", ".") == ["", "", "", ""]
    assert parse_components(".a", ".") == ["", "a"]
    assert parse_components("a.", ".") == ["a", ""]

def test_parse_escaped_delimiter():
    assert parse_components(r"oss\.cs.fau.de", ".") == ["oss.cs", "fau", "de"]

def test_parse_escaped_escape_character():
    components = parse_components(r"oss\\.cs.fau.de", ".")
    assert len(components) == 4
    assert components[0] == "oss\\"

def test_parse_escape_before_ordinary_character():
    # an escaped ordinary character is just that character
    assert parse_components(r"a\bc", ".") == ["abc"]

def test_parse_trailing_escape_is_kept():
    assert parse_components("abc\\", ".") == ["abc\\"]
    assert parse_components("a.\\", ".") == ["a", "\\"]

def test_join_components():
    assert join_components(["a.b", "c\\d", "e"], ".") == r"a\.b.c\\d.e"
    assert join_components(["", "", "", ""], "/") == "///"
    assert join_components([], ".") == ""

def test_join_then_parse_keeps_components():
    components = ["a.b", "c\\d", "", "e/f", "\\"]
    for delimiter in [".", "/", "#"]:
        assert parse_components(join_components(components, delimiter), delimiter) == components

def test_reconstruct_without_components():
    assert reconstruct_components("", 0, ".") == []

def test_reconstruct_empty_string_with_components():
    assert reconstruct_components("", 1, ".") == [""]
    assert reconstruct_components("", 4, "/") == ["", "", "", ""]

def test_reconstruct_pads_missing_trailing_components():
    assert reconstruct_components("a", 3, ".") == ["a", "", ""]
    assert reconstruct_components(r"a\.b.c", 2, ".") == ["a.b", "c"]

def test_codec_rejects_wrong_types():
    with pytest.raises(TypeCheckError):
        escape_component(None, ".") # type: ignore
    with pytest.raises(TypeCheckError):
        parse_components("a.b", 1) # type: ignore
