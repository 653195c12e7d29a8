"""
Tests for symbol name helpers: splitting, qualifying, normalising.
"""

from symload.shared.names import (
    SymbolName,
    is_namespaced,
    namespace_segments,
    normalize_namespace,
    qualify,
    short_name,
    split_symbol,
    strip_leading,
    word_segments,
)


class TestSymbolNames:

    def test_strip_leading_separator(self):
        assert strip_leading("\\App\\User") == "App\\User"
        assert strip_leading("User") == "User"

    def test_is_namespaced(self):
        assert is_namespaced("App\\User")
        assert not is_namespaced("Model_User")

    def test_split_at_last_separator(self):
        assert split_symbol("App\\Models\\User") == ("App\\Models", "User")
        assert split_symbol("\\App\\User") == ("App", "User")
        assert split_symbol("User") == ("", "User")

    def test_short_name(self):
        assert short_name("Core\\Str") == "Str"
        assert short_name("Str") == "Str"

    def test_qualify_global_namespace_yields_bare_name(self):
        assert qualify("", "Str") == "Str"
        assert qualify("\\", "Str") == "Str"

    def test_qualify_namespace(self):
        assert qualify("Core", "Str") == "Core\\Str"
        assert qualify("\\Foo\\Bar\\", "Baz") == "Foo\\Bar\\Baz"

    def test_normalize_namespace(self):
        assert normalize_namespace("APP\\Models") == "App\\models"
        assert normalize_namespace("\\app") == "App"

    def test_segments(self):
        assert namespace_segments("\\models\\admin") == ["models", "admin"]
        assert word_segments("Model_User") == ["Model", "User"]
        assert word_segments("Model__User") == ["Model", "User"]

    def test_symbol_names_are_plain_strings(self):
        assert SymbolName is str
        assert isinstance(qualify("Core", "Str"), SymbolName)
