"""
Tests for the autoload registries: namespace search paths, explicit symbols,
core namespaces.
"""

from symload.registry import AutoloadRegistry, CoreNamespaceList, ExplicitSymbolTable, NamespaceRegistry
from symload.utils.config import AutoloaderConfig


class TestNamespaceRegistry:
    """Insertion order is precedence; overwrites keep their position"""

    def test_register_and_lookup(self):
        registry = NamespaceRegistry()
        registry.register("App", "/paths/app")
        assert registry.lookup("App") == "/paths/app"
        assert registry.lookup("\\App") == "/paths/app"

    def test_lookup_miss_returns_none(self):
        assert NamespaceRegistry().lookup("Nope") is None

    def test_lookup_is_exact_match_only(self):
        registry = NamespaceRegistry({"App": "/paths/app"})
        assert registry.lookup("App\\Models") is None
        assert registry.lookup("Ap") is None

    def test_register_overwrite_keeps_position(self):
        registry = NamespaceRegistry()
        registry.register("A", "/a")
        registry.register("B", "/b")
        registry.register("A", "/a2")
        assert list(registry) == [("A", "/a2"), ("B", "/b")]

    def test_register_many_appends_after_existing(self):
        registry = NamespaceRegistry({"A": "/a", "B": "/b"})
        registry.register_many({"C": "/c", "A": "/a-new"})
        assert list(registry) == [("A", "/a-new"), ("B", "/b"), ("C", "/c")]

    def test_register_many_prepend_takes_precedence(self):
        registry = NamespaceRegistry({"A": "/a", "B": "/b"})
        registry.register_many({"X": "/x", "Y": "/y", "B": "/b-new"}, prepend=True)
        assert list(registry) == [("X", "/x"), ("Y", "/y"), ("B", "/b-new"), ("A", "/a")]

    def test_contains_and_len(self):
        registry = NamespaceRegistry({"App": "/paths/app"})
        assert "App" in registry
        assert "\\App" in registry
        assert "Other" not in registry
        assert len(registry) == 1


class TestExplicitSymbolTable:

    def test_register_and_lookup(self):
        table = ExplicitSymbolTable()
        table.register("Core\\Str", "/core/str.py")
        assert table.lookup("Core\\Str") == "/core/str.py"
        assert table.lookup("\\Core\\Str") == "/core/str.py"
        assert "Core\\Str" in table

    def test_last_write_wins(self):
        table = ExplicitSymbolTable({"Str": "/one.py"})
        table.register_many({"Str": "/two.py", "Arr": "/arr.py"})
        assert table.lookup("Str") == "/two.py"
        assert len(table) == 2

    def test_lookup_miss_returns_none(self):
        assert ExplicitSymbolTable().lookup("Str") is None


class TestCoreNamespaceList:

    def test_prefix_goes_first(self):
        core = CoreNamespaceList(["Core"])
        core.add("Framework\\Core")
        core.add("Vendor", prefix=False)
        assert list(core) == ["Framework\\Core", "Core", "Vendor"]

    def test_find_uses_list_order(self):
        table = ExplicitSymbolTable({
            "Core\\Str": "/core/str.py",
            "App\\Str": "/app/str.py",
        })
        core = CoreNamespaceList(["Core"])
        assert core.find("Str", table) == "Core\\Str"

        core.add("App", prefix=True)
        assert core.find("Str", table) == "App\\Str"

    def test_appended_namespace_checked_last(self):
        table = ExplicitSymbolTable({"Core\\Str": "/core/str.py", "Late\\Str": "/late/str.py"})
        core = CoreNamespaceList(["Core"])
        core.add("Late", prefix=False)
        assert core.find("Str", table) == "Core\\Str"

    def test_find_miss(self):
        assert CoreNamespaceList(["Core"]).find("Str", ExplicitSymbolTable()) is None


class TestAutoloadRegistry:

    def test_from_config_seeds_core_namespaces(self):
        registry = AutoloadRegistry.from_config(AutoloaderConfig(core_namespaces=("Framework\\Core", "Core")))
        assert list(registry.core) == ["Framework\\Core", "Core"]
        assert len(registry.namespaces) == 0
        assert len(registry.symbols) == 0

    def test_default_core_namespace(self):
        assert list(AutoloadRegistry.from_config().core) == ["Core"]
