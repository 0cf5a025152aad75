from lazyini.utils import IniMap, fold, trim
from lazyini.exceptions_warnings import EntityNotFound
import pytest


def test_trim():
    assert trim(" \t\n\r\f\vkey \t\n\r\f\v") == "key"
    assert trim("a b") == "a b"


@pytest.mark.parametrize(
    "key,folded",
    [
        ("  Key ", "key"),
        ("SECTION One", "section one"),
        ("Äpfel", "Äpfel"),
        ("ÉCOLE", "École"),
        ("ΣΊΣΥΦΟΣ", "ΣΊΣΥΦΟΣ"),
    ],
)
def test_fold_ascii_only(key, folded):
    assert fold(key) == folded


class TestIniMap:

    def test_access(self):
        ini_map = IniMap()
        ini_map["Key"] = 1
        assert ini_map["key"] == ini_map[" KEY "] == 1
        assert "kEy" in ini_map
        assert ini_map.has("key")
        assert 1 not in ini_map
        with pytest.raises(EntityNotFound):
            ini_map["other"]
        with pytest.raises(KeyError):
            ini_map["other"]
        assert ini_map.get("other", 2) == 2

    def test_first_spelling_and_position_are_kept(self):
        ini_map = IniMap([("B", 1), ("a", 2)])
        ini_map["b"] = 3
        ini_map[" A "] = 4
        assert list(ini_map) == ["B", "a"]
        assert list(ini_map.values()) == [3, 4]

    def test_empty_key_is_ignored(self):
        ini_map = IniMap()
        ini_map[""] = 1
        ini_map["   "] = 2
        assert ini_map.size() == 0

    def test_set(self):
        ini_map = IniMap()
        ini_map.set("a", 1)
        ini_map.set({"b": 2, "c": 3})
        ini_map.set([("d", 4)])
        assert dict(ini_map) == {"a": 1, "b": 2, "c": 3, "d": 4}
        with pytest.raises(TypeError):
            ini_map.set("a", 1, 2)

    def test_remove(self):
        ini_map = IniMap({"a": 1, "b": 2, "c": 3})
        assert ini_map.remove("B")
        assert not ini_map.remove("b")
        assert list(ini_map) == ["a", "c"]
        with pytest.raises(EntityNotFound):
            del ini_map["b"]
        # re-added keys go to the end
        ini_map["b"] = 4
        assert list(ini_map.items()) == [("a", 1), ("c", 3), ("b", 4)]
        assert len(ini_map) == ini_map.size() == 3

    def test_clear(self):
        ini_map = IniMap({"a": 1})
        ini_map.clear()
        assert ini_map.size() == 0
        ini_map["a"] = 2
        assert ini_map["a"] == 2

    def test_equality(self):
        assert IniMap({"A": 1, "b": 2}) == IniMap({"B": 2, "a": 1})
        assert IniMap({"a": 1}) == {"A": 1}
        assert IniMap({"a": 1}) != IniMap({"a": 2})
        assert IniMap({"a": 1}) != IniMap({"a": 1, "b": 1})

    def test_copy(self):
        ini_map = IniMap({"a": 1})
        copied = ini_map.copy()
        copied["a"] = 2
        assert ini_map["a"] == 1
        assert type(copied) is IniMap
