import pytest

from settingsfile.errors import InvalidKeyError
from settingsfile.keypath import KeyPath


@pytest.mark.parametrize("key", ["user", "user.name", "a.b.c.d", "program.default.storage", "with space.x"])
def test_parse_then_join_reproduces_key(key: str) -> None:
    path = KeyPath.parse(key)
    assert ".".join(path.segments()) == key
    assert str(path) == key


@pytest.mark.parametrize("key", ["", ".", "a..b", ".a", "a.", "a.b."])
def test_parse_rejects_empty_segments(key: str) -> None:
    with pytest.raises(InvalidKeyError) as excinfo:
        KeyPath.parse(key)
    assert excinfo.value.key == key


def test_parse_rejects_non_strings() -> None:
    with pytest.raises(InvalidKeyError):
        KeyPath.parse(5)  # type: ignore[arg-type]


def test_head_and_rest() -> None:
    path = KeyPath.parse("a.b.c")
    assert path.head() == "a"
    rest = path.rest()
    assert rest is not None
    assert rest.segments() == ("b", "c")
    assert KeyPath.parse("a").rest() is None


def test_leaf_parent_and_prefixes() -> None:
    path = KeyPath.parse("a.b.c")
    assert path.leaf() == "c"
    assert str(path.parent()) == "a.b"
    assert KeyPath.parse("a").parent() is None
    assert [str(prefix) for prefix in path.prefixes()] == ["a", "a.b", "a.b.c"]
    assert str(path.child("d")) == "a.b.c.d"


def test_from_segments_validates() -> None:
    assert KeyPath.from_segments(["a", "b"]) == KeyPath.parse("a.b")
    with pytest.raises(InvalidKeyError):
        KeyPath.from_segments([])
    with pytest.raises(InvalidKeyError):
        KeyPath.from_segments(["a.b"])
    with pytest.raises(InvalidKeyError):
        KeyPath.from_segments(["a", ""])


def test_paths_are_hashable_values() -> None:
    paths = {KeyPath.parse("a.b"), KeyPath.from_segments(("a", "b")), KeyPath.parse("a")}
    assert len(paths) == 2
    assert len(KeyPath.parse("x.y.z")) == 3
    assert list(KeyPath.parse("x.y")) == ["x", "y"]
