import copy

import pytest

from settingsfile.errors import InvalidKeyError
from settingsfile.value import (
    ABSENT,
    Absent,
    Scalar,
    ScalarKind,
    Sequence,
    Table,
    Value,
    ValueKind,
)


@pytest.mark.parametrize(
    "raw, expected_kind",
    [
        ("snsvrno", ScalarKind.STRING),
        (13223, ScalarKind.INTEGER),
        (2.5, ScalarKind.FLOAT),
        (False, ScalarKind.BOOLEAN),
    ],
)
def test_scalar_kind_is_derived(raw: object, expected_kind: ScalarKind) -> None:
    scalar = Scalar(raw)  # type: ignore[arg-type]
    assert scalar.kind is ValueKind.SCALAR
    assert scalar.scalar_kind is expected_kind
    assert scalar.unwrap() == raw


@pytest.mark.parametrize("raw", [None, [1], {"a": 1}, b"bytes"])
def test_scalar_rejects_other_types(raw: object) -> None:
    with pytest.raises(TypeError):
        Scalar(raw)  # type: ignore[arg-type]


def test_scalar_equality_includes_kind() -> None:
    assert Scalar(1) == Scalar(1)
    assert Scalar(1) != Scalar(True)
    assert Scalar(0) != Scalar(False)


def test_scalar_is_immutable() -> None:
    scalar = Scalar("a")
    with pytest.raises(AttributeError):
        scalar.value = "b"  # type: ignore[misc]


class TestTable:
    def test_missing_key_returns_absent(self) -> None:
        """Lookups of unknown keys give the sentinel instead of raising."""
        table = Table({"a": Scalar(1)})
        assert table.get("b") is ABSENT
        assert table.get("a") == Scalar(1)

    @pytest.mark.parametrize("key", ["a.b", "", ".", "user."])
    def test_rejects_invalid_keys(self, key: str) -> None:
        with pytest.raises(InvalidKeyError):
            Table({key: Scalar(1)})

    def test_rejects_non_string_key(self) -> None:
        table = Table()
        with pytest.raises(InvalidKeyError):
            table[1] = Scalar(1)  # type: ignore[index]

    def test_rejects_absent_and_plain_values(self) -> None:
        table = Table()
        with pytest.raises(TypeError):
            table["a"] = ABSENT
        with pytest.raises(TypeError):
            table["a"] = 5  # type: ignore[assignment]
        assert len(table) == 0

    def test_preserves_insertion_order(self) -> None:
        table = Table()
        table["zeta"] = Scalar(1)
        table["alpha"] = Scalar(2)
        table["mid"] = Scalar(3)
        assert list(table) == ["zeta", "alpha", "mid"]

    def test_equality_is_structural(self) -> None:
        assert Value.wrap({"a": {"b": 1}}) == Table({"a": Table({"b": Scalar(1)})})
        assert Value.wrap({"a": 1}) != Value.wrap({"a": 2})


class TestSequence:
    def test_heterogeneous_items(self) -> None:
        seq = Sequence([Scalar(1), Scalar("other"), Table()])
        assert len(seq) == 3
        assert seq[1] == Scalar("other")
        assert seq.kind is ValueKind.SEQUENCE

    def test_rejects_absent(self) -> None:
        with pytest.raises(TypeError):
            Sequence([ABSENT])
        seq = Sequence()
        with pytest.raises(TypeError):
            seq.append(ABSENT)


def test_wrap_and_unwrap_nested_data() -> None:
    data = {
        "user": {"name": "snsvrno", "path": ["~/bin", "~/.cargo/bin"]},
        "brightness": 123,
        "ratio": 0.5,
        "enabled": True,
    }
    tree = Value.wrap(data)
    assert isinstance(tree, Table)
    assert isinstance(tree["user"], Table)
    assert isinstance(tree["user"]["path"], Sequence)  # type: ignore[index]
    assert tree.unwrap() == data


def test_wrap_returns_values_unchanged() -> None:
    scalar = Scalar(3)
    assert Value.wrap(scalar) is scalar
    assert Value.wrap((1, 2)) == Sequence([Scalar(1), Scalar(2)])


def test_wrap_rejects_none() -> None:
    with pytest.raises(TypeError):
        Value.wrap({"a": None})


def test_copy_is_deep() -> None:
    tree = Value.wrap({"a": {"b": 1}, "list": [1]})
    clone = tree.copy()
    clone["a"]["b"] = Scalar(2)  # type: ignore[index]
    clone["list"].append(Scalar(2))  # type: ignore[index, union-attr]
    assert tree.unwrap() == {"a": {"b": 1}, "list": [1]}


def test_absent_is_a_falsy_singleton() -> None:
    assert Absent() is ABSENT
    assert copy.deepcopy(ABSENT) is ABSENT
    assert not ABSENT
    assert ABSENT.is_absent
    assert ABSENT.unwrap() is None
