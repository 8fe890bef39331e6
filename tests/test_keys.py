import pytest
from hypothesis import given
from hypothesis import strategies as st

from datastore_keys.builder import KeyBuilder, PartialKeyBuilder
from datastore_keys.errors import InvalidArgumentError, InvalidStateError
from datastore_keys.keys import BaseKey, Key, PartialKey
from datastore_keys.path_element import PathElement
from datastore_keys.wire import key_from_url_safe


_ANCESTORS = st.lists(
    st.builds(
        PathElement,
        st.sampled_from(["Shelf", "Row", "Slot"]),
        id=st.integers(min_value=1, max_value=1_000),
    ),
    min_size=2,
    max_size=6,
)


def _key(ancestors: list[PathElement], *, id_: int = 2) -> Key:
    return KeyBuilder("library", "Book", id=id_).namespace("tenant-1").add_ancestors(ancestors).build()


def test_base_key_is_abstract() -> None:
    with pytest.raises(TypeError):
        _ = BaseKey("library", None, (), "Book")  # type: ignore[abstract]


def test_complete_key_wire_format_with_id_ancestor() -> None:
    key = KeyBuilder("d", "B", id=2).add_ancestor("A", 1).build()
    assert key.to_wire() == {
        "partitionId": {"datasetId": "d"},
        "pathElement": [{"kind": "A", "id": 1}, {"kind": "B", "id": 2}],
    }


def test_partial_key_wire_leaf_has_kind_only() -> None:
    key = PartialKeyBuilder("d", "B").namespace("ns").add_ancestor("A", "root").build()
    assert key.to_wire() == {
        "partitionId": {"datasetId": "d", "namespace": "ns"},
        "pathElement": [{"kind": "A", "name": "root"}, {"kind": "B"}],
    }


def test_complete_key_wire_leaf_with_name() -> None:
    key = KeyBuilder("d", "B", name="leaf").build()
    assert key.to_wire()["pathElement"] == [{"kind": "B", "name": "leaf"}]


@given(ancestors=_ANCESTORS)
def test_identical_keys_are_equal_and_hash_identically(ancestors: list[PathElement]) -> None:
    first = _key(ancestors)
    second = _key(list(ancestors))
    assert first == second
    assert hash(first) == hash(second)


@given(ancestors=_ANCESTORS)
def test_reordering_ancestors_breaks_equality(ancestors: list[PathElement]) -> None:
    reordered = list(reversed(ancestors))
    if reordered == ancestors:
        return
    assert _key(ancestors) != _key(reordered)


def test_leaf_identifier_and_variant_take_part_in_equality() -> None:
    assert _key([], id_=1) != _key([], id_=2)
    assert KeyBuilder("library", "Book", id=1).build() != KeyBuilder("library", "Book", name="1").build()

    partial = PartialKeyBuilder("library", "Book").build()
    assert partial == PartialKeyBuilder("library", "Book").build()
    assert partial != KeyBuilder("library", "Book", id=1).build()


def test_keys_are_immutable_and_usable_as_dict_keys() -> None:
    key = _key([PathElement("Shelf", id=1)])
    with pytest.raises(AttributeError):
        key.kind = "Other"  # type: ignore[misc]
    assert {key: "value"}[_key([PathElement("Shelf", id=1)])] == "value"


def test_complete_key_accessors() -> None:
    by_id = KeyBuilder("library", "Book", id=3).build()
    assert by_id.has_id
    assert not by_id.has_name
    assert by_id.name_or_id == 3
    assert by_id.leaf == PathElement("Book", id=3)

    by_name = KeyBuilder("library", "Book", name="dune").build()
    assert by_name.has_name
    assert by_name.name_or_id == "dune"


def test_complete_key_rejects_bad_leaf_when_constructed_directly() -> None:
    with pytest.raises(InvalidStateError, match="requires an id or a name"):
        _ = Key("library", None, (), "Book")
    with pytest.raises(InvalidArgumentError, match="both an id and a name"):
        _ = Key("library", None, (), "Book", id=1, name="x")


def test_parent_walks_up_the_path() -> None:
    key = (
        PartialKeyBuilder("library", "Book")
        .namespace("tenant-1")
        .add_ancestor("Shelf", 1)
        .add_ancestor("Row", "a")
        .build()
    )
    parent = key.parent
    assert parent == Key("library", "tenant-1", (PathElement("Shelf", id=1),), "Row", name="a")
    assert parent is not None
    grandparent = parent.parent
    assert grandparent == Key("library", "tenant-1", (), "Shelf", id=1)
    assert grandparent is not None
    assert grandparent.parent is None


def test_url_safe_text_is_unpadded() -> None:
    text = KeyBuilder("d", "B", id=2).add_ancestor("A", 1).build().to_url_safe()
    assert "=" not in text
    assert "+" not in text
    assert "/" not in text


@pytest.mark.parametrize("text", ["\ud800", "ok\udfff"])
def test_builders_reject_strings_that_cannot_reach_the_wire(text: str) -> None:
    with pytest.raises(InvalidArgumentError, match="name must be encodable as UTF-8"):
        _ = KeyBuilder("d", "B", name=text)
    with pytest.raises(InvalidArgumentError, match="kind must be encodable as UTF-8"):
        _ = PartialKeyBuilder("d", text)
    with pytest.raises(InvalidArgumentError, match="name must be encodable as UTF-8"):
        _ = PartialKeyBuilder("d", "B").add_ancestor("A", text)


def test_non_ascii_names_survive_url_safe_encoding() -> None:
    key = KeyBuilder("d", "Buch", name="straße-🔑").build()
    assert key_from_url_safe(key.to_url_safe()) == key


def test_directly_constructed_key_stores_ancestors_as_tuple() -> None:
    ancestors = [PathElement("Shelf", id=1)]
    key = Key("library", None, ancestors, "Book", id=2)  # type: ignore[arg-type]
    ancestors.append(PathElement("Row", id=2))
    assert key.ancestors == (PathElement("Shelf", id=1),)
    assert hash(key) == hash(_key_without_namespace())


def _key_without_namespace() -> Key:
    return KeyBuilder("library", "Book", id=2).add_ancestor("Shelf", 1).build()
