"""Minimal example building partial and complete keys."""

from datastore_keys import KeyBuilder, PartialKeyBuilder, key_from_url_safe


def main() -> None:
    """Build a partial key, complete it, and round-trip it through its URL-safe form."""
    partial = PartialKeyBuilder("library", "Book").namespace("tenant-1").add_ancestor("Shelf", 7).build()
    print(f"{partial=}")
    print("partial wire:", partial.to_wire())

    key = KeyBuilder.from_partial(partial, name="dune").build()
    print("complete wire:", key.to_wire())
    print("parent:", key.parent)

    text = key.to_url_safe()
    print("url-safe:", text)
    print("decoded equals original:", key_from_url_safe(text) == key)


if __name__ == "__main__":
    main()
