from __future__ import annotations

import pytest

from vitetags.domain.models import Mapped, Names, Single


def test_single_pairs_copy_attributes() -> None:
    attributes = {"defer": "defer"}
    pairs = Single("app.js").pairs(attributes)
    assert pairs == [("app.js", {"defer": "defer"})]
    assert pairs[0][1] is not attributes


def test_names_pairs_share_default_attributes() -> None:
    assert Names(["a.js", "b.js"]).pairs({"nonce": "n"}) == [
        ("a.js", {"nonce": "n"}),
        ("b.js", {"nonce": "n"}),
    ]


def test_names_rejects_a_bare_string() -> None:
    with pytest.raises(TypeError):
        Names("app.js")


def test_names_are_stored_as_tuple() -> None:
    names = ["a.js"]
    entry = Names(names)
    names.append("b.js")
    assert entry.names == ("a.js",)
    assert entry == Names(("a.js",))


def test_mapped_ignores_default_attributes() -> None:
    entry = Mapped({"a.js": {"id": "a"}, "b.js": {}})
    assert entry.pairs({"ignored": "yes"}) == [("a.js", {"id": "a"}), ("b.js", {})]
