"""Walk nested theme token trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

ThemeTree = dict[str, Any]


class FlattenMode(Enum):
    """Traversal policy for :func:`flatten`."""

    ENUMERATE = "enumerate"
    FIRST_BRANCH = "first_branch"


@dataclass(frozen=True, slots=True)
class FlatEntry:
    """A leaf reached in a token tree, addressed by its key path."""

    path: tuple[str, ...]
    value: Any
    separator: str = "-"

    @property
    def name(self) -> str:
        return join_path(self.path, self.separator)


def join_path(path: tuple[str, ...], separator: str = "-") -> str:
    """Join key path components, turning slashes inside keys into the separator."""
    return separator.join(part.replace("/", separator) for part in path)


def inject(tree: ThemeTree, new_value: Any, *, is_key: bool = False) -> ThemeTree:
    """Set a key or value at the end of the first-child chain of ``tree``.

    Only the first key at each level is followed. An empty tree is bootstrapped
    with ``{new_value: {}}``. With ``is_key`` the value is added as a new key
    (mapped to an empty dict) under the leaf; otherwise the leaf value is
    overwritten. The tree is modified in place and returned.
    """
    if not tree:
        tree[new_value] = {}
        return tree

    parent, key = _first_leaf(tree)
    if not is_key:
        parent[key] = new_value
    elif isinstance(parent[key], dict):
        parent[key][new_value] = {}
    else:
        parent[key] = {new_value: {}}
    return tree


def enumerate_leaves(
    tree: ThemeTree,
    separator: str = "-",
    _prefix: tuple[str, ...] = (),
) -> Iterator[FlatEntry]:
    """Lazily yield every scalar leaf of ``tree`` in insertion order.

    Empty nested objects produce nothing.
    """
    for key, value in tree.items():
        path = _prefix + (str(key),)
        if isinstance(value, dict):
            yield from enumerate_leaves(value, separator, path)
        else:
            yield FlatEntry(path=path, value=value, separator=separator)


def flatten(
    tree: ThemeTree,
    mode: FlattenMode = FlattenMode.ENUMERATE,
    *,
    separator: str = "-",
) -> Iterator[FlatEntry]:
    """Yield leaf entries of ``tree`` using the given traversal mode."""
    if mode is FlattenMode.ENUMERATE:
        yield from enumerate_leaves(tree, separator)
        return
    if not tree:
        return
    path: list[str] = []
    node: Any = tree
    while isinstance(node, dict) and node:
        key = next(iter(node))
        path.append(str(key))
        node = node[key]
    yield FlatEntry(path=tuple(path), value=node, separator=separator)


def _first_leaf(tree: ThemeTree) -> tuple[ThemeTree, str]:
    parent = tree
    key = next(iter(parent))
    while True:
        value = parent[key]
        if not isinstance(value, dict) or not value:
            return parent, key
        parent = value
        key = next(iter(parent))
