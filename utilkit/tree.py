"""Building nested trees of dictionaries from flat lists of records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

Node = dict[str, Any]


class TreeBuildError(RuntimeError):
    """Raised when a tree cannot be built from the given records."""


@dataclass
class TreeConfig:
    """Names of the node keys used while building a tree.

    ``deep`` is the maximum depth of the tree, root included; 0 means
    no limit. An empty ``sort_key`` keeps the records in input order.
    """

    id_key: str = "id"
    parent_id_key: str = "parentId"
    children_key: str = "children"
    sort_key: str = "sort"
    deep: int = 0


class Builder(Generic[T]):
    """Collects nodes and links them into a tree under a root id."""

    def __init__(self, root_id: T, config: TreeConfig | None = None) -> None:
        self.config = config if config is not None else TreeConfig()
        self._root: Node = {self.config.id_key: root_id, self.config.children_key: []}
        self._built = False
        self._nodes: dict[T, Node] = {}
        self._order: list[T] = []

    def _ensure_not_built(self) -> None:
        if self._built:
            raise TreeBuildError("the tree has already been built")

    def append(self, items: Iterable[E], parse: Callable[[E], Node]) -> None:
        """Turn each item into a node with parse and register it."""
        self._ensure_not_built()
        config = self.config
        for item in items:
            node = parse(item)
            node_id = node[config.id_key]
            self._nodes[node_id] = node
            self._order.append(node_id)
        if config.sort_key:
            self._order.sort(key=lambda node_id: self._nodes[node_id][config.sort_key])

    def build(self) -> Node:
        """Link the registered nodes and return the root.

        When no registered node carries the root id, a fresh root node
        holding only the id and the children is returned.
        """
        self._ensure_not_built()
        config = self.config
        for node_id in self._order:
            node = self._nodes[node_id]
            root_id = self._root[config.id_key]
            if node_id == root_id:
                self._add_children(node, self._root.get(config.children_key, []))
                self._root = node
                continue
            parent_id = node.get(config.parent_id_key)
            if parent_id == root_id:
                self._add_children(self._root, [node])
                continue
            parent = self._nodes.get(parent_id)
            if parent is not None:
                self._add_children(parent, [node])

        if config.deep > 0:
            self._cut(self._root, 1)
        self._built = True
        return self._root

    def _add_children(self, node: Node, children: list[Node]) -> None:
        if not children:
            return
        key = self.config.children_key
        if key in node:
            node[key].extend(children)
        else:
            node[key] = list(children)

    def _cut(self, node: Node, depth: int) -> None:
        key = self.config.children_key
        if depth == self.config.deep:
            node.pop(key, None)
        for child in node.get(key, ()):
            self._cut(child, depth + 1)


def _camel_key(name: str) -> str:
    head, *rest = name.split("_")
    head = head[:1].lower() + head[1:]
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _public_fields(src: Any) -> Iterator[tuple[str, Any]]:
    if is_dataclass(src) and not isinstance(src, type):
        names = [f.name for f in fields(src)]
    else:
        names = list(vars(src))
    for name in names:
        if not name.startswith("_"):
            yield name, getattr(src, name)


def default_parser(src: Any, builder: Builder[Any]) -> Node:
    """Turn a record's public fields into a node.

    Field names become lowerCamelCase keys (``parent_id`` and ``ParentId``
    both give ``parentId``). The record must supply the id and parent id
    keys, and the sort key when one is configured; the sort value must be
    an int.
    """
    config = builder.config
    node: Node = {}
    has_id = has_parent = has_sort = False
    for name, value in _public_fields(src):
        key = _camel_key(name)
        if key == config.id_key:
            has_id = True
        elif key == config.parent_id_key:
            has_parent = True
        elif config.sort_key and key == config.sort_key:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"sort value must be an int, got {value!r}")
            has_sort = True
        node[key] = value
    if not has_id:
        raise TreeBuildError("no field matches the id key")
    if not has_parent:
        raise TreeBuildError("no field matches the parent id key")
    if config.sort_key and not has_sort:
        raise TreeBuildError("no field matches the sort key")
    return node


def get_parser(builder: Builder[Any]) -> Callable[[Any], Node]:
    """Return a parse function that applies default_parser for builder."""
    return lambda src: default_parser(src, builder)