"""
Operations on nested key trees.

A key tree maps a segment either to another key tree (a container) or to a
leaf value. Every function here returns a new structure and leaves its
arguments untouched, so the extracted tree can be shared by every language.
"""

from typing import Any, Iterable, Iterator


def is_container(value: Any) -> bool:
    return isinstance(value, dict)


def is_placeholder(segment: str, value: Any) -> bool:
    """A leaf whose value is its own key name has not been translated yet."""
    return value == segment


def iter_leaves(tree: dict, parent: str = "") -> Iterator[tuple[str, str, Any]]:
    """Yield ``(dotted_path, segment, value)`` for every leaf, depth first."""
    for key, value in tree.items():
        path = f"{parent}.{key}" if parent else key
        if is_container(value):
            yield from iter_leaves(value, path)
        else:
            yield path, key, value


def flatten(tree: dict) -> list[str]:
    return [path for path, _, _ in iter_leaves(tree)]


def prune_paths(tree: dict, paths: Iterable[str], parent: str = "") -> dict:
    """
    Return a copy of ``tree`` without the leaves at ``paths``.

    Containers that end up with no children are dropped as well, all the way
    up, including containers that were already empty.
    """
    removed = paths if isinstance(paths, (set, frozenset)) else set(paths)
    pruned = {}

    for key, value in tree.items():
        path = f"{parent}.{key}" if parent else key
        if is_container(value):
            child = prune_paths(value, removed, path)
            if child:
                pruned[key] = child
        elif path not in removed:
            pruned[key] = value

    return pruned


def merge_trees(extracted: dict, existing: dict) -> dict:
    """
    Deep-merge ``existing`` over ``extracted``.

    Values from ``existing`` win on every collision; the two sides are only
    merged recursively when both hold a container at the same key.
    """
    merged = copy_tree(extracted)

    for key, value in existing.items():
        current = merged.get(key)
        if is_container(value) and is_container(current):
            merged[key] = merge_trees(current, value)
        else:
            merged[key] = copy_tree(value) if is_container(value) else value

    return merged


def sort_tree(tree: dict) -> dict:
    return {
        key: sort_tree(value) if is_container(value) else value
        for key, value in sorted(tree.items(), key=lambda item: item[0])
    }


def copy_tree(tree: dict) -> dict:
    return {
        key: copy_tree(value) if is_container(value) else value
        for key, value in tree.items()
    }
