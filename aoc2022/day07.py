"""Day 7: No Space Left On Device."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

CAPACITY = 70_000_000
REQUIRED = 30_000_000


@dataclass
class Node:
    """A sized file, or a directory (with children) whose size is the total of its contents."""

    size: int
    name: str
    children: Optional[list[Node]] = None

    @property
    def is_dir(self) -> bool:
        return self.children is not None

    def dir_sizes(self) -> list[int]:
        """Sizes of this directory and every directory below it, deepest first."""
        if self.children is None:
            return []
        sizes = [size for child in self.children for size in child.dir_sizes()]
        sizes.append(self.size)
        return sizes


@dataclass
class PartialNode:
    """A node of a tree under construction; directory sizes are not yet known."""

    name: str
    size: Optional[int] = None
    children: Optional[list[PartialNode]] = field(default=None)

    @classmethod
    def root(cls) -> PartialNode:
        return cls(name="/", size=None, children=[])

    def insert_node(self, path: Sequence[str], node: PartialNode) -> None:
        """Add ``node`` to the directory reached by following ``path`` from here."""
        target = self
        for segment in path:
            if target.children is None:
                raise ValueError(f"Path {list(path)!r} does not exist!")
            found = next((child for child in target.children if child.name == segment), None)
            if found is None:
                raise ValueError(f"No node named '{segment}'")
            target = found
        if target.children is None:
            raise ValueError(f"{target.name} is a file, not a directory.")
        target.children.append(node)

    def canonicalize(self) -> Node:
        """Check every file is sized and compute directory sizes."""
        if self.children is None:
            if self.size is None:
                raise ValueError(f"Node '{self.name}' is not sized!")
            return Node(size=self.size, name=self.name)
        children = [child.canonicalize() for child in self.children]
        return Node(size=sum(child.size for child in children), name=self.name, children=children)


def parse(text: str) -> Node:
    """Rebuild the file tree from a terminal session."""
    root = PartialNode.root()
    path: list[str] = []
    for line in text.splitlines():
        words = line.split(" ")
        if words[0] == "$":
            if words[1] == "cd":
                destination = words[2]
                if destination == "..":
                    if path:
                        path.pop()
                elif destination == "/":
                    path.clear()
                else:
                    path.append(destination)
            continue
        name = words[1]
        if words[0] == "dir":
            node = PartialNode(name=name, children=[])
        else:
            try:
                size = int(words[0])
            except ValueError:
                raise ValueError("Couldn't read file size") from None
            node = PartialNode(name=name, size=size)
        root.insert_node(path, node)
    return root.canonicalize()


def part1(text: str) -> Optional[int]:
    """Total size of all directories of at most 100000."""
    return sum(size for size in parse(text).dir_sizes() if size <= 100_000)


def part2(text: str) -> Optional[int]:
    """Size of the smallest directory whose deletion frees enough space."""
    root = parse(text)
    if root.size > CAPACITY:
        raise ValueError("Usage exceeds disk capacity")
    needed = REQUIRED - (CAPACITY - root.size)
    if needed < 0:
        raise ValueError("Enough space is already free")
    return next((size for size in sorted(root.dir_sizes()) if size >= needed), None)