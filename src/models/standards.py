from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StandardsHeader(BaseModel):
    """Front matter declared at the top of a standards document."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    scope: str = Field(min_length=1)
    topics: List[str]
    parent: str | None = None


@dataclass(slots=True)
class StandardsFile:
    """A markdown document that carried a valid header."""

    path: str
    header: StandardsHeader


@dataclass(slots=True)
class StandardsNode:
    """A single entry in the standards forest."""

    path: str
    title: str
    description: str
    scope: str
    topics: List[str] = field(default_factory=list)
    parent_path: Optional[str] = None
    children: List["StandardsNode"] = field(default_factory=list)

    @classmethod
    def from_file(cls, file: StandardsFile) -> "StandardsNode":
        header = file.header
        return cls(
            path=file.path,
            title=header.title,
            description=header.description,
            scope=header.scope,
            topics=list(header.topics),
            parent_path=header.parent,
        )

    def add_child(self, child: "StandardsNode") -> None:
        self.children.append(child)

    def sort_children(self) -> None:
        """Order children by title, recursively."""

        self.children = sort_nodes(self.children)

    def walk(self) -> Iterator["StandardsNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> Dict[str, Any]:
        # parent_path only matters while linking, it is never persisted
        return {
            "path": self.path,
            "title": self.title,
            "description": self.description,
            "scope": self.scope,
            "topics": list(self.topics),
            "children": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StandardsNode":
        return cls(
            path=data["path"],
            title=data["title"],
            description=data["description"],
            scope=data["scope"],
            topics=list(data.get("topics") or []),
            children=[cls.from_dict(child) for child in data.get("children") or []],
        )


@dataclass(slots=True)
class StandardsTree:
    """Ordered root nodes of the standards forest; the persisted artifact."""

    nodes: List[StandardsNode] = field(default_factory=list)

    def walk(self) -> Iterator[StandardsNode]:
        for node in self.nodes:
            yield from node.walk()

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())

    def find(self, path: str) -> Optional[StandardsNode]:
        for node in self.walk():
            if node.path == path:
                return node
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": [node.to_dict() for node in self.nodes]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StandardsTree":
        return cls(nodes=[StandardsNode.from_dict(node) for node in data.get("nodes") or []])


def sort_nodes(nodes: List[StandardsNode]) -> List[StandardsNode]:
    """Return *nodes* ordered by title with every subtree sorted as well."""

    ordered = sorted(nodes, key=lambda node: node.title)
    for node in ordered:
        node.sort_children()
    return ordered


__all__ = ["StandardsFile", "StandardsHeader", "StandardsNode", "StandardsTree", "sort_nodes"]
