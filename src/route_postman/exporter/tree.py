"""Folder tree of the collection.

Folders live in a flat arena and refer to each other by index, the root
folder being index 0.
"""

from pydantic import BaseModel

from route_postman.exporter.items import RequestItem
from route_postman.exporter.paths import NormalizedPath, folder_name

ROOT = 0


class FolderNode(BaseModel):
    """A folder: child folders (arena indices) and request items, in insertion order."""

    name: str
    children: list[int | RequestItem] = []
    segments: dict[str, int] = {}  # path segment -> child folder index


class FolderTree:
    """Builds the nested folder structure one route at a time."""

    def __init__(self):
        self.nodes: list[FolderNode] = [FolderNode(name="")]

    def ensure_child(self, node: int, segment: str) -> int:
        """Return the child folder of ``node`` for ``segment``, creating it if missing."""
        parent = self.nodes[node]
        if segment in parent.segments:
            return parent.segments[segment]

        index = len(self.nodes)
        self.nodes.append(FolderNode(name=folder_name(segment)))
        parent.segments[segment] = index
        parent.children.append(index)
        return index

    def ensure_folder(self, path: NormalizedPath) -> int:
        """Walk ``path`` from the root, creating folders on demand; return the leaf."""
        node = ROOT
        for segment in path:
            node = self.ensure_child(node, segment)
        return node

    def insert(self, path: NormalizedPath, item: RequestItem) -> None:
        self.nodes[self.ensure_folder(path)].children.append(item)

    def flatten(self, node: int = ROOT) -> list[dict]:
        """Convert the children of ``node`` into Postman ``item`` arrays."""
        items = []
        for child in self.nodes[node].children:
            if isinstance(child, RequestItem):
                items.append(child.to_postman())
            else:
                items.append({
                    "name": self.nodes[child].name,
                    "item": self.flatten(child),
                })
        return items
