from typing import Iterator, List, Tuple, Union

from src.models.collection import CollectionDocument, FolderItem, Item, RequestItem

from ...processors.postman.models import Leaf

LeafResult = Union[Leaf, List[Leaf]]


class TreeFlattener:
    """
    Pure traversal of a collection tree into (folder path, request) leaves.
    """

    @staticmethod
    def flatten(item: Item, folders: Tuple[str, ...] = ()) -> LeafResult:
        """
        Flatten one node of the tree.

        Args:
            item: Folder or request node
            folders: Names of the folders above ``item``, root first

        Returns:
            LeafResult: A single Leaf for a request, or every Leaf below a folder
            in declared order
        """
        if isinstance(item, FolderItem):
            path = folders + (item.name,)
            leaves: List[Leaf] = []
            for child in item.item:
                result = TreeFlattener.flatten(child, path)
                if isinstance(result, Leaf):
                    leaves.append(result)
                else:
                    leaves.extend(result)
            return leaves
        if isinstance(item, RequestItem):
            return Leaf(folders=folders, item=item)
        raise TypeError(f"Unsupported collection item: {type(item).__name__}")

    @staticmethod
    def iter_leaves(collection: CollectionDocument) -> Iterator[Leaf]:
        """Yield every request of a collection, top-level items first to last."""
        for item in collection.item:
            result = TreeFlattener.flatten(item)
            if isinstance(result, Leaf):
                yield result
            else:
                yield from result
