from dataclasses import dataclass, field
from typing import List, Tuple

from src.models.collection import RequestItem


@dataclass(frozen=True)
class Leaf:
    """
    A request reached while flattening a collection tree, paired with the
    names of its ancestor folders in root-to-leaf order.
    """

    folders: Tuple[str, ...]
    item: RequestItem

    @property
    def name(self) -> str:
        return self.item.name


@dataclass
class EncodedBody:
    """Body text plus the header lines the body implies."""

    headers: List[str] = field(default_factory=list)
    body: str = ""
