"""
Disjoint sets (union-find) with path compression.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from typing import Dict, Hashable, Iterable, Optional


class DisjointSets:
    """
    Partition of elements into disjoint sets, each identified by its represent.

    Attributes:
        represents: Mapping element -> parent on the way to its represent.

    Complexity:
        - find_set / union_set / is_same_set: amortized O(log n)
        - add: O(1)

    Example:
        >>> sets = DisjointSets(range(4))
        >>> _ = sets.union_set(0, 1)
        >>> sets.is_same_set(0, 1), len(sets)
        (True, 3)
    """

    def __init__(self, universe: Iterable[Hashable] = ()):
        """
        Initialize singleton sets of given elements.

        Args:
            universe: Initial elements.
        """
        self.represents: Dict[Hashable, Hashable] = {}

        for element in universe:
            self.represents[element] = element

        self._sets_count = len(self.represents)

    def __len__(self) -> int:
        """Return the number of sets."""
        return self._sets_count

    def __contains__(self, element: object) -> bool:
        return element in self.represents

    def __getitem__(self, element: Hashable) -> Hashable:
        """
        Find the represent of the set containing an element.

        Raises:
            KeyError: If the element is not present.
        """
        root = element

        while self.represents[root] != root:
            root = self.represents[root]

        # Path compression
        while element != root:
            self.represents[element], element = root, self.represents[element]

        return root

    def add(self, element: Hashable) -> "DisjointSets":
        """
        Add an element as a new singleton set.

        Raises:
            ValueError: If the element is already present.
        """
        return self.add_range([element])

    def add_range(self, elements: Iterable[Hashable]) -> "DisjointSets":
        """
        Add elements as new singleton sets.

        Nothing is added when any of the elements is already present.

        Raises:
            ValueError: If any element is already present.
        """
        elements = list(dict.fromkeys(elements))

        for element in elements:
            if element in self.represents:
                raise ValueError(f"Value {element} already present")

        for element in elements:
            self.represents[element] = element
            self._sets_count += 1

        return self

    def find_set(self, element: Hashable, default: Optional[Hashable] = None) -> Optional[Hashable]:
        """Return the represent of an element, or ``default`` if it is not present."""
        try:
            return self[element]
        except KeyError:
            return default

    def union_set(self, element1: Hashable, element2: Hashable) -> "DisjointSets":
        """
        Join the sets containing both elements.

        Returns:
            This structure, for chaining.

        Raises:
            KeyError: If either element is not present.
        """
        represent1 = self[element1]
        represent2 = self[element2]

        if represent1 != represent2:
            self.represents[represent1] = represent2
            self._sets_count -= 1

        return self

    def is_same_set(self, element1: Hashable, element2: Hashable) -> bool:
        """
        Check whether both elements belong to the same set.

        Raises:
            KeyError: If either element is not present.
        """
        return self[element1] == self[element2]
