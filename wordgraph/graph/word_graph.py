"""
Directed, weighted word-adjacency graph.

Builds on an insertion-ordered adjacency mapping:
- Node: a normalized word
- Edge: word A directly followed by word B in the source text (A -> B)
- Weight: number of times that adjacency was observed

Every node that appears anywhere in the graph owns an out-edge mapping, even
when it is empty, so terminal words are explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Set, Tuple


class GraphFrozenError(RuntimeError):
    """Raised when a graph is mutated after ingestion has completed."""
    pass


@dataclass
class GraphStats:
    """Word graph statistics."""
    total_nodes: int
    total_edges: int
    total_weight: int
    out_degree_avg: float
    out_degree_max: int
    in_degree_max: int
    dangling_nodes: int
    graph_density: float


_EMPTY_EDGES: Mapping[str, int] = MappingProxyType({})


class WordGraph:
    """
    Adjacency representation of the word graph.

    Mutation happens only through ``add_node`` / ``add_edge`` during ingestion;
    once ``freeze`` is called the graph is read-only for the rest of its life.
    """

    def __init__(self):
        # Forward adjacency: word -> {next word: weight}
        self._adjacency: Dict[str, Dict[str, int]] = {}

        # Reverse adjacency: word -> set of words that precede it
        self._predecessors: Dict[str, Set[str]] = {}

        self._frozen = False

    # Mutation (ingestion only)

    def add_node(self, word: str):
        """Add a node without edges, if it is not already present."""
        self._check_mutable()
        if word not in self._adjacency:
            self._adjacency[word] = {}
            self._predecessors[word] = set()

    def add_edge(self, from_word: str, to_word: str, weight: int = 1):
        """Record ``weight`` more observations of ``from_word -> to_word``."""
        self._check_mutable()
        if weight <= 0:
            raise ValueError(f"Edge weight must be positive, got {weight}")
        self.add_node(from_word)
        self.add_node(to_word)
        edges = self._adjacency[from_word]
        edges[to_word] = edges.get(to_word, 0) + weight
        self._predecessors[to_word].add(from_word)

    def freeze(self) -> 'WordGraph':
        """Mark ingestion as complete."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self):
        if self._frozen:
            raise GraphFrozenError("WordGraph is read-only after ingestion")

    # Queries

    def contains_as_source(self, word: str) -> bool:
        """True if ``word`` is a key with its own (possibly empty) out-edge mapping."""
        return word in self._adjacency

    def contains_anywhere(self, word: str) -> bool:
        """True if ``word`` is a source node or the destination of some edge."""
        if word in self._adjacency:
            return True
        return any(word in edges for edges in self._adjacency.values())

    def out_edges(self, word: str) -> Mapping[str, int]:
        """Read-only view of ``word``'s successors and weights (empty if absent)."""
        edges = self._adjacency.get(word)
        if edges is None:
            return _EMPTY_EDGES
        return MappingProxyType(edges)

    def nodes(self) -> Set[str]:
        return set(self._adjacency)

    def ordered_nodes(self) -> Tuple[str, ...]:
        """Nodes in first-seen order."""
        return tuple(self._adjacency)

    def edges(self) -> Iterator[Tuple[str, str, int]]:
        """Iterate ``(source, target, weight)`` in insertion order."""
        for source, targets in self._adjacency.items():
            for target, weight in targets.items():
                yield source, target, weight

    def out_degree(self, word: str) -> int:
        """Number of distinct successors of ``word``."""
        return len(self._adjacency.get(word, ()))

    def in_degree(self, word: str) -> int:
        """Number of distinct predecessors of ``word``."""
        return len(self._predecessors.get(word, ()))

    def predecessors(self, word: str) -> Set[str]:
        return set(self._predecessors.get(word, ()))

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())

    def weight(self, from_word: str, to_word: str) -> int:
        """Weight of ``from_word -> to_word``, 0 when the edge is absent."""
        return self._adjacency.get(from_word, {}).get(to_word, 0)

    def has_edge(self, from_word: str, to_word: str) -> bool:
        return to_word in self._adjacency.get(from_word, {})

    def is_empty(self) -> bool:
        return not self._adjacency

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Deep copy of the adjacency mapping."""
        return {source: dict(targets) for source, targets in self._adjacency.items()}

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, word: object) -> bool:
        return word in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return f"WordGraph(nodes={len(self)}, edges={self.edge_count()}, frozen={self._frozen})"

    def get_stats(self) -> GraphStats:
        """Calculate graph statistics."""
        if not self._adjacency:
            return GraphStats(0, 0, 0, 0.0, 0, 0, 0, 0.0)

        total_nodes = len(self._adjacency)
        out_degrees = [len(targets) for targets in self._adjacency.values()]
        in_degrees = [len(sources) for sources in self._predecessors.values()]
        total_edges = sum(out_degrees)
        total_weight = sum(weight for _, _, weight in self.edges())

        # Self-loops are possible ("very very"), so the bound is N * N
        max_possible_edges = total_nodes * total_nodes

        return GraphStats(
            total_nodes=total_nodes,
            total_edges=total_edges,
            total_weight=total_weight,
            out_degree_avg=total_edges / total_nodes,
            out_degree_max=max(out_degrees),
            in_degree_max=max(in_degrees),
            dangling_nodes=sum(1 for degree in out_degrees if degree == 0),
            graph_density=total_edges / max_possible_edges
        )
