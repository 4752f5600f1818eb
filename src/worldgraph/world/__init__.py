"""World construction and the assembled world graph.

Architecture Note:
    world/ is the stateful layer: it turns records into a connected graph of
    core/ objects and owns that graph until teardown.
"""

from worldgraph.world.builder import AmbiguousIdentifierError, WorldBuilder, init_world
from worldgraph.world.graph import WorldGraph, destroy_world

__all__ = [
    "WorldGraph",
    "WorldBuilder",
    "AmbiguousIdentifierError",
    "init_world",
    "destroy_world",
]
