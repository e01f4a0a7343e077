"""Composition of the sample object graph.

``Coordinator`` needs both handlers at construction and both handlers point
back at the coordinator, so the graph cannot be built in one pass. The
handlers are created unwired, the coordinator is built from them, and the
back-references are assigned last.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from structural.example_app.data.local import LocalDataSource
from structural.example_app.data.remote import RemoteDataSource
from structural.example_app.data.repository import Coordinator
from structural.example_app.domain.logic_handler import LogicHandler
from structural.example_app.ui.presentation_handler import PresentationHandler

_log = logging.getLogger(__name__)

# reference attributes held by each node type
REFERENCE_ATTRS: Dict[type, Tuple[str, ...]] = {
    Coordinator: ("logic_handler", "local_source", "remote_source", "presentation_handler"),
    LogicHandler: ("coordinator",),
    PresentationHandler: ("coordinator",),
}


@dataclass(frozen=True)
class Graph:
    coordinator: Coordinator
    logic_handler: LogicHandler
    presentation_handler: PresentationHandler

    def nodes(self) -> Tuple[Any, ...]:
        return (self.coordinator, self.logic_handler, self.presentation_handler)


def build_graph(local_source: LocalDataSource, remote_source: RemoteDataSource) -> Graph:
    """Two-phase construction: create handlers, build the coordinator, wire back-references."""
    logic_handler = LogicHandler()
    presentation_handler = PresentationHandler()
    coordinator = Coordinator(logic_handler, local_source, remote_source, presentation_handler)
    logic_handler.coordinator = coordinator
    presentation_handler.coordinator = coordinator
    _log.debug("Wired sample graph around %s", type(coordinator).__name__)
    return Graph(coordinator, logic_handler, presentation_handler)


def outgoing_references(node: Any) -> List[Tuple[str, Any]]:
    """``(attribute, target)`` pairs held by ``node``."""
    attrs = REFERENCE_ATTRS.get(type(node), ())
    return [(attr, getattr(node, attr)) for attr in attrs]


def reference_cycles(graph: Graph) -> List[Tuple[str, str]]:
    """Bidirectional reference pairs among the graph's nodes, e.g.
    ``("Coordinator.logic_handler", "LogicHandler.coordinator")``.

    Self-references are reported as a pair with both sides equal.
    """
    nodes = graph.nodes()
    edges: List[Tuple[Any, str, Any]] = []
    for node in nodes:
        for attr, target in outgoing_references(node):
            if any(target is other for other in nodes):
                edges.append((node, attr, target))

    cycles: List[Tuple[str, str]] = []
    for index, (source, attr, target) in enumerate(edges):
        label = f"{type(source).__name__}.{attr}"
        if target is source:
            cycles.append((label, label))
            continue
        for back_source, back_attr, back_target in edges[index + 1:]:
            if back_source is target and back_target is source:
                cycles.append((label, f"{type(back_source).__name__}.{back_attr}"))
    return cycles


__all__ = ["Graph", "build_graph", "outgoing_references", "reference_cycles"]
