from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from structural.utils.wire_once import WireOnce

if TYPE_CHECKING:
    from structural.example_app.data.repository import Coordinator


class LogicHandler:
    """Use case with a back-reference to its Coordinator.

    Pass the coordinator up front, or leave it out and assign
    ``handler.coordinator`` once the coordinator exists.
    """

    coordinator: WireOnce["Coordinator"] = WireOnce()

    def __init__(self, coordinator: Optional["Coordinator"] = None) -> None:
        if coordinator is not None:
            self.coordinator = coordinator
