from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from structural.utils.wire_once import WireOnce

if TYPE_CHECKING:
    from structural.example_app.data.repository import Coordinator


class PresentationHandler:
    """View model with a back-reference to its Coordinator (set once)."""

    coordinator: WireOnce["Coordinator"] = WireOnce()

    def __init__(self, coordinator: Optional["Coordinator"] = None) -> None:
        if coordinator is not None:
            self.coordinator = coordinator
