from __future__ import annotations

from structural.domain.errors import ConstructionError
from structural.example_app.domain.logic_handler import LogicHandler
from structural.example_app.ui.presentation_handler import PresentationHandler

from .local import LocalDataSource
from .remote import RemoteDataSource


class Coordinator:
    """Repository holding the use case, both data sources, and the view model.

    All four references are required and fixed at construction.
    """

    __slots__ = ("_logic_handler", "_local_source", "_remote_source", "_presentation_handler")

    def __init__(
        self,
        logic_handler: LogicHandler,
        local_source: LocalDataSource,
        remote_source: RemoteDataSource,
        presentation_handler: PresentationHandler,
    ) -> None:
        _require("logic_handler", logic_handler)
        _require("local_source", local_source)
        _require("remote_source", remote_source)
        _require("presentation_handler", presentation_handler)
        self._logic_handler = logic_handler
        self._local_source = local_source
        self._remote_source = remote_source
        self._presentation_handler = presentation_handler

    @property
    def logic_handler(self) -> LogicHandler:
        return self._logic_handler

    @property
    def local_source(self) -> LocalDataSource:
        return self._local_source

    @property
    def remote_source(self) -> RemoteDataSource:
        return self._remote_source

    @property
    def presentation_handler(self) -> PresentationHandler:
        return self._presentation_handler


def _require(name: str, value: object) -> None:
    if value is None:
        raise ConstructionError(f"Coordinator requires {name}")
