from __future__ import annotations

from typing import Protocol


class RemoteDataSource(Protocol):
    """Network-backed collaborator; opaque to the coordinator."""
