from __future__ import annotations

from typing import Protocol


class LocalDataSource(Protocol):
    """On-device storage collaborator; opaque to the coordinator."""
