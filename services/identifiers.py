"""Sources of roadmap and best-practice identifiers."""
from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Iterable, Protocol, Tuple

from config import settings
from services.errors import IdentifierSourceUnavailable

logger = logging.getLogger(__name__)


class IdentifierSource(Protocol):
    """Anything able to list roadmap and best-practice identifiers."""

    async def list_roadmap_identifiers(self) -> Tuple[str, ...]:
        ...

    async def list_best_practice_identifiers(self) -> Tuple[str, ...]:
        ...


class DirectoryIdentifierSource:
    """Identifiers taken from the entry names of two content directories."""

    def __init__(
        self,
        roadmaps_dir: Path | None = None,
        best_practices_dir: Path | None = None,
    ) -> None:
        self.roadmaps_dir = Path(roadmaps_dir or settings.ROADMAPS_DIR)
        self.best_practices_dir = Path(best_practices_dir or settings.BEST_PRACTICES_DIR)

    async def list_roadmap_identifiers(self) -> Tuple[str, ...]:
        return await self._list("roadmap", self.roadmaps_dir)

    async def list_best_practice_identifiers(self) -> Tuple[str, ...]:
        return await self._list("best-practice", self.best_practices_dir)

    @staticmethod
    async def _list(kind: str, directory: Path) -> Tuple[str, ...]:
        try:
            names = await asyncio.to_thread(os.listdir, directory)
        except OSError as exc:
            logger.error("Failed to list %s identifiers in %s: %s", kind, directory, exc)
            raise IdentifierSourceUnavailable(kind, directory, exc.strerror) from exc

        identifiers = tuple(sorted(names))
        logger.debug("Listed %s %s identifiers from %s", len(identifiers), kind, directory)
        return identifiers


class StaticIdentifierSource:
    """In-memory identifier source with fixed listings."""

    def __init__(
        self,
        roadmap_ids: Iterable[str] = (),
        best_practice_ids: Iterable[str] = (),
    ) -> None:
        self.roadmap_ids = tuple(roadmap_ids)
        self.best_practice_ids = tuple(best_practice_ids)

    @classmethod
    async def snapshot(cls, source: IdentifierSource) -> "StaticIdentifierSource":
        """Read both listings of ``source`` once and freeze them."""
        roadmap_ids, best_practice_ids = await asyncio.gather(
            source.list_roadmap_identifiers(),
            source.list_best_practice_identifiers(),
        )
        return cls(roadmap_ids, best_practice_ids)

    async def list_roadmap_identifiers(self) -> Tuple[str, ...]:
        return self.roadmap_ids

    async def list_best_practice_identifiers(self) -> Tuple[str, ...]:
        return self.best_practice_ids


__all__ = ["IdentifierSource", "DirectoryIdentifierSource", "StaticIdentifierSource"]
