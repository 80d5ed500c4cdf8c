"""Dare pack library.

Serves dares from the built-in catalog, from optional pack files on disk,
and from per-pack custom dare files that players have written. Standard
and custom dares are merged, de-duplicated, shuffled and sliced.
"""

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import AbstractSet, Dict, List, Optional

from ..core.errors import ContentUnavailableError
from . import catalog
from .base import PackInfo, shuffle_items

logger = logging.getLogger(__name__)


def sanitize_pack_name(pack_id: str) -> str:
    """Turn a pack name into the slug used for custom dare file names."""
    slug = re.sub(r"[^a-z0-9_]", "_", pack_id.lower())
    return re.sub(r"__+", "_", slug)


class PackLibrary:
    """Content provider backed by built-in and on-disk dare packs."""

    def __init__(
        self,
        content_dir: Optional[str] = None,
        custom_dir: Optional[str] = None,
        seed: Optional[int] = None,
        include_builtin: bool = True,
    ):
        """Initialize the library.

        Args:
            content_dir: Directory of extra ``*.json`` pack files
            custom_dir: Directory holding ``custom_<pack>.json`` files
            seed: Base seed for shuffles (None for fresh randomness)
            include_builtin: Load the built-in catalog
        """
        self.content_dir = Path(content_dir) if content_dir else None
        self.custom_dir = Path(custom_dir) if custom_dir else None
        self.seed = seed
        self._draw_count = 0

        self.packs: Dict[str, PackInfo] = {}
        self._dares: Dict[str, List[str]] = {}

        if include_builtin:
            for name, info in catalog.PACKS.items():
                self.packs[name] = info
                self._dares[name] = list(catalog.DARES.get(name, []))

        if self.content_dir is not None:
            self._load_pack_files()

    def _load_pack_files(self):
        """Load every ``*.json`` pack file from the content directory."""
        if not self.content_dir.exists():
            raise FileNotFoundError(f"Pack directory not found: {self.content_dir}")

        loaded_files = 0
        for file in sorted(self.content_dir.glob("*.json")):
            try:
                with open(file, encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Failed to load pack file {file}: {e}")
                continue

            if isinstance(data, list):
                info = PackInfo(name=file.stem)
                dares = data
            elif isinstance(data, dict):
                info = PackInfo(
                    name=data.get("name", file.stem),
                    description=data.get("description", ""),
                    age_restricted=bool(data.get("age_restricted", False)),
                    premium=bool(data.get("premium", False)),
                )
                dares = data.get("dares", [])
            else:
                logger.warning(f"Ignoring pack file {file}: unexpected JSON type")
                continue

            self.packs[info.name] = info
            self._dares[info.name] = [str(d) for d in dares if str(d).strip()]
            loaded_files += 1

        logger.info(f"Loaded {loaded_files} pack file(s) from {self.content_dir}")

    def has_pack(self, pack_id: str) -> bool:
        return pack_id in self.packs

    def get_pack(self, pack_id: str) -> PackInfo:
        """Get pack metadata.

        Raises:
            ContentUnavailableError: If the pack is unknown
        """
        if pack_id not in self.packs:
            raise ContentUnavailableError(f"Unknown dare pack: {pack_id!r}")
        return self.packs[pack_id]

    def custom_file_path(self, pack_id: str) -> Optional[Path]:
        if self.custom_dir is None:
            return None
        return self.custom_dir / f"custom_{sanitize_pack_name(pack_id)}.json"

    def load_custom_dares(self, pack_id: str) -> List[str]:
        """Read the player-written dares for a pack.

        Entries may be plain strings or ``{"text": ...}`` objects. A missing
        or malformed file yields no custom dares.
        """
        path = self.custom_file_path(pack_id)
        if path is None or not path.exists():
            return []

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Error reading custom dares for {pack_id!r}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Custom dare file {path} is not a list, ignoring")
            return []

        dares = []
        for entry in data:
            text = entry.get("text") if isinstance(entry, dict) else entry
            if isinstance(text, str) and text.strip():
                dares.append(text)
        return dares

    def all_dares(self, pack_id: str, custom: Optional[List[str]] = None) -> List[str]:
        """Standard plus custom dares for a pack, duplicates removed."""
        self.get_pack(pack_id)
        merged = self._dares.get(pack_id, []) + list(custom or [])
        return list(dict.fromkeys(merged))

    async def draw(
        self, pack_id: str, count: int, exclude: AbstractSet[str] = frozenset()
    ) -> List[str]:
        """Draw up to ``count`` shuffled dares from a pack.

        Dares in ``exclude`` are skipped while anything else is left. If
        every dare is excluded the full pack is drawn from again, so a
        large table never runs dry. Short packs give short draws.

        Raises:
            ContentUnavailableError: If the pack is unknown
        """
        self.get_pack(pack_id)
        if count <= 0:
            return []

        custom = await asyncio.to_thread(self.load_custom_dares, pack_id)
        merged = self.all_dares(pack_id, custom)

        available = [d for d in merged if d not in exclude]
        if not available:
            available = merged

        seed = None if self.seed is None else self.seed + self._draw_count
        self._draw_count += 1

        drawn = shuffle_items(available, seed)[:count]
        logger.debug(
            f"Drew {len(drawn)}/{count} dares from {pack_id!r} "
            f"({len(custom)} custom, {len(exclude)} excluded)"
        )
        return drawn
