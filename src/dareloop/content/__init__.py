"""Dare content for dareloop.

The game session only needs a ContentProvider and an EntitlementChecker;
PackLibrary and Entitlements are the stock implementations.
"""

from .base import ContentProvider, EntitlementChecker, PackInfo, shuffle_items
from .catalog import PACKS, DARES, get_pack, list_packs
from .entitlements import Entitlements
from .pack_library import PackLibrary, sanitize_pack_name

__all__ = [
    "ContentProvider",
    "EntitlementChecker",
    "PackInfo",
    "shuffle_items",
    "PACKS",
    "DARES",
    "get_pack",
    "list_packs",
    "Entitlements",
    "PackLibrary",
    "sanitize_pack_name",
]
