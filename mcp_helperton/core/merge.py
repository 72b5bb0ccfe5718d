"""Merging the active and disabled stores into one ordered server list."""

import logging
import unicodedata
from typing import Any, Dict, List, Tuple

from ..models.server import ServerEntry

logger = logging.getLogger(__name__)


# Root collation order of ASCII punctuation and symbols; all sort before digits
PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def _primary_weight(ch: str) -> Tuple[int, Any]:
    if ch.isspace():
        return 0, ord(ch)
    if ch in PUNCTUATION_ORDER:
        return 1, PUNCTUATION_ORDER.index(ch)
    if ch.isdigit():
        return 3, unicodedata.digit(ch, 0)
    if not ch.isalnum():
        return 2, ord(ch)
    return 4, ch


def locale_sort_key(name: str) -> Tuple[Tuple[Tuple[int, Any], ...], str, str]:
    """Sort key approximating a locale-aware collation.

    Names compare first without accents or case, then with accents, then with
    lowercase ordered before uppercase, so ``a < A < b < B`` and
    ``cafe < Cafe < café``. Punctuation and symbols sort before digits and
    digits before letters, so ``a_ < a- < a0 < ab``.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple(_primary_weight(ch) for ch in base.casefold())
    return primary, name.casefold(), name.swapcase()


def merge_servers(
    active: Dict[str, Any], disabled: Dict[str, Any]
) -> List[ServerEntry]:
    """Combine enabled and disabled servers into a single sorted list.

    Every active server becomes an enabled entry. Disabled servers are added
    unless a server with the same name is active, in which case the active
    configuration wins and the disabled copy is dropped.

    Args:
        active: Server name to config mapping from the Claude config
        disabled: Server name to config mapping from helpy storage

    Returns:
        Entries sorted by name
    """
    servers = [
        ServerEntry(name=name, enabled=True, config=config)
        for name, config in active.items()
    ]

    for name, config in disabled.items():
        if name in active:
            logger.debug(f"Server '{name}' is both enabled and disabled; keeping the enabled copy")
            continue
        servers.append(ServerEntry(name=name, enabled=False, config=config))

    servers.sort(key=lambda server: locale_sort_key(server.name))
    return servers
