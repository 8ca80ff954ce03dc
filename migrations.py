"""
Versioned, run-once migrations of the stored content layout.

The applied version lives in the store under ``schemaVersion``.
"""

import json
import logging
from typing import Callable, List, Tuple

import defaults
from database import KeyedRecordStore
from events import ResourceKind

logger = logging.getLogger(__name__)

VERSION_KEY = "schemaVersion"
LEGACY_TIMELINE_KEYS = ("timelineData", "timeline", "timelineItems")
LEGACY_HIGHLIGHTS_KEY = "highlightStats"


def _consolidate_timeline(store: KeyedRecordStore) -> None:
    """Keep the first non-empty timeline list under the canonical key."""
    chosen = None
    for key in LEGACY_TIMELINE_KEYS:
        raw = store.get(key)
        if raw is None:
            continue
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.error("Error parsing %s during migration: %s", key, e)
            continue
        if isinstance(data, list) and data:
            chosen = data
            break

    if chosen is not None:
        store.set(ResourceKind.TIMELINE.value, json.dumps(chosen, ensure_ascii=False))
    for key in LEGACY_TIMELINE_KEYS:
        if key != ResourceKind.TIMELINE.value:
            store.remove(key)


def _wrap_highlight_stats(store: KeyedRecordStore) -> None:
    """Older sites kept a bare stats list under ``highlightStats``."""
    raw = store.get(LEGACY_HIGHLIGHTS_KEY)
    if raw is None:
        return
    if store.get(ResourceKind.HIGHLIGHTS.value) is None:
        try:
            stats = json.loads(raw)
        except ValueError as e:
            logger.error("Error parsing %s during migration: %s", LEGACY_HIGHLIGHTS_KEY, e)
            stats = None
        if isinstance(stats, list):
            config = dict(defaults.HIGHLIGHTS_CONFIG, stats=stats)
            store.set(ResourceKind.HIGHLIGHTS.value, json.dumps(config, ensure_ascii=False))
    store.remove(LEGACY_HIGHLIGHTS_KEY)


MIGRATIONS: List[Tuple[int, Callable[[KeyedRecordStore], None]]] = [
    (1, _consolidate_timeline),
    (2, _wrap_highlight_stats),
]


def current_version(store: KeyedRecordStore) -> int:
    raw = store.get(VERSION_KEY)
    try:
        return int(raw) if raw is not None else 0
    except ValueError:
        logger.error("Unreadable %s %r; assuming 0", VERSION_KEY, raw)
        return 0


def migrate(store: KeyedRecordStore) -> int:
    version = current_version(store)
    for target, step in MIGRATIONS:
        if target <= version:
            continue
        logger.info("Applying content migration %d (%s)", target, step.__name__)
        step(store)
        store.set(VERSION_KEY, str(target))
        version = target
    return version
