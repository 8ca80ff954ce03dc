"""
Admin edit operations.

Every operation reads the whole collection, changes it in memory and writes
the whole collection back, so concurrent editors in two contexts resolve as
last write wins.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Union

from errors import DuplicateRecordError, RecordInUseError, RecordNotFoundError
from events import ChangeAction, ResourceKind
from repositories import DocumentRepository, ResourceRepository
from schemas import PageContent, PageContents

logger = logging.getLogger(__name__)

Direction = Literal["up", "down"]


def new_id(prefix=None) -> str:
    millis = str(int(time.time() * 1000))
    return f"{prefix}-{millis}" if prefix else millis


def _index_of(items: List[Any], record_id: str) -> int:
    for index, item in enumerate(items):
        if item.id == record_id:
            return index
    return -1


def _check_active_hrefs(repo: ResourceRepository, items: List[Any]) -> None:
    if repo.kind is not ResourceKind.NAVIGATION:
        return
    seen = set()
    for item in items:
        if item.is_active and item.href in seen:
            raise DuplicateRecordError(repo.key, item.href)
        if item.is_active:
            seen.add(item.href)


def create(repo: ResourceRepository, record: Union[Dict[str, Any], Any]):
    data = record.model_dump() if hasattr(record, "model_dump") else dict(record)
    if not data.get("id"):
        data["id"] = new_id(repo.id_prefix)
    item = repo.model.model_validate(data)

    items = repo.read_all()
    if _index_of(items, item.id) != -1:
        raise DuplicateRecordError(repo.key, item.id)
    items.append(item)
    _check_active_hrefs(repo, items)
    repo.write_all(items, ChangeAction.CREATED, item.id)
    logger.info("Created %s record %s", repo.key, item.id)
    return item


def update(repo: ResourceRepository, record_id: str, changes: Dict[str, Any]):
    items = repo.read_all()
    index = _index_of(items, record_id)
    if index == -1:
        raise RecordNotFoundError(repo.key, record_id)

    # changes may arrive with stored (camelCase) names
    names = {field.alias or name: name for name, field in repo.model.model_fields.items()}
    merged = items[index].model_dump()
    merged.update({names.get(k, k): v for k, v in changes.items() if k != "id"})
    items[index] = repo.model.model_validate(merged)
    _check_active_hrefs(repo, items)
    repo.write_all(items, ChangeAction.UPDATED, record_id)
    return items[index]


def delete(repo: ResourceRepository, record_id: str) -> None:
    items = repo.read_all()
    remaining = [item for item in items if item.id != record_id]
    if len(remaining) == len(items):
        raise RecordNotFoundError(repo.key, record_id)
    # the logo currently shown cannot be removed
    if repo.kind is ResourceKind.LOGOS and items[_index_of(items, record_id)].active:
        raise RecordInUseError(repo.key, record_id)
    repo.write_all(remaining, ChangeAction.DELETED, record_id)
    logger.info("Deleted %s record %s", repo.key, record_id)


def toggle_featured(repo: ResourceRepository, record_id: str):
    item = repo.find(record_id)
    if item is None:
        raise RecordNotFoundError(repo.key, record_id)
    return update(repo, record_id, {"featured": not item.featured})


def set_active_logo(repo: ResourceRepository, logo_id: str):
    """Make one logo the active one for its type (frontend or backend)."""
    items = repo.read_all()
    index = _index_of(items, logo_id)
    if index == -1:
        raise RecordNotFoundError(repo.key, logo_id)

    logo_type = items[index].type
    for item in items:
        if item.type == logo_type:
            item.active = item.id == logo_id
    repo.write_all(items, ChangeAction.UPDATED, logo_id)
    logger.info("Activated %s logo %s", logo_type, logo_id)
    return items[index]


def move(repo: ResourceRepository, record_id: str, direction: Direction) -> bool:
    """Swap a record with its neighbour. Returns False when nothing moved."""
    items = repo.read_all()
    index = _index_of(items, record_id)
    if index == -1:
        raise RecordNotFoundError(repo.key, record_id)

    target = index - 1 if direction == "up" else index + 1
    if target < 0 or target >= len(items):
        return False
    items[index], items[target] = items[target], items[index]
    repo.write_all(items, ChangeAction.REORDERED, record_id)
    return True


def move_up(repo: ResourceRepository, record_id: str) -> bool:
    return move(repo, record_id, "up")


def move_down(repo: ResourceRepository, record_id: str) -> bool:
    return move(repo, record_id, "down")


def save_page_content(repo: DocumentRepository, href: str, content: str) -> PageContent:
    slug = href[1:] if href.startswith("/") else href
    pages = dict(repo.read().root)
    pages[slug] = PageContent(content=content, last_updated=datetime.now(timezone.utc).isoformat())
    repo.write(PageContents(pages), ChangeAction.UPDATED)
    return pages[slug]
