"""
Resource repositories over the keyed record store.

A repository owns exactly one store key. Reads fall back to bundled defaults
when the key is missing or unreadable; writes replace the whole document and
then notify the owning context.
"""

import copy
import json
import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

import defaults
from database import KeyedRecordStore
from errors import QuotaExceededError
from events import ChangeAction, ChangeSignal, ResourceChanged, ResourceKind, StoreChanged
from schemas import (
    AllSectionSettings,
    BlogPost,
    ContactSettings,
    FooterConfig,
    HeroSettings,
    HighlightsConfig,
    LegalPagesContent,
    Logo,
    ModelSettings,
    NavigationItem,
    PageContents,
    Project,
    Service,
    SiteConfig,
    Skill,
    Testimonial,
    TimelineItem,
    User,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _to_json(model: BaseModel) -> Any:
    return model.model_dump(by_alias=True, exclude_none=True)


class _KeyedRepository(Generic[T]):
    def __init__(
        self,
        store: KeyedRecordStore,
        signal: ChangeSignal,
        kind: ResourceKind,
        model: Type[T],
        default: Any,
        seed_defaults: bool = False,
    ):
        self.store = store
        self.signal = signal
        self.kind = kind
        self.model = model
        self.default = default
        self.seed_defaults = seed_defaults

    @property
    def key(self) -> str:
        return self.kind.value

    def _load_raw(self):
        """Return the decoded document, or None when absent or unparseable."""
        raw = self.store.get(self.key)
        if raw is None:
            if self.seed_defaults:
                try:
                    self.store.set(self.key, json.dumps(self.default, ensure_ascii=False), source=self.signal)
                except QuotaExceededError as e:
                    logger.warning("Could not seed defaults for %s: %s", self.key, e)
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            logger.error("Error parsing %s from store: %s", self.key, e)
            return None

    def _store(self, payload: Any, action: Optional[ChangeAction], record_id: Optional[str]) -> None:
        self.store.set(self.key, json.dumps(payload, ensure_ascii=False), source=self.signal)
        self.signal.emit(StoreChanged(key=self.key))
        if action is not None:
            self.signal.emit(ResourceChanged(self.kind, action, record_id))

    def __repr__(self):
        return f"<{type(self).__name__} {self.key}>"


class ResourceRepository(_KeyedRepository[T]):
    """Whole-collection access to a list of records under one key."""

    def __init__(self, *args, id_prefix: Optional[str] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.id_prefix = id_prefix

    def defaults(self) -> List[T]:
        return [self.model.model_validate(entry) for entry in copy.deepcopy(self.default)]

    def read_all(self) -> List[T]:
        data = self._load_raw()
        if data is None:
            return self.defaults()
        if not isinstance(data, list):
            logger.error("Expected a list under %s, found %s", self.key, type(data).__name__)
            return self.defaults()

        items = []
        for entry in data:
            try:
                items.append(self.model.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping invalid %s record: %s", self.key, e)
        return items

    def write_all(
        self,
        items: Sequence[Union[T, Dict[str, Any]]],
        action: Optional[ChangeAction] = None,
        record_id: Optional[str] = None,
    ) -> None:
        records = [item if isinstance(item, self.model) else self.model.model_validate(item) for item in items]
        self._store([_to_json(r) for r in records], action, record_id)

    def find(self, record_id: str) -> Optional[T]:
        for item in self.read_all():
            if item.id == record_id:
                return item
        return None


class DocumentRepository(_KeyedRepository[T]):
    """A single settings document under one key."""

    def defaults(self) -> T:
        return self.model.model_validate(copy.deepcopy(self.default))

    def read(self) -> T:
        data = self._load_raw()
        if data is None:
            return self.defaults()
        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            logger.error("Invalid %s document in store: %s", self.key, e)
            return self.defaults()

    def write(self, document: Union[T, Dict[str, Any]], action: Optional[ChangeAction] = None) -> None:
        if not isinstance(document, self.model):
            document = self.model.model_validate(document)
        self._store(_to_json(document), action, None)


class Repositories:
    """
    Every repository of one browsing context, built once and passed around.

    Contexts sharing a store see each other's writes through coarse signals;
    each context keeps its own ChangeSignal.
    """

    def __init__(self, store: KeyedRecordStore, signal: Optional[ChangeSignal] = None):
        self.store = store
        self.signal = signal or ChangeSignal()
        store.attach(self.signal)

        def collection(kind, model, default, prefix, seed=False):
            return ResourceRepository(store, self.signal, kind, model, default, seed_defaults=seed, id_prefix=prefix)

        def document(kind, model, default, seed=False):
            return DocumentRepository(store, self.signal, kind, model, default, seed_defaults=seed)

        self.navigation = collection(ResourceKind.NAVIGATION, NavigationItem, defaults.NAV_ITEMS, "nav")
        self.skills = collection(ResourceKind.SKILLS, Skill, defaults.SKILLS, "skill", seed=True)
        self.projects = collection(ResourceKind.PROJECTS, Project, defaults.PROJECTS, "project")
        self.testimonials = collection(ResourceKind.TESTIMONIALS, Testimonial, defaults.TESTIMONIALS, "testimonial")
        self.blog_posts = collection(ResourceKind.BLOG_POSTS, BlogPost, defaults.BLOG_POSTS, "post", seed=True)
        self.services = collection(ResourceKind.SERVICES, Service, defaults.SERVICES, None, seed=True)
        self.timeline = collection(ResourceKind.TIMELINE, TimelineItem, defaults.TIMELINE, "timeline", seed=True)
        self.users = collection(ResourceKind.USERS, User, defaults.USERS, "user", seed=True)
        self.logos = collection(ResourceKind.LOGOS, Logo, defaults.LOGOS, "logo", seed=True)

        self.site_config = document(ResourceKind.SITE_CONFIG, SiteConfig, defaults.SITE_CONFIG)
        self.footer_config = document(ResourceKind.FOOTER_CONFIG, FooterConfig, defaults.FOOTER_CONFIG)
        self.hero_settings = document(ResourceKind.HERO_SETTINGS, HeroSettings, defaults.HERO_SETTINGS)
        self.model_settings = document(ResourceKind.MODEL_SETTINGS, ModelSettings, defaults.MODEL_SETTINGS)
        self.legal_pages = document(ResourceKind.LEGAL_PAGES, LegalPagesContent, defaults.LEGAL_PAGES)
        self.page_contents = document(ResourceKind.PAGE_CONTENTS, PageContents, defaults.PAGE_CONTENTS)
        self.highlights = document(ResourceKind.HIGHLIGHTS, HighlightsConfig, defaults.HIGHLIGHTS_CONFIG, seed=True)
        self.section_settings = document(ResourceKind.SECTION_SETTINGS, AllSectionSettings, defaults.SECTION_SETTINGS)
        self.contact_settings = document(ResourceKind.CONTACT_SETTINGS, ContactSettings, defaults.CONTACT_SETTINGS)

        self.by_kind: Dict[ResourceKind, _KeyedRepository] = {
            repo.kind: repo
            for repo in vars(self).values()
            if isinstance(repo, _KeyedRepository)
        }

    def __getitem__(self, kind: ResourceKind) -> _KeyedRepository:
        return self.by_kind[ResourceKind(kind)]

    def close(self) -> None:
        self.store.detach(self.signal)
