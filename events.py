"""
Change notification for content edits.

Each browsing context owns one ChangeSignal with two blinker channels:

* coarse  -- ``StoreChanged``: some key changed (key may be ``None`` after a clear)
* fine    -- ``ResourceChanged``: a specific resource changed, with action and id

Coarse notifications reach other contexts through the store; fine
notifications never leave the context that emitted them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from blinker import Namespace

logger = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    NAVIGATION = "navItems"
    SITE_CONFIG = "siteConfig"
    FOOTER_CONFIG = "footerConfig"
    SKILLS = "skills"
    PROJECTS = "projects"
    TESTIMONIALS = "testimonials"
    BLOG_POSTS = "blogPosts"
    SERVICES = "services"
    TIMELINE = "timeline"
    PAGE_CONTENTS = "pageContents"
    USERS = "portfolioUsers"
    MODEL_SETTINGS = "modelSettings"
    HERO_SETTINGS = "heroSettings"
    LEGAL_PAGES = "legalPagesContent"
    HIGHLIGHTS = "highlightsConfig"
    SECTION_SETTINGS = "sectionSettings"
    CONTACT_SETTINGS = "contactSettings"
    LOGOS = "logos"


class ChangeAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    REORDERED = "reordered"
    REPLACED = "replaced"


@dataclass(frozen=True)
class StoreChanged:
    key: Optional[str] = None


@dataclass(frozen=True)
class ResourceChanged:
    kind: ResourceKind
    action: ChangeAction
    record_id: Optional[str] = None

    @property
    def key(self) -> str:
        return self.kind.value


Change = Union[StoreChanged, ResourceChanged]
Handler = Callable[[Change], None]


class ChangeSignal:
    """Per-context publish/subscribe bus for content changes."""

    def __init__(self, name: str = "context"):
        self.name = name
        # one namespace per context so contexts never share channels
        self._signals = Namespace()
        self.coarse = self._signals.signal("store-changed")
        self.fine = self._signals.signal("resource-changed")

    def emit(self, change: Change) -> None:
        channel = self.fine if isinstance(change, ResourceChanged) else self.coarse
        channel.send(self, change=change)

    def subscribe(self, handler: Handler, fine: bool = False) -> Callable[[], None]:
        channel = self.fine if fine else self.coarse

        def receiver(sender, change):
            try:
                handler(change)
            except Exception:
                logger.exception("Change handler %r failed on %s", handler, change)

        channel.connect(receiver, weak=False)

        def unsubscribe():
            channel.disconnect(receiver)

        return unsubscribe

    def __repr__(self):
        return f"<ChangeSignal {self.name}>"
