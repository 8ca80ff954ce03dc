"""
Roles, permissions and identity binding.

An authenticated identity only gets a role once it has been bound to a user
record by someone allowed to manage users; unknown identities get nothing.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from errors import DuplicateRecordError, PermissionDeniedError
from events import ChangeAction, ResourceKind
from repositories import ResourceRepository
from schemas import Role, User

logger = logging.getLogger(__name__)

PERMISSIONS = (
    "canManageUsers",
    "canManageSiteSettings",
    "canManageNavigation",
    "canManageFooter",
    "canManageLegalPages",
    "canManageLogos",
    "canManage3DModels",
    "canManageHero",
    "canManageHighlights",
    "canManageProjects",
    "canManageSkills",
    "canManageTimeline",
    "canManageServices",
    "canManageTestimonials",
    "canManageContact",
    "canManagePages",
    "canManageBlog",
)

ROLE_PERMISSIONS = {
    "admin": {p: True for p in PERMISSIONS},
    "moderator": {p: p in ("canManageProjects", "canManageContact") for p in PERMISSIONS},
    "content_writer": {p: p in ("canManageContact", "canManagePages", "canManageBlog") for p in PERMISSIONS},
}


def has_permission(user: Optional[User], permission: str) -> bool:
    if user is None:
        return False
    return ROLE_PERMISSIONS.get(user.role, {}).get(permission, False)


def get_user_by_email(users: ResourceRepository, email: str) -> Optional[User]:
    email = email.lower()
    for user in users.read_all():
        if user.email.lower() == email:
            return user
    return None


def resolve_identity(users: ResourceRepository, email: Optional[str]) -> Optional[User]:
    if not email:
        return None
    user = get_user_by_email(users, email)
    if user is None:
        logger.warning("Authenticated identity %s has no bound user; no role granted", email)
    return user


def bind_identity(
    users: ResourceRepository,
    email: str,
    name: str,
    role: Role,
    granted_by: Optional[User],
    image: Optional[str] = None,
) -> User:
    """Bind an external identity to a role. Only user managers may do this."""
    if not has_permission(granted_by, "canManageUsers"):
        raise PermissionDeniedError("canManageUsers", granted_by.email if granted_by else None)

    existing = users.read_all()
    if any(u.email.lower() == email.lower() for u in existing):
        raise DuplicateRecordError(users.key, email)

    now = datetime.now(timezone.utc).isoformat()
    user = User(
        id=f"user-{int(datetime.now(timezone.utc).timestamp() * 1000)}",
        name=name,
        email=email,
        image=image,
        role=role,
        created_at=now,
        updated_at=now,
    )
    existing.append(user)
    users.write_all(existing, ChangeAction.CREATED, user.id)
    logger.info("Identity %s bound to role %s by %s", email, role, granted_by.email)
    return user


# Permission needed to edit each stored resource
KIND_PERMISSIONS = {
    ResourceKind.NAVIGATION: "canManageNavigation",
    ResourceKind.SITE_CONFIG: "canManageSiteSettings",
    ResourceKind.FOOTER_CONFIG: "canManageFooter",
    ResourceKind.SKILLS: "canManageSkills",
    ResourceKind.PROJECTS: "canManageProjects",
    ResourceKind.TESTIMONIALS: "canManageTestimonials",
    ResourceKind.BLOG_POSTS: "canManageBlog",
    ResourceKind.SERVICES: "canManageServices",
    ResourceKind.TIMELINE: "canManageTimeline",
    ResourceKind.PAGE_CONTENTS: "canManagePages",
    ResourceKind.USERS: "canManageUsers",
    ResourceKind.MODEL_SETTINGS: "canManage3DModels",
    ResourceKind.HERO_SETTINGS: "canManageHero",
    ResourceKind.LEGAL_PAGES: "canManageLegalPages",
    ResourceKind.HIGHLIGHTS: "canManageHighlights",
    ResourceKind.SECTION_SETTINGS: "canManageSiteSettings",
    ResourceKind.CONTACT_SETTINGS: "canManageContact",
    ResourceKind.LOGOS: "canManageLogos",
}
