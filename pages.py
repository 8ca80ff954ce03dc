"""
Static page generation for admin-created pages.
"""

import logging
import re
from html import escape
from pathlib import Path
from typing import Optional, Union

from errors import PageExistsError

logger = logging.getLogger(__name__)

BASIC = """<main class="container-custom py-16 min-h-[70vh]">
  <h1 class="heading-lg mb-8">{name}</h1>
  <div class="prose max-w-none">
    <p>This is the {lower} page. Edit this content to add your own.</p>
  </div>
</main>
"""

WITH_HERO = """<header class="py-16">
  <div class="container-custom">
    <h1 class="heading-lg mb-4">{name}</h1>
    <p class="text-xl max-w-3xl">This is the {lower} page. Add a description here.</p>
  </div>
</header>
<main class="container-custom py-16">
  <div class="prose max-w-none">
    <p>Edit this content to add your own.</p>
  </div>
</main>
"""

DEFAULT = """<main class="container-custom py-16 min-h-[70vh]">
  <h1 class="heading-lg mb-8">{name}</h1>
  <p>This is the {lower} page.</p>
</main>
"""

TEMPLATES = {"basic": BASIC, "withHero": WITH_HERO}

_SLUG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9/_-]*$")


def create_page(pages_dir: Union[str, Path], page_name: str, page_url: str, template: Optional[str] = None) -> Path:
    slug = page_url[1:] if page_url.startswith("/") else page_url
    if not _SLUG_RE.match(slug) or ".." in slug.split("/"):
        raise ValueError(f"Invalid page URL: {page_url!r}")

    page_dir = Path(pages_dir) / slug
    if page_dir.exists():
        raise PageExistsError(page_url)
    page_dir.mkdir(parents=True)

    body = TEMPLATES.get(template, DEFAULT).format(name=escape(page_name), lower=escape(page_name.lower()))
    page_file = page_dir / "index.html"
    page_file.write_text(body, encoding="utf-8")
    logger.info("Created page '%s' at %s", page_name, page_url)
    return page_file
