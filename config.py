"""
Runtime configuration for the Portfolio CMS.

Values come from the environment (optionally a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =========
# Security
# =========
SECRET_KEY = os.getenv("JWT_SECRET", "super-secret-key-change")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 12

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@portfolio.dev")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")

# ===========
# Persistence
# ===========
# When DATABASE_URL is set the content store lives in MongoDB, otherwise in a
# JSON file (or memory when CONTENT_STORE_PATH is empty).
DATABASE_URL = os.getenv("DATABASE_URL")
DATABASE_NAME = os.getenv("DATABASE_NAME", "portfolio")
CONTENT_STORE_PATH = os.getenv("CONTENT_STORE_PATH", "data/content.json")
STORE_QUOTA_BYTES = int(os.getenv("STORE_QUOTA_BYTES", str(5 * 1024 * 1024)))

# =====
# Files
# =====
PUBLIC_DIR = os.getenv("PUBLIC_DIR", "public")
PAGES_DIR = os.getenv("PAGES_DIR", "pages")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
