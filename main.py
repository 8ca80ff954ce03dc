import logging
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import Body, Depends, FastAPI, File, Form, Header, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

import editors
from config import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    ADMIN_PASSWORD_HASH,
    ALGORITHM,
    LOG_LEVEL,
    PAGES_DIR,
    PUBLIC_DIR,
    SECRET_KEY,
)
from database import KeyedRecordStore, open_store
from errors import (
    ContentError,
    DuplicateRecordError,
    InvalidUploadError,
    PageExistsError,
    PermissionDeniedError,
    QuotaExceededError,
    RecordInUseError,
    RecordNotFoundError,
)
from events import ChangeAction, ChangeSignal, ResourceKind
from migrations import migrate
from pages import create_page
from repositories import DocumentRepository, Repositories
from schemas import Role, User
from uploads import save_upload
from users import KIND_PERMISSIONS, bind_identity, has_permission, resolve_identity

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# =====================
# Auth / Security Setup
# =====================
# Use pbkdf2_sha256 to avoid external bcrypt dependency issues
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Support providing a precomputed hash; otherwise hash the provided password
PASSWORD_HASH = ADMIN_PASSWORD_HASH or pwd_context.hash(ADMIN_PASSWORD)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class LoginRequest(BaseModel):
    email: str
    password: str


class PageRequest(BaseModel):
    pageName: Optional[str] = None
    pageUrl: Optional[str] = None
    pageTemplate: Optional[str] = None


class BindUserRequest(BaseModel):
    email: str
    name: str
    role: Role
    image: Optional[str] = None


# ==================
# FastAPI app config
# ==================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Tests and embedding code may configure a store before startup
    if getattr(app.state, "repos", None) is None:
        configure(open_store())
    logger.info("Portfolio CMS API ready")
    yield
    app.state.repos.close()
    app.state.repos = None


app = FastAPI(title="Portfolio CMS API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def configure(store: KeyedRecordStore, public_dir=PUBLIC_DIR, pages_dir=PAGES_DIR) -> Repositories:
    """Bind the app to a content store; runs pending migrations first."""
    old = getattr(app.state, "repos", None)
    if old is not None:
        old.close()
    migrate(store)
    app.state.repos = Repositories(store, ChangeSignal("api"))
    app.state.public_dir = Path(public_dir)
    app.state.pages_dir = Path(pages_dir)
    return app.state.repos


ERROR_STATUS = {
    RecordNotFoundError: 404,
    DuplicateRecordError: 409,
    PageExistsError: 409,
    PermissionDeniedError: 403,
    InvalidUploadError: 400,
    QuotaExceededError: 507,
    RecordInUseError: 409,
}


@app.exception_handler(ContentError)
def content_error_handler(request: Request, exc: ContentError):
    status = ERROR_STATUS.get(type(exc), 500)
    if status == 500:
        logger.error("Unhandled content error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status, content={"error": str(exc)})


@app.exception_handler(ValidationError)
def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(include_url=False, include_context=False, include_input=False)},
    )


# =========
# Utilities
# =========
def get_repos(request: Request) -> Repositories:
    return request.app.state.repos


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def get_current_user(authorization: Optional[str] = Header(None), repos: Repositories = Depends(get_repos)) -> User:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated")
    token = authorization.split(" ", 1)[1]
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    user = resolve_identity(repos.users, payload.get("sub"))
    if user is None:
        raise HTTPException(status_code=403, detail="Forbidden")
    return user


def require(permission: str):
    def dependency(user: User = Depends(get_current_user)) -> User:
        if not has_permission(user, permission):
            raise PermissionDeniedError(permission, user.email)
        return user

    return dependency


def dump(items) -> List[Dict[str, Any]]:
    return [item.to_json_dict() for item in items]


def content_repo(repos: Repositories, kind: str):
    try:
        resolved = ResourceKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown content kind '{kind}'")
    if resolved is ResourceKind.USERS:
        raise HTTPException(status_code=404, detail="Users are managed under /api/users")
    return resolved, repos[resolved]


# ======
# Routes
# ======
@app.get("/")
def root():
    return {"status": "ok", "service": "portfolio-cms"}


# Auth
@app.post("/api/auth/login", response_model=Token)
def login(data: LoginRequest):
    """
    Password login for the configured admin only.

    Other users sign in through the external identity provider, which issues
    tokens signed with the same JWT_SECRET; their email ("sub") must already
    be bound to a role via POST /api/users.
    """
    if data.email.lower() != ADMIN_EMAIL.lower() or not verify_password(data.password, PASSWORD_HASH):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_access_token({"sub": ADMIN_EMAIL})
    return Token(access_token=token)


# Generic content documents
@app.get("/api/content/{kind}")
def read_content(kind: str, repos: Repositories = Depends(get_repos)):
    _, repo = content_repo(repos, kind)
    if isinstance(repo, DocumentRepository):
        return repo.read().to_json_dict()
    return dump(repo.read_all())


@app.put("/api/content/{kind}")
def replace_content(
    kind: str,
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repos),
    user: User = Depends(get_current_user),
):
    resolved, repo = content_repo(repos, kind)
    permission = KIND_PERMISSIONS[resolved]
    if not has_permission(user, permission):
        raise PermissionDeniedError(permission, user.email)

    if isinstance(repo, DocumentRepository):
        repo.write(payload, ChangeAction.REPLACED)
        return repo.read().to_json_dict()
    if not isinstance(payload, list):
        raise HTTPException(status_code=400, detail=f"'{kind}' expects a list of records")
    repo.write_all(payload, ChangeAction.REPLACED)
    return dump(repo.read_all())


# Projects
@app.get("/api/projects")
def list_projects(repos: Repositories = Depends(get_repos)):
    return {"projects": dump(repos.projects.read_all())}


@app.post("/api/projects")
def create_project(
    project: Dict[str, Any] = Body(...),
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageProjects")),
):
    if not project.get("title") or not project.get("description") or not project.get("technologies"):
        raise HTTPException(status_code=400, detail="Missing required fields")
    created = editors.create(repos.projects, project)
    return {"success": True, "project": created.to_json_dict(), "projects": dump(repos.projects.read_all())}


# Timeline
@app.get("/api/timeline")
def list_timeline(repos: Repositories = Depends(get_repos)):
    return {"timeline": dump(repos.timeline.read_all())}


# Skills
@app.get("/api/skills")
def list_skills(repos: Repositories = Depends(get_repos)):
    return {"skills": dump(repos.skills.read_all())}


@app.post("/api/skills")
def create_skill(
    skill: Dict[str, Any] = Body(...),
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageSkills")),
):
    return {"skill": editors.create(repos.skills, skill).to_json_dict()}


@app.get("/api/skills/{skill_id}")
def get_skill(skill_id: str, repos: Repositories = Depends(get_repos)):
    skill = repos.skills.find(skill_id)
    if skill is None:
        raise HTTPException(status_code=404, detail="Not found")
    return {"skill": skill.to_json_dict()}


@app.put("/api/skills/{skill_id}")
def update_skill(
    skill_id: str,
    changes: Dict[str, Any] = Body(...),
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageSkills")),
):
    return {"skill": editors.update(repos.skills, skill_id, changes).to_json_dict()}


@app.delete("/api/skills/{skill_id}")
def delete_skill(
    skill_id: str,
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageSkills")),
):
    editors.delete(repos.skills, skill_id)
    return {"deleted": skill_id}


# Logos
@app.get("/api/logos")
def list_logos(repos: Repositories = Depends(get_repos)):
    return {"logos": dump(repos.logos.read_all())}


@app.post("/api/logos")
def add_logo(
    logo: Dict[str, Any] = Body(...),
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageLogos")),
):
    return {"logo": editors.create(repos.logos, logo).to_json_dict()}


@app.post("/api/logos/{logo_id}/activate")
def activate_logo(
    logo_id: str,
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageLogos")),
):
    return {"logo": editors.set_active_logo(repos.logos, logo_id).to_json_dict()}


@app.delete("/api/logos/{logo_id}")
def delete_logo(
    logo_id: str,
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManageLogos")),
):
    editors.delete(repos.logos, logo_id)
    return {"deleted": logo_id}


# Pages
@app.get("/api/pages")
def pages_status():
    return {"message": "Page creation API is working"}


@app.post("/api/pages")
def new_page(
    data: PageRequest,
    request: Request,
    repos: Repositories = Depends(get_repos),
    _: User = Depends(require("canManagePages")),
):
    if not data.pageName or not data.pageUrl:
        raise HTTPException(status_code=400, detail="Page name and URL are required")
    try:
        create_page(request.app.state.pages_dir, data.pageName, data.pageUrl, data.pageTemplate)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    editors.save_page_content(repos.page_contents, data.pageUrl, "")
    return {
        "success": True,
        "message": f"Page '{data.pageName}' created successfully at {data.pageUrl}",
        "pageUrl": data.pageUrl,
    }


# Uploads
@app.get("/api/upload")
def upload_status():
    return {"message": "Upload API is working"}


@app.post("/api/upload")
def upload(
    request: Request,
    file: Optional[UploadFile] = File(None),
    fileType: Optional[str] = Form(None),
    type_: Optional[str] = Form(None, alias="type"),
    _: User = Depends(get_current_user),
):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    relative_path = save_upload(request.app.state.public_dir, fileType or type_ or "", file.filename, file.file.read())
    return {"success": True, "filePath": relative_path, "originalName": file.filename}


# Users
@app.get("/api/users")
def list_users(repos: Repositories = Depends(get_repos), _: User = Depends(require("canManageUsers"))):
    return {"users": dump(repos.users.read_all())}


@app.post("/api/users")
def add_user(
    data: BindUserRequest,
    repos: Repositories = Depends(get_repos),
    admin: User = Depends(require("canManageUsers")),
):
    user = bind_identity(repos.users, data.email, data.name, data.role, admin, image=data.image)
    return {"user": user.to_json_dict()}
