import os
from functools import lru_cache
from pathlib import Path
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status

from src.adapters.auth.crypto import CookieSigner, PasslibHasher
from src.adapters.auth.session_store import InMemorySessionStore
from src.adapters.dev_email import DevEmailAdapter
from src.adapters.fs.filestore import FileSystemStore
from src.adapters.s3_storage import S3Store
from src.adapters.ses_email import SESEmailAdapter
from src.adapters.sqlite.repos import (
    SQLiteBlogRepo,
    SQLiteBusinessRepo,
    SQLiteCatalogRepo,
    SQLiteEnquiryRepo,
    SQLiteEventRepo,
    SQLiteReceiptRepo,
    SQLiteResetRequestRepo,
    SQLiteServiceRepo,
    SQLiteTestimonialRepo,
    SQLiteUserRepo,
)
from src.components.auth import AuthService
from src.components.blog import BlogService
from src.components.business import BusinessService
from src.components.catalog import CatalogService
from src.components.enquiries import EnquiryService
from src.components.events import EventService
from src.components.receipts import ReceiptLayout, ReceiptNumbering, ReceiptService
from src.components.uploads import UploadRules, UploadService
from src.components.users import UserAdminService
from src.config import SiteConfig, load_config
from src.core.ports.email import EmailAddress, EmailPort
from src.core.ports.storage import UploadStorePort
from src.core.services.mailer import EmailTemplates, Mailer
from src.domain.entities import User


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("CHAMBER_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "chamber.db")
        self.uploads_dir = self.data_dir / "uploads"
        self.config_path = Path(
            os.environ.get("CHAMBER_CONFIG", str(self.base_dir / "chamber.yaml"))
        )
        self.secret_key = os.environ.get("CHAMBER_SECRET_KEY", "dev-secret-unsafe")
        origins = os.environ.get("CHAMBER_CORS_ORIGINS", "http://localhost:3000")
        self.cors_origins = [o.strip() for o in origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Site config ---
@lru_cache
def get_site_config(settings: Settings = Depends(get_settings)) -> SiteConfig:
    return load_config(settings.config_path)


# --- Repos ---
def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


def get_reset_request_repo(
    settings: Settings = Depends(get_settings),
) -> SQLiteResetRequestRepo:
    return SQLiteResetRequestRepo(settings.db_path)


def get_catalog_repo(settings: Settings = Depends(get_settings)) -> SQLiteCatalogRepo:
    return SQLiteCatalogRepo(settings.db_path)


def get_business_repo(settings: Settings = Depends(get_settings)) -> SQLiteBusinessRepo:
    return SQLiteBusinessRepo(settings.db_path)


def get_service_repo(settings: Settings = Depends(get_settings)) -> SQLiteServiceRepo:
    return SQLiteServiceRepo(settings.db_path)


def get_testimonial_repo(
    settings: Settings = Depends(get_settings),
) -> SQLiteTestimonialRepo:
    return SQLiteTestimonialRepo(settings.db_path)


def get_enquiry_repo(settings: Settings = Depends(get_settings)) -> SQLiteEnquiryRepo:
    return SQLiteEnquiryRepo(settings.db_path)


def get_event_repo(settings: Settings = Depends(get_settings)) -> SQLiteEventRepo:
    return SQLiteEventRepo(settings.db_path)


def get_blog_repo(settings: Settings = Depends(get_settings)) -> SQLiteBlogRepo:
    return SQLiteBlogRepo(settings.db_path)


def get_receipt_repo(settings: Settings = Depends(get_settings)) -> SQLiteReceiptRepo:
    return SQLiteReceiptRepo(settings.db_path)


# --- Adapters ---

# Session store singleton for auth component
_session_store_instance: InMemorySessionStore | None = None


def get_session_store(config: SiteConfig = Depends(get_site_config)) -> InMemorySessionStore:
    """Get session store singleton."""
    global _session_store_instance
    if _session_store_instance is None:
        _session_store_instance = InMemorySessionStore(
            ttl_minutes=config.auth.sessions.ttl_minutes
        )
    return _session_store_instance


def get_cookie_signer(settings: Settings = Depends(get_settings)) -> CookieSigner:
    return CookieSigner(settings.secret_key)


# Dev adapter is shared so logged emails survive across requests
_dev_email_instance: DevEmailAdapter | None = None


def get_email_adapter(config: SiteConfig = Depends(get_site_config)) -> EmailPort:
    global _dev_email_instance
    sender = EmailAddress(config.email.from_mail, config.email.from_name)
    if config.email.backend == "ses":
        return SESEmailAdapter(default_sender=sender, region=config.email.region)
    if _dev_email_instance is None:
        _dev_email_instance = DevEmailAdapter()
    return _dev_email_instance


def get_mailer(
    config: SiteConfig = Depends(get_site_config),
    adapter: EmailPort = Depends(get_email_adapter),
) -> Mailer:
    return Mailer(
        port=adapter,
        templates=EmailTemplates(site_name=config.site.name, base_url=config.site.base_url),
        sender=EmailAddress(config.email.from_mail, config.email.from_name),
    )


def get_upload_store(
    settings: Settings = Depends(get_settings),
    config: SiteConfig = Depends(get_site_config),
) -> UploadStorePort:
    uploads = config.uploads
    if uploads.backend == "s3" and uploads.bucket:
        return S3Store(
            bucket=uploads.bucket,
            region=uploads.region,
            public_base_url=uploads.public_base_url,
        )
    return FileSystemStore(base_path=str(settings.uploads_dir))


# --- Component Services ---
def get_auth_service(
    config: SiteConfig = Depends(get_site_config),
    users: SQLiteUserRepo = Depends(get_user_repo),
    reset_requests: SQLiteResetRequestRepo = Depends(get_reset_request_repo),
    sessions: InMemorySessionStore = Depends(get_session_store),
    mailer: Mailer = Depends(get_mailer),
) -> AuthService:
    return AuthService(
        users=users,
        reset_requests=reset_requests,
        hasher=PasslibHasher(),
        sessions=sessions,
        mailer=mailer,
        base_url=config.site.base_url,
        reset_ttl_minutes=config.auth.password_reset.ttl_minutes,
    )


def get_catalog_service(repo: SQLiteCatalogRepo = Depends(get_catalog_repo)) -> CatalogService:
    return CatalogService(repo=repo)


def get_business_service(
    businesses: SQLiteBusinessRepo = Depends(get_business_repo),
    services: SQLiteServiceRepo = Depends(get_service_repo),
    testimonials: SQLiteTestimonialRepo = Depends(get_testimonial_repo),
    catalog: SQLiteCatalogRepo = Depends(get_catalog_repo),
    users: SQLiteUserRepo = Depends(get_user_repo),
    mailer: Mailer = Depends(get_mailer),
) -> BusinessService:
    return BusinessService(
        businesses=businesses,
        services=services,
        testimonials=testimonials,
        types=catalog,
        users=users,
        mailer=mailer,
    )


def get_enquiry_service(
    repo: SQLiteEnquiryRepo = Depends(get_enquiry_repo),
    businesses: SQLiteBusinessRepo = Depends(get_business_repo),
    catalog: SQLiteCatalogRepo = Depends(get_catalog_repo),
    users: SQLiteUserRepo = Depends(get_user_repo),
    mailer: Mailer = Depends(get_mailer),
) -> EnquiryService:
    return EnquiryService(
        repo=repo, businesses=businesses, types=catalog, users=users, mailer=mailer
    )


def get_event_service(
    repo: SQLiteEventRepo = Depends(get_event_repo),
    catalog: SQLiteCatalogRepo = Depends(get_catalog_repo),
    mailer: Mailer = Depends(get_mailer),
) -> EventService:
    return EventService(repo=repo, categories=catalog, mailer=mailer)


def get_blog_service(repo: SQLiteBlogRepo = Depends(get_blog_repo)) -> BlogService:
    return BlogService(repo=repo)


def get_receipt_service(
    config: SiteConfig = Depends(get_site_config),
    repo: SQLiteReceiptRepo = Depends(get_receipt_repo),
) -> ReceiptService:
    numbering = ReceiptNumbering(
        prefix=config.receipts.prefix, width=config.receipts.number_width
    )
    return ReceiptService(repo=repo, numbering=numbering)


def get_receipt_layout(config: SiteConfig = Depends(get_site_config)) -> ReceiptLayout:
    receipts = config.receipts
    return ReceiptLayout(
        issuer=receipts.issuer,
        address_lines=tuple(receipts.address_lines),
        wings=tuple(receipts.wings),
        collected_by=receipts.collected_by,
    )


def get_user_admin_service(
    repo: SQLiteUserRepo = Depends(get_user_repo),
    sessions: InMemorySessionStore = Depends(get_session_store),
) -> UserAdminService:
    return UserAdminService(repo=repo, sessions=sessions)


def get_upload_service(
    config: SiteConfig = Depends(get_site_config),
    store: UploadStorePort = Depends(get_upload_store),
) -> UploadService:
    rules = UploadRules(
        max_upload_bytes=config.uploads.max_upload_bytes,
        allowed_mime_types=tuple(config.uploads.allowlist_mime_types),
        allowed_folders=tuple(config.uploads.allowed_folders),
    )
    return UploadService(store=store, rules=rules)


# --- Auth ---
def get_session_token(
    request: Request,
    config: SiteConfig = Depends(get_site_config),
    signer: CookieSigner = Depends(get_cookie_signer),
) -> str | None:
    """Raw session token from the signed session cookie, if any."""
    cookie = request.cookies.get(config.site.session_name)
    if not cookie:
        return None
    return signer.unsign(cookie)


def get_optional_user(
    token: str | None = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
) -> User | None:
    if not token:
        return None
    return auth.get_user_for_token(token)


def get_current_user(user: User | None = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user


def require_business_owner(user: User = Depends(get_current_user)) -> User:
    if user.type != "BUSINESS":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Business account required"
        )
    return user


# --- Loaders ---
def parse_uuid(value: str, detail: str = "Invalid ID") -> UUID:
    """Path/form IDs: malformed values are a 400, not a 500."""
    try:
        return UUID(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=detail) from None
