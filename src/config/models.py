from pydantic import BaseModel, Field, field_validator


class SiteRules(BaseModel):
    name: str
    base_url: str
    description: str
    session_name: str

class SessionCookieRules(BaseModel):
    secure: bool
    http_only: bool = True
    same_site: str = "lax"

class SessionsRules(BaseModel):
    ttl_minutes: int = Field(gt=0)
    cookie: SessionCookieRules

class PasswordResetRules(BaseModel):
    ttl_minutes: int = Field(default=30, gt=0)

class AuthRules(BaseModel):
    sessions: SessionsRules
    password_reset: PasswordResetRules = Field(default_factory=PasswordResetRules)

class RowSizesRules(BaseModel):
    desktop: tuple[int, int] = (5, 4)
    mobile: tuple[int, int] = (2, 1)

    @field_validator("desktop", "mobile")
    @classmethod
    def sizes_positive(cls, value: tuple[int, int]) -> tuple[int, int]:
        if min(value) <= 0:
            raise ValueError("Grid row sizes must be positive integers")
        return value

class DirectoryRules(BaseModel):
    row_sizes: RowSizesRules = Field(default_factory=RowSizesRules)

class UploadsRules(BaseModel):
    backend: str = "local"  # local | s3
    max_upload_bytes: int
    allowlist_mime_types: list[str]
    allowed_folders: list[str]
    bucket: str | None = None
    region: str | None = None
    public_base_url: str | None = None

class EmailRules(BaseModel):
    backend: str = "dev"  # dev | ses
    from_name: str
    from_mail: str
    region: str | None = None

class ReceiptRules(BaseModel):
    prefix: str = "TEC"
    number_width: int = Field(default=6, gt=0)
    issuer: str = "Receipts"
    address_lines: list[str] = Field(default_factory=list)
    wings: list[str] = Field(default_factory=list)
    collected_by: str = ""

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class SiteConfig(BaseModel):
    site: SiteRules
    auth: AuthRules
    directory: DirectoryRules = Field(default_factory=DirectoryRules)
    uploads: UploadsRules
    email: EmailRules
    receipts: ReceiptRules = Field(default_factory=ReceiptRules)
    ops: OpsRules = Field(default_factory=OpsRules)
