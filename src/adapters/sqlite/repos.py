import json
import sqlite3
from datetime import date, datetime
from typing import Any
from uuid import UUID

from src.domain.entities import (
    Blog,
    Business,
    BusinessCategory,
    BusinessEnquiry,
    ContactEnquiry,
    BusinessType,
    CategoryWithTypes,
    Enquiry,
    Event,
    EventImage,
    EventRegistration,
    GalleryImage,
    Receipt,
    ResetRequest,
    Service,
    Testimonial,
    User,
)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def parse_dt(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _write(self, sql: str, params: tuple[Any, ...]) -> None:
        conn = self._get_conn()
        try:
            conn.execute(sql, params)
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _fetch_one(self, sql: str, params: tuple[Any, ...] = ()) -> dict[str, Any] | None:
        conn = self._get_conn()
        try:
            row: dict[str, Any] | None = conn.execute(sql, params).fetchone()
            return row
        finally:
            conn.close()

    def _fetch_all(self, sql: str, params: tuple[Any, ...] = ()) -> list[dict[str, Any]]:
        conn = self._get_conn()
        try:
            rows: list[dict[str, Any]] = conn.execute(sql, params).fetchall()
            return rows
        finally:
            conn.close()

    def _count(self, sql: str, params: tuple[Any, ...] = ()) -> int:
        row = self._fetch_one(sql, params)
        return int(row["n"]) if row else 0


class SQLiteUserRepo(_SQLiteRepo):
    def save(self, user: User) -> User:
        self._write(
            """
            INSERT INTO users (
                id, email, name, password_hash, type, is_admin, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                email=excluded.email,
                name=excluded.name,
                password_hash=excluded.password_hash,
                type=excluded.type,
                is_admin=excluded.is_admin,
                updated_at=excluded.updated_at
        """,
            (
                str(user.id),
                user.email,
                user.name,
                user.password_hash,
                user.type,
                int(user.is_admin),
                user.created_at.isoformat(),
                user.updated_at.isoformat(),
            ),
        )
        return user

    def get_by_email(self, email: str) -> User | None:
        row = self._fetch_one("SELECT * FROM users WHERE email = ?", (email,))
        return self._map_row(row) if row else None

    def get_by_id(self, user_id: UUID) -> User | None:
        row = self._fetch_one("SELECT * FROM users WHERE id = ?", (str(user_id),))
        return self._map_row(row) if row else None

    def list_all(self) -> list[User]:
        rows = self._fetch_all("SELECT * FROM users ORDER BY created_at")
        return [self._map_row(row) for row in rows]

    def delete(self, user_id: UUID) -> None:
        self._write("DELETE FROM users WHERE id = ?", (str(user_id),))

    def _map_row(self, row: dict[str, Any]) -> User:
        return User(
            id=UUID(row["id"]),
            email=row["email"],
            name=row["name"],
            password_hash=row["password_hash"],
            type=row["type"],
            is_admin=bool(row["is_admin"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


class SQLiteResetRequestRepo(_SQLiteRepo):
    def save(self, request: ResetRequest) -> ResetRequest:
        self._write(
            "INSERT INTO reset_requests (id, email, token, created_at) VALUES (?, ?, ?, ?)",
            (str(request.id), request.email, request.token, request.created_at.isoformat()),
        )
        return request

    def get_by_token(self, token: str) -> ResetRequest | None:
        row = self._fetch_one("SELECT * FROM reset_requests WHERE token = ?", (token,))
        if not row:
            return None
        return ResetRequest(
            id=UUID(row["id"]),
            email=row["email"],
            token=row["token"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def delete(self, request_id: UUID) -> None:
        self._write("DELETE FROM reset_requests WHERE id = ?", (str(request_id),))


class SQLiteCatalogRepo(_SQLiteRepo):
    """Business categories and the business types nested under them."""

    def save_category(self, category: BusinessCategory) -> BusinessCategory:
        self._write(
            """
            INSERT INTO business_categories (id, name, slug) VALUES (?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET name=excluded.name, slug=excluded.slug
        """,
            (str(category.id), category.name, category.slug),
        )
        return category

    def save_type(self, business_type: BusinessType) -> BusinessType:
        self._write(
            """
            INSERT INTO business_types (id, name, slug, category_id) VALUES (?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                slug=excluded.slug,
                category_id=excluded.category_id
        """,
            (
                str(business_type.id),
                business_type.name,
                business_type.slug,
                str(business_type.category_id),
            ),
        )
        return business_type

    def get_category_by_id(self, category_id: UUID) -> BusinessCategory | None:
        row = self._fetch_one(
            "SELECT * FROM business_categories WHERE id = ?", (str(category_id),)
        )
        return self._map_category(row) if row else None

    def get_category_by_slug(self, slug: str) -> BusinessCategory | None:
        row = self._fetch_one("SELECT * FROM business_categories WHERE slug = ?", (slug,))
        return self._map_category(row) if row else None

    def get_category_with_types(self, slug: str) -> CategoryWithTypes | None:
        category = self.get_category_by_slug(slug)
        if category is None:
            return None
        return CategoryWithTypes(
            **category.model_dump(), types=self.list_types(category_id=category.id)
        )

    def list_categories(self) -> list[BusinessCategory]:
        rows = self._fetch_all("SELECT * FROM business_categories ORDER BY rowid")
        return [self._map_category(row) for row in rows]

    def list_categories_with_types(self) -> list[CategoryWithTypes]:
        types_by_category: dict[UUID, list[BusinessType]] = {}
        for business_type in self.list_types():
            types_by_category.setdefault(business_type.category_id, []).append(business_type)

        return [
            CategoryWithTypes(**c.model_dump(), types=types_by_category.get(c.id, []))
            for c in self.list_categories()
        ]

    def get_type_by_id(self, type_id: UUID) -> BusinessType | None:
        row = self._fetch_one("SELECT * FROM business_types WHERE id = ?", (str(type_id),))
        return self._map_type(row) if row else None

    def get_type_by_slug(self, slug: str) -> BusinessType | None:
        row = self._fetch_one("SELECT * FROM business_types WHERE slug = ?", (slug,))
        return self._map_type(row) if row else None

    def list_types(self, category_id: UUID | None = None) -> list[BusinessType]:
        if category_id is None:
            rows = self._fetch_all("SELECT * FROM business_types ORDER BY rowid")
        else:
            rows = self._fetch_all(
                "SELECT * FROM business_types WHERE category_id = ? ORDER BY rowid",
                (str(category_id),),
            )
        return [self._map_type(row) for row in rows]

    def delete_category(self, category_id: UUID) -> None:
        self._write("DELETE FROM business_categories WHERE id = ?", (str(category_id),))

    def delete_type(self, type_id: UUID) -> None:
        self._write("DELETE FROM business_types WHERE id = ?", (str(type_id),))

    def count_types(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM business_types")

    def _map_category(self, row: dict[str, Any]) -> BusinessCategory:
        return BusinessCategory(id=UUID(row["id"]), name=row["name"], slug=row["slug"])

    def _map_type(self, row: dict[str, Any]) -> BusinessType:
        return BusinessType(
            id=UUID(row["id"]),
            name=row["name"],
            slug=row["slug"],
            category_id=UUID(row["category_id"]),
        )


class SQLiteBusinessRepo(_SQLiteRepo):
    def save(self, business: Business) -> Business:
        self._write(
            """
            INSERT INTO businesses (
                id, name, slug, tagline, about, logo, cover_image, location,
                instagram, whats_app, facebook, linked_in, email, phone,
                is_verified, owner_id, type_id, gallery_json, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                slug=excluded.slug,
                tagline=excluded.tagline,
                about=excluded.about,
                logo=excluded.logo,
                cover_image=excluded.cover_image,
                location=excluded.location,
                instagram=excluded.instagram,
                whats_app=excluded.whats_app,
                facebook=excluded.facebook,
                linked_in=excluded.linked_in,
                email=excluded.email,
                phone=excluded.phone,
                is_verified=excluded.is_verified,
                type_id=excluded.type_id,
                gallery_json=excluded.gallery_json,
                updated_at=excluded.updated_at
        """,
            (
                str(business.id),
                business.name,
                business.slug,
                business.tagline,
                business.about,
                business.logo,
                business.cover_image,
                business.location,
                business.instagram,
                business.whats_app,
                business.facebook,
                business.linked_in,
                business.email,
                business.phone,
                int(business.is_verified),
                str(business.owner_id),
                str(business.type_id),
                json.dumps([image.model_dump() for image in business.gallery]),
                business.created_at.isoformat(),
                business.updated_at.isoformat(),
            ),
        )
        return business

    def get_by_id(self, business_id: UUID) -> Business | None:
        row = self._fetch_one("SELECT * FROM businesses WHERE id = ?", (str(business_id),))
        return self._map_row(row) if row else None

    def get_by_slug(self, slug: str) -> Business | None:
        row = self._fetch_one("SELECT * FROM businesses WHERE slug = ?", (slug,))
        return self._map_row(row) if row else None

    def get_by_owner(self, owner_id: UUID) -> Business | None:
        row = self._fetch_one("SELECT * FROM businesses WHERE owner_id = ?", (str(owner_id),))
        return self._map_row(row) if row else None

    def list_all(self) -> list[Business]:
        rows = self._fetch_all("SELECT * FROM businesses ORDER BY created_at")
        return [self._map_row(row) for row in rows]

    def list_verified(self) -> list[Business]:
        rows = self._fetch_all(
            "SELECT * FROM businesses WHERE is_verified = 1 ORDER BY created_at"
        )
        return [self._map_row(row) for row in rows]

    def list_by_type(self, type_id: UUID) -> list[Business]:
        """Verified businesses of one type."""
        rows = self._fetch_all(
            "SELECT * FROM businesses WHERE type_id = ? AND is_verified = 1 ORDER BY created_at",
            (str(type_id),),
        )
        return [self._map_row(row) for row in rows]

    def count(self, verified_only: bool = False) -> int:
        if verified_only:
            return self._count("SELECT COUNT(*) AS n FROM businesses WHERE is_verified = 1")
        return self._count("SELECT COUNT(*) AS n FROM businesses")

    def _map_row(self, row: dict[str, Any]) -> Business:
        return Business(
            id=UUID(row["id"]),
            name=row["name"],
            slug=row["slug"],
            tagline=row["tagline"],
            about=row["about"],
            logo=row["logo"],
            cover_image=row["cover_image"],
            location=row["location"],
            instagram=row["instagram"],
            whats_app=row["whats_app"],
            facebook=row["facebook"],
            linked_in=row["linked_in"],
            email=row["email"],
            phone=row["phone"],
            is_verified=bool(row["is_verified"]),
            owner_id=UUID(row["owner_id"]),
            type_id=UUID(row["type_id"]),
            gallery=[GalleryImage(**g) for g in json.loads(row["gallery_json"] or "[]")],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )


class SQLiteServiceRepo(_SQLiteRepo):
    def save(self, service: Service) -> Service:
        self._write(
            """
            INSERT INTO services (id, business_id, title, description, image)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title=excluded.title,
                description=excluded.description,
                image=excluded.image
        """,
            (
                str(service.id),
                str(service.business_id),
                service.title,
                service.description,
                service.image,
            ),
        )
        return service

    def get_by_id(self, service_id: UUID) -> Service | None:
        row = self._fetch_one("SELECT * FROM services WHERE id = ?", (str(service_id),))
        return self._map_row(row) if row else None

    def list_by_business(self, business_id: UUID) -> list[Service]:
        rows = self._fetch_all(
            "SELECT * FROM services WHERE business_id = ? ORDER BY rowid", (str(business_id),)
        )
        return [self._map_row(row) for row in rows]

    def delete(self, service_id: UUID) -> None:
        self._write("DELETE FROM services WHERE id = ?", (str(service_id),))

    def _map_row(self, row: dict[str, Any]) -> Service:
        return Service(
            id=UUID(row["id"]),
            business_id=UUID(row["business_id"]),
            title=row["title"],
            description=row["description"],
            image=row["image"],
        )


class SQLiteTestimonialRepo(_SQLiteRepo):
    def save(self, testimonial: Testimonial) -> Testimonial:
        self._write(
            """
            INSERT INTO testimonials (id, business_id, author_business_id, content, created_at)
            VALUES (?, ?, ?, ?, ?)
        """,
            (
                str(testimonial.id),
                str(testimonial.business_id),
                str(testimonial.author_business_id),
                testimonial.content,
                testimonial.created_at.isoformat(),
            ),
        )
        return testimonial

    def list_by_business(self, business_id: UUID) -> list[Testimonial]:
        rows = self._fetch_all(
            "SELECT * FROM testimonials WHERE business_id = ? ORDER BY created_at",
            (str(business_id),),
        )
        return [
            Testimonial(
                id=UUID(row["id"]),
                business_id=UUID(row["business_id"]),
                author_business_id=UUID(row["author_business_id"]),
                content=row["content"],
                created_at=datetime.fromisoformat(row["created_at"]),
            )
            for row in rows
        ]

    def exists(self, business_id: UUID, author_business_id: UUID) -> bool:
        return (
            self._count(
                "SELECT COUNT(*) AS n FROM testimonials "
                "WHERE business_id = ? AND author_business_id = ?",
                (str(business_id), str(author_business_id)),
            )
            > 0
        )


class SQLiteEnquiryRepo(_SQLiteRepo):
    """Business, per-type and contact-page enquiries."""

    def save_business_enquiry(self, enquiry: BusinessEnquiry) -> BusinessEnquiry:
        self._write(
            """
            INSERT INTO business_enquiries (
                id, business_id, user_id, name, email, phone, message, is_resolved, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET is_resolved=excluded.is_resolved
        """,
            (
                str(enquiry.id),
                str(enquiry.business_id),
                str(enquiry.user_id),
                enquiry.name,
                enquiry.email,
                enquiry.phone,
                enquiry.message,
                int(enquiry.is_resolved),
                enquiry.created_at.isoformat(),
            ),
        )
        return enquiry

    def get_business_enquiry(self, enquiry_id: UUID) -> BusinessEnquiry | None:
        row = self._fetch_one(
            "SELECT * FROM business_enquiries WHERE id = ?", (str(enquiry_id),)
        )
        return self._map_business_enquiry(row) if row else None

    def list_business_enquiries(
        self,
        business_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> list[BusinessEnquiry]:
        query = "SELECT * FROM business_enquiries WHERE 1=1"
        params: list[str] = []
        if business_id is not None:
            query += " AND business_id = ?"
            params.append(str(business_id))
        if user_id is not None:
            query += " AND user_id = ?"
            params.append(str(user_id))
        query += " ORDER BY created_at DESC"
        return [self._map_business_enquiry(row) for row in self._fetch_all(query, tuple(params))]

    def save_enquiry(self, enquiry: Enquiry) -> Enquiry:
        self._write(
            """
            INSERT INTO enquiries (
                id, business_type_id, user_id, name, email, phone, message, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                str(enquiry.id),
                str(enquiry.business_type_id),
                str(enquiry.user_id),
                enquiry.name,
                enquiry.email,
                enquiry.phone,
                enquiry.message,
                enquiry.created_at.isoformat(),
            ),
        )
        return enquiry

    def list_enquiries(
        self,
        business_type_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> list[Enquiry]:
        query = "SELECT * FROM enquiries WHERE 1=1"
        params: list[str] = []
        if business_type_id is not None:
            query += " AND business_type_id = ?"
            params.append(str(business_type_id))
        if user_id is not None:
            query += " AND user_id = ?"
            params.append(str(user_id))
        query += " ORDER BY created_at DESC"
        return [
            Enquiry(
                id=UUID(row["id"]),
                business_type_id=UUID(row["business_type_id"]),
                user_id=UUID(row["user_id"]),
                name=row["name"],
                email=row["email"],
                phone=row["phone"],
                message=row["message"],
                created_at=datetime.fromisoformat(row["created_at"]),
            )
            for row in self._fetch_all(query, tuple(params))
        ]

    def save_contact(self, contact: ContactEnquiry) -> ContactEnquiry:
        self._write(
            """
            INSERT INTO contact_enquiries (
                id, name, email, phone, message, is_resolved, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET is_resolved=excluded.is_resolved
        """,
            (
                str(contact.id),
                contact.name,
                contact.email,
                contact.phone,
                contact.message,
                int(contact.is_resolved),
                contact.created_at.isoformat(),
            ),
        )
        return contact

    def get_contact(self, contact_id: UUID) -> ContactEnquiry | None:
        row = self._fetch_one("SELECT * FROM contact_enquiries WHERE id = ?", (str(contact_id),))
        return self._map_contact(row) if row else None

    def list_contacts(self) -> list[ContactEnquiry]:
        rows = self._fetch_all("SELECT * FROM contact_enquiries ORDER BY created_at DESC")
        return [self._map_contact(row) for row in rows]

    def _map_contact(self, row: dict[str, Any]) -> ContactEnquiry:
        return ContactEnquiry(
            id=UUID(row["id"]),
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            message=row["message"],
            is_resolved=bool(row["is_resolved"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    def _map_business_enquiry(self, row: dict[str, Any]) -> BusinessEnquiry:
        return BusinessEnquiry(
            id=UUID(row["id"]),
            business_id=UUID(row["business_id"]),
            user_id=UUID(row["user_id"]),
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            message=row["message"],
            is_resolved=bool(row["is_resolved"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class SQLiteEventRepo(_SQLiteRepo):
    def save(self, event: Event) -> Event:
        self._write(
            """
            INSERT INTO events (
                id, title, slug, description, date, is_completed, images_json, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title=excluded.title,
                slug=excluded.slug,
                description=excluded.description,
                date=excluded.date,
                is_completed=excluded.is_completed,
                images_json=excluded.images_json
        """,
            (
                str(event.id),
                event.title,
                event.slug,
                event.description,
                event.date.isoformat(),
                int(event.is_completed),
                json.dumps([image.model_dump() for image in event.images]),
                event.created_at.isoformat(),
            ),
        )
        return event

    def get_by_id(self, event_id: UUID) -> Event | None:
        row = self._fetch_one("SELECT * FROM events WHERE id = ?", (str(event_id),))
        return self._map_row(row) if row else None

    def get_by_slug(self, slug: str) -> Event | None:
        row = self._fetch_one("SELECT * FROM events WHERE slug = ?", (slug,))
        return self._map_row(row) if row else None

    def list_all(self, is_completed: bool | None = None) -> list[Event]:
        if is_completed is None:
            rows = self._fetch_all("SELECT * FROM events ORDER BY date")
        else:
            rows = self._fetch_all(
                "SELECT * FROM events WHERE is_completed = ? ORDER BY date",
                (int(is_completed),),
            )
        return [self._map_row(row) for row in rows]

    def latest_completed(self, limit: int) -> list[Event]:
        rows = self._fetch_all(
            "SELECT * FROM events WHERE is_completed = 1 ORDER BY created_at DESC LIMIT ?",
            (limit,),
        )
        return [self._map_row(row) for row in rows]

    def delete(self, event_id: UUID) -> None:
        self._write("DELETE FROM events WHERE id = ?", (str(event_id),))

    def count(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM events")

    def save_registration(self, registration: EventRegistration) -> EventRegistration:
        self._write(
            """
            INSERT INTO event_registrations (
                id, event_id, category_id, name, email, phone,
                business_name, is_member, location, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                str(registration.id),
                str(registration.event_id),
                str(registration.category_id),
                registration.name,
                registration.email,
                registration.phone,
                registration.business_name,
                int(registration.is_member),
                registration.location,
                registration.created_at.isoformat(),
            ),
        )
        return registration

    def list_registrations(self, event_id: UUID) -> list[EventRegistration]:
        rows = self._fetch_all(
            "SELECT * FROM event_registrations WHERE event_id = ? ORDER BY created_at",
            (str(event_id),),
        )
        return [
            EventRegistration(
                id=UUID(row["id"]),
                event_id=UUID(row["event_id"]),
                category_id=UUID(row["category_id"]),
                name=row["name"],
                email=row["email"],
                phone=row["phone"],
                business_name=row["business_name"],
                is_member=bool(row["is_member"]),
                location=row["location"],
                created_at=datetime.fromisoformat(row["created_at"]),
            )
            for row in rows
        ]

    def _map_row(self, row: dict[str, Any]) -> Event:
        return Event(
            id=UUID(row["id"]),
            title=row["title"],
            slug=row["slug"],
            description=row["description"],
            date=datetime.fromisoformat(row["date"]),
            is_completed=bool(row["is_completed"]),
            images=[EventImage(**i) for i in json.loads(row["images_json"] or "[]")],
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class SQLiteBlogRepo(_SQLiteRepo):
    def save(self, blog: Blog) -> Blog:
        self._write(
            """
            INSERT INTO blogs (id, title, description, content, image, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title=excluded.title,
                description=excluded.description,
                content=excluded.content,
                image=excluded.image
        """,
            (
                str(blog.id),
                blog.title,
                blog.description,
                blog.content,
                blog.image,
                blog.created_at.isoformat(),
            ),
        )
        return blog

    def get_by_id(self, blog_id: UUID) -> Blog | None:
        row = self._fetch_one("SELECT * FROM blogs WHERE id = ?", (str(blog_id),))
        return self._map_row(row) if row else None

    def list_all(self, limit: int | None = None) -> list[Blog]:
        if limit is None:
            rows = self._fetch_all("SELECT * FROM blogs ORDER BY created_at DESC")
        else:
            rows = self._fetch_all(
                "SELECT * FROM blogs ORDER BY created_at DESC LIMIT ?", (limit,)
            )
        return [self._map_row(row) for row in rows]

    def delete(self, blog_id: UUID) -> None:
        self._write("DELETE FROM blogs WHERE id = ?", (str(blog_id),))

    def count(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM blogs")

    def _map_row(self, row: dict[str, Any]) -> Blog:
        return Blog(
            id=UUID(row["id"]),
            title=row["title"],
            description=row["description"],
            content=row["content"],
            image=row["image"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )


class SQLiteReceiptRepo(_SQLiteRepo):
    def save(self, receipt: Receipt) -> Receipt:
        self._write(
            """
            INSERT INTO receipts (
                id, receipt_number, name, phone, wing, date, amount, address, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
            (
                str(receipt.id),
                receipt.receipt_number,
                receipt.name,
                receipt.phone,
                receipt.wing,
                receipt.date.isoformat(),
                receipt.amount,
                receipt.address,
                receipt.created_at.isoformat(),
            ),
        )
        return receipt

    def list_all(self) -> list[Receipt]:
        rows = self._fetch_all(
            "SELECT * FROM receipts ORDER BY length(receipt_number), receipt_number"
        )
        return [self._map_row(row) for row in rows]

    def get_by_number(self, receipt_number: str) -> Receipt | None:
        row = self._fetch_one(
            "SELECT * FROM receipts WHERE receipt_number = ?", (receipt_number,)
        )
        return self._map_row(row) if row else None

    def last_receipt_number(self) -> str | None:
        row = self._fetch_one(
            "SELECT receipt_number FROM receipts "
            "ORDER BY length(receipt_number) DESC, receipt_number DESC LIMIT 1"
        )
        return row["receipt_number"] if row else None

    def _map_row(self, row: dict[str, Any]) -> Receipt:
        return Receipt(
            id=UUID(row["id"]),
            receipt_number=row["receipt_number"],
            name=row["name"],
            phone=row["phone"],
            wing=row["wing"],
            date=date.fromisoformat(row["date"]),
            amount=row["amount"],
            address=row["address"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
