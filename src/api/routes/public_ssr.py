"""
Public SSR Routes - Server-side rendered directory and chamber pages.

Member directory pages build a snapshot per request, run it through the
directory engine and render the staggered tile grid. Row sizes come from
site config; ``?layout=mobile`` switches to the narrow layout.
"""

from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from src.api.deps import (
    get_blog_service,
    get_business_service,
    get_catalog_service,
    get_event_service,
    get_optional_user,
    get_site_config,
    parse_uuid,
)
from src.components.blog import BlogService
from src.components.business import BusinessService
from src.components.catalog import CatalogService
from src.components.directory import (
    ALL,
    NO_IMAGES_MESSAGE,
    DirectoryItem,
    FilterState,
    GridRow,
    RowSizes,
    generate_grid,
    make_name_displayable,
    run_business_listing,
    run_category_grid,
    run_type_grid,
    type_names_by_id,
)
from src.components.events import EventService
from src.config import SiteConfig
from src.domain.entities import Event, GalleryImage, User

router = APIRouter()


# --- HTML Rendering ---


def _escape_html(text: str) -> str:
    """Escape HTML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def render_ssr_page(config: SiteConfig, title: str, body_content: str = "") -> str:
    """Render complete SSR HTML page."""
    site_name = _escape_html(config.site.name)
    page_title = f"{_escape_html(title)} | {site_name}" if title else site_name

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{page_title}</title>
    <meta name="description" content="{_escape_html(config.site.description)}" />
</head>
<body>
    <header>
        <a href="/">{site_name}</a>
        <nav><a href="/members">Members</a> <a href="/events">Events</a>
        <a href="/blogs">Blog</a> <a href="/about">About</a> <a href="/contact">Contact</a></nav>
    </header>
    <main>
    {body_content}
    </main>
</body>
</html>"""


def render_tile_grid(rows: Sequence[GridRow[DirectoryItem]], empty_message: str | None) -> str:
    if empty_message:
        return f'<p class="empty">{_escape_html(empty_message)}</p>'

    parts = ['<div class="grid">']
    for row in rows:
        parts.append(f'<div class="grid-row" data-size="{len(row)}">')
        for item in row:
            parts.append(
                f'<a class="tile" href="{_escape_html(item.href)}">'
                f"{_escape_html(make_name_displayable(item.name))}</a>"
            )
        parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def render_gallery(rows: Sequence[GridRow[GalleryImage]]) -> str:
    if not rows:
        return f'<p class="empty">{NO_IMAGES_MESSAGE}</p>'

    parts = ['<div class="gallery">']
    for row in rows:
        parts.append(f'<div class="grid-row" data-size="{len(row)}">')
        for image in row:
            parts.append(
                f'<img src="{_escape_html(image.url)}" alt="{_escape_html(image.description)}" />'
            )
        parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def render_search_form(action: str, query: str) -> str:
    return (
        f'<form method="get" action="{_escape_html(action)}">'
        f'<input type="search" name="q" value="{_escape_html(query)}" '
        'placeholder="Search businesses" /></form>'
    )


def render_event_list(events: Sequence[Event]) -> str:
    if not events:
        return '<p class="empty">No events found</p>'
    items = [
        f"<li><h3>{_escape_html(e.title)}</h3>"
        f"<time>{e.date.strftime('%d %b %Y')}</time>"
        f"<p>{_escape_html(e.description)}</p></li>"
        for e in events
    ]
    return "<ul>" + "".join(items) + "</ul>"


def render_enquiry_form(action: str, user: User | None) -> str:
    """Enquiry form for a signed-in visitor; anonymous visitors get a sign-in link."""
    if user is None:
        return '<a class="button" href="/sign-in">Sign in to enquire</a>'
    return f"""
    <form class="enquiry" method="post" action="{_escape_html(action)}">
        <input name="name" placeholder="Name" value="{_escape_html(user.name)}" />
        <input name="email" type="email" placeholder="Email" value="{_escape_html(user.email)}" />
        <input name="phone" type="tel" placeholder="Phone" />
        <textarea name="message" placeholder="Message"></textarea>
        <button type="submit">Enquire</button>
    </form>
    """


def _row_sizes(config: SiteConfig, layout: str | None) -> RowSizes:
    sizes = config.directory.row_sizes
    return sizes.mobile if layout == "mobile" else sizes.desktop


# --- Home ---


@router.get("/", response_class=HTMLResponse)
def ssr_homepage(
    config: SiteConfig = Depends(get_site_config),
    events: EventService = Depends(get_event_service),
    blogs: BlogService = Depends(get_blog_service),
) -> HTMLResponse:
    latest_blogs = "".join(
        f'<li><a href="/blog/{b.id}">{_escape_html(b.title)}</a></li>' for b in blogs.latest()
    )
    body = f"""
    <h1>{_escape_html(config.site.name)}</h1>
    <p>{_escape_html(config.site.description)}</p>
    <p><a href="/members">Browse members</a></p>
    <section><h2>Recent events</h2>{render_event_list(events.latest())}</section>
    <section><h2>Latest news</h2><ul>{latest_blogs}</ul></section>
    """
    return HTMLResponse(content=render_ssr_page(config, "", body), status_code=200)


# --- Member Directory ---


@router.get("/members", response_class=HTMLResponse)
def ssr_members(
    layout: str | None = None,
    config: SiteConfig = Depends(get_site_config),
    catalog: CatalogService = Depends(get_catalog_service),
) -> HTMLResponse:
    """Category grid, led by the "All" tile."""
    rows = run_category_grid(catalog.list_categories(), _row_sizes(config, layout))
    body = f"<h1>Members</h1>\n{render_tile_grid(rows, None)}"
    return HTMLResponse(content=render_ssr_page(config, "Members", body), status_code=200)


@router.get("/members/all", response_class=HTMLResponse)
def ssr_members_all(
    q: str = "",
    type: str = Query(default=ALL),
    layout: str | None = None,
    config: SiteConfig = Depends(get_site_config),
    catalog: CatalogService = Depends(get_catalog_service),
    businesses: BusinessService = Depends(get_business_service),
) -> HTMLResponse:
    """
    Every verified business.

    ``?type=`` narrows to one type (within its own category); otherwise
    ``?q=`` filters by name.
    """
    categories = catalog.list_categories_with_types()
    state = FilterState(query=q)
    if type != ALL:
        category_slug = next(
            (c.slug for c in categories for t in c.types if t.slug == type), None
        )
        if category_slug is None:
            raise HTTPException(status_code=404, detail="Business type not found")
        state = FilterState(category_slug=category_slug, type_slug=type)

    view = run_business_listing(businesses.list_verified(), categories, state)

    type_options = "".join(
        f'<option value="{_escape_html(t.slug)}"'
        f'{" selected" if t.slug == type else ""}>{_escape_html(t.name)}</option>'
        for c in categories
        for t in c.types
    )
    body = f"""
    <h1>All members</h1>
    {render_search_form("/members/all", view.state.query)}
    <form method="get" action="/members/all">
        <select name="type"><option value="{ALL}">All types</option>{type_options}</select>
    </form>
    {render_tile_grid(view.rows(_row_sizes(config, layout)), view.empty_message())}
    """
    return HTMLResponse(content=render_ssr_page(config, "All members", body), status_code=200)


@router.get("/members/{category}", response_class=HTMLResponse)
def ssr_members_category(
    category: str,
    layout: str | None = None,
    config: SiteConfig = Depends(get_site_config),
    catalog: CatalogService = Depends(get_catalog_service),
) -> HTMLResponse:
    """Grid of the business types in a category."""
    found = catalog.get_category_with_types(category)
    if found is None:
        raise HTTPException(status_code=404, detail="Business category not found")

    rows = run_type_grid(found, _row_sizes(config, layout))
    body = f"<h1>{_escape_html(found.name)}</h1>\n{render_tile_grid(rows, None)}"
    return HTMLResponse(content=render_ssr_page(config, found.name, body), status_code=200)


@router.get("/members/{category}/{type_slug}", response_class=HTMLResponse)
def ssr_members_type(
    category: str,
    type_slug: str,
    q: str = "",
    layout: str | None = None,
    config: SiteConfig = Depends(get_site_config),
    catalog: CatalogService = Depends(get_catalog_service),
    businesses: BusinessService = Depends(get_business_service),
    user: User | None = Depends(get_optional_user),
) -> HTMLResponse:
    """Verified businesses of one type, with the name filter and a general enquiry."""
    found = catalog.get_category_with_types(category)
    if found is None:
        raise HTTPException(status_code=404, detail="Business category not found")
    business_type = next((t for t in found.types if t.slug == type_slug), None)
    if business_type is None:
        raise HTTPException(status_code=404, detail="Business type not found")

    view = run_business_listing(
        businesses.list_by_type(business_type.id), [found], FilterState(query=q)
    )
    action = f"/members/{found.slug}/{business_type.slug}"
    enquiry = render_enquiry_form(f"/api/types/{business_type.slug}/enquiries", user)
    body = f"""
    <h1>{_escape_html(business_type.name)}</h1>
    {render_search_form(action, view.state.query)}
    {enquiry}
    {render_tile_grid(view.rows(_row_sizes(config, layout)), view.empty_message())}
    """
    return HTMLResponse(
        content=render_ssr_page(config, business_type.name, body), status_code=200
    )


@router.get("/business/{slug}", response_class=HTMLResponse)
def ssr_business(
    slug: str,
    layout: str | None = None,
    config: SiteConfig = Depends(get_site_config),
    businesses: BusinessService = Depends(get_business_service),
    catalog: CatalogService = Depends(get_catalog_service),
    user: User | None = Depends(get_optional_user),
) -> HTMLResponse:
    business = businesses.get_by_slug(slug)
    if business is None or not business.is_verified:
        raise HTTPException(status_code=404, detail="Business not found")

    services = "".join(
        f"<li><h3>{_escape_html(s.title)}</h3><p>{_escape_html(s.description)}</p></li>"
        for s in businesses.list_services(business.id)
    )
    testimonials = "".join(
        f"<blockquote>{_escape_html(t.content)}</blockquote>"
        for t in businesses.list_testimonials(business.id)
    )
    gallery = render_gallery(generate_grid(business.gallery, _row_sizes(config, layout)))
    type_name = type_names_by_id(catalog.list_categories_with_types()).get(business.type_id, "")
    enquiry = render_enquiry_form(f"/api/business/{business.slug}/enquiries", user)

    body = f"""
    <article>
        <h1>{_escape_html(business.name)}</h1>
        <p class="type">{_escape_html(type_name)}</p>
        <p class="tagline">{_escape_html(business.tagline)}</p>
        <p>{_escape_html(business.about)}</p>
        <p>{_escape_html(business.location or "")}</p>
        <p><a href="mailto:{_escape_html(business.email)}">{_escape_html(business.email)}</a>
           {_escape_html(business.phone)}</p>
        {enquiry}
        <section><h2>Services</h2><ul>{services}</ul></section>
        <section><h2>Gallery</h2>{gallery}</section>
        <section><h2>Testimonials</h2>{testimonials}</section>
    </article>
    """
    return HTMLResponse(content=render_ssr_page(config, business.name, body), status_code=200)


# --- Chamber Pages ---

ABOUT_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Advocacy and Representation",
        (
            (
                "Policy Influence",
                "We argue for business-friendly policy at every level of government "
                "and speak for our members in discussions with policymakers.",
            ),
            ("Lobbying", "We work on legislation and economic policy that affects business."),
        ),
    ),
    (
        "Networking Opportunities",
        (
            (
                "Business Connections",
                "Events, meetings and conferences where members meet partners, "
                "clients and suppliers.",
            ),
            ("Community Building", "A supportive community of local businesses."),
        ),
    ),
    (
        "Business Support and Services",
        (
            ("Resources and Information", "Market research and industry information."),
            ("Training and Development", "Workshops, seminars and training programs."),
        ),
    ),
    (
        "Economic Development",
        (
            ("Promotion of Trade and Investment", "Attracting investment and promoting exports."),
            ("Support for Startups and SMEs", "Programs that help small enterprises grow."),
        ),
    ),
)


@router.get("/about", response_class=HTMLResponse)
def ssr_about(config: SiteConfig = Depends(get_site_config)) -> HTMLResponse:
    sections = "".join(
        f"<section><h2>{_escape_html(title)}</h2>"
        + "".join(
            f"<h3>{_escape_html(heading)}</h3><p>{_escape_html(text)}</p>"
            for heading, text in items
        )
        + "</section>"
        for title, items in ABOUT_SECTIONS
    )
    body = f"<h1>About us</h1>\n<p>{_escape_html(config.site.description)}</p>\n{sections}"
    return HTMLResponse(content=render_ssr_page(config, "About us", body), status_code=200)


@router.get("/contact", response_class=HTMLResponse)
def ssr_contact(config: SiteConfig = Depends(get_site_config)) -> HTMLResponse:
    """Contact form; posts to the chamber's own enquiry inbox."""
    body = """
    <h1>Contact us</h1>
    <form class="contact" method="post" action="/api/contact">
        <input name="name" placeholder="Name" />
        <input name="email" type="email" placeholder="Email" />
        <input name="phone" type="tel" placeholder="Phone" />
        <textarea name="message" placeholder="Anything that would be helpful to us"></textarea>
        <button type="submit">Enquire</button>
    </form>
    """
    return HTMLResponse(content=render_ssr_page(config, "Contact us", body), status_code=200)


@router.get("/sign-in", response_class=HTMLResponse)
def ssr_sign_in(config: SiteConfig = Depends(get_site_config)) -> HTMLResponse:
    body = """
    <h1>Sign in</h1>
    <form method="post" action="/api/auth/sign-in">
        <input name="email" type="email" placeholder="Email" />
        <input name="password" type="password" placeholder="Password" />
        <button type="submit">Sign in</button>
    </form>
    """
    return HTMLResponse(content=render_ssr_page(config, "Sign in", body), status_code=200)


# --- Events & Blog ---


@router.get("/events", response_class=HTMLResponse)
def ssr_events(
    config: SiteConfig = Depends(get_site_config),
    events: EventService = Depends(get_event_service),
) -> HTMLResponse:
    body = f"""
    <h1>Events</h1>
    <section><h2>Upcoming</h2>{render_event_list(events.list_upcoming())}</section>
    <section><h2>Past</h2>{render_event_list(events.list_completed())}</section>
    """
    return HTMLResponse(content=render_ssr_page(config, "Events", body), status_code=200)


@router.get("/blogs", response_class=HTMLResponse)
def ssr_blogs(
    config: SiteConfig = Depends(get_site_config),
    blogs: BlogService = Depends(get_blog_service),
) -> HTMLResponse:
    items = "".join(
        f'<li><a href="/blog/{b.id}">{_escape_html(b.title)}</a>'
        f"<p>{_escape_html(b.description)}</p></li>"
        for b in blogs.list_all()
    )
    body = f"<h1>Blog</h1><ul>{items}</ul>"
    return HTMLResponse(content=render_ssr_page(config, "Blog", body), status_code=200)


@router.get("/blog/{blog_id}", response_class=HTMLResponse)
def ssr_blog(
    blog_id: str,
    config: SiteConfig = Depends(get_site_config),
    blogs: BlogService = Depends(get_blog_service),
) -> HTMLResponse:
    blog = blogs.get(parse_uuid(blog_id))
    if blog is None:
        raise HTTPException(status_code=404, detail="Blog not found")

    body = f"""
    <article>
        <h1>{_escape_html(blog.title)}</h1>
        <img src="{_escape_html(blog.image)}" alt="" />
        <p>{_escape_html(blog.content)}</p>
    </article>
    """
    return HTMLResponse(content=render_ssr_page(config, blog.title, body), status_code=200)
