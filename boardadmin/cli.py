"""boardadmin CLI."""

import asyncio
import logging
from pathlib import Path

# Load .env file
from dotenv import load_dotenv
load_dotenv()

import click
from rich.console import Console
from rich.table import Table

from boardadmin.auth.context import AuthContext
from boardadmin.auth.manager import AuthManager
from boardadmin.config import Settings, load_settings
from boardadmin.http.client import ApiClient
from boardadmin.models.enums import AccountStatus, BlogStatus, CompanySize, Sector, ValidationAction
from boardadmin.services.base import ServiceError
from boardadmin.storage import Database, TokenStore
from boardadmin.ui import render
from boardadmin.ui.labels import format_date


console = Console()


def _parse_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn ``key=value`` arguments into a dict."""
    data = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Expected key=value, got: {pair}")
        key, value = pair.split("=", 1)
        data[key.strip()] = value.strip()
    return data


def _run(coro):
    """Run a coroutine, printing service failures as an error banner."""
    try:
        return asyncio.run(coro)
    except ServiceError as e:
        console.print(render.error_banner(str(e)))
        raise SystemExit(1)


def _client(ctx) -> ApiClient:
    return ApiClient(ctx.obj["settings"], ctx.obj["auth"])


async def _confirm(page, yes: bool) -> bool:
    """Answer the page's open confirmation dialog."""
    dialog = page.dialog
    if yes:
        await dialog.confirm()
        return True
    return await dialog.ask(console)


def _check_action(page):
    """Exit 1 if the confirmed action failed.

    Pages close their dialog only once the action itself succeeded, so an
    error left by the follow-up reload is a warning, not a failure.
    """
    if page.confirm_dialog.is_open:
        console.print(render.error_banner(page.error or "Action impossible"))
        raise SystemExit(1)
    if page.error:
        console.print(f"[yellow]Action effectuée, mais le rechargement a échoué: {page.error}[/yellow]")


@click.group()
@click.option("--config", "config_path", default=None, type=click.Path(exists=True), help="YAML settings file")
@click.option("--db", default=None, help="Client storage database path")
@click.option("--api-url", default=None, help="Backend base URL")
@click.pass_context
def cli(ctx, config_path: str | None, db: str | None, api_url: str | None):
    """boardadmin - Job-board administration console."""
    settings: Settings = load_settings(Path(config_path) if config_path else None)
    if db:
        settings.db_path = db
    if api_url:
        settings.api_base_url = api_url

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    database = Database(settings.db_path)
    database.create_tables()

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["db"] = database
    ctx.obj["auth"] = AuthContext(TokenStore(database)).init()


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--login", "login_name", prompt="Identifiant", help="Username or email")
@click.option("--password", prompt="Mot de passe", hide_input=True, help="Password")
@click.pass_context
def login(ctx, login_name: str, password: str):
    """Log in as an administrator."""
    _run(_login_async(ctx, login_name, password))


async def _login_async(ctx, login_name: str, password: str):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        response = await manager.login({"login": login_name, "password": password}, start_refresher=False)

    user = response.user or {}
    console.print(f"[green]✓ Connecté en tant que {user.get('username', login_name)}[/green]")
    if not manager.is_admin():
        console.print("[yellow]Attention : ce compte n'a pas les droits administrateur[/yellow]")


@cli.command()
@click.pass_context
def logout(ctx):
    """Invalidate the current session and forget stored credentials."""
    _run(_logout_async(ctx))


async def _logout_async(ctx):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        manager.initialize(start_refresher=False)
        await manager.logout()
    console.print("[green]✓ Déconnecté[/green]")


@cli.command()
@click.pass_context
def whoami(ctx):
    """Show the logged-in administrator."""
    _run(_whoami_async(ctx))


async def _whoami_async(ctx):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        if not manager.auth.refresh_token:
            console.print("[yellow]Non connecté. Utilisez: boardadmin login[/yellow]")
            return
        if not await manager.token_service.refresh_token_if_needed():
            console.print(render.error_banner("Session expirée. Veuillez vous reconnecter."))
            raise SystemExit(1)
        user = await manager.auth_service.get_current_user()

    console.print(f"[bold]Utilisateur:[/bold] {user.get('username', '-')}")
    console.print(f"[bold]Email:[/bold] {user.get('email', '-')}")
    console.print(f"[bold]Type:[/bold] {user.get('user_type', '-')}")
    payload = manager.token_service.get_token_payload() or {}
    if "exp" in payload:
        console.print(f"[dim]Jeton valide jusqu'à {payload['exp']}[/dim]")


@cli.command("verify-email")
@click.argument("email")
@click.pass_context
def verify_email(ctx, email: str):
    """Verify an email address."""
    _run(_auth_call(ctx, "verify_email", email, done="Email vérifié"))


@cli.command("request-verification")
@click.pass_context
def request_verification(ctx):
    """Ask the backend to send a verification email."""
    _run(_auth_call(ctx, "request_email_verification", done="Email de vérification envoyé"))


@cli.command("reset-password")
@click.argument("email")
@click.pass_context
def reset_password(ctx, email: str):
    """Request a password reset email."""
    _run(_auth_call(ctx, "request_password_reset", email, done="Email de réinitialisation envoyé"))


async def _auth_call(ctx, method: str, *args, done: str):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        await getattr(manager.auth_service, method)(*args)
    console.print(f"[green]✓ {done}[/green]")


# ---------------------------------------------------------------------------
# Blog
# ---------------------------------------------------------------------------


@cli.group()
def blog():
    """Manage blog posts."""


@blog.command("list")
@click.option("--status", type=click.Choice([s.value for s in BlogStatus]), default=None)
@click.option("--category", default="", help="Category id")
@click.option("--author", default="", help="Author id")
@click.option("--featured/--not-featured", default=None, help="Only (non) featured posts")
@click.option("--search", "-q", default="", help="Search text")
@click.option("--ordering", default="-created_at", help="Sort order, e.g. -views_count")
@click.pass_context
def blog_list(ctx, status, category, author, featured, search, ordering):
    """List blog posts."""
    _run(_blog_list_async(ctx, status, category, author, featured, search, ordering))


async def _blog_list_async(ctx, status, category, author, featured, search, ordering):
    from boardadmin.pages.blog import BlogListPage
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        page = BlogListPage(BlogService(client))
        page.filters = page.filters.model_copy(update={
            "status": status or "",
            "category": category,
            "author": author,
            "is_featured": "" if featured is None else str(featured).lower(),
            "search": search,
            "ordering": ordering,
        })
        await page.load()

    if page.error:
        console.print(render.error_banner(page.error))
        raise SystemExit(1)
    if page.stats:
        console.print(render.blog_stats_panel(page.stats))
    if not page.posts:
        console.print("[yellow]Aucun article trouvé[/yellow]")
        return
    console.print(render.blog_posts_table(page.posts))


@blog.command("show")
@click.argument("slug")
@click.pass_context
def blog_show(ctx, slug: str):
    """Show a blog post."""
    _run(_blog_show_async(ctx, slug))


async def _blog_show_async(ctx, slug: str):
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        post = await BlogService(client).get_blog_post(slug)
    console.print(render.blog_post_panel(post))
    settings: Settings = ctx.obj["settings"]
    console.print(f"[dim]{settings.public_site_url.rstrip('/')}/blog/{post.slug}[/dim]")


def _post_options(func):
    options = [
        click.option("--title", default=None),
        click.option("--content", default=None),
        click.option("--content-file", type=click.Path(exists=True, dir_okay=False), default=None),
        click.option("--excerpt", default=None),
        click.option("--category", default=None, help="Category id"),
        click.option("--tags", default=None, help="Comma-separated tags"),
        click.option("--status", type=click.Choice([s.value for s in BlogStatus]), default=None),
        click.option("--featured/--not-featured", default=None),
        click.option("--image", type=click.Path(exists=True, dir_okay=False), default=None),
        click.option("--meta", "meta_description", default=None, help="Meta description"),
        click.option("--publish-date", default=None, help="YYYY-MM-DDTHH:MM"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _fill_form(page, values: dict) -> bool:
    """Apply CLI options to a form page. Returns False if the image was rejected."""
    from boardadmin.pages.forms import ImageUpload

    values.pop("content_file", None)
    image = values.pop("image", None)
    featured = values.pop("featured", None)
    if featured is not None:
        page.set_field("is_featured", featured)
    status = values.pop("status", None)
    if status is not None:
        page.set_field("status", BlogStatus(status))
    for name, value in values.items():
        if value is not None:
            page.set_field(name, value)
    if image:
        return page.select_image(ImageUpload.from_path(Path(image)))
    return True


def _print_form_errors(page):
    for field, message in page.field_errors.items():
        console.print(f"[red]{field}: {message}[/red]")
    if page.error:
        console.print(render.error_banner(page.error))


@blog.command("create")
@_post_options
@click.pass_context
def blog_create(ctx, **values):
    """Create a blog post."""
    if values.get("content_file"):
        values["content"] = Path(values["content_file"]).read_text()
    _run(_blog_create_async(ctx, values))


async def _blog_create_async(ctx, values: dict):
    from boardadmin.pages.blog import BlogCreatePage
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        page = BlogCreatePage(BlogService(client))
        await page.mount()
        if not _fill_form(page, values):
            _print_form_errors(page)
            raise SystemExit(1)
        ok = await page.submit()

    if not ok:
        _print_form_errors(page)
        raise SystemExit(1)
    console.print(f"[green]✓ Article créé: {page.form.title}[/green]")


@blog.command("edit")
@click.argument("slug")
@_post_options
@click.pass_context
def blog_edit(ctx, slug: str, **values):
    """Edit a blog post. Options left out keep their current value."""
    if values.get("content_file"):
        values["content"] = Path(values["content_file"]).read_text()
    _run(_blog_edit_async(ctx, slug, values))


async def _blog_edit_async(ctx, slug: str, values: dict):
    from boardadmin.pages.blog import BlogEditPage
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        page = BlogEditPage(BlogService(client), slug)
        await page.mount()
        if page.error:
            console.print(render.error_banner(page.error))
            raise SystemExit(1)
        if not _fill_form(page, values):
            _print_form_errors(page)
            raise SystemExit(1)
        ok = await page.submit()

    if not ok:
        _print_form_errors(page)
        raise SystemExit(1)
    console.print(f"[green]✓ Article mis à jour: {slug}[/green]")


async def _blog_action_async(ctx, slug: str, yes: bool, request):
    from boardadmin.pages.blog import BlogListPage
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        service = BlogService(client)
        page = BlogListPage(service)
        post = await service.get_blog_post(slug)
        request(page, post)
        confirmed = await _confirm(page, yes)

    if not confirmed:
        console.print("[dim]Annulé[/dim]")
        return
    _check_action(page)
    console.print("[green]✓ Fait[/green]")


@blog.command("delete")
@click.argument("slug")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def blog_delete(ctx, slug: str, yes: bool):
    """Delete a blog post."""
    _run(_blog_action_async(ctx, slug, yes, lambda page, post: page.request_delete(post)))


@blog.command("status")
@click.argument("slug")
@click.argument("status", type=click.Choice([s.value for s in BlogStatus]))
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def blog_status(ctx, slug: str, status: str, yes: bool):
    """Change the status of a blog post."""
    _run(_blog_action_async(
        ctx, slug, yes,
        lambda page, post: page.request_status_change(post, BlogStatus(status)),
    ))


@blog.command("feature")
@click.argument("slug")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def blog_feature(ctx, slug: str, yes: bool):
    """Toggle the featured flag of a blog post."""
    _run(_blog_action_async(ctx, slug, yes, lambda page, post: page.request_toggle_featured(post)))


@blog.command("categories")
@click.pass_context
def blog_categories(ctx):
    """List blog categories."""
    _run(_blog_categories_async(ctx))


async def _blog_categories_async(ctx):
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        categories = await BlogService(client).get_categories()

    table = Table(title="Catégories")
    table.add_column("ID", justify="right")
    table.add_column("Nom")
    for category in categories:
        table.add_row(str(category.id), category.name)
    console.print(table)


@blog.command("stats")
@click.pass_context
def blog_stats(ctx):
    """Show blog statistics."""
    _run(_blog_stats_async(ctx))


async def _blog_stats_async(ctx):
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        stats = await BlogService(client).get_blog_stats()
    console.print(render.blog_stats_panel(stats))


@blog.command("search")
@click.argument("params", nargs=-1)
@click.pass_context
def blog_search(ctx, params: tuple[str, ...]):
    """Advanced post search with key=value parameters."""
    _run(_blog_search_async(ctx, _parse_pairs(params)))


async def _blog_search_async(ctx, params: dict):
    from boardadmin.services.blog import BlogService

    async with _client(ctx) as client:
        posts = await BlogService(client).search_posts(params)
    console.print(render.blog_posts_table(posts))


# ---------------------------------------------------------------------------
# Recruiters
# ---------------------------------------------------------------------------


@cli.group()
def recruiters():
    """Moderate recruiter accounts."""


@recruiters.command("list")
@click.option("--status", type=click.Choice([s.value for s in AccountStatus]), default="")
@click.option("--country", default="", help="Country id")
@click.option("--sector", type=click.Choice([s.value for s in Sector]), default="")
@click.option("--size", type=click.Choice([s.value for s in CompanySize]), default="")
@click.option("--search", "-q", default="", help="Search text")
@click.option("--page", default=1, help="Page number")
@click.pass_context
def recruiters_list(ctx, status, country, sector, size, search, page):
    """List recruiters with the pending moderation queue."""
    _run(_recruiters_list_async(ctx, status, country, sector, size, search, page, pending_only=False))


@recruiters.command("pending")
@click.pass_context
def recruiters_pending(ctx):
    """Show recruiters awaiting validation."""
    _run(_recruiters_list_async(ctx, "", "", "", "", "", 1, pending_only=True))


async def _recruiters_list_async(ctx, status, country, sector, size, search, page_number, pending_only):
    from boardadmin.pages.recruiters import RecruitersPage
    from boardadmin.services.recruiter import RecruiterService

    settings: Settings = ctx.obj["settings"]
    async with _client(ctx) as client:
        page = RecruitersPage(
            RecruiterService(client),
            page_size=settings.page_size,
            pending_page_size=settings.pending_page_size,
        )
        page.filters = page.filters.model_copy(update={
            "account_status": status,
            "country": country,
            "sector": sector,
            "company_size": size,
        })
        page.search_query = search
        page.pagination = page.pagination.model_copy(update={"page": page_number})
        await page.load()

    if page.error:
        console.print(render.error_banner(page.error))

    console.print(render.pending_stats_panel(page.pending_stats()))
    if page.pending_recruiters:
        console.print(render.recruiters_table(page.pending_recruiters))
    if not pending_only:
        console.print(render.recruiters_table(page.recruiters, page.pagination))


@recruiters.command("show")
@click.argument("recruiter_id")
@click.pass_context
def recruiters_show(ctx, recruiter_id: str):
    """Show one recruiter."""
    _run(_recruiters_show_async(ctx, recruiter_id))


async def _recruiters_show_async(ctx, recruiter_id: str):
    from boardadmin.pages.recruiters import RecruiterDetailPage, public_profile_url
    from boardadmin.services.recruiter import RecruiterService

    async with _client(ctx) as client:
        page = RecruiterDetailPage(RecruiterService(client), recruiter_id)
        await page.load()

    if page.error or page.recruiter is None:
        console.print(render.error_banner(page.error or "Recruteur non trouvé"))
        raise SystemExit(1)
    settings: Settings = ctx.obj["settings"]
    console.print(render.recruiter_panel(
        page.recruiter,
        public_profile_url(settings.public_site_url, page.recruiter),
    ))


async def _recruiters_validate_async(ctx, recruiter_id: str, action: ValidationAction, yes: bool):
    from boardadmin.pages.recruiters import RecruiterDetailPage
    from boardadmin.services.recruiter import RecruiterService

    async with _client(ctx) as client:
        page = RecruiterDetailPage(RecruiterService(client), recruiter_id)
        await page.load()
        if page.recruiter is None:
            console.print(render.error_banner(page.error or "Recruteur non trouvé"))
            raise SystemExit(1)
        page.request_validation(action)
        confirmed = await _confirm(page, yes)

    if not confirmed:
        console.print("[dim]Annulé[/dim]")
        return
    _check_action(page)
    console.print(render.recruiter_panel(page.recruiter))


@recruiters.command("approve")
@click.argument("recruiter_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def recruiters_approve(ctx, recruiter_id: str, yes: bool):
    """Approve a recruiter account."""
    _run(_recruiters_validate_async(ctx, recruiter_id, ValidationAction.APPROVE, yes))


@recruiters.command("reject")
@click.argument("recruiter_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def recruiters_reject(ctx, recruiter_id: str, yes: bool):
    """Reject a recruiter account."""
    _run(_recruiters_validate_async(ctx, recruiter_id, ValidationAction.REJECT, yes))


@recruiters.command("stats")
@click.pass_context
def recruiters_stats(ctx):
    """Show recruiter validation statistics."""
    _run(_recruiters_stats_async(ctx))


async def _recruiters_stats_async(ctx):
    from boardadmin.services.recruiter import RecruiterService

    async with _client(ctx) as client:
        data = await RecruiterService(client).get_recruiter_stats()
    console.print(render.stats_table("Recruteurs", data or {}))


@recruiters.command("search")
@click.argument("params", nargs=-1)
@click.pass_context
def recruiters_search(ctx, params: tuple[str, ...]):
    """Advanced recruiter search with key=value parameters."""
    _run(_recruiters_search_async(ctx, _parse_pairs(params)))


async def _recruiters_search_async(ctx, params: dict):
    from boardadmin.adapters.recruiters import normalize_recruiter_listing
    from boardadmin.services.recruiter import RecruiterService

    async with _client(ctx) as client:
        data = await RecruiterService(client).search_recruiters_advanced(params)
    console.print(render.recruiters_table(normalize_recruiter_listing(data).recruiters))


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


@cli.group()
def sessions():
    """Manage admin sessions."""


@sessions.command("list")
@click.pass_context
def sessions_list(ctx):
    """List active sessions."""
    _run(_sessions_list_async(ctx))


async def _sessions_list_async(ctx):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        manager.initialize(start_refresher=False)
        items = await manager.get_sessions()

    table = Table(title=f"Sessions ({len(items)})")
    table.add_column("ID")
    table.add_column("IP")
    table.add_column("Navigateur", width=40)
    table.add_column("Dernière activité")
    table.add_column("Courante")
    for item in items:
        table.add_row(
            str(item.id),
            item.ip_address or "",
            (item.user_agent or "")[:40],
            format_date(item.last_activity),
            "✓" if item.is_current else "",
        )
    console.print(table)


@sessions.command("invalidate")
@click.argument("session_id")
@click.pass_context
def sessions_invalidate(ctx, session_id: str):
    """Invalidate one session."""
    _run(_sessions_call(ctx, "invalidate_session", session_id))


@sessions.command("logout-all")
@click.confirmation_option(prompt="Déconnecter toutes les sessions ?")
@click.pass_context
def sessions_logout_all(ctx):
    """Log out every session of this admin."""
    _run(_sessions_call(ctx, "logout_all_sessions"))


@sessions.command("force-logout")
@click.confirmation_option(prompt="Forcer la déconnexion ?")
@click.pass_context
def sessions_force_logout(ctx):
    """Force the current session out."""
    _run(_sessions_call(ctx, "force_logout"))


async def _sessions_call(ctx, method: str, *args):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        manager.initialize(start_refresher=False)
        await getattr(manager, method)(*args)
        logged_out = manager.user is None
    console.print("[green]✓ Fait[/green]")
    if logged_out:
        console.print("[yellow]Session courante fermée, reconnectez-vous[/yellow]")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@cli.group()
def profile():
    """View and edit the admin profile."""


@profile.command("show")
@click.option("--stats", "with_stats", is_flag=True, help="Include profile statistics")
@click.pass_context
def profile_show(ctx, with_stats: bool):
    """Show the admin profile."""
    _run(_profile_show_async(ctx, with_stats))


async def _profile_show_async(ctx, with_stats: bool):
    from boardadmin.services.profile import ProfileService

    async with _client(ctx) as client:
        service = ProfileService(client)
        data = await service.get_profile()
        stats = await service.get_profile_stats() if with_stats else None

    console.print(render.stats_table("Profil", data or {}))
    if stats:
        console.print(render.stats_table("Statistiques du profil", stats))


@profile.command("update")
@click.argument("fields", nargs=-1, required=True)
@click.pass_context
def profile_update(ctx, fields: tuple[str, ...]):
    """Update profile fields given as key=value."""
    _run(_profile_update_async(ctx, _parse_pairs(fields)))


async def _profile_update_async(ctx, data: dict):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        manager.initialize(start_refresher=False)
        await manager.update_profile(data)
    console.print("[green]✓ Profil mis à jour[/green]")


@profile.command("password")
@click.option("--old", "old_password", prompt="Mot de passe actuel", hide_input=True)
@click.option("--new", "new_password", prompt="Nouveau mot de passe", hide_input=True)
@click.option("--confirm", "confirm_password", prompt="Confirmer le mot de passe", hide_input=True)
@click.pass_context
def profile_password(ctx, old_password: str, new_password: str, confirm_password: str):
    """Change the admin password."""
    from boardadmin.pages.forms import validate_password_change

    message = validate_password_change(new_password, confirm_password)
    if message:
        console.print(f"[red]{message}[/red]")
        raise SystemExit(1)
    _run(_profile_password_async(ctx, old_password, new_password))


async def _profile_password_async(ctx, old_password: str, new_password: str):
    async with _client(ctx) as client:
        manager = AuthManager(client)
        manager.initialize(start_refresher=False)
        await manager.change_password({"old_password": old_password, "new_password": new_password})
    console.print("[green]✓ Mot de passe modifié[/green]")


@profile.command("avatar")
@click.argument("image_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def profile_avatar(ctx, image_path: str):
    """Upload a new avatar image."""
    from boardadmin.pages.forms import ImageUpload, validate_image

    upload = ImageUpload.from_path(Path(image_path))
    message = validate_image(upload)
    if message:
        console.print(f"[red]{message}[/red]")
        raise SystemExit(1)
    _run(_profile_avatar_async(ctx, upload))


async def _profile_avatar_async(ctx, upload):
    from boardadmin.services.profile import ProfileService

    async with _client(ctx) as client:
        await ProfileService(client).update_avatar(upload)
    console.print("[green]✓ Avatar mis à jour[/green]")


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name", required=False)
@click.pass_context
def stats(ctx, name: str | None):
    """Show platform statistics. Without NAME, list the available ones."""
    from boardadmin.services.stats import STAT_ENDPOINTS

    if not name:
        table = Table(title="Statistiques disponibles")
        table.add_column("Nom")
        table.add_column("Endpoint")
        for key, path in STAT_ENDPOINTS.items():
            table.add_row(key, path)
        console.print(table)
        return
    _run(_stats_async(ctx, name))


async def _stats_async(ctx, name: str):
    from boardadmin.services.stats import StatsService

    async with _client(ctx) as client:
        data = await StatsService(client).get_stat(name)
    console.print(render.stats_table(name, data))


if __name__ == "__main__":
    cli()
