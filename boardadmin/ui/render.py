"""Rich renderables for the admin screens."""

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from boardadmin.models.blog import BlogPost, BlogStats
from boardadmin.models.recruiter import Pagination, PendingStats, Recruiter
from boardadmin.ui.labels import (
    account_status_label,
    blog_status_label,
    company_size_label,
    format_date,
    sector_label,
)


def status_badge(label_and_style: tuple[str, str]) -> Text:
    label, style = label_and_style
    return Text(label, style=f"bold {style}")


def error_banner(message: str) -> Panel:
    return Panel(Text(message, style="red"), title="Erreur", border_style="red")


def blog_stats_panel(stats: BlogStats) -> Panel:
    return Panel(
        f"[bold]Total Articles:[/bold] {stats.total_posts}    "
        f"[bold]Total Vues:[/bold] {stats.total_views}",
        title="Statistiques",
    )


def blog_posts_table(posts: list[BlogPost]) -> Table:
    table = Table(title=f"Articles ({len(posts)})")
    table.add_column("Slug", width=24)
    table.add_column("Titre", width=40)
    table.add_column("Statut", width=12)
    table.add_column("Catégorie", width=16)
    table.add_column("Publication", width=16)
    table.add_column("Vues", justify="right")
    table.add_column("★", width=2)

    for post in posts:
        table.add_row(
            post.slug[:24],
            post.title[:40],
            status_badge(blog_status_label(post.status)),
            post.category_name or "",
            format_date(post.publish_date) if post.publish_date else "",
            str(post.views_count),
            "★" if post.is_featured else "",
        )
    return table


def blog_post_panel(post: BlogPost) -> Panel:
    label, style = blog_status_label(post.status)
    lines = [
        f"[bold]Statut:[/bold] [{style}]{label}[/{style}]",
        f"[bold]Auteur:[/bold] {post.author.display_name if post.author else 'Inconnu'}",
        f"[bold]Catégorie:[/bold] {post.category_name or '-'}",
        f"[bold]Tags:[/bold] {', '.join(post.tags) if post.tags else '-'}",
        f"[bold]Publication:[/bold] {format_date(post.publish_date)}",
        f"[bold]Vues:[/bold] {post.views_count}",
        "",
        post.excerpt or "Aucun extrait disponible",
    ]
    return Panel("\n".join(lines), title=post.title)


def recruiters_table(recruiters: list[Recruiter], pagination: Pagination | None = None) -> Table:
    title = f"Recruteurs ({len(recruiters)})"
    if pagination is not None:
        title = f"Recruteurs: page {pagination.page}/{pagination.num_pages} ({pagination.total} au total)"
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Utilisateur", width=18)
    table.add_column("Entreprise", width=24)
    table.add_column("Secteur", width=14)
    table.add_column("Taille", width=22)
    table.add_column("Statut", width=12)
    table.add_column("Inscrit le", width=10)

    for recruiter in recruiters:
        profile = recruiter.profile
        table.add_row(
            str(recruiter.id),
            recruiter.username,
            profile.company_name,
            sector_label(profile.sector),
            company_size_label(profile.company_size),
            status_badge(account_status_label(profile.account_status)),
            format_date(recruiter.created_at, with_time=False) if recruiter.created_at else "",
        )
    return table


def pending_stats_panel(stats: PendingStats) -> Panel:
    return Panel(
        f"[bold]En attente:[/bold] {stats.total}    "
        f"[bold]Entreprise:[/bold] {stats.with_company_info}    "
        f"[bold]Contact:[/bold] {stats.with_contact_info}    "
        f"[bold]Secteur:[/bold] {stats.with_sector_info}    "
        f"[bold]Incomplets:[/bold] {stats.incomplete}",
        title="File de modération",
    )


def recruiter_panel(recruiter: Recruiter, public_url: str | None = None) -> Panel:
    profile = recruiter.profile
    label, style = account_status_label(profile.account_status)
    full_name = f"{recruiter.first_name} {recruiter.last_name}".strip()
    lines = [
        f"[bold]Statut:[/bold] [{style}]{label}[/{style}]",
        f"[bold]Utilisateur:[/bold] {recruiter.username} ({recruiter.email})",
        f"[bold]Nom:[/bold] {full_name or '-'}",
        f"[bold]Téléphone:[/bold] {recruiter.phone or '-'}",
        f"[bold]Secteur:[/bold] {sector_label(profile.sector) or '-'}",
        f"[bold]Taille:[/bold] {company_size_label(profile.company_size) or '-'}",
        f"[bold]Site web:[/bold] {profile.website or '-'}",
        f"[bold]Adresse:[/bold] {profile.address or '-'}",
        f"[bold]Contact:[/bold] {profile.contact_email or '-'} / {profile.contact_phone or '-'}",
        f"[bold]Inscrit le:[/bold] {format_date(recruiter.created_at)}",
    ]
    if profile.description:
        lines += ["", profile.description]
    if public_url:
        lines += ["", f"[dim]Profil public: {public_url}[/dim]"]
    return Panel("\n".join(lines), title=profile.company_name or recruiter.display_name)


def stats_table(name: str, data: dict[str, Any]) -> Table:
    table = Table(title=name)
    table.add_column("Clé")
    table.add_column("Valeur")
    for key, value in data.items():
        table.add_row(str(key), str(value))
    return table
