"""Tests for the command line interface."""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from boardadmin.cli import cli
from boardadmin.models.blog import BlogPost, BlogStats
from boardadmin.services.base import ServiceError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def db_args(tmp_path):
    return ["--db", str(tmp_path / "cli.db"), "--api-url", "http://backend.test"]


def test_stats_lists_endpoints(runner, db_args):
    result = runner.invoke(cli, [*db_args, "stats"])

    assert result.exit_code == 0
    assert "analytics-summary" in result.output


def test_whoami_when_logged_out(runner, db_args):
    result = runner.invoke(cli, [*db_args, "whoami"])

    assert result.exit_code == 0
    assert "Non connecté" in result.output


def test_password_mismatch_is_caught_locally(runner, db_args):
    result = runner.invoke(
        cli,
        [*db_args, "profile", "password", "--old", "a", "--new", "abcdefgh", "--confirm", "abcdefgx"],
    )

    assert result.exit_code == 1
    assert "ne correspondent pas" in result.output


def test_service_error_exits_with_banner(runner, db_args):
    with patch(
        "boardadmin.services.stats.StatsService.get_stat",
        AsyncMock(side_effect=ServiceError("Ressource non trouvée")),
    ):
        result = runner.invoke(cli, [*db_args, "stats", "system"])

    assert result.exit_code == 1
    assert "Ressource non trouvée" in result.output


def test_search_rejects_malformed_pairs(runner, db_args):
    result = runner.invoke(cli, [*db_args, "blog", "search", "status"])

    assert result.exit_code != 0
    assert "key=value" in result.output


@pytest.fixture
def blog_service_methods():
    """Patch the blog service so no request leaves the process."""
    mocks = {
        "get_blog_post": AsyncMock(return_value=BlogPost(slug="bienvenue", title="Bienvenue")),
        "delete_blog_post": AsyncMock(return_value=None),
        "get_blog_posts": AsyncMock(side_effect=ServiceError("Erreur interne du serveur")),
        "get_categories": AsyncMock(return_value=[]),
        "get_blog_stats": AsyncMock(return_value=BlogStats()),
    }
    with patch.multiple("boardadmin.services.blog.BlogService", **mocks):
        yield mocks


def test_delete_succeeds_even_if_reload_fails(runner, db_args, blog_service_methods):
    result = runner.invoke(cli, [*db_args, "blog", "delete", "bienvenue", "--yes"])

    assert result.exit_code == 0
    blog_service_methods["delete_blog_post"].assert_awaited_once_with("bienvenue")
    assert "Action effectuée" in result.output


def test_failed_delete_exits_with_banner(runner, db_args, blog_service_methods):
    blog_service_methods["delete_blog_post"].side_effect = ServiceError("Accès refusé. Permissions insuffisantes.")

    result = runner.invoke(cli, [*db_args, "blog", "delete", "bienvenue", "--yes"])

    assert result.exit_code == 1
    assert "Accès refusé" in result.output
