"""Label builders for pages and users mentioned in summary lines."""

from __future__ import annotations

import html
from urllib.parse import quote

from useractivity.config import Settings


class PlainLinkBuilder:
    """Render targets and actors as escaped text without markup."""

    def page(self, title: str, label: str | None = None) -> str:
        return html.escape(label or title)

    def user(self, name: str, label: str | None = None) -> str:
        return html.escape(label or name)

    def actor(self, name: str, label: str | None = None) -> str:
        return self.user(name, label)


class HtmlLinkBuilder(PlainLinkBuilder):
    """Render targets and actors as anchors pointing at the wiki."""

    def __init__(self, site_url: str, article_path: str = "/wiki/{title}") -> None:
        self.site_url = site_url.rstrip("/")
        self.article_path = article_path

    def url(self, title: str) -> str:
        path = quote(title.replace(" ", "_"), safe=":/")
        return f"{self.site_url}{self.article_path.format(title=path)}"

    def page(self, title: str, label: str | None = None) -> str:
        href = html.escape(self.url(title))
        return f'<a href="{href}">{html.escape(label or title)}</a>'

    def user(self, name: str, label: str | None = None) -> str:
        return self.page(f"User:{name}", label or name)

    def actor(self, name: str, label: str | None = None) -> str:
        href = html.escape(self.url(f"User:{name}"))
        title = html.escape(name)
        return f'<b><a href="{href}" title="{title}">{html.escape(label or name)}</a></b>'


def build_link_builder(settings: Settings) -> PlainLinkBuilder:
    """Return the link builder matching the configured ``SITE_URL``."""

    if settings.site_url:
        return HtmlLinkBuilder(settings.site_url, settings.article_path)
    return PlainLinkBuilder()


__all__ = ["HtmlLinkBuilder", "PlainLinkBuilder", "build_link_builder"]
