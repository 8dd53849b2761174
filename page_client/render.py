"""Render page content into the five display regions.

Every text field goes through Jinja2 autoescaping; only the wrapper markup in
the templates below is trusted literally.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jinja2 import DictLoader, Environment, StrictUndefined

from features.site.schemas import PageContent

_TEMPLATES = {
    "hero.html": (
        '<h1 id="hero-title">{{ hero.title }}</h1>\n'
        '<p id="hero-desc">{{ hero.subtitle }}</p>'
    ),
    "items.html": (
        "{% for item in items %}"
        '<div class="feature"><strong>{{ item.title }}</strong>'
        '<div class="muted">{{ item.desc }}</div></div>\n'
        "{% endfor %}"
    ),
    "blog.html": "{% for post in posts %}<li>{{ post }}</li>\n{% endfor %}",
    "about.html": (
        '<p id="about-text">{{ about }}</p>\n'
        '<p id="contact-info">Email: <a href="mailto:{{ contact.email }}">{{ contact.email }}</a>'
        " — Social: {{ contact.social }}</p>"
    ),
}

_env = Environment(
    loader=DictLoader(_TEMPLATES),
    autoescape=True,
    undefined=StrictUndefined,
    trim_blocks=True,
)


@dataclass
class Region:
    """A display area whose markup is only ever replaced wholesale."""

    name: str
    markup: str = ""
    renders: int = field(default=0, compare=False)

    def replace(self, markup: str) -> None:
        self.markup = markup
        self.renders += 1


@dataclass
class PageRegions:
    hero: Region = field(default_factory=lambda: Region("hero"))
    features: Region = field(default_factory=lambda: Region("feature-list"))
    services: Region = field(default_factory=lambda: Region("services-grid"))
    blog: Region = field(default_factory=lambda: Region("blog-list"))
    about: Region = field(default_factory=lambda: Region("about-contact"))


def render_hero(content: PageContent) -> str:
    return _env.get_template("hero.html").render(hero=content.hero)


def render_items(items) -> str:
    return _env.get_template("items.html").render(items=items)


def render_blog(content: PageContent) -> str:
    return _env.get_template("blog.html").render(posts=content.blog)


def render_about(content: PageContent) -> str:
    return _env.get_template("about.html").render(about=content.about, contact=content.contact)


def render_page(content: PageContent, regions: PageRegions) -> None:
    """Replace the markup of every region from ``content``.

    All markup is rendered before any region is touched, so a template error
    leaves the page as it was.
    """

    rendered = {
        "hero": render_hero(content),
        "features": render_items(content.features),
        "services": render_items(content.services),
        "blog": render_blog(content),
        "about": render_about(content),
    }
    for name, markup in rendered.items():
        getattr(regions, name).replace(markup)


__all__ = ["PageRegions", "Region", "render_page"]
