"""Tests for page rendering."""

from __future__ import annotations

from features.site.content import HOME_CONTENT
from features.site.schemas import ContactInfo, ContentItem, PageContent
from page_client.fallback import FALLBACK_CONTENT
from page_client.render import PageRegions, render_page


def _hostile_content() -> PageContent:
    return HOME_CONTENT.model_copy(
        update={
            "features": (ContentItem(title='<script>alert("x")</script>', desc="Fish & Chips"),),
            "services": (ContentItem(title='"quoted"', desc="<b>bold</b>"),),
            "blog": ("<img src=x onerror=alert(1)>",),
            "contact": ContactInfo(email='x"><script>@evil.example', social="&copy;"),
        }
    )


def test_render_fills_every_region():
    regions = PageRegions()

    render_page(HOME_CONTENT, regions)

    assert "New Yuga — Design the future, live the change" in regions.hero.markup
    assert regions.features.markup.count('class="feature"') == 3
    assert regions.services.markup.count('class="feature"') == 4
    assert regions.blog.markup.count("<li>") == 3
    assert "hello@newyuga.example" in regions.about.markup
    assert "@newyuga" in regions.about.markup


def test_text_is_escaped():
    regions = PageRegions()

    render_page(_hostile_content(), regions)

    assert "<script>" not in regions.features.markup
    assert "&lt;script&gt;" in regions.features.markup
    assert "Fish &amp; Chips" in regions.features.markup
    assert "&#34;quoted&#34;" in regions.services.markup
    assert "<b>" not in regions.services.markup
    assert "<img" not in regions.blog.markup
    assert "<script>" not in regions.about.markup
    assert "&amp;copy;" in regions.about.markup


def test_wrapper_markup_is_literal():
    regions = PageRegions()

    render_page(HOME_CONTENT, regions)

    assert regions.features.markup.startswith('<div class="feature"><strong>Workshops</strong>')
    assert '<a href="mailto:hello@newyuga.example">' in regions.about.markup


def test_render_replaces_previous_markup():
    regions = PageRegions()
    render_page(HOME_CONTENT, regions)

    render_page(FALLBACK_CONTENT, regions)

    assert "live the change" not in regions.hero.markup
    assert "New Yuga — Design the future" in regions.hero.markup
    assert regions.features.markup.count('class="feature"') == 3
    assert regions.hero.renders == 2


def test_render_is_idempotent():
    regions = PageRegions()
    render_page(HOME_CONTENT, regions)
    first = {name: getattr(regions, name).markup for name in ("hero", "features", "services", "blog", "about")}

    render_page(HOME_CONTENT, regions)

    assert {name: getattr(regions, name).markup for name in first} == first
