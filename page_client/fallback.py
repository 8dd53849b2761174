"""Content rendered when the API cannot be reached."""

from __future__ import annotations

from features.site.schemas import ContactInfo, ContentItem, HeroSection, PageContent

FALLBACK_CONTENT = PageContent(
    hero=HeroSection(
        title="New Yuga — Design the future",
        subtitle="Ideas, community, and tools for those who want to create a better era.",
    ),
    features=(
        ContentItem(title="Workshops", desc="Practical sessions on product, mindset, and design."),
        ContentItem(title="Mentorship", desc="1:1 and group coaching for founders and creators."),
        ContentItem(title="Resources", desc="Guides, playbooks, and templates to ship faster."),
    ),
    services=(
        ContentItem(title="Strategy & Consulting", desc="Market-fit, product strategy, and launch plans."),
        ContentItem(title="Design Sprints", desc="Rapid prototyping with measurable outcomes."),
        ContentItem(title="Community Building", desc="Member programs, forums, and events."),
        ContentItem(title="Courses", desc="Skill-based short courses for creators."),
    ),
    blog=(
        "Designing for a kinder web — 5 practical steps",
        "Micro-habits that scale — for founders and teams",
        "Why slow growth wins — the long-game playbook",
    ),
    about=(
        "New Yuga stands for intentional progress — a curated space where technology "
        "and mindful practices meet."
    ),
    contact=ContactInfo(email="hello@newyuga.example", social="@newyuga"),
)

__all__ = ["FALLBACK_CONTENT"]
