"""Static marketing copy served by ``GET /api/home``."""

from __future__ import annotations

from features.site.schemas import ContactInfo, ContentItem, HeroSection, PageContent

HOME_CONTENT = PageContent(
    hero=HeroSection(
        title="New Yuga — Design the future, live the change",
        subtitle=(
            "Ideas, community, and tools for those who want to create a better era — "
            "blending tech, growth, and mindful living."
        ),
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
        "New Yuga stands for intentional progress — a curated space where technology and "
        "mindful practices meet. We build tools, run programs, and host conversations that "
        "help people and teams move from idea to impact."
    ),
    contact=ContactInfo(email="hello@newyuga.example", social="@newyuga"),
)

__all__ = ["HOME_CONTENT"]
