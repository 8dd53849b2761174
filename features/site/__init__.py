"""Marketing site content and form submission feature."""

from features.site.routes import router

__all__ = ["router"]
