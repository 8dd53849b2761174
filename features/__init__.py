"""Feature packages exposing FastAPI routers."""
