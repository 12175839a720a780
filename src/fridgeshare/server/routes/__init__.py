"""API routers, one module per resource."""

from fridgeshare.server.routes import (
    auth,
    categories,
    claims,
    donations,
    groups,
    items,
    share,
    users,
)

ROUTERS = (
    auth.router,
    donations.router,
    items.router,
    categories.router,
    users.router,
    groups.router,
    claims.router,
    share.router,
)

__all__ = ["ROUTERS"]
