"""Shared API dependencies — single import point for all routers.

Re-exports the database session, authentication and hotel-visibility
dependencies so that router modules can import everything they need from
one place::

    from revportal.api.deps import get_db, get_current_user, get_visible_hotel
"""

from revportal.auth.access import get_editable_hotel, get_visible_hotel, visible_hotels_clause
from revportal.auth.dependencies import get_current_user, require_administrator, require_editor
from revportal.database import get_db

__all__ = [
    "get_db",
    "get_current_user",
    "require_editor",
    "require_administrator",
    "get_visible_hotel",
    "get_editable_hotel",
    "visible_hotels_clause",
]
