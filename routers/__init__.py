# routers/__init__.py
from .admin_login import router as admin_login_router
from .admins import router as admins_router
from .customers import router as customers_router
from .properties import router as properties_router
from .proposals import router as proposals_router

# Login routers first so "/admins/login" is not captured by "/admins/{admin_id}".
all_routers = [
     admin_login_router,
     admins_router,
     customers_router,
     properties_router,
     proposals_router,
]

__all__ = [
     "admin_login_router",
     "admins_router",
     "customers_router",
     "properties_router",
     "proposals_router",
     "all_routers",
]
