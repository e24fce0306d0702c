"""
FastAPI routers grouped by concern (menu JSON API, landing page).

Each module exposes an APIRouter included by the application factory.
"""
