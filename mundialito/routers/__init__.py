from mundialito.routers.health import router as health_router
from mundialito.routers.matches import router as matches_router
from mundialito.routers.standings import router as standings_router
from mundialito.routers.teams import router as teams_router

__all__ = ["health_router", "teams_router", "matches_router", "standings_router"]
