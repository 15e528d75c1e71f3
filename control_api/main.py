from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hud.controller import HudController
from hud.database import PositionStore
from .routers import hud


def create_app(controller: HudController, position_store: PositionStore) -> FastAPI:
    app = FastAPI(
        title="Grimoire HUD API",
        description="Control surface for the Grimoire data HUD overlay",
        version="1.0.0"
    )
    app.state.controller = controller
    app.state.position_store = position_store

    # The overlay page is served by the tabletop host, not by us
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Position store lifecycle
    @app.on_event("startup")
    async def startup():
        await position_store.connect()
        controller.refresh("manual")

    @app.on_event("shutdown")
    async def shutdown():
        await position_store.close()

    # Health check
    @app.get("/")
    async def root():
        return {
            "status": "online",
            "service": "Grimoire HUD API",
            "version": "1.0.0",
            "enabled": controller.settings.enable_hud,
        }

    app.include_router(hud.router)
    return app
