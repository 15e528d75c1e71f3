# server.py
"""
Standalone entry point for the Grimoire HUD.
Builds the controller against an in-memory host, watches the world clock
and serves the HTTP control surface until interrupted.
"""
import asyncio
import logging

import uvicorn

import config
from control_api.main import create_app
from hud.controller import HudController
from hud.database import PositionStore
from hud.providers import StandaloneHost
from hud.settings import load_settings
from hud.ticker import ClockWatcher, RecomputeChannel

# --- Logging Setup ---
log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
log_handlers = [
    logging.FileHandler("hud.log"),
    logging.StreamHandler()
]
logging.basicConfig(
    level=logging.INFO,
    format=log_format,
    handlers=log_handlers
)
log = logging.getLogger(__name__)


async def _advance_clock_loop(host: StandaloneHost, interval_seconds: float, world_seconds: int):
    """Moves the standalone host's world clock forward, standing in for a real host."""
    log.info("Clock advance task started. %d world seconds every %.2f s.", world_seconds, interval_seconds)
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            host.advance(world_seconds)
        except asyncio.CancelledError:
            log.info("Clock advance task cancelled.")
            break


async def main():
    """Main entry point."""
    log.info("Starting Grimoire HUD...")

    # 1. Settings fail loudly here if the calendar is unusable
    settings = load_settings()
    host = StandaloneHost(scene_name="Candlekeep")
    controller = HudController(host, settings)

    # 2. One channel for every change source, the controller subscribes once
    channel = RecomputeChannel()
    channel.subscribe(controller.on_change)
    watcher = ClockWatcher(host.get_world_clock_seconds, channel)

    position_store = PositionStore(config.DB_NAME)
    app = create_app(controller, position_store)
    server = uvicorn.Server(uvicorn.Config(app, host=config.HOST, port=config.PORT, log_level="info"))

    # 3. Background tasks
    watcher.start(config.TICKER_INTERVAL_SECONDS)
    advance_task = asyncio.create_task(
        _advance_clock_loop(host, config.TICKER_INTERVAL_SECONDS, config.WORLD_SECONDS_PER_TICK)
    )

    try:
        await server.serve()
    except asyncio.CancelledError:
        log.info("Main server task cancelled.")
    finally:
        log.info("Shutting down HUD...")
        advance_task.cancel()
        await watcher.stop()
        log.info("HUD shutdown complete.")

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("HUD stopped manually.")
