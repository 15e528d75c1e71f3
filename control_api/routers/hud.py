from dataclasses import asdict
from typing import Dict

from fastapi import APIRouter, HTTPException, Request

from hud.controller import HudController, ViewModel
from hud.database import PositionStore, ScreenPosition
from hud.presenter import present, truncation_limit
from ..models.hud import FlashRequest, HudSnapshot, MinifyState, OverrideUpdate, Position

router = APIRouter(prefix="/hud", tags=["hud"])

def get_controller(request: Request) -> HudController:
    return request.app.state.controller

def get_store(request: Request) -> PositionStore:
    return request.app.state.position_store

def _snapshot(controller: HudController, view_model: ViewModel) -> Dict:
    if view_model is None:
        raise HTTPException(status_code=404, detail="HUD is disabled")
    view = present(view_model, controller.settings.theme, truncation_limit(view_model.flags))
    return {"view": view, "view_model": asdict(view_model)}

@router.get("/", response_model=HudSnapshot)
async def get_hud(request: Request):
    """Get the current HUD view"""
    controller = get_controller(request)
    view_model = controller.view_model or controller.refresh("manual")
    return _snapshot(controller, view_model)

@router.post("/refresh", response_model=HudSnapshot)
async def refresh_hud(request: Request):
    """Recompute the HUD from the host"""
    controller = get_controller(request)
    return _snapshot(controller, controller.refresh("manual"))

@router.get("/overrides")
async def get_overrides(request: Request):
    """Get all active overrides"""
    return dict(get_controller(request).overrides)

@router.put("/overrides/{key}", response_model=HudSnapshot)
async def set_override(key: str, update: OverrideUpdate, request: Request):
    """Set or (with a null value) clear an override"""
    controller = get_controller(request)
    controller.set_override(key, update.value)
    return _snapshot(controller, controller.view_model)

@router.delete("/overrides/{key}", response_model=HudSnapshot)
async def clear_override(key: str, request: Request):
    """Clear an override"""
    controller = get_controller(request)
    if key not in controller.overrides:
        raise HTTPException(status_code=404, detail="Override not found")
    controller.set_override(key, None)
    return _snapshot(controller, controller.view_model)

@router.post("/flash", response_model=HudSnapshot)
async def flash_message(flash: FlashRequest, request: Request):
    """Show a message in place of the date for a short time"""
    controller = get_controller(request)
    controller.flash_message(flash.text, flash.duration_ms)
    return _snapshot(controller, controller.view_model)

@router.post("/minify", response_model=MinifyState)
async def toggle_minify(request: Request):
    """Toggle the minimized layout"""
    return {"is_minified": get_controller(request).toggle_minified()}

@router.get("/position", response_model=Position)
async def get_position(request: Request):
    """Get the saved screen position"""
    position = await get_store(request).get_position()
    if not position:
        raise HTTPException(status_code=404, detail="No saved position")
    return position

@router.put("/position", response_model=Position)
async def save_position(position: Position, request: Request):
    """Save the screen position"""
    await get_store(request).save_position(ScreenPosition(x=position.x, y=position.y))
    return position
