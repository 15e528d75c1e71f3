from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Dict, Any

import config

class OverrideUpdate(BaseModel):
    value: Optional[str] = None  # null removes the override

class FlashRequest(BaseModel):
    text: str
    duration_ms: int = Field(default=config.FLASH_DURATION_MS, gt=0)

class MinifyState(BaseModel):
    is_minified: bool

class Position(BaseModel):
    x: float
    y: float

    model_config = ConfigDict(from_attributes=True)

class Section(BaseModel):
    key: str
    icon: str
    text: str

class MoonSection(BaseModel):
    name: str
    color: str
    icon: str
    label: str

class PresentedView(BaseModel):
    theme: str
    compact: bool
    minified: bool
    sections: List[Section] = Field(default_factory=list)
    moons: List[MoonSection] = Field(default_factory=list)

class HudSnapshot(BaseModel):
    view: PresentedView
    view_model: Dict[str, Any]
