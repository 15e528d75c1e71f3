# hud/definitions/lighting.py
"""Ambient lighting levels derived from the scene darkness."""

LIGHT_BRIGHT = "Bright"
LIGHT_DIM = "Dim"
LIGHT_DARK = "Dark"

BRIGHT_BELOW: float = 0.25
DARK_ABOVE: float = 0.75

def get_light_level(darkness: float) -> str:
    """
    Returns the lighting label for a darkness level between 0 and 1.
    """
    if darkness < BRIGHT_BELOW:
        return LIGHT_BRIGHT
    elif darkness > DARK_ABOVE:
        return LIGHT_DARK
    else:
        return LIGHT_DIM
