"""Field types reused across tool input models."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field

NUMERIC_ID_PATTERN = r"^\d+$"

# Roblox numeric ID as a digits-only string.
NumericId = Annotated[str, Field(pattern=NUMERIC_ID_PATTERN)]

OptionalNumericId = Optional[NumericId]

Temperature = Optional[Annotated[float, Field(ge=0, le=2)]]

UNIVERSE_ID_DESCRIPTION = "Universe ID (defaults to env ROBLOX_UNIVERSE_ID)"
PLACE_ID_DESCRIPTION = "Place ID (defaults to env ROBLOX_PLACE_ID)"
