"""Pydantic models describing the upgrade source payload."""

from __future__ import annotations

from typing import Annotated, Final

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter

U64_MAX: Final[int] = 2**64 - 1


class UpgradeSourceBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class UpgradePayload(UpgradeSourceBaseModel):
    network: StrictStr
    node_version: StrictStr
    # Kept as text; the reconciler parses it per event so one bad value
    # does not discard the whole snapshot.
    estimated_upgrade_time: StrictStr
    block: Annotated[StrictInt, Field(ge=0, le=U64_MAX)]


UpgradeListAdapter: TypeAdapter[list[UpgradePayload]] = TypeAdapter(list[UpgradePayload])
