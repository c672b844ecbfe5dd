"""Port: persistence collaborator for targeting relations."""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

AnchorKind = Literal["campaign", "restaurant"]


class TargetingStoreError(Exception):
    """Raised by store adapters when a load or save cannot complete."""


class Anchor(BaseModel):
    """The fixed entity whose targeting relation is being edited."""

    model_config = ConfigDict(frozen=True)

    kind: AnchorKind = Field(..., description="'campaign' edits restaurants, 'restaurant' edits campaigns")
    id: int = Field(..., description="Anchor entity identifier")

    @property
    def counterpart_kind(self) -> AnchorKind:
        return "restaurant" if self.kind == "campaign" else "campaign"


@runtime_checkable
class TargetingStore(Protocol):
    """Load/save the persisted edge list for one anchor, in wire shape."""

    def load(self, anchor: Anchor) -> list[dict[str, Any]]: ...

    def save(self, anchor: Anchor, edges: list[dict[str, Any]]) -> None: ...
