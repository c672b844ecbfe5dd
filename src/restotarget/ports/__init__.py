"""Port interfaces (Protocols).

Services depend only on these, never on concrete adapters.
"""

from .targeting_store import Anchor, AnchorKind, TargetingStore, TargetingStoreError

__all__ = ["Anchor", "AnchorKind", "TargetingStore", "TargetingStoreError"]
