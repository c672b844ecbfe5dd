"""Match semantics for attribute rules and relation edits."""

# Rule names for reference in tests and audit
RULE_EMPTY_VALUES_UNRESTRICTED = "dimension: empty values impose no restriction in either mode"
RULE_ALLOWED_ANY = "allowed: entity values intersect rule values (ANY)"
RULE_DENIED_NONE = "denied: entity values do not intersect rule values"
RULE_DIMENSIONS_AND = "dimensions: every restricted dimension must admit the entity (AND)"
RULE_UNKNOWN_IDS_NON_MATCHING = "ids: unknown catalog ids never intersect"
RULE_SEARCH_SUBSTRING = "search: case-insensitive substring of the display name, whitespace literal; empty matches all"
RULE_EXCLUDE_TARGETED = "candidates: ids already targeted are always excluded"
RULE_SLOT_AUTO_TARGET = "toggle_slot: toggling a slot targets an untargeted counterpart"
RULE_SLOT_DISABLE_DISCARDS = "toggle_slot: disabling a slot drops its schedules"
RULE_SCHEDULES_REQUIRE_SLOT = "set_schedules: no-op unless the slot is enabled"
RULE_TOGGLE_ALL_SUBSET = "toggle_all: only the supplied candidates are touched"
RULE_BLOCKED_SCHEDULES_RETAINED = "schedules: assigned ids the picker does not offer are kept; blocked ones are never newly added"
