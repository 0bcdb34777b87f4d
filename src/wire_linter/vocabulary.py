"""
Binding vocabulary and framework name lists.

Goal:
- Keep hard-coded directive/method names out of the extraction and matching
  logic.
- Make it obvious where to extend the vocabulary when the framework grows a
  new directive or lifecycle hook.
"""

from __future__ import annotations

DIRECTIVE_PREFIX = "wire:"

# Reserved identifier for "the live component handle" in inline scripts.
SENTINEL = "$wire"

# Directives whose value names a component method.
METHOD_DIRECTIVES: tuple[str, ...] = (
    "wire:click",
    "wire:submit",
    "wire:keydown",
    "wire:keyup",
    "wire:mousedown",
    "wire:mouseup",
    "wire:contextmenu",
    "wire:touchstart",
    "wire:touchend",
    "wire:touchmove",
    "wire:scroll",
    "wire:resize",
    "wire:load",
)

# Directives whose value is a (possibly nested) property path.
PROPERTY_DIRECTIVES: tuple[str, ...] = (
    "wire:model",
    "wire:change",
    "wire:input",
    "wire:blur",
    "wire:focus",
    "wire:mouseenter",
    "wire:mouseleave",
)

DIRECTIVES: tuple[str, ...] = METHOD_DIRECTIVES + PROPERTY_DIRECTIVES

SENTINEL_METHOD_KIND = f"{SENTINEL} method call"
SENTINEL_PROPERTY_KIND = f"{SENTINEL} property access"

# Framework-provided methods on the component base class. These are public in
# Python terms but are never valid binding targets, so they are excluded from
# a component's method surface.
LIFECYCLE_METHODS: frozenset[str] = frozenset(
    {
        # lifecycle hooks
        "mount",
        "render",
        "hydrate",
        "dehydrate",
        "boot",
        "booted",
        # data-mutation hooks
        "updating",
        "updated",
        # events / navigation
        "dispatch",
        "dispatch_browser_event",
        "emit",
        "emit_to",
        "emit_self",
        "emit_up",
        "redirect",
        "redirect_route",
        "redirect_action",
        # validation helpers
        "validate",
        "validate_only",
        "reset_validation",
        "reset_error_bag",
        "add_error",
        "get_error_bag",
        "set_error_bag",
        # framework accessors
        "skip_render",
        "forget_computed",
        "get_id",
        "get_name",
        "get_component_class",
        "get_fresh_instance",
        "get_query_string",
        "get_public_properties",
        "get_computed_properties",
        "get_computed_property_value",
    }
)

# Per-property mutation hooks, e.g. `updated_email` or `hydrate_items`.
LIFECYCLE_PREFIXES: tuple[str, ...] = (
    "updating_",
    "updated_",
    "hydrate_",
    "dehydrate_",
)

# Built-in actions handled by the framework itself (`$refresh`, `$set(...)`).
MAGIC_ACTION_PREFIX = "$"

# Qualified names of the base class every live component derives from.
DEFAULT_COMPONENT_BASES: tuple[str, ...] = ("wire.Component",)


def is_lifecycle_method(name: str, extra: frozenset[str] = frozenset()) -> bool:
    if name in LIFECYCLE_METHODS or name in extra:
        return True
    return name.startswith(LIFECYCLE_PREFIXES)
