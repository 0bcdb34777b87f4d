"""
Wire Linter - Static validation of `wire:` template bindings.

This library reads a project's live components statically (via AST, without
importing them) and checks that every `wire:*` directive and `$wire`
expression in their templates points at a public member that exists.
"""

from __future__ import annotations
