"""Pluggy hook specifications for formguard setup-time extensions.

Plugins contribute validators (keyed by rule kind, e.g. ``"number_range"``)
and convertors (keyed by target kind, e.g. ``"boolean"``). Hooks run once at
wiring time; the returned instances are read-only afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from formguard.convertors.base import Convertor
    from formguard.validators.base import RangeValidator

hookspec = pluggy.HookspecMarker("formguard")


class FormguardHookSpec:
    """Hook specifications for the formguard plugin system."""

    @hookspec
    def register_validators(self) -> dict[str, RangeValidator] | None:
        """Return rule kind -> validator mappings."""

    @hookspec
    def register_convertors(self) -> dict[str, Convertor] | None:
        """Return target kind -> convertor mappings."""
