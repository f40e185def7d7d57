"""Registry of validators and convertors contributed by pluggy plugins.

Plugins come from two places: direct registration (the built-in standard
plugin, tests, embedding applications) and the ``formguard.plugins`` entry
point group. A broken plugin is logged and skipped; it never aborts wiring.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

import pluggy

from formguard.plugins.hookspecs import FormguardHookSpec

if TYPE_CHECKING:
    from formguard.convertors.base import Convertor
    from formguard.validators.base import RangeValidator

PROJECT_NAME = "formguard"
ENTRY_POINT_GROUP = "formguard.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` for formguard hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(FormguardHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """True once entry-point discovery has run."""
        return self._loaded

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register *plugin* under *name* (default: its class name)."""
        plugin_name = name or type(plugin).__name__
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Plugin registered: %s", plugin_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def discover_and_load(self) -> list[str]:
        """Load every plugin advertised under ``formguard.plugins``.

        Returns the names of all plugins registered afterwards.
        """
        count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Entry-point plugins loaded: %d", count)
        self._instantiate_class_plugins()
        self._loaded = True
        return self.list_plugin_names()

    def list_plugin_names(self) -> list[str]:
        names = []
        for plugin in self._pm.get_plugins():
            names.append(self._pm.get_name(plugin) or type(plugin).__name__)
        return names

    def collect_validators(self) -> dict[str, RangeValidator]:
        """Rule kind -> validator, merged across plugins."""
        return self._collect("register_validators")

    def collect_convertors(self) -> dict[str, Convertor]:
        """Target kind -> convertor, merged across plugins."""
        return self._collect("register_convertors")

    def _collect(self, hook_name: str) -> dict[str, Any]:
        # get_hookimpls() follows registration order, so a plugin registered
        # later replaces a kind contributed earlier.
        merged: dict[str, Any] = {}
        for impl in getattr(self._pm.hook, hook_name).get_hookimpls():
            try:
                contributed = impl.function()
            except Exception:
                logger.warning(
                    "Plugin %s failed in %s", impl.plugin_name, hook_name, exc_info=True
                )
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, dict):
                logger.warning(
                    "Plugin %s returned %s from %s; expected a dict",
                    impl.plugin_name,
                    type(contributed).__name__,
                    hook_name,
                )
                continue
            merged.update(contributed)
        return merged

    def _instantiate_class_plugins(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        Hooks declared on a class are plain functions whose ``self`` is never
        bound, so calling them through the class fails.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not _declares_hooks(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Cannot instantiate plugin %s", plugin_name, exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)


def _declares_hooks(cls: type) -> bool:
    """Whether any public attribute of *cls* carries the ``formguard_impl`` marker."""
    return any(
        getattr(getattr(cls, attr, None), f"{PROJECT_NAME}_impl", None)
        for attr in dir(cls)
        if not attr.startswith("_")
    )
