"""ffmpegcmd plugin manager

Plugins implement the hooks in :py:mod:`ffmpegcmd.plugins.hookspecs`. Third-party
plugins are loaded from the ``ffmpegcmd`` entry-point group.
"""

from __future__ import annotations

import logging
from typing import Any

import pluggy

from . import hookspecs, finder_syspath

logger = logging.getLogger("ffmpegcmd")

__all__ = ["initialize", "get_hook", "register", "unregister", "list_plugins"]

pm = pluggy.PluginManager("ffmpegcmd")
pm.add_hookspecs(hookspecs)


def register(plugin: object, name: str | None = None) -> str | None:
    """Register a plugin and return its name.

    :param plugin: Plugin object
    :param name: The name under which to register the plugin. If not specified,
                 a name is generated using get_canonical_name().
    :returns: The plugin name. If the name is blocked from registering, returns None.

    If the plugin is already registered, raises a ValueError.
    """
    return pm.register(plugin, name)


def unregister(name: str) -> Any | None:
    """Unregister a plugin

    :param name: The name of the plugin to unregister.
    :returns: The unregistered plugin object, or None if not found.
    """
    return pm.unregister(name=name)


def list_plugins() -> list[str]:
    """names of the registered plugins"""
    return [pm.get_name(p) for p in pm.get_plugins()]


def initialize():
    """register the builtin finder and the installed third-party plugins"""

    # hooks run LIFO, so the system path is searched after any installed finder
    if not pm.is_registered(finder_syspath):
        name = pm.register(finder_syspath, finder_syspath.__name__)
        logger.info("registered %s builtin-plugin module", name)

    pm.load_setuptools_entrypoints("ffmpegcmd")


def get_hook() -> pluggy.HookRelay:
    """hook caller of the plugin manager"""
    return pm.hook
