"""dependency injection for the organization switch grant server.

Uses scitrera-app-framework plugin pattern for service initialization.
Services are lazily initialized on first access via get_extension().
"""
import logging
from logging import Logger
from typing import Callable

from scitrera_app_framework import (
    Variables, get_variables, get_logger, init_framework_desktop,
    async_plugins_ready, async_plugins_stopping
)
from .config import ORGSWITCH_DATA_DIR

# global preconfigure hooks (not specific to variables instance)
_preconfigure_hooks: list[Callable[[Variables], None]] = []


def add_preconfigure_hook(hook: Callable[[Variables], None]) -> None:
    """Register a hook run by preconfigure(), e.g. to register additional grant handler plugins."""
    _preconfigure_hooks.append(hook)


# noinspection PyTypeHints
def preconfigure(v: Variables = None, test_mode: bool = False, test_logger: Logger = None) -> (Variables, dict):
    """ Pre-configure the framework """
    from scitrera_app_framework import register_package_plugins
    from . import api, services, lifecycle  # noqa: F401

    # handle test mode
    additional_kwargs = {} if not test_mode else {
        'fault_handler': False,
        'fixed_logger': test_logger,
        'pyroscope': False,
        'shutdown_hooks': False,
    }

    # init framework (has internal protection against multiple invocations)
    v: Variables = init_framework_desktop(
        'orgswitch-server',
        base_plugins=False,
        stateful_chdir=True,  # change working directory to stateful root
        stateful_root_env_key=ORGSWITCH_DATA_DIR,
        async_auto_enabled=False,  # manage async plugin lifecycle hooks manually
        v=v,  # allow variables instance pass-through
        **additional_kwargs
    )

    logging.getLogger('httpcore.http11').setLevel(logging.WARNING)
    logging.getLogger('httpcore.connection').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('python_multipart.multipart').setLevel(logging.WARNING)

    logger = get_logger(v)

    # avoid duplicate package registration
    if not v.get('__preconfigure_complete__', default=False):
        logger.debug('Registering core services')
        register_package_plugins(services.__package__, v, recursive=True)

        logger.debug('Registering lifecycle components')
        register_package_plugins(lifecycle.__package__, v, recursive=True)

        logger.debug('Registering API Routes')
        register_package_plugins(api.__package__, v, recursive=True)

        v.set('__preconfigure_complete__', True)

    # handle preconfiguration hooks; hooks added since the last call run once
    logger.debug('Evaluating preconfigure hooks')
    installed = v.get('__preconfigure_hooks_installed__', default=0)
    if installed == (lph := len(_preconfigure_hooks)):
        return v, services

    # run through preconfigure hooks (allows for registering additional plugins before initialization)
    for hook in _preconfigure_hooks[installed:]:
        hook(v)

    v.set('__preconfigure_hooks_installed__', lph)
    logger.debug('Installed preconfiguration hooks')
    return v, services


def initialize_services_sync(v: Variables = None) -> Variables:
    """Initialize all services without an event loop (CLI and scripts)."""
    v, services = preconfigure(v)
    logger = get_logger(v)

    logger.debug("Initializing services")
    from scitrera_app_framework.core.plugins import init_all_plugins
    init_all_plugins(v, async_enabled=False)
    return v


async def initialize_services(v: Variables = None) -> Variables:
    """Initialize all services on application startup."""
    v = initialize_services_sync(v)
    await async_plugins_ready(v)  # handle async part with sequencing managed
    return v


async def shutdown_services(v: Variables = None) -> None:
    """Shutdown all services on application shutdown."""

    v = get_variables(v)
    logger = get_logger(v)

    logger.debug("Shutting down services")
    await async_plugins_stopping(v)

    from scitrera_app_framework.core.plugins import shutdown_all_plugins
    shutdown_all_plugins(v)
