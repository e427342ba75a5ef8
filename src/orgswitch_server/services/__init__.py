"""Services package for the organization switch grant server.

This package provides all core services using the plugin dependency injection pattern from scitrera-app-framework.

Prefer importing from specific service submodules (e.g., `from .grant import get_grant_handler_registry`)
rather than from this top-level package.
"""
