"""
FastAPI application stub for the organization switch grant server.

This provides compatibility with typical uvicorn/gunicorn deployment setups.
"""

from orgswitch_server.dependencies import preconfigure
from orgswitch_server.lifecycle.fastapi import fastapi_app_factory, get_logger, get_variables_dep

v, _ = preconfigure()
app = fastapi_app_factory(v=v)

__all__ = (
    'app', 'get_logger', 'get_variables_dep',
)
