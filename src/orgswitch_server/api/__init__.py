"""HTTP API routers; each router module contributes one multi-extension plugin."""

EXT_MULTI_API_ROUTERS = 'orgswitch-server-api-routers'
