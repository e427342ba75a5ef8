"""Configuration keys and defaults for the organization switch grant server."""

# ============================================
# Data Home Directory
# ============================================
ORGSWITCH_DATA_DIR = 'ORGSWITCH_DATA_DIR'

# ============================================
# Server Configuration
# ============================================
ORGSWITCH_SERVER_HOST = 'ORGSWITCH_SERVER_HOST'
DEFAULT_ORGSWITCH_SERVER_HOST = '127.0.0.1'
ORGSWITCH_SERVER_PORT = 'ORGSWITCH_SERVER_PORT'
DEFAULT_ORGSWITCH_SERVER_PORT = 61080

# ============================================
# Access Token Store
# ============================================
ORGSWITCH_TOKEN_STORE = 'ORGSWITCH_TOKEN_STORE'
DEFAULT_ORGSWITCH_TOKEN_STORE = 'in-memory'

# ============================================
# Token Validation Service
# ============================================
ORGSWITCH_TOKEN_VALIDATOR = 'ORGSWITCH_TOKEN_VALIDATOR'
DEFAULT_ORGSWITCH_TOKEN_VALIDATOR = 'default'

# ============================================
# Organization Resolver
# ============================================
ORGSWITCH_ORGANIZATION_RESOLVER = 'ORGSWITCH_ORGANIZATION_RESOLVER'
DEFAULT_ORGSWITCH_ORGANIZATION_RESOLVER = 'in-memory'

# JSON document describing the organization hierarchy (in-memory resolver only)
ORGSWITCH_ORGANIZATIONS_FILE = 'ORGSWITCH_ORGANIZATIONS_FILE'

# ============================================
# Token Issuer
# ============================================
ORGSWITCH_TOKEN_ISSUER = 'ORGSWITCH_TOKEN_ISSUER'
DEFAULT_ORGSWITCH_TOKEN_ISSUER = 'default'

ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS = 'ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS'
DEFAULT_ORGSWITCH_ACCESS_TOKEN_TTL_SECONDS = 3600

# ============================================
# Grant Handlers
# ============================================
ORGSWITCH_GRANT_REGISTRY = 'ORGSWITCH_GRANT_REGISTRY'
DEFAULT_ORGSWITCH_GRANT_REGISTRY = 'default'

# CSV list of grant types that should not be served
ORGSWITCH_DISABLED_GRANT_TYPES = 'ORGSWITCH_DISABLED_GRANT_TYPES'

# ============================================
# Tenancy
# ============================================
# Tenant assumed for subject identifiers that carry no tenant qualifier
SUPER_TENANT_DOMAIN = "carbon.super"
