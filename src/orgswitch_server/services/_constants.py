"""
Centralized extension point constants for all grant server services.

All EXT_* constants are defined here to avoid circular import issues.
Individual service base modules re-export the relevant constants.
"""

# ============================================
# Token Storage
# ============================================
EXT_ACCESS_TOKEN_STORE = 'orgswitch-access-token-store'

# ============================================
# Token Validation
# ============================================
EXT_TOKEN_VALIDATOR = 'orgswitch-token-validator'

# ============================================
# Organizations
# ============================================
EXT_ORGANIZATION_RESOLVER = 'orgswitch-organization-resolver'

# ============================================
# Token Issuance
# ============================================
EXT_TOKEN_ISSUER = 'orgswitch-token-issuer'

# ============================================
# Grant Handlers
# ============================================
EXT_GRANT_HANDLER_REGISTRY = 'orgswitch-grant-handler-registry'
EXT_MULTI_GRANT_HANDLERS = 'orgswitch-multi-grant-handlers'
