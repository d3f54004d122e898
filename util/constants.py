class InternalURIs:
    HEALTH = "/health"
    NAMESPACES = "/namespaces"
    CONFIGS = NAMESPACES + "/{namespace}/configs"
    CONFIG = CONFIGS + "/{name}"
    ADMIN = "/admin"
    TOKENS = ADMIN + "/tokens"
    TOKEN = TOKENS + "/{token}"
    ADMIN_NAMESPACES = ADMIN + "/namespaces"


BEARER_PREFIX = "Bearer "

# Development fallbacks; override both in any real deployment.
DEV_ADMIN_TOKEN = "admin-secret-token-change-me"
DEV_TOKENS = {
    "dev-token": "dev",
    "test-token": "test",
}

YAML_MEDIA_TYPE = "application/x-yaml"

# In-flight filesystem writes end with this; never valid in a namespace or name.
RESERVED_SUFFIX = ".yamlet-tmp"
