"""Bootstrap and rotate secrets in the wanderer-conf.env file."""
from .bootstrapper import ConfigBootstrapper, KeyStatus
from .envfile import EnvFile
from .errors import (
    BootstrapError,
    DuplicateKeyError,
    NotFoundError,
    NotReadableError,
    NotWritableError,
    PatternNotFoundError,
)
from .keys import CLOAK_KEY, MANAGED_KEYS, SECRET_KEY_BASE, ManagedKey, generate_key

__all__ = [
	"ConfigBootstrapper", "KeyStatus", "EnvFile",
	"BootstrapError", "DuplicateKeyError", "NotFoundError", "NotReadableError", "NotWritableError", "PatternNotFoundError",
	"CLOAK_KEY", "MANAGED_KEYS", "SECRET_KEY_BASE", "ManagedKey", "generate_key",
]
