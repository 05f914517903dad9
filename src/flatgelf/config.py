"""Process-wide settings for flatgelf.

Settings are read from ``FLATGELF_*`` environment variables once and cached
for the lifetime of the process.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from flatgelf.core.naming import KeyNamer, KeyNaming, namer_for


class FlatGelfSettings(BaseSettings):
    """Deployment settings.

    Attributes:
        key_naming: Naming mode used when no namer is passed explicitly.
        default_facility: Facility of a freshly constructed record.
        default_file: File placeholder of a freshly constructed record.
        fallback_host: Host used when the local host name cannot be resolved.
    """

    model_config = SettingsConfigDict(env_prefix="FLATGELF_", extra="ignore")

    key_naming: KeyNaming = KeyNaming.DEFAULT
    default_facility: str = "main"
    default_file: str = "main"
    fallback_host: str = "localhost"


@lru_cache(maxsize=1)
def get_settings() -> FlatGelfSettings:
    """Return the cached process settings."""
    return FlatGelfSettings()


def default_namer() -> KeyNamer:
    """Return a namer for the configured key naming mode."""
    return namer_for(get_settings().key_naming)
