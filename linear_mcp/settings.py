"""Settings resolution with profile support for multiple Linear workspaces."""

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
import typer
from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH = Path.home() / ".config" / "linear-mcp" / "config.toml"

DEFAULT_API_URL = "https://api.linear.app/graphql"

_USAGE = """\
Error: LINEAR_API_KEY environment variable is required

To use this tool, run it with your Linear API key:
LINEAR_API_KEY=your-api-key linear-mcp

Or set it in your environment:
export LINEAR_API_KEY=your-api-key
linear-mcp

Or add api_key to a profile in {config_path}

Optional: Set LINEAR_TEAM_NAME to customize server name (linear-mcp-for-X)
LINEAR_TEAM_NAME=your-team-name LINEAR_API_KEY=your-api-key linear-mcp"""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Only the LINEAR_* names bind, both from the environment and as keyword arguments
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("LINEAR_API_KEY", "LINEARAPIKEY"),
    )
    # Display only: changes the advertised server name
    team_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LINEAR_TEAM_NAME", "LINEARTEAMNAME"),
    )
    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="LINEAR_API_URL")
    timeout: float = Field(default=30.0, validation_alias="LINEAR_TIMEOUT")

    @property
    def server_name(self) -> str:
        return f"linear-mcp-for-{self.team_name}" if self.team_name else "linear-mcp"


@lru_cache(maxsize=1)
def _load_toml() -> tomlkit.TOMLDocument:
    """Load ~/.config/linear-mcp/config.toml, returning empty document if missing."""
    if not CONFIG_PATH.exists():
        return tomlkit.document()
    return tomlkit.load(CONFIG_PATH.open())


def _list_profiles(config: Mapping) -> list[str]:
    # tomlkit Table implements MutableMapping but not dict, so check Mapping
    return [k for k, v in config.items() if isinstance(v, Mapping)]


# Profile keys and the environment variables that set the same field. The first
# name is the one Settings is constructed with.
_ENV_NAMES = {
    "api_key": ("LINEAR_API_KEY", "LINEARAPIKEY"),
    "team_name": ("LINEAR_TEAM_NAME", "LINEARTEAMNAME"),
    "api_url": ("LINEAR_API_URL",),
    "timeout": ("LINEAR_TIMEOUT",),
}


def _profile_defaults(config: Mapping, active: str | None) -> dict:
    if not active:
        return {}
    if active in config and isinstance(config[active], Mapping):
        # Skip keys whose env var is set so the environment wins over the profile
        return {
            _ENV_NAMES[k][0]: v for k, v in dict(config[active]).items() if k in _ENV_NAMES and not _env_overrides(k)
        }
    profiles = _list_profiles(config)
    typer.echo(f"Profile '{active}' not found in {CONFIG_PATH}. Available: {profiles or '(none)'}", err=True)
    raise typer.Exit(1)


def _env_overrides(key: str) -> bool:
    return any(os.environ.get(name) for name in _ENV_NAMES.get(key, ()))


def get_settings(profile: str | None = None, *, require_key: bool = True) -> Settings:
    """Resolve the active profile and return a fully populated Settings.

    Profile precedence (highest to lowest):
    1. profile argument (--profile CLI flag)
    2. LINEAR_PROFILE env var
    3. default_profile key in ~/.config/linear-mcp/config.toml
    4. First profile defined in ~/.config/linear-mcp/config.toml

    Environment variables always override profile values; .env only fills gaps.
    """
    toml_config = _load_toml()

    active = (
        profile
        or os.environ.get("LINEAR_PROFILE")
        or toml_config.get("default_profile")
        or ((_profiles := _list_profiles(toml_config)) and _profiles[0] or None)
    )

    settings = Settings(**_profile_defaults(toml_config, active))

    if require_key and not settings.api_key:
        typer.echo(_USAGE.format(config_path=CONFIG_PATH), err=True)
        raise typer.Exit(1)

    return settings
