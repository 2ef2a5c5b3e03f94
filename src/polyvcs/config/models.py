"""Configuration models."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from polyvcs.config.exceptions import InvalidConfigurationError
from polyvcs.vcs.factory import RepositoryKind

ENV_FILES = [".env.polyvcs", ".env"]


class PolyVcsConfig(BaseSettings):
    """Configuration for polyvcs.

    Every setting can be given as an environment variable with the
    ``POLYVCS_`` prefix (e.g. ``POLYVCS_GIT_COMMAND=/opt/git/bin/git``).
    """

    git_command: str = Field(default="git", description="Git binary to run")
    hg_command: str = Field(default="hg", description="Mercurial binary to run")
    bzr_command: str = Field(default="bzr", description="Bazaar binary to run")
    svn_command: str = Field(default="svn", description="Subversion binary to run")
    cvs_command: str = Field(default="cvs", description="CVS binary to run")

    model_config = SettingsConfigDict(
        env_file=ENV_FILES,
        env_file_encoding="utf-8",
        env_prefix="POLYVCS_",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(
        self,
        _env_file: str | Path | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize configuration.

        Args:
            _env_file: Optional path to custom env file (use env_file for public API)
            **kwargs: Additional configuration values

        Raises:
            InvalidConfigurationError: If the env file is specified but does not exist
        """
        env_file = kwargs.pop("env_file", _env_file)

        if env_file is not None:
            env_path = Path(env_file)
            if not env_path.exists():
                raise InvalidConfigurationError(f"Environment file not found: {env_file}")
            # Picked up again in settings_customise_sources
            kwargs["_custom_env_file"] = env_path

        super().__init__(**kwargs)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use a custom env file instead of the default ones when one was given.

        Environment variables take priority over both the default and the
        custom env file.

        Args:
            settings_cls: The settings class being instantiated
            init_settings: Settings from __init__ arguments
            env_settings: Settings from environment variables
            dotenv_settings: Settings from .env files
            file_secret_settings: Settings from secret files

        Returns:
            Tuple of settings sources in priority order
        """
        init_kwargs = init_settings.init_kwargs  # type: ignore[attr-defined]
        custom_env_path = init_kwargs.get("_custom_env_file")

        if custom_env_path is not None:
            custom_dotenv = DotEnvSettingsSource(
                settings_cls,
                env_file=custom_env_path,
                env_file_encoding="utf-8",
            )
            return (init_settings, env_settings, custom_dotenv, file_secret_settings)

        return (init_settings, env_settings, dotenv_settings, file_secret_settings)

    @field_validator("git_command", "hg_command", "bzr_command", "svn_command", "cvs_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Reject blank binary names.

        Args:
            v: Command value

        Returns:
            Command with surrounding whitespace removed

        Raises:
            InvalidConfigurationError: If the command is blank
        """
        command = v.strip()
        if not command:
            raise InvalidConfigurationError("VCS command must not be empty")
        return command

    def command_for(self, kind: RepositoryKind) -> str:
        """Get the binary configured for a repository kind.

        Args:
            kind: Repository kind

        Returns:
            Configured command

        Raises:
            ValueError: If kind is UNKNOWN
        """
        commands = {
            RepositoryKind.GIT: self.git_command,
            RepositoryKind.MERCURIAL: self.hg_command,
            RepositoryKind.BAZAAR: self.bzr_command,
            RepositoryKind.SUBVERSION: self.svn_command,
            RepositoryKind.CVS: self.cvs_command,
        }
        if kind not in commands:
            raise ValueError(f"No command for repository kind: {kind}")
        return commands[kind]

    @staticmethod
    def find_env_file() -> Path | None:
        """Find the environment file being used.

        Checks for .env.polyvcs and .env in current directory in that order.

        Returns:
            Path to the env file if found, None otherwise
        """
        for env_file in ENV_FILES:
            path = Path(env_file)
            if path.exists():
                return path.absolute()
        return None
