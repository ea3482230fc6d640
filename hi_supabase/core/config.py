"""hi-supabase runtime configuration and settings."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

SUPABASE_URL_VAR = "NEXT_PUBLIC_SUPABASE_URL"
SUPABASE_KEY_VAR = "NEXT_PUBLIC_SUPABASE_ANON_KEY"


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing."""
    pass


@dataclass
class HiSupabaseConfig:
    """Runtime configuration for hi-supabase.

    Attributes:
        supabase_url: Supabase project URL
        supabase_anon_key: Supabase anon (public) API key
        install_timeout: Timeout in seconds for the dependency install command (default: 300)
    """

    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    install_timeout: int = 300  # 5 minutes for npm/pnpm/yarn

    @classmethod
    def from_env(cls) -> "HiSupabaseConfig":
        """Create config from environment variables.

        Environment variables:
            NEXT_PUBLIC_SUPABASE_URL: Supabase project URL
            NEXT_PUBLIC_SUPABASE_ANON_KEY: Supabase anon key
            HI_SUPABASE_INSTALL_TIMEOUT: Dependency install timeout in seconds

        Returns:
            HiSupabaseConfig instance with values from environment or defaults
        """
        return cls(
            supabase_url=os.getenv(SUPABASE_URL_VAR) or None,
            supabase_anon_key=os.getenv(SUPABASE_KEY_VAR) or None,
            install_timeout=int(
                os.getenv("HI_SUPABASE_INSTALL_TIMEOUT", cls.install_timeout)
            ),
        )

    def missing_credentials(self) -> List[str]:
        """Return the names of credential variables that are not set."""
        missing = []
        if not self.supabase_url:
            missing.append(SUPABASE_URL_VAR)
        if not self.supabase_anon_key:
            missing.append(SUPABASE_KEY_VAR)
        return missing


def load_env_file(project_root: Optional[Path] = None) -> bool:
    """Load the project's .env file into the process environment.

    Variables that are already set are left alone.

    Returns:
        True if a .env file was found and loaded
    """
    env_path = (project_root or Path.cwd()) / ".env"
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=False)


# Global config instance (can be overridden)
_config: Optional[HiSupabaseConfig] = None


def get_config() -> HiSupabaseConfig:
    """Get the global hi-supabase configuration.

    Returns:
        HiSupabaseConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = HiSupabaseConfig.from_env()
    return _config


def set_config(config: Optional[HiSupabaseConfig]):
    """Set the global hi-supabase configuration.

    Args:
        config: HiSupabaseConfig instance to use globally, or None to re-read the environment
    """
    global _config
    _config = config
