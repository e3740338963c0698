import os
import toml
import logging
from dataclasses import dataclass, field
from typing import Optional, Any, Dict

from dotenv import load_dotenv

from .errors import ConfigurationError
from .ui import display_notice

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "deepseek"


@dataclass(frozen=True)
class ProviderConfig:
    """A chat-completion endpoint plus the credential used to call it."""

    name: str
    url: str
    api_key: str
    model: str
    key_env: str = ""

    def __repr__(self) -> str:
        masked = f"{self.api_key[:4]}...{self.api_key[-4:]}" if len(self.api_key) > 8 else "****"
        return f"ProviderConfig(name={self.name!r}, url={self.url!r}, api_key={masked!r}, model={self.model!r})"


# name -> (endpoint, key environment variable, default model)
PROVIDERS: Dict[str, tuple] = {
    "deepseek": ("https://api.deepseek.com/chat/completions", "DEEPSEEK_API_KEY", "deepseek-chat"),
    "openai": ("https://api.openai.com/v1/chat/completions", "OPENAI_API_KEY", "gpt-4o-mini"),
}


def load_environment(path: Optional[str] = None) -> bool:
    """
    Merge a local .env file into the process environment.

    Variables already set in the environment win over the file. A missing
    file is not an error: a notice is printed and False is returned.
    """
    dotenv_path = path or os.path.join(os.getcwd(), ".env")
    if not os.path.isfile(dotenv_path):
        display_notice("No .env file found, using system environment variables.")
        return False
    load_dotenv(dotenv_path)
    logger.info(f"Loaded environment from {dotenv_path}")
    return True


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Configuration for one run of the CLI tool."""

    deepseek_api_key: str = field(default_factory=lambda: os.environ.get("DEEPSEEK_API_KEY", ""))
    openai_api_key: str = field(default_factory=lambda: os.environ.get("OPENAI_API_KEY", ""))
    config_file: str = field(default_factory=lambda: os.environ.get(
        "RAY_CONFIG_FILE",
        os.path.join(os.path.expanduser("~/.config/ray-cli"), "config.toml"),
    ))
    _file_config: dict = field(init=False, repr=False)

    provider_name: str = field(init=False)
    model: Optional[str] = field(init=False)
    shell: str = field(init=False)
    timeout: Optional[float] = field(init=False)
    verbose: bool = field(init=False)
    log_dir: Optional[str] = field(init=False)

    def __post_init__(self):
        """Post-initialization to set up dependent fields."""
        self._file_config = self._load_config_from_file()
        self.deepseek_api_key = self.deepseek_api_key or self._get_config("DEEPSEEK_API_KEY", "")
        self.openai_api_key = self.openai_api_key or self._get_config("OPENAI_API_KEY", "")
        self.provider_name = str(self._get_config("RAY_PROVIDER", DEFAULT_PROVIDER)).strip().lower()
        self.model = self._get_config("RAY_MODEL") or None
        self.shell = self._get_config("RAY_SHELL", "bash")
        self.verbose = _as_bool(self._get_config("RAY_VERBOSE", False))
        self.log_dir = self._get_config("RAY_LOG_DIR") or None

        timeout = self._get_config("RAY_TIMEOUT")
        try:
            self.timeout = float(timeout) if timeout not in (None, "") else None
        except (TypeError, ValueError):
            raise ConfigurationError(f"RAY_TIMEOUT must be a number of seconds, got {timeout!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"RAY_TIMEOUT must be greater than zero, got {timeout!r}")

    def _load_config_from_file(self) -> dict:
        """Loads configuration from the TOML file, if there is one."""
        if not os.path.exists(self.config_file):
            return {}
        try:
            with open(self.config_file, 'r') as f:
                return toml.load(f)
        except (toml.TomlDecodeError, IOError) as e:
            logger.warning(f"Could not read config file at {self.config_file}. Error: {e}")
            return {}

    def _get_config(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get a configuration value, prioritizing environment variables,
        then the config file, and finally a default value.
        """
        value = os.environ.get(key)
        if value is not None:
            return value

        for section in self._file_config.values():
            if isinstance(section, dict) and key in section:
                return section[key]

        return default

    def provider(self) -> ProviderConfig:
        """Build the selected provider's configuration."""
        if self.provider_name not in PROVIDERS:
            raise ConfigurationError(
                f"Unknown provider '{self.provider_name}'. Choose one of: {', '.join(sorted(PROVIDERS))}"
            )
        url, key_env, default_model = PROVIDERS[self.provider_name]
        api_key = self.deepseek_api_key if self.provider_name == "deepseek" else self.openai_api_key
        return ProviderConfig(
            name=self.provider_name,
            url=url,
            api_key=api_key or "",
            model=self.model or default_model,
            key_env=key_env,
        )

    def __str__(self) -> str:
        """Return string representation of the configuration."""
        config_dict = self.__dict__.copy()
        for name in ("deepseek_api_key", "openai_api_key"):
            key = config_dict[name]
            if key:
                config_dict[name] = f"{key[:4]}...{key[-4:]}" if len(key) > 8 else "****"
        del config_dict['_file_config']
        return str(config_dict)
