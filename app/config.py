"""
HR Dashboard - Configuration Management
Loads the YAML configuration and applies environment overrides.
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, Tuple
from dataclasses import dataclass, field


ENV_PREFIX = "HR_DASHBOARD_"


@dataclass
class RosterConfig:
    """Candidate fixture configuration."""
    data_file: str


@dataclass
class RankingConfig:
    """Ranked view configuration."""
    view_limit: int = 10


@dataclass
class EvaluationConfig:
    """Mock evaluator configuration."""
    delay_min_ms: int = 0
    delay_max_ms: int = 0
    seed: Optional[int] = None

    @property
    def delay_range(self) -> Optional[Tuple[float, float]]:
        """Delay range in seconds, or None when no latency is simulated."""
        if self.delay_max_ms <= 0:
            return None
        return (self.delay_min_ms / 1000.0, self.delay_max_ms / 1000.0)


@dataclass
class SharingConfig:
    """Share-with-HR configuration."""
    default_email: str = "hr-team@company.com"
    persist: bool = False


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False


@dataclass
class AppConfig:
    """Complete application configuration."""
    job_role: str
    roster: RosterConfig
    ranking: RankingConfig
    evaluation: EvaluationConfig
    sharing: SharingConfig
    server: ServerConfig
    base_path: Path = field(default_factory=lambda: Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.base_path / "data"

    @property
    def data_file(self) -> Path:
        path = Path(self.roster.data_file)
        if path.is_absolute():
            return path
        return self.base_path / path

    @property
    def activity_dir(self) -> Path:
        return self.data_dir / "activity"

    @property
    def shares_file(self) -> Path:
        return self.data_dir / "shares" / "shared.json"


class ConfigManager:
    """
    Manages configuration loading.

    Values come from config/default.yaml and can be overridden with
    HR_DASHBOARD_* environment variables:
    DATA_FILE, EVAL_DELAY ("min,max" in ms), SEED, HOST, PORT, DEBUG.
    """

    def __init__(self, base_path: Optional[Path] = None):
        self.base_path = Path(base_path) if base_path else Path.cwd()
        self.config_dir = self.base_path / "config"
        self._config: Optional[AppConfig] = None

    def load_yaml(self, filepath: Path) -> Dict[str, Any]:
        """Load a YAML configuration file."""
        if not filepath.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(filepath, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def load_default_config(self) -> Dict[str, Any]:
        """Load default configuration."""
        return self.load_yaml(self.config_dir / "default.yaml")

    def apply_env_overrides(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay HR_DASHBOARD_* environment variables onto raw config data."""
        env = os.environ

        data_file = env.get(ENV_PREFIX + "DATA_FILE")
        if data_file:
            data.setdefault("roster", {})["data_file"] = data_file

        delay = env.get(ENV_PREFIX + "EVAL_DELAY")
        if delay:
            low, _, high = delay.partition(",")
            evaluation = data.setdefault("evaluation", {})
            evaluation["delay_min_ms"] = int(low)
            evaluation["delay_max_ms"] = int(high or low)

        seed = env.get(ENV_PREFIX + "SEED")
        if seed:
            data.setdefault("evaluation", {})["seed"] = int(seed)

        server = data.setdefault("server", {})
        if env.get(ENV_PREFIX + "HOST"):
            server["host"] = env[ENV_PREFIX + "HOST"]
        if env.get(ENV_PREFIX + "PORT"):
            server["port"] = int(env[ENV_PREFIX + "PORT"])
        if env.get(ENV_PREFIX + "DEBUG"):
            server["debug"] = env[ENV_PREFIX + "DEBUG"].lower() == "true"

        return data

    def load(self) -> AppConfig:
        """
        Load complete application configuration.

        Returns:
            Complete AppConfig instance.
        """
        data = self.apply_env_overrides(self.load_default_config())

        self._config = AppConfig(
            job_role=data.get("job_role", "Candidate"),
            roster=RosterConfig(**data["roster"]),
            ranking=RankingConfig(**data.get("ranking", {})),
            evaluation=EvaluationConfig(**data.get("evaluation", {})),
            sharing=SharingConfig(**data.get("sharing", {})),
            server=ServerConfig(**data.get("server", {})),
            base_path=self.base_path
        )

        return self._config

    @property
    def config(self) -> AppConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            return self.load()
        return self._config

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the current configuration for the UI."""
        config = self.config
        return {
            "job_role": config.job_role,
            "view_limit": config.ranking.view_limit,
            "simulated_latency": config.evaluation.delay_range is not None,
            "default_share_email": config.sharing.default_email,
        }


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(base_path: Optional[Path] = None) -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or (
        base_path is not None and Path(base_path) != _config_manager.base_path
    ):
        _config_manager = ConfigManager(base_path)
    return _config_manager


def get_config() -> AppConfig:
    """Get the current application configuration."""
    return get_config_manager().config
