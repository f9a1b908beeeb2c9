"""
Configuration loader with priority: CLI > env > TOML > defaults
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import DEFAULT_CONFIG_FILE, ENV_PREFIX
from ...core.exceptions import ConfigError
from ...core.settings import Settings


class ConfigLoader:
    """Configuration loader with priority support"""
    
    # Keys accepted from every source; anything else in a TOML file is ignored
    KEYS = ("data_file", "ssh_binary", "ssh_config", "log_level", "log_file")
    
    def __init__(self, env_prefix: str = ENV_PREFIX):
        self._env_prefix = env_prefix
    
    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        
        try:
            data = tomllib.loads(path.read_text(encoding='utf-8'))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to parse TOML configuration {path}: {e}") from e
        
        return {key: data[key] for key in self.KEYS if key in data}
    
    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}
        
        # SSHC_DATA_FILE -> data_file, ...
        for key in self.KEYS:
            value = os.getenv(f"{self._env_prefix}{key.upper()}")
            if value:
                config[key] = value
        
        return config
    
    def merge_configs(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configurations with priority.
        Later configs override earlier ones; None values never override.
        """
        result: Dict[str, Any] = {}
        
        for config in configs:
            for key, value in config.items():
                if value is not None:
                    result[key] = value
        
        return result
    
    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Dict[str, Any]:
        """
        Load configuration with priority: CLI > env > TOML > defaults
        
        Args:
            toml_path: Path to TOML configuration file; when omitted the
                default file is read only if it exists
            cli_overrides: CLI parameter overrides
            use_env: Whether to load from environment variables
        
        Returns:
            Merged configuration dictionary
        """
        configs = []
        
        # 1. Load TOML
        if toml_path:
            configs.append(self.load_toml(Path(toml_path).expanduser()))
        else:
            default_path = Path(DEFAULT_CONFIG_FILE).expanduser()
            if default_path.exists():
                configs.append(self.load_toml(default_path))
        
        # 2. Load environment variables
        if use_env:
            env_config = self.load_env()
            if env_config:
                configs.append(env_config)
        
        # 3. Apply CLI overrides (highest priority)
        if cli_overrides:
            configs.append(cli_overrides)
        
        return self.merge_configs(*configs)
    
    def load_settings(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> Settings:
        """Load and resolve the merged configuration into Settings"""
        return Settings.from_dict(self.load(toml_path=toml_path, cli_overrides=cli_overrides))
