"""
TermTip Central Configuration
Glossary sources, API limits and logging settings
"""

from dataclasses import dataclass, field
from typing import List, Optional
import os


@dataclass
class GlossaryConfig:
    """Where glossary terms come from"""

    # Include the embedded fashion glossary
    include_builtin: bool = True

    # Extra YAML/JSON glossary files, applied after the builtin terms
    extra_files: List[str] = field(default_factory=list)


@dataclass
class APIConfig:
    """Configuration for the REST API server"""

    host: str = "127.0.0.1"
    port: int = 5000

    # Reject texts longer than this many characters
    max_text_chars: int = 100_000

    debug: bool = False


@dataclass
class TermTipConfig:
    """Main configuration class combining all settings"""

    glossary: GlossaryConfig
    api: APIConfig

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    def __init__(self,
                 glossary: Optional[GlossaryConfig] = None,
                 api: Optional[APIConfig] = None):
        """Initialize with optional custom configurations"""
        self.glossary = glossary or GlossaryConfig()
        self.api = api or APIConfig()
        self.log_level = "INFO"
        self.debug = False

        # Override with environment variables if present
        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load configuration overrides from environment variables"""
        # Glossary overrides
        if os.getenv("TERMTIP_GLOSSARY_FILES"):
            self.glossary.extra_files = [
                path for path in os.getenv("TERMTIP_GLOSSARY_FILES").split(os.pathsep) if path
            ]

        if os.getenv("TERMTIP_NO_BUILTIN", "").lower() in ("true", "1", "yes"):
            self.glossary.include_builtin = False

        # API overrides
        if os.getenv("TERMTIP_API_HOST"):
            self.api.host = os.getenv("TERMTIP_API_HOST")

        if os.getenv("TERMTIP_API_PORT"):
            self.api.port = int(os.getenv("TERMTIP_API_PORT"))

        if os.getenv("TERMTIP_MAX_TEXT_CHARS"):
            self.api.max_text_chars = int(os.getenv("TERMTIP_MAX_TEXT_CHARS"))

        if os.getenv("TERMTIP_LOG_LEVEL"):
            self.log_level = os.getenv("TERMTIP_LOG_LEVEL").upper()

        # Debug override
        if os.getenv("TERMTIP_DEBUG", "").lower() in ("true", "1", "yes"):
            self.debug = True
            self.log_level = "DEBUG"

    @classmethod
    def load_from_file(cls, config_path: str) -> 'TermTipConfig':
        """Load configuration from YAML file"""
        import yaml

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}

            glossary = GlossaryConfig(**config_data.get('glossary', {}))
            api = APIConfig(**config_data.get('api', {}))

            config = cls(glossary=glossary, api=api)

            # Override other settings
            for key, value in config_data.items():
                if key not in ['glossary', 'api'] and hasattr(config, key):
                    setattr(config, key, value)

            return config

        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e

    def save_to_file(self, config_path: str):
        """Save configuration to YAML file"""
        import yaml

        config_data = {
            'glossary': {
                'include_builtin': self.glossary.include_builtin,
                'extra_files': list(self.glossary.extra_files),
            },
            'api': {
                'host': self.api.host,
                'port': self.api.port,
                'max_text_chars': self.api.max_text_chars,
                'debug': self.api.debug,
            },
            'log_level': self.log_level,
            'debug': self.debug,
        }

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_data, f, default_flow_style=False, indent=2)


# Default global configuration instance
default_config = TermTipConfig()
