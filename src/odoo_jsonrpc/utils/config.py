"""Configuration management for the Odoo JSON-RPC client."""

import json
from pathlib import Path
from typing import Optional

from .logger import get_logger


DEFAULT_CONFIG_FILE = "config.json"


class Config:
    """Configuration for the Odoo JSON-RPC client."""
    
    def __init__(
        self,
        host: str = "localhost:8069",
        database: Optional[str] = None,
        log_level: str = "INFO",
        timeout: float = 30.0,
        verify_ssl: bool = True
    ):
        """
        Initialize configuration.
        
        Args:
            host: Odoo server host, with or without scheme
            database: Default database used for login (optional)
            log_level: Logging level
            timeout: HTTP timeout in seconds
            verify_ssl: Verify TLS certificates for https hosts
        """
        self.host = host
        self.database = database
        self.log_level = log_level
        self.timeout = timeout
        self.verify_ssl = verify_ssl
    
    @classmethod
    def from_file(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load configuration from a JSON file.
        
        Args:
            config_path: Path to config file (defaults to config.json in the working directory)
        
        Returns:
            Config instance
        """
        path = Path(config_path) if config_path is not None else Path.cwd() / DEFAULT_CONFIG_FILE
        
        if not path.exists():
            return cls()
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            
            return cls(
                host=data.get("host", "localhost:8069"),
                database=data.get("database"),
                log_level=data.get("log_level", "INFO"),
                timeout=float(data.get("timeout", 30.0)),
                verify_ssl=bool(data.get("verify_ssl", True))
            )
        except (json.JSONDecodeError, AttributeError, ValueError, OSError) as e:
            get_logger().warning(f"Failed to load config from {path}: {e}. Using defaults.")
            return cls()
    
    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "host": self.host,
            "database": self.database,
            "log_level": self.log_level,
            "timeout": self.timeout,
            "verify_ssl": self.verify_ssl
        }
