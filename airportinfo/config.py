import logging
import os
from typing import Any, Dict, Optional

import yaml

from airportinfo.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://v4p4sz5ijk.execute-api.us-east-1.amazonaws.com/anbdata/airports/locations/doc7910"


class Config:
    def __init__(self, path: Optional[str] = None) -> None:
        if path is None:
            path = os.path.join(os.path.abspath(__file__ + "/../../"), "config/config.yaml")

        parsed_yaml_file: Dict = {}
        if os.path.exists(path):
            with open(path, "r") as config:
                parsed_yaml_file = yaml.safe_load(config) or {}
        else:
            logger.debug(f"No configuration file at {path}, using defaults")

        if not isinstance(parsed_yaml_file, dict):
            raise ConfigError(f"{path}: top level must be a mapping")

        api = parsed_yaml_file.get("api") or {}
        if not isinstance(api, dict):
            raise ConfigError(f"{path}: 'api' must be a mapping")

        self.api_key: str = api.get("key") or ""
        self.api_url: str = api.get("url") or DEFAULT_API_URL
        self.image_url: Optional[str] = api.get("image_url")
        self.timeout: Optional[float] = api.get("timeout")

    @property
    def client_params(self) -> Dict[str, Any]:
        return {
            "api_key": self.api_key,
            "api_url": self.api_url,
            "image_url": self.image_url,
            "timeout": self.timeout,
        }


common_conf = Config()
