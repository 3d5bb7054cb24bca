#!filepath: learnnet/config/app_config.py
from __future__ import annotations

import os
from functools import lru_cache

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .network_config import NetworkConfig


def package_root() -> str:
    """
    learnnet/config/app_config.py -> learnnet/config -> learnnet
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env

        - defaults to <package>/config/base.yml
        - LEARNNET_VERBOSITY overrides network.verbosity
        """
        load_dotenv()

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        verbosity = os.getenv("LEARNNET_VERBOSITY")
        if verbosity is not None:
            raw.setdefault("network", {})
            raw["network"] = dict(raw["network"] or {}, verbosity=int(verbosity))

        return cls(**raw)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return AppConfig.load()
