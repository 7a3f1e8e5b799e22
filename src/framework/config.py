"""
Service configuration loaded from the environment (and an optional .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


class ConfigError(ValueError):
    """Configuration loading/validation error."""


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def _float_from_env(name: str, default: Optional[float]) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}") from None


@dataclass
class ServiceConfig:
    """Configuration shared by the web service endpoints."""
    wsf_base_url: str = "http://localhost"
    wsf_graph: str = "http://localhost/wsf/"   # base of the system graphs
    pool_size: int = 4                         # ontology store sessions
    checkout_timeout: Optional[float] = None   # seconds, None waits forever
    log_level: str = "INFO"

    def __post_init__(self):
        if self.pool_size < 1:
            raise ConfigError(f"pool_size must be at least 1, got {self.pool_size}")
        if not self.wsf_graph.endswith("/"):
            self.wsf_graph += "/"

    @property
    def ontologies_registry_uri(self) -> str:
        """Scope covering all the ontologies of the system."""
        return self.wsf_graph + "ontologies/"

    @property
    def datasets_registry_uri(self) -> str:
        """Graph holding the description of every dataset."""
        return self.wsf_graph + "datasets/"

    def service_uri(self, path: str) -> str:
        """URI of a web service, e.g. service_uri("ontology/delete/")."""
        return f"{self.wsf_base_url.rstrip('/')}/wsf/ws/{path}"

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        return cls(
            wsf_base_url=os.getenv("WSF_BASE_URL", cls.wsf_base_url),
            wsf_graph=os.getenv("WSF_GRAPH", cls.wsf_graph),
            pool_size=_int_from_env("ONTOLOGY_STORE_POOL_SIZE", cls.pool_size),
            checkout_timeout=_float_from_env("ONTOLOGY_STORE_CHECKOUT_TIMEOUT", None),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )
