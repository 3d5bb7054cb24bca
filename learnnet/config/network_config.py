#!filepath: learnnet/config/network_config.py
from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    """
    Defaults for training learning networks.
    """

    # diagnostic volume for fit(); 0 = silent
    verbosity: int = Field(default=1, ge=0)

    # record per-machine training time
    instrumentation: bool = False
