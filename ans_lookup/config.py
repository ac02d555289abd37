import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"


@dataclass(frozen=True)
class Settings:
    rpc_url: str = DEFAULT_RPC_URL
    rpc_timeout: float = 10
    commitment: str = "confirmed"


def load_settings(dotenv: bool = True) -> Settings:
    """Read ANS_* settings from the environment, after loading ``.env`` if present."""
    if dotenv:
        load_dotenv()
    timeout = os.getenv("ANS_RPC_TIMEOUT", "10")
    try:
        rpc_timeout = float(timeout)
    except ValueError:
        raise ConfigurationError(f"ANS_RPC_TIMEOUT must be a number, got {timeout!r}")
    return Settings(
        rpc_url=os.getenv("ANS_RPC_URL", DEFAULT_RPC_URL),
        rpc_timeout=rpc_timeout,
        commitment=os.getenv("ANS_COMMITMENT", "confirmed"),
    )
