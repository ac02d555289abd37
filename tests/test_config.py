import os
from unittest.mock import patch

import pytest

from ans_lookup.config import DEFAULT_RPC_URL, load_settings
from ans_lookup.exceptions import ConfigurationError


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        settings = load_settings(dotenv=False)
    assert settings.rpc_url == DEFAULT_RPC_URL
    assert settings.rpc_timeout == 10
    assert settings.commitment == "confirmed"


def test_environment_overrides():
    env = {"ANS_RPC_URL": "http://localhost:8899", "ANS_RPC_TIMEOUT": "2.5", "ANS_COMMITMENT": "finalized"}
    with patch.dict(os.environ, env, clear=True):
        settings = load_settings(dotenv=False)
    assert settings.rpc_url == "http://localhost:8899"
    assert settings.rpc_timeout == 2.5
    assert settings.commitment == "finalized"


def test_bad_timeout():
    with patch.dict(os.environ, {"ANS_RPC_TIMEOUT": "soon"}, clear=True):
        with pytest.raises(ConfigurationError):
            load_settings(dotenv=False)


@patch("ans_lookup.config.load_dotenv")
def test_loads_dotenv(mock_load):
    with patch.dict(os.environ, {}, clear=True):
        load_settings()
    assert mock_load.called
