import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from token_wrapper.config import get_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch, tmp_path):
    # Keep a stray .env or exported TOKEN_WRAPPER_* variable out of the defaults.
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config():
    return get_config()


@pytest.fixture
def mint() -> Pubkey:
    return Keypair().pubkey()


@pytest.fixture
def payer() -> Pubkey:
    return Keypair().pubkey()
