"""
Pytest fixtures for rewards client tests.

HTTP is served by httpx.MockTransport; every request that reaches the
transport is recorded so tests can assert on what was (or was not) sent.
"""
from __future__ import annotations

import base64
from typing import Callable

import httpx
import pytest

from rewards_client import (
    EnvironmentConfig,
    PostBatLoss,
    RewardsWallet,
    URLLoader,
    WalletStore,
)

GRANT_URL = "https://grant.example/"
PAYMENT_ID = "abc123"
RECOVERY_SEED = bytes(range(32))


class RecordingTransport:
    """Answers every request with a fixed status (or error) and records it."""

    def __init__(self, status_code: int = 200, error: Exception | None = None):
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={})


@pytest.fixture
def wallet() -> RewardsWallet:
    return RewardsWallet(payment_id=PAYMENT_ID, recovery_seed=RECOVERY_SEED)


@pytest.fixture
def wallet_json(tmp_path, wallet):
    path = tmp_path / "wallet.json"
    path.write_text(
        '{"payment_id": "%s", "recovery_seed": "%s"}'
        % (wallet.payment_id, base64.b64encode(wallet.recovery_seed).decode())
    )
    return path


@pytest.fixture
def config() -> EnvironmentConfig:
    return EnvironmentConfig.for_environment("development", grant_url=GRANT_URL)


@pytest.fixture
def make_endpoint(config, wallet) -> Callable[..., tuple[PostBatLoss, RecordingTransport]]:
    """Build a PostBatLoss wired to a RecordingTransport."""

    def _make(status_code: int = 200, error: Exception | None = None, with_wallet: bool = True):
        transport = RecordingTransport(status_code=status_code, error=error)
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport.handler))
        store = WalletStore(wallet if with_wallet else None)
        return PostBatLoss(config, store, URLLoader(client=client)), transport

    return _make
