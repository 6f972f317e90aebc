"""
Wallet identity provider.

Holds the current rewards wallet snapshot. The wallet subsystem owns
persistence; this store only loads a JSON export of it:

    {"payment_id": "...", "recovery_seed": "<base64>"}
"""
import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..models import RewardsWallet

logger = logging.getLogger("wallet_store")


class WalletStore:
    def __init__(self, wallet: Optional[RewardsWallet] = None):
        self._wallet = wallet

    def get_wallet(self) -> Optional[RewardsWallet]:
        """Current wallet snapshot, or None if no wallet exists."""
        return self._wallet

    def set_wallet(self, wallet: RewardsWallet):
        self._wallet = wallet

    def clear(self):
        self._wallet = None

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "WalletStore":
        """
        Load a wallet export. A missing or malformed file gives an
        empty store rather than an error.
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Wallet file not found: {path}")
            return cls()

        try:
            with open(path) as f:
                data = json.load(f)
            return cls(RewardsWallet.model_validate(data))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Could not load wallet from {path}: {e}")
            return cls()

    @classmethod
    def from_env(cls) -> "WalletStore":
        """Load from REWARDS_WALLET_JSON, if set."""
        path = os.environ.get("REWARDS_WALLET_JSON")
        if not path:
            return cls()
        return cls.from_file(path)
