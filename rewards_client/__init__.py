"""Signed client for the rewards grant service."""

from .config import Environment, EnvironmentConfig
from .endpoints.post_bat_loss import PostBatLoss
from .lib.request_signer import RequestSigner
from .lib.url_loader import LogLevel, URLLoader
from .models import Result, RewardsWallet, UrlMethod, UrlRequest, UrlResponse
from .services.wallet_store import WalletStore

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "EnvironmentConfig",
    "LogLevel",
    "PostBatLoss",
    "RequestSigner",
    "Result",
    "RewardsWallet",
    "URLLoader",
    "UrlMethod",
    "UrlRequest",
    "UrlResponse",
    "WalletStore",
]
