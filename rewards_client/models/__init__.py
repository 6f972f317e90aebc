from .common import Result, UrlMethod, UrlRequest, UrlResponse
from .wallet import RewardsWallet

__all__ = ["Result", "UrlMethod", "UrlRequest", "UrlResponse", "RewardsWallet"]
