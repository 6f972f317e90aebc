"""
POST /v1/wallets/{payment_id}/events/batloss/{version}

Reports an amount of BAT lost by the wallet (e.g. during recovery) to the
grant service. The request is signed with the wallet's credentials and the
response is reduced to a Result:

    200           -> OK
    500           -> FAILED (internal server error)
    anything else -> FAILED (unexpected status)

The response body is not read. Every call sends at most one request and
produces exactly one Result.
"""

import asyncio
import logging
from typing import Callable

import httpx

from ..config import EnvironmentConfig
from ..lib import url_helpers
from ..lib.request_signer import RequestSigner
from ..lib.url_loader import LogLevel, URLLoader
from ..models import Result, UrlMethod, UrlRequest, UrlResponse
from ..services.wallet_store import WalletStore

logger = logging.getLogger("post_bat_loss")

HTTP_OK = 200
HTTP_INTERNAL_SERVER_ERROR = 500

PostBatLossCallback = Callable[[Result], None]


class PostBatLoss:
    def __init__(self, config: EnvironmentConfig, wallet_store: WalletStore, url_loader: URLLoader):
        self.config = config
        self.wallet_store = wallet_store
        self.url_loader = url_loader

    def get_url(self, version: int) -> str:
        """Empty string if there is no wallet or the URL cannot be built."""
        wallet = self.wallet_store.get_wallet()
        if not wallet:
            logger.error("Wallet is null")
            return ""

        try:
            return url_helpers.resolve(
                self.config.rewards_grant_url,
                ["/v1/wallets/", wallet.payment_id, "/events/batloss/", str(int(version))],
            )
        except httpx.InvalidURL as e:
            logger.error(f"Invalid URL: {e}")
            return ""

    @staticmethod
    def generate_payload(amount: float) -> str:
        # %f: fixed point, six decimals, locale independent
        return '{"amount": %f}' % amount

    @staticmethod
    def check_status_code(status_code: int) -> Result:
        if status_code == HTTP_INTERNAL_SERVER_ERROR:
            logger.error("Internal server error")
            return Result.FAILED

        if status_code != HTTP_OK:
            logger.error(f"Unexpected HTTP status: {status_code}")
            return Result.FAILED

        return Result.OK

    async def request(self, amount: float, version: int) -> Result:
        """Send the loss report and return its Result. Never raises for request failures."""
        wallet = self.wallet_store.get_wallet()
        if not wallet:
            logger.error("Wallet is null")
            return Result.FAILED

        request = UrlRequest(
            url=self.get_url(version),
            content=self.generate_payload(amount),
            content_type="application/json; charset=utf-8",
            method=UrlMethod.POST,
        )

        signer = RequestSigner.from_wallet(wallet)
        if not signer or not signer.sign_request(request):
            logger.error("Unable to sign request")
            return Result.FAILED

        response = await self.url_loader.load(request, LogLevel.DETAILED)
        return self._on_response(response)

    def request_with_callback(self, amount: float, version: int, callback: PostBatLossCallback) -> asyncio.Task:
        """
        Schedule request() on the running loop and hand its Result to
        callback exactly once. A task that raises or is cancelled reports
        FAILED.
        """
        task = asyncio.get_running_loop().create_task(self.request(amount, version))

        def _deliver(done: asyncio.Task):
            if done.cancelled():
                logger.error("Loss report cancelled")
                callback(Result.FAILED)
                return
            error = done.exception()
            if error is not None:
                logger.error(f"Loss report raised: {error!r}")
                callback(Result.FAILED)
                return
            callback(done.result())

        task.add_done_callback(_deliver)
        return task

    def _on_response(self, response: UrlResponse) -> Result:
        if response.status_code == 0:
            logger.error(f"Transport failure: {response.error}")
            return Result.FAILED
        return self.check_status_code(response.status_code)
