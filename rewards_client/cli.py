"""
rewards-report-loss: report a BAT loss event for a rewards wallet

Usage:
    rewards-report-loss --amount 12.5 --version 8 --wallet wallet.json

Wallet JSON format:
    {"payment_id": "...", "recovery_seed": "<base64>"}

Environment variables:
    REWARDS_ENVIRONMENT, REWARDS_GRANT_URL, REWARDS_HTTP_TIMEOUT - defaults for the options below
    REWARDS_WALLET_JSON - wallet file when --wallet is not given

Exit status: 0 on ok, 1 on failed, 2 on bad configuration.
"""

import argparse
import asyncio
import logging
import os
import sys

from .config import DEFAULT_TIMEOUT, Environment, EnvironmentConfig
from .endpoints.post_bat_loss import PostBatLoss
from .lib.url_loader import URLLoader
from .models import Result
from .services.wallet_store import WalletStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rewards-report-loss",
        description="Report a BAT loss event to the rewards grant service",
    )
    parser.add_argument("--amount", type=float, required=True, help="Amount of BAT lost")
    parser.add_argument("--version", type=int, required=True, help="Loss event schema version")
    parser.add_argument("--wallet", help="Wallet JSON file (default: $REWARDS_WALLET_JSON)")
    parser.add_argument(
        "--environment",
        default=os.environ.get("REWARDS_ENVIRONMENT", Environment.PRODUCTION.value),
        help="production, staging or development",
    )
    parser.add_argument("--grant-url", default=os.environ.get("REWARDS_GRANT_URL"), help="Override grant service URL")
    parser.add_argument(
        "--timeout",
        default=os.environ.get("REWARDS_HTTP_TIMEOUT", DEFAULT_TIMEOUT),
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request and response details")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = EnvironmentConfig.for_environment(args.environment, grant_url=args.grant_url, timeout=args.timeout)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    wallet_store = WalletStore.from_file(args.wallet) if args.wallet else WalletStore.from_env()
    endpoint = PostBatLoss(config, wallet_store, URLLoader(timeout=config.timeout))

    result = asyncio.run(endpoint.request(args.amount, args.version))
    print(result.value)
    return 0 if result == Result.OK else 1


if __name__ == "__main__":
    sys.exit(main())
