from typing import Sequence

import httpx


def resolve(base: str, segments: Sequence[str]) -> str:
    """
    Join path segments and resolve the result against a base URL.

    An absolute path replaces the base path, so
    resolve("https://grant.example/", ["/v1/", "x"]) -> "https://grant.example/v1/x".
    """
    return str(httpx.URL(base).join("".join(segments)))
