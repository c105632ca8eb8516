"""Interactive collection of the WalletConnect project id."""

from __future__ import annotations

import logging
from typing import Callable

from .errors import UsageError

__all__ = ["Ask", "WALLETCONNECT_PROMPT", "prompt_wallet_connect_id"]


LOGGER = logging.getLogger(__name__)

Ask = Callable[[str], str]

WALLETCONNECT_PROMPT = (
    "Please enter your WalletConnect Project ID (from https://cloud.walletconnect.com): "
)


def prompt_wallet_connect_id(ask: Ask | None = None) -> str:
    """Ask the operator for the project id and return the answer verbatim.

    ``ask`` defaults to :func:`input`. An empty answer, or end of input, yields
    ``""``. Undecodable input raises :class:`~better_wagmi.errors.UsageError`.
    """

    if ask is None:
        ask = input
    try:
        answer = ask(WALLETCONNECT_PROMPT)
    except EOFError:
        answer = ""
    except UnicodeDecodeError as exc:
        raise UsageError("the WalletConnect Project ID could not be decoded from standard input") from exc

    if not answer:
        LOGGER.warning("No WalletConnect Project ID given; wallet connections will not work until it is set.")
    return answer
