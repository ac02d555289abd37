"""Ledger reader boundary and its implementation on the Solana RPC client."""

from abc import ABC, abstractmethod

import base58
from loguru import logger
from solana.rpc.api import Client
from solana.rpc.types import MemcmpOpts
from solders.pubkey import Pubkey

from .exceptions import AccountNotFoundError


class LedgerReader(ABC):
    """Read-only access to ledger accounts."""

    @abstractmethod
    def get_account_bytes(self, address: Pubkey) -> bytes:
        """Raw account data; raises AccountNotFoundError when the account does not exist."""

    @abstractmethod
    def get_accounts_by_filter(self, program_id: Pubkey, filters):
        """``[(address, data), ...]`` for accounts of ``program_id`` matching every
        ``(offset, bytes)`` filter."""

    @abstractmethod
    def get_largest_token_holders(self, mint: Pubkey):
        """``[(token_account, amount), ...]`` ordered from the largest balance down."""


class RpcLedgerReader(LedgerReader):
    def __init__(self, url: str, timeout: float = 10, commitment: str = "confirmed", client: Client = None):
        self.url = url
        self.timeout = timeout
        self.commitment = commitment
        self.client = client or Client(url, commitment=commitment, timeout=timeout)

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.rpc_url, timeout=settings.rpc_timeout, commitment=settings.commitment)

    def get_account_bytes(self, address: Pubkey) -> bytes:
        logger.debug("get_account_info {}", address)
        res = self.client.get_account_info(address, encoding="base64")
        if res.value is None:
            raise AccountNotFoundError(address)
        return bytes(res.value.data)

    def get_accounts_by_filter(self, program_id: Pubkey, filters):
        memcmp = [MemcmpOpts(offset=offset, bytes=base58.b58encode(bytes(match)).decode("ascii")) for offset, match in filters]
        logger.debug("get_program_accounts {} with {} filters", program_id, len(memcmp))
        res = self.client.get_program_accounts(program_id, encoding="base64", filters=memcmp)
        return [(item.pubkey, bytes(item.account.data)) for item in res.value]

    def get_largest_token_holders(self, mint: Pubkey):
        logger.debug("get_token_largest_accounts {}", mint)
        res = self.client.get_token_largest_accounts(mint)
        return [(item.address, int(item.amount.amount)) for item in res.value]
