"""Current owner of a name record, following the NFT wrap indirection.

When a domain is wrapped its name record is owned by the wrap record (an
``NftRecord`` derived from the name account and the suffix's name house), and
the real owner is whoever holds the wrapped mint.
"""

from dataclasses import dataclass
from typing import Union

from loguru import logger
from solders.pubkey import Pubkey

from .exceptions import AccountNotFoundError
from .pda import find_name_house, find_nft_record, find_tld_house
from .reader import LedgerReader
from .records import NameRecord, NftRecord, TokenAccount
from .validity import is_record_valid


@dataclass(frozen=True)
class DirectOwner:
    address: Pubkey


@dataclass(frozen=True)
class WrappedOwner:
    nft_record_key: Pubkey
    nft_record: NftRecord


Owner = Union[DirectOwner, WrappedOwner]


def get_nft_record_key(name_account: Pubkey, tld: str) -> Pubkey:
    tld_house, _ = find_tld_house(tld)
    name_house, _ = find_name_house(tld_house)
    nft_record_key, _ = find_nft_record(name_account, name_house)
    return nft_record_key


def classify_owner(reader: LedgerReader, name_account: Pubkey, record: NameRecord, tld: str) -> Owner:
    nft_record_key = get_nft_record_key(name_account, tld)
    if record.owner != nft_record_key:
        return DirectOwner(record.owner)
    logger.debug("{} is wrapped by {}", name_account, nft_record_key)
    nft_record = NftRecord.from_bytes(reader.get_account_bytes(nft_record_key))
    return WrappedOwner(nft_record_key, nft_record)


def get_token_holder(reader: LedgerReader, mint: Pubkey) -> Pubkey:
    """Owner of the token account holding the largest balance of ``mint``."""
    holders = reader.get_largest_token_holders(mint)
    if not holders:
        raise AccountNotFoundError(mint)
    token_account, _ = holders[0]
    return TokenAccount.from_bytes(reader.get_account_bytes(token_account)).owner


def resolve_owner(reader: LedgerReader, name_account: Pubkey, record: NameRecord, tld: str, now: int = None) -> Pubkey:
    """Owner of ``record``; ``Pubkey.default()`` once the record is no longer valid."""
    if not is_record_valid(record, now):
        return Pubkey.default()
    owner = classify_owner(reader, name_account, record, tld)
    if isinstance(owner, DirectOwner):
        return owner.address
    return get_token_holder(reader, owner.nft_record.nft_mint_account)
