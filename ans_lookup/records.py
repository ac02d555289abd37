"""Fixed-offset layouts of the accounts read by the resolver.

All name-service accounts start with an 8 byte discriminator followed by
little-endian fields in declaration order.
"""

import enum
from dataclasses import dataclass

from construct import Bytes, ConstructError, GreedyBytes, Int8ul, Int32ul, Int64ul, Padding, Prefixed, Struct
from solders.pubkey import Pubkey

from .constants import DISCRIMINATOR_LENGTH, RECORD_DATA_OFFSET, REVERSE_LOOKUP_OFFSET, TLD_HOUSE_TLD_OFFSET
from .exceptions import RecordFormatError

NAME_RECORD_LAYOUT = Struct(
    Padding(DISCRIMINATOR_LENGTH),
    "parent_name" / Bytes(32),
    "owner" / Bytes(32),
    "name_class" / Bytes(32),
    "expires_at" / Int64ul,
)

MAIN_DOMAIN_LAYOUT = Struct(
    Padding(DISCRIMINATOR_LENGTH),
    "name_account" / Bytes(32),
    "tld" / Prefixed(Int32ul, GreedyBytes),
    "domain" / Prefixed(Int32ul, GreedyBytes),
)

NFT_RECORD_LAYOUT = Struct(
    Padding(DISCRIMINATOR_LENGTH),
    "tag" / Int8ul,
    "bump" / Int8ul,
    "name_account" / Bytes(32),
    "owner" / Bytes(32),
    "nft_mint_account" / Bytes(32),
    "tld_house" / Bytes(32),
)

# Token program account; only the leading fields are needed.
TOKEN_ACCOUNT_LAYOUT = Struct(
    "mint" / Bytes(32),
    "owner" / Bytes(32),
    "amount" / Int64ul,
)

RECORD_DATA_LAYOUT = Struct(
    Padding(RECORD_DATA_OFFSET),
    "data" / Prefixed(Int32ul, GreedyBytes),
)

TLD_HOUSE_LAYOUT = Struct(
    Padding(TLD_HOUSE_TLD_OFFSET),
    "tld" / Prefixed(Int32ul, GreedyBytes),
)


def _parse(layout, data: bytes, kind: str):
    try:
        return layout.parse(bytes(data))
    except ConstructError as e:
        raise RecordFormatError(f"cannot decode {kind} from {len(data)} bytes: {e}") from e


def decode_text(data: bytes) -> str:
    """UTF-8 text with trailing NUL padding removed."""
    try:
        return bytes(data).rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as e:
        raise RecordFormatError(f"invalid utf-8 payload: {e}") from e


@dataclass
class NameRecord:
    parent_name: Pubkey
    owner: Pubkey
    name_class: Pubkey
    # 0 means the record never expires
    expires_at: int
    # computed at read time, never stored on-chain
    is_valid: bool = False

    @classmethod
    def from_bytes(cls, data: bytes) -> "NameRecord":
        parsed = _parse(NAME_RECORD_LAYOUT, data, "name record")
        return cls(
            parent_name=Pubkey.from_bytes(parsed.parent_name),
            owner=Pubkey.from_bytes(parsed.owner),
            name_class=Pubkey.from_bytes(parsed.name_class),
            expires_at=parsed.expires_at,
        )

    @staticmethod
    def data_string(data: bytes) -> str:
        """Length-prefixed payload stored after the record header."""
        return decode_text(_parse(RECORD_DATA_LAYOUT, data, "record data").data)

    @staticmethod
    def reverse_lookup_domain(data: bytes) -> str:
        """Domain label of a reverse-lookup account; runs to the end of the buffer."""
        if len(data) < REVERSE_LOOKUP_OFFSET:
            raise RecordFormatError(
                f"reverse lookup account too short: {len(data)} < {REVERSE_LOOKUP_OFFSET} bytes"
            )
        return decode_text(data[REVERSE_LOOKUP_OFFSET:])


@dataclass(frozen=True)
class MainDomain:
    name_account: Pubkey
    tld: str
    domain: str

    # discriminator + key + room for two short strings
    SIZE = 8 + 32 + 10 + 10 + 100

    @classmethod
    def from_bytes(cls, data: bytes) -> "MainDomain":
        parsed = _parse(MAIN_DOMAIN_LAYOUT, data, "main domain")
        return cls(
            name_account=Pubkey.from_bytes(parsed.name_account),
            tld=decode_text(parsed.tld),
            domain=decode_text(parsed.domain),
        )

    @property
    def full_domain(self) -> str:
        return self.domain + self.tld


class Tag(enum.IntEnum):
    Uninitialized = 0
    ActiveRecord = 1
    InactiveRecord = 2


@dataclass(frozen=True)
class NftRecord:
    name_account: Pubkey
    owner: Pubkey
    nft_mint_account: Pubkey
    tld_house: Pubkey
    tag: Tag = Tag.ActiveRecord
    bump: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "NftRecord":
        parsed = _parse(NFT_RECORD_LAYOUT, data, "nft record")
        try:
            tag = Tag(parsed.tag)
        except ValueError as e:
            raise RecordFormatError(f"unknown nft record tag {parsed.tag}") from e
        return cls(
            tag=tag,
            bump=parsed.bump,
            name_account=Pubkey.from_bytes(parsed.name_account),
            owner=Pubkey.from_bytes(parsed.owner),
            nft_mint_account=Pubkey.from_bytes(parsed.nft_mint_account),
            tld_house=Pubkey.from_bytes(parsed.tld_house),
        )

    @property
    def is_active(self) -> bool:
        return self.tag == Tag.ActiveRecord


@dataclass(frozen=True)
class TokenAccount:
    mint: Pubkey
    owner: Pubkey
    amount: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "TokenAccount":
        parsed = _parse(TOKEN_ACCOUNT_LAYOUT, data, "token account")
        return cls(mint=Pubkey.from_bytes(parsed.mint), owner=Pubkey.from_bytes(parsed.owner), amount=parsed.amount)


class TldHouse:
    @staticmethod
    def tld_from_bytes(data: bytes) -> str:
        return decode_text(_parse(TLD_HOUSE_LAYOUT, data, "tld house").tld)
