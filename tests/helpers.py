import struct

from solders.pubkey import Pubkey

from ans_lookup.exceptions import AccountNotFoundError
from ans_lookup.reader import LedgerReader

DISCRIMINATOR = bytes(range(8))


def key(n: int) -> Pubkey:
    return Pubkey.from_bytes(bytes([n]) * 32)


def name_record_bytes(parent: Pubkey, owner: Pubkey, name_class: Pubkey = None, expires_at: int = 0, tail: bytes = b"", size: int = 200):
    header = DISCRIMINATOR + bytes(parent) + bytes(owner) + bytes(name_class or Pubkey.default())
    header += struct.pack("<Q", expires_at)
    return header.ljust(size, b"\x00") + tail


def record_data_bytes(owner: Pubkey, data: bytes):
    return name_record_bytes(key(9), owner, size=208) + struct.pack("<I", len(data)) + data


def main_domain_bytes(name_account: Pubkey, tld: str, domain: str):
    out = DISCRIMINATOR + bytes(name_account)
    for text in (tld, domain):
        raw = text.encode()
        out += struct.pack("<I", len(raw)) + raw
    return out


def nft_record_bytes(name_account: Pubkey, owner: Pubkey, mint: Pubkey, tld_house: Pubkey, tag: int = 1, bump: int = 254):
    return (
        DISCRIMINATOR
        + bytes([tag, bump])
        + bytes(name_account)
        + bytes(owner)
        + bytes(mint)
        + bytes(tld_house)
    ).ljust(170, b"\x00")


def token_account_bytes(mint: Pubkey, owner: Pubkey, amount: int = 1):
    return (bytes(mint) + bytes(owner) + struct.pack("<Q", amount)).ljust(165, b"\x00")


def tld_house_bytes(tld: str):
    raw = tld.encode()
    return DISCRIMINATOR + bytes(key(1)) + bytes(key(2)) + bytes(key(3)) + struct.pack("<I", len(raw)) + raw + bytes(16)


class FakeLedgerReader(LedgerReader):
    def __init__(self):
        self.accounts = {}
        self.program_accounts = {}
        self.holders = {}
        self.fetched = []

    def get_account_bytes(self, address):
        self.fetched.append(address)
        if address not in self.accounts:
            raise AccountNotFoundError(address)
        return self.accounts[address]

    def get_accounts_by_filter(self, program_id, filters):
        return [
            (address, data)
            for address, data in self.program_accounts.get(program_id, [])
            if all(data[offset:offset + len(match)] == match for offset, match in filters)
        ]

    def get_largest_token_holders(self, mint):
        return self.holders.get(mint, [])
