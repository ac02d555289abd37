import hashlib

from loguru import logger
from solders.pubkey import Pubkey

from .constants import ANS_PROGRAM_ID, ORIGIN_TLD_KEY

HASH_PREFIX = "ALT Name Service"


def get_name_hash(name: str) -> bytes:
    return hashlib.sha256((HASH_PREFIX + name).encode("utf-8")).digest()


def get_name_service_seeds(name_hash: bytes, name_class: Pubkey = None, parent_name: Pubkey = None):
    # [hash, class or 32 zero bytes, parent or 32 zero bytes]
    return [
        name_hash,
        bytes(name_class) if name_class else bytes(32),
        bytes(parent_name) if parent_name else bytes(32),
    ]


def find_name_account_from_hashed_name(name_hash: bytes, name_class: Pubkey = None, parent_name: Pubkey = None):
    seeds = get_name_service_seeds(name_hash, name_class, parent_name)
    return Pubkey.find_program_address(seeds, ANS_PROGRAM_ID)


def find_name_account_from_name(name: str, name_class: Pubkey = None, parent_name: Pubkey = None):
    return find_name_account_from_hashed_name(get_name_hash(name), name_class, parent_name)


def get_name_account_key(name_hash: bytes, name_class: Pubkey = None, parent_name: Pubkey = None) -> Pubkey:
    key, _ = find_name_account_from_hashed_name(name_hash, name_class, parent_name)
    return key


def normalize_tld(tld: str) -> str:
    return tld if tld.startswith(".") else "." + tld


def get_name_parent_from_tld(tld: str) -> Pubkey:
    """Name account of a top-level suffix such as ``.abc``, rooted under the origin key."""
    tld = normalize_tld(tld)
    key = get_name_account_key(get_name_hash(tld), None, ORIGIN_TLD_KEY)
    logger.debug("tld {} parent account: {}", tld, key)
    return key
