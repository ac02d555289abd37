from loguru import logger
from solders.pubkey import Pubkey

from .naming import find_name_account_from_hashed_name, get_name_hash
from .pda import find_tld_house
from .reader import LedgerReader
from .records import NameRecord, TldHouse


def get_reverse_lookup_key(name_account: Pubkey, tld_house: Pubkey) -> Pubkey:
    key, _ = find_name_account_from_hashed_name(get_name_hash(str(name_account)), tld_house, None)
    return key


def get_tld_from_parent_account(reader: LedgerReader, parent_account: Pubkey) -> str:
    """Suffix (e.g. ``.abc``) administered by the TLD house owning ``parent_account``."""
    parent = NameRecord.from_bytes(reader.get_account_bytes(parent_account))
    return TldHouse.tld_from_bytes(reader.get_account_bytes(parent.owner))


def reverse_lookup_with_tld_house(reader: LedgerReader, name_account: Pubkey, tld_house: Pubkey) -> str:
    reverse_key = get_reverse_lookup_key(name_account, tld_house)
    logger.debug("reverse lookup account for {}: {}", name_account, reverse_key)
    return NameRecord.reverse_lookup_domain(reader.get_account_bytes(reverse_key))


def reverse_lookup(reader: LedgerReader, name_account: Pubkey) -> str:
    """Domain label of ``name_account`` when its suffix is not known up front."""
    record = NameRecord.from_bytes(reader.get_account_bytes(name_account))
    tld = get_tld_from_parent_account(reader, record.parent_name)
    tld_house, _ = find_tld_house(tld)
    return reverse_lookup_with_tld_house(reader, name_account, tld_house)
