"""Fixed-purpose program addresses of the TLD-house and name-house programs."""

from solders.pubkey import Pubkey

from .constants import (
    CLAIMABLE_DOMAIN_PREFIX,
    COLLECTION_PREFIX,
    MAIN_DOMAIN_PREFIX,
    NAME_HOUSE_PREFIX,
    NAME_HOUSE_PROGRAM_ID,
    NFT_RECORD_PREFIX,
    PDA_SEED,
    PREFIX,
    TLD_HOUSE_PROGRAM_ID,
    TREASURY,
)
from .naming import normalize_tld


def find_tld_state():
    return Pubkey.find_program_address([PDA_SEED.encode()], TLD_HOUSE_PROGRAM_ID)


def find_tld_house(tld: str):
    seeds = [PREFIX.encode(), normalize_tld(tld).encode()]
    return Pubkey.find_program_address(seeds, TLD_HOUSE_PROGRAM_ID)


def find_tld_house_treasury(tld: str):
    seeds = [PREFIX.encode(), normalize_tld(tld).encode(), TREASURY.encode()]
    return Pubkey.find_program_address(seeds, TLD_HOUSE_PROGRAM_ID)


def find_main_domain(user: Pubkey):
    return Pubkey.find_program_address([MAIN_DOMAIN_PREFIX.encode(), bytes(user)], TLD_HOUSE_PROGRAM_ID)


def find_claimable_domain(tld_house: Pubkey, domain_account: Pubkey):
    seeds = [CLAIMABLE_DOMAIN_PREFIX.encode(), bytes(tld_house), bytes(domain_account)]
    return Pubkey.find_program_address(seeds, TLD_HOUSE_PROGRAM_ID)


def find_name_house(tld_house: Pubkey):
    return Pubkey.find_program_address([NAME_HOUSE_PREFIX.encode(), bytes(tld_house)], NAME_HOUSE_PROGRAM_ID)


def find_nft_record(name_account: Pubkey, name_house: Pubkey):
    seeds = [NFT_RECORD_PREFIX.encode(), bytes(name_house), bytes(name_account)]
    return Pubkey.find_program_address(seeds, NAME_HOUSE_PROGRAM_ID)


def find_mint_address(name_account: Pubkey, name_house: Pubkey):
    seeds = [NAME_HOUSE_PREFIX.encode(), bytes(name_house), bytes(name_account)]
    return Pubkey.find_program_address(seeds, NAME_HOUSE_PROGRAM_ID)


def find_collection_mint_address(tld_house: Pubkey):
    return Pubkey.find_program_address([COLLECTION_PREFIX.encode(), bytes(tld_house)], NAME_HOUSE_PROGRAM_ID)
