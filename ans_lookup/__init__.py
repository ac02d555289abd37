from solders.pubkey import Pubkey

from .domain_key import DomainKeyResult, PlainDomain, Subdomain, SubdomainRecord, get_domain_key, parse_domain
from .exceptions import (
    AccountNotFoundError,
    AnsError,
    ConfigurationError,
    ExpiredRecordError,
    RecordFormatError,
    UnsupportedDepthError,
)
from .naming import get_name_account_key, get_name_hash, get_name_parent_from_tld
from .ownership import DirectOwner, WrappedOwner, classify_owner, resolve_owner
from .pda import find_main_domain, find_name_house, find_nft_record, find_tld_house
from .reader import LedgerReader, RpcLedgerReader
from .record_types import Record
from .records import MainDomain, NameRecord, NftRecord, Tag
from .resolver import AnsResolver
from .validity import evaluate, is_record_valid

__version__ = "0.1.0"
