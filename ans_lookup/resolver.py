from loguru import logger
from solders.pubkey import Pubkey

from .config import load_settings
from .constants import ANS_PROGRAM_ID, NAME_RECORD_OWNER_OFFSET, NAME_RECORD_PARENT_OFFSET
from .domain_key import get_domain_key
from .exceptions import AccountNotFoundError, ExpiredRecordError, RecordFormatError
from .naming import get_name_parent_from_tld
from .ownership import resolve_owner
from .pda import find_main_domain
from .reader import LedgerReader, RpcLedgerReader
from .record_types import CONTENT_RECORDS, Record
from .records import MainDomain, NameRecord
from .reverse import get_tld_from_parent_account, reverse_lookup, reverse_lookup_with_tld_house
from .validity import evaluate


class AnsResolver:
    """Read-only lookups against the ANS name service through one ledger reader."""

    def __init__(self, reader: LedgerReader = None):
        self.reader = reader or RpcLedgerReader.from_settings(load_settings())

    def get_main_domain(self, user: Pubkey, check_validity: bool = False, now: int = None) -> MainDomain:
        """Main domain pointer of ``user``.

        The pointer is not kept in sync with the name record it points at; with
        ``check_validity`` the target is fetched and ExpiredRecordError is raised
        if it is past its grace period.
        """
        main_domain_key, _ = find_main_domain(user)
        main_domain = MainDomain.from_bytes(self.reader.get_account_bytes(main_domain_key))
        if check_validity:
            record = self.get_name_record_from_name_account(main_domain.name_account, now)
            if not record.is_valid:
                raise ExpiredRecordError(main_domain.name_account, record.expires_at)
        return main_domain

    def get_all_user_domains(self, user: Pubkey):
        accounts = self.reader.get_accounts_by_filter(ANS_PROGRAM_ID, [(NAME_RECORD_OWNER_OFFSET, bytes(user))])
        return [address for address, _ in accounts]

    def get_all_user_domains_from_tld(self, user: Pubkey, tld: str):
        parent = get_name_parent_from_tld(tld)
        filters = [(NAME_RECORD_PARENT_OFFSET, bytes(parent)), (NAME_RECORD_OWNER_OFFSET, bytes(user))]
        accounts = self.reader.get_accounts_by_filter(ANS_PROGRAM_ID, filters)
        return [address for address, _ in accounts]

    def get_name_record_from_name_account(self, name_account: Pubkey, now: int = None) -> NameRecord:
        return evaluate(NameRecord.from_bytes(self.reader.get_account_bytes(name_account)), now)

    def get_name_record_from_domain_tld(self, domain_tld: str, now: int = None) -> NameRecord:
        return self.get_name_record_from_name_account(get_domain_key(domain_tld).address, now)

    def get_owner_from_domain_tld(self, domain_tld: str, now: int = None) -> Pubkey:
        name_account = get_domain_key(domain_tld).address
        record = self.get_name_record_from_name_account(name_account, now)
        tld = "." + domain_tld.rsplit(".", 1)[1]
        owner = resolve_owner(self.reader, name_account, record, tld, now)
        logger.debug("{} owned by {}", domain_tld, owner)
        return owner

    def get_tld_from_parent_account(self, parent_account: Pubkey) -> str:
        return get_tld_from_parent_account(self.reader, parent_account)

    def reverse_lookup_with_tld_house(self, name_account: Pubkey, tld_house: Pubkey) -> str:
        return reverse_lookup_with_tld_house(self.reader, name_account, tld_house)

    def reverse_lookup_name_account(self, name_account: Pubkey) -> str:
        return reverse_lookup(self.reader, name_account)

    def get_record(self, domain_tld: str, record: Record) -> str:
        key = get_domain_key(f"{Record(record).value}.{domain_tld}", record=True).address
        return NameRecord.data_string(self.reader.get_account_bytes(key))

    def find_domain_name_records(self, domain_tld: str, now: int = None):
        """First content record (url, IPFS, ARWV, SHDW) present on ``domain_tld``, or None."""
        for record in CONTENT_RECORDS:
            key = get_domain_key(f"{record.value}.{domain_tld}", record=True).address
            try:
                return evaluate(NameRecord.from_bytes(self.reader.get_account_bytes(key)), now)
            except (AccountNotFoundError, RecordFormatError) as e:
                logger.debug("no {} record on {}: {}", record.value, domain_tld, e)
        return None
