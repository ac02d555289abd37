"""Dotted domain strings to name account addresses.

Every label set maps to one of three shapes::

    name.tld              -> PlainDomain
    sub.name.tld          -> Subdomain       (leaf hashed as "0sub", or "1sub" for records)
    multi.sub.name.tld    -> SubdomainRecord (record mode only; "\\0sub" then "1multi")

Anything else raises UnsupportedDepthError before any account is touched.
"""

from dataclasses import dataclass
from typing import Optional, Union

from loguru import logger
from solders.pubkey import Pubkey

from .exceptions import UnsupportedDepthError
from .naming import get_name_account_key, get_name_hash, get_name_parent_from_tld

SUBDOMAIN_PREFIX = "0"
RECORD_PREFIX = "1"
INTERMEDIATE_SUBDOMAIN_PREFIX = "\0"


@dataclass(frozen=True)
class PlainDomain:
    name: str
    tld: str


@dataclass(frozen=True)
class Subdomain:
    sub: str
    name: str
    tld: str


@dataclass(frozen=True)
class SubdomainRecord:
    record: str
    sub: str
    name: str
    tld: str


DomainShape = Union[PlainDomain, Subdomain, SubdomainRecord]


@dataclass(frozen=True)
class DomainKeyResult:
    address: Pubkey
    hashed_name: bytes
    is_subdomain: bool = False
    parent: Optional[Pubkey] = None
    is_multi_level_subdomain_record: bool = False


def parse_domain(domain: str, record: bool = False) -> DomainShape:
    labels = domain.split(".")
    if len(labels) == 2:
        return PlainDomain(name=labels[0], tld="." + labels[1])
    if len(labels) == 3:
        return Subdomain(sub=labels[0], name=labels[1], tld="." + labels[2])
    if len(labels) == 4 and record:
        return SubdomainRecord(record=labels[0], sub=labels[1], name=labels[2], tld="." + labels[3])
    raise UnsupportedDepthError(domain, len(labels))


def _domain_account(name: str, tld: str) -> Pubkey:
    return get_name_account_key(get_name_hash(name), None, get_name_parent_from_tld(tld))


def get_domain_key(domain: str, record: bool = False) -> DomainKeyResult:
    """Resolve ``domain`` to the address of its name record.

    ``record`` selects the record flavour of a subdomain ("1" prefix instead of "0")
    and is required for the four-label form.
    """
    shape = parse_domain(domain, record)

    if isinstance(shape, PlainDomain):
        hashed = get_name_hash(shape.name)
        address = get_name_account_key(hashed, None, get_name_parent_from_tld(shape.tld))
        result = DomainKeyResult(address=address, hashed_name=hashed)

    elif isinstance(shape, Subdomain):
        domain_key = _domain_account(shape.name, shape.tld)
        prefix = RECORD_PREFIX if record else SUBDOMAIN_PREFIX
        hashed = get_name_hash(prefix + shape.sub)
        address = get_name_account_key(hashed, None, domain_key)
        result = DomainKeyResult(address=address, hashed_name=hashed, is_subdomain=True, parent=domain_key)

    else:
        domain_key = _domain_account(shape.name, shape.tld)
        sub_key = get_name_account_key(get_name_hash(INTERMEDIATE_SUBDOMAIN_PREFIX + shape.sub), None, domain_key)
        hashed = get_name_hash(RECORD_PREFIX + shape.record)
        address = get_name_account_key(hashed, None, sub_key)
        result = DomainKeyResult(
            address=address,
            hashed_name=hashed,
            is_subdomain=True,
            parent=domain_key,
            is_multi_level_subdomain_record=True,
        )

    logger.debug("{} -> {}", domain, result.address)
    return result
