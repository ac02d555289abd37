import pytest

from ans_lookup.domain_key import get_domain_key
from ans_lookup.exceptions import AccountNotFoundError
from ans_lookup.naming import get_name_parent_from_tld
from ans_lookup.pda import find_tld_house
from ans_lookup.reverse import (
    get_reverse_lookup_key,
    get_tld_from_parent_account,
    reverse_lookup,
    reverse_lookup_with_tld_house,
)
from tests.helpers import key, name_record_bytes, tld_house_bytes

TLD_HOUSE = find_tld_house(".abc")[0]
PARENT = get_name_parent_from_tld(".abc")


def publish(reader, label, tld=".abc"):
    """Store the records a reverse lookup of ``label + tld`` walks through."""
    name_account = get_domain_key(label + tld).address
    reader.accounts[name_account] = name_record_bytes(PARENT, key(2))
    reader.accounts[PARENT] = name_record_bytes(key(0), TLD_HOUSE)
    reader.accounts[TLD_HOUSE] = tld_house_bytes(tld)
    reverse_key = get_reverse_lookup_key(name_account, TLD_HOUSE)
    reader.accounts[reverse_key] = name_record_bytes(key(0), key(2), TLD_HOUSE, tail=label.encode())
    return name_account


def test_tld_from_parent_account(reader):
    publish(reader, "miester")
    assert get_tld_from_parent_account(reader, PARENT) == ".abc"


def test_fast_path(reader):
    name_account = publish(reader, "miester")
    assert reverse_lookup_with_tld_house(reader, name_account, TLD_HOUSE) == "miester"
    assert len(reader.fetched) == 1


def test_slow_path_round_trip(reader):
    for label in ("miester", "a", "ünïcode"):
        name_account = publish(reader, label)
        reader.fetched.clear()
        assert reverse_lookup(reader, name_account) == label
        assert len(reader.fetched) == 4


def test_wrong_house_is_not_found(reader):
    name_account = publish(reader, "miester")
    with pytest.raises(AccountNotFoundError):
        reverse_lookup_with_tld_house(reader, name_account, key(5))


def test_missing_hop_aborts(reader):
    name_account = publish(reader, "miester")
    del reader.accounts[TLD_HOUSE]
    with pytest.raises(AccountNotFoundError):
        reverse_lookup(reader, name_account)
