import hashlib

from hypothesis import given, settings
from hypothesis import strategies as st
from solders.pubkey import Pubkey

from ans_lookup.constants import ORIGIN_TLD_KEY
from ans_lookup.naming import (
    find_name_account_from_name,
    get_name_account_key,
    get_name_hash,
    get_name_parent_from_tld,
)
from tests.helpers import key


def test_name_hash_uses_prefix():
    assert get_name_hash("miester") == hashlib.sha256(b"ALT Name Servicemiester").digest()
    assert len(get_name_hash("")) == 32


def test_abc_parent_account():
    assert get_name_parent_from_tld(".abc") == Pubkey.from_string("3pSeaEVTcKLkXPCpZHDpHUMWAogYFZgKSiVtyvqcgo8a")


def test_tld_dot_is_optional():
    assert get_name_parent_from_tld("abc") == get_name_parent_from_tld(".abc")


def test_tld_is_rooted_under_origin():
    expected = get_name_account_key(get_name_hash(".abc"), None, ORIGIN_TLD_KEY)
    assert get_name_parent_from_tld(".abc") == expected
    assert get_name_account_key(get_name_hash(".abc")) != expected


def test_class_and_parent_change_address():
    hashed = get_name_hash("name")
    plain = get_name_account_key(hashed)
    assert plain == get_name_account_key(hashed, Pubkey.default(), Pubkey.default())
    assert get_name_account_key(hashed, key(1)) != plain
    assert get_name_account_key(hashed, None, key(1)) != plain
    assert get_name_account_key(hashed, key(1)) != get_name_account_key(hashed, None, key(1))


def test_find_name_account_from_name_returns_bump():
    address, bump = find_name_account_from_name("name", None, key(2))
    assert address == get_name_account_key(get_name_hash("name"), None, key(2))
    assert 0 <= bump <= 255


@settings(max_examples=25, deadline=None)
@given(st.text(max_size=20), st.text(max_size=20))
def test_distinct_names_derive_distinct_accounts(a, b):
    if a == b:
        assert get_name_account_key(get_name_hash(a), None, key(3)) == get_name_account_key(get_name_hash(b), None, key(3))
    else:
        assert get_name_hash(a) != get_name_hash(b)
        assert get_name_account_key(get_name_hash(a), None, key(3)) != get_name_account_key(get_name_hash(b), None, key(3))
