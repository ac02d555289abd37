import pytest

from tests.helpers import FakeLedgerReader


@pytest.fixture
def reader():
    return FakeLedgerReader()
