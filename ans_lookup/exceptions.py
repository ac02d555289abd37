class AnsError(Exception):
    """Base class for every error raised by ans_lookup."""


class AccountNotFoundError(AnsError):
    def __init__(self, address):
        super().__init__(f"account {address} not found")
        self.address = address


class RecordFormatError(AnsError):
    """Account bytes do not match the expected layout."""


class UnsupportedDepthError(AnsError):
    def __init__(self, domain: str, labels: int):
        super().__init__(f"unsupported domain depth for {domain!r}: {labels} labels")
        self.domain = domain
        self.labels = labels


class ExpiredRecordError(AnsError):
    def __init__(self, address, expires_at: int):
        super().__init__(f"name record {address} expired at {expires_at}")
        self.address = address
        self.expires_at = expires_at


class ConfigurationError(AnsError):
    pass
