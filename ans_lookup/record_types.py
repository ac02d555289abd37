import enum


class Record(str, enum.Enum):
    """Record subdomains a domain can carry, e.g. ``url.miester.abc``."""

    IPFS = "IPFS"
    ARWV = "ARWV"
    SOL = "SOL"
    ETH = "ETH"
    BTC = "BTC"
    LATTICA = "Lattica"
    LTC = "LTC"
    DOGE = "DOGE"
    Email = "email"
    Url = "url"
    Discord = "discord"
    Github = "github"
    Reddit = "reddit"
    Twitter = "twitter"
    Telegram = "telegram"
    Pic = "pic"
    SHDW = "SHDW"
    POINT = "POINT"


# Content records tried, in order, by find_domain_name_records
CONTENT_RECORDS = (Record.Url, Record.IPFS, Record.ARWV, Record.SHDW)
