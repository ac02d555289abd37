import sys

from solders.pubkey import Pubkey

from .config import load_settings
from .exceptions import AnsError
from .reader import RpcLedgerReader
from .resolver import AnsResolver


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: python -m ans_lookup <domain.tld | address> ...")
        return 2

    resolver = AnsResolver(RpcLedgerReader.from_settings(load_settings()))
    status = 0
    for target in args:
        try:
            if "." in target:
                print(f"✅ {target} -> {resolver.get_owner_from_domain_tld(target)}")
            else:
                main_domain = resolver.get_main_domain(Pubkey.from_string(target))
                print(f"✅ {target} -> {main_domain.full_domain}")
        except (AnsError, ValueError) as e:
            print(f"❌ {target}: {e}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
