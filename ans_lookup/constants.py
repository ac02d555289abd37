from solders.pubkey import Pubkey

# Seed literals
PREFIX = "tld_house"
TREASURY = "treasury"
PDA_SEED = "tld_pda"
MAIN_DOMAIN_PREFIX = "main_domain"
CLAIMABLE_DOMAIN_PREFIX = "claimable"
NAME_HOUSE_PREFIX = "name_house"
COLLECTION_PREFIX = "name_collection"
NFT_RECORD_PREFIX = "nft_record"

# Program identities
ANS_PROGRAM_ID = Pubkey.from_string("ALTNSZ46uaAUU7XUV6awvdorLGqAsPwa9shm7h4uP2FK")
TLD_HOUSE_PROGRAM_ID = Pubkey.from_string("TLDHkysf5pCnKsVA4gXpNvmy7psXLPEu4LAdDJthT9S")
NAME_HOUSE_PROGRAM_ID = Pubkey.from_string("NH3uX6FtVE2fNREAioP7hm5RaozotZxeL6khU1EHx51")

# Root parent of every top-level suffix
ORIGIN_TLD_KEY = Pubkey.from_string("3mX9b4AZaQehNoQGfckVcmgmA6bkBoFcbLj9RMmMyNcU")

# 45 days * 24 hours * 60 minutes * 60 seconds
GRACE_PERIOD = 45 * 24 * 60 * 60

# Byte offsets into name-service accounts
DISCRIMINATOR_LENGTH = 8
NAME_RECORD_PARENT_OFFSET = 8
NAME_RECORD_OWNER_OFFSET = 8 + 32
REVERSE_LOOKUP_OFFSET = 200
RECORD_DATA_OFFSET = 208
TLD_HOUSE_TLD_OFFSET = 8 + 32 + 32 + 32
