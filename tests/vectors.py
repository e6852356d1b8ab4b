"""
Fixed interoperability vectors.

Signatures below were produced by earlier releases over the plaintext
``abc123`` and must be reproduced bit for bit.
"""

PLAINTEXT = "abc123"

ED25519_PUBLIC_KEY_BASE58 = "GycSSui454dpYRKiFdsQ5uaE8Gy3ac6dSMPcAoQsk8yq"
ED25519_PRIVATE_KEY_BASE58 = (
    "3Mmk4UzTRJTEtxaKk61LxtgUxAa2Dg36jF6VogPtRiKvfpsQWKPCLesKSV182RMmvM"
    "JKk6QErH3wgdHp8itkSSiF"
)
ED25519_SIGNATURE = (
    "q/tQqxBlhzSP+XTte7uYaaCyJXJvg8svdjV47E2rBrVI1fBIOAeKj5Jm7qB"
    "kH0IL8CvKRboqHBCoITDrsT9DAQ=="
)

SHARED_KEY = "secretKey"
HMAC_SHA256_SIGNATURE = "FNAWrxLnd6YsyXGPvhZnoXvKERY+jzQ1TF2ucMmdEIA="
HMAC_SHA512_SIGNATURE = (
    "mnTTyVH8P4ymXE3dl6DRAZFSic2ElBvLH5yqjJziFZSm1B3ZI"
    "V3r7KwKpbWasAZxPXjqZy8DnY8v++0+bVIQBQ=="
)
