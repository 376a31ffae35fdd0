#!/usr/bin/env python3
"""Quick start example: split a secret and recover it from any threshold subset.

Demonstrates the core workflow:
  1. Split a secret into 5 shares with threshold 3
  2. Recover it from different subsets of 3 shares
  3. Show that 2 shares yield garbage rather than an error
  4. Do the same through the async entry points
"""

import asyncio
import itertools
import logging

from gfshare import ShamirSecretSharing, combine_async, split_async

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

secret = b"correct horse battery staple"

# --- 1. Split ---
sss = ShamirSecretSharing(shuffle_coordinates=True)
shares = sss.split(secret, shares=5, threshold=3)

print(f"Secret: {secret!r} ({len(secret)} bytes)")
for share in shares:
    print(f"  x={share[-1]:3d}  {share[:-1].hex()}")

# --- 2. Recover from every 3-subset ---
for subset in itertools.combinations(shares, 3):
    assert sss.combine(list(subset)) == secret
print("\nEvery 3-of-5 subset reconstructs the secret.")

# --- 3. Below threshold ---
garbage = sss.combine(shares[:2])
print(f"2 shares give: {garbage!r}")


# --- 4. Async ---
async def main() -> bytes:
    async_shares = await split_async(secret, 3, 2)
    return await combine_async(async_shares[1:])


print(f"Async round trip: {asyncio.run(main())!r}")
