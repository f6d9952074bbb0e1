#!/usr/bin/env python3
"""Basic usage example for trytepack.

This example demonstrates:
1. Building a tryte sequence from the human-readable alphabet
2. Packing it into bytes
3. Unpacking back to trytes
4. Comparing sizes
"""

from __future__ import annotations

import random

from trytepack import T81, T243, packed_size, tryte_count


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("trytepack Basic Usage Example")
    print("=" * 60)
    print()

    # Build a sequence
    print("1. Parsing a human-readable string...")
    seq = T243.from_human_readable("HELLO9WORLD")
    print(f"   Trytes: {seq.as_tryte_array()[:11]} ...")
    print(f"   Groups: {len(seq)}")
    print()

    # Pack
    print("2. Packing to bytes...")
    data = seq.encode().to_bytes()
    print(f"   Packed size: {len(data)} bytes")
    print(f"   Hex: {data[:12].hex()} ...")
    print()

    # Unpack
    print("3. Unpacking...")
    restored = T243.packed_type().from_bytes(data).decode()
    print(f"   Text: {restored.to_human_readable().rstrip('9')}")
    print()

    # Verify round-trip
    print("4. Verifying round-trip...")
    if restored == seq:
        print("   ✓ Round-trip successful! Sequences match.")
    else:
        print("   ✗ Round-trip failed! Sequences don't match.")
    print()

    # Random sequence from a seeded source
    print("5. Random sequence (seed 7)...")
    rnd = T81.random(random.Random(7))
    print(f"   {rnd.to_human_readable()}")
    print()

    # Compare to one byte per tryte
    print("6. Comparing to one byte per tryte...")
    print(f"   Unpacked: {tryte_count(243)} bytes")
    print(f"   Packed: {packed_size(243)} bytes")
    print(f"   Ratio: {packed_size(243) / tryte_count(243):.2f}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
