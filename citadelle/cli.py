"""Command-line demonstration of a key exchange cycle."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from citadelle.key_exchange import decapsulate, encapsulate, generate_key_pair

_RULE = "-" * 46


def format_bytes(label: str, data: bytes, max_display: int = 32) -> str:
    """Render up to ``max_display`` bytes of ``data`` as hex after ``label``."""
    shown = "".join(f"{byte:02x} " for byte in data[:max_display])
    line = f"{label}: {shown}"
    if len(data) > max_display:
        line += f"... ({len(data)} bytes total)"
    return line


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo; return 0 when the secrets match, 1 otherwise."""
    parser = argparse.ArgumentParser(
        prog="citadelle",
        description="Post-quantum key exchange demonstration.",
    )
    parser.parse_args(argv)

    try:
        print("Citadelle Python Version - Post-Quantum Key Exchange Demo")
        print(_RULE)
        print("Using simulation mode (not real post-quantum KEM)")
        print(_RULE)

        print("Generating key pair...")
        keys = generate_key_pair()
        print(format_bytes("Public Key", keys.public_key))
        print(format_bytes("Secret Key", keys.secret_key))

        print("\nEncapsulating shared secret...")
        result = encapsulate(keys.public_key)
        print(format_bytes("Shared Secret", result.shared_secret))
        print(format_bytes("Ciphertext", result.ciphertext))

        print("\nDecapsulating shared secret...")
        recovered = decapsulate(keys.secret_key, result.ciphertext)
        print(format_bytes("Decapsulated Secret", recovered))

        match = result.shared_secret == recovered
        verdict = "matches" if match else "does not match"
        print(f"\nShared secret {verdict} the decapsulated secret.")

        print("\nSecurity Information:")
        print("- Implementation: Simulation (not suitable for production use)")
        print("- Algorithm: Kyber-512")
        print("- Security Level: NIST Level 1 (equivalent to AES-128)")
        return 0 if match else 1
    except Exception as exc:  # report any failure the way the demo always has
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())