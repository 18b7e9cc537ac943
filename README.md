# citadelle

A small key-encapsulation library with the byte sizes of Kyber-512, plus a
demo command that runs one complete exchange.

**This is a simulation.** Key pairs, shared secrets and ciphertexts are random
bytes, and decapsulation derives a value from the secret key and the
ciphertext with SHA-256. It gives no security and is not real post-quantum
cryptography. Use it for prototyping interfaces, never for protecting data.

## Installation

```
pip install .
```

Add the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Sizes

| Item          | Bytes |
|---------------|-------|
| Public key    | 800   |
| Secret key    | 1632  |
| Ciphertext    | 768   |
| Shared secret | 32    |

## Library use

```python
from citadelle.key_exchange import (
    KeyExchangeError,
    decapsulate,
    encapsulate,
    generate_key_pair,
)

keys = generate_key_pair()
result = encapsulate(keys.public_key)
recovered = decapsulate(keys.secret_key, result.ciphertext)

print(len(result.shared_secret), len(result.ciphertext), len(recovered))

try:
    encapsulate(b"")
except KeyExchangeError as exc:
    print(exc)  # Public key cannot be empty
```

- `generate_key_pair()` returns a `KeyPair` with `public_key` and `secret_key`.
- `encapsulate(public_key)` returns an `EncapsulationResult` with
  `shared_secret` and `ciphertext`.
- `decapsulate(secret_key, ciphertext)` returns the shared secret as bytes.
- Inputs that are empty or the wrong length raise `KeyExchangeError`. The
  message names the expected and actual sizes, for example
  `Invalid public key size: expected 800 bytes, got 799 bytes`.
- `encrypt(public_key)` returns a `(shared_secret, ciphertext)` tuple, and
  `decrypt(secret_key, ciphertext)` is another name for `decapsulate`. Both
  are kept for older callers.
- `secure_wipe(data)` overwrites a `bytearray` with zeros in place.

## Demo command

```
citadelle
```

The command generates a key pair, encapsulates, decapsulates and prints the
first 32 bytes of each value in hex. It then reports whether the shared
secret matches the decapsulated secret. The exit status is 0 when they match
and 1 when they do not or an error occurs. Errors are printed to standard
error with an `Error:` prefix.