# pellgamal

ElGamal-style public-key encryption on the parametrized Pell hyperbola
over a prime field F_q. Points of the hyperbola are elements of F_q plus
a point at infinity, and the group law and exponentiation run on that
parametrization. The package is pure Python and has no dependencies.

Two message encodings are provided:

- **PROJ** (`pellgamal.proj`): the message is a number in `[0, q)` and is
  encrypted as one point. Keys use a random quadratic non-residue `d`.
- **PISO** (`pellgamal.piso`): the message may be almost twice as long as
  `q`. It is split into two coordinates, padded, and placed on a hyperbola
  with its own parameter `d1`, which travels with the ciphertext. Keys use
  the smallest quadratic non-residue `d`.

Primes are chosen so that `q = 2p - 1` with `p` prime. For the sizes 512,
1024, 1536, 3840 and 7680 bits, built-in primes are used. Other sizes
generate fresh primes at random, which can take a while.

This package is meant for study and experimentation. It has not been
audited and should not protect real data.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

Every function that needs randomness takes a random number generator.
Use `random.Random(seed)` for repeatable runs, or
`secrets.SystemRandom()` for unpredictable values.

PISO encryption:

```python
import random

from pellgamal.piso import piso_gen, piso_enc, piso_dec

rng = random.Random(2025)
keys = piso_gen(1024, rng)

ct = piso_enc(123456, keys.pk, rng)
assert piso_dec(ct, keys.pk, keys.sk) == 123456
```

`fast_piso_gen(n, rng)` returns the same kind of key pair as `piso_gen`.
For the built-in sizes it also takes `d` and the generator `g` from the
stored constants instead of searching for a generator.

`piso_enc` raises `pellgamal.piso.EncryptionError` (a `ValueError`) when
the message is too long for the key, when no suitable hyperbola parameter
is found within the padding, or when the key's `h` is the point at
infinity; a negative message raises `ValueError`. `padding(size)` gives the
number of padding bits used for a modulus of `size` bits (`size // 8`
below 512 bits, `size // 16` from 512 on).

PROJ encryption:

```python
import random

from pellgamal.proj import proj_gen, proj_enc, proj_dec

rng = random.Random(7)
keys = proj_gen(512, rng)

ct = proj_enc(24681214, keys.pk, rng)
assert proj_dec(ct, keys.pk, keys.sk) == 24681214
```

`proj_enc` raises `EncryptionError` for a message not below `q`, and
`proj_dec` raises `ValueError` if the ciphertext decrypts to the point at
infinity.

### Keys and ciphertexts

`pellgamal.keys.KeyPair` holds a `PublicKey` (`q`, `d`, `g`, `h`) as `pk`
and the secret exponent as the integer `sk`. Ciphertexts are
`pellgamal.ciphertext.Ciphertext` (`c1`, `c2`) for PROJ and `CiphertextD`
(`c1`, `c2`, `d`) for PISO. All are frozen dataclasses.

They can be turned into hexadecimal strings and back; the point at
infinity is written as `inf`:

- `PublicKey.to_strings()` and `PublicKey.from_strings(q, d, g, h)`
- `KeyPair.secret_hex()`
- `Ciphertext.to_strings()` and `Ciphertext.from_strings(c1, c2)`
- `CiphertextD.to_strings()` and `CiphertextD.from_strings(c1, c2, d)`

Their `str()` gives a short multi-line printout of the same values.

### Arithmetic on the hyperbola

`pellgamal.params` holds the group arithmetic:

- `Param`: a point of the hyperbola, either a field element or
  `Param.infinity()`, with `Param.from_str(text, base)` and
  `Param.to_str(base)`.
- `op(m1, m2, d, q)`: the group law `(m1*m2 + d) / (m1 + m2)`.
- `mod_more(m, e, d, q)`: exponentiation under the group law.
- `negate(m, q)`: the inverse of a point.
- `coord(m, d, q)`: the `(x, y)` coordinates on `x^2 - d*y^2 = 1`.

These accept either a `Param` or a plain integer for a point.
Exponentiation raises `FactorFoundError` if it finds a non-trivial factor
of the modulus.

`pellgamal.utils` holds the number-theory helpers: `jacobi`,
`is_probable_prime`, `next_prime`, `prev_prime`, `sqrt_mod`,
`smallest_non_square`, `is_primitive_root`, `smallest_primitive_root`,
and the random generators `rand_range`, `rand_bit_size`, `rand_prime`,
`rand_prime_q_p`, `rand_non_square` and `rand_primitive_root`.

`pellgamal.constants` exposes the built-in parameters through
`primes_q_p_by_size(size)` and `primes_q_d_g_by_size(size)`, which return
`None` for sizes without built-in values, and lists those sizes in
`KNOWN_SIZES`.

## Command line

Installing the package provides the `pellgamal` command.

```
pellgamal demo --size 1024 --seed 1
```

generates keys with each of `piso_gen`, `proj_gen` and `fast_piso_gen`,
encrypts and decrypts a sample message with each, and prints the keys,
ciphertexts and results. For a built-in size it also prints the stored
generator and the smallest generator of the group. It exits with status 1
if any round trip fails.

```
pellgamal benchmark all 10 2 --results results_w
```

times key generation, encryption and decryption. The arguments are the
algorithm (`all`, `piso`, `proj`, `fast` or `piso-f`), the number of
iterations per size, and how many of the sizes 512, 1024, 1536, 3840,
7680 to use (1 to 5). One CSV file per scheme is written to the results
directory (default `results_w`), named like
`proj_benchmark_512_1024_10.csv`, with the columns
`gen,enc,dec,tot,size,algorithm` in seconds of process time. The PROJ
timings cover two encryptions and two decryptions per iteration.
`--seed` makes a run repeatable. Invalid arguments print an error and exit
with status 1.

Run `pellgamal --help` for the full list of options.

## What the package does not do

Keys and ciphertexts live in memory only. There is no key file format,
no storage and no command to encrypt or decrypt user-supplied data; the
hexadecimal string forms above are the only serialisation offered.