"""Command line: a demonstration run and timing benchmarks of the schemes."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .constants import primes_q_d_g_by_size, primes_q_p_by_size
from .piso import EncryptionError, fast_piso_gen, piso_dec, piso_enc, piso_gen
from .proj import proj_dec, proj_enc, proj_gen
from .utils import smallest_primitive_root

SIZES: tuple[int, ...] = (512, 1024, 1536, 3840, 7680)
CSV_HEADER = "gen,enc,dec,tot,size,algorithm"
BENCHMARK_MESSAGE = 123456
PISO_MESSAGE = 123456
PROJ_MESSAGE = 24681214
DEFAULT_SIZE = 1024
DEFAULT_RESULT_DIR = "results_w"


class BenchmarkMismatchError(RuntimeError):
    """Raised when a benchmark round trip does not give back the message."""


def demo(size: int = DEFAULT_SIZE, rng: random.Random | None = None,
         out: TextIO | None = None) -> dict[str, bool]:
    """Generate keys, encrypt and decrypt with every scheme, reporting to ``out``.

    Returns for each scheme whether the decrypted message matched.
    """
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout

    def say(text: object = "") -> None:
        print(text, file=out)

    results: dict[str, bool] = {}

    keys = piso_gen(size, rng)
    say(keys.pk)
    say(f"Secret key: {keys.secret_hex()}")
    say(f"Encrypting now message: {PISO_MESSAGE}")
    piso_ct = piso_enc(PISO_MESSAGE, keys.pk, rng)
    say(piso_ct)
    decrypted = piso_dec(piso_ct, keys.pk, keys.sk)
    say(f"Decrypted message: {decrypted}")
    results["piso"] = decrypted == PISO_MESSAGE
    if not results["piso"]:
        say("elgamal piso failed")

    keys = proj_gen(size, rng)
    say(keys.pk)
    proj_ct = proj_enc(PROJ_MESSAGE, keys.pk, rng)
    say(proj_ct)
    decrypted = proj_dec(proj_ct, keys.pk, keys.sk)
    say(f"Decrypted message: {decrypted}")
    results["proj"] = decrypted == PROJ_MESSAGE
    if not results["proj"]:
        say("elgamal proj failed")

    keys = fast_piso_gen(size, rng)
    say("Public key")
    say(f"q = {keys.pk.q}")
    say(f"d = {keys.pk.d}")
    say(f"g = {keys.pk.g}")
    say(f"h = {keys.pk.h}")
    fast_ct = piso_enc(BENCHMARK_MESSAGE, keys.pk, rng)
    say(fast_ct)
    decrypted = piso_dec(fast_ct, keys.pk, keys.sk)
    say(f"res = {decrypted}")
    results["fast"] = decrypted == BENCHMARK_MESSAGE
    say("Decryption successful!" if results["fast"] else "Decryption failed!")

    q_p = primes_q_p_by_size(size)
    q_d_g = primes_q_d_g_by_size(size)
    if q_p is not None and q_d_g is not None:
        q, p = q_p
        _, d, g = q_d_g
        say(f"g = {g}")
        say(f"g size in bits = {g.bit_length()}")
        root = smallest_primitive_root(d, q, p)
        say(f"smallest generator for q is = {root}")
        say(f"size in bits = {root.bit_length()}")

    return results


def _timed(action: Callable[[], object]) -> tuple[object, float]:
    start = time.process_time()
    result = action()
    return result, time.process_time() - start


def _check(expected: int, got: int) -> None:
    if expected != got:
        raise BenchmarkMismatchError(f"{got} is not equal to {expected}")


def _proj_trial(size: int, rng: random.Random, msg: int) -> tuple[float, float, float]:
    keys, t_gen = _timed(lambda: proj_gen(size, rng))

    def encrypt():
        proj_enc(msg, keys.pk, rng)
        return proj_enc(msg, keys.pk, rng)

    ct, t_enc = _timed(encrypt)

    def decrypt():
        proj_dec(ct, keys.pk, keys.sk)
        return proj_dec(ct, keys.pk, keys.sk)

    res, t_dec = _timed(decrypt)
    _check(msg, res)
    return t_gen, t_enc, t_dec


def _piso_trial_with(gen: Callable[[int, random.Random], object]):
    def trial(size: int, rng: random.Random, msg: int) -> tuple[float, float, float]:
        keys, t_gen = _timed(lambda: gen(size, rng))
        ct, t_enc = _timed(lambda: piso_enc(msg, keys.pk, rng))
        res, t_dec = _timed(lambda: piso_dec(ct, keys.pk, keys.sk))
        _check(msg, res)
        return t_gen, t_enc, t_dec

    return trial


@dataclass(frozen=True)
class _Scheme:
    prefix: str
    label: str
    title: str
    trial: Callable[[int, random.Random, int], tuple[float, float, float]]


_PROJ = _Scheme("proj", "PROJ", "PROJ", _proj_trial)
_PISO = _Scheme("piso", "PISO", "PISO", _piso_trial_with(piso_gen))
_FAST = _Scheme("fast_piso", "PISO", "PISO", _piso_trial_with(fast_piso_gen))

_ALGORITHMS: dict[str, tuple[_Scheme, ...]] = {
    "all": (_PROJ, _PISO, _FAST),
    "piso": (_PISO,),
    "proj": (_PROJ,),
    "fast": (_FAST,),
    "piso-f": (_PISO, _FAST),
}


def _run_scheme(scheme: _Scheme, iterations: int, sizes: Sequence[int],
                rng: random.Random, result_dir: Path) -> Path:
    path = result_dir / f"{scheme.prefix}_benchmark_{sizes[0]}_{sizes[-1]}_{iterations}.csv"
    print(f"Running benchmark for {scheme.title}...")
    with path.open("w", encoding="utf-8") as fp:
        fp.write(CSV_HEADER + "\n")
        for size in sizes:
            print(f"Running benchmark for size {size}...")
            for _ in range(iterations):
                t_gen, t_enc, t_dec = scheme.trial(size, rng, BENCHMARK_MESSAGE)
                total = t_gen + t_enc + t_dec
                fp.write(f"{t_gen:f},{t_enc:f},{t_dec:f},{total:f},{size},{scheme.label}\n")
    return path


def benchmark(algorithm: str, iterations: int, size_count: int,
              rng: random.Random | None = None,
              result_dir: str | Path = DEFAULT_RESULT_DIR) -> list[Path]:
    """Time key generation, encryption and decryption, writing one CSV per scheme.

    ``algorithm`` is one of ``all``, ``piso``, ``proj``, ``fast`` or ``piso-f``;
    ``size_count`` selects how many of the standard sizes are used (1 to 5).
    Returns the paths of the files written.
    """
    schemes = _ALGORITHMS.get(algorithm)
    if schemes is None:
        raise ValueError("Invalid argument. Use 'all', 'piso' or 'proj'.")
    if not 1 <= size_count <= len(SIZES):
        raise ValueError(f"size count must be between 1 and {len(SIZES)}")
    if iterations < 0:
        raise ValueError("iterations must be non-negative")
    rng = rng if rng is not None else random.Random()
    directory = Path(result_dir)
    directory.mkdir(parents=True, exist_ok=True)
    sizes = SIZES[:size_count]
    return [_run_scheme(scheme, iterations, sizes, rng, directory) for scheme in schemes]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pellgamal", description="ElGamal encryption over the Pell hyperbola.")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("demo", help="encrypt and decrypt a sample message")
    run.add_argument("--size", type=int, default=DEFAULT_SIZE, help="modulus size in bits")
    run.add_argument("--seed", type=int, default=None, help="seed for the random generator")

    bench = sub.add_parser("benchmark", help="time the schemes and write CSV files")
    bench.add_argument("algorithm", help="all | piso | proj | fast | piso-f")
    bench.add_argument("iterations", type=int)
    bench.add_argument("sizes", type=int, help="number of standard sizes to use, 1-5")
    bench.add_argument("--results", default=DEFAULT_RESULT_DIR, help="output directory")
    bench.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    try:
        if args.command == "demo":
            results = demo(args.size, rng, sys.stdout)
            return 0 if all(results.values()) else 1
        benchmark(args.algorithm, args.iterations, args.sizes, rng, args.results)
    except (ValueError, EncryptionError, BenchmarkMismatchError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())