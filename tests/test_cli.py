import io
import random

import pytest

from pellgamal.cli import CSV_HEADER, benchmark, demo, main
from pellgamal.constants import primes_q_d_g_by_size, primes_q_p_by_size
from pellgamal.utils import is_primitive_root


@pytest.fixture(scope="module")
def demo_run():
    out = io.StringIO()
    results = demo(512, random.Random(7), out)
    return results, out.getvalue()


def test_demo_all_schemes_round_trip(demo_run):
    results, _ = demo_run
    assert results == {"piso": True, "proj": True, "fast": True}


def test_demo_reports_decrypted_messages(demo_run):
    _, text = demo_run
    assert "Decrypted message: 123456" in text
    assert "Decrypted message: 24681214" in text
    assert "res = 123456" in text
    assert "Decryption successful!" in text


def test_demo_reports_table_generator(demo_run):
    _, text = demo_run
    _, _, g = primes_q_d_g_by_size(512)
    lines = text.splitlines()
    assert f"g = {g}" in lines
    assert f"g size in bits = {g.bit_length()}" in lines


def test_demo_smallest_generator_is_primitive_root(demo_run):
    _, text = demo_run
    prefix = "smallest generator for q is = "
    root_lines = [line for line in text.splitlines() if line.startswith(prefix)]
    assert len(root_lines) == 1
    root = int(root_lines[0][len(prefix):])
    q, p = primes_q_p_by_size(512)
    _, d, _ = primes_q_d_g_by_size(512)
    assert root >= 2
    assert is_primitive_root(root, d, q, p)
    assert all(not is_primitive_root(c, d, q, p) for c in range(2, root))


def test_benchmark_proj_writes_csv(tmp_path):
    paths = benchmark("proj", 1, 1, random.Random(3), tmp_path)
    assert [p.name for p in paths] == ["proj_benchmark_512_512_1.csv"]
    lines = paths[0].read_text().splitlines()
    assert lines[0] == CSV_HEADER
    assert len(lines) == 2
    fields = lines[1].split(",")
    assert fields[4:] == ["512", "PROJ"]
    gen, enc, dec, tot = (float(v) for v in fields[:4])
    assert min(gen, enc, dec) >= 0
    assert tot == pytest.approx(gen + enc + dec, abs=1e-5)


def test_benchmark_all_writes_three_files(tmp_path):
    paths = benchmark("all", 1, 1, random.Random(4), tmp_path)
    assert [p.name for p in paths] == [
        "proj_benchmark_512_512_1.csv",
        "piso_benchmark_512_512_1.csv",
        "fast_piso_benchmark_512_512_1.csv",
    ]
    labels = [p.read_text().splitlines()[1].split(",")[-1] for p in paths]
    assert labels == ["PROJ", "PISO", "PISO"]


def test_benchmark_piso_f_writes_two_files(tmp_path):
    paths = benchmark("piso-f", 2, 1, random.Random(5), tmp_path)
    assert [p.name for p in paths] == [
        "piso_benchmark_512_512_2.csv",
        "fast_piso_benchmark_512_512_2.csv",
    ]
    for path in paths:
        assert len(path.read_text().splitlines()) == 3


def test_benchmark_rejects_unknown_algorithm(tmp_path):
    with pytest.raises(ValueError):
        benchmark("bogus", 1, 1, random.Random(1), tmp_path)


@pytest.mark.parametrize("count", [0, 6])
def test_benchmark_rejects_size_count(tmp_path, count):
    with pytest.raises(ValueError):
        benchmark("proj", 1, count, random.Random(1), tmp_path)


def test_main_benchmark(tmp_path):
    status = main(["benchmark", "fast", "1", "1", "--results", str(tmp_path), "--seed", "9"])
    assert status == 0
    assert (tmp_path / "fast_piso_benchmark_512_512_1.csv").exists()


def test_main_benchmark_invalid_algorithm(tmp_path, capsys):
    status = main(["benchmark", "bogus", "1", "1", "--results", str(tmp_path)])
    assert status == 1
    assert "Invalid argument" in capsys.readouterr().err


def test_main_demo(capsys):
    status = main(["demo", "--size", "512", "--seed", "11"])
    assert status == 0
    out = capsys.readouterr().out
    assert "Decrypted message: 24681214" in out