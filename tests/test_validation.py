from lotofacil_pro.domain_lottery import CRITERIOS, generate_game, validate_game
from lotofacil_pro.models import FilterConfig

JOGO_1_15 = list(range(1, 16))


def test_end_to_end_example():
    r = validate_game(JOGO_1_15, list(range(1, 11)), FilterConfig())
    assert (r.reps, r.pares, r.primos, r.fib, r.seq) == (10, 7, 6, 6, 15)
    assert r.passed is False
    assert any(d.startswith("Fibonacci") for d in r.details)
    assert any(d.startswith("Sequência") for d in r.details)
    assert not any(d.startswith("Repetidas") for d in r.details)


def test_all_toggles_off_always_passes(rng, all_off):
    for _ in range(200):
        r = validate_game(generate_game(rng), [1, 2, 3], all_off)
        assert r.passed is True
        assert r.details == ()


def test_stats_reported_when_toggles_off(all_off):
    r = validate_game(JOGO_1_15, list(range(1, 11)), all_off)
    assert (r.reps, r.pares, r.primos, r.fib, r.seq) == (10, 7, 6, 6, 15)


def test_wrong_size_fails_with_zeroed_stats(all_off):
    for filtros in (all_off, FilterConfig()):
        r = validate_game(list(range(1, 15)), [], filtros)
        assert r.passed is False
        assert (r.reps, r.pares, r.primos, r.fib, r.seq) == (0, 0, 0, 0, 0)
        assert len(r.details) == 1
        assert "15" in r.details[0]


def test_empty_reference_never_blocks():
    only_reps = FilterConfig(
        reps_enabled=True,
        evens_enabled=False,
        primes_enabled=False,
        fib_enabled=False,
        seq_enabled=False,
    )
    for referencia in ([], None):
        r = validate_game(JOGO_1_15, referencia, only_reps)
        assert r.reps == 0
        assert r.passed is True


def test_repetitions_block_when_reference_present():
    only_reps = FilterConfig(True, False, False, False, False)
    r = validate_game(JOGO_1_15, [1, 2, 3], only_reps)
    assert r.reps == 3
    assert r.passed is False
    assert r.details == ("Repetidas: 3 fora de 8–10",)


def test_each_criterion_in_isolation():
    jogo = [1, 2, 3, 6, 7, 10, 11, 14, 15, 16, 19, 20, 22, 24, 25]
    referencia = jogo[:9]
    r = validate_game(jogo, referencia, FilterConfig())
    assert (r.reps, r.pares, r.primos, r.fib, r.seq) == (9, 8, 5, 3, 3)
    assert r.passed is True

    for c in CRITERIOS:
        toggles = {k: False for k in FilterConfig.__dataclass_fields__}
        toggles[c.toggle] = True
        assert validate_game(jogo, referencia, FilterConfig(**toggles)).passed


def test_range_bounds_inclusive():
    only_seq = FilterConfig(False, False, False, False, True)
    base = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25]
    # sequências de 3 e 5 passam; 6 falha
    assert validate_game(sorted(base + [2, 4]), [], only_seq).seq == 5
    assert validate_game(sorted(base + [2, 4]), [], only_seq).passed
    assert validate_game(sorted(base + [2, 24]), [], only_seq).seq == 3
    assert validate_game(sorted(base + [2, 24]), [], only_seq).passed
    seis = [1, 2, 3, 4, 5, 6, 8, 10, 12, 14, 16, 18, 20, 22, 24]
    r = validate_game(seis, [], only_seq)
    assert r.seq == 6
    assert not r.passed
