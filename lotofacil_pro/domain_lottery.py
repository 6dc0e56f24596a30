from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass

import numpy as np

from .config import (
    FAIXA_FIBONACCI,
    FAIXA_PARES,
    FAIXA_PRIMOS,
    FAIXA_REPETIDAS,
    FAIXA_SEQUENCIA,
    FIBONACCI,
    LOTOFACIL,
    MAX_TENTATIVAS,
    PRIMOS,
    QUOTA_JOGOS,
)
from .models import FilterConfig, GeneratedGame, ValidationResult

logger = logging.getLogger(__name__)

UNIVERSO = np.arange(1, LOTOFACIL.n_universo + 1)
MAX_REGERACOES = 3


def _jogo_valido(jogo: Sequence[int]) -> bool:
    n = LOTOFACIL.n_dezenas_sorteio
    return len(jogo) == n and len(set(jogo)) == n and all(1 <= d <= LOTOFACIL.n_universo for d in jogo)


def generate_game(rng: np.random.Generator | None = None) -> list[int]:
    """
    Sorteia 15 dezenas distintas de 1 a 25, em ordem crescente.

    A amostragem sem reposição é uniforme sobre os subconjuntos de 15 e sempre
    termina. O resultado é conferido; um jogo malformado é descartado e
    sorteado de novo, no máximo MAX_REGERACOES vezes.
    """
    if rng is None:
        rng = np.random.default_rng()
    for _ in range(MAX_REGERACOES):
        jogo = sorted(int(d) for d in rng.choice(UNIVERSO, size=LOTOFACIL.n_dezenas_sorteio, replace=False))
        if _jogo_valido(jogo):
            return jogo
        logger.error("Jogo malformado descartado: %s", jogo)
    raise RuntimeError(f"Falha ao gerar jogo válido após {MAX_REGERACOES} tentativas")


def count_repetitions(jogo: Sequence[int], referencia: Collection[int] | None) -> int:
    if not referencia:
        return 0
    ref = set(referencia)
    return sum(1 for d in jogo if d in ref)


def count_evens(jogo: Sequence[int]) -> int:
    return sum(1 for d in jogo if d % 2 == 0)


def count_primes(jogo: Sequence[int]) -> int:
    return sum(1 for d in jogo if d in PRIMOS)


def count_fibonacci(jogo: Sequence[int]) -> int:
    return sum(1 for d in jogo if d in FIBONACCI)


def longest_consecutive_run(jogo: Sequence[int]) -> int:
    j = sorted(jogo)
    maior = atual = 1
    for i in range(1, len(j)):
        if j[i] == j[i - 1] + 1:
            atual += 1
            maior = max(maior, atual)
        else:
            atual = 1
    return maior


@dataclass(frozen=True)
class Criterio:
    nome: str
    rotulo: str
    estatistica: Callable[[Sequence[int], Collection[int]], int]
    faixa: tuple[int, int]
    toggle: str
    requer_referencia: bool = False


# Ordem = ordem dos campos em ValidationResult
CRITERIOS: tuple[Criterio, ...] = (
    Criterio("reps", "Repetidas", count_repetitions, FAIXA_REPETIDAS, "reps_enabled", requer_referencia=True),
    Criterio("pares", "Pares", lambda j, _ref: count_evens(j), FAIXA_PARES, "evens_enabled"),
    Criterio("primos", "Primos", lambda j, _ref: count_primes(j), FAIXA_PRIMOS, "primes_enabled"),
    Criterio("fib", "Fibonacci", lambda j, _ref: count_fibonacci(j), FAIXA_FIBONACCI, "fib_enabled"),
    Criterio("seq", "Sequência", lambda j, _ref: longest_consecutive_run(j), FAIXA_SEQUENCIA, "seq_enabled"),
)


def validate_game(
    jogo: Sequence[int],
    referencia: Collection[int] | None,
    filtros: FilterConfig,
) -> ValidationResult:
    if len(jogo) != LOTOFACIL.n_dezenas_sorteio:
        logger.warning("Jogo com %d números rejeitado", len(jogo))
        return ValidationResult(
            reps=0,
            pares=0,
            primos=0,
            fib=0,
            seq=0,
            passed=False,
            details=(f"Jogo inválido: não tem {LOTOFACIL.n_dezenas_sorteio} números (tem {len(jogo)})",),
        )

    ref = referencia or ()
    stats = {c.nome: c.estatistica(jogo, ref) for c in CRITERIOS}

    details: list[str] = []
    for c in CRITERIOS:
        if not getattr(filtros, c.toggle):
            continue
        if c.requer_referencia and not ref:
            continue
        lo, hi = c.faixa
        valor = stats[c.nome]
        if not lo <= valor <= hi:
            details.append(f"{c.rotulo}: {valor} fora de {lo}–{hi}")

    return ValidationResult(**stats, passed=not details, details=tuple(details))


def generate_filtered_games(
    referencia: Collection[int] | None,
    filtros: FilterConfig,
    *,
    quota: int = QUOTA_JOGOS,
    max_tentativas: int = MAX_TENTATIVAS,
    rng: np.random.Generator | None = None,
) -> list[GeneratedGame]:
    """
    Gera jogos e mantém só os aprovados, até `quota` jogos ou `max_tentativas`.

    Devolver menos que `quota` não é erro: significa que os filtros ativos são
    restritivos demais para o número de tentativas.
    """
    if quota < 0 or max_tentativas < 0:
        raise ValueError("quota e max_tentativas devem ser >= 0")
    if rng is None:
        rng = np.random.default_rng()

    jogos: list[GeneratedGame] = []
    tentativas = 0
    while len(jogos) < quota and tentativas < max_tentativas:
        jogo = generate_game(rng)
        stats = validate_game(jogo, referencia, filtros)
        if stats.passed:
            jogos.append(GeneratedGame(dezenas=jogo, stats=stats))
        tentativas += 1

    logger.debug("%d jogos aprovados em %d tentativas", len(jogos), tentativas)
    if len(jogos) < quota:
        logger.info("Quota não atingida: %d/%d jogos em %d tentativas", len(jogos), quota, tentativas)
    return jogos
