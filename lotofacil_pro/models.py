from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FilterConfig:
    reps_enabled: bool = True
    evens_enabled: bool = True
    primes_enabled: bool = True
    fib_enabled: bool = True
    seq_enabled: bool = True


@dataclass(frozen=True)
class ValidationResult:
    reps: int
    pares: int
    primos: int
    fib: int
    seq: int
    passed: bool
    details: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GeneratedGame:
    dezenas: list[int]
    stats: ValidationResult


@dataclass(frozen=True)
class Draw:
    concurso: int
    data: str
    dezenas: tuple[int, ...]
    acumulou: bool = False
