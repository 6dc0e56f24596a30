import re
from collections.abc import Iterable

from .config import LOTOFACIL


def parse_reference_draw(texto: str | None) -> list[int]:
    """
    Dezenas do resultado anterior em texto livre. Cada token vale pelos seus
    dígitos iniciais ("7x" -> 7); tokens sem dígito inicial ou fora de 1–25
    são descartados.
    """
    if not texto:
        return []
    tokens = re.split(r"[\s,.\-]+", texto.strip())
    out: list[int] = []
    seen: set[int] = set()
    for t in tokens:
        m = re.match(r"[0-9]+", t)
        if m is None:
            continue
        v = int(m.group())
        if 1 <= v <= LOTOFACIL.n_universo and v not in seen:
            out.append(v)
            seen.add(v)
    return out


def format_reference_draw(dezenas: Iterable[int]) -> str:
    return " ".join(f"{int(d):02d}" for d in dezenas)
