from __future__ import annotations

from typing import TypedDict

import pandas as pd

from .config import LOTOFACIL
from .models import GeneratedGame


class GameRow(TypedDict, total=False):
    jogo_id: int
    reps: int
    pares: int
    primos: int
    fib: int
    seq: int
    passou: bool
    # d1..d15 entram dinamicamente (total=False)


def formatar_jogo(dezenas: list[int]) -> str:
    return " ".join(f"{d:02d}" for d in sorted(dezenas)[: LOTOFACIL.n_dezenas_sorteio])


def formatar_jogos(games: list[GeneratedGame]) -> str:
    return "\n\n".join(formatar_jogo(g.dezenas) for g in games)


def games_to_df(games: list[GeneratedGame]) -> pd.DataFrame:
    d_cols = [f"d{k}" for k in range(1, LOTOFACIL.n_dezenas_sorteio + 1)]
    rows: list[GameRow] = []

    for i, g in enumerate(games, start=1):
        r: GameRow = {"jogo_id": i}
        for k, d in enumerate(sorted(g.dezenas), start=1):
            r[f"d{k}"] = int(d)  # type: ignore[literal-required]
        r.update(
            {
                "reps": g.stats.reps,
                "pares": g.stats.pares,
                "primos": g.stats.primos,
                "fib": g.stats.fib,
                "seq": g.stats.seq,
                "passou": g.stats.passed,
            }
        )
        rows.append(r)

    df = pd.DataFrame(rows)

    # Schema fixo (mesmo vazio) para não quebrar tabela/export
    base_cols: list[tuple[str, str]] = [("jogo_id", "int64")]
    base_cols += [(c, "int64") for c in d_cols]
    base_cols += [(c, "int64") for c in ("reps", "pares", "primos", "fib", "seq")]
    base_cols += [("passou", "bool")]

    for col, dtype in base_cols:
        if col not in df.columns:
            df[col] = pd.Series(dtype=dtype)

    return df.reindex(columns=[c for c, _ in base_cols])


def df_to_csv_bytes(df: pd.DataFrame) -> bytes:
    if df is None:
        df = pd.DataFrame()
    # UTF-8 com BOM (mais “Excel-friendly”)
    return df.to_csv(index=False).encode("utf-8-sig")
