from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd
import requests

from .config import JANELA_ESTATISTICAS, LOTOFACIL, N_RESULTADOS, URL_LOTOFACIL_API
from .http_client import get_json
from .models import Draw

logger = logging.getLogger(__name__)


class DrawSourceError(RuntimeError):
    """Falha ao obter ou interpretar resultados da API de sorteios."""


def _get(path: str = "") -> Any:
    url = f"{URL_LOTOFACIL_API}/{path}" if path else URL_LOTOFACIL_API
    try:
        return get_json(url)
    except (requests.RequestException, ValueError) as e:
        logger.warning("Falha ao buscar %s: %s", url, e)
        raise DrawSourceError(f"Falha ao buscar resultados em {url}") from e


def parse_draw(payload: Any) -> Draw:
    if not isinstance(payload, dict):
        raise DrawSourceError(f"Registro de sorteio inválido: {payload!r}")

    faltando = [c for c in ("concurso", "dezenas") if payload.get(c) is None]
    if faltando:
        raise DrawSourceError(f"Registro de sorteio inválido; campos ausentes: {faltando}")

    try:
        concurso = int(payload["concurso"])
        dezenas = tuple(sorted(int(d) for d in payload["dezenas"]))
    except (TypeError, ValueError) as e:
        raise DrawSourceError(f"Registro de sorteio inválido: concurso {payload.get('concurso')!r}") from e

    if any(d < 1 or d > LOTOFACIL.n_universo for d in dezenas):
        raise DrawSourceError(f"Concurso {concurso}: dezenas fora do intervalo 1–{LOTOFACIL.n_universo}")

    return Draw(
        concurso=concurso,
        data=str(payload.get("data") or ""),
        dezenas=dezenas,
        acumulou=bool(payload.get("acumulou", False)),
    )


def fetch_results(limit: int = N_RESULTADOS) -> list[Draw]:
    data = _get()
    registros = data[:limit] if isinstance(data, list) else [data]
    return [parse_draw(r) for r in registros]


def fetch_latest() -> Draw:
    return parse_draw(_get("latest"))


def fetch_contest(concurso: int) -> Draw:
    return parse_draw(_get(str(int(concurso))))


def fetch_recent_window(size: int = JANELA_ESTATISTICAS) -> list[Draw]:
    """
    Último concurso mais os `size - 1` anteriores, do mais recente ao mais antigo.

    O último concurso é obrigatório; falha em um anterior só o deixa de fora.
    """
    latest = fetch_latest()
    draws = [latest]
    for concurso in range(latest.concurso - 1, latest.concurso - size, -1):
        if concurso < 1:
            break
        try:
            draws.append(fetch_contest(concurso))
        except DrawSourceError as e:
            logger.warning("Concurso %d ignorado: %s", concurso, e)
    return draws


def draws_to_df(draws: list[Draw]) -> pd.DataFrame:
    dezenas = [f"d{i}" for i in range(1, LOTOFACIL.n_dezenas_sorteio + 1)]
    cols = ["concurso", "data", "acumulou"] + dezenas

    completos = [d for d in draws if len(d.dezenas) == LOTOFACIL.n_dezenas_sorteio]
    if len(completos) < len(draws):
        logger.warning("%d sorteios com quantidade de dezenas inesperada ignorados", len(draws) - len(completos))
    if not completos:
        return pd.DataFrame(columns=cols)

    df = pd.DataFrame(
        [[d.concurso, d.data, d.acumulou, *d.dezenas] for d in completos],
        columns=cols,
    )
    df["data"] = pd.to_datetime(df["data"], format="%d/%m/%Y", errors="coerce")
    df[dezenas] = np.sort(df[dezenas].values.astype(int), axis=1)
    df = df.drop_duplicates(subset=["concurso"], keep="first")
    return df.sort_values("concurso").reset_index(drop=True)
