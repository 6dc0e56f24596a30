import logging
import math
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class LotterySpec:
    modalidade: str
    n_universo: int
    n_dezenas_sorteio: int
    comb_target: int


LOTOFACIL = LotterySpec(
    modalidade="Lotofácil",
    n_universo=25,
    n_dezenas_sorteio=15,
    comb_target=math.comb(25, 15),
)

PRIMOS = frozenset({2, 3, 5, 7, 11, 13, 17, 19, 23})
FIBONACCI = frozenset({1, 2, 3, 5, 8, 13, 21})

# Padrões de ouro (intervalos inclusivos)
FAIXA_REPETIDAS = (8, 10)
FAIXA_PARES = (6, 8)
FAIXA_PRIMOS = (4, 6)
FAIXA_FIBONACCI = (3, 5)
FAIXA_SEQUENCIA = (3, 5)

QUOTA_JOGOS = 5
MAX_TENTATIVAS = 5000

URL_LOTOFACIL_API = os.environ.get(
    "LOTOFACIL_API_URL",
    "https://loteriascaixa-api.herokuapp.com/api/lotofacil",
).rstrip("/")

REQUEST_TIMEOUT = 20
CACHE_TTL = 10 * 60
N_RESULTADOS = 5
JANELA_ESTATISTICAS = 7

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    level = os.environ.get("LOTOFACIL_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
