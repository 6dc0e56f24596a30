from __future__ import annotations

import streamlit as st

from .config import FAIXA_FIBONACCI, FAIXA_PARES, FAIXA_PRIMOS, FAIXA_REPETIDAS, FAIXA_SEQUENCIA
from .games_export import formatar_jogo
from .models import Draw, GeneratedGame


def filter_label(nome: str, faixa: tuple[int, int]) -> str:
    return f"{nome} ({faixa[0]}-{faixa[1]})"


FILTER_LABELS: dict[str, str] = {
    "reps_enabled": filter_label("Repetidas", FAIXA_REPETIDAS),
    "evens_enabled": filter_label("Pares", FAIXA_PARES),
    "primes_enabled": filter_label("Primos", FAIXA_PRIMOS),
    "fib_enabled": filter_label("Fibonacci", FAIXA_FIBONACCI),
    "seq_enabled": filter_label("Sequências", FAIXA_SEQUENCIA),
}


def game_card(jogo_id: int, game: GeneratedGame, *, tem_referencia: bool) -> None:
    """
    Card de um jogo gerado: dezenas (com botão de copiar do st.code) e estatísticas.
    """
    s = game.stats
    with st.container(border=True):
        st.markdown(f"**Jogo {jogo_id}**")
        st.code(formatar_jogo(game.dezenas), language=None)
        c1, c2, c3, c4, c5 = st.columns(5)
        c1.metric("Repetidas", s.reps if tem_referencia else "-")
        c2.metric("Pares", s.pares)
        c3.metric("Primos", s.primos)
        c4.metric("Fibonacci", s.fib)
        c5.metric("Sequência", s.seq)


def draw_card(draw: Draw) -> bool:
    """
    Card de um resultado oficial. Retorna True se o usuário pediu para usar
    as dezenas no gerador.
    """
    with st.container(border=True):
        c1, c2 = st.columns([3, 1])
        c1.markdown(f"### Concurso {draw.concurso}")
        c2.caption(draw.data)
        st.code(formatar_jogo(list(draw.dezenas)), language=None)
        if draw.acumulou:
            st.warning("Acumulou!")
        return st.button("Usar no gerador", key=f"usar_{draw.concurso}")
