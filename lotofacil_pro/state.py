from __future__ import annotations

import streamlit as st

from .models import FilterConfig, GeneratedGame

ULTIMO_KEY = "ultimo_resultado"  # texto livre, compartilhado entre as páginas
GAMES_KEY = "jogos_gerados"  # list[GeneratedGame]
FILTERS_KEY = "filtros"  # FilterConfig
GEROU_KEY = "gerou"  # já houve geração desde a última limpeza

def init_state() -> None:
    st.session_state.setdefault(ULTIMO_KEY, "")
    st.session_state.setdefault(GAMES_KEY, [])
    st.session_state.setdefault(FILTERS_KEY, FilterConfig())
    st.session_state.setdefault(GEROU_KEY, False)

def get_last_result() -> str:
    return st.session_state[ULTIMO_KEY]

def set_last_result(texto: str) -> None:
    st.session_state[ULTIMO_KEY] = texto

def get_games() -> list[GeneratedGame]:
    return st.session_state[GAMES_KEY]

def set_games(games: list[GeneratedGame]) -> None:
    st.session_state[GAMES_KEY] = games

def clear_games() -> None:
    st.session_state[GAMES_KEY] = []
    st.session_state[GEROU_KEY] = False

def mark_generated() -> None:
    st.session_state[GEROU_KEY] = True

def was_generated() -> bool:
    return bool(st.session_state[GEROU_KEY])

def get_filters() -> FilterConfig:
    return st.session_state[FILTERS_KEY]

def set_filters(filtros: FilterConfig) -> None:
    st.session_state[FILTERS_KEY] = filtros
