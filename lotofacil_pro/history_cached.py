from __future__ import annotations

import streamlit as st

from .config import CACHE_TTL, JANELA_ESTATISTICAS, N_RESULTADOS
from .data_api import fetch_recent_window, fetch_results
from .models import Draw


@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def load_results_cached(limit: int = N_RESULTADOS) -> list[Draw]:
    """
    Cacheia os últimos resultados para não repetir a chamada à API a cada rerun.
    """
    return fetch_results(limit)


@st.cache_data(ttl=CACHE_TTL, show_spinner=False)
def load_recent_window_cached(size: int = JANELA_ESTATISTICAS) -> list[Draw]:
    return fetch_recent_window(size)
