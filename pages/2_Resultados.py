from __future__ import annotations

import streamlit as st

from lotofacil_pro.config import N_RESULTADOS, configure_logging
from lotofacil_pro.data_api import DrawSourceError
from lotofacil_pro.history_cached import load_results_cached
from lotofacil_pro.state import get_last_result, init_state, set_last_result
from lotofacil_pro.ui import format_reference_draw
from lotofacil_pro.ui_components import draw_card

st.set_page_config(page_title="Resultados", page_icon="📊", layout="wide")
configure_logging()
init_state()

st.title("Últimos resultados")
st.caption("Acompanhe os sorteios oficiais")

if st.button("Atualizar"):
    load_results_cached.clear()
    st.rerun()

try:
    with st.spinner("Buscando sorteios..."):
        draws = load_results_cached(N_RESULTADOS)
except DrawSourceError as e:
    st.error(f"Falha ao buscar resultados. Tente novamente mais tarde. ({e})")
    if st.button("Tentar novamente"):
        load_results_cached.clear()
        st.rerun()
    st.stop()

if not draws:
    st.info("Nenhum resultado disponível.")
    st.stop()

# O mais recente alimenta o gerador quando ainda não há resultado anterior
if not get_last_result():
    set_last_result(format_reference_draw(draws[0].dezenas))

for draw in draws:
    if draw_card(draw):
        set_last_result(format_reference_draw(draw.dezenas))
        st.toast(f"Concurso {draw.concurso} enviado para o gerador!", icon="✅")
