from __future__ import annotations

import streamlit as st

from lotofacil_pro.analytics import faixa_concursos, ranking_frequencias
from lotofacil_pro.charts_data import ranking_chart_df
from lotofacil_pro.config import JANELA_ESTATISTICAS, configure_logging
from lotofacil_pro.data_api import DrawSourceError, draws_to_df
from lotofacil_pro.history_cached import load_recent_window_cached
from lotofacil_pro.state import init_state

st.set_page_config(page_title="Estatísticas", page_icon="📈", layout="wide")
configure_logging()
init_state()

st.title("Estatísticas")
st.caption(f"Ranking dos últimos {JANELA_ESTATISTICAS} sorteios")

if st.button("Atualizar"):
    load_recent_window_cached.clear()
    st.rerun()

try:
    with st.spinner("Calculando frequências..."):
        draws = load_recent_window_cached(JANELA_ESTATISTICAS)
except DrawSourceError:
    st.error("Não foi possível carregar as estatísticas. Verifique sua conexão.")
    if st.button("Tentar novamente"):
        load_recent_window_cached.clear()
        st.rerun()
    st.stop()

df = draws_to_df(draws)
faixa = faixa_concursos(df)
if faixa is None:
    st.info("Sem sorteios para analisar.")
    st.stop()

st.write(f"Concursos {faixa[0]} a {faixa[1]} ({len(df)} sorteios)")

ranking = ranking_frequencias(df)

c1, c2 = st.columns(2)
with c1:
    st.subheader("Frequência")
    st.bar_chart(ranking_chart_df(ranking))
with c2:
    st.subheader("Ranking")
    st.dataframe(
        ranking,
        hide_index=True,
        column_config={
            "dezena": st.column_config.NumberColumn("Dezena", format="%02d"),
            "frequencia": st.column_config.ProgressColumn("Frequência", min_value=0, max_value=len(df), format="%dx"),
            "percentual": st.column_config.NumberColumn("%", format="%d%%"),
            "intensidade": "Intensidade",
        },
    )
