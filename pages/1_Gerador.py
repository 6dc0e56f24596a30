from __future__ import annotations

from datetime import datetime

import streamlit as st

from lotofacil_pro.config import LOTOFACIL, MAX_TENTATIVAS, QUOTA_JOGOS, configure_logging
from lotofacil_pro.domain_lottery import generate_filtered_games
from lotofacil_pro.games_export import df_to_csv_bytes, formatar_jogos, games_to_df
from lotofacil_pro.models import FilterConfig
from lotofacil_pro.state import (
    clear_games,
    get_filters,
    get_games,
    get_last_result,
    init_state,
    mark_generated,
    set_filters,
    set_games,
    set_last_result,
    was_generated,
)
from lotofacil_pro.ui import parse_reference_draw
from lotofacil_pro.ui_components import FILTER_LABELS, game_card

st.set_page_config(page_title="Gerador", page_icon="🎲", layout="wide")
configure_logging()
init_state()

st.title("LotoFácil Pro")
st.caption("Gerador inteligente de jogos")

# --------------------------
# Resultado anterior
# --------------------------
texto = st.text_input(
    "Resultado anterior",
    value=get_last_result(),
    placeholder="Ex: 01 02 05 08...",
    help="Use espaços ou vírgulas para separar os números.",
)
set_last_result(texto)
referencia = parse_reference_draw(texto)

if texto and len(referencia) != LOTOFACIL.n_dezenas_sorteio:
    st.caption(f"{len(referencia)} dezenas válidas reconhecidas.")
if not referencia:
    st.caption("Sem resultado anterior: o filtro de repetidas fica inativo.")

# --------------------------
# Filtros
# --------------------------
st.subheader("Filtros ativos (padrões de ouro)")
atual = get_filters()
cols = st.columns(len(FILTER_LABELS))
toggles: dict[str, bool] = {}
for col, (campo, label) in zip(cols, FILTER_LABELS.items()):
    toggles[campo] = col.toggle(label, value=getattr(atual, campo), key=f"filtro_{campo}")
filtros = FilterConfig(**toggles)
set_filters(filtros)

c1, c2 = st.columns([3, 1])
with c1:
    gerar = st.button("GERAR JOGOS FILTRADOS", type="primary", use_container_width=True)
with c2:
    if st.button("Limpar jogos", use_container_width=True):
        clear_games()
        st.rerun()

if gerar:
    with st.spinner("Analisando..."):
        set_games(
            generate_filtered_games(
                referencia,
                filtros,
                quota=QUOTA_JOGOS,
                max_tentativas=MAX_TENTATIVAS,
            )
        )
    mark_generated()

# --------------------------
# Jogos
# --------------------------
games = get_games()

if not games:
    if was_generated():
        st.warning("Nenhum jogo passou nos filtros. Desative algum filtro e tente novamente.")
    else:
        st.info("Clique em gerar para ver seus jogos da sorte.")
    st.stop()

if len(games) < QUOTA_JOGOS:
    st.warning(f"Só {len(games)} de {QUOTA_JOGOS} jogos passaram nos filtros em {MAX_TENTATIVAS} tentativas.")

tab1, tab2 = st.tabs(["Jogos", "Tabela/Exportar"])

with tab1:
    for i, g in enumerate(games, start=1):
        game_card(i, g, tem_referencia=bool(referencia))

    st.subheader("Copiar todos")
    st.code(formatar_jogos(games), language=None)

with tab2:
    df_out = games_to_df(games)
    st.dataframe(df_out, hide_index=True)
    st.download_button(
        "Baixar CSV",
        data=df_to_csv_bytes(df_out),
        file_name=f"jogos_lotofacil_{datetime.now().date()}.csv",
        mime="text/csv",
        use_container_width=True,
    )
