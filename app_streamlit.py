import streamlit as st

from lotofacil_pro.config import FAIXA_FIBONACCI, FAIXA_PARES, FAIXA_PRIMOS, FAIXA_REPETIDAS, FAIXA_SEQUENCIA, configure_logging
from lotofacil_pro.state import get_last_result, init_state
from lotofacil_pro.ui import format_reference_draw, parse_reference_draw

st.set_page_config(page_title="LotoFácil Pro", page_icon="🎲", layout="wide")
configure_logging()
init_state()

st.title("LotoFácil Pro")
st.caption("Jogos aleatórios filtrados pelos padrões de ouro, resultados oficiais e estatísticas.")

st.subheader("Padrões de ouro")
st.markdown(
    f"""
- Repetidas do concurso anterior: {FAIXA_REPETIDAS[0]} a {FAIXA_REPETIDAS[1]}
- Pares: {FAIXA_PARES[0]} a {FAIXA_PARES[1]}
- Primos: {FAIXA_PRIMOS[0]} a {FAIXA_PRIMOS[1]}
- Fibonacci: {FAIXA_FIBONACCI[0]} a {FAIXA_FIBONACCI[1]}
- Maior sequência: {FAIXA_SEQUENCIA[0]} a {FAIXA_SEQUENCIA[1]}
"""
)

referencia = parse_reference_draw(get_last_result())
if referencia:
    st.write("Resultado anterior em uso:", format_reference_draw(referencia))
else:
    st.write("Nenhum resultado anterior informado. Carregue um na página Resultados.")

st.info("Use as páginas no menu lateral: Gerador, Resultados e Estatísticas.")
