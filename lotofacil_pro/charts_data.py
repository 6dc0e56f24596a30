from __future__ import annotations

import pandas as pd


def ranking_chart_df(ranking_df: pd.DataFrame) -> pd.DataFrame:
    # Espera colunas: dezena, frequencia (já ordenadas pelo ranking)
    d = ranking_df.copy()
    d["dezena"] = d["dezena"].map(lambda x: f"{int(x):02d}")
    d = d.set_index("dezena")[["frequencia"]]
    return d
