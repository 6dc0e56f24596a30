import pandas as pd

from .config import LOTOFACIL

def frequencias(df: pd.DataFrame, n_dezenas_sorteio: int, n_universo: int) -> pd.DataFrame:
    dezenas_cols = [f"d{i}" for i in range(1, n_dezenas_sorteio + 1)]
    todas = df[dezenas_cols].values.ravel().astype(int)
    freq = pd.Series(todas, dtype="int64").value_counts().reindex(range(1, n_universo + 1), fill_value=0).sort_index()
    out = freq.reset_index()
    out.columns = ["dezena", "frequencia"]
    out["dezena"] = out["dezena"].astype(int)
    out["frequencia"] = out["frequencia"].astype(int)
    return out

def intensidade(frequencia: int) -> str:
    if frequencia >= 6:
        return "Quente"
    if frequencia >= 4:
        return "Médio"
    if frequencia >= 2:
        return "Normal"
    return "Frio"

def ranking_frequencias(df: pd.DataFrame) -> pd.DataFrame:
    out = frequencias(df, LOTOFACIL.n_dezenas_sorteio, LOTOFACIL.n_universo)
    n_sorteios = len(df)
    if n_sorteios:
        out["percentual"] = (out["frequencia"] / n_sorteios * 100).round().astype(int)
    else:
        out["percentual"] = 0
    out["intensidade"] = out["frequencia"].map(intensidade)
    return out.sort_values(["frequencia", "dezena"], ascending=[False, True]).reset_index(drop=True)

def faixa_concursos(df: pd.DataFrame) -> tuple[int, int] | None:
    if df.empty:
        return None
    return int(df["concurso"].min()), int(df["concurso"].max())
