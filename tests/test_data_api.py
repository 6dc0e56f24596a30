import pandas as pd
import pytest
import requests

from lotofacil_pro import data_api, http_client
from lotofacil_pro.config import URL_LOTOFACIL_API
from lotofacil_pro.data_api import (
    DrawSourceError,
    draws_to_df,
    fetch_contest,
    fetch_latest,
    fetch_recent_window,
    fetch_results,
    parse_draw,
)
from lotofacil_pro.models import Draw


def _payload(concurso, inicio=1, acumulou=False):
    return {
        "loteria": "lotofacil",
        "concurso": concurso,
        "data": "10/10/2026",
        "dezenas": [f"{d:02d}" for d in range(inicio, inicio + 15)][::-1],
        "acumulou": acumulou,
    }


@pytest.fixture
def api(monkeypatch):
    respostas = {}
    chamadas = []

    def fake_get_json(url, **kwargs):
        chamadas.append(url)
        resp = respostas.get(url)
        if resp is None:
            raise requests.HTTPError(f"404 for {url}")
        return resp

    monkeypatch.setattr(data_api, "get_json", fake_get_json)
    return respostas, chamadas


def test_parse_draw_converts_and_sorts():
    d = parse_draw(_payload(3000, inicio=5, acumulou=True))
    assert d == Draw(concurso=3000, data="10/10/2026", dezenas=tuple(range(5, 20)), acumulou=True)


def test_parse_draw_missing_fields():
    with pytest.raises(DrawSourceError):
        parse_draw({"data": "01/01/2026"})
    with pytest.raises(DrawSourceError):
        parse_draw(["01", "02"])
    with pytest.raises(DrawSourceError):
        parse_draw({"concurso": "abc", "dezenas": ["01"]})


def test_parse_draw_out_of_range():
    p = _payload(1)
    p["dezenas"][0] = "26"
    with pytest.raises(DrawSourceError):
        parse_draw(p)


def test_parse_draw_defaults():
    d = parse_draw({"concurso": "12", "dezenas": [3, 1, 2]})
    assert d.concurso == 12
    assert d.dezenas == (1, 2, 3)
    assert d.acumulou is False
    assert d.data == ""


def test_fetch_results_list_is_limited(api):
    respostas, _ = api
    respostas[URL_LOTOFACIL_API] = [_payload(c) for c in range(3010, 3000, -1)]
    draws = fetch_results(limit=5)
    assert [d.concurso for d in draws] == [3010, 3009, 3008, 3007, 3006]


def test_fetch_results_single_object(api):
    respostas, _ = api
    respostas[URL_LOTOFACIL_API] = _payload(3010)
    assert [d.concurso for d in fetch_results()] == [3010]


def test_fetch_latest_and_contest(api):
    respostas, chamadas = api
    respostas[f"{URL_LOTOFACIL_API}/latest"] = _payload(3010)
    respostas[f"{URL_LOTOFACIL_API}/3001"] = _payload(3001)
    assert fetch_latest().concurso == 3010
    assert fetch_contest(3001).concurso == 3001
    assert chamadas == [f"{URL_LOTOFACIL_API}/latest", f"{URL_LOTOFACIL_API}/3001"]


def test_fetch_errors_become_draw_source_error(api):
    with pytest.raises(DrawSourceError) as exc:
        fetch_latest()
    assert isinstance(exc.value.__cause__, requests.HTTPError)


def test_recent_window_skips_failed_contests(api):
    respostas, _ = api
    respostas[f"{URL_LOTOFACIL_API}/latest"] = _payload(3010)
    for c in (3009, 3007, 3006, 3005, 3004):
        respostas[f"{URL_LOTOFACIL_API}/{c}"] = _payload(c)
    draws = fetch_recent_window(7)
    assert [d.concurso for d in draws] == [3010, 3009, 3007, 3006, 3005, 3004]


def test_recent_window_stops_at_first_contest(api):
    respostas, chamadas = api
    respostas[f"{URL_LOTOFACIL_API}/latest"] = _payload(2)
    respostas[f"{URL_LOTOFACIL_API}/1"] = _payload(1)
    assert [d.concurso for d in fetch_recent_window(7)] == [2, 1]
    assert len(chamadas) == 2


def test_recent_window_requires_latest(api):
    with pytest.raises(DrawSourceError):
        fetch_recent_window(7)


def test_draws_to_df():
    draws = [parse_draw(_payload(3001, inicio=2)), parse_draw(_payload(3000)), parse_draw(_payload(3000))]
    df = draws_to_df(draws)
    assert list(df["concurso"]) == [3000, 3001]
    assert list(df.columns[:3]) == ["concurso", "data", "acumulou"]
    assert list(df.loc[0, [f"d{i}" for i in range(1, 16)]]) == list(range(1, 16))
    assert df.loc[0, "data"] == pd.Timestamp(2026, 10, 10)


def test_draws_to_df_empty_and_incomplete():
    assert draws_to_df([]).empty
    incompleto = Draw(concurso=1, data="", dezenas=(1, 2, 3))
    df = draws_to_df([incompleto])
    assert df.empty
    assert "d15" in df.columns


class _FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status}")

    def json(self):
        return self.payload


class _FakeSession:
    def __init__(self, resp):
        self.resp = resp
        self.calls = []

    def get(self, url, timeout):
        self.calls.append((url, timeout))
        return self.resp


def test_http_get_json(monkeypatch):
    session = _FakeSession(_FakeResponse({"ok": 1}))
    monkeypatch.setattr(http_client, "get_session", lambda: session)
    assert http_client.get_json("https://x/y", timeout=3) == {"ok": 1}
    assert session.calls == [("https://x/y", 3)]


def test_http_get_json_raises_on_status(monkeypatch):
    monkeypatch.setattr(http_client, "get_session", lambda: _FakeSession(_FakeResponse(None, status=503)))
    with pytest.raises(requests.HTTPError):
        http_client.get_json("https://x/y")


def test_session_is_shared_and_retries():
    http_client.get_session.cache_clear()
    s = http_client.get_session()
    assert s is http_client.get_session()
    retry = s.get_adapter("https://example.com").max_retries
    assert 503 in retry.status_forcelist
    assert s.headers["Accept"] == "application/json"
