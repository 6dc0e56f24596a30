from streamlit.testing.v1 import AppTest


def _gera_e_limpa():
    from lotofacil_pro.state import clear_games, init_state, mark_generated, was_generated

    init_state()
    mark_generated()
    assert was_generated()
    clear_games()


def _so_init():
    from lotofacil_pro.state import init_state

    init_state()


def test_clear_games_resets_generated_flag():
    at = AppTest.from_function(_gera_e_limpa).run()
    assert not at.exception
    assert at.session_state["gerou"] is False
    assert at.session_state["jogos_gerados"] == []


def test_init_state_defaults():
    at = AppTest.from_function(_so_init).run()
    assert not at.exception
    assert at.session_state["gerou"] is False
    assert at.session_state["ultimo_resultado"] == ""
