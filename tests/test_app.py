# tests/test_app.py
import pytest

from streamlit.testing.v1 import AppTest


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SYLLABLES_PRO_ANALYSIS_DELAY", "0")
    at = AppTest.from_file("../app.py", default_timeout=30)
    return at.run()


def test_button_disabled_without_text(app):
    assert not app.exception
    assert app.button[0].disabled
    assert len(app.metric) == 0


def test_analysis_shows_metrics_and_neumernyms(app):
    app.text_area[0].input("Accessibility and localization, please!").run()
    assert not app.button[0].disabled

    app.button[0].click().run()
    assert not app.exception

    values = [m.value for m in app.metric]
    assert values == ["4", "13", "3.25"]
    assert app.code[0].value == "a11y and l10n p4e"
