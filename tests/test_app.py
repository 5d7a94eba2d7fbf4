import pytest
from streamlit.testing.v1 import AppTest

from services import proxy_client

from conftest import CURIOSITY_PAYLOAD, FakeGet, FakeResponse


def rover_calls(fake):
    return [call for call in fake.calls if "/rovers/" in call["url"]]


def painted(at):
    return "".join(m.value for m in at.markdown)


@pytest.fixture
def app():
    at = AppTest.from_file("../app.py", default_timeout=10)
    at.run()
    return at


def test_first_run_paints_shell_and_rover_buttons(app):
    assert not app.exception
    assert "Welcome to Mars dashboard" in painted(app)
    assert [b.label for b in app.button] == ["Curiosity", "Opportunity", "Spirit"]
    assert 'class="photo-details-container"' not in painted(app)


def test_clicking_a_rover_shows_its_gallery_across_reruns(monkeypatch, app):
    fake = FakeGet(FakeResponse(CURIOSITY_PAYLOAD))
    monkeypatch.setattr(proxy_client.requests, "get", fake)

    app.button(key="rover_Curiosity").click().run()

    assert not app.exception
    assert 'src="a.jpg"' in painted(app)
    assert rover_calls(fake)[0]["params"] == {"sol": 1000}

    app.run()

    assert 'src="a.jpg"' in painted(app)
    assert len(rover_calls(fake)) == 1


def test_sol_input_is_sent_to_the_proxy(monkeypatch, app):
    fake = FakeGet(FakeResponse({"photos": []}))
    monkeypatch.setattr(proxy_client.requests, "get", fake)

    app.number_input(key="sol").set_value(42).run()
    app.button(key="rover_Spirit").click().run()

    assert rover_calls(fake)[-1]["params"] == {"sol": 42}
    assert "No photos available for this rover." in painted(app)


def test_gallery_failure_is_reported(monkeypatch, app):
    monkeypatch.setattr(proxy_client.requests, "get", FakeGet(FakeResponse({"photos": ["broken"]})))

    app.button(key="rover_Curiosity").click().run()

    assert not app.exception
    assert [e.value for e in app.error] == ["Render failed: 'str' object has no attribute 'get'"]
    assert "Loading..." not in painted(app)
