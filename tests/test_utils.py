# tests/test_utils.py

import src.utils as utils


class DummySt:
    def __init__(self):
        self.captions: list[str] = []

    def caption(self, text: str) -> None:
        self.captions.append(text)


def test_report_error_logs(caplog, monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(utils, "st", dummy)
    monkeypatch.setattr(utils, "DEV", False)

    with caplog.at_level("ERROR", logger="weathernow"):
        utils.report_error("fetch", ValueError("bad"))

    assert "fetch: ValueError: bad" in caplog.text
    # ei DEV-tilaa → ei näytetä käyttöliittymässä
    assert dummy.captions == []


def test_report_error_shows_caption_in_dev(monkeypatch):
    dummy = DummySt()
    monkeypatch.setattr(utils, "st", dummy)
    monkeypatch.setattr(utils, "DEV", True)

    utils.report_error("search", RuntimeError("down"))

    assert dummy.captions == ["⚠ search: RuntimeError: down"]
