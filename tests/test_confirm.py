import pytest

from forwarder_deployment.confirm import _confirm_deployer, _confirm_transfer, _continue
from tests.conftest import DEPLOYER_ADDRESS, FORWARDER_ADDRESS


def _answer(monkeypatch, answer):
    prompts = list()

    def fake_input(prompt):
        prompts.append(prompt)
        return answer

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


@pytest.mark.parametrize("answer", ["y", "Y", "yes", ""])
def test_continue(monkeypatch, answer):
    prompts = _answer(monkeypatch, answer)
    _continue()
    assert prompts == ["Continue Y/N? "]


@pytest.mark.parametrize("answer", ["n", "N", " n "])
def test_abort(monkeypatch, capsys, answer):
    _answer(monkeypatch, answer)
    with pytest.raises(SystemExit):
        _continue()
    assert "Aborting deployment!" in capsys.readouterr().out


def test_confirm_expected_deployer(monkeypatch):
    prompts = _answer(monkeypatch, "n")
    _confirm_deployer(DEPLOYER_ADDRESS.lower(), expected_owner=DEPLOYER_ADDRESS)
    assert prompts == []


def test_confirm_unexpected_deployer(monkeypatch):
    prompts = _answer(monkeypatch, "n")
    with pytest.raises(SystemExit):
        _confirm_deployer(FORWARDER_ADDRESS, expected_owner=DEPLOYER_ADDRESS)
    assert DEPLOYER_ADDRESS in prompts[0]


def test_confirm_transfer(monkeypatch):
    prompts = _answer(monkeypatch, "y")
    _confirm_transfer(FORWARDER_ADDRESS)
    assert FORWARDER_ADDRESS in prompts[0]
