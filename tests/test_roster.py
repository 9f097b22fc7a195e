"""Pruebas de la carga de candidatos desde YAML.

Roster loading tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from urna.errors import RosterError
from urna.roster import load_roster
from urna.schemas import validate_roster

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_demo_roster_loads():
    """Español: La lista de demostración trae los cuatro candidatos.

    English: The demonstration roster carries the four candidates.
    """
    candidates = load_roster(REPO_ROOT / "config" / "roster.yaml")

    assert [c.candidate_id for c in candidates] == ["c1", "c2", "c3", "c4"]
    assert [c.vote_count for c in candidates] == [1250, 24000, 900000, 0]
    assert candidates[0].party_code == "MPLA"
    assert candidates[2].party_color == "#0000FF"
    assert candidates[3].objective.startswith("Construir")


def test_relative_path_resolves_against_cwd(tmp_path, monkeypatch):
    (tmp_path / "roster.yaml").write_text(
        "candidates:\n"
        "  - candidate_id: A\n"
        "    display_name: Alpha\n"
        "    party_name: Party A\n"
        "    party_code: PA\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    candidates = load_roster("roster.yaml")

    assert len(candidates) == 1
    assert candidates[0].vote_count == 0


def test_empty_file_gives_empty_roster(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_roster(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(RosterError, match="not found"):
        load_roster(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("candidates: [\n", encoding="utf-8")
    with pytest.raises(RosterError, match="YAML"):
        load_roster(path)


@pytest.mark.parametrize(
    "payload",
    [
        {"candidates": [{"id": "c1", "nome": "X", "partido": "P", "sigla": "S", "votos": -1}]},
        {"candidates": [{"id": " ", "nome": "X", "partido": "P", "sigla": "S"}]},
        {"candidates": [{"id": "c1", "nome": "X", "partido": "P"}]},
        {
            "candidates": [
                {"id": "c1", "nome": "X", "partido": "P", "sigla": "S"},
                {"id": "c1", "nome": "Y", "partido": "Q", "sigla": "T"},
            ]
        },
        {"candidates": [{"id": "c1", "nome": "X", "partido": "P", "sigla": "S", "partidoColor": "red"}]},
    ],
)
def test_invalid_payloads_rejected(payload):
    with pytest.raises(RosterError):
        validate_roster(payload)


def test_non_mapping_payload_rejected():
    with pytest.raises(RosterError):
        validate_roster(["c1"])


def test_text_fields_are_stripped():
    candidates = validate_roster(
        {"candidates": [{"id": " c1 ", "nome": " Ana ", "partido": "P", "sigla": "S"}]}
    )
    assert candidates[0].candidate_id == "c1"
    assert candidates[0].display_name == "Ana"
