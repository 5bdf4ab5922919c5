"""
Global fixtures live here

Sample trees for the path engine and a sandboxed settings directory for the CLI.
"""
import json
import pytest
from pathlib import Path
from click.testing import CliRunner
from dotdata.core.data import Data

def make_sample() -> dict:
    """A fresh copy of the nested tree most tests work against."""
    return {
        "a": "A",
        "b": {
            "b": "B",
            "c": ["C1", "C2", "C3"],
            "d": {"d1": "D1", "d2": "D2", "d3": "D3"},
        },
        "c": ["c1", "c2", "c3"],
        "f": {"g": {"h": "FGH"}},
        "h": {"i": "I"},
        "i": {"j": "J"},
    }

@pytest.fixture
def sample_factory():
    """Builds independent copies of the sample tree"""
    return make_sample

@pytest.fixture
def sample() -> dict:
    """Raw nested dict"""
    return make_sample()

@pytest.fixture
def data(sample: dict) -> Data:
    """Data wrapping the sample tree"""
    return Data(sample)

@pytest.fixture
def settings_dir(tmp_path: Path, monkeypatch) -> Path:
    """
    Keeps tests away from the real user settings and environment.
    """
    monkeypatch.delenv("DOTDATA_OUTPUT_FORMAT", raising=False)
    return tmp_path / "settings"

@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()

@pytest.fixture
def doc_path(tmp_path: Path) -> Path:
    """The sample tree written as a JSON document"""
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(make_sample()), encoding="utf-8")
    return path
