import pathlib
import pytest

from core.config import ROOT
from core.schema import build_validator
from core.validator import PNG_SIGNATURE, AppValidator

VALID_YAML = """\
name: Bar
description: A perfectly ordinary app.
url: https://example.org/bar
category: utilities
"""

PNG_BYTES = PNG_SIGNATURE + b"\x00\x00\x00\rIHDR"

@pytest.fixture(scope="session")
def schema_validator():
    return build_validator(ROOT / "schema" / "app.schema.json")

@pytest.fixture
def apps_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    d = tmp_path / "apps"
    d.mkdir()
    return d

@pytest.fixture
def make_app(apps_dir):
    """make_app(name, yaml_text=VALID_YAML, logo=PNG_BYTES); pass None to leave a file out."""
    def _make(name, yaml_text=VALID_YAML, logo=PNG_BYTES):
        d = apps_dir / name
        d.mkdir()
        if yaml_text is not None:
            (d / "app.yaml").write_text(yaml_text, encoding="utf-8")
        if logo is not None:
            (d / "logo.png").write_bytes(logo)
        return d
    return _make

@pytest.fixture
def validator(schema_validator, apps_dir):
    return AppValidator(schema_validator, apps_dir)

@pytest.fixture
def valid_yaml():
    return VALID_YAML

@pytest.fixture
def png_bytes():
    return PNG_BYTES
