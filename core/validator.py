"""Per-app checks for entries under apps/.

Each entry is a directory holding an ``app.yaml`` metadata document and a
``logo.png`` image. ``AppValidator.validate`` runs the checks in a fixed order
and returns human-readable error strings; an empty list means the entry is
valid. Missing directory, missing metadata and unparseable YAML stop the
checks for that entry. Schema, logo and date problems are independent and are
all reported together.
"""
from __future__ import annotations
import datetime, logging, math, pathlib
from typing import Any

import yaml
from dateutil import parser as date_parser
from jsonschema import Draft202012Validator

from core.schema import format_path, path_key

log = logging.getLogger(__name__)

PNG_SIGNATURE = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A])

# Largest timestamp (ms from epoch) a numeric date_added may carry.
MAX_TIMESTAMP_MS = 8.64e15

def has_png_signature(path: pathlib.Path) -> bool:
    with open(path, "rb") as fh:
        head = fh.read(len(PNG_SIGNATURE))
    return head == PNG_SIGNATURE

def is_valid_date(value: Any) -> bool:
    """Permissive date check: YAML timestamps, epoch numbers, or any string dateutil can read."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return True
    if isinstance(value, (int, float)):
        return math.isfinite(value) and abs(value) <= MAX_TIMESTAMP_MS
    if not isinstance(value, str):
        return False
    try:
        date_parser.parse(value.strip())
        return True
    except (ValueError, OverflowError):
        return False

class AppValidator:
    def __init__(
        self,
        schema_validator: Draft202012Validator,
        apps_dir: pathlib.Path,
        metadata_filename: str = "app.yaml",
        logo_filename: str = "logo.png",
    ) -> None:
        self.schema_validator = schema_validator
        self.apps_dir = pathlib.Path(apps_dir)
        self.metadata_filename = metadata_filename
        self.logo_filename = logo_filename

    def validate(self, name: str) -> list[str]:
        errors: list[str] = []
        app_path = self.apps_dir / name

        if not app_path.exists():
            return [f"Directory does not exist: {name}"]

        meta_path = app_path / self.metadata_filename
        if not meta_path.exists():
            return [f"Missing {self.metadata_filename} in {name}"]

        try:
            app = yaml.safe_load(meta_path.read_bytes())
        except yaml.YAMLError as e:
            return [f"Invalid YAML in {name}: {e}"]

        for e in sorted(self.schema_validator.iter_errors(app), key=path_key):
            errors.append(f"{name}: {format_path(e)} {e.message}")

        logo_path = app_path / self.logo_filename
        if not logo_path.exists():
            errors.append(f"Missing {self.logo_filename} in {name}")
        elif not has_png_signature(logo_path):
            errors.append(f"Invalid PNG file in {name}: {self.logo_filename} is not a valid PNG")

        # Non-mapping documents were already reported by the schema check.
        if isinstance(app, dict) and app.get("date_added"):
            if not is_valid_date(app["date_added"]):
                errors.append(f"{name}: Invalid date_added format")

        log.debug("%s: %d error(s)", name, len(errors))
        return errors
