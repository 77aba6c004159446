"""Load and compile the app.yaml schema (schema/app.schema.json)."""
from __future__ import annotations
import json, logging, pathlib

from jsonschema import Draft202012Validator, FormatChecker, ValidationError

log = logging.getLogger(__name__)

def load_schema(path: pathlib.Path) -> dict:
    return json.loads(pathlib.Path(path).read_text(encoding="utf-8"))

def compile_schema(schema: dict) -> Draft202012Validator:
    # Raises SchemaError on a broken schema document; that ends the run.
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema, format_checker=FormatChecker())

def build_validator(path: pathlib.Path) -> Draft202012Validator:
    log.debug("loading schema from %s", path)
    return compile_schema(load_schema(path))

def format_path(error: ValidationError) -> str:
    """Render the failing location as $, $.name or $.links[0]."""
    return "$" + "".join([f"[{x}]" if isinstance(x, int) else f".{x}" for x in error.absolute_path])

def path_key(error: ValidationError) -> list:
    """Sort key ordering errors by location; array indexes compare numerically."""
    return [(isinstance(x, int), x) for x in error.absolute_path]
