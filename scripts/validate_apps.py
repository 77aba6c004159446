#!/usr/bin/env python3
"""Validate app entries under apps/ against schema/app.schema.json.

Usage:
  python -m scripts.validate_apps              # every subdirectory of apps/
  python -m scripts.validate_apps foo bar      # only the named entries
  validate-apps foo bar                        # installed console script

Exits 1 if any entry fails a check, 0 otherwise.
"""
from __future__ import annotations
import argparse, logging, pathlib, sys
from typing import Iterable, Optional, TextIO

from core.config import settings
from core.schema import build_validator
from core.validator import AppValidator

log = logging.getLogger(__name__)

def discover_apps(apps_dir: pathlib.Path) -> list[str]:
    # Scan order, not sorted; plain files and symlinks are skipped.
    return [p.name for p in pathlib.Path(apps_dir).iterdir() if p.is_dir() and not p.is_symlink()]

def run(names: Iterable[str], validator: AppValidator, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    failed = False
    for name in names:
        print(f"Validating {name}...", file=out)
        errors = validator.validate(name)
        if errors:
            failed = True
            for e in errors:
                print(f"  ❌ {e}", file=err)
        else:
            print("  ✅ Valid", file=out)
    if failed:
        print("\nValidation failed", file=err)
        return 1
    print("\nAll validations passed", file=out)
    return 0

def parse_args(argv: Optional[list[str]] = None):
    ap = argparse.ArgumentParser(description="Validate app entries (app.yaml + logo.png).")
    ap.add_argument("apps", nargs="*", help="entry names to validate (default: every directory under --apps-dir)")
    ap.add_argument("--apps-dir", type=pathlib.Path, default=settings.apps_dir, help="root folder holding one directory per app")
    ap.add_argument("--schema", type=pathlib.Path, default=settings.schema_path, help="JSON schema for app.yaml")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap.parse_args(argv)

def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    validator = AppValidator(
        build_validator(args.schema),
        args.apps_dir,
        metadata_filename=settings.metadata_filename,
        logo_filename=settings.logo_filename,
    )
    names = args.apps or discover_apps(args.apps_dir)
    log.debug("validating %d app(s) from %s", len(names), args.apps_dir)
    return run(names, validator)

if __name__ == "__main__":
    raise SystemExit(main())
