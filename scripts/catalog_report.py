"""Emit a report of the JSON functions registered for the host engine."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from relaxed_json.catalog import CATALOG


def _arity(min_args: int, max_args: int | None) -> str:
    if max_args is None:
        return f"{min_args}..n"
    if min_args == max_args:
        return str(min_args)
    return f"{min_args}..{max_args}"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--json-out",
        default=None,
        help="optional path for a machine-readable catalog summary",
    )
    args = parser.parse_args()

    print("JSON function catalog")
    print("---------------------")
    print(f"total functions: {len(CATALOG)}")
    for spec in CATALOG:
        print(f"  - {spec.name}({_arity(spec.min_args, spec.max_args)}): {spec.note}")

    if args.json_out:
        path = Path(args.json_out)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "total_functions": len(CATALOG),
            "functions": [
                {
                    "name": spec.name,
                    "arity": _arity(spec.min_args, spec.max_args),
                    "python": f"{spec.func.__module__}.{spec.func.__name__}",
                    "note": spec.note,
                }
                for spec in CATALOG
            ],
        }
        path.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
