"""CLI entry point.

This script loads an offer snapshot into an in-memory store, runs one procedure and
writes the JSON result to disk.

Examples:
    python run_analysis.py --snapshot offers.json --procedure analysis.generate \
        --input '{"profileId": "p1"}'
    python run_analysis.py --snapshot https://example.com/offers.json --procedure offers.list \
        --input '{"location": "Singapore", "limit": 10, "offset": 0, "yoeCategory": 2}'

The snapshot defaults to $OFFERS_SNAPSHOT. Failures are written as
{"error": {"code": ..., "message": ..., "path": ...}} and exit with status 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from offer_engine.config import Settings
from offer_engine.errors import ProcedureError
from offer_engine.logger import setup_logger
from offer_engine.router import OffersRouter
from offer_engine.sources import source_for
from offer_engine.store import InMemoryOfferStore


def parse_args(settings: Settings) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run an offer analysis or list procedure.")
    p.add_argument(
        "--snapshot",
        type=str,
        default=settings.snapshot,
        help="Offer snapshot: JSON file path or http(s) URL (default: $OFFERS_SNAPSHOT).",
    )
    p.add_argument(
        "--procedure",
        type=str,
        required=True,
        choices=["analysis.generate", "analysis.get", "offers.list"],
        help="Procedure to call.",
    )
    p.add_argument("--input", type=str, default="{}", help="Procedure input as a JSON object.")
    p.add_argument("--out", type=str, default="result.json", help="Output JSON file path.")
    return p.parse_args()


def main() -> int:
    settings = Settings.from_env()
    setup_logger(settings.log_level, settings.logs_path)
    args = parse_args(settings)

    if not args.snapshot:
        print("No snapshot given (use --snapshot or set OFFERS_SNAPSHOT).", file=sys.stderr)
        return 2

    store = InMemoryOfferStore()
    store.load(source_for(args.snapshot, timeout_s=settings.http_timeout_s))
    router = OffersRouter(store)

    status = 0
    try:
        try:
            payload = json.loads(args.input)
        except json.JSONDecodeError as exc:
            raise ProcedureError("BAD_REQUEST", f"Input is not valid JSON: {exc}", args.procedure) from exc
        data = router.call(args.procedure, payload)
    except ProcedureError as exc:
        data = {"error": exc.to_dict()}
        status = 1

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    print(f"Wrote {args.procedure} result to: {out_path}")
    return status


if __name__ == "__main__":
    sys.exit(main())
