"""
One-shot sync of OpenRouter model data to static JSON files.
Run hourly by an external scheduler (cron: "0 * * * *").

    python scripts/sync_models.py [--url URL] [--output PATH ...]
"""

import argparse
import json
import sys
import os
import time

ROOT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..")
sys.path.insert(0, ROOT_DIR)

from common.errors import UpstreamError
from common.logger import log_info, log_error, Timer
from common.openrouter import fetch_raw_models
from common.transform import build_payload

DEFAULT_OUTPUTS = [
    os.path.join(ROOT_DIR, "data", "models.json"),
    os.path.join(ROOT_DIR, "public", "data", "models.json"),
]


def write_payload(payload: dict, paths):
    content = json.dumps(payload, indent=2, ensure_ascii=False)
    for path in paths:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)


def sync(url: str = None, outputs=None) -> dict:
    outputs = outputs or DEFAULT_OUTPUTS
    raw_models = fetch_raw_models(url)
    payload = build_payload(raw_models, time.time())
    write_payload(payload, outputs)
    return payload


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--url", help="models API URL (default: OPENROUTER_API_URL)")
    parser.add_argument(
        "--output",
        action="append",
        dest="outputs",
        help="file to write; repeatable (default: data/ and public/data/models.json)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    with Timer() as t:
        try:
            payload = sync(args.url, args.outputs)
        except UpstreamError as e:
            log_error("sync_failed", error_code=e.error_code, reason=str(e))
            return 1

    log_info(
        "sync_completed",
        count=payload["totalCount"],
        outputs=args.outputs or DEFAULT_OUTPUTS,
        execution_time_ms=t.duration_ms,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
