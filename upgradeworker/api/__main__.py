"""Server entry point: python -m upgradeworker.api"""

from __future__ import annotations

import argparse

import uvicorn


def main() -> None:
    parser = argparse.ArgumentParser(description="Serve the upgrade worker API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args()

    uvicorn.run(
        "upgradeworker.api:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_config=None,
    )


main()
