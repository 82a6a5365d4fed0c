from __future__ import annotations

import argparse
import logging

import uvicorn
from dotenv import load_dotenv

from services.api.app.config import RelaySettings


def main() -> int:
    load_dotenv()
    settings = RelaySettings.from_env()

    parser = argparse.ArgumentParser(description="Run the draft order relay")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Server running on port %s", args.port)

    uvicorn.run(
        "services.api.app.main:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
