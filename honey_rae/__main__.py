from __future__ import annotations

import argparse

import uvicorn

from honey_rae.config import get_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Honey Rae's Repairs service API")
    parser.add_argument("--host", default=settings.api_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.api_port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    args = parser.parse_args()

    uvicorn.run("honey_rae.main:app", host=args.host, port=args.port, reload=bool(args.reload))


if __name__ == "__main__":
    main()
