"""CLI entrypoint: python -m golinks"""

import argparse

import uvicorn

from golinks.config import get_settings


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    p = argparse.ArgumentParser(
        prog="golinks",
        description="golinks server: short names that redirect to URLs",
    )
    p.add_argument("--host", default=settings.host,
                   help=f"Bind host (default: {settings.host})")
    p.add_argument("--port", type=int, default=settings.port,
                   help=f"Bind port (default: {settings.port})")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    # Logging is configured by the app lifespan, not uvicorn
    uvicorn.run("golinks.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
