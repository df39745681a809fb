import argparse
import logging
import sys
from pathlib import Path
from typing import List

from . import settings
from .api import create_app
from .errors import ConfigError
from .logging_setup import setup_logging
from .provisioner import provision
from .registry import RequestRegistry
from .utils.paths import get_data_dir, get_log_dir
from .version import get_version

logger = logging.getLogger(__name__)


def _startup(args: argparse.Namespace) -> tuple[RequestRegistry, str]:
    data_dir = Path(args.data_dir).expanduser() if args.data_dir else get_data_dir()
    setup_logging(get_log_dir(data_dir))
    registry = RequestRegistry()
    api_key = provision(data_dir, registry, ephemeral_on_error=args.ephemeral_on_error)
    return registry, api_key


def cmd_show(args: argparse.Namespace) -> int:
    _, api_key = _startup(args)
    print(api_key)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    registry, _ = _startup(args)
    app = create_app(registry)
    logger.info("Serving request bridge on http://%s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=False, threaded=True, use_reloader=False)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="appkey", description="Provision the application key")
    parser.add_argument("--version", action="version", version=get_version())
    parser.add_argument("--data-dir", help="Directory holding config.json")
    parser.add_argument(
        "--ephemeral-on-error",
        action=argparse.BooleanOptionalAction,
        default=settings.EPHEMERAL_ON_ERROR,
        help="Use an unsaved key when config.json cannot be read or written",
    )
    sub = parser.add_subparsers(dest="command")
    p = sub.add_parser("show", help="Print the application key")
    p.set_defaults(func=cmd_show)
    p = sub.add_parser("serve", help="Serve registered handlers over HTTP")
    p.add_argument("--host", default=settings.HOST)
    p.add_argument("--port", type=int, default=settings.PORT)
    p.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2
    try:
        return args.func(args)
    except ConfigError as exc:
        logger.error("startup failed: %s", exc)
        print(f"appkey: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
