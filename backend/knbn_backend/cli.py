"""
knbn-web - command line entry point.

Starts the web server that serves the board viewer and its HTTP API.
"""

import argparse
import logging
import sys
import threading
import webbrowser

from knbn_backend import __version__
from knbn_backend.app.core.config import get_settings

logger = logging.getLogger(__name__)

BROWSER_DELAY_SECONDS = 1.0

USAGE = """
KnBn Web - Kanban Web CLI Interface

Usage: knbn-web [command] [options]

Commands:
  server                Start the web server (default)
  help                  Show this help message

Options:
  -p <port>             Set the server port (default: 9000)
  --host <host>         Set the bind address (default: 127.0.0.1)
  --no-open             Don't automatically open browser

Examples:
  knbn-web                               # Start server on port 9000 and open browser
  knbn-web -p 8080                       # Start server on port 8080 and open browser
  knbn-web --no-open                     # Start server without opening browser
  knbn-web server -p 3000 --no-open      # Start server on port 3000 without opening browser
"""


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        port = 0
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError("Port must be a number between 1 and 65535")
    return port


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="knbn-web",
        description="KnBn Web - Kanban Web CLI Interface",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE,
    )
    parser.add_argument("command", nargs="?", default="server", help="server (default) or help")
    parser.add_argument("-p", "--port", type=_port, default=None, help="Server port")
    parser.add_argument("--host", default=None, help="Bind address")
    parser.add_argument("--no-open", dest="open_browser", action="store_false", default=None,
                        help="Don't automatically open browser")
    return parser


def open_browser(url: str) -> None:
    """Open ``url`` in the default browser, printing a hint when none is available."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.debug("Browser launch failed: %s", e)
        opened = False
    if not opened:
        print(f"Note: Could not automatically open browser. Please visit {url} manually.")


def cmd_server(args) -> int:
    """
    Handle the server command.

    CLI flags take precedence over ``KNBN_*`` settings. Blocks until the
    server stops.
    """
    import uvicorn

    from knbn_backend.app.main import create_app

    settings = get_settings()
    overrides = {
        key: value
        for key, value in (
            ("port", args.port),
            ("host", args.host),
            ("open_browser", args.open_browser),
        )
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(update=overrides)

    app = create_app(settings)
    url = f"http://localhost:{settings.port}"

    print(f"KnBn server running at {url}")
    print(f" - Web Version: {__version__}")
    print(f" - Working Directory: {settings.working_root}")

    if settings.open_browser:
        threading.Timer(BROWSER_DELAY_SECONDS, open_browser, args=(url,)).start()

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


def cmd_help(args) -> int:
    print(USAGE)
    return 0


COMMANDS = {
    "server": cmd_server,
    "help": cmd_help,
}


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        print('Run "knbn-web help" for usage information', file=sys.stderr)
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
