"""Entry point for running the interactive WebDriver MCP server."""

import argparse
import sys


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="interactive-webdriver",
        description="Expose a WebDriver server's wire protocol commands as MCP tools.",
    )
    parser.add_argument("--server-url", help="WebDriver server base URL")
    parser.add_argument("--host", help="Address the MCP server binds to")
    parser.add_argument("--port", type=int, help="Port the MCP server listens on")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    from .server import run_server

    try:
        run_server(server_url=args.server_url, host=args.host, port=args.port)
        return 0
    except KeyboardInterrupt:
        print("\nShutdown requested...")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
