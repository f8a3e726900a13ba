"""
Command line entry point: python -m tonal_mcp

    python -m tonal_mcp                       # stdio (Claude Desktop and friends)
    python -m tonal_mcp --http                # HTTP on 0.0.0.0:8081/mcp
    python -m tonal_mcp --http --port 9000
    python -m tonal_mcp --log-level DEBUG
"""

import argparse
import os

from tonal_mcp import main as run_server


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tonal-mcp",
        description="Tonal MCP server: readiness, stats, history and custom workout builder",
    )
    parser.add_argument("--http", action="store_true", help="Serve over HTTP instead of stdio")
    parser.add_argument("--host", default="0.0.0.0", help="HTTP bind address (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8081, help="HTTP port (default: 8081)")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("TONAL_LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $TONAL_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # main() reads its transport settings from the environment
    os.environ["MCP_TRANSPORT"] = "http" if args.http else "stdio"
    os.environ["TONAL_LOG_LEVEL"] = args.log_level
    if args.http:
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port)

    run_server()


if __name__ == "__main__":
    main()
