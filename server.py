"""Google Forms MCP Server.

A FastMCP server exposing tools for creating Google Forms, adding text and
multiple choice questions, and retrieving form details and responses.
"""

import argparse

# Setup enhanced logging before the rest of the modules log anything
from config.enhanced_logging import setup_logger
from config.settings import Settings, settings

logger = setup_logger(settings.log_level)

from fastmcp import FastMCP
from typing_extensions import Any, List, Optional

from auth.google_auth import GoogleAuthError, build_forms_service
from forms.forms_tools import setup_forms_tools


def create_server(config: Optional[Settings] = None, forms_service: Any = None) -> FastMCP:
    """
    Create the MCP server with all Google Forms tools registered.

    The Forms service is built once here and shared by every tool call for
    the lifetime of the server.

    Args:
        config: Settings to use (defaults to global settings)
        forms_service: Pre-built Forms service; built from config when None

    Returns:
        FastMCP: The configured server

    Raises:
        GoogleAuthError: If the credentialed Forms client cannot be created
    """
    config = config or settings

    if forms_service is None:
        forms_service = build_forms_service(config)

    mcp = FastMCP(name=config.server_name, version=config.server_version)

    setup_forms_tools(mcp, forms_service, debug=config.debug)

    return mcp


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Google Forms MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default=None,
        help="MCP transport (default: TRANSPORT setting, stdio)",
    )
    parser.add_argument("--host", default=None, help="Host for the http transport")
    parser.add_argument("--port", type=int, default=None, help="Port for the http transport")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Log full error details for failed tool calls",
    )
    return parser.parse_args(argv)


def apply_cli_overrides(config: Settings, args: argparse.Namespace) -> Settings:
    """Return a copy of ``config`` with any command line overrides applied."""
    overrides = {
        "transport": args.transport,
        "server_host": args.host,
        "server_port": args.port,
        "debug": args.debug,
    }
    return config.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the server."""
    config = apply_cli_overrides(settings, parse_args(argv))

    logger.info(f"Starting {config.server_name} v{config.server_version}")
    logger.info(f"Transport: {config.transport}")
    logger.info(f"Debug logging: {'enabled' if config.debug else 'disabled'}")

    try:
        config.validate_oauth_config()
        mcp = create_server(config)
    except (ValueError, GoogleAuthError) as e:
        logger.error(f"❌ Startup configuration error: {e}")
        raise

    run_args = {"transport": config.transport}
    if config.transport == "http":
        run_args["host"] = config.server_host
        run_args["port"] = config.server_port
        logger.info(f"🌐 Serving on http://{config.server_host}:{config.server_port}/mcp")

    try:
        mcp.run(**run_args)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
