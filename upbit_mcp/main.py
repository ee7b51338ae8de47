"""Upbit MCP server entrypoint.

Serves trading and indicator tools over stdio.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# stdout carries the MCP stdio protocol, so logs go to stderr
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

# Imports after logging setup (required for proper logging configuration)
from upbit_mcp.config import SystemConfig  # noqa: E402
from upbit_mcp.server import create_server  # noqa: E402
from upbit_mcp.sources.upbit import UpbitExchangeAdapter  # noqa: E402


def main():
    """Main entry point for the MCP server."""
    logger.info("🚀 Starting Upbit MCP server...")

    try:
        config = SystemConfig.from_env()
        config.validate()
        logger.info("✅ Configuration loaded")
        logger.info(f"   - Base URL: {config.base_url}")
        logger.info(f"   - Access Key: {config.masked_access_key()}")
        logger.info(f"   - Timeout: {config.timeout}s")

        exchange_adapter = UpbitExchangeAdapter(
            access_key=config.access_key,
            secret_key=config.secret_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        logger.info("✅ Exchange adapter initialized")

        server = create_server(exchange_adapter)
        logger.info("📡 MCP server started on stdio")
        server.run()

    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        logger.info("✅ Server stopped")


if __name__ == "__main__":
    main()
