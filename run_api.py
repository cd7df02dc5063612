"""
FastAPI server entry point for the YouTube summary helper.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv

from app.config import config


def main():
    """Run the FastAPI server."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="YouTube Summary Helper API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument(
        "--fallback-policy",
        choices=["transcript", "video"],
        help="Override FALLBACK_POLICY for this server",
    )
    args = parser.parse_args()

    if args.fallback_policy:
        # Read by the app factory when uvicorn imports app.api.app
        os.environ["FALLBACK_POLICY"] = args.fallback_policy
        config.FALLBACK_POLICY = args.fallback_policy

    config.initialize()

    print(f"Starting {config.APP_NAME} API server v{config.APP_VERSION}")
    print(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    print(f"Fallback policy: {config.FALLBACK_POLICY}")
    print(f"Binding to: {args.host}:{args.port}")

    uvicorn.run(
        "app.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower() if hasattr(config, "LOG_LEVEL") else "info"
    )


if __name__ == "__main__":
    main()
