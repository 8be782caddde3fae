#!/usr/bin/env python3
"""
Application startup script with environment configuration support.
"""

import os
import sys
import argparse

from tripadmin.config.loader import ConfigLoader, load_config_for_environment


def main():
    """Main startup function with environment configuration"""
    parser = argparse.ArgumentParser(description="Trip Planner Admin Server")
    parser.add_argument(
        "--env",
        choices=["development", "staging", "production", "testing"],
        default=None,
        help="Environment to run (default: from ENVIRONMENT env var or development)"
    )
    parser.add_argument("--host", default=None, help="Host to bind to (overrides config)")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (overrides config)")
    parser.add_argument("--workers", type=int, default=None, help="Number of worker processes (overrides config)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload (overrides config)")
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="List available environment configurations"
    )
    parser.add_argument(
        "--validate-env",
        help="Validate a specific environment configuration"
    )
    parser.add_argument(
        "--create-sample",
        help="Create a sample .env file for the specified environment"
    )

    args = parser.parse_args()

    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Available environment configurations:")
        for env in envs:
            print(f"  - {env}")
        return

    if args.validate_env:
        if ConfigLoader.validate_environment_config(args.validate_env):
            print(f"Environment '{args.validate_env}' configuration is valid")
            return
        print(f"Environment '{args.validate_env}' configuration is invalid or missing")
        sys.exit(1)

    if args.create_sample:
        try:
            sample_file = ConfigLoader.create_sample_env_file(args.create_sample)
            print(f"Sample configuration created: {sample_file}")
        except ValueError as e:
            print(f"Failed to create sample configuration: {e}")
            sys.exit(1)
        return

    try:
        settings = load_config_for_environment(args.env)
    except ValueError as e:
        print(f"Failed to load configuration: {e}")
        sys.exit(1)

    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.workers:
        settings.workers = args.workers
    if args.reload:
        settings.reload = True

    # the server process builds its settings from the environment
    os.environ["ENVIRONMENT"] = settings.environment.value

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Listening:   http://{settings.host}:{settings.port}")
    print(f"   Admin panel: {settings.admin.path}")
    print(f"   Database:    {settings.database_url}")

    import uvicorn

    uvicorn.run(
        "tripadmin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers if not settings.reload else 1,
        log_level=settings.log_level.value.lower(),
    )


if __name__ == "__main__":
    main()
