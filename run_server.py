#!/usr/bin/env python3
"""
Startup script.

Runs the grocery bot API, or compiles a single command and prints the plan
without touching the database.

Usage:
    # Run the API
    python run_server.py

    # Run with custom port and reload for development
    python run_server.py --port 8001 --reload

    # Compile a command and print the plan
    python run_server.py --parse "add two chickens three steaks and four pork chops"
"""

import argparse
import json
import sys


def print_plan(text: str, use_llm: bool) -> None:
    """Compile text and print the confirmation summary and wire plan."""
    from grocery_bot.logging_config import setup_logging
    from grocery_bot.voice.message_builder import PlanMessageBuilder
    from grocery_bot.voice.parsers import parse_voice_plan

    setup_logging()
    plan, source = parse_voice_plan(text, use_llm=use_llm)

    print(f"\nSource: {source}")
    print("-" * 50)
    print(PlanMessageBuilder().build_summary(plan))
    print("-" * 50)
    print(json.dumps(plan.to_wire(), indent=2))


def run_server(host: str, port: int, reload: bool) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    print(f"\n{'=' * 50}")
    print("Starting Grocery Bot API")
    print(f"  URL: http://{host}:{port}")
    print(f"{'=' * 50}\n")

    uvicorn.run(
        "grocery_bot.main:app",
        host=host,
        port=port,
        reload=reload,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Run the grocery bot API or compile a voice command",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--parse", metavar="TEXT", help="Compile TEXT into a plan and print it")
    parser.add_argument("--llm", action="store_true", help="With --parse, try the LLM parser first")

    args = parser.parse_args()

    if args.parse is not None:
        print_plan(args.parse, use_llm=args.llm)
        sys.exit(0)

    run_server(args.host, args.port, args.reload)


if __name__ == "__main__":
    main()
