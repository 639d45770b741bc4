"""
Command-line chat completion.

WHAT: One-shot prompt against any configured model alias
WHY: Quick manual verification of provider mappings and keys
HOW: argparse front-end over LLMClient; gateway errors become exit code 1
"""

import argparse
import asyncio
import sys

from .core.config import settings
from .llm.client import LLMClient
from .utils.exceptions import GatewayException
from .utils.logger import setup_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llm-gateway",
        description="Send a prompt to a configured LLM by alias"
    )
    parser.add_argument("--model", "-m", help="Model alias from the providers file")
    parser.add_argument("--prompt", "-p", help="User prompt")
    parser.add_argument("--system", "-s", default=None, help="System prompt")
    parser.add_argument("--temperature", "-t", type=float, default=None, help="Sampling temperature")
    parser.add_argument(
        "--config", "-c",
        default=settings.LLM_CONFIG_PATH,
        help=f"Providers JSON file (default: {settings.LLM_CONFIG_PATH})"
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for the model's provider (otherwise read from the provider's apiKeyEnv)"
    )
    parser.add_argument("--list-models", action="store_true", help="List configured aliases and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show info-level logs on stderr")
    return parser


async def run(args: argparse.Namespace) -> int:
    """Execute one CLI invocation; returns the process exit code."""
    client = LLMClient(args.config)

    try:
        if args.list_models:
            for alias in client.configuration_manager.aliases():
                provider, model = client.configuration_manager.get_model(alias)
                print(f"{alias}\t{provider.provider_name}\t{model.model_name}")
            return 0

        if args.api_key:
            provider, _ = client.configuration_manager.get_model(args.model)
            client.set_api_key(provider.provider_name, args.api_key)

        response = await client.get_chat_completion(
            args.model,
            args.prompt,
            system_prompt=args.system,
            temperature=args.temperature,
        )
        print(response.content)
        return 0
    finally:
        await client.close()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.list_models and (not args.model or not args.prompt):
        parser.error("--model and --prompt are required unless --list-models is given")

    setup_logging(verbose=args.verbose)

    try:
        return asyncio.run(run(args))
    except GatewayException as e:
        logger.error(f"{e.code}: {e.message}")
        print(f"[{e.code}] {e.message}", file=sys.stderr)
        provider_message = getattr(e, "provider_message", None)
        if provider_message:
            print(provider_message, file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"[INVALID_INPUT] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
