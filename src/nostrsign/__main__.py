"""Command-line interface for nostrsign.

Examples:
    ```bash
    python -m nostrsign keygen
    PRIVATE_KEY=... python -m nostrsign sign template.json --now
    python -m nostrsign verify event.json
    cat event.json | python -m nostrsign hash -
    python -m nostrsign --config config/nostrsign.yaml --log-level DEBUG pubkey
    ```

Exit codes: ``0`` success (or a valid signature for ``verify``), ``1`` any
failure, ``2`` usage errors reported by ``argparse``.
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Literal

from nostr_sdk import NostrSdkError
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from nostrsign.core.exceptions import ConfigurationError, NostrSignError
from nostrsign.core.logger import Logger, setup_logging
from nostrsign.core.yaml import load_yaml
from nostrsign.nips.nip01 import (
    finish_event,
    generate_private_key,
    get_event_hash,
    get_public_key,
    verify_event,
)
from nostrsign.utils.keys import ENV_PRIVATE_KEY, KeysConfig


logger = Logger("cli")


class CliConfig(BaseModel):
    """Settings read from the optional ``--config`` YAML file.

    Command-line flags override the file.
    """

    model_config = {"extra": "forbid"}

    keys_env: str = Field(default=ENV_PRIVATE_KEY, min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    json_logs: bool = False


def load_config(path: Path | None) -> CliConfig:
    """Load and validate the CLI config, defaults when *path* is ``None``.

    Raises:
        ConfigurationError: If the file is missing, malformed, or fails
            schema validation.
    """
    if path is None:
        return CliConfig()
    try:
        return CliConfig.model_validate(load_yaml(path))
    except FileNotFoundError as e:
        raise ConfigurationError(str(e)) from e
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid config {path}: {e}") from e


def _read_json(source: str) -> Any:
    """Read one JSON document from a file path, or from stdin for ``-``."""
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{source} is not valid JSON: {e}") from e


def _load_keys(config: CliConfig) -> KeysConfig:
    try:
        return KeysConfig(keys_env=config.keys_env)
    except (ValueError, NostrSdkError) as e:
        raise ConfigurationError(f"Cannot load private key from {config.keys_env}: {e}") from e


def _emit(payload: Any) -> None:
    print(payload if isinstance(payload, str) else json.dumps(payload, ensure_ascii=False))


def cmd_keygen(args: argparse.Namespace, config: CliConfig) -> int:
    private_key = generate_private_key()
    public_key = get_public_key(private_key)
    logger.info("key_generated", public_key=public_key)
    _emit({"private_key": private_key, "public_key": public_key})
    return 0


def cmd_pubkey(args: argparse.Namespace, config: CliConfig) -> int:
    _emit(_load_keys(config).public_key_hex)
    return 0


def cmd_hash(args: argparse.Namespace, config: CliConfig) -> int:
    _emit(get_event_hash(_read_json(args.source)))
    return 0


def cmd_sign(args: argparse.Namespace, config: CliConfig) -> int:
    template = _read_json(args.source)
    if not isinstance(template, dict):
        raise ConfigurationError(f"{args.source} must contain a JSON object")
    if args.now:
        template = {**template, "created_at": int(time.time())}

    event = finish_event(template, _load_keys(config).private_key_hex)
    logger.info("event_signed", id=event.id, kind=event.kind, pubkey=event.pubkey)
    _emit(event.to_dict())
    return 0


def cmd_verify(args: argparse.Namespace, config: CliConfig) -> int:
    data = _read_json(args.source)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{args.source} must contain a JSON object")

    valid = verify_event(data)
    logger.info("event_verified", id=data.get("id"), valid=valid)
    _emit("valid" if valid else "invalid")
    return 0 if valid else 1


COMMANDS: dict[str, Callable[[argparse.Namespace, CliConfig], int]] = {
    "keygen": cmd_keygen,
    "pubkey": cmd_pubkey,
    "hash": cmd_hash,
    "sign": cmd_sign,
    "verify": cmd_verify,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="nostrsign",
        description="Sign, hash and verify Nostr events",
    )
    parser.add_argument("--config", type=Path, help="YAML config file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: from config, else WARNING)",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("keygen", help="Generate a new private key")
    sub.add_parser("pubkey", help="Print the public key of the configured private key")

    for name, help_text in (
        ("hash", "Print the id of an unsigned event"),
        ("sign", "Sign an event template with the configured private key"),
        ("verify", "Verify a signed event (exit 1 if invalid)"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("source", nargs="?", default="-", help="JSON file, or - for stdin")
        if name == "sign":
            cmd.add_argument(
                "--now", action="store_true", help="Set created_at to the current time"
            )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run one command."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        setup_logging("ERROR")
        logger.error("config_invalid", error=str(e))
        return 1

    setup_logging(args.log_level or config.log_level, json_output=args.json_logs or config.json_logs)

    try:
        return COMMANDS[args.command](args, config)
    except NostrSignError as e:
        logger.error(f"{args.command}_failed", error=str(e))
        return 1
    except OSError as e:
        logger.error(f"{args.command}_failed", error=str(e))
        return 1


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
