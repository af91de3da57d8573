#!/usr/bin/env python3
"""
Claude Code Pre-Tool-Use Hook: Read Guard
Intercepts file reads and blocks .yaml files other than docs/openapi.yaml.

Exit code 0 = read allowed, 2 = read blocked (stderr is shown to Claude),
1 = malformed hook input or internal error.
"""

import json
import logging
import sys

from read_guard.config import ConfigError, default_config, load_config
from read_guard.logger import setup_logger
from read_guard.path_rules import Decision, evaluate_path, extract_candidate_path

EXIT_ALLOW = 0
EXIT_ERROR = 1
EXIT_BLOCK = 2


def process_hook_input(raw_input: bytes | str, logger: logging.Logger) -> None:
    """
    Parse the hook payload, evaluate the candidate path and exit.
    Never returns.
    """
    try:
        if isinstance(raw_input, bytes):
            raw_input = raw_input.decode("utf-8")
        hook_data = json.loads(raw_input)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error(f"Failed to parse hook input: {e}")
        sys.exit(EXIT_ERROR)

    path = extract_candidate_path(hook_data)
    decision: Decision = evaluate_path(path)

    if decision.allowed:
        logger.debug(f"ALLOWED | path={path!r}")
        sys.exit(EXIT_ALLOW)

    logger.info(f"BLOCKED | path={path!r}")
    print(decision.reason, file=sys.stderr)
    sys.exit(EXIT_BLOCK)


def main():
    try:
        config_problem = None
        try:
            config = load_config()
        except ConfigError as e:
            config, config_problem = default_config(), e

        logger = setup_logger(config["logging"])
        if config_problem:
            logger.warning(f"Ignoring config: {config_problem}")

        raw_input = sys.stdin.buffer.read()
        process_hook_input(raw_input, logger)
    except SystemExit:
        raise
    except Exception:
        import traceback
        print(traceback.format_exc(), file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
