"""
Command line entry point.

    $ tempconv 32FC 36CK 10CC
    ParseError: 10CC, "scale unknown"
    32F => 0C
    36C => 309.15K

Parse failures are printed as each token is read; conversions follow once
every token has been parsed, in input order.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from tempconv.config.settings import TempconvConfig, load_config
from tempconv.services.temperature_conversion_service import TemperatureConversionService

logger = logging.getLogger(__name__)

USAGE_EXAMPLE = "32FC 45FK 36CK 32CF"


def get_exec_name(argv0: Optional[str] = None) -> str:
    """Name of the running executable, for the usage message."""
    argv0 = argv0 if argv0 is not None else sys.argv[0]
    name = Path(argv0).name
    if not name or name == "__main__.py":
        return "tempconv"
    return name


def configure_logging(config: TempconvConfig) -> None:
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the converter over command line tokens.

    Args:
        argv: Tokens to convert; defaults to ``sys.argv[1:]``

    Returns:
        Process exit status
    """
    tokens = list(sys.argv[1:] if argv is None else argv)

    if not tokens:
        print(f"Usage exemple: {get_exec_name()} {USAGE_EXAMPLE}", file=sys.stderr)
        return 1

    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"tempconv: {e}", file=sys.stderr)
        return 2

    configure_logging(config)
    service = TemperatureConversionService(config)

    results = []
    for outcome in service.iter_outcomes(tokens):
        if outcome.ok:
            results.append(outcome.result)
        else:
            print(outcome.failure.display)

    for result in results:
        print(result.display)

    logger.info(f"[cli] {len(results)} of {len(tokens)} token(s) converted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
