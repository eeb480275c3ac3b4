import argparse
import logging
import sys
from datetime import timezone
from typing import List, Optional

from .client import WeatherClient
from .config import Settings, get_settings
from .decoder import decode
from .errors import ApiError, DecodeError, TransportError
from .render import render
from .schemas import Mode, WeatherReport

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-report",
        description="Current conditions and forecasts from OpenWeatherMap.",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=settings.default_mode.value,
        help="forecast mode (current|per3h|nextday|week)",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=settings.color,
        help="colorized output",
    )
    parser.add_argument(
        "--location",
        default=settings.default_location,
        help=f"location query (default: {settings.default_location})",
    )
    parser.add_argument("--fahrenheit", action="store_true", help="print temperatures in Fahrenheit")
    parser.add_argument("--utc", action="store_true", help="print times in UTC instead of local time")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def fetch_report(client: WeatherClient, mode: Mode, location: str) -> WeatherReport:
    body = client.fetch(mode, location)
    return decode(body)


def main(argv: Optional[List[str]] = None, client: Optional[WeatherClient] = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    client = client or WeatherClient(settings)
    mode = Mode(args.mode)
    try:
        report = fetch_report(client, mode, args.location)
    except TransportError as exc:
        logger.debug("Transport failure", exc_info=exc)
        print(f"error: could not reach weather service: {exc}", file=sys.stderr)
        return 1
    except ApiError as exc:
        logger.info("API reported status %s for %s", exc.code, args.location)
        print(exc.message, file=sys.stderr)
        return 1
    except DecodeError as exc:
        logger.debug("Decode failure", exc_info=exc)
        print(f"error: unreadable response: {exc}", file=sys.stderr)
        return 1

    tz = timezone.utc if args.utc else None
    sys.stdout.write(render(report, color=args.color, fahrenheit=args.fahrenheit, tz=tz))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
