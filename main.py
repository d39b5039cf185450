"""
LoginSentry: intrusion detection for authentication logs.
Main entry point: downloads a log over HTTP and flags possible break-in attempts.
"""

from login_sentry.alert_manager import AlertManager
from login_sentry.config import load_config, is_alert_output_configured
from login_sentry.log_processor import LogProcessor
from login_sentry.login_history import LoginHistory
from login_sentry.lookup_loader import load_lookup
from login_sentry.transport import FetchError, LogFetcher
from login_sentry.url_resolver import InvalidURLError, resolve_url
import logging
import argparse
import sys

logger = logging.getLogger(__name__)

USAGE = "Specify URL from where logs are to be obtained."


def build_arg_parser(config):
    parser = argparse.ArgumentParser(description="LoginSentry: login intrusion detection")
    parser.add_argument("url", nargs="?", help="URL of the log to analyze, e.g. http://host/auth.log")
    parser.add_argument("--banned-ips", default=config["banned_ips_path"], help="File of banned IP addresses")
    parser.add_argument("--authorized-users", default=config["authorized_users_path"], help="File of authorized users")
    parser.add_argument("--year", type=int, default=config["log_year"], help="Year assumed for log timestamps")
    parser.add_argument("--timeout", type=float, default=config["timeout"], help="Connect/read timeout in seconds")
    parser.add_argument("--alert-output", default=config["alert_output"], help="Also append alerts to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def run(args, config):
    """Fetch the log at ``args.url`` and run detection over it."""
    host, port, path = resolve_url(args.url)

    fetcher = LogFetcher(timeout=args.timeout)
    with fetcher.fetch(host, port, path) as body:
        banned_ips = load_lookup(args.banned_ips)
        authorized_users = load_lookup(args.authorized_users)

        alert_output = args.alert_output if is_alert_output_configured(vars(args)) else None
        processor = LogProcessor(
            banned_ips,
            authorized_users,
            year=args.year,
            history=LoginHistory(config["max_logins"], config["window_seconds"]),
            alert_manager=AlertManager(csv_output_path=alert_output),
        )
        return processor.process(body)


def main(argv=None):
    """Main entry point."""
    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    args = build_arg_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else config["log_level"],
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.url:
        print(USAGE)
        return 1

    try:
        run(args, config)
    except (InvalidURLError, FetchError, OSError) as e:
        logger.error(f"Aborting: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
