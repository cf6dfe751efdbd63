import argparse
import json

from .alertmanager import AlertmanagerClient, FetchError
from .constants import (
    ALERTMANAGER_URL,
    DEBUG_MODE,
    REPORT_TITLE,
    SLACK_BLOCK_LIMIT,
    SLACK_BOT_TOKEN,
    SLACK_CHANNEL_ID,
    SLACK_PUBLISH_DELAY_SECONDS,
)
from .report import build_report
from .services import PublishError, SlackClient, build_slack_payload, publish_batches
from .utils import debug, error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alertmanager-silences-report",
        description="Fetch Alertmanager silences and report them to Slack",
    )
    parser.add_argument("-a", "--alertmanager-url", default=ALERTMANAGER_URL,
                        help="Alertmanager URL (env: ALERTMANAGER_URL)")
    parser.add_argument("-t", "--slack-bot-token", default=SLACK_BOT_TOKEN,
                        help="Slack bot token (env: SLACK_BOT_TOKEN)")
    parser.add_argument("-c", "--slack-channel", default=SLACK_CHANNEL_ID,
                        help="Slack channel ID (env: SLACK_CHANNEL_ID)")
    parser.add_argument("--dry-run", action="store_true",
                        help="print the Slack payloads instead of posting them")
    parser.add_argument("--debug", action="store_true", default=DEBUG_MODE,
                        help="verbose output (env: DEBUG_MODE)")
    return parser


def _validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    missing = []
    if not args.alertmanager_url:
        missing.append("--alertmanager-url/ALERTMANAGER_URL")
    if not args.dry_run:
        if not args.slack_bot_token:
            missing.append("--slack-bot-token/SLACK_BOT_TOKEN")
        if not args.slack_channel:
            missing.append("--slack-channel/SLACK_CHANNEL_ID")
    if missing:
        parser.error(f"the following arguments are required: {', '.join(missing)}")


def run(args: argparse.Namespace) -> int:
    print(f"Fetching silences from Alertmanager: {args.alertmanager_url}")
    client = AlertmanagerClient(args.alertmanager_url, debug_mode=args.debug)
    silences = client.fetch_silences()
    print(f"Found {len(silences)} silence(s)")

    batches = build_report(silences, title=REPORT_TITLE, block_limit=SLACK_BLOCK_LIMIT)
    debug(f"Relatório montado em {len(batches)} mensagem(ns)", args.debug)

    if args.dry_run:
        for batch in batches:
            print(json.dumps(build_slack_payload(args.slack_channel, batch), indent=2, ensure_ascii=False))
        return 0

    slack = SlackClient(args.slack_bot_token, args.slack_channel, debug_mode=args.debug)
    publish_batches(slack, batches, delay_seconds=SLACK_PUBLISH_DELAY_SECONDS)
    print("Report sent to Slack successfully")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_args(parser, args)

    try:
        return run(args)
    except (FetchError, PublishError) as exc:
        error(str(exc))
        return 1
