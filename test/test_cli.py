#!/usr/bin/env python3
import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import Mock, patch

from silence_reporter.alertmanager import FetchError
from silence_reporter.cli import main
from silence_reporter.services import PublishError

from helpers import make_silence

ARGV = ["-a", "http://am:9093", "-t", "xoxb-token", "-c", "C123"]


@patch('silence_reporter.services.time.sleep', Mock())
class TestMain(unittest.TestCase):
    @patch('silence_reporter.cli.SlackClient')
    @patch('silence_reporter.cli.AlertmanagerClient')
    def test_success(self, mock_am, mock_slack):
        mock_am.return_value.fetch_silences.return_value = [make_silence(i) for i in range(30)]
        with redirect_stdout(io.StringIO()) as out:
            code = main(ARGV)

        self.assertEqual(code, 0)
        mock_am.assert_called_once_with("http://am:9093", debug_mode=False)
        mock_slack.assert_called_once_with("xoxb-token", "C123", debug_mode=False)
        self.assertEqual(mock_slack.return_value.post_batch.call_count, 2)
        self.assertIn("Found 30 silence(s)", out.getvalue())
        self.assertIn("Report sent to Slack successfully", out.getvalue())
        self.assertNotIn("xoxb-token", out.getvalue())

    @patch('silence_reporter.cli.SlackClient')
    @patch('silence_reporter.cli.AlertmanagerClient')
    def test_fetch_error_exits_non_zero(self, mock_am, mock_slack):
        mock_am.return_value.fetch_silences.side_effect = FetchError("Alertmanager returned error status: 502")
        with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()) as err:
            code = main(ARGV)

        self.assertEqual(code, 1)
        self.assertIn("[ERROR] Alertmanager returned error status: 502", err.getvalue())
        mock_slack.return_value.post_batch.assert_not_called()

    @patch('silence_reporter.cli.SlackClient')
    @patch('silence_reporter.cli.AlertmanagerClient')
    def test_publish_error_stops_and_exits_non_zero(self, mock_am, mock_slack):
        mock_am.return_value.fetch_silences.return_value = [make_silence(i) for i in range(50)]
        mock_slack.return_value.post_batch.side_effect = [None, PublishError("Slack API returned error: ratelimited")]
        with redirect_stdout(io.StringIO()) as out, redirect_stderr(io.StringIO()) as err:
            code = main(ARGV)

        self.assertEqual(code, 1)
        self.assertEqual(mock_slack.return_value.post_batch.call_count, 2)
        self.assertIn("ratelimited", err.getvalue())
        self.assertNotIn("Report sent to Slack successfully", out.getvalue())

    @patch('silence_reporter.cli.SlackClient')
    @patch('silence_reporter.cli.AlertmanagerClient')
    def test_dry_run_prints_payloads(self, mock_am, mock_slack):
        mock_am.return_value.fetch_silences.return_value = []
        with redirect_stdout(io.StringIO()) as out:
            code = main(["-a", "http://am:9093", "--dry-run"])

        self.assertEqual(code, 0)
        mock_slack.assert_not_called()
        printed = out.getvalue()
        payload = json.loads(printed[printed.index("{"):])
        self.assertEqual(payload["blocks"][1]["text"]["text"], "Total: 0 | Active: 0 | Pending: 0 | Expired: 0")

    @patch('silence_reporter.cli.SLACK_CHANNEL_ID', None)
    @patch('silence_reporter.cli.SLACK_BOT_TOKEN', None)
    @patch('silence_reporter.cli.ALERTMANAGER_URL', None)
    def test_missing_required_arguments(self):
        with redirect_stderr(io.StringIO()) as err, self.assertRaises(SystemExit) as ctx:
            main(["-a", "http://am:9093"])
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("SLACK_BOT_TOKEN", err.getvalue())

    @patch('silence_reporter.cli.SlackClient')
    @patch('silence_reporter.cli.AlertmanagerClient')
    @patch('silence_reporter.cli.SLACK_CHANNEL_ID', "C999")
    @patch('silence_reporter.cli.SLACK_BOT_TOKEN', "xoxb-env")
    @patch('silence_reporter.cli.ALERTMANAGER_URL', "http://env-am")
    def test_values_from_environment(self, mock_am, mock_slack):
        mock_am.return_value.fetch_silences.return_value = []
        with redirect_stdout(io.StringIO()):
            code = main([])

        self.assertEqual(code, 0)
        mock_am.assert_called_once_with("http://env-am", debug_mode=False)
        mock_slack.assert_called_once_with("xoxb-env", "C999", debug_mode=False)


if __name__ == '__main__':
    unittest.main()
