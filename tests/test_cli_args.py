from __future__ import annotations

import io
import json
import string
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from pwmeter.cli.check_cli import main as check_main
from pwmeter.cli.check_cli import parse_args as parse_check_args
from pwmeter.cli.pwgen_cli import main as pwgen_main
from pwmeter.cli.pwgen_cli import parse_args as parse_pwgen_args
from pwmeter.cli.pwmeter_cli import main as pwmeter_main
from pwmeter.core.password_tables import PASSWORD_TIPS


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


class CliArgTests(unittest.TestCase):
    def test_pwgen_defaults(self) -> None:
        args = parse_pwgen_args([])
        self.assertEqual(args.length, 16)
        self.assertEqual(args.count, 1)
        self.assertFalse(args.no_symbols)
        self.assertFalse(args.show_meta)

    def test_pwgen_class_flags(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = pwgen_main(["-n", "3", "-l", "10", "--no-lowercase", "--no-uppercase", "--no-symbols"])
        self.assertEqual(rc, 0)
        lines = _lines(stdout.getvalue())
        self.assertEqual(len(lines), 3)
        for line in lines:
            self.assertEqual(len(line), 10)
            self.assertTrue(set(line).issubset(set(string.digits)))

    def test_pwgen_rejects_empty_class_selection(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = pwgen_main(["--no-lowercase", "--no-uppercase", "--no-digits", "--no-symbols"])
        self.assertEqual(rc, 2)
        self.assertIn("no_character_classes:", stderr.getvalue())

    def test_pwgen_json_with_meta(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = pwgen_main(["-n", "2", "--json", "--show-meta"])
        self.assertEqual(rc, 0)
        payload = json.loads(stdout.getvalue())
        self.assertEqual(len(payload["outputs"]), 2)
        self.assertEqual(len(payload["analyses"]), 2)
        self.assertEqual(payload["analyses"][0]["length"], 16)

    def test_check_args_accept_positional_password(self) -> None:
        args = parse_check_args(["hunter2", "--json"])
        self.assertEqual(args.password, "hunter2")
        self.assertTrue(args.json)
        self.assertFalse(args.stdin)

    def test_check_json_report(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = check_main(["password123", "--json"])
        self.assertEqual(rc, 0)
        payload = json.loads(stdout.getvalue())
        self.assertEqual(payload["score"], 13)
        self.assertFalse(payload["requirements"]["is_not_common"])
        self.assertTrue(payload["patterns"]["has_sequence"])

    def test_check_text_report_reads_stdin(self) -> None:
        stdout = io.StringIO()
        with patch("sys.stdin", io.StringIO("Zq7!\n")), redirect_stdout(stdout):
            rc = check_main(["--stdin"])
        self.assertEqual(rc, 0)
        text = stdout.getvalue()
        self.assertIn("Strength:   Weak (38%)", text)
        self.assertIn("Length:     4", text)
        self.assertIn("Requirements (5/6 met):", text)
        self.assertIn("✗ At least 8 characters", text)
        self.assertIn("✓ Special character", text)
        self.assertNotIn("Penalties:", text)

    def test_check_text_report_lists_penalties(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = check_main(["password123"])
        self.assertEqual(rc, 0)
        self.assertIn("Penalties:", stdout.getvalue())
        self.assertIn("matches a common password", stdout.getvalue())

    def test_check_rejects_argument_and_stdin_together(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = check_main(["abc", "--stdin"])
        self.assertEqual(rc, 2)
        self.assertIn("input_error:", stderr.getvalue())

    def test_check_reports_closed_prompt_input(self) -> None:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with (
            patch("pwmeter.cli.check_cli.getpass.getpass", side_effect=EOFError) as prompt,
            redirect_stdout(stdout),
            redirect_stderr(stderr),
        ):
            rc = check_main([])
        prompt.assert_called_once_with("Password: ")
        self.assertEqual(rc, 2)
        self.assertEqual(stderr.getvalue().strip(), "input_error: no password entered")
        self.assertEqual(stdout.getvalue(), "")

    def test_pwmeter_cli_defaults_to_generate_mode(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = pwmeter_main(["-n", "1", "-l", "8"])
        self.assertEqual(rc, 0)
        lines = _lines(stdout.getvalue())
        self.assertEqual(len(lines), 1)
        self.assertEqual(len(lines[0]), 8)

    def test_pwmeter_cli_check_subcommand_dispatch(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = pwmeter_main(["check", "Xk9#mQ2!vL", "--json"])
        self.assertEqual(rc, 0)
        self.assertTrue(json.loads(stdout.getvalue())["requirements"]["is_not_common"])

    def test_pwmeter_cli_tips(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = pwmeter_main(["tips"])
        self.assertEqual(rc, 0)
        self.assertEqual(len(_lines(stdout.getvalue())), len(PASSWORD_TIPS))

    def test_pwmeter_cli_unknown_command(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = pwmeter_main(["frobnicate"])
        self.assertEqual(rc, 2)
        self.assertIn("unknown command", stderr.getvalue())

    def test_pwmeter_cli_help(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = pwmeter_main(["--help"])
        self.assertEqual(rc, 0)
        self.assertIn("PwMeter unified CLI", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
