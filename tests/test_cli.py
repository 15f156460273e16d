"""Tests for the command-line interface."""

import pytest

from svcs.app.cli import (
    AddCommand,
    CheckoutCommand,
    CommitCommand,
    ConfigCommand,
    LogCommand,
    format_help,
    main,
    parse_command,
    split_args,
)


@pytest.fixture
def cli_root(project, monkeypatch):
    monkeypatch.setenv("SVCS_ROOT", str(project))
    return project


def _run(capsys, *args):
    code = main(list(args))
    out, err = capsys.readouterr()
    return code, out, err


class TestParseCommand:
    def test_variants(self):
        assert parse_command("config", "bob") == ConfigCommand("bob")
        assert parse_command("add", None) == AddCommand()
        assert parse_command("log", "ignored") == LogCommand()
        assert parse_command("commit", "msg") == CommitCommand("msg")
        assert parse_command("checkout", "abc") == CheckoutCommand("abc")

    def test_unknown(self):
        assert parse_command("push", None) is None
        assert parse_command(None, None) is None


class TestSplitArgs:
    def test_command_and_param(self):
        assert split_args(["commit", "msg"]) == ([], "commit", ["msg"])

    def test_param_starting_with_dash(self):
        assert split_args(["commit", "-hotfix"]) == ([], "commit", ["-hotfix"])

    def test_global_flags_anywhere(self):
        assert split_args(["--debug", "add", "a.txt", "--help"]) == (
            ["--debug", "--help"],
            "add",
            ["a.txt"],
        )

    def test_double_dash_is_literal(self):
        assert split_args(["commit", "--", "--help"]) == ([], "commit", ["--help"])


class TestHelp:
    def test_format(self):
        lines = format_help().splitlines()

        assert lines[0] == "These are SVCS commands:"
        assert lines[1] == "config     Get and set a username."
        assert lines[5] == "checkout   Restore a file."

    def test_no_command(self, capsys, cli_root):
        code, out, _ = _run(capsys)

        assert code == 0
        assert out.startswith("These are SVCS commands:")
        assert not (cli_root / "vcs").exists()

    def test_help_flag(self, capsys, cli_root):
        code, out, _ = _run(capsys, "commit", "--help")

        assert code == 0
        assert out.startswith("These are SVCS commands:")

    def test_unknown_command(self, capsys, cli_root):
        code, out, _ = _run(capsys, "push")

        assert code == 1
        assert out == "'push' is not a SVCS command.\n"


class TestCommands:
    def test_config(self, capsys, cli_root):
        assert _run(capsys, "config")[1] == "Please, tell me who you are.\n"
        assert _run(capsys, "config", "max")[1] == "The username is max.\n"
        assert _run(capsys, "config")[1] == "The username is max.\n"

    def test_add(self, capsys, cli_root):
        (cli_root / "a.txt").write_text("a")

        assert _run(capsys, "add")[1] == "Add a file to the index.\n"
        assert _run(capsys, "add", "a.txt")[1] == "The file 'a.txt' is tracked.\n"
        assert _run(capsys, "add")[1] == "Tracked files:\na.txt\n"

    def test_add_missing(self, capsys, cli_root):
        code, out, err = _run(capsys, "add", "nope.txt")

        assert code == 1
        assert out == ""
        assert err == "Error: Can't find 'nope.txt'.\n"

    def test_commit_and_log(self, capsys, cli_root):
        (cli_root / "a.txt").write_text("hello")
        _run(capsys, "config", "max")
        _run(capsys, "add", "a.txt")

        assert _run(capsys, "log")[1] == "No commits yet.\n"
        assert _run(capsys, "commit")[1] == "Message was not passed.\n"
        assert _run(capsys, "commit", "first")[1] == "Changes are committed.\n"
        assert _run(capsys, "commit", "again")[1] == "Nothing to commit.\n"

        out = _run(capsys, "log")[1]
        assert out.startswith("commit 2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824\n")
        assert "Author: max\nfirst\n" in out

    def test_checkout(self, capsys, cli_root):
        (cli_root / "a.txt").write_text("hello")
        _run(capsys, "add", "a.txt")
        _run(capsys, "commit", "first")
        commit_id = _run(capsys, "log")[1].split()[1]
        (cli_root / "a.txt").write_text("world")
        _run(capsys, "commit", "second")

        assert _run(capsys, "checkout")[1] == "Commit id was not passed.\n"
        assert _run(capsys, "checkout", "nope")[1] == "Commit does not exist.\n"
        assert _run(capsys, "checkout", commit_id)[1] == f"Switched to commit {commit_id}.\n"
        assert (cli_root / "a.txt").read_text() == "hello"

    def test_deleted_tracked_file(self, capsys, cli_root):
        (cli_root / "a.txt").write_text("hello")
        _run(capsys, "add", "a.txt")
        (cli_root / "a.txt").unlink()

        code, out, err = _run(capsys, "commit", "broken")

        assert code == 1
        assert err.startswith("Error: Can't find")
        assert _run(capsys, "log")[1] == "No commits yet.\n"

    def test_invalid_root(self, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv("SVCS_ROOT", str(tmp_path / "missing"))

        code, _, err = _run(capsys, "log")

        assert code == 1
        assert err.startswith("Error: Not a directory")

    def test_debug_flag(self, capsys, cli_root, monkeypatch):
        monkeypatch.setenv("SVCS_DEBUG", "")
        (cli_root / "a.txt").write_text("hello")

        _, _, err = _run(capsys, "--debug", "add", "a.txt")

        assert "[svcs] Tracking a.txt" in err

    def test_message_starting_with_dash(self, capsys, cli_root):
        (cli_root / "a.txt").write_text("hello")
        _run(capsys, "add", "a.txt")

        code, out, _ = _run(capsys, "commit", "-hotfix")

        assert code == 0
        assert out == "Changes are committed.\n"
        assert "\n-hotfix\n" in _run(capsys, "log")[1]

    def test_tracking_control_file_fails(self, capsys, cli_root):
        _run(capsys, "log")

        code, out, err = _run(capsys, "add", "vcs/log.txt")

        assert code == 1
        assert out == ""
        assert err.startswith("Error: Can't track 'vcs/log.txt'")
