import io
import json
from unittest.mock import AsyncMock, patch

import pytest

from ghuser_kit.cli import build_parser, main
from ghuser_kit.github.lookup import LookupOutcome


class TestCreatedAt:
    def test_success_prints_date(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "ghuser_kit.cli.lookup_creation_date",
            AsyncMock(return_value=LookupOutcome(text="2011-01-25", status="success")),
        ) as mock_lookup:
            code = main(["created-at", "octocat", "--token", "abc"])

        assert code == 0
        assert capsys.readouterr().out.strip() == "2011-01-25"
        mock_lookup.assert_awaited_once()
        assert mock_lookup.call_args.args == ("octocat",)
        assert mock_lookup.call_args.kwargs["token"] == "abc"

    def test_error_prints_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "ghuser_kit.cli.lookup_creation_date",
            AsyncMock(return_value=LookupOutcome(text="User not found", status="error")),
        ):
            code = main(["created-at", "nobody"])

        assert code == 1
        assert capsys.readouterr().err.strip() == "User not found"

    def test_token_taken_from_page_url(self) -> None:
        with patch(
            "ghuser_kit.cli.lookup_creation_date",
            AsyncMock(return_value=LookupOutcome(text="2011-01-25", status="success")),
        ) as mock_lookup:
            main(["created-at", "octocat", "--page-url", "https://x.test/?token=t1"])

        assert mock_lookup.call_args.kwargs["token"] == "t1"

    def test_token_and_page_url_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["created-at", "octocat", "--token", "a", "--page-url", "b"]
            )


class TestParseCsv:
    def test_reads_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "data.csv"
        path.write_bytes(b"name;age\r\nalice;30\r\n")

        code = main(["parse-csv", str(path)])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "headers": ["name", "age"],
            "rows": [["alice", "30"]],
        }

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("1,2\n3,4\n"))

        code = main(["parse-csv"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "headers": None,
            "rows": [["1", "2"], ["3", "4"]],
        }


class TestDecoders:
    def test_decode_data_url(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["decode-data-url", "data:text/plain;base64,SGVsbG8="])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "mime": "text/plain",
            "is_base64": True,
            "text": "Hello",
        }

    def test_decode_data_url_rejects_other_urls(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["decode-data-url", "https://example.com"])

        assert code == 1
        assert "Not a data URL" in capsys.readouterr().err

    def test_decode_base64(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["decode-base64", "SGVsbG8="])

        assert code == 0
        assert capsys.readouterr().out == "Hello\n"


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        main([])
