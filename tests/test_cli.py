"""Tests for the Typer CLI."""

from typer.testing import CliRunner

from quantity.cli import app

runner = CliRunner()


def test_amount_uses_default_width():
    result = runner.invoke(app, ["amount", "5001"])

    assert result.exit_code == 0
    assert result.output == "5.00k\n"


def test_amount_width_option():
    result = runner.invoke(app, ["amount", "42", "--width", "6"])

    assert result.exit_code == 0
    assert result.output == "   42 \n"


def test_amount_width_from_environment(monkeypatch):
    monkeypatch.setenv("QUANTITY_AMOUNT_WIDTH", "8")

    result = runner.invoke(app, ["amount", "5001"])

    assert result.output == "5.00100k\n"


def test_bytes():
    result = runner.invoke(app, ["bytes", "512"])

    assert result.exit_code == 0
    assert result.output == "  512B\n"


def test_rate():
    result = runner.invoke(app, ["rate", "1000000", "2"])

    assert result.exit_code == 0
    assert result.output == " 500kB/s\n"


def test_rate_over_zero_duration_fails():
    result = runner.invoke(app, ["rate", "100", "0"])

    assert result.exit_code == 1
    assert "zero duration" in result.output


def test_duration():
    result = runner.invoke(app, ["duration", "65"])

    assert result.exit_code == 0
    assert result.output == "1m05s\n"


def test_duration_rejects_nan():
    result = runner.invoke(app, ["duration", "nan"])

    assert result.exit_code == 1


def test_table():
    result = runner.invoke(app, ["table"])

    assert result.exit_code == 0
    assert "'5.00k'" in result.output


def test_check():
    result = runner.invoke(
        app, ["check", "--limit", "20000", "--workers", "2", "--width", "4"]
    )

    assert result.exit_code == 0
    assert "OK: 20000 amounts" in result.output


def test_rate_accepts_negative_seconds():
    result = runner.invoke(app, ["rate", "3000", "-1.5", "--width", "8"])

    assert result.exit_code == 0
    assert result.output == " 2000B/s\n"


def test_duration_accepts_negative_seconds():
    result = runner.invoke(app, ["duration", "-5"])

    assert result.exit_code == 0
    assert result.output == "-5000000000.0ns\n"
