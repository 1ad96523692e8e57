import json

from typer.testing import CliRunner

from home_funds.cli import app

runner = CliRunner()


def _timeline(output):
    return json.loads(output[output.index("[") :])


def test_run_prints_summary():
    result = runner.invoke(app, ["--start-date", "2024-01-01"])
    assert result.exit_code == 0, result.output
    assert "Monthly mortgage payment: 69,679" in result.output
    assert "Months projected: 240" in result.output
    assert "In case of buying" in result.output
    assert "In case of renting" in result.output
    assert "Better outcome: renting" in result.output


def test_show_timeline_dumps_records():
    result = runner.invoke(
        app, ["--loan-term", "1", "--start-date", "2024-01-01", "--show-timeline"]
    )
    assert result.exit_code == 0, result.output
    payload = _timeline(result.output)
    assert len(payload) == 12
    assert payload[0]["month"] == 1
    assert payload[0]["year"] == 2024
    assert payload[-1]["year"] == 2025
    assert set(payload[0]) >= {"principal_payment", "invested_balance", "property_value"}


def test_yearly_timeline():
    result = runner.invoke(
        app,
        [
            "--loan-term",
            "2",
            "--start-date",
            "2024-01-01",
            "--show-timeline",
            "--yearly",
        ],
    )
    assert result.exit_code == 0, result.output
    payload = _timeline(result.output)
    assert [row["year"] for row in payload] == [2024, 2025, 2026]


def test_start_date_from_environment():
    result = runner.invoke(
        app,
        ["--loan-term", "1", "--show-timeline"],
        env={"HOME_FUNDS_START_DATE": "2030-06-01"},
    )
    assert result.exit_code == 0, result.output
    payload = _timeline(result.output)
    assert payload[0]["year"] == 2030
    assert payload[-1]["year"] == 2031


def test_invalid_parameter_is_usage_error():
    result = runner.invoke(app, ["--loan-term", "0"])
    assert result.exit_code == 2


def test_negative_rate_is_usage_error():
    result = runner.invoke(app, ["--interest-rate=-1"])
    assert result.exit_code == 2


def test_malformed_start_date_is_usage_error():
    result = runner.invoke(app, ["--start-date", "01/02/2024"])
    assert result.exit_code == 2
