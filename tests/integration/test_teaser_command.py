"""Integration tests for the `teaser` CLI command."""

from pathlib import Path

from typer.testing import CliRunner

from teiplain.cli import app


def test_teaser_prints_word_boundary_safe_prefix(
    runner: CliRunner, letter_xml_path: Path
) -> None:
    """Teaser should cut the joined paragraphs at the last word boundary."""

    result = runner.invoke(
        app,
        ["teaser", str(letter_xml_path), "--element", "p", "--max-length", "20"],
    )

    assert result.exit_code == 0, result.output
    assert result.output == "Lieber Karl (?), ich …\n"


def test_teaser_returns_short_text_unchanged(
    runner: CliRunner, letter_xml_path: Path
) -> None:
    """Text within the budget should be printed without an ellipsis."""

    result = runner.invoke(
        app,
        [
            "teaser",
            str(letter_xml_path),
            "--element",
            "q",
            "--locale",
            "de",
            "--max-length",
            "100",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output == "„komm bald“\n"


def test_teaser_reads_length_from_config(
    runner: CliRunner, letter_xml_path: Path, tmp_path: Path
) -> None:
    """`max_length` from the config file should be honored."""

    config_path = tmp_path / "teiplain.yaml"
    config_path.write_text(
        f"input_path: {letter_xml_path.as_posix()}\nelement: p\nmax_length: 6\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["teaser", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert result.output == "Lieber …\n"


def test_teaser_requires_length(runner: CliRunner, letter_xml_path: Path) -> None:
    """Without any length budget the command should fail with a hint."""

    result = runner.invoke(app, ["teaser", str(letter_xml_path)])

    assert result.exit_code == 1
    assert "teaser failed at stage `config`: Teaser length is required." in result.output
    assert "Hint: Pass `--max-length <n>`" in result.output


def test_teaser_rejects_negative_length(runner: CliRunner, letter_xml_path: Path) -> None:
    """Negative lengths should be rejected by option validation."""

    result = runner.invoke(app, ["teaser", str(letter_xml_path), "--max-length", "-1"])

    assert result.exit_code == 2
