from click.testing import CliRunner

from ngram_langid.cli import cli
from ngram_langid.config import settings


def test_detect(profiles_dir):
    result = CliRunner().invoke(
        cli, ["detect", "The quick brown fox jumps over the lazy dog", "--profiles", str(profiles_dir), "--seed", "42"]
    )
    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "en"


def test_detect_all_from_stdin(profiles_dir):
    result = CliRunner().invoke(
        cli,
        ["detect", "-", "--profiles", str(profiles_dir), "--seed", "1", "--all"],
        input="Le chien et le chat sont dans la maison avec les enfants",
    )
    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if "\t" in line]
    assert lines[0].split("\t")[0] == "fr"


def test_detect_unknown(profiles_dir):
    result = CliRunner().invoke(cli, ["detect", "", "--profiles", str(profiles_dir)])
    assert result.exit_code == 1
    assert "unknown" in result.output


def test_missing_profiles_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "profiles_dir", "")
    runner = CliRunner()
    assert runner.invoke(cli, ["detect", "hello"]).exit_code == 2
    assert runner.invoke(cli, ["detect", "hello", "--profiles", str(tmp_path / "nope")]).exit_code == 2


def test_languages(profiles_dir):
    result = CliRunner().invoke(cli, ["languages", "--profiles", str(profiles_dir)])
    assert result.exit_code == 0
    assert "en" in result.output
    assert "fr" in result.output
    assert "Total: 2 languages" in result.output
