"""Tests for the CLI module."""

import json
from unittest.mock import patch

import pytest

from tagshift import __version__
from tagshift.cli import main
from tagshift.formats import FlacTag, OpusTag
from tagshift.tag import AnyTag


def run_cli(*argv):
    """Run main() with ``argv`` and return the exit code."""
    with pytest.raises(SystemExit) as exc_info:
        with patch("sys.argv", ["tagshift", *argv]):
            main()
    return exc_info.value.code


@pytest.fixture
def tagged_opus(opus_file, png_cover):
    tag = OpusTag.from_anytag(
        AnyTag(title="Song", artists=["A", "B"], year=1999, track_number=3, cover=png_cover)
    )
    tag.write_to_path(opus_file)
    return opus_file


def test_version_output(capsys):
    """Test that --version flag displays version correctly."""
    assert run_cli("--version") == 0
    assert __version__ in capsys.readouterr().out


def test_help_output(capsys):
    """Test that --help flag displays help information."""
    assert run_cli("--help") == 0
    captured = capsys.readouterr()
    assert "show" in captured.out
    assert "convert" in captured.out
    assert "keys" in captured.out


def test_no_command_shows_help(capsys):
    """Test that running without a command shows help and fails."""
    assert run_cli() == 1
    assert "tagshift" in capsys.readouterr().out


class TestShow:
    """Test the show command."""

    def test_show_json(self, tagged_opus, config_file, capsys):
        assert run_cli("show", str(tagged_opus), "--json", "-c", str(config_file)) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "success"
        assert data["tag_type"] == "opus"
        assert data["fields"]["title"] == "Song"
        assert data["fields"]["artists"] == ["A", "B"]
        assert data["fields"]["year"] == 1999
        assert data["fields"]["cover"]["mime_type"] == "image/png"
        assert "album" not in data["fields"]
        assert len(data["pictures"]) == 1

    def test_show_table(self, tagged_opus, config_file, capsys):
        with patch("sys.argv", ["tagshift", "show", str(tagged_opus), "-c", str(config_file)]):
            main()
        out = capsys.readouterr().out
        assert "Song" in out
        assert "1999" in out

    def test_show_extra_items(self, flac_file, config_file, capsys):
        tag = FlacTag()
        tag.set_title("Song")
        tag.inner.comments["GENRE"] = ["Rock"]
        tag.write_to_path(flac_file)

        assert run_cli("show", str(flac_file), "--json", "-c", str(config_file)) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["items"] == {"GENRE": "Rock"}

    def test_missing_file(self, tmp_path, config_file, capsys):
        code = run_cli("show", str(tmp_path / "missing.flac"), "--json", "-c", str(config_file))
        assert code == 2
        assert json.loads(capsys.readouterr().out)["error"] == "invalid_input"

    def test_unsupported_extension(self, tmp_path, config_file, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        assert run_cli("show", str(path), "--json", "-c", str(config_file)) == 2
        assert json.loads(capsys.readouterr().out)["error"] == "unsupported_format"

    def test_disabled_format(self, flac_file, config_file, capsys):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("[formats]\nflac = false\n")
        assert run_cli("show", str(flac_file), "--json", "-c", str(config_file)) == 2
        assert "disabled" in json.loads(capsys.readouterr().out)["message"]

    def test_corrupt_file(self, tmp_path, config_file, capsys):
        path = tmp_path / "broken.wav"
        path.write_bytes(b"garbage")
        assert run_cli("show", str(path), "--json", "-c", str(config_file)) == 1
        assert json.loads(capsys.readouterr().out)["error"] == "read_failed"


class TestConvert:
    """Test the convert command."""

    def test_convert_writes_destination(self, tagged_opus, flac_file, config_file, capsys):
        code = run_cli("convert", str(tagged_opus), str(flac_file), "--json", "-c", str(config_file))
        assert code == 0

        data = json.loads(capsys.readouterr().out)
        assert data["source_type"] == "opus"
        assert data["destination_type"] == "flac"
        assert data["dropped"] == []
        assert not data["dry_run"]

        converted = FlacTag.read_from_path(flac_file)
        assert converted.title() == "Song"
        assert converted.artists() == ["A", "B"]
        assert converted.year() == 1999
        assert converted.album_cover() is not None

    def test_dry_run_leaves_destination(self, tagged_opus, flac_file, config_file):
        before = flac_file.read_bytes()
        code = run_cli("convert", str(tagged_opus), str(flac_file), "-n", "--json", "-c", str(config_file))
        assert code == 0
        assert flac_file.read_bytes() == before

    def test_reports_dropped_fields(self, tagged_opus, wav_file, config_file, capsys):
        code = run_cli("convert", str(tagged_opus), str(wav_file), "--json", "-c", str(config_file))
        assert code == 0

        data = json.loads(capsys.readouterr().out)
        assert data["dropped"] == ["cover"]
        assert "title" in data["copied"]
        assert "cover" not in data["copied"]

    def test_missing_destination(self, tagged_opus, tmp_path, config_file, capsys):
        code = run_cli(
            "convert", str(tagged_opus), str(tmp_path / "missing.flac"), "--json", "-c", str(config_file)
        )
        assert code == 2
        assert json.loads(capsys.readouterr().out)["error"] == "invalid_input"


class TestKeys:
    """Test the keys command."""

    def test_keys_json(self, capsys):
        assert run_cli("keys", "--json") == 0
        mappings = json.loads(capsys.readouterr().out)["mappings"]
        assert mappings["id3v2"]["TITLE"] == "TIT2"
        assert mappings["riff_info"]["TITLE"] == "INAM"
        assert set(mappings) == {
            "ape", "id3v2", "mp4", "opus", "vorbis", "flac", "riff_info", "aiff_text"
        }

    def test_keys_single_type(self, capsys):
        assert run_cli("keys", "opus", "--json") == 0
        mappings = json.loads(capsys.readouterr().out)["mappings"]
        assert list(mappings) == ["opus"]
        assert mappings["opus"]["ALBUM_ARTIST"] == "ALBUMARTIST"

    def test_keys_table(self, capsys):
        with patch("sys.argv", ["tagshift", "keys", "aiff_text"]):
            main()
        assert "NAME" in capsys.readouterr().out

    def test_invalid_tag_type(self):
        assert run_cli("keys", "wma") == 2
