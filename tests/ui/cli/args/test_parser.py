"""Tests for command line argument parser."""

from argparse import Namespace
from pathlib import Path

import pytest

from tagprobe.shared import ExtractionRequest
from tagprobe.ui.cli.args import ArgumentParser, InitConfigArgs, InspectArgs


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    inspect_args: Namespace = parser.parse_args(["inspect", "a.mp3", "b.flac"])
    assert inspect_args.command == "inspect"
    assert inspect_args.paths == ["a.mp3", "b.flac"]

    all_flags = parser.parse_args(
        ["inspect", "a.mp3", "--cover", "--lyrics", "--properties", "--extra", "--json", "--verbose"]
    )
    assert all_flags.cover and all_flags.lyrics and all_flags.properties and all_flags.extra
    assert all_flags.as_json and all_flags.verbose

    init_args = parser.parse_args(["init-config", "--force"])
    assert init_args.command == "init-config"
    assert init_args.force


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["inspect", "a.mp3", "--verbose", "--quiet"])


def test_inspect_requires_a_path() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args(["inspect"])


def test_no_field_flags_use_configured_defaults() -> None:
    args = ArgumentParser.process_args(["inspect", "a.mp3"])

    assert isinstance(args, InspectArgs)
    assert args.paths == [Path("a.mp3")]
    assert args.request == ExtractionRequest(need_audio_properties=True, need_extra_tags=True)
    assert not args.as_json and args.save_cover is None


def test_configured_defaults_are_read_from_file(isolated_config: Path) -> None:
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(
        "need_cover = true\nneed_audio_properties = false\nneed_extra_tags = false\n",
        encoding="utf-8",
    )

    args = ArgumentParser.process_args(["inspect", "a.mp3"])

    assert isinstance(args, InspectArgs)
    assert args.request == ExtractionRequest(need_cover=True)


def test_explicit_flags_replace_defaults() -> None:
    args = ArgumentParser.process_args(["inspect", "a.mp3", "--lyrics"])

    assert isinstance(args, InspectArgs)
    assert args.request == ExtractionRequest(need_lyrics=True)


def test_all_flag_requests_everything() -> None:
    args = ArgumentParser.process_args(["inspect", "a.mp3", "--all", "--quiet"])

    assert isinstance(args, InspectArgs)
    assert args.request == ExtractionRequest.everything()
    assert args.quiet


def test_save_cover_implies_cover(tmp_path: Path) -> None:
    args = ArgumentParser.process_args(["inspect", "a.mp3", "--save-cover", str(tmp_path / "covers")])

    assert isinstance(args, InspectArgs)
    assert args.request == ExtractionRequest(need_cover=True)
    assert args.save_cover == tmp_path / "covers"


def test_init_config_args() -> None:
    args = ArgumentParser.process_args(["init-config"])

    assert args == InitConfigArgs(command="init-config", force=False)
