import pytest

from size_encoder.cli import get_args


def test_defaults():
    args = get_args([])
    assert args.input_dir == "./input"
    assert args.output_dir == "./output"
    assert args.audio_reserve_kbps == 0
    assert args.log_level == "INFO"
    assert not args.debug_mode


def test_overrides():
    args = get_args(["--input-dir", "src", "--output-dir", "dst", "--audio-reserve-kbps", "128", "--debug"])
    assert (args.input_dir, args.output_dir, args.audio_reserve_kbps) == ("src", "dst", 128)
    assert args.debug_mode


def test_negative_audio_reserve_is_an_error():
    with pytest.raises(SystemExit):
        get_args(["--audio-reserve-kbps", "-1"])
