import pytest

from size_encoder.domain.exceptions import (
    InvalidPresetException,
    InvalidSelectionException,
    InvalidSizeException,
)
from size_encoder.domain.models import CompressionResult
from size_encoder.pipeline.session import InteractiveSession, SessionState
from size_encoder.services import compression_service
from tests.helpers import console_text, scripted_reader


class RecordingCompressor:
    def __init__(self, success=True):
        self.requests = []
        self.success = success

    def __call__(self, request):
        self.requests.append(request)
        if self.success:
            return CompressionResult.succeeded(request.output_path, f"Video compressed successfully: {request.output_path}")
        return CompressionResult.failed("boom", "Error while compressing video: boom")


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input").mkdir()
    (tmp_path / "output").mkdir()
    return tmp_path


@pytest.fixture
def with_clip(workspace):
    (workspace / "input" / "clip.mp4").write_bytes(b"\x00" * 64)
    return workspace


def make_session(console, *answers, compressor=None):
    reader = scripted_reader(*answers)
    session = InteractiveSession(console=console, reader=reader, compressor=compressor or RecordingCompressor())
    return session, reader


def test_empty_input_folder_ends_without_prompting(workspace, console):
    session, reader = make_session(console)

    assert session.run() is SessionState.EMPTY_CATALOG
    assert reader.prompts == []
    assert 'No files in the "input" folder' in console_text(console)


def test_full_cycle_builds_request_and_restarts(with_clip, console):
    compressor = RecordingCompressor()
    session, _ = make_session(console, "1", "10", "fast", compressor=compressor)

    state, context = session.run_cycle()

    assert state is SessionState.SHOW_CATALOG
    [request] = compressor.requests
    assert request.input_path == "./input/clip.mp4"
    assert request.output_path == "./output/clip.mp4"
    assert request.desired_size_mb == 10.0
    assert request.preset == "fast"
    assert context.result.success
    output = console_text(console)
    assert "1 | clip.mp4" in output
    assert "fast - Good quality with fast encoding (recommended)" in output
    assert "Video compressed successfully: ./output/clip.mp4" in output


def test_failure_result_is_shown_and_loop_restarts(with_clip, console):
    compressor = RecordingCompressor(success=False)
    session, reader = make_session(console, "1", "10", "fast", compressor=compressor)

    assert session.run() is None
    assert session.cycles == 2
    assert "Error while compressing video: boom" in console_text(console)
    # The second cycle listed the files again and asked for an index.
    assert len(reader.prompts) == 4


def test_unknown_preset_restarts_and_discards_selection(with_clip, console):
    compressor = RecordingCompressor()
    session, reader = make_session(console, "1", "10", "turbo", compressor=compressor)

    state, context = session.run_cycle()

    assert state is SessionState.SHOW_CATALOG
    assert isinstance(context.rejection, InvalidPresetException)
    assert compressor.requests == []
    assert "No such preset: 'turbo'" in console_text(console)

    # The next cycle starts from scratch.
    with pytest.raises(EOFError):
        session.run_cycle()
    assert session.cycles == 2


@pytest.mark.parametrize("answer", ["7", "0", "-1", "one", ""])
def test_invalid_index_restarts(with_clip, console, answer):
    compressor = RecordingCompressor()
    session, reader = make_session(console, answer, compressor=compressor)

    state, context = session.run_cycle()

    assert state is SessionState.SHOW_CATALOG
    assert isinstance(context.rejection, InvalidSelectionException)
    assert context.selected is None
    assert len(reader.prompts) == 1
    assert compressor.requests == []


def test_file_removed_after_listing_is_rejected(with_clip, console):
    def reader(prompt):
        (with_clip / "input" / "clip.mp4").unlink()
        return "1"

    session = InteractiveSession(console=console, reader=reader, compressor=RecordingCompressor())

    state, context = session.run_cycle()

    assert state is SessionState.SHOW_CATALOG
    assert isinstance(context.rejection, InvalidSelectionException)


@pytest.mark.parametrize("answer", ["abc", "0", "-5", "nan", "inf"])
def test_invalid_size_restarts_before_presets(with_clip, console, answer):
    compressor = RecordingCompressor()
    session, reader = make_session(console, "1", answer, compressor=compressor)

    state, context = session.run_cycle()

    assert state is SessionState.SHOW_CATALOG
    assert isinstance(context.rejection, InvalidSizeException)
    assert "ultrafast" not in console_text(console)
    assert compressor.requests == []


def test_all_presets_are_listed_after_size(with_clip, console):
    session, _ = make_session(console, "1", "10")

    with pytest.raises(EOFError):
        session.run_cycle()

    output = console_text(console)
    for preset in ("ultrafast", "superfast", "veryfast", "faster", "fast", "medium", "slow", "slower", "veryslow", "placebo"):
        assert f" {preset} - " in output


def test_end_to_end_with_default_compressor(with_clip, console, monkeypatch):
    jobs = []
    monkeypatch.setattr(compression_service, "probe_duration", lambda path: 100.0)
    monkeypatch.setattr(compression_service, "run_encode_job", lambda stream: jobs.append(stream.get_args()))
    session = InteractiveSession(console=console, reader=scripted_reader("1", "10", "fast"))

    state, context = session.run_cycle()

    assert state is SessionState.SHOW_CATALOG
    [args] = jobs
    assert args[args.index("-b:v") + 1] == "819k"
    assert args[args.index("-preset") + 1] == "fast"
    assert context.result.success
    assert context.result.bitrate_kbps == 819
    assert "./output/clip.mp4" in context.result.message


def test_unreadable_input_folder_propagates(tmp_path, console):
    session = InteractiveSession(input_dir=str(tmp_path / "missing"), console=console, reader=scripted_reader())

    with pytest.raises(OSError):
        session.run()
