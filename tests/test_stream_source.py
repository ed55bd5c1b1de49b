import io

from inputmode import InputMode, PreferredInput, UserInputType
from sources import StreamInputSource


def test_feed_line_maps_known_names():
    seen = []
    source = StreamInputSource(stream=io.StringIO())
    source.connect(seen.append)

    source.feed_line("gamepad1\n")
    source.feed_line("  MouseButton2  ")
    source.feed_line("Stylus")

    assert seen == [UserInputType.GAMEPAD_1, UserInputType.MOUSE_BUTTON_2, "Stylus"]
    assert source.last_input_type() == "Stylus"


def test_blank_lines_and_comments_are_skipped():
    seen = []
    source = StreamInputSource(stream=io.StringIO())
    source.connect(seen.append)

    source.feed_line("\n")
    source.feed_line("# just a comment")
    source.feed_line("Touch  # finger on screen")

    assert seen == [UserInputType.TOUCH]


def test_initial_kind():
    assert StreamInputSource(io.StringIO()).last_input_type() is None
    source = StreamInputSource(io.StringIO(), initial="keyboard")
    assert source.last_input_type() is UserInputType.KEYBOARD


def test_reads_stream_in_background(manual_dispatcher):
    stream = io.StringIO("Keyboard\nGamepad2\nGyro\nGamepad3\nTouch\n")
    registry = PreferredInput(dispatcher=manual_dispatcher)
    modes = []
    registry.subscribe(modes.append)

    source = StreamInputSource(stream=stream)
    source.connect(registry.resolve_and_set)
    source.start()
    assert source.join(timeout=2.0)
    assert source.is_finished()

    manual_dispatcher.run_all()
    assert modes == [InputMode.MOUSE_KEYBOARD, InputMode.GAMEPAD, InputMode.TOUCH]
    assert registry.current is InputMode.TOUCH


def test_start_logs_source_name(caplog):
    source = StreamInputSource(stream=io.StringIO(""))
    with caplog.at_level("INFO", logger="preferred_input.sources.stream"):
        source.start()
        assert source.join(timeout=2.0)

    assert any("Source stream reading" in r.message for r in caplog.records)
