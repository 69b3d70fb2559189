import io

import pytest

from mclay.output import Printer
from mclay.settings import Settings


def make_printer(**values):
    settings = Settings()
    for name, value in values.items():
        settings.set(name, value)
    stream = io.StringIO()
    return Printer(settings=settings, stream=stream, clock=lambda: 0), stream


def test_print_formats_to_stream():
    printer, stream = make_printer()
    printer.print("component %d:\n", 3)
    assert stream.getvalue() == "component 3:\n"


def test_printnew_adds_comment_prefix():
    printer, stream = make_printer(prcomment=1)
    printer.printnew("hello\n")
    assert stream.getvalue() == "; hello\n"
    assert printer.flushnum == 2


def test_printnew_without_prcomment_is_plain():
    printer, stream = make_printer()
    printer.printnew("hello\n")
    assert stream.getvalue() == "hello\n"
    assert printer.flushnum == 0


def test_prlevel_suppresses_print_but_not_errors():
    printer, stream = make_printer(prlevel=1)
    printer.print("hidden")
    assert stream.getvalue() == ""
    assert printer.cmd_error is False
    printer.prerror("; bad %s\n", "thing")
    assert stream.getvalue() == "; bad thing\n"
    assert printer.cmd_error is True


def test_prinput_wraps_prompt():
    printer, stream = make_printer()
    printer.prinput("number of variables")
    assert stream.getvalue() == "! number of variables ? "


def test_prflush_wraps_long_lines():
    printer, stream = make_printer(linesize=10)
    printer.prflush("......")
    printer.prflush("......")
    assert stream.getvalue() == "......\n......"
    assert printer.flushnum == 6


def test_prflush_counts_without_wrapping():
    printer, stream = make_printer(linesize=79)
    for _ in range(5):
        printer.prflush(".")
    assert stream.getvalue() == "....."
    assert printer.flushnum == 5


def test_intflush_formats_number():
    printer, stream = make_printer()
    printer.intflush("%ld.", 12)
    assert stream.getvalue() == "12."
    assert printer.flushnum == len("12.")


def test_monitor_copies_output(tmp_path):
    path = tmp_path / "mon.txt"
    printer, stream = make_printer()
    printer.start_monitor(path)
    assert printer.monitoring
    printer.print("x = %d\n", 5)
    printer.monprint("only in file\n")
    printer.end_monitor()
    assert not printer.monitoring
    assert stream.getvalue() == "x = 5\n"
    assert path.read_text(encoding="utf-8") == "x = 5\nonly in file\n"


def test_monitor_twice_raises(tmp_path):
    printer, _ = make_printer()
    with printer:
        printer.start_monitor(tmp_path / "a.txt")
        with pytest.raises(RuntimeError):
            printer.start_monitor(tmp_path / "b.txt")
    assert not printer.monitoring


def test_monitor_bad_path_raises(tmp_path):
    printer, _ = make_printer()
    with pytest.raises(OSError):
        printer.start_monitor(tmp_path / "missing" / "file.txt")
    assert not printer.monitoring