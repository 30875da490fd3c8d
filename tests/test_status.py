from termwidgets.status import Status, Symbols
from termwidgets.text import Span


def test_status_symbols():
    assert Status.PENDING.symbol() == Span("?").cyan()
    assert Status.ABORTED.symbol() == Span("✘").red()
    assert Status.DONE.symbol() == Span("✔").green()


def test_status_is_pending():
    assert Status.PENDING.is_pending()
    assert not Status.ABORTED.is_pending()
    assert not Status.DONE.is_pending()


def test_status_is_aborted():
    assert not Status.PENDING.is_aborted()
    assert Status.ABORTED.is_aborted()
    assert not Status.DONE.is_aborted()


def test_status_is_done():
    assert not Status.PENDING.is_done()
    assert not Status.ABORTED.is_done()
    assert Status.DONE.is_done()


def test_status_is_finished():
    assert not Status.PENDING.is_finished()
    assert Status.ABORTED.is_finished()
    assert Status.DONE.is_finished()


def test_symbols_default():
    assert Symbols() == Symbols(
        pending=Span("?").cyan(),
        aborted=Span("✘").red(),
        done=Span("✔").green(),
    )


def test_symbols_custom():
    symbols = Symbols(pending=Span("P").cyan(), aborted=Span("A").red(), done=Span("D").green())
    assert symbols.pending == Span("P").cyan()
    assert symbols.aborted == Span("A").red()
    assert symbols.done == Span("D").green()