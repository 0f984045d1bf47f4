import io
import re
import threading

from philosim.clock import Clock
from philosim.status import PhiloState, StatusPrinter, format_status

LINE = re.compile(r"^\d+ ms philosopher nb \d+ .+$")


def test_format_eating_line():
    assert format_status(PhiloState.EATING, 3, 200) == (
        "200 ms philosopher nb 3 is eating\n"
    )


def test_format_suffixes_for_each_state():
    expected = {
        PhiloState.SLEEPING: " is sleeping\n",
        PhiloState.THINKING: " is thinking\n",
        PhiloState.DIED: " is dead\n",
        PhiloState.TOOK_LEFT_FORK: " took left fork\n",
        PhiloState.TOOK_RIGHT_FORK: " took right fork\n",
    }
    for state, suffix in expected.items():
        text = format_status(state, 7, 15)
        assert text.startswith("15 ms philosopher nb 7")
        assert text.endswith(suffix)
        assert text.count("\n") == 1


def test_took_forks_expands_to_left_then_right():
    text = format_status(PhiloState.TOOK_FORKS, 2, 40)
    lines = text.splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("took left fork")
    assert lines[1].endswith("took right fork")
    assert all(line.startswith("40 ms philosopher nb 2 ") for line in lines)


def test_printer_writes_one_line():
    stream = io.StringIO()
    printer = StatusPrinter(Clock(), stream)
    assert printer.print(PhiloState.SLEEPING, 5) is True
    output = stream.getvalue()
    assert output.endswith(" ms philosopher nb 5 is sleeping\n")
    assert LINE.match(output.rstrip("\n"))


def test_stop_silences_printer():
    stream = io.StringIO()
    printer = StatusPrinter(Clock(), stream)
    assert printer.is_stopped() is False
    printer.stop()
    assert printer.is_stopped() is True
    assert printer.print(PhiloState.THINKING, 1) is False
    assert stream.getvalue() == ""


def test_death_stops_printer():
    stream = io.StringIO()
    printer = StatusPrinter(Clock(), stream)
    assert printer.print(PhiloState.DIED, 4) is True
    assert printer.is_stopped() is True
    assert printer.print(PhiloState.EATING, 1) is False
    assert stream.getvalue().endswith("philosopher nb 4 is dead\n")
    assert stream.getvalue().count("\n") == 1


def test_announce_writes_message_and_stops():
    stream = io.StringIO()
    printer = StatusPrinter(Clock(), stream)
    assert printer.announce("Game Ended\n") is True
    assert printer.is_stopped() is True
    assert printer.announce("Game Ended\n") is False
    assert stream.getvalue() == "Game Ended\n"


def test_concurrent_prints_stay_whole():
    stream = io.StringIO()
    printer = StatusPrinter(Clock(), stream)

    def worker(philo_id):
        for _ in range(50):
            printer.print(PhiloState.TOOK_FORKS, philo_id)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(1, 6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    lines = stream.getvalue().splitlines()
    assert len(lines) == 5 * 50 * 2
    assert all(LINE.match(line) for line in lines)
    for left, right in zip(lines[0::2], lines[1::2]):
        assert left.endswith("took left fork")
        assert right.endswith("took right fork")
        assert left.split(" took")[0].split("nb ")[1] == right.split(" took")[0].split("nb ")[1]


def test_timestamps_do_not_decrease():
    stream = io.StringIO()
    printer = StatusPrinter(Clock(), stream)
    for philo_id in range(1, 30):
        printer.print(PhiloState.THINKING, philo_id)
    stamps = [int(line.split(" ")[0]) for line in stream.getvalue().splitlines()]
    assert stamps == sorted(stamps)