import io
import os
import signal
import unittest

from pomodoro import TimerSnapshot, TimerState
from runtime import (
    ControlConfigurationError,
    QueueControlChannel,
    StatusLineWriter,
    install_signal_handlers,
    resolve_signal,
    restore_signal_handlers,
)


class QueueControlChannelTests(unittest.TestCase):
    def test_wait_returns_none_on_timeout(self) -> None:
        channel = QueueControlChannel()
        self.assertIsNone(channel.wait(0.01))

    def test_wait_returns_events_in_order(self) -> None:
        channel = QueueControlChannel()
        channel.publish("toggle")
        channel.publish("reset")

        self.assertEqual("toggle", channel.wait(0.01))
        self.assertEqual("reset", channel.wait(0.01))
        self.assertIsNone(channel.wait(0.01))


class SignalResolutionTests(unittest.TestCase):
    def test_resolve_signal_accepts_short_and_lowercase_names(self) -> None:
        self.assertEqual(signal.SIGUSR1, resolve_signal("SIGUSR1"))
        self.assertEqual(signal.SIGUSR2, resolve_signal("usr2"))

    def test_resolve_signal_rejects_unknown_names(self) -> None:
        with self.assertRaises(ControlConfigurationError):
            resolve_signal("SIGNOPE")

    def test_quit_signals_cannot_be_rebound(self) -> None:
        with self.assertRaises(ControlConfigurationError):
            install_signal_handlers(
                QueueControlChannel(),
                toggle_signal="SIGTERM",
                reset_signal="SIGUSR2",
            )


@unittest.skipUnless(hasattr(signal, "SIGUSR1"), "requires POSIX signals")
class SignalHandlerTests(unittest.TestCase):
    def setUp(self) -> None:
        self._saved = {
            signum: signal.getsignal(signum)
            for signum in (signal.SIGUSR1, signal.SIGUSR2, signal.SIGINT, signal.SIGTERM)
        }

    def tearDown(self) -> None:
        for signum, handler in self._saved.items():
            signal.signal(signum, handler)

    def test_signals_are_delivered_as_control_events(self) -> None:
        channel = QueueControlChannel()
        installed = install_signal_handlers(channel)

        self.assertEqual("toggle", installed.events[signal.SIGUSR1])
        self.assertEqual("reset", installed.events[signal.SIGUSR2])
        self.assertEqual("quit", installed.events[signal.SIGTERM])

        os.kill(os.getpid(), signal.SIGUSR1)
        self.assertEqual("toggle", channel.wait(1.0))
        os.kill(os.getpid(), signal.SIGUSR2)
        self.assertEqual("reset", channel.wait(1.0))

    def test_restore_puts_back_previous_handlers(self) -> None:
        def previous_usr1(signum, frame) -> None:
            return None

        signal.signal(signal.SIGUSR1, previous_usr1)
        signal.signal(signal.SIGINT, signal.default_int_handler)
        installed = install_signal_handlers(QueueControlChannel())

        restore_signal_handlers(installed)

        self.assertIs(previous_usr1, signal.getsignal(signal.SIGUSR1))
        self.assertIs(signal.default_int_handler, signal.getsignal(signal.SIGINT))
        self.assertEqual(
            self._saved[signal.SIGTERM],
            signal.getsignal(signal.SIGTERM),
        )


class StatusLineWriterTests(unittest.TestCase):
    def test_write_emits_one_flushed_line(self) -> None:
        stream = io.StringIO()
        writer = StatusLineWriter(stream)
        snapshot = TimerSnapshot(
            state=TimerState.WORK,
            running=True,
            remaining_seconds=125.0,
            break_counter=0,
        )

        line = writer.write(snapshot)

        self.assertEqual("\ue003 02:05", line)
        self.assertEqual("\ue003 02:05\n", stream.getvalue())


if __name__ == "__main__":
    unittest.main()
