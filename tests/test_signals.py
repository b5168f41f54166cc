"""Tests for SignalSubscription."""

import signal

from hostservice.daemon.signals import TERMINATION_SIGNALS, SignalSubscription


class TestSignalSubscription:
    """Tests for scoped signal registration."""

    def test_default_signals(self):
        assert set(TERMINATION_SIGNALS) == {signal.SIGTERM, signal.SIGINT}

    def test_wait_returns_received_signal(self):
        with SignalSubscription([signal.SIGUSR1]) as sub:
            signal.raise_signal(signal.SIGUSR1)
            assert sub.wait() == signal.SIGUSR1

    def test_buffers_up_to_capacity(self):
        with SignalSubscription([signal.SIGUSR1, signal.SIGUSR2], capacity=3) as sub:
            for _ in range(3):
                signal.raise_signal(signal.SIGUSR1)
            signal.raise_signal(signal.SIGUSR2)

            assert sub.pending() == 3
            assert [sub.wait() for _ in range(3)] == [signal.SIGUSR1] * 3
            assert sub.pending() == 0

    def test_previous_handlers_restored(self):
        calls = []

        def outer(signum, frame):
            calls.append(signum)

        original = signal.signal(signal.SIGUSR1, outer)
        try:
            with SignalSubscription([signal.SIGUSR1]):
                assert signal.getsignal(signal.SIGUSR1) is not outer
            assert signal.getsignal(signal.SIGUSR1) is outer

            signal.raise_signal(signal.SIGUSR1)
            assert calls == [signal.SIGUSR1]
        finally:
            signal.signal(signal.SIGUSR1, original)

    def test_nested_subscriptions(self):
        before = signal.getsignal(signal.SIGUSR1)

        with SignalSubscription([signal.SIGUSR1]) as outer:
            with SignalSubscription([signal.SIGUSR1]) as inner:
                signal.raise_signal(signal.SIGUSR1)
                assert inner.pending() == 1
                assert outer.pending() == 0
            signal.raise_signal(signal.SIGUSR1)
            assert outer.pending() == 1

        assert signal.getsignal(signal.SIGUSR1) is before
