import unittest

from blockfall.game.scheduler import IntervalTimer


class IntervalTimerTests(unittest.TestCase):
    def setUp(self):
        self.calls = 0

    def _callback(self):
        self.calls += 1

    def test_fires_once_per_full_interval(self):
        timer = IntervalTimer(700, self._callback)
        timer.start()
        self.assertEqual(timer.advance(699), 0)
        self.assertEqual(timer.advance(1), 1)
        self.assertEqual(timer.advance(1400), 2)
        self.assertEqual(self.calls, 3)

    def test_stopped_timer_does_not_fire(self):
        timer = IntervalTimer(100, self._callback)
        self.assertEqual(timer.advance(1000), 0)
        timer.start()
        timer.stop()
        self.assertEqual(timer.advance(1000), 0)
        self.assertEqual(self.calls, 0)

    def test_callback_can_stop_the_timer(self):
        timer = IntervalTimer(100, lambda: timer.stop())
        timer.start()
        self.assertEqual(timer.advance(1000), 1)
        self.assertFalse(timer.running)

    def test_start_resets_phase(self):
        timer = IntervalTimer(100, self._callback)
        timer.start()
        timer.advance(90)
        timer.start()
        timer.advance(90)
        self.assertEqual(self.calls, 0)

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            IntervalTimer(0, self._callback)


if __name__ == "__main__":
    unittest.main()
