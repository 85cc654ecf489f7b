import unittest

from triviaquiz.engine.clock import ElapsedClock

from tests.helpers import FakeClock


class ElapsedClockTests(unittest.TestCase):
    def setUp(self) -> None:
        self.fake = FakeClock(start=50.0)
        self.clock = ElapsedClock(self.fake)

    def test_not_running_until_started(self) -> None:
        self.fake.advance(3)
        self.assertEqual(self.clock.tick(), 0)
        self.assertFalse(self.clock.running)

    def test_remainder_carries_between_ticks(self) -> None:
        self.clock.start()
        self.fake.advance(1.75)
        self.assertEqual(self.clock.tick(), 1)
        self.fake.advance(0.5)
        # 0.75 left over + 0.5
        self.assertEqual(self.clock.tick(), 2)

    def test_many_fast_ticks_equal_one_slow_tick(self) -> None:
        self.clock.start()
        for _ in range(64 * 3):
            self.fake.advance(1 / 64)
            self.clock.tick()
        self.assertEqual(self.clock.seconds, 3)

    def test_stop_catches_up_then_freezes(self) -> None:
        self.clock.start()
        self.fake.advance(2.9)
        self.assertEqual(self.clock.stop(), 2)
        self.fake.advance(10)
        self.assertEqual(self.clock.tick(), 2)
        self.assertFalse(self.clock.running)

    def test_restart_resets_to_zero(self) -> None:
        self.clock.start()
        self.fake.advance(4.5)
        self.clock.stop()
        self.clock.start()
        self.assertEqual(self.clock.seconds, 0)
        self.fake.advance(0.6)
        self.assertEqual(self.clock.tick(), 0)


if __name__ == "__main__":
    unittest.main()
