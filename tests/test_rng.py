import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.rng import RandomSource, SeededRandom, SequenceRandom, make_random_source

class TestRandomSource(unittest.TestCase):
    def test_seeded_range(self):
        rng = SeededRandom(7)
        for n in (1, 2, 3, 10, 1000):
            for _ in range(50):
                value = rng.next_in_range(n)
                self.assertTrue(0 <= value < n)

    def test_seeded_is_replayable(self):
        a = SeededRandom(12345)
        b = SeededRandom(12345)
        self.assertEqual([a.next_in_range(97) for _ in range(100)],
                         [b.next_in_range(97) for _ in range(100)])

    def test_sequence_script(self):
        rng = SequenceRandom([0, 5, 7])
        self.assertEqual(rng.next_in_range(10), 0)
        self.assertEqual(rng.next_in_range(4), 1) # 5 % 4
        self.assertEqual(rng.next_in_range(7), 0) # 7 % 7
        # Wraps around
        self.assertEqual(rng.next_in_range(10), 0)
        self.assertEqual(rng.calls, 4)

    def test_invalid_range(self):
        for rng in (SeededRandom(1), SequenceRandom([1])):
            with self.assertRaises(ValueError):
                rng.next_in_range(0)
        with self.assertRaises(ValueError):
            SequenceRandom([])

    def test_make_random_source(self):
        scripted = SequenceRandom([3])
        self.assertIs(make_random_source(scripted), scripted)
        seeded = make_random_source(42)
        self.assertIsInstance(seeded, RandomSource)
        self.assertEqual(seeded.seed, 42)

if __name__ == '__main__':
    unittest.main()
