"""Tests for seeded randomness."""

import unittest


class TestSeeds(unittest.TestCase):
    """Coordinate seeds are stable and non-negative."""

    def test_origin_seed_is_frozen(self):
        """The origin seed must never change or every world regenerates."""
        from worldgen.rng import coord_seed

        self.assertEqual(coord_seed(0, 0, 0), 45687352)

    def test_string_hash_wraps_signed(self):
        """Long strings wrap into the signed 32-bit range."""
        from worldgen.rng import string_hash

        for text in ["", "a", "proc_123_-456_7", "x" * 200]:
            value = string_hash(text)
            self.assertGreaterEqual(value, -(2**31))
            self.assertLess(value, 2**31)
        self.assertEqual(string_hash(""), 0)
        self.assertEqual(string_hash("a"), 97)

    def test_seeds_are_non_negative(self):
        """abs() keeps every coordinate seed non-negative."""
        from worldgen.rng import coord_seed, salted_seed

        for x in range(-20, 21, 3):
            for y in range(-20, 21, 3):
                self.assertGreaterEqual(coord_seed(x, y, -2), 0)
                self.assertGreaterEqual(salted_seed(x, y, 0, "culture"), 0)

    def test_salt_changes_seed(self):
        """Different stages at one coordinate get different seeds."""
        from worldgen.rng import salted_seed

        self.assertNotEqual(salted_seed(7, 0, 0, "culture"), salted_seed(7, 0, 0, "name"))

    def test_offset_seed_wraps(self):
        """Offsets wrap at 2**32."""
        from worldgen.rng import SeedOffset, offset_seed

        self.assertEqual(offset_seed(5, SeedOffset.NAME), 15)
        self.assertEqual(offset_seed(2**32 - 1, 1), 0)


class TestStream(unittest.TestCase):
    """The LCG stream is reproducible and bounded."""

    def test_first_value_from_zero(self):
        """Seed 0 produces the increment as its first state."""
        from worldgen.rng import stream

        self.assertEqual(stream(0)(), 1013904223 / 2**32)

    def test_same_seed_same_sequence(self):
        """Two streams from one seed agree value for value."""
        from worldgen.rng import stream

        a, b = stream(12345), stream(12345)
        self.assertEqual([a() for _ in range(50)], [b() for _ in range(50)])

    def test_values_in_unit_interval(self):
        """Every value lies in [0, 1)."""
        from worldgen.rng import stream

        rng = stream(99)
        for _ in range(1000):
            value = rng()
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 1.0)

    def test_shuffled_is_permutation(self):
        """Shuffling keeps every element and leaves the input untouched."""
        from worldgen.rng import shuffled, stream

        items = list(range(10))
        result = shuffled(stream(3), items)
        self.assertEqual(sorted(result), items)
        self.assertEqual(items, list(range(10)))
        self.assertEqual(result, shuffled(stream(3), items))

    def test_choice_picks_member(self):
        """choice always returns an element of the options."""
        from worldgen.rng import choice, stream

        rng = stream(8)
        for _ in range(100):
            self.assertIn(choice(rng, "abc"), "abc")


if __name__ == "__main__":
    unittest.main()
