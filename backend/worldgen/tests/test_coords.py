"""Tests for coordinates, room ids and directions."""

import unittest


class TestRoomIds(unittest.TestCase):
    """Room ids encode coordinates exactly."""

    def test_make_room_id(self):
        """Ids use the proc_ prefix and signed integers."""
        from worldgen.coords import make_room_id

        self.assertEqual(make_room_id(0, 0, 0), "proc_0_0_0")
        self.assertEqual(make_room_id(-3, 12, -1), "proc_-3_12_-1")

    def test_parse_inverts_make(self):
        """parse_room_id recovers the coordinates."""
        from worldgen.coords import make_room_id, parse_room_id

        for coords in [(0, 0, 0), (5, -7, 2), (-100, 100, -3)]:
            self.assertEqual(parse_room_id(make_room_id(*coords)), coords)

    def test_parse_rejects_non_canonical(self):
        """Anything make_room_id would not produce is rejected."""
        from worldgen.coords import parse_room_id

        for bad in [
            "",
            "proc_1_2",
            "proc_1_2_3_4",
            "room_1_2_3",
            "proc_01_2_3",
            "proc_-0_0_0",
            "proc_+1_2_3",
            "proc_a_b_c",
            " proc_1_2_3",
            "proc_1_2_3\n",
        ]:
            with self.assertRaises(ValueError, msg=bad):
                parse_room_id(bad)


class TestDirections(unittest.TestCase):
    """Direction deltas and opposites agree."""

    def test_step_and_back(self):
        """Stepping one way then the opposite way returns to the start."""
        from worldgen.coords import DIRECTIONS, OPPOSITE, step

        for direction in DIRECTIONS:
            there = step((2, 3, 4), direction)
            self.assertNotEqual(there, (2, 3, 4))
            self.assertEqual(step(there, OPPOSITE[direction]), (2, 3, 4))

    def test_north_is_negative_y(self):
        """North decreases y and up increases z."""
        from worldgen.coords import step

        self.assertEqual(step((0, 0, 0), "north"), (0, -1, 0))
        self.assertEqual(step((0, 0, 0), "up"), (0, 0, 1))

    def test_neighbors_in_canonical_order(self):
        """neighbors lists all six directions in order."""
        from worldgen.coords import DIRECTIONS, neighbors

        result = neighbors((0, 0, 0))
        self.assertEqual([d for d, _ in result], list(DIRECTIONS))
        self.assertEqual(len({c for _, c in result}), 6)


if __name__ == "__main__":
    unittest.main()
