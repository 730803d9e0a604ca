import unittest

import numpy as np

from mccdaq.usb1608fsplus.calibration import (
    CalibrationError, GainTable, valid_cal_memory_range)
from mccdaq.usb1608fsplus.usb1608fsplus import InvalidRangeError, RANGE_2V, RANGE_10V


def make_image():
    """768-byte cal memory image: slope = 1 + r/8 + c/64, intercept = -(8r + c)/2."""
    coefficients = np.empty((8, 8, 2), dtype='<f4')
    for r in range(8):
        for c in range(8):
            coefficients[r, c, 0] = 1 + r / 8. + c / 64.
            coefficients[r, c, 1] = -(8 * r + c) / 2.
    return coefficients.tobytes() + b'\xff' * 256


class TestValidCalMemoryRange(unittest.TestCase):
    def test_ranges(self):
        cases = [(0, 0, False),
                 (-1, 1, False),
                 (0, 1, True),
                 (0, 768, True),
                 (0, 769, False),
                 (1, 767, True),
                 (1, 768, False),
                 (0x2ff, 1, True),
                 (0x2ff, 2, False)]
        for address, count, valid in cases:
            self.assertEqual(valid_cal_memory_range(address, count), valid, (address, count))


class TestGainTable(unittest.TestCase):
    def test_from_bytes(self):
        table = GainTable.from_bytes(make_image())
        self.assertEqual(table.slope.shape, (8, 8))
        self.assertEqual(table.coefficients(0, 0), (1.0, 0.0))
        self.assertEqual(table.coefficients(RANGE_2V, 5), (1 + 3 / 8. + 5 / 64., -14.5))
        self.assertEqual(table.coefficients(7, 7), (1 + 7 / 8. + 7 / 64., -31.5))

    def test_only_first_512_bytes_used(self):
        image = make_image()
        self.assertEqual(GainTable.from_bytes(image[:512]).coefficients(7, 7),
                         GainTable.from_bytes(image).coefficients(7, 7))

    def test_accepts_bytearray(self):
        table = GainTable.from_bytes(bytearray(make_image()))
        self.assertEqual(table.coefficients(1, 0), (1.125, -4.0))

    def test_too_short(self):
        with self.assertRaises(CalibrationError):
            GainTable.from_bytes(make_image()[:511])

    def test_identity(self):
        table = GainTable.identity()
        for r in range(8):
            for c in range(8):
                self.assertEqual(table.coefficients(r, c), (1.0, 0.0))

    def test_bad_shape(self):
        with self.assertRaises(CalibrationError):
            GainTable(np.ones((8, 7)), np.zeros((8, 7)))

    def test_coefficients_validation(self):
        table = GainTable.identity()
        with self.assertRaises(InvalidRangeError):
            table.coefficients(8, 0)
        with self.assertRaises(ValueError):
            table.coefficients(RANGE_10V, 8)
        with self.assertRaises(ValueError):
            table.coefficients(RANGE_10V, -1)
        for rng in (3.0, True):
            with self.assertRaises(InvalidRangeError):
                table.coefficients(rng, 0)

    def test_numpy_integer_indices(self):
        table = GainTable.from_bytes(make_image())
        self.assertEqual(table.coefficients(np.uint8(RANGE_2V), np.int64(5)), (1 + 3 / 8. + 5 / 64., -14.5))


if __name__ == "__main__":
    unittest.main()
