"""
Calibration gain table of the USB-1608FS-Plus.

The device stores a slope and an intercept for every range of every channel
in its nonvolatile calibration memory. The cal memory is 768 bytes (address
0-0x2FF); the first 512 bytes hold the table, range-major, channel-minor,
each coefficient an IEEE-754 4-byte little-endian float::

  0x000  slope[0][0]  intercept[0][0]  slope[0][1]  intercept[0][1] ...
  0x040  slope[1][0]  intercept[1][0]  ...
  ...
  0x1C0  slope[7][0]  ...                            intercept[7][7]

Reading the memory off the device is not handled here: :meth:`GainTable.from_bytes`
decodes an image of it.

>>> table = GainTable.from_bytes(image)
>>> slope, offset = table.coefficients(RANGE_2V, 0)
"""

import operator

import numpy as np

from .usb1608fsplus import USB1608FSPlusError, NUM_CHANNELS, FULL_SCALE, range_code

CAL_MEMORY_SIZE = 768
CAL_MEMORY_END = 0x2FF
NUM_RANGES = len(FULL_SCALE)
BYTES_PER_COEFFICIENT = 4
GAIN_TABLE_SIZE = NUM_RANGES * NUM_CHANNELS * 2 * BYTES_PER_COEFFICIENT    # 512 bytes


class CalibrationError(USB1608FSPlusError):
  """Malformed calibration memory image."""
  pass


def valid_cal_memory_range(address, count):
  """Return True if *count* bytes from *address* lie within the calibration memory.

  At least 1 and no more than 768 bytes may be accessed, between 0x000 and 0x2FF.
  """
  if count <= 0 or count > CAL_MEMORY_SIZE:
    return False
  if address < 0 or address + count - 1 > CAL_MEMORY_END:
    return False
  return True


class GainTable(object):
  """Calibration slopes and intercepts, indexed ``[range][channel]``.

  :attr:`slope` and :attr:`intercept` are (8, 8) float64 arrays.
  """
  def __init__(self, slope, intercept):
    self.slope = np.array(slope, dtype=np.float64)
    self.intercept = np.array(intercept, dtype=np.float64)
    shape = (NUM_RANGES, NUM_CHANNELS)
    if self.slope.shape != shape or self.intercept.shape != shape:
      raise CalibrationError('Gain table must be %dx%d, got %s and %s.'
                             % (NUM_RANGES, NUM_CHANNELS, self.slope.shape, self.intercept.shape))

  @classmethod
  def from_bytes(cls, data):
    """Decode a calibration memory image.

    :param data: bytes read from cal memory address 0. Only the first 512 are used.
    :raise: :class:`CalibrationError` if *data* is too short.
    """
    if len(data) < GAIN_TABLE_SIZE:
      raise CalibrationError('Calibration memory image must be at least %d bytes, got %d.'
                             % (GAIN_TABLE_SIZE, len(data)))
    coefficients = np.frombuffer(bytes(data[:GAIN_TABLE_SIZE]), dtype='<f4')
    coefficients = coefficients.reshape((NUM_RANGES, NUM_CHANNELS, 2))
    return cls(coefficients[:, :, 0], coefficients[:, :, 1])

  @classmethod
  def identity(cls):
    """Gain table that leaves raw values unchanged."""
    shape = (NUM_RANGES, NUM_CHANNELS)
    return cls(np.ones(shape), np.zeros(shape))

  def __repr__(self):
    return "<USB1608FS-Plus gain table, slopes %.6f..%.6f>" % (self.slope.min(), self.slope.max())

  def coefficients(self, rng, channel):
    """Return ``(slope, offset)`` for range code *rng* on *channel*."""
    rng = range_code(rng)
    channel = operator.index(channel)
    if not 0 <= channel < NUM_CHANNELS:
      raise ValueError('Channel %d outside valid range.' % channel)
    return float(self.slope[rng, channel]), float(self.intercept[rng, channel])
