"""
Raw sample to voltage conversion for MCCDAQ's USB-1608FS-Plus data acquisition devices.

The USB-1608FS-Plus returns each analog input reading as an unsigned 16-bit
word, little-endian on the wire, in offset binary: ``0x0000`` is the
negative full scale, ``0x8000`` is 0 V and ``0xFFFF`` is one LSB below the
positive full scale. The full scale is selected per channel by a range code:

========== ============ ====================
range code full scale   name
========== ============ ====================
0          +/- 10 V     ``'10V'``
1          +/- 5 V      ``'5V'``
2          +/- 2.5 V    ``'2.5V'``
3          +/- 2 V      ``'2V'``
4          +/- 1.25 V   ``'1.25V'``
5          +/- 1 V      ``'1V'``
6          +/- 0.625 V  ``'0.625V'``
7          +/- 0.3125 V ``'0.3125V'``
========== ============ ====================

Each range of each channel has a calibration slope and offset stored on the
device (see :mod:`usb1608fsplus.calibration`), applied to the raw value
before conversion.

:Examples:

>>> from mccdaq import usb1608fsplus
>>> usb1608fsplus.volts(0xFFFF, usb1608fsplus.RANGE_10V)
9.99969482421875
>>> adj = usb1608fsplus.adjust_raw_value(0x8000, 1.155244, -5451.133301)
>>> hex(adj)
'0x7e94'
>>> usb1608fsplus.volts(adj, usb1608fsplus.RANGE_2V)
-0.022216796875

:Channels:

>>> ch = usb1608fsplus.Channel(3, usb1608fsplus.RANGE_2V, enabled=True)
>>> ch.calibrate(gain_table)   # slope and offset for range 2V, channel 3
>>> ch.volts(0x7E94)
>>> ch.volts_array(samples)    # numpy array of volts
>>> chans = usb1608fsplus.load_channels(open('channels.json').read())

----------------------------------
"""

import json
import operator
import warnings

import numpy as np

from ..utilities.waveform import Waveform


class USB1608FSPlusError(RuntimeError):
  """Alias of :exc:`exceptions.RuntimeError` to represent USB-1608FS-Plus exceptions."""
  pass

class InvalidRangeError(USB1608FSPlusError, ValueError):
  """Range code (or range name) that is not one of the eight device ranges."""
  def __init__(self, rng):
    USB1608FSPlusError.__init__(self, 'Unknown range %r.' % (rng,))
    self.range = rng

class SampleOverflowError(USB1608FSPlusError, ValueError):
  """Adjusted sample does not fit in 16 bits."""
  pass

class SampleOverflowWarning(UserWarning):
  """Adjusted sample was saturated to the 16-bit range."""
  pass


#: Range codes.
RANGE_10V     = 0
RANGE_5V      = 1
RANGE_2_5V    = 2
RANGE_2V      = 3
RANGE_1_25V   = 4
RANGE_1V      = 5
RANGE_0_625V  = 6
RANGE_0_3125V = 7

#: Full scale voltage (+/-) of each range code.
FULL_SCALE = {RANGE_10V:     10.0,
              RANGE_5V:      5.0,
              RANGE_2_5V:    2.5,
              RANGE_2V:      2.0,
              RANGE_1_25V:   1.25,
              RANGE_1V:      1.0,
              RANGE_0_625V:  0.625,
              RANGE_0_3125V: 0.3125}

#: Range names, as used in channel configuration files.
RANGE_NAMES = {'10V':     RANGE_10V,
               '5V':      RANGE_5V,
               '2.5V':    RANGE_2_5V,
               '2V':      RANGE_2V,
               '1.25V':   RANGE_1_25V,
               '1V':      RANGE_1V,
               '0.625V':  RANGE_0_625V,
               '0.3125V': RANGE_0_3125V}

NUM_CHANNELS = 8
MID_SCALE = 0x8000     # 0 V
MAX_VALUE = 0xFFFF
BYTES_PER_WORD = 2


def range_code(rng):
  """Return *rng* as a plain int range code (0-7).

  Integer types only, numpy integers included. bool and float are rejected.

  :raise: :class:`InvalidRangeError`
  """
  if isinstance(rng, bool):
    raise InvalidRangeError(rng)
  try:
    code = operator.index(rng)
  except TypeError:
    raise InvalidRangeError(rng)
  if code not in FULL_SCALE:
    raise InvalidRangeError(rng)
  return code

def full_scale(rng):
  """Return the full scale voltage of range code *rng*.

  :raise: :class:`InvalidRangeError` if *rng* is not a valid range code.
  """
  return FULL_SCALE[range_code(rng)]

def range_from_name(name):
  """Return the range code for *name* (e.g. ``'2.5V'``)."""
  try:
    return RANGE_NAMES[name]
  except (KeyError, TypeError):
    raise InvalidRangeError(name)

def range_name(rng):
  """Return the configuration name of range code *rng*, e.g. ``'2.5V'``."""
  rng = range_code(rng)
  for name, code in RANGE_NAMES.items():
    if code == rng:
      return name

def range_label(rng):
  """Return a printable label for range code *rng*, e.g. ``'±2.5V'``."""
  return '±' + range_name(rng)


def volts(value, rng):
  """Convert a raw sample to volts.

  :param int value: raw 16-bit sample (offset binary, 0x8000 = 0V), Python or numpy integer. Not range-checked.
  :param int rng: range code (0-7)
  :rtype: float
  :raise: :class:`InvalidRangeError`
  """
  return (int(value) - MID_SCALE) * full_scale(rng) / 32768.

def adjust_raw_value(value, slope, offset, clip=True):
  """Apply the calibration slope and offset to a raw sample.

  The result is ``value * slope + offset`` rounded to the nearest integer,
  ties to even (same as C's ``rint()``).

  :param int value: raw 16-bit sample
  :param float slope: calibration slope
  :param float offset: calibration offset (intercept)
  :param bool clip: if True, saturate the result to [0, 0xFFFF] and issue a
                    :class:`SampleOverflowWarning`. If False, raise
                    :class:`SampleOverflowError` instead.
  :rtype: int
  """
  value = int(value)
  adjusted = int(round(value * slope + offset))
  if 0 <= adjusted <= MAX_VALUE:
    return adjusted
  if not clip:
    raise SampleOverflowError('Adjusted value %d (from %#x, slope %r, offset %r) outside 16-bit range.'
                              % (adjusted, value, slope, offset))
  warnings.warn('Adjusted value %d saturated to 16-bit range.' % adjusted, SampleOverflowWarning, stacklevel=2)
  return min(max(adjusted, 0), MAX_VALUE)

def word_to_value(word):
  """Decode a 2-byte little-endian sample word, as sent by the device."""
  if len(word) != BYTES_PER_WORD:
    raise USB1608FSPlusError('binary value must be 2 bytes')
  return word[0] | (word[1] << 8)

def raw_volts_from_word(word, rng):
  """Convert a 2-byte sample word to volts, without calibration."""
  return volts(word_to_value(word), rng)

def volts_from_word(word, rng, slope, offset):
  """Convert a 2-byte sample word to volts, applying the calibration *slope* and *offset*."""
  return volts(adjust_raw_value(word_to_value(word), slope, offset), rng)


def volts_array(samples, rng, slope=1.0, offset=0.0):
  """Convert an array of raw samples to volts.

  Calibration rounds ties to even and saturates to the 16-bit range
  (with a :class:`SampleOverflowWarning`), like :func:`adjust_raw_value`.

  :param samples: array-like of raw samples, any shape
  :param int rng: range code
  :param float slope: calibration slope
  :param float offset: calibration offset
  :rtype: :class:`numpy.ndarray` of float64, same shape as *samples*
  """
  fs = full_scale(rng)
  data = np.asarray(samples, dtype=np.float64)
  if slope != 1.0 or offset != 0.0:
    data = np.rint(data * slope + offset)
    if data.size and (data.min() < 0 or data.max() > MAX_VALUE):
      warnings.warn('Adjusted values saturated to 16-bit range.', SampleOverflowWarning, stacklevel=2)
      data = np.clip(data, 0, MAX_VALUE)
  return (data - MID_SCALE) * fs / 32768.

def to_waveform(samples, rng, rate, slope=1.0, offset=0.0, t0=0):
  """Convert a block of raw samples from one channel to a :class:`Waveform` of volts.

  :param rate: sampling frequency (Hz)
  :param t0: timestamp of the first sample
  :rtype: :class:`Waveform`
  """
  return Waveform(volts_array(samples, rng, slope, offset), 1/float(rate), t0=t0)


class Channel(object):
  """Configuration of one analog input channel.

  >>> ch = Channel(0, RANGE_5V, enabled=True, description='thermistor')
  >>> ch.volts(0xFFFF)
  4.999847412109375
  """
  def __init__(self, channel, rng=RANGE_10V, enabled=False, description='', slope=1.0, offset=0.0):
    """
    :param int channel: channel number (0-7)
    :param int rng: range code
    :param bool enabled: whether the channel takes part in acquisitions
    :param str description: free text
    :param float slope: calibration slope
    :param float offset: calibration offset
    """
    if not 0 <= channel < NUM_CHANNELS:
      raise ValueError('Channel %d outside valid range.' % channel)
    self.channel = channel
    self.range = range_code(rng)
    self.enabled = enabled
    self.description = description
    self.slope = slope
    self.offset = offset

  @classmethod
  def from_config(cls, channel, config):
    """Create a channel from a configuration dict.

    :param int channel: channel number
    :param dict config: ``{"enabled": true, "range": "2V", "desc": "..."}``.
                        Missing keys take the defaults.
    """
    if not isinstance(config, dict):
      raise ValueError('Channel %d configuration must be an object.' % channel)
    rng = range_from_name(config['range']) if 'range' in config else RANGE_10V
    return cls(channel, rng,
               enabled=bool(config.get('enabled', False)),
               description=config.get('desc', ''))

  def __repr__(self):
    return "<USB1608FS-Plus channel %d: %s, %s, %r>" % (
      self.channel, range_label(self.range), 'enabled' if self.enabled else 'disabled', self.description)

  def config(self):
    """Return the channel configuration as a dict (inverse of :func:`from_config`)."""
    return {'enabled': self.enabled, 'range': range_name(self.range), 'desc': self.description}

  def calibrate(self, gain_table):
    """Take the slope and offset for this channel's range from *gain_table*.

    :param gain_table: a :class:`calibration.GainTable`
    """
    self.slope, self.offset = gain_table.coefficients(self.range, self.channel)

  def volts(self, value):
    """Convert a single raw sample to volts."""
    return volts(adjust_raw_value(value, self.slope, self.offset), self.range)

  def volts_array(self, samples):
    """Convert an array of raw samples to volts."""
    return volts_array(samples, self.range, self.slope, self.offset)

  def __call__(self, value):
    return self.volts(value)


def load_channels(text):
  """Load channel configurations from a JSON list.

  :param str text: JSON list of up to 8 channel dicts (see :func:`Channel.from_config`);
                   the position in the list is the channel number.
  :rtype: list of :class:`Channel`
  """
  configs = json.loads(text)
  if not isinstance(configs, list):
    raise ValueError('Channel configuration must be a list.')
  if len(configs) > NUM_CHANNELS:
    raise ValueError('At most %d channels, got %d.' % (NUM_CHANNELS, len(configs)))
  return [Channel.from_config(i, c) for i, c in enumerate(configs)]

def enabled_mask(channels):
  """Return the channel byte with bit *i* set for each enabled channel *i*."""
  mask = 0
  for ch in channels:
    if ch.enabled:
      mask |= 1 << ch.channel
  return mask
