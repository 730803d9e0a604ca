# mccdaq/usb1608fsplus/__init__.py
"""Python interface for MCCDAQ USB-1608FS-Plus devices on Linux.

Three modules are offered:

.. toctree::
   :maxdepth: 2

   usb1608fsplus.usb1608fsplus
   usb1608fsplus.calibration
   usb1608fsplus.demo

Only the conversion functions and :class:`Channel` are intended for direct use.

.. seealso::

   - `Website <http://www.mccdaq.com/usb-data-acquisition/USB-1608FS-Plus.aspx>`_

   - `Warren Jasper's C driver <ftp://lx10.tx.ncsu.edu/pub/Linux/drivers/USB/>`_

"""

from .usb1608fsplus import (
  USB1608FSPlusError, InvalidRangeError, SampleOverflowError, SampleOverflowWarning,
  RANGE_10V, RANGE_5V, RANGE_2_5V, RANGE_2V, RANGE_1_25V, RANGE_1V, RANGE_0_625V, RANGE_0_3125V,
  range_code, full_scale, range_from_name, range_name, range_label,
  volts, adjust_raw_value, word_to_value, raw_volts_from_word, volts_from_word,
  volts_array, to_waveform,
  Channel, load_channels, enabled_mask)
from .calibration import CalibrationError, GainTable, valid_cal_memory_range
