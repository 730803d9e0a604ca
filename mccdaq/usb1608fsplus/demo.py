"""
Calibration example for the USB-1608FS-Plus.

Converts the mid-scale sample 0x8000 on the +/-2V range, raw and with the
slope and offset of a real device, and prints the intermediate arithmetic::

  $ python -m mccdaq.usb1608fsplus.demo
  Value = 0x8000 / Adjusted Value = 0x7e94
  Voltage = 0.000000 / Adjusted Voltage = -0.022217
  value * slope = 37855.035392
  value * slope + offset = 32403.902091
  rint(value * slope + offset) = 32404.000000
"""

import sys

from .usb1608fsplus import volts, adjust_raw_value, RANGE_2V

VALUE = 0x8000
SLOPE = 1.155244
OFFSET = -5451.133301
RANGE = RANGE_2V


def main():
  adjvalue = adjust_raw_value(VALUE, SLOPE, OFFSET)
  print("Value = %#x / Adjusted Value = %#x" % (VALUE, adjvalue))
  print("Voltage = %f / Adjusted Voltage = %f" % (volts(VALUE, RANGE), volts(adjvalue, RANGE)))
  print("value * slope = %f" % (VALUE * SLOPE))
  print("value * slope + offset = %f" % (VALUE * SLOPE + OFFSET))
  print("rint(value * slope + offset) = %f" % round(VALUE * SLOPE + OFFSET))
  return 0


if __name__ == '__main__':
  sys.exit(main())
