# PACKAGE mccdaq/__init__.py
"""Package of Python drivers for data acquisition hardware from Measurement Computing (http://mccdaq.com/).

.. note::
   Currently only the USB-1608FS-Plus sample conversion is provided, but the
   package is set up so additional drivers can be easily incorporated

Contents:

.. toctree::
   :maxdepth: 2

   usb1608fsplus/usb1608fsplus
   utilities/utilities

"""
