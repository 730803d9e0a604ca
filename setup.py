from setuptools import setup

classifiers = [
    'Development Status :: 4 - Beta',
    'Environment :: Console',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: MIT License',
    'Natural Language :: English',
    'Operating System :: POSIX :: Linux',
    'Programming Language :: Python :: 3',
    'Topic :: Scientific/Engineering'
]

setup(
    name = 'mccdaq_linux',
    version = '1.5.0',
    description = "Python drivers for Measurement Computing devices (mccdaq.com) on linux",
    author = 'Guillaume Lepert',
    author_email = 'guillaume.lepert07@imperial.ac.uk',
    long_description="""Python drivers for data acquisition hardware from Measurement Computing (http://mccdaq.com/).

    Currently provides the USB-1608FS-Plus sample conversion: raw 16-bit
    samples to volts for each of the eight input ranges, slope/offset
    calibration, decoding of the calibration gain table and of sample words,
    and per-channel configuration.

    Example:

    >>> from mccdaq import usb1608fsplus

    >>> usb1608fsplus.volts(0xFFFF, usb1608fsplus.RANGE_10V)
    9.99969482421875

    >>> adj = usb1608fsplus.adjust_raw_value(0x8000, 1.155244, -5451.133301)
    >>> usb1608fsplus.volts(adj, usb1608fsplus.RANGE_2V)
    -0.022216796875

    Run the calibration example with::

        $ python -m mccdaq.usb1608fsplus.demo

    """,
    packages=['mccdaq', 'mccdaq.usb1608fsplus', 'mccdaq.utilities'],
    install_requires = ['numpy', 'matplotlib'],
    extras_require = {'test': ['pytest']},
    platforms=['linux'],
    classifiers = classifiers
)
