"""
The Waveform class holds and plots discrete functions of time.

It was primarily designed to hold blocks of samples converted to volts by
the MCCDAQ Python driver :mod:`usb1608fsplus.usb1608fsplus`, but is more
general in scope: single- and multi-channel waveforms, time vector, time plots.
"""

import matplotlib.pyplot as plt
import numpy as np

#: Define time units, relative to the second.
timescale = {'s':1., 'ms':1000., 'us':1.0E6, 'ns': 1.0E9}

class Waveform:
  """A simple class to hold waveforms (functions of time). """
  def __init__(self, data, dt, t0=0):
    """
    :param data: the data
    :type  data: array-like
    :param float dt: the waveform sampling interval
    :param float t0: the waveform time origin (timestamp of first element of ``data``)
    """
    self.data = np.asarray(data)
    self.dt = float(dt)
    self.t0 = float(t0)
    self.rate = 1/self.dt
    if self.data.ndim == 1:    # reshape 1D array to 2D
      self.data = self.data.reshape((1, len(self.data)))
    shape = self.data.shape
    self.nchannels = shape[0]
    self.nsamples = shape[1]

  def __str__(self):
    return "Waveform: "+ str(self.nchannels) + " channels, "+ str(self.nsamples) + " samples at " + str(self.rate)+" Hz."

  def __len__(self):
    return self.data.shape[1]

  def t(self, tunit='s'):
    """Return the time vector, in units of *tunit* (see :data:`timescale`)."""
    return (self.t0 + self.dt * np.arange(self.nsamples)) * timescale[tunit]

  def plot(self, style='', tunit='s', show=True):
    """Plot all waveforms vs time """
    fig = plt.figure()
    for i in range(self.nchannels):
      plt.plot(self.t(tunit), self.data[i, :], style)
    plt.xlabel('t (%s)' % tunit)
    if show:
      plt.show()
    return fig
