"""tacsim: kinematic playback engine for a naval tactical chart."""

__version__ = "0.1.0"
