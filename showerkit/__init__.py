"""showerkit: shower-enclosure glass sizing, hardware selection and quoting."""

__version__ = "0.1.0"
