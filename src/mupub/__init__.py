"""mupub: scan, reconcile and pre-flight music releases for publishing platforms."""

__version__ = "0.1.0"
