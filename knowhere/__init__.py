"""Building blocks for vector similarity search: configs, datasets, bitsets, distance kernels and a thread pool."""

__version__ = "0.1.0"