"""LiDAR packet helpers: parameters, errors, calibration angles, frame state, model constants and jumbo reassembly."""

__version__ = "0.1.0"