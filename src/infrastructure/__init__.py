"""Infrastructure Layer.

Adapters that perform I/O on behalf of the domain (raster decoding) and the
command-line entry point.
"""
