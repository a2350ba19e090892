"""
I/O boundary between pixel buffers and image files.
"""
