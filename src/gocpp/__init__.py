"""Compile a single C++ file, run the produced binary and clean up after it."""

app_name = "gocpp"
__version__ = "0.1.0"
