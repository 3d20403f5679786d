"""SCI patch resource handlers."""

from fb2sci.formats.sci.writer import SCIPatchWriter

__all__ = ["SCIPatchWriter"]
