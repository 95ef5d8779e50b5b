"""Custom exceptions for readmegen."""


class ReadmegenError(Exception):
    """Base exception for readmegen operations."""


class SourceDirectoryError(ReadmegenError, NotADirectoryError):
    """A chapter was requested for a path that is not a directory."""


class InvalidDepthError(ReadmegenError, ValueError):
    """A heading was requested at a depth lower than one."""
