"""Infrastructure adapters for external interfaces."""

from datalocations.infrastructure.adapters.node_path import PosixPathApi, Win32PathApi
from datalocations.infrastructure.adapters.recording_path import RecordingPathApi
from datalocations.infrastructure.adapters.whatwg_url import WhatwgParsedUrl, WhatwgUrlApi

__all__ = [
    "PosixPathApi",
    "Win32PathApi",
    "RecordingPathApi",
    "WhatwgParsedUrl",
    "WhatwgUrlApi",
]
