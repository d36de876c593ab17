"""Test fixtures for the storefront clients."""

from .recording_transport import RecordingTransport

__all__ = ["RecordingTransport"]
