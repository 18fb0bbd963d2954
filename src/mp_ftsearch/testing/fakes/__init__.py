"""Testing fakes – in-memory doubles for the transport port."""
from mp_ftsearch.testing.fakes.transport import RecordingTransport

__all__ = ["RecordingTransport"]
