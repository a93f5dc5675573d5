"""Status server: poll backends, derive display state, serve GET /status."""

from chia_status.status_server.poller import StatusPoller, StatusReport

__all__ = ["StatusPoller", "StatusReport"]
