from .http_sync_endpoint import HttpSyncEndpoint

__all__ = ["HttpSyncEndpoint"]
