from .local_data_source import LocalDataSource

__all__ = ["LocalDataSource"]
