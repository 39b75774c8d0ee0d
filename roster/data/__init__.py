from .storage import LoadResult, RosterStorage, SaveResult

__all__ = ["LoadResult", "RosterStorage", "SaveResult"]
