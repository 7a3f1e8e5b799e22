"""
CRUD Module

Public Interface:
- CrudDelete: Deletes one record from a dataset
- RecordStore: Records indexed in each dataset
"""

from .delete import CrudDelete, CRUD_DELETE_ERRORS
from .store import RecordStore

__all__ = ["CrudDelete", "RecordStore", "CRUD_DELETE_ERRORS"]
