"""
Dataset Module

Public Interface:
- DatasetRegistry: Descriptions of the registered datasets
- DatasetDelete: Deregisters a dataset and drops its records and accesses
"""

from .delete import DatasetDelete, DATASET_DELETE_ERRORS
from .registry import DatasetRegistry

__all__ = ["DatasetRegistry", "DatasetDelete", "DATASET_DELETE_ERRORS"]
