from .dataset import DataSet
from .validation import validate_dataset
from .generator import GeneratedDataset, generate_blobs

__all__ = ["DataSet", "validate_dataset", "GeneratedDataset", "generate_blobs"]
