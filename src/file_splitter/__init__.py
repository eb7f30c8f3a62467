"""File Splitter - Split files into fixed-size parts and merge them back."""

from file_splitter.errors import TransferError
from file_splitter.size import parse_size
from file_splitter.transfer import SplitStats, merge_files, part_name, split_file

__all__ = ["parse_size", "split_file", "merge_files", "part_name", "SplitStats", "TransferError"]
