"""Chunked split and merge of files into numbered parts."""

from file_splitter.transfer.copy import copy_bytes
from file_splitter.transfer.merge import merge_files
from file_splitter.transfer.naming import part_name, part_path
from file_splitter.transfer.split import split_file
from file_splitter.transfer.types import SplitStats

__all__ = ["copy_bytes", "merge_files", "part_name", "part_path", "split_file", "SplitStats"]
