'''
Bug Pattern Data Ingestion

Purpose: Read the tab-delimited bug pattern data file.

Responsibilities:
- Open the data file as UTF-8
- Yield (line_number, line) pairs without line terminators

Why isolated:
- The data file is produced by an annotation processor elsewhere; its
  location and encoding are the only things this stage knows about
'''

import os
from typing import Iterator, Tuple

__all__ = ["iter_lines"]


def iter_lines(path: str) -> Iterator[Tuple[int, str]]:
	"""
	Yield numbered lines from the data file.

	Args:
		path: Path to the bug pattern data file

	Yields:
		(line_number, line) with 1-based numbering and no trailing newline

	Raises:
		FileNotFoundError: If the file does not exist
	"""
	if not os.path.isfile(path):
		raise FileNotFoundError(f"Bug pattern data file not found: {path}")

	with open(path, "r", encoding="utf-8", newline="") as f:
		for line_number, line in enumerate(f, start=1):
			yield line_number, line.rstrip("\r\n")
