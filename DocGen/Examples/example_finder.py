"""
Example Source Lookup

Purpose: Find the positive/negative example files that belong to a checker.

Responsibilities:
- Map a dotted checker id onto the example directory tree
- Select files named <Checker>(Positive|Negative)Case*
- Read matches in filename order

Design notes:
- A missing example directory is normal; not every checker ships examples
- The example tree is only ever read
"""

import os
import re
from dataclasses import dataclass
from typing import List, Optional

from DocGen.Parse.record_parser import BugPattern

__all__ = ["Example", "ExampleFinder"]


@dataclass(frozen=True)
class Example:
	filename: str
	content: str


class ExampleFinder:
	"""Locate example sources under a base directory."""

	def __init__(self, example_dir_base: Optional[str]) -> None:
		self._base = example_dir_base

	def example_dir(self, pattern: BugPattern) -> Optional[str]:
		"""Directory expected to hold examples for this pattern, or None if unconfigured."""
		if not self._base:
			return None
		path = pattern.checker_package_path
		if not path:
			return self._base
		return os.path.join(self._base, *path.split("/"))

	@staticmethod
	def _name_pattern(checker_name: str) -> "re.Pattern[str]":
		return re.compile(re.escape(checker_name) + r"(Positive|Negative)Case.*")

	def find(self, pattern: BugPattern) -> List[str]:
		"""
		Return sorted paths of example files for a pattern.

		Returns an empty list when the example directory does not exist.
		"""
		example_dir = self.example_dir(pattern)
		if example_dir is None or not os.path.isdir(example_dir):
			return []

		matcher = self._name_pattern(pattern.short_checker_name)
		names = [
			name for name in os.listdir(example_dir)
			if matcher.fullmatch(name) and os.path.isfile(os.path.join(example_dir, name))
		]
		# Directory listing order varies by filesystem
		return [os.path.join(example_dir, name) for name in sorted(names)]

	def load(self, pattern: BugPattern) -> List[Example]:
		"""Read every matching example file as UTF-8."""
		examples: List[Example] = []
		for path in self.find(pattern):
			# newline="" keeps the file's own line endings
			with open(path, "r", encoding="utf-8", newline="") as f:
				examples.append(Example(filename=os.path.basename(path), content=f.read()))
		return examples
