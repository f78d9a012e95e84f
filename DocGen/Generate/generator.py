"""
Bug Pattern File Generator

Purpose: Drive the parse -> render -> write cycle for every data file line.

Responsibilities:
- Parse each line into a BugPattern
- Attach matching examples and write one page per pattern
- Accumulate the parsed patterns as the run result

Design notes:
- Sequential; each page is written and closed before the next line
- The first bad record or I/O error stops the run; earlier pages remain
"""

import os
from typing import List, Optional

from DocGen.Config.config_loader import GeneratorConfig
from DocGen.Examples.example_finder import ExampleFinder
from DocGen.Ingest.loader import iter_lines
from DocGen.Parse.record_parser import BugPattern, parse_record
from DocGen.Render.page_renderer import write_page

__all__ = ["BugPatternFileGenerator", "generate"]


class BugPatternFileGenerator:
	"""Write a documentation page for each line of the data file."""

	def __init__(self, config: GeneratorConfig) -> None:
		self._config = config
		self._finder = ExampleFinder(config.example_dir_base)
		self._result: List[BugPattern] = []

	def process_line(self, line: str, line_number: Optional[int] = None) -> BugPattern:
		"""Parse one line, write its page and record the pattern."""
		pattern = parse_record(line, line_number)
		examples = self._finder.load(pattern)
		write_page(
			pattern,
			self._config.output_dir,
			generate_front_matter=self._config.generate_front_matter,
			use_pygments=self._config.use_pygments,
			examples=examples,
			language=self._config.example_language,
		)
		self._result.append(pattern)
		return pattern

	def get_result(self) -> List[BugPattern]:
		return list(self._result)

	def process_file(self, input_path: str) -> List[BugPattern]:
		"""Process every line of input_path and return all parsed patterns."""
		os.makedirs(self._config.output_dir, exist_ok=True)
		for line_number, line in iter_lines(input_path):
			self.process_line(line, line_number)
		return self.get_result()


def generate(input_path: str, config: GeneratorConfig) -> List[BugPattern]:
	"""Generate all pages for input_path using config."""
	return BugPatternFileGenerator(config).process_file(input_path)
