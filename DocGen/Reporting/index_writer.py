"""
Bug Pattern Index Page

Purpose: Summarize every generated page on a single index page.

Responsibilities:
- Group patterns by maturity, then severity
- Render the index template and write bugpatterns.md

Design notes:
- Group order follows enum declaration order; names sort within a group
- Empty groups are left out
"""

import os
from typing import Any, Dict, List, Sequence

from DocGen.Parse.record_parser import BugPattern, MaturityLevel, SeverityLevel
from DocGen.Render.page_renderer import PageTemplateLoader

__all__ = ["INDEX_FILENAME", "MATURITY_TITLES", "build_sections", "render_index", "write_index"]

INDEX_FILENAME = "bugpatterns.md"
INDEX_TEMPLATE = "index.md.j2"

MATURITY_TITLES = {
	MaturityLevel.MATURE: "On by default",
	MaturityLevel.EXPERIMENTAL: "Experimental",
}


def build_sections(patterns: Sequence[BugPattern]) -> List[Dict[str, Any]]:
	"""
	Group patterns into index sections.

	Returns list of {"title": "On by default : ERROR", "patterns": [...]}
	where each pattern entry has name, link and summary.
	"""
	sections = []
	for maturity in MaturityLevel:
		for severity in SeverityLevel:
			group = [p for p in patterns if p.maturity is maturity and p.severity is severity]
			if not group:
				continue
			group.sort(key=lambda p: p.name)
			sections.append({
				"title": f"{MATURITY_TITLES[maturity]} : {severity.name}",
				"patterns": [
					{"name": p.name, "link": p.page_filename, "summary": p.summary}
					for p in group
				],
			})
	return sections


def render_index(patterns: Sequence[BugPattern], generate_front_matter: bool = False) -> str:
	template = PageTemplateLoader().load_template(INDEX_TEMPLATE)
	return template.render(front_matter=generate_front_matter, sections=build_sections(patterns))


def write_index(patterns: Sequence[BugPattern], output_dir: str, generate_front_matter: bool = False) -> str:
	"""
	Write bugpatterns.md into output_dir and return its path.

	Raises:
		ValueError: If a pattern page already uses the index file name
	"""
	clashes = sorted(p.name for p in patterns if p.page_filename == INDEX_FILENAME)
	if clashes:
		raise ValueError(
			f"cannot write {INDEX_FILENAME}: it would overwrite the page for {', '.join(clashes)}"
		)

	content = render_index(patterns, generate_front_matter)
	file_path = os.path.join(output_dir, INDEX_FILENAME)
	with open(file_path, "w", encoding="utf-8", newline="") as f:
		f.write(content)
	return file_path
