"""
Bug Pattern Page Renderer

Purpose: Generate one Markdown documentation page per bug pattern.

Responsibilities:
- Choose the suppression paragraph for the pattern
- Load and render the Jinja2 page template
- Wrap example sources in fenced or pygments code blocks
- Write pages to <output_dir>/<Name_With_Underscores>.md

Design notes:
- Jinja2 substitution is locale independent; field values are inserted
  verbatim and never parsed as template syntax
- Rendering is deterministic so repeated runs produce identical files
"""

import os
from typing import Any, Dict, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from DocGen.Examples.example_finder import Example
from DocGen.Parse.record_parser import BugPattern, Suppressibility

__all__ = [
	"PageTemplateLoader",
	"UnknownSuppressibilityError",
	"suppression_text",
	"code_block_delimiters",
	"render_page",
	"write_page",
]

PAGE_TEMPLATE = "bugpattern.md.j2"


class UnknownSuppressibilityError(ValueError):
	"""Suppression switch reached with a value it does not handle."""


def suppression_text(pattern: BugPattern) -> str:
	"""Return the suppression instructions for a pattern."""
	if pattern.suppressibility is Suppressibility.SUPPRESS_WARNINGS:
		return (
			f"Suppress false positives by adding an `@SuppressWarnings(\"{pattern.name}\")` "
			"annotation to the enclosing element."
		)
	elif pattern.suppressibility is Suppressibility.CUSTOM_ANNOTATION:
		return (
			"Suppress false positives by adding the custom suppression annotation "
			f"`@{pattern.custom_suppression_annotation}` to the enclosing element."
		)
	elif pattern.suppressibility is Suppressibility.UNSUPPRESSIBLE:
		return "This check may not be suppressed."
	raise UnknownSuppressibilityError(
		f"unhandled suppressibility {pattern.suppressibility!r} for {pattern.name}"
	)


def code_block_delimiters(use_pygments: bool, language: str = "java") -> Tuple[str, str]:
	"""
	Opening and closing lines around an example listing.

	Pygments style is the Liquid highlight tag Jekyll understands; the
	default is a GitHub flavoured Markdown fence.
	"""
	if use_pygments:
		return "{% highlight " + language + " %}", "{% endhighlight %}"
	return "```" + language, "```"


class PageTemplateLoader:
	"""Load Jinja2 templates shipped beside this module."""

	def __init__(self, template_dir: Optional[str] = None) -> None:
		self._template_dir = template_dir or self._get_template_dir()
		self._env = Environment(
			loader=FileSystemLoader(self._template_dir),
			autoescape=select_autoescape(["html", "xml"]),
			trim_blocks=True,
			lstrip_blocks=True,
			keep_trailing_newline=True,
		)

	def _get_template_dir(self) -> str:
		"""Get absolute path to templates directory."""
		render_dir = os.path.dirname(os.path.abspath(__file__))
		return os.path.join(render_dir, "templates")

	def load_template(self, name: str = PAGE_TEMPLATE) -> Template:
		"""
		Load a template by file name.

		Raises:
			jinja2.TemplateNotFound: If the template file is missing
		"""
		return self._env.get_template(name)


_DEFAULT_LOADER: Optional[PageTemplateLoader] = None


def _get_template_loader() -> PageTemplateLoader:
	"""Lazy-load the shared PageTemplateLoader."""
	global _DEFAULT_LOADER
	if _DEFAULT_LOADER is None:
		_DEFAULT_LOADER = PageTemplateLoader()
	return _DEFAULT_LOADER


def _build_context(
	pattern: BugPattern,
	generate_front_matter: bool,
	use_pygments: bool,
	examples: Sequence[Example],
	language: str,
) -> Dict[str, Any]:
	code_open, code_close = code_block_delimiters(use_pygments, language)
	return {
		"pattern": pattern,
		"front_matter": generate_front_matter,
		"suppression": suppression_text(pattern),
		"examples": list(examples),
		"code_open": code_open,
		"code_close": code_close,
	}


def render_page(
	pattern: BugPattern,
	generate_front_matter: bool = False,
	use_pygments: bool = False,
	examples: Sequence[Example] = (),
	language: str = "java",
) -> str:
	"""
	Render the full Markdown page for a pattern.

	Args:
		pattern: Parsed bug pattern
		generate_front_matter: Prepend a Jekyll YAML front matter block
		use_pygments: Use {% highlight %} blocks instead of code fences
		examples: Example sources in the order they should appear
		language: Highlighting language for example listings

	Returns:
		Page text

	Raises:
		UnknownSuppressibilityError: If the suppressibility is not handled
	"""
	context = _build_context(pattern, generate_front_matter, use_pygments, examples, language)
	template = _get_template_loader().load_template()
	return template.render(**context)


def write_page(
	pattern: BugPattern,
	output_dir: str,
	generate_front_matter: bool = False,
	use_pygments: bool = False,
	examples: Sequence[Example] = (),
	language: str = "java",
) -> str:
	"""
	Render a pattern and write it to output_dir, replacing any existing page.

	Returns:
		Path of the written file
	"""
	content = render_page(pattern, generate_front_matter, use_pygments, examples, language)
	file_path = os.path.join(output_dir, pattern.page_filename)

	# newline="" keeps "\n" on every platform
	with open(file_path, "w", encoding="utf-8", newline="") as f:
		f.write(content)

	return file_path
