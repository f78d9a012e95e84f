"""
Bug Pattern Record Parser

Purpose: Turn one line of the bug pattern data file into a structured record.

Responsibilities:
- Split a tab-delimited line into its fixed fields
- Parse severity, maturity and suppressibility against their enums
- Resolve literal "\\n" escapes in the explanation into real line breaks

Design notes:
- Side-effect free; every failure raises
- Records are frozen after construction
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Type

__all__ = [
	"BugPattern",
	"SeverityLevel",
	"MaturityLevel",
	"Suppressibility",
	"MalformedRecordError",
	"InvalidEnumValueError",
	"parse_record",
	"FIELD_COUNT",
]

FIELD_COUNT = 10


class SeverityLevel(Enum):
	ERROR = "ERROR"
	WARNING = "WARNING"
	SUGGESTION = "SUGGESTION"
	NOT_A_PROBLEM = "NOT_A_PROBLEM"


class MaturityLevel(Enum):
	MATURE = "MATURE"
	EXPERIMENTAL = "EXPERIMENTAL"


class Suppressibility(Enum):
	SUPPRESS_WARNINGS = "SUPPRESS_WARNINGS"
	CUSTOM_ANNOTATION = "CUSTOM_ANNOTATION"
	UNSUPPRESSIBLE = "UNSUPPRESSIBLE"


class MalformedRecordError(ValueError):
	"""Line does not split into the expected number of fields."""


class InvalidEnumValueError(ValueError):
	"""Enum field text does not name a known member."""


@dataclass(frozen=True)
class BugPattern:
	"""One diagnostic rule description parsed from the data file."""

	qualified_checker_id: str
	name: str
	alt_names: str
	category: str
	severity: SeverityLevel
	maturity: MaturityLevel
	suppressibility: Suppressibility
	custom_suppression_annotation: str
	summary: str
	explanation: str

	@property
	def short_checker_name(self) -> str:
		"""Final dotted segment of the checker id, e.g. ArrayEquals."""
		return self.qualified_checker_id.rsplit(".", 1)[-1]

	@property
	def checker_package_path(self) -> str:
		"""Checker id without its final segment, joined with '/'."""
		parts = self.qualified_checker_id.split(".")
		return "/".join(parts[:-1])

	@property
	def page_filename(self) -> str:
		return self.name.replace(" ", "_") + ".md"


def _describe(line: str, line_number: Optional[int]) -> str:
	"""Location suffix used in error messages."""
	if line_number is None:
		return f"in record {line!r}"
	return f"on line {line_number}: {line!r}"


def _parse_enum(enum_cls: Type[Enum], field: str, text: str, line: str, line_number: Optional[int]) -> Enum:
	try:
		return enum_cls[text]
	except KeyError:
		allowed = ", ".join(member.name for member in enum_cls)
		raise InvalidEnumValueError(
			f"invalid {field} '{text}' (expected one of: {allowed}) {_describe(line, line_number)}"
		) from None


def _split_fields(line: str, line_number: Optional[int]) -> List[str]:
	parts = line.split("\t")
	if len(parts) != FIELD_COUNT:
		raise MalformedRecordError(
			f"expected {FIELD_COUNT} tab-separated fields, got {len(parts)} {_describe(line, line_number)}"
		)
	return parts


def parse_record(line: str, line_number: Optional[int] = None) -> BugPattern:
	"""
	Parse one data file line into a BugPattern.

	Field order: checker id, name, alternate names, category, severity,
	maturity, suppressibility, custom suppression annotation, summary,
	explanation.

	Args:
		line: Raw line, with or without its line terminator
		line_number: 1-based position in the input, used in error messages

	Returns:
		Parsed BugPattern

	Raises:
		MalformedRecordError: If the field count is wrong
		InvalidEnumValueError: If an enum field is unrecognized
	"""
	line = line.rstrip("\r\n")
	parts = _split_fields(line, line_number)

	severity = _parse_enum(SeverityLevel, "severity", parts[4], line, line_number)
	maturity = _parse_enum(MaturityLevel, "maturity", parts[5], line, line_number)
	suppressibility = _parse_enum(Suppressibility, "suppressibility", parts[6], line, line_number)

	return BugPattern(
		qualified_checker_id=parts[0],
		name=parts[1],
		alt_names=parts[2],
		category=parts[3],
		severity=severity,
		maturity=maturity,
		suppressibility=suppressibility,
		custom_suppression_annotation=parts[7],
		summary=parts[8],
		# Literal backslash-n in the data file marks a line break
		explanation=parts[9].replace("\\n", "\n"),
	)
