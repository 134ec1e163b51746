"""Corpus frequency statistics package."""

from corpus_freq.aggregate import Aggregator
from corpus_freq.report import build_report, render_report, render_domain_reports, REPORT_FILENAMES
from corpus_freq.tables import FrequencyTable, RankedEntry, ReportLine, CorpusStats
from corpus_freq.tokenize import normalize_line, tokenize_line

__all__ = [
	"Aggregator",
	"build_report",
	"render_report",
	"render_domain_reports",
	"REPORT_FILENAMES",
	"FrequencyTable",
	"RankedEntry",
	"ReportLine",
	"CorpusStats",
	"normalize_line",
	"tokenize_line",
]
