#!/usr/bin/env python3

# Standard Library
import argparse
import os
import sys
import time

# Local modules
import corpus_freq.aggregate
import corpus_freq.scan


#============================================


def main() -> None:
	args = parse_args()
	sys.exit(run(root=args.root, languages=args.languages, out_dir=args.out_dir))


def run(*, root: str, languages: list[str], out_dir: str) -> int:
	start = time.perf_counter()
	aggregator = corpus_freq.aggregate.Aggregator()

	failed = False
	for language in languages:
		try:
			corpus_freq.scan.scan_language(aggregator, root, language, log=_log)
		except OSError as exc:
			_log(f"corpus_freq: cannot read language '{language}': {exc}")
			failed = True

	_log(f"Finished in {time.perf_counter() - start:.1f} seconds")
	stats = aggregator.stats()
	_log(f"  Lines: {stats.lines}")
	_log(f"  Words: {stats.words}")
	_log(f"  Characters: {stats.characters}")

	errors = write_reports(out_dir, aggregator)
	if errors or failed:
		return 1
	return 0


#============================================


def _log(msg: str) -> None:
	print(msg, file=sys.stderr, flush=True)


#============================================


def write_reports(out_dir: str, aggregator: corpus_freq.aggregate.Aggregator) -> list[str]:
	"""
	Write every rendered report into out_dir.

	A failed write is logged and the remaining reports are still written.
	Returns the paths that could not be written.
	"""
	errors: list[str] = []
	try:
		os.makedirs(out_dir, exist_ok=True)
	except OSError as exc:
		_log(f"WRITE ERROR {out_dir}: {exc}")

	reports = aggregator.render_reports()
	for filename, content in reports.items():
		path = os.path.join(out_dir, filename)
		_log(f"Writing {len(content)} bytes to '{path}'")
		try:
			with open(path, "w", encoding="utf-8") as f:
				f.write(content)
		except OSError as exc:
			_log(f"WRITE ERROR {path}: {exc}")
			errors.append(path)
	return errors


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(
		prog="corpus_freq",
		description="Count characters, words, punctuation, pairs and triplets across a language corpus.",
	)
	parser.add_argument(
		"root",
		help="Corpus root holding one directory per language.",
	)
	parser.add_argument(
		"languages",
		nargs="+",
		help="Language directories under root to scan into one set of reports.",
	)
	parser.add_argument(
		"-o",
		"--out-dir",
		dest="out_dir",
		default="results",
		help="Directory to write the report files (default: results).",
	)
	return parser.parse_args(argv)


#============================================


if __name__ == "__main__":
	main()
