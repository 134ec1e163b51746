# Standard Library
import os
import time
from typing import Callable

# Local modules
import corpus_freq.aggregate


#============================================


def list_projects(root: str, language: str) -> list[str]:
	"""
	Return project paths under root/language in directory listing order.

	Listing order is not sorted, so tie order in the ranked reports follows
	whatever the file system returns.
	"""
	language_dir = os.path.join(root, language)
	return [os.path.join(language_dir, name) for name in os.listdir(language_dir)]


def is_real_directory(path: str) -> bool:
	"""
	Return True for a directory that is not reached through a symlink.
	"""
	return os.path.isdir(path) and not os.path.islink(path)


def iter_project_files(project_dir: str, *, log: Callable[[str], None]):
	"""
	Yield file paths under a project, recursing into nested directories.

	Symlinked files are followed; symlinked directories are not. A directory
	that cannot be listed is logged and skipped.
	"""
	try:
		names = os.listdir(project_dir)
	except OSError as exc:
		log(f"  Skipping '{project_dir}': {exc}")
		return
	for name in names:
		path = os.path.join(project_dir, name)
		if os.path.isfile(path):
			yield path
		elif is_real_directory(path):
			yield from iter_project_files(path, log=log)
		else:
			log(f"  Ignoring '{path}': not a directory")


def read_text(path: str) -> str:
	with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
		return f.read()


#============================================


def scan_project(aggregator: corpus_freq.aggregate.Aggregator, project_dir: str, *, log: Callable[[str], None]) -> int:
	"""
	Feed every non-empty file of one project into the aggregator.

	Returns the number of files ingested. Unreadable files and directories
	are logged and skipped.
	"""
	if not is_real_directory(project_dir):
		log(f"  Ignoring '{project_dir}': not a directory")
		return 0

	start = time.perf_counter()
	ingested = 0
	for path in iter_project_files(project_dir, log=log):
		try:
			text = read_text(path)
		except OSError as exc:
			log(f"  Skipping '{path}': {exc}")
			continue
		if not text:
			continue
		aggregator.ingest_block(text)
		ingested += 1
	log(f"  Processed '{project_dir}' in {time.perf_counter() - start:.2f} seconds")
	return ingested


def scan_language(aggregator: corpus_freq.aggregate.Aggregator, root: str, language: str, *, log: Callable[[str], None]) -> int:
	log(f"Loading language '{language}'...")
	ingested = 0
	for project_dir in list_projects(root, language):
		ingested += scan_project(aggregator, project_dir, log=log)
	return ingested
