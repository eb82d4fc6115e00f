"""Parsing of CSL package declarations and aircraft reference documents.

Turns raw text into domain objects: the tokenizer and line source, the
per-package diagnostics throttle, the two command dispatchers (header scan and
full parse) and the readers for ICAO Doc 8643 and ``related.txt``.

Dependency rule: may import `cslmatch.domain` and `cslmatch.interfaces`.
"""
