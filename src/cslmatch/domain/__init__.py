"""Domain layer for CSLMATCH.

Contains the data model of the package catalog: aircraft reference codes,
plane kinds, attachments, packages with their identity tables, and the error
taxonomy of the package parser. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `cslmatch.adapters` or `cslmatch.entrypoints`.
"""
