"""Interfaces (application boundary) for CSLMATCH.

Defines framework-free contracts for the collaborators the package parser and
the matching engine need from their host: directory enumeration and file
reading, and the host environment (simulator version, system path, debug
preferences). Rendering of a matched model stays out of this package.

Dependency rule: this package is independent: do not import from any
`cslmatch.*` modules. It may be imported by `cslmatch.parsing`,
`cslmatch.service_layer` and `cslmatch.adapters`.
"""
