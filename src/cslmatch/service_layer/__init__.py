"""Service layer for CSLMATCH.

Implements the application use-cases: building a `Catalog` from a folder of
CSL packages and the two reference documents, and matching an aircraft query
against it. Calls the parser and domain objects and the outbound ports defined
in `cslmatch.interfaces`.

Dependency rule: may import `cslmatch.domain` and `cslmatch.parsing`, but not
`cslmatch.adapters` or `cslmatch.entrypoints`.
"""
